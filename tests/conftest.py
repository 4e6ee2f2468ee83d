from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC_DIRS = (
    ROOT / "libs" / "core" / "src",
    ROOT / "libs" / "adapters" / "rsa" / "src",
    ROOT / "libs" / "adapters" / "ec" / "src",
    ROOT / "apps" / "cli" / "src",
)

for candidate in SRC_DIRS:
    candidate_str = str(candidate)
    if candidate_str not in sys.path:
        sys.path.insert(0, candidate_str)

from libvrf import VRF, VRFType  # noqa: E402


@pytest.fixture(scope="module")
def fdh_key():
    sk = VRF.create(VRFType.RSA_FDH_VRF_RSA2048_SHA256)
    assert sk is not None
    return sk


@pytest.fixture(scope="module")
def pss_key():
    sk = VRF.create(VRFType.RSA_PSS_NOSALT_VRF_RSA2048_SHA256)
    assert sk is not None
    return sk


@pytest.fixture(scope="module")
def ec_key():
    sk = VRF.create(VRFType.EC_VRF_P256_SHA256_TAI)
    assert sk is not None
    return sk
