from __future__ import annotations

import pytest

from libvrf import (
    VRFType,
    ec_params_for,
    is_ec_type,
    is_rsa_fdh_type,
    is_rsa_pss_type,
    is_rsa_type,
    params_for,
    rsa_params_for,
    supported_types,
    to_vrf_type,
    vrf_type_to_string,
)


def test_nine_supported_types():
    types = supported_types()
    assert len(types) == 9
    assert VRFType.UNKNOWN not in types


def test_rsa_and_ec_partition_supported_types():
    for t in supported_types():
        assert is_rsa_type(t) != is_ec_type(t)
        if is_rsa_type(t):
            assert is_rsa_fdh_type(t) != is_rsa_pss_type(t)
    assert not is_rsa_type(VRFType.UNKNOWN)
    assert not is_ec_type(VRFType.UNKNOWN)


def test_string_names_resolve():
    assert to_vrf_type("EC_VRF_P256_SHA256_TAI") is VRFType.EC_VRF_P256_SHA256_TAI
    assert to_vrf_type(" RSA_FDH_VRF_RSA2048_SHA256 ") is VRFType.UNKNOWN
    assert to_vrf_type(" EC_VRF_P256_SHA256_TAI\n") is VRFType.UNKNOWN
    assert to_vrf_type("nonsense") is VRFType.UNKNOWN
    assert to_vrf_type(None) is VRFType.UNKNOWN
    assert to_vrf_type(7) is VRFType.UNKNOWN
    assert VRFType("whatever") is VRFType.UNKNOWN
    assert vrf_type_to_string(VRFType.RSA_PSS_NOSALT_VRF_RSA3072_SHA256) == "RSA_PSS_NOSALT_VRF_RSA3072_SHA256"
    assert vrf_type_to_string("bogus") == "UNKNOWN"


@pytest.mark.parametrize(
    "vrf_type, bits, digest",
    [
        (VRFType.RSA_FDH_VRF_RSA2048_SHA256, 2048, "sha256"),
        (VRFType.RSA_FDH_VRF_RSA3072_SHA256, 3072, "sha256"),
        (VRFType.RSA_FDH_VRF_RSA4096_SHA384, 4096, "sha384"),
        (VRFType.RSA_PSS_NOSALT_VRF_RSA4096_SHA512, 4096, "sha512"),
    ],
)
def test_rsa_params(vrf_type, bits, digest):
    p = rsa_params_for(vrf_type)
    assert p is not None
    assert p.bits == bits
    assert p.digest == digest
    assert p.public_exponent == 65537
    assert p.primes == 2
    assert p.proof_len == bits // 8
    assert ec_params_for(vrf_type) is None


def test_rsa_suite_string_is_algorithm_name():
    p = params_for(VRFType.RSA_PSS_NOSALT_VRF_RSA2048_SHA256)
    assert p.algorithm_name == "RSA-PSS-NOSALT-VRF-RSA2048-SHA256"
    assert p.suite_string == b"RSA-PSS-NOSALT-VRF-RSA2048-SHA256"
    assert p.padding == "pss"


def test_ec_params():
    p = ec_params_for("EC_VRF_P256_SHA256_TAI")
    assert p is not None
    assert p.suite_string == b"\x01"
    assert (p.q_len, p.pt_len, p.c_len, p.f_len, p.h_len) == (32, 33, 16, 80, 32)
    assert p.cofactor == 1
    assert p.proof_len == 80
    assert rsa_params_for(VRFType.EC_VRF_P256_SHA256_TAI) is None
    assert p.to_dict()["suite_string"] == "01"


def test_unknown_has_no_params():
    assert params_for(VRFType.UNKNOWN) is None
    assert params_for("not-a-type") is None
