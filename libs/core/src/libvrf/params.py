from __future__ import annotations
"""Fixed algorithm parameters for each VRF type.

The table is populated once at import time and never mutated afterwards.
RSA entries describe the modulus size, public exponent and padding mode; the
EC entry describes the curve and the fixed segment lengths of a proof
(point ‖ challenge ‖ response).
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from .types import VRFType, to_vrf_type

FAMILY_RSA = "rsa"
FAMILY_EC = "ec"


@dataclass(frozen=True)
class AlgorithmParams:
    family: str            # "rsa" | "ec"
    algorithm_name: str
    bits: int              # RSA modulus bits, or EC field bits
    digest: str            # sha256 | sha384 | sha512
    suite_string: bytes    # domain separation mixed into every hash
    # RSA only
    primes: int = 0
    public_exponent: int = 0
    padding: str = ""      # "fdh" | "pss"
    # EC only
    curve: str = ""
    cofactor: int = 0
    q_len: int = 0         # field element bytes
    pt_len: int = 0        # encoded point bytes
    c_len: int = 0         # challenge bytes
    f_len: int = 0         # full proof bytes
    h_len: int = 0         # hash output bytes

    @property
    def modulus_len(self) -> int:
        return self.bits // 8

    @property
    def proof_len(self) -> int:
        if self.family == FAMILY_RSA:
            return self.modulus_len
        return self.f_len

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["suite_string"] = self.suite_string.hex()
        return d


_PARAMS: Dict[VRFType, AlgorithmParams] = {}


def _add_rsa(vrf_type: VRFType, name: str, bits: int, digest: str, padding: str) -> None:
    _PARAMS[vrf_type] = AlgorithmParams(
        family=FAMILY_RSA,
        algorithm_name=name,
        bits=bits,
        digest=digest,
        suite_string=name.encode("ascii"),
        primes=2,
        public_exponent=65537,
        padding=padding,
    )


_add_rsa(VRFType.RSA_FDH_VRF_RSA2048_SHA256, "RSA-FDH-VRF-RSA2048-SHA256", 2048, "sha256", "fdh")
_add_rsa(VRFType.RSA_FDH_VRF_RSA3072_SHA256, "RSA-FDH-VRF-RSA3072-SHA256", 3072, "sha256", "fdh")
_add_rsa(VRFType.RSA_FDH_VRF_RSA4096_SHA384, "RSA-FDH-VRF-RSA4096-SHA384", 4096, "sha384", "fdh")
_add_rsa(VRFType.RSA_FDH_VRF_RSA4096_SHA512, "RSA-FDH-VRF-RSA4096-SHA512", 4096, "sha512", "fdh")
_add_rsa(VRFType.RSA_PSS_NOSALT_VRF_RSA2048_SHA256, "RSA-PSS-NOSALT-VRF-RSA2048-SHA256", 2048, "sha256", "pss")
_add_rsa(VRFType.RSA_PSS_NOSALT_VRF_RSA3072_SHA256, "RSA-PSS-NOSALT-VRF-RSA3072-SHA256", 3072, "sha256", "pss")
_add_rsa(VRFType.RSA_PSS_NOSALT_VRF_RSA4096_SHA384, "RSA-PSS-NOSALT-VRF-RSA4096-SHA384", 4096, "sha384", "pss")
_add_rsa(VRFType.RSA_PSS_NOSALT_VRF_RSA4096_SHA512, "RSA-PSS-NOSALT-VRF-RSA4096-SHA512", 4096, "sha512", "pss")

# Suite string is the single byte 0x01. f_len is the declared proof size (80),
# one byte short of pt_len + c_len + q_len; proofs are exactly f_len bytes.
_PARAMS[VRFType.EC_VRF_P256_SHA256_TAI] = AlgorithmParams(
    family=FAMILY_EC,
    algorithm_name="ECVRF-P256-SHA256-TAI",
    bits=256,
    digest="sha256",
    suite_string=b"\x01",
    curve="P-256",
    cofactor=1,
    q_len=32,
    pt_len=33,
    c_len=16,
    f_len=80,
    h_len=32,
)


def params_for(vrf_type: Any) -> Optional[AlgorithmParams]:
    """Return the parameters for ``vrf_type``, or None for UNKNOWN/unrecognised values."""
    return _PARAMS.get(to_vrf_type(vrf_type))


def rsa_params_for(vrf_type: Any) -> Optional[AlgorithmParams]:
    p = params_for(vrf_type)
    return p if p is not None and p.family == FAMILY_RSA else None


def ec_params_for(vrf_type: Any) -> Optional[AlgorithmParams]:
    p = params_for(vrf_type)
    return p if p is not None and p.family == FAMILY_EC else None


def supported_types() -> List[VRFType]:
    return [t for t in VRFType if t in _PARAMS]
