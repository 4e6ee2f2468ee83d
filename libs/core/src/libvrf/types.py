from __future__ import annotations
"""VRF type tags and family predicates.

Every key and proof object is tagged with one of these names. The set is
closed: any string that is not one of the nine algorithm names resolves to
``VRFType.UNKNOWN``.
"""
from enum import Enum
from typing import Any, FrozenSet


class VRFType(str, Enum):
    RSA_FDH_VRF_RSA2048_SHA256 = "RSA_FDH_VRF_RSA2048_SHA256"
    RSA_FDH_VRF_RSA3072_SHA256 = "RSA_FDH_VRF_RSA3072_SHA256"
    RSA_FDH_VRF_RSA4096_SHA384 = "RSA_FDH_VRF_RSA4096_SHA384"
    RSA_FDH_VRF_RSA4096_SHA512 = "RSA_FDH_VRF_RSA4096_SHA512"
    RSA_PSS_NOSALT_VRF_RSA2048_SHA256 = "RSA_PSS_NOSALT_VRF_RSA2048_SHA256"
    RSA_PSS_NOSALT_VRF_RSA3072_SHA256 = "RSA_PSS_NOSALT_VRF_RSA3072_SHA256"
    RSA_PSS_NOSALT_VRF_RSA4096_SHA384 = "RSA_PSS_NOSALT_VRF_RSA4096_SHA384"
    RSA_PSS_NOSALT_VRF_RSA4096_SHA512 = "RSA_PSS_NOSALT_VRF_RSA4096_SHA512"
    EC_VRF_P256_SHA256_TAI = "EC_VRF_P256_SHA256_TAI"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def _missing_(cls, value: object) -> "VRFType":
        # Unrecognised names behave exactly like UNKNOWN.
        return cls.UNKNOWN

    def __str__(self) -> str:
        return self.value


_RSA_FDH_TYPES: FrozenSet[VRFType] = frozenset({
    VRFType.RSA_FDH_VRF_RSA2048_SHA256,
    VRFType.RSA_FDH_VRF_RSA3072_SHA256,
    VRFType.RSA_FDH_VRF_RSA4096_SHA384,
    VRFType.RSA_FDH_VRF_RSA4096_SHA512,
})

_RSA_PSS_TYPES: FrozenSet[VRFType] = frozenset({
    VRFType.RSA_PSS_NOSALT_VRF_RSA2048_SHA256,
    VRFType.RSA_PSS_NOSALT_VRF_RSA3072_SHA256,
    VRFType.RSA_PSS_NOSALT_VRF_RSA4096_SHA384,
    VRFType.RSA_PSS_NOSALT_VRF_RSA4096_SHA512,
})

_EC_TYPES: FrozenSet[VRFType] = frozenset({VRFType.EC_VRF_P256_SHA256_TAI})


def to_vrf_type(value: Any) -> VRFType:
    """Coerce a ``VRFType`` or its exact string name; anything else is UNKNOWN."""
    if isinstance(value, VRFType):
        return value
    if isinstance(value, str):
        return VRFType(value)
    return VRFType.UNKNOWN


def is_rsa_fdh_type(vrf_type: Any) -> bool:
    return to_vrf_type(vrf_type) in _RSA_FDH_TYPES


def is_rsa_pss_type(vrf_type: Any) -> bool:
    return to_vrf_type(vrf_type) in _RSA_PSS_TYPES


def is_rsa_type(vrf_type: Any) -> bool:
    t = to_vrf_type(vrf_type)
    return t in _RSA_FDH_TYPES or t in _RSA_PSS_TYPES


def is_ec_type(vrf_type: Any) -> bool:
    return to_vrf_type(vrf_type) in _EC_TYPES


def vrf_type_to_string(vrf_type: Any) -> str:
    return to_vrf_type(vrf_type).value
