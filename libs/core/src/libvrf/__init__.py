from .types import (
    VRFType,
    to_vrf_type,
    is_rsa_fdh_type,
    is_rsa_pss_type,
    is_rsa_type,
    is_ec_type,
    vrf_type_to_string,
)
from .errors import VRFError, EncodingError, UnsupportedTypeError
from .registry import registry
from .params import AlgorithmParams, params_for, rsa_params_for, ec_params_for, supported_types
from .interfaces import VerifyResult, REJECTED, Proof, PublicKey, SecretKey, Clonable, Serializable
from .vrf import VRF

__all__ = [
    "VRFType",
    "to_vrf_type",
    "is_rsa_fdh_type",
    "is_rsa_pss_type",
    "is_rsa_type",
    "is_ec_type",
    "vrf_type_to_string",
    "VRFError",
    "EncodingError",
    "UnsupportedTypeError",
    "registry",
    "AlgorithmParams",
    "params_for",
    "rsa_params_for",
    "ec_params_for",
    "supported_types",
    "VerifyResult",
    "REJECTED",
    "Proof",
    "PublicKey",
    "SecretKey",
    "Clonable",
    "Serializable",
    "VRF",
]
