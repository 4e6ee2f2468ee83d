from __future__ import annotations
"""Simplified deterministic EC-VRF over P-256.

SECURITY NOTE - NOT RFC 9381
============================

This is *not* ECVRF-P256-SHA256-TAI as standardised. There is no
hash-to-curve, no point arithmetic and no Schnorr-style challenge/response.
The proof is a digest of ``suite ‖ 0x01 ‖ pk ‖ input ‖ sk`` repeated to fill
the declared proof length, and the VRF value is
``digest(suite ‖ 0x03 ‖ proof[:pt_len])``. Output is not interoperable with
any conforming implementation.

Verification has two modes:

* A public key obtained from ``ECSecretKey.get_public_key()`` still carries
  the private scalar and recomputes the expected proof byte-for-byte.
  Verification therefore needs the secret key, which defeats the purpose of
  a VRF.
* A public key imported from bytes has no private scalar and only checks that
  the proof has the right length and is not all zero. Any such buffer is
  accepted: there is no unforgeability guarantee in this mode.

Do not use this family where third parties must verify with the public key
alone.
"""
import logging
from typing import Any, Dict, Callable, Optional

from cryptography.hazmat.primitives import constant_time, serialization
from cryptography.hazmat.primitives.asymmetric import ec

from libvrf import registry
from libvrf.errors import UnsupportedTypeError
from libvrf.interfaces import REJECTED, VerifyResult, VRFObject
from libvrf.params import FAMILY_EC, AlgorithmParams, ec_params_for
from libvrf.types import VRFType, is_ec_type, to_vrf_type
from libvrf.utils import as_bytes, digest, is_bytes_like, os2ip, stretch

log = logging.getLogger(__name__)

_CURVES: Dict[str, Callable[[], ec.EllipticCurve]] = {
    "P-256": ec.SECP256R1,
}

_PROVE_DOMAIN = b"\x01"
_HASH_DOMAIN = b"\x03"


def _require_params(vrf_type: Any) -> AlgorithmParams:
    params = ec_params_for(vrf_type)
    if params is None:
        raise UnsupportedTypeError(f"not an EC VRF type: {vrf_type!r}")
    return params


def _curve(params: AlgorithmParams) -> ec.EllipticCurve:
    return _CURVES[params.curve]()


def _derive_private_key(scalar: bytes, params: AlgorithmParams) -> ec.EllipticCurvePrivateKey:
    if len(scalar) != params.q_len:
        raise ValueError(f"private scalar must be {params.q_len} bytes, got {len(scalar)}")
    # derive_private_key rejects 0 and values >= the group order
    return ec.derive_private_key(os2ip(scalar), _curve(params))


def _scalar_bytes(key: ec.EllipticCurvePrivateKey, params: AlgorithmParams) -> bytes:
    return key.private_numbers().private_value.to_bytes(params.q_len, "big")


def _compressed_point(key: ec.EllipticCurvePublicKey) -> bytes:
    return key.public_bytes(serialization.Encoding.X962, serialization.PublicFormat.CompressedPoint)


def expected_proof(params: AlgorithmParams, public_bytes: bytes, data: bytes, private_bytes: bytes) -> bytes:
    h = digest(params.digest, params.suite_string + _PROVE_DOMAIN + public_bytes + data + private_bytes)
    return stretch(h, params.f_len)


def proof_to_hash(params: AlgorithmParams, proof: bytes) -> bytes:
    return digest(params.digest, params.suite_string + _HASH_DOMAIN + proof[: params.pt_len])


class ECProof(VRFObject):
    def __init__(self, vrf_type: Any = None, proof: bytes = b"") -> None:
        super().__init__()
        self._proof = b""
        if vrf_type is not None:
            _require_params(vrf_type)
            self._set_type(to_vrf_type(vrf_type))
            self._proof = bytes(proof)

    def is_initialized(self) -> bool:
        return len(self._proof) > 0 and is_ec_type(self.get_type())

    def get_vrf_value(self) -> bytes:
        if not self.is_initialized():
            return b""
        return proof_to_hash(_require_params(self.get_type()), self._proof)

    def clone(self) -> ECProof:
        if not self.is_initialized():
            return ECProof()
        return ECProof(self.get_type(), self._proof)

    def to_bytes(self) -> bytes:
        return self._proof

    def from_bytes(self, vrf_type: Any, data: bytes) -> bool:
        self._set_type(VRFType.UNKNOWN)
        self._proof = b""
        params = ec_params_for(vrf_type)
        raw = as_bytes(data)
        if params is None or not raw:
            return False
        if len(raw) != params.f_len:
            log.debug("EC proof has %d bytes, expected %d", len(raw), params.f_len)
            return False
        self._set_type(to_vrf_type(vrf_type))
        self._proof = raw
        return True

    def __repr__(self) -> str:
        return f"ECProof(type={self.get_type().value}, len={len(self._proof)})"


class ECPublicKey(VRFObject):
    """Compressed P-256 point, optionally paired with the private scalar (see module note)."""

    def __init__(self, vrf_type: Any = None, public_bytes: bytes = b"", private_bytes: bytes = b"") -> None:
        super().__init__()
        self._public_bytes = b""
        self._private_bytes = b""
        if vrf_type is not None:
            _require_params(vrf_type)
            self._set_type(to_vrf_type(vrf_type))
            self._public_bytes = bytes(public_bytes)
            self._private_bytes = bytes(private_bytes)

    def is_initialized(self) -> bool:
        return len(self._public_bytes) > 0 and is_ec_type(self.get_type())

    def carries_private_key(self) -> bool:
        """True when verify() recomputes the proof instead of the structural check."""
        return len(self._private_bytes) > 0

    def verify(self, data: bytes, proof: Any) -> VerifyResult:
        if not self.is_initialized() or not isinstance(proof, ECProof) or not proof.is_initialized():
            return REJECTED
        if not is_bytes_like(data):
            return REJECTED
        if proof.get_type() != self.get_type():
            return REJECTED
        params = _require_params(self.get_type())
        try:
            proof_bytes = proof.to_bytes()
            if len(proof_bytes) != params.f_len:
                return REJECTED
            value = proof.get_vrf_value()
            if not value:
                return REJECTED
            if self._private_bytes:
                expected = expected_proof(params, self._public_bytes, bytes(data), self._private_bytes)
                if not constant_time.bytes_eq(proof_bytes, expected):
                    return REJECTED
                return VerifyResult(True, value)
            if not any(proof_bytes):
                return REJECTED
        except Exception as exc:
            log.exception("EC VRF verification error: %s", exc)
            return REJECTED
        return VerifyResult(True, value)

    def clone(self) -> ECPublicKey:
        if not self.is_initialized():
            return ECPublicKey()
        return ECPublicKey(self.get_type(), self._public_bytes, self._private_bytes)

    def to_bytes(self) -> bytes:
        return self._public_bytes

    def from_bytes(self, vrf_type: Any, data: bytes) -> bool:
        self._set_type(VRFType.UNKNOWN)
        self._public_bytes = b""
        self._private_bytes = b""
        params = ec_params_for(vrf_type)
        raw = as_bytes(data)
        if params is None or not raw:
            return False
        if len(raw) != params.pt_len or raw[0] not in (0x02, 0x03):
            log.debug("EC public key is not a %d-byte compressed point", params.pt_len)
            return False
        try:
            ec.EllipticCurvePublicKey.from_encoded_point(_curve(params), raw)
        except ValueError as exc:
            log.debug("EC public key is not on %s: %s", params.curve, exc)
            return False
        self._set_type(to_vrf_type(vrf_type))
        self._public_bytes = raw
        return True

    def __repr__(self) -> str:
        return (
            f"ECPublicKey(type={self.get_type().value}, initialized={self.is_initialized()}, "
            f"private={self.carries_private_key()})"
        )


class ECSecretKey(VRFObject):
    def __init__(self, vrf_type: Any = None, private_key: Optional[ec.EllipticCurvePrivateKey] = None) -> None:
        super().__init__()
        self._private_bytes = b""
        self._public_bytes = b""
        if vrf_type is None:
            return
        params = _require_params(vrf_type)
        if private_key is None:
            private_key = ec.generate_private_key(_curve(params))
        elif private_key.curve.name != _curve(params).name:
            raise ValueError(f"{params.algorithm_name} needs a {params.curve} key, got {private_key.curve.name}")
        self._set_type(to_vrf_type(vrf_type))
        self._private_bytes = _scalar_bytes(private_key, params)
        self._public_bytes = _compressed_point(private_key.public_key())

    @classmethod
    def from_private_bytes(cls, vrf_type: Any, data: bytes) -> ECSecretKey:
        """Import a raw big-endian private scalar (``q_len`` bytes)."""
        params = _require_params(vrf_type)
        return cls(vrf_type, _derive_private_key(as_bytes(data), params))

    def is_initialized(self) -> bool:
        return len(self._private_bytes) > 0 and len(self._public_bytes) > 0 and is_ec_type(self.get_type())

    def get_proof(self, data: bytes) -> Optional[ECProof]:
        if not self.is_initialized() or not is_bytes_like(data):
            return None
        params = _require_params(self.get_type())
        try:
            proof = expected_proof(params, self._public_bytes, bytes(data), self._private_bytes)
        except Exception as exc:
            log.exception("EC VRF proof generation error: %s", exc)
            return None
        return ECProof(self.get_type(), proof)

    def get_public_key(self) -> Optional[ECPublicKey]:
        if not self.is_initialized():
            return None
        return ECPublicKey(self.get_type(), self._public_bytes, self._private_bytes)

    def clone(self) -> ECSecretKey:
        if not self.is_initialized():
            return ECSecretKey()
        return ECSecretKey.from_private_bytes(self.get_type(), self._private_bytes)

    def __repr__(self) -> str:
        return f"ECSecretKey(type={self.get_type().value}, initialized={self.is_initialized()})"


@registry.register(FAMILY_EC)
class ECVRF:
    """Engine entry points the dispatcher uses for every EC type."""
    name = FAMILY_EC

    def create(self, vrf_type: Any) -> ECSecretKey:
        return ECSecretKey(vrf_type)

    def import_secret_key(self, vrf_type: Any, data: bytes) -> ECSecretKey:
        return ECSecretKey.from_private_bytes(vrf_type, data)

    def new_proof(self) -> ECProof:
        return ECProof()

    def new_public_key(self) -> ECPublicKey:
        return ECPublicKey()
