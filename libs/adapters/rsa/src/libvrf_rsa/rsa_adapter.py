from __future__ import annotations
"""RSA-FDH-VRF and RSA-PSS-NOSALT-VRF on top of ``cryptography`` RSA keys.

``cryptography`` generates keys and handles the DER encodings; the VRF
arithmetic itself (full-domain hash, PSS encoding with an empty salt, and the
modular exponentiations) is done here with plain integers so that proofs are
reproducible byte-for-byte.

Both variants define the VRF value as ``digest(proof)``.
"""
import logging
from typing import Any, Optional

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import constant_time, serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from libvrf import registry
from libvrf.errors import EncodingError, UnsupportedTypeError
from libvrf.interfaces import REJECTED, VerifyResult, VRFObject
from libvrf.params import FAMILY_RSA, AlgorithmParams, rsa_params_for
from libvrf.types import VRFType, is_rsa_type, to_vrf_type
from libvrf.utils import as_bytes, digest, i2osp, is_bytes_like, mgf1, mod_pow, os2ip, xor_bytes

log = logging.getLogger(__name__)


def _require_params(vrf_type: Any) -> AlgorithmParams:
    params = rsa_params_for(vrf_type)
    if params is None:
        raise UnsupportedTypeError(f"not an RSA VRF type: {vrf_type!r}")
    return params


def _gen_rsa_key(params: AlgorithmParams) -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=params.public_exponent, key_size=params.bits)


def _load_private_key(sk_bytes: bytes) -> rsa.RSAPrivateKey:
    key = serialization.load_der_private_key(sk_bytes, password=None)
    if not isinstance(key, rsa.RSAPrivateKey):
        raise ValueError("DER private key is not an RSA key")
    return key


def _load_public_key(pk_bytes: bytes) -> rsa.RSAPublicKey:
    key = serialization.load_der_public_key(pk_bytes)
    if not isinstance(key, rsa.RSAPublicKey):
        raise ValueError("DER public key is not an RSA key")
    return key


def _private_der(key: rsa.RSAPrivateKey) -> bytes:
    return key.private_bytes(
        serialization.Encoding.DER,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    )


def _public_der(key: rsa.RSAPublicKey) -> bytes:
    return key.public_bytes(
        serialization.Encoding.DER,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    )


def mgf1_salt(params: AlgorithmParams) -> bytes:
    return digest(params.digest, params.suite_string)


def _top_bits_mask(em_bits: int, em_len: int) -> int:
    return 0xFF >> (8 * em_len - em_bits)


def hash_to_full_domain(data: bytes, params: AlgorithmParams, salt: bytes) -> bytes:
    """Stretch ``digest(suite ‖ data)`` to the modulus length with the salted MGF1.

    The leading bit is cleared so the result, read as an integer, is always
    below a ``bits``-bit modulus and every input can be proven. Proofs for
    inputs whose unmasked output has that bit set therefore differ from an
    encoder that uses the salted MGF1 output unchanged.
    """
    seed = digest(params.digest, params.suite_string + data)
    em_len = params.modulus_len
    out = bytearray(mgf1(seed, em_len, params.digest, salt=salt))
    out[0] &= _top_bits_mask(params.bits - 1, em_len)
    return bytes(out)


def pss_encode(m_hash: bytes, em_bits: int, digest_name: str) -> bytes:
    """EMSA-PSS-ENCODE (RFC 8017 §9.1.1) with a zero-length salt."""
    h_len = len(m_hash)
    em_len = (em_bits + 7) // 8
    if em_len < h_len + 2:
        raise EncodingError("encoding error: modulus too short for digest")
    h = digest(digest_name, b"\x00" * 8 + m_hash)
    db = b"\x00" * (em_len - h_len - 2) + b"\x01"
    masked_db = bytearray(xor_bytes(db, mgf1(h, em_len - h_len - 1, digest_name)))
    masked_db[0] &= _top_bits_mask(em_bits, em_len)
    return bytes(masked_db) + h + b"\xbc"


def pss_verify(m_hash: bytes, em: bytes, em_bits: int, digest_name: str) -> bool:
    """EMSA-PSS-VERIFY with a zero-length salt: DB must be 00…00 ‖ 01 exactly."""
    h_len = len(m_hash)
    em_len = (em_bits + 7) // 8
    if len(em) != em_len or em_len < h_len + 2:
        return False
    if em[-1] != 0xBC:
        return False
    masked_db = em[: em_len - h_len - 1]
    h = em[em_len - h_len - 1 : -1]
    top = _top_bits_mask(em_bits, em_len)
    if masked_db[0] & ~top & 0xFF:
        return False
    db = bytearray(xor_bytes(masked_db, mgf1(h, len(masked_db), digest_name)))
    db[0] &= top
    if any(db[:-1]) or db[-1] != 0x01:
        return False
    return constant_time.bytes_eq(h, digest(digest_name, b"\x00" * 8 + m_hash))


def _encode_message(data: bytes, params: AlgorithmParams, salt: bytes) -> bytes:
    """The modulus-length message representative that gets raised to ``d``."""
    if params.padding == "fdh":
        return hash_to_full_domain(data, params, salt)
    m_hash = digest(params.digest, params.suite_string + data)
    return pss_encode(m_hash, params.bits - 1, params.digest)


class RSAProof(VRFObject):
    """``bits/8``-byte RSA proof; the VRF value is ``digest(proof)``."""

    def __init__(self, vrf_type: Any = None, proof: bytes = b"") -> None:
        super().__init__()
        self._proof = b""
        if vrf_type is not None:
            _require_params(vrf_type)
            self._set_type(to_vrf_type(vrf_type))
            self._proof = bytes(proof)

    def is_initialized(self) -> bool:
        return len(self._proof) > 0 and is_rsa_type(self.get_type())

    def get_vrf_value(self) -> bytes:
        if not self.is_initialized():
            return b""
        params = _require_params(self.get_type())
        return digest(params.digest, self._proof)

    def clone(self) -> RSAProof:
        if not self.is_initialized():
            return RSAProof()
        return RSAProof(self.get_type(), self._proof)

    def to_bytes(self) -> bytes:
        return self._proof

    def from_bytes(self, vrf_type: Any, data: bytes) -> bool:
        self._set_type(VRFType.UNKNOWN)
        self._proof = b""
        params = rsa_params_for(vrf_type)
        raw = as_bytes(data)
        if params is None or not raw:
            return False
        if len(raw) != params.proof_len:
            log.debug("RSA proof has %d bytes, expected %d", len(raw), params.proof_len)
            return False
        self._set_type(to_vrf_type(vrf_type))
        self._proof = raw
        return True

    def __repr__(self) -> str:
        return f"RSAProof(type={self.get_type().value}, len={len(self._proof)})"


class RSAPublicKey(VRFObject):
    """RSA public key plus the suite-derived salt used by the full-domain hash."""

    def __init__(
        self,
        vrf_type: Any = None,
        public_key: Optional[rsa.RSAPublicKey] = None,
        salt: bytes = b"",
    ) -> None:
        super().__init__()
        self._key: Optional[rsa.RSAPublicKey] = None
        self._mgf1_salt = b""
        if vrf_type is not None:
            params = _require_params(vrf_type)
            self._set_type(to_vrf_type(vrf_type))
            self._key = public_key
            self._mgf1_salt = bytes(salt) if salt else mgf1_salt(params)

    def is_initialized(self) -> bool:
        return self._key is not None and len(self._mgf1_salt) > 0 and is_rsa_type(self.get_type())

    def verify(self, data: bytes, proof: Any) -> VerifyResult:
        if not self.is_initialized() or not isinstance(proof, RSAProof) or not proof.is_initialized():
            return REJECTED
        if not is_bytes_like(data):
            return REJECTED
        if proof.get_type() != self.get_type():
            return REJECTED
        params = _require_params(self.get_type())
        try:
            proof_bytes = proof.to_bytes()
            if len(proof_bytes) != params.modulus_len:
                return REJECTED
            numbers = self._key.public_numbers()
            s = os2ip(proof_bytes)
            if s >= numbers.n:
                return REJECTED
            em = i2osp(mod_pow(s, numbers.e, numbers.n), params.modulus_len)
            message = bytes(data)
            if params.padding == "fdh":
                valid = constant_time.bytes_eq(em, hash_to_full_domain(message, params, self._mgf1_salt))
            else:
                m_hash = digest(params.digest, params.suite_string + message)
                valid = pss_verify(m_hash, em, params.bits - 1, params.digest)
        except Exception as exc:
            log.exception("RSA VRF verification error: %s", exc)
            return REJECTED
        if not valid:
            return REJECTED
        return VerifyResult(True, proof.get_vrf_value())

    def clone(self) -> RSAPublicKey:
        if not self.is_initialized():
            return RSAPublicKey()
        copy = _load_public_key(_public_der(self._key))
        return RSAPublicKey(self.get_type(), copy, self._mgf1_salt)

    def to_bytes(self) -> bytes:
        if self._key is None:
            return b""
        return _public_der(self._key)

    def from_bytes(self, vrf_type: Any, data: bytes) -> bool:
        self._set_type(VRFType.UNKNOWN)
        self._key = None
        self._mgf1_salt = b""
        params = rsa_params_for(vrf_type)
        raw = as_bytes(data)
        if params is None or not raw:
            return False
        try:
            key = _load_public_key(raw)
        except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
            log.debug("Failed to import RSA public key: %s", exc)
            return False
        if key.key_size != params.bits:
            log.debug("RSA public key has %d bits, %s needs %d", key.key_size, params.algorithm_name, params.bits)
            return False
        self._set_type(to_vrf_type(vrf_type))
        self._key = key
        self._mgf1_salt = mgf1_salt(params)
        return True

    def __repr__(self) -> str:
        return f"RSAPublicKey(type={self.get_type().value}, initialized={self.is_initialized()})"


class RSASecretKey(VRFObject):
    """RSA private key for one VRF type; generates a fresh key when none is given."""

    def __init__(self, vrf_type: Any = None, private_key: Optional[rsa.RSAPrivateKey] = None) -> None:
        super().__init__()
        self._key: Optional[rsa.RSAPrivateKey] = None
        self._mgf1_salt = b""
        if vrf_type is None:
            return
        params = _require_params(vrf_type)
        if private_key is None:
            private_key = _gen_rsa_key(params)
        elif private_key.key_size != params.bits:
            raise ValueError(
                f"{params.algorithm_name} needs a {params.bits}-bit modulus, got {private_key.key_size}"
            )
        self._set_type(to_vrf_type(vrf_type))
        self._key = private_key
        self._mgf1_salt = mgf1_salt(params)

    @classmethod
    def from_private_bytes(cls, vrf_type: Any, data: bytes) -> RSASecretKey:
        """Import a PKCS#8 DER private key for ``vrf_type``."""
        _require_params(vrf_type)
        raw = as_bytes(data)
        if not raw:
            raise ValueError("empty private key")
        return cls(vrf_type, _load_private_key(raw))

    def is_initialized(self) -> bool:
        return self._key is not None and len(self._mgf1_salt) > 0 and is_rsa_type(self.get_type())

    def get_proof(self, data: bytes) -> Optional[RSAProof]:
        if not self.is_initialized() or not is_bytes_like(data):
            return None
        params = _require_params(self.get_type())
        try:
            numbers = self._key.private_numbers()
            n = numbers.public_numbers.n
            m = os2ip(_encode_message(bytes(data), params, self._mgf1_salt))
            proof = i2osp(mod_pow(m, numbers.d, n), params.modulus_len)
        except Exception as exc:
            log.exception("RSA VRF proof generation error: %s", exc)
            return None
        return RSAProof(self.get_type(), proof)

    def get_public_key(self) -> Optional[RSAPublicKey]:
        if not self.is_initialized():
            return None
        return RSAPublicKey(self.get_type(), self._key.public_key(), self._mgf1_salt)

    def clone(self) -> RSASecretKey:
        if not self.is_initialized():
            return RSASecretKey()
        return RSASecretKey(self.get_type(), _load_private_key(_private_der(self._key)))

    def __repr__(self) -> str:
        return f"RSASecretKey(type={self.get_type().value}, initialized={self.is_initialized()})"


@registry.register(FAMILY_RSA)
class RSAVRF:
    """Engine entry points the dispatcher uses for every RSA type."""
    name = FAMILY_RSA

    def create(self, vrf_type: Any) -> RSASecretKey:
        return RSASecretKey(vrf_type)

    def import_secret_key(self, vrf_type: Any, data: bytes) -> RSASecretKey:
        return RSASecretKey.from_private_bytes(vrf_type, data)

    def new_proof(self) -> RSAProof:
        return RSAProof()

    def new_public_key(self) -> RSAPublicKey:
        return RSAPublicKey()
