from __future__ import annotations
"""Byte/integer primitives shared by the engines.

Digests go through ``cryptography``'s hash API. Integer arithmetic uses
Python's arbitrary-precision ``int``.
"""
from typing import Any, Callable, Dict

from cryptography.hazmat.primitives import hashes

from .errors import EncodingError

_DIGESTS: Dict[str, Callable[[], hashes.HashAlgorithm]] = {
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
}


def hash_algorithm(name: str) -> hashes.HashAlgorithm:
    try:
        return _DIGESTS[name.lower()]()
    except KeyError as exc:
        raise ValueError(f"Unsupported digest: {name}") from exc


def digest(name: str, data: bytes) -> bytes:
    h = hashes.Hash(hash_algorithm(name))
    h.update(data)
    return h.finalize()


def digest_size(name: str) -> int:
    return hash_algorithm(name).digest_size


_BYTES_LIKE = (bytes, bytearray, memoryview)


def is_bytes_like(data: Any) -> bool:
    return isinstance(data, _BYTES_LIKE)


def as_bytes(data: Any) -> bytes:
    """Copy a bytes-like value; anything else (None, str, ...) becomes b""."""
    if is_bytes_like(data):
        return bytes(data)
    return b""


def i2osp(x: int, length: int) -> bytes:
    """Integer-to-Octet-String (RFC 8017 §4.1), big-endian, exactly ``length`` bytes."""
    if x < 0 or x >= 256 ** length:
        raise EncodingError("integer too large")
    return x.to_bytes(length, "big")


def os2ip(data: bytes) -> int:
    return int.from_bytes(data, "big")


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Right-to-left binary square-and-multiply: (base ** exponent) % modulus.

    Runs in time that depends on the exponent's bit pattern, so it is not
    safe against timing side channels.
    """
    if modulus == 1:
        return 0
    result = 1
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        exponent >>= 1
        base = (base * base) % modulus
    return result


def xor_bytes(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def mgf1(seed: bytes, mask_len: int, digest_name: str, salt: bytes = b"") -> bytes:
    """MGF1 (RFC 8017 B.2.1): T = H(seed ‖ salt ‖ C0) ‖ H(seed ‖ salt ‖ C1) ‖ …

    With an empty ``salt`` this is the standard MGF1. A non-empty salt is
    inserted between the seed and the 4-byte counter.
    """
    h_len = digest_size(digest_name)
    if mask_len > 0xFFFFFFFF * h_len:
        raise EncodingError("mask too long")
    out = bytearray()
    counter = 0
    while len(out) < mask_len:
        out += digest(digest_name, seed + salt + i2osp(counter, 4))
        counter += 1
    return bytes(out[:mask_len])


def stretch(block: bytes, length: int) -> bytes:
    """Repeat ``block`` and truncate to ``length`` bytes."""
    if not block:
        raise EncodingError("cannot stretch an empty block")
    reps = -(-length // len(block))
    return (block * reps)[:length]
