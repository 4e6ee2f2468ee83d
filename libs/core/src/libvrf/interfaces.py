from __future__ import annotations
"""Capability contracts implemented by every engine.

Engines provide concrete Proof/PublicKey/SecretKey classes that satisfy these
Protocols. The dispatcher, the async adaptor and the CLI interact only with
these interfaces, never with an engine's internals.
"""
from typing import NamedTuple, Optional, Protocol, runtime_checkable

from .types import VRFType


class VerifyResult(NamedTuple):
    """Outcome of ``PublicKey.verify``; unpacks as ``(ok, value)``."""
    ok: bool
    value: bytes

    def __bool__(self) -> bool:
        return self.ok


REJECTED = VerifyResult(False, b"")


class VRFObject:
    """Holds the type tag shared by all key and proof objects."""

    def __init__(self) -> None:
        self._type: VRFType = VRFType.UNKNOWN

    def get_type(self) -> VRFType:
        return self._type

    def _set_type(self, vrf_type: VRFType) -> None:
        self._type = vrf_type


@runtime_checkable
class Clonable(Protocol):
    def clone(self) -> "Clonable": ...


@runtime_checkable
class Serializable(Protocol):
    def to_bytes(self) -> bytes: ...
    def from_bytes(self, vrf_type: VRFType, data: bytes) -> bool: ...


@runtime_checkable
class Proof(Protocol):
    """A fixed-length proof tagged with its VRF type."""
    def is_initialized(self) -> bool: ...
    def get_type(self) -> VRFType: ...
    def get_vrf_value(self) -> bytes: ...
    def clone(self) -> "Proof": ...
    def to_bytes(self) -> bytes: ...
    def from_bytes(self, vrf_type: VRFType, data: bytes) -> bool: ...


@runtime_checkable
class PublicKey(Protocol):
    """Verifies proofs. ``verify`` returns ``(False, b"")`` on any rejection and never raises."""
    def is_initialized(self) -> bool: ...
    def get_type(self) -> VRFType: ...
    def verify(self, data: bytes, proof: Proof) -> VerifyResult: ...
    def clone(self) -> "PublicKey": ...
    def to_bytes(self) -> bytes: ...
    def from_bytes(self, vrf_type: VRFType, data: bytes) -> bool: ...


@runtime_checkable
class SecretKey(Protocol):
    """Produces proofs. Never serialised; only its public key is."""
    def is_initialized(self) -> bool: ...
    def get_type(self) -> VRFType: ...
    def get_proof(self, data: bytes) -> Optional[Proof]: ...
    def get_public_key(self) -> Optional[PublicKey]: ...
    def clone(self) -> "SecretKey": ...
