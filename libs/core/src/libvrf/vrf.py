from __future__ import annotations
"""Type-based dispatch to the registered engines.

Every entry point accepts a ``VRFType`` or its string name and reports
failure as ``None``; no exception escapes to the caller.
"""
import importlib
import logging
from typing import Any, Optional

from .params import params_for
from .registry import registry
from .types import VRFType, to_vrf_type
from .utils import as_bytes
from .interfaces import Proof, PublicKey, SecretKey

log = logging.getLogger(__name__)

_ENGINE_MODULES = ("libvrf_rsa", "libvrf_ec")
_engines_loaded = False


def _load_engines() -> None:
    """Import the engine packages once so they register themselves."""
    global _engines_loaded
    if _engines_loaded:
        return
    for mod in _ENGINE_MODULES:
        try:
            importlib.import_module(mod)
        except ImportError as exc:
            log.warning("VRF engine %s unavailable: %s", mod, exc)
    _engines_loaded = True


def _engine_for(vrf_type: Any) -> Optional[Any]:
    params = params_for(vrf_type)
    if params is None:
        return None
    _load_engines()
    engine_cls = registry.find(params.family)
    if engine_cls is None:
        log.warning("no engine registered for family %r", params.family)
        return None
    return engine_cls()


class VRF:
    """Static factory: key generation and deserialisation of public objects."""

    @staticmethod
    def create(vrf_type: Any) -> Optional[SecretKey]:
        engine = _engine_for(vrf_type)
        if engine is None:
            return None
        try:
            sk = engine.create(to_vrf_type(vrf_type))
        except Exception as exc:
            log.exception("key generation failed for %s: %s", vrf_type, exc)
            return None
        return sk if sk.is_initialized() else None

    @staticmethod
    def secret_key_from_bytes(vrf_type: Any, data: bytes) -> Optional[SecretKey]:
        """Import a secret key: PKCS#8 DER for RSA, a raw scalar for EC."""
        raw = as_bytes(data)
        if not raw:
            return None
        engine = _engine_for(vrf_type)
        if engine is None:
            return None
        try:
            sk = engine.import_secret_key(to_vrf_type(vrf_type), raw)
        except Exception as exc:
            log.debug("secret key import failed for %s: %s", vrf_type, exc)
            return None
        return sk if sk.is_initialized() else None

    @staticmethod
    def proof_from_bytes(vrf_type: Any, data: bytes) -> Optional[Proof]:
        t = to_vrf_type(vrf_type)
        raw = as_bytes(data)
        if t is VRFType.UNKNOWN or not raw:
            return None
        engine = _engine_for(t)
        if engine is None:
            return None
        proof = engine.new_proof()
        if not proof.from_bytes(t, raw) or not proof.is_initialized():
            return None
        return proof

    @staticmethod
    def public_key_from_bytes(vrf_type: Any, data: bytes) -> Optional[PublicKey]:
        t = to_vrf_type(vrf_type)
        raw = as_bytes(data)
        if t is VRFType.UNKNOWN or not raw:
            return None
        engine = _engine_for(t)
        if engine is None:
            return None
        pk = engine.new_public_key()
        if not pk.from_bytes(t, raw) or not pk.is_initialized():
            return None
        return pk
