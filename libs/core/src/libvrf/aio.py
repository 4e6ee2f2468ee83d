from __future__ import annotations
"""asyncio wrappers around the synchronous API.

Each coroutine runs the matching call in a worker thread; inputs, outputs and
failure behaviour are the same as the blocking version.
"""
import asyncio
from typing import Any, Optional

from .interfaces import Proof, PublicKey, SecretKey, VerifyResult
from .vrf import VRF


async def create_async(vrf_type: Any) -> Optional[SecretKey]:
    return await asyncio.to_thread(VRF.create, vrf_type)


async def get_proof_async(sk: SecretKey, data: bytes) -> Optional[Proof]:
    return await asyncio.to_thread(sk.get_proof, data)


async def get_public_key_async(sk: SecretKey) -> Optional[PublicKey]:
    return await asyncio.to_thread(sk.get_public_key)


async def verify_async(pk: PublicKey, data: bytes, proof: Proof) -> VerifyResult:
    return await asyncio.to_thread(pk.verify, data, proof)


async def proof_from_bytes_async(vrf_type: Any, data: bytes) -> Optional[Proof]:
    return await asyncio.to_thread(VRF.proof_from_bytes, vrf_type, data)


async def public_key_from_bytes_async(vrf_type: Any, data: bytes) -> Optional[PublicKey]:
    return await asyncio.to_thread(VRF.public_key_from_bytes, vrf_type, data)
