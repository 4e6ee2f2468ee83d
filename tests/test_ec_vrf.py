from __future__ import annotations

import hashlib

import pytest

from libvrf import VRF, VRFType
from libvrf_ec import ECProof, ECPublicKey, ECSecretKey

EC = VRFType.EC_VRF_P256_SHA256_TAI
# Compressed encoding of the P-256 base point, i.e. the public key for scalar 1.
P256_GENERATOR = bytes.fromhex("036b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296")


def test_proof_shape_and_value(ec_key):
    proof = ec_key.get_proof(b"input")
    raw = proof.to_bytes()
    assert len(raw) == 80
    assert raw[:32] == raw[32:64]
    assert proof.get_vrf_value() == hashlib.sha256(b"\x01\x03" + raw[:33]).digest()


def test_proof_recomputes_from_scalar():
    sk = ECSecretKey.from_private_bytes(EC, (1).to_bytes(32, "big"))
    assert sk.get_public_key().to_bytes() == P256_GENERATOR
    block = hashlib.sha256(b"\x01\x01" + P256_GENERATOR + b"abc" + (1).to_bytes(32, "big")).digest()
    assert sk.get_proof(b"abc").to_bytes() == (block * 3)[:80]


def test_full_verification_with_derived_public_key(ec_key):
    pk = ec_key.get_public_key()
    assert pk.carries_private_key()
    proof = ec_key.get_proof(b"m")
    ok, value = pk.verify(b"m", proof)
    assert ok
    assert value == proof.get_vrf_value()
    assert ec_key.get_proof(b"m").to_bytes() == proof.to_bytes()

    raw = bytearray(proof.to_bytes())
    raw[10] ^= 0x80
    assert pk.verify(b"m", ECProof(EC, bytes(raw))) == (False, b"")
    assert pk.verify(b"n", proof) == (False, b"")


def test_imported_public_key_only_checks_structure(ec_key):
    pk = VRF.public_key_from_bytes(EC, ec_key.get_public_key().to_bytes())
    assert pk is not None
    assert not pk.carries_private_key()
    assert pk.verify(b"m", ec_key.get_proof(b"m")).ok
    # Without the private scalar any non-zero buffer of the right length passes.
    assert pk.verify(b"m", ECProof(EC, b"\x07" * 80)).ok
    assert pk.verify(b"m", ECProof(EC, b"\x00" * 80)) == (False, b"")


def test_public_key_import_validation(ec_key):
    good = ec_key.get_public_key().to_bytes()
    pk = ECPublicKey()
    assert pk.from_bytes(EC, good)
    assert not pk.from_bytes(EC, good[:-1])
    assert not pk.from_bytes(EC, b"\x04" + good[1:])
    # x >= p is not a field element
    assert not pk.from_bytes(EC, b"\x02" + b"\xff" * 32)
    assert not pk.is_initialized()
    assert not pk.from_bytes(VRFType.RSA_FDH_VRF_RSA2048_SHA256, good)


def test_proof_import_requires_exact_length(ec_key):
    raw = ec_key.get_proof(b"").to_bytes()
    assert VRF.proof_from_bytes(EC, raw) is not None
    assert VRF.proof_from_bytes(EC, raw[:79]) is None
    assert VRF.proof_from_bytes(EC, raw + b"\x00") is None


def test_clone(ec_key):
    clone = ec_key.clone()
    assert clone.get_proof(b"c").to_bytes() == ec_key.get_proof(b"c").to_bytes()
    pk = ec_key.get_public_key()
    pk_clone = pk.clone()
    assert pk_clone.to_bytes() == pk.to_bytes()
    assert pk_clone.carries_private_key()
    assert not ECSecretKey().clone().is_initialized()


def test_private_scalar_import_bounds():
    assert VRF.secret_key_from_bytes(EC, b"\x00" * 32) is None
    assert VRF.secret_key_from_bytes(EC, b"\x01" * 31) is None
    assert VRF.secret_key_from_bytes(EC, b"\xff" * 32) is None
    sk = VRF.secret_key_from_bytes(EC, (2).to_bytes(32, "big"))
    assert sk is not None
    assert sk.get_public_key().verify(b"q", sk.get_proof(b"q")).ok


def test_rsa_proof_rejected_by_ec_key(ec_key, fdh_key):
    assert ec_key.get_public_key().verify(b"x", fdh_key.get_proof(b"x")) == (False, b"")


def test_uninitialised_objects(ec_key):
    assert ECSecretKey().get_proof(b"x") is None
    assert ECPublicKey().verify(b"x", ec_key.get_proof(b"x")) == (False, b"")
    assert ECProof().get_vrf_value() == b""
    with pytest.raises(ValueError):
        ECProof(VRFType.RSA_FDH_VRF_RSA2048_SHA256, b"\x01")


def test_non_bytes_input_is_refused(ec_key):
    assert ec_key.get_proof(5) is None
    assert ec_key.get_proof("text") is None
    zeros_proof = ec_key.get_proof(b"\x00" * 5)
    assert zeros_proof is not None
    # both verification modes refuse a non-bytes input
    full = ec_key.get_public_key()
    structural = VRF.public_key_from_bytes(EC, full.to_bytes())
    assert full.verify(b"\x00" * 5, zeros_proof).ok
    assert full.verify(5, zeros_proof) == (False, b"")
    assert structural.verify(5, zeros_proof) == (False, b"")
    assert full.verify(bytearray(5), zeros_proof).ok
