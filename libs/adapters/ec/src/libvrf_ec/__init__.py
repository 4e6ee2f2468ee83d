"""Simplified EC engine for libvrf (see ec_adapter's security note).

Importing this package registers the EC engine for the "ec" family.
"""

from .ec_adapter import ECProof, ECPublicKey, ECSecretKey, ECVRF

__all__ = ["ECProof", "ECPublicKey", "ECSecretKey", "ECVRF"]
