"""RSA engine for libvrf.

Importing this package registers the RSA engine for the "rsa" family.
"""

from .rsa_adapter import RSAProof, RSAPublicKey, RSASecretKey, RSAVRF

__all__ = ["RSAProof", "RSAPublicKey", "RSASecretKey", "RSAVRF"]
