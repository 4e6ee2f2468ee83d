from __future__ import annotations


class VRFError(RuntimeError):
    pass


class EncodingError(VRFError):
    """Raised when an integer or mask does not fit its declared byte length."""


class UnsupportedTypeError(VRFError, ValueError):
    """Raised when an engine object is built for a type outside its family."""
