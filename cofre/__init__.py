# --------------------------------------------------------------
# File: __init__.py
# Description: API pública del contenedor cifrado con passphrase.
# --------------------------------------------------------------
"""Inicializa el paquete `cofre` y expone `encrypt` y `decrypt`."""

from cofre.envelope import decrypt, encrypt
from cofre.errors import (
    AuthenticationError,
    CofreError,
    CompressionError,
    FramingError,
    InvalidVersionError,
    MissingNonceError,
    MissingSaltError,
    MissingVersionError,
    RandomSourceError,
    SerializationError,
)
from cofre.models import Frame, SealedBlob

__all__ = [
    "AuthenticationError",
    "CofreError",
    "CompressionError",
    "Frame",
    "FramingError",
    "InvalidVersionError",
    "MissingNonceError",
    "MissingSaltError",
    "MissingVersionError",
    "RandomSourceError",
    "SealedBlob",
    "SerializationError",
    "decrypt",
    "encrypt",
]
