# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones del contenedor cifrado.
# --------------------------------------------------------------
"""Errores que pueden surgir al cifrar o descifrar un contenedor."""

from typing import Optional


class CofreError(Exception):
    """Clase base de todos los errores del paquete."""


class FramingError(CofreError):
    """El blob está mal formado antes de llegar a la criptografía."""


class MissingVersionError(FramingError):
    def __init__(self) -> None:
        super().__init__("El blob no contiene la versión del formato.")


class InvalidVersionError(FramingError):
    """La versión del blob no corresponde a ninguna revisión conocida."""

    def __init__(self, version: Optional[int] = None) -> None:
        self.version = version
        super().__init__(f"El blob contiene una versión no válida: {version}.")


class MissingSaltError(FramingError):
    def __init__(self) -> None:
        super().__init__("El blob no contiene la salt.")


class MissingNonceError(FramingError):
    def __init__(self) -> None:
        super().__init__("El blob no contiene el nonce.")


class AuthenticationError(CofreError):
    """Falló la verificación del tag AEAD.

    Passphrase incorrecta, salt/nonce alterados o ciphertext manipulado
    producen el mismo error sin distinguir la causa.
    """


class CompressionError(CofreError):
    """El flujo gzip está corrupto o truncado."""


class SerializationError(CofreError):
    """El valor no se puede serializar o los bytes no tienen la forma esperada."""


class RandomSourceError(CofreError):
    """La fuente de entropía del sistema no está disponible."""
