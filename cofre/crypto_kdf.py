# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de la clave AES a partir de la passphrase con Argon2i.
# --------------------------------------------------------------
"""Derivación de claves simétricas resistente a fuerza bruta offline."""

from typing import Union

from argon2.low_level import Type, hash_secret_raw

from cofre.constants import (
    KDF_MEMORY_COST,
    KDF_PARALLELISM,
    KDF_TIME_COST,
    KEY_SIZE,
    SALT_SIZE,
)


def _as_bytes(password: Union[bytes, str]) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8")
    if isinstance(password, (bytes, bytearray, memoryview)):
        return bytes(password)
    raise TypeError(f"La passphrase debe ser str o bytes, no {type(password).__name__}.")


def derive_key(password: Union[bytes, str], salt: bytes) -> bytes:
    """Deriva la clave de cifrado del contenedor usando Argon2i.

    Los parámetros son constantes del formato para que el descifrado pueda
    reconstruir la misma clave solo con la passphrase y la salt.

    Args:
        password (Union[bytes, str]): Passphrase del usuario.
        salt (bytes): Salt aleatoria de 64 bytes incluida en el blob.

    Returns:
        bytes: Clave de 256 bits para AES-GCM.

    Raises:
        ValueError: Si la salt no tiene la longitud del formato.
        TypeError: Si la passphrase no es str ni bytes.

    """

    if len(salt) != SALT_SIZE:
        raise ValueError(f"La salt debe tener {SALT_SIZE} bytes.")

    return hash_secret_raw(
        _as_bytes(password),
        salt,
        time_cost=KDF_TIME_COST,
        memory_cost=KDF_MEMORY_COST,
        parallelism=KDF_PARALLELISM,
        hash_len=KEY_SIZE,
        type=Type.I,
    )
