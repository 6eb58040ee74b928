# --------------------------------------------------------------
# File: constants.py
# Description: Constantes fijas del formato de contenedor cifrado.
# --------------------------------------------------------------
"""Parámetros del formato que ambos extremos deben compartir implícitamente."""

from typing import Final

# Revisión actual del formato (entero de 8 bytes little-endian).
VERSION: Final[int] = 1
SUPPORTED_VERSIONS: Final[frozenset] = frozenset({VERSION})
VERSION_SIZE: Final[int] = 8

SALT_SIZE: Final[int] = 64
NONCE_SIZE: Final[int] = 12  # 96 bits, tamaño estándar de AES-GCM
TAG_SIZE: Final[int] = 16  # 128 bits
KEY_SIZE: Final[int] = 32  # AES-256

# Argon2i: t=3, m=32 MiB, p=4.
KDF_TIME_COST: Final[int] = 3
KDF_MEMORY_COST: Final[int] = 32 * 1024
KDF_PARALLELISM: Final[int] = 4

HEADER_SIZE: Final[int] = VERSION_SIZE + SALT_SIZE + NONCE_SIZE
