# --------------------------------------------------------------
# File: checksum.py
# Description: Resumen SHA-512 del blob para verificación fuera de banda.
# --------------------------------------------------------------
"""Checksum auxiliar, no forma parte del formato ni es una frontera de seguridad."""

import hashlib


def sha512_digest(blob: bytes) -> bytes:
    """Calcula el SHA-512 de los bytes exactos del blob."""

    return hashlib.sha512(blob).digest()


def sha512_hex(blob: bytes) -> str:
    return hashlib.sha512(blob).hexdigest()
