# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-GCM y aleatoriedad para el contenedor cifrado.
# --------------------------------------------------------------
"""Rutinas de cifrado autenticado AES-256-GCM sin datos asociados."""

import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from cofre.constants import KEY_SIZE, NONCE_SIZE, TAG_SIZE
from cofre.errors import AuthenticationError, RandomSourceError


def random_bytes(size: int) -> bytes:
    """Obtiene bytes de la fuente criptográfica del sistema.

    Args:
        size (int): Número de bytes solicitados.

    Returns:
        bytes: Bytes aleatorios.

    Raises:
        RandomSourceError: Si el sistema no puede proporcionar entropía.

    """

    try:
        return os.urandom(size)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceError("No se pudo leer la fuente de entropía.") from exc


def _check_params(key: bytes, nonce: bytes) -> None:
    if len(key) != KEY_SIZE:
        raise ValueError(f"La clave debe tener {KEY_SIZE} bytes.")
    if len(nonce) != NONCE_SIZE:
        raise ValueError(f"El nonce debe tener {NONCE_SIZE} bytes.")


def aes_gcm_seal(key: bytes, nonce: bytes, plaintext: bytes) -> bytes:
    """Cifra datos con AES-256-GCM.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        nonce (bytes): Nonce de 96 bits, único para la clave.
        plaintext (bytes): Datos a cifrar.

    Returns:
        bytes: Ciphertext con el tag de 128 bits al final.

    """

    _check_params(key, nonce)
    return AESGCM(key).encrypt(nonce, plaintext, None)


def aes_gcm_open(key: bytes, nonce: bytes, sealed: bytes) -> bytes:
    """Descifra y autentica datos cifrados con `aes_gcm_seal`.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        nonce (bytes): Nonce utilizado al cifrar.
        sealed (bytes): Ciphertext con el tag concatenado.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        AuthenticationError: Si el tag no verifica o el ciphertext es más
            corto que el tag. No se devuelve ningún dato parcial.

    """

    _check_params(key, nonce)
    if len(sealed) < TAG_SIZE:
        raise AuthenticationError("El ciphertext es más corto que el tag.")
    try:
        return AESGCM(key).decrypt(nonce, sealed, None)
    except InvalidTag as exc:
        raise AuthenticationError("No se pudo autenticar el contenido cifrado.") from exc
