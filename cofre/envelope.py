# --------------------------------------------------------------
# File: envelope.py
# Description: Puntos de entrada para cifrar y descifrar valores con passphrase.
# --------------------------------------------------------------
"""Canal completo: serialización, gzip, Argon2i, AES-256-GCM y marco versionado."""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from cofre.checksum import sha512_digest
from cofre.compression import compress, decompress
from cofre.constants import NONCE_SIZE, SALT_SIZE, VERSION
from cofre.crypto_kdf import derive_key
from cofre.crypto_sym import aes_gcm_open, aes_gcm_seal, random_bytes
from cofre.errors import CofreError
from cofre.framing import assemble_frame, parse_frame
from cofre.models import Frame, SealedBlob
from cofre.serializer import deserialize, serialize

logger = logging.getLogger(__name__)


def encrypt(password: Union[bytes, str], value: Any) -> SealedBlob:
    """Cifra un valor estructurado bajo una passphrase.

    Cada llamada genera una salt y un nonce nuevos, por lo que dos cifrados
    del mismo valor con la misma passphrase producen blobs distintos.

    Args:
        password (Union[bytes, str]): Passphrase del usuario.
        value (Any): Valor serializable (ver `cofre.serializer`).

    Returns:
        SealedBlob: Blob cifrado y su SHA-512 auxiliar.

    Raises:
        SerializationError: Si el valor no es serializable.
        RandomSourceError: Si no hay entropía disponible.

    """

    encoded = serialize(value)
    compressed = compress(encoded)

    salt = random_bytes(SALT_SIZE)
    nonce = random_bytes(NONCE_SIZE)
    key = derive_key(password, salt)
    ciphertext = aes_gcm_seal(key, nonce, compressed)

    blob = assemble_frame(Frame(version=VERSION, salt=salt, nonce=nonce, ciphertext=ciphertext))
    logger.debug(
        "Cifrado v%d: serializado=%d comprimido=%d blob=%d bytes",
        VERSION,
        len(encoded),
        len(compressed),
        len(blob),
    )
    return SealedBlob(blob=blob, checksum=sha512_digest(blob))


def decrypt(blob: bytes, password: Union[bytes, str], model: Optional[Any] = None) -> Any:
    """Descifra un blob producido por `encrypt`.

    Solo devuelve un valor si todo el proceso tiene éxito; ante cualquier
    error se lanza la excepción y no se expone ningún dato en claro.

    Args:
        blob (bytes): Contenedor cifrado.
        password (Union[bytes, str]): Passphrase del usuario.
        model (Optional[Any]): Tipo en el que validar el valor recuperado.

    Returns:
        Any: Valor original.

    Raises:
        FramingError: Si el blob está mal formado.
        AuthenticationError: Passphrase incorrecta o contenido manipulado.
        CompressionError: Si el payload autenticado no es gzip válido.
        SerializationError: Si el contenido no encaja con `model`.

    """

    try:
        frame = parse_frame(blob)
        key = derive_key(password, frame.salt)
        compressed = aes_gcm_open(key, frame.nonce, frame.ciphertext)
        return deserialize(decompress(compressed), model)
    except CofreError as exc:
        logger.warning("Descifrado rechazado: %s", type(exc).__name__)
        raise
