# --------------------------------------------------------------
# File: framing.py
# Description: Codificación y análisis del marco binario del contenedor.
# --------------------------------------------------------------
"""Codec sin estado del formato `[versión:8 LE][salt:64][nonce:12][ciphertext+tag]`."""

import logging
import struct

from cofre.constants import NONCE_SIZE, SALT_SIZE, SUPPORTED_VERSIONS, VERSION_SIZE
from cofre.errors import (
    InvalidVersionError,
    MissingNonceError,
    MissingSaltError,
    MissingVersionError,
)
from cofre.models import Frame

logger = logging.getLogger(__name__)

_VERSION_STRUCT = struct.Struct("<Q")


def assemble_frame(frame: Frame) -> bytes:
    """Escribe versión, salt, nonce y payload cifrado en un único buffer.

    Args:
        frame (Frame): Componentes del contenedor.

    Returns:
        bytes: Blob listo para persistir.

    Raises:
        ValueError: Si la salt o el nonce no tienen el tamaño del formato.

    """

    if len(frame.salt) != SALT_SIZE:
        raise ValueError(f"La salt debe tener {SALT_SIZE} bytes.")
    if len(frame.nonce) != NONCE_SIZE:
        raise ValueError(f"El nonce debe tener {NONCE_SIZE} bytes.")

    return b"".join(
        (
            _VERSION_STRUCT.pack(frame.version),
            frame.salt,
            frame.nonce,
            frame.ciphertext,
        )
    )


def parse_frame(blob: bytes) -> Frame:
    """Valida y divide el blob de izquierda a derecha.

    Cada comprobación de longitud mínima falla con su propio error antes de
    intentar cualquier operación criptográfica. El resto del blob, aunque
    esté vacío, se considera ciphertext y lo valida AES-GCM.

    Args:
        blob (bytes): Contenedor completo.

    Returns:
        Frame: Componentes del contenedor.

    Raises:
        MissingVersionError: Menos de 8 bytes.
        InvalidVersionError: Versión desconocida.
        MissingSaltError: Menos de 64 bytes tras la versión.
        MissingNonceError: Menos de 12 bytes tras la salt.

    """

    view = memoryview(blob)
    if len(view) < VERSION_SIZE:
        raise MissingVersionError()

    (version,) = _VERSION_STRUCT.unpack(view[:VERSION_SIZE])
    if version not in SUPPORTED_VERSIONS:
        raise InvalidVersionError(version)
    view = view[VERSION_SIZE:]

    if len(view) < SALT_SIZE:
        raise MissingSaltError()
    salt, view = bytes(view[:SALT_SIZE]), view[SALT_SIZE:]

    if len(view) < NONCE_SIZE:
        raise MissingNonceError()
    nonce, view = bytes(view[:NONCE_SIZE]), view[NONCE_SIZE:]

    logger.debug("Marco v%d con %d bytes de ciphertext", version, len(view))
    return Frame(version=version, salt=salt, nonce=nonce, ciphertext=bytes(view))
