# --------------------------------------------------------------
# File: storage.py
# Description: Persistencia de blobs cifrados y cifrado de archivos completos.
# --------------------------------------------------------------
"""Funciones auxiliares de entrada/salida para contenedores cifrados."""

from __future__ import annotations

import base64
import logging
import os
from typing import Tuple, Union

from pydantic import BaseModel

from cofre.envelope import decrypt, encrypt
from cofre.models import SealedBlob

__all__ = ["FilePayload", "decrypt_file", "encrypt_file", "read_blob", "write_blob"]

logger = logging.getLogger(__name__)


class FilePayload(BaseModel):
    """Documento que envuelve el contenido de un archivo antes de cifrarlo.

    Attributes:
        name (str): Nombre original del archivo.
        content (str): Contenido en Base64 estándar.

    """

    name: str
    content: str

    @classmethod
    def from_bytes(cls, name: str, data: bytes) -> "FilePayload":
        return cls(name=name, content=base64.b64encode(data).decode("ascii"))

    def to_bytes(self) -> bytes:
        return base64.b64decode(self.content)


def _ensure_parent_dir(path: str) -> None:
    """Garantiza que exista el directorio padre del archivo de destino."""

    parent = os.path.dirname(path) or "."
    os.makedirs(parent, exist_ok=True)


def write_blob(path: str, blob: bytes) -> None:
    """Guarda el blob aplicando escritura atómica con permisos 0600."""

    _ensure_parent_dir(path)
    tmp_path = f"{path}.tmp"
    fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    try:
        with os.fdopen(fd, "wb") as handler:
            handler.write(blob)
        os.replace(tmp_path, path)
    except OSError:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
    logger.debug("Blob de %d bytes guardado en %s", len(blob), path)


def read_blob(path: str) -> bytes:
    with open(path, "rb") as handler:
        return handler.read()


def encrypt_file(src: str, dst: str, password: Union[bytes, str]) -> SealedBlob:
    """Cifra el contenido de `src` y lo guarda en `dst`.

    Args:
        src (str): Ruta del archivo en claro.
        dst (str): Ruta del blob cifrado.
        password (Union[bytes, str]): Passphrase del usuario.

    Returns:
        SealedBlob: Blob escrito y su SHA-512 para comprobarlo por otro canal.

    """

    with open(src, "rb") as handler:
        payload = FilePayload.from_bytes(os.path.basename(src), handler.read())
    sealed = encrypt(password, payload)
    write_blob(dst, sealed.blob)
    return sealed


def decrypt_file(src: str, password: Union[bytes, str]) -> Tuple[str, bytes]:
    """Descifra un blob escrito por `encrypt_file`.

    Returns:
        Tuple[str, bytes]: Nombre original y contenido del archivo.

    """

    payload = decrypt(read_blob(src), password, FilePayload)
    return payload.name, payload.to_bytes()
