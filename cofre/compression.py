# --------------------------------------------------------------
# File: compression.py
# Description: Compresión gzip del payload antes de cifrarlo.
# --------------------------------------------------------------
"""Compresión sin pérdidas sobre buffers en memoria."""

import gzip
import io
import zlib

from cofre.errors import CompressionError

COMPRESSION_LEVEL = 6


def compress(data: bytes) -> bytes:
    """Comprime los bytes serializados en formato gzip.

    El escritor se cierra antes de devolver para volcar el trailer CRC32.

    Args:
        data (bytes): Bytes serializados.

    Returns:
        bytes: Flujo gzip completo.

    """

    buffer = io.BytesIO()
    with gzip.GzipFile(
        fileobj=buffer, mode="wb", compresslevel=COMPRESSION_LEVEL, mtime=0
    ) as writer:
        writer.write(data)
    return buffer.getvalue()


def decompress(data: bytes) -> bytes:
    """Descomprime un flujo gzip leyéndolo hasta el final.

    Args:
        data (bytes): Flujo gzip.

    Returns:
        bytes: Bytes originales.

    Raises:
        CompressionError: Si el flujo está vacío, corrupto o truncado.

    """

    if not data:
        raise CompressionError("El flujo comprimido está vacío.")
    try:
        with gzip.GzipFile(fileobj=io.BytesIO(data), mode="rb") as reader:
            return reader.read()
    except (OSError, EOFError, zlib.error) as exc:
        raise CompressionError(f"Flujo gzip no válido: {exc}") from exc
