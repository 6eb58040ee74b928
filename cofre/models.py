# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos del contenedor cifrado.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan el marco y el resultado del cifrado."""

from pydantic import BaseModel, ConfigDict

from cofre.constants import VERSION


class Frame(BaseModel):
    """Representa el contenedor tal y como viaja en el blob.

    Attributes:
        version (int): Revisión del formato.
        salt (bytes): Salt aleatoria de Argon2.
        nonce (bytes): Nonce aleatorio de AES-GCM.
        ciphertext (bytes): Datos cifrados con el tag concatenado al final.

    """

    model_config = ConfigDict(frozen=True)

    version: int = VERSION
    salt: bytes
    nonce: bytes
    ciphertext: bytes


class SealedBlob(BaseModel):
    """Resultado de `encrypt`: el blob y su resumen SHA-512 auxiliar.

    Attributes:
        blob (bytes): Bytes del contenedor listos para persistir.
        checksum (bytes): SHA-512 del blob, no forma parte del formato.

    """

    model_config = ConfigDict(frozen=True)

    blob: bytes
    checksum: bytes

    def checksum_hex(self) -> str:
        """Devuelve el checksum en hexadecimal para mostrarlo al usuario."""

        return self.checksum.hex()
