# --------------------------------------------------------------
# File: test_envelope.py
# Description: Pruebas de extremo a extremo de encrypt/decrypt.
# --------------------------------------------------------------

import os
from dataclasses import dataclass
from typing import List

import pytest
from pydantic import BaseModel

from cofre import (
    AuthenticationError,
    CompressionError,
    Frame,
    InvalidVersionError,
    RandomSourceError,
    SerializationError,
    decrypt,
    encrypt,
)
from cofre.checksum import sha512_digest
from cofre.constants import HEADER_SIZE, NONCE_SIZE, SALT_SIZE, TAG_SIZE
from cofre.crypto_kdf import derive_key
from cofre.crypto_sym import aes_gcm_seal
from cofre.framing import assemble_frame


class Quote(BaseModel):
    C: str
    M: str


@dataclass
class Point:
    x: int
    y: float


def test_picard_roundtrip_with_right_password(sealed_picard, picard):
    """Comprueba que el registro vuelva intacto con la passphrase correcta.

    Returns:
        None: Las aserciones comparan el valor original y el recuperado.
    """
    assert decrypt(sealed_picard.blob, b"trek") == picard


def test_picard_wrong_password_fails(sealed_picard):
    """Garantiza que otra passphrase falle con AuthenticationError.

    Returns:
        None: Se espera una excepción durante el descifrado.
    """
    with pytest.raises(AuthenticationError):
        decrypt(sealed_picard.blob, b"data")


def test_str_password_is_utf8_equivalent(sealed_picard, picard):
    assert decrypt(sealed_picard.blob, "trek") == picard


def test_decrypt_into_model(sealed_picard):
    """Valida que el valor pueda reconstruirse como modelo Pydantic.

    Returns:
        None: Las aserciones verifican el tipo y los campos.
    """
    quote = decrypt(sealed_picard.blob, b"trek", Quote)
    assert isinstance(quote, Quote)
    assert quote == Quote(C="PICARD", M="...oppressor.")


def test_decrypt_into_mismatched_model(sealed_picard):
    with pytest.raises(SerializationError):
        decrypt(sealed_picard.blob, b"trek", Point)


def test_model_and_dataclass_roundtrip():
    """Comprueba el viaje de ida y vuelta de modelos y dataclasses.

    Returns:
        None: Las aserciones comparan los valores.
    """
    quote = Quote(C="RIKER", M="Number One")
    sealed = encrypt("pw", quote)
    assert decrypt(sealed.blob, "pw", Quote) == quote

    points = [Point(1, 2.5), Point(-3, 0.0)]
    sealed = encrypt("pw", points[0])
    assert decrypt(sealed.blob, "pw", Point) == points[0]


def test_nested_document_roundtrip():
    value = {"list": [1, 2.5, None, True, "ñ"], "nested": {"a": {"b": []}}, "empty": {}}
    sealed = encrypt(b"", value)
    assert decrypt(sealed.blob, b"") == value


def test_same_input_produces_different_blobs(picard):
    """Verifica la no determinación del blob y la determinación del claro.

    Returns:
        None: Las aserciones comparan salt, nonce y ciphertext.
    """
    first = encrypt(b"trek", picard)
    second = encrypt(b"trek", picard)
    assert first.blob != second.blob
    assert first.blob[8:72] != second.blob[8:72]
    assert first.blob[72:HEADER_SIZE] != second.blob[72:HEADER_SIZE]
    assert decrypt(first.blob, b"trek") == decrypt(second.blob, b"trek") == picard


def test_checksum_covers_exact_blob(sealed_picard):
    """El checksum es el SHA-512 del blob y no forma parte del marco.

    Returns:
        None: Las aserciones comparan resúmenes y longitudes.
    """
    assert len(sealed_picard.checksum) == 64
    assert sealed_picard.checksum == sha512_digest(sealed_picard.blob)
    assert sealed_picard.checksum not in sealed_picard.blob
    assert sealed_picard.checksum_hex() == sealed_picard.checksum.hex()


def test_blob_layout(sealed_picard):
    blob = sealed_picard.blob
    assert blob[:8] == (1).to_bytes(8, "little")
    assert len(blob) >= HEADER_SIZE + TAG_SIZE


def test_single_bit_flips_in_ciphertext_are_rejected(sealed_picard):
    """Cualquier bit alterado del ciphertext provoca AuthenticationError.

    Returns:
        None: Se espera una excepción para cada posición alterada.
    """
    blob = sealed_picard.blob
    for index in range(HEADER_SIZE, len(blob)):
        tampered = bytearray(blob)
        tampered[index] ^= 1 << (index % 8)
        with pytest.raises(AuthenticationError):
            decrypt(bytes(tampered), b"trek")


@pytest.mark.parametrize("index", [8, 40, 71, 72, 83])
def test_flipped_salt_or_nonce_is_rejected(sealed_picard, index):
    tampered = bytearray(sealed_picard.blob)
    tampered[index] ^= 0x01
    with pytest.raises(AuthenticationError):
        decrypt(bytes(tampered), b"trek")


def test_flipped_version_is_rejected_before_crypto(sealed_picard):
    tampered = bytearray(sealed_picard.blob)
    tampered[0] ^= 0x02
    with pytest.raises(InvalidVersionError):
        decrypt(bytes(tampered), b"trek")


def test_truncated_tag_is_rejected(sealed_picard):
    with pytest.raises(AuthenticationError):
        decrypt(sealed_picard.blob[:-1], b"trek")


def test_unsupported_value_is_rejected_on_encrypt():
    with pytest.raises(SerializationError):
        encrypt(b"pw", {"raw": b"bytes"})


def test_list_of_models_roundtrip():
    values = [Quote(C="A", M="1"), Quote(C="B", M="2")]
    sealed = encrypt(b"pw", [value.model_dump() for value in values])
    assert decrypt(sealed.blob, b"pw", List[Quote]) == values


def test_encrypt_without_entropy(monkeypatch, picard):
    def _broken(size):
        raise NotImplementedError("sin fuente aleatoria")

    monkeypatch.setattr("cofre.crypto_sym.os.urandom", _broken)
    with pytest.raises(RandomSourceError):
        encrypt(b"trek", picard)


def test_authenticated_non_gzip_payload_fails_decompression():
    """Un payload auténtico que no es gzip falla tras la autenticación.

    Returns:
        None: Se espera CompressionError desde decrypt.
    """
    salt = os.urandom(SALT_SIZE)
    nonce = os.urandom(NONCE_SIZE)
    key = derive_key(b"trek", salt)
    ciphertext = aes_gcm_seal(key, nonce, b'{"C":"PICARD"}')
    blob = assemble_frame(Frame(salt=salt, nonce=nonce, ciphertext=ciphertext))

    with pytest.raises(CompressionError):
        decrypt(blob, b"trek")
