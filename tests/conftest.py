# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar el almacenamiento de las pruebas.
# --------------------------------------------------------------

from typing import Iterator

import pytest

from cofre import encrypt


@pytest.fixture(autouse=True)
def _isolate_storage(tmp_path, monkeypatch) -> Iterator[None]:
    """Aísla STORAGE_PATH en una carpeta temporal para cada prueba.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    data_dir = tmp_path / "_data"
    data_dir.mkdir()
    monkeypatch.setenv("STORAGE_PATH", str(data_dir))
    yield


@pytest.fixture(scope="session")
def picard():
    """Registro de ejemplo usado en varias pruebas."""
    return {"C": "PICARD", "M": "...oppressor."}


@pytest.fixture(scope="session")
def sealed_picard(picard):
    """Blob cifrado una única vez por sesión, Argon2 es deliberadamente lento.

    Returns:
        SealedBlob: Resultado de cifrar el registro con la passphrase "trek".
    """
    return encrypt(b"trek", picard)
