# --------------------------------------------------------------
# File: 1_Cifrar.py
# Description: Cifra un archivo subido con passphrase y guarda el blob resultante.
# --------------------------------------------------------------

import os

import streamlit as st

from cofre import CofreError, encrypt
from cofre.config import storage_path
from cofre.storage import FilePayload, write_blob


def secure_name(name: str) -> str:
    """Normaliza el nombre de archivo para evitar caracteres problemáticos.

    Args:
        name (str): Nombre original del archivo proporcionado por el usuario.

    Returns:
        str: Nombre limpio y libre de rutas o caracteres inválidos.
    """
    bad = '<>:"/\\|?*'
    for ch in bad:
        name = name.replace(ch, "_")
    return name.strip().replace("..", "_")


st.title("🔒 Cifrar")

f = st.file_uploader("Selecciona un archivo", type=None)
passphrase = st.text_input("Passphrase", type="password")
confirm = st.text_input("Repite la passphrase", type="password")

if f and st.button("Cifrar"):
    if not passphrase or passphrase != confirm:
        st.error("Las passphrases no coinciden o están vacías.")
        st.stop()

    name = secure_name(f.name)
    try:
        sealed = encrypt(passphrase, FilePayload.from_bytes(name, f.read()))
    except CofreError as exc:
        st.error(f"Error cifrando ({type(exc).__name__}): {exc}")
        st.stop()

    # Guarda el blob en el directorio de almacenamiento configurado.
    dst = os.path.join(storage_path(), f"{name}.enc")
    write_blob(dst, sealed.blob)

    st.success(f"Archivo cifrado y guardado como `{dst}`.")
    st.code(f"blob={len(sealed.blob)} bytes\nSHA-512={sealed.checksum_hex()}", language="text")
    st.caption("Anota el SHA-512 para comprobar el blob por otro canal.")
    st.download_button(
        "⬇️ Descargar archivo cifrado (.enc)",
        data=sealed.blob,
        file_name=f"{name}.enc",
        mime="application/octet-stream",
    )
