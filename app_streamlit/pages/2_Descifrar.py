# --------------------------------------------------------------
# File: 2_Descifrar.py
# Description: Permite recuperar archivos cifrados y descifrarlos desde Streamlit.
# --------------------------------------------------------------

import os
from typing import List

import streamlit as st

from cofre import AuthenticationError, CofreError, FramingError, decrypt
from cofre.checksum import sha512_hex
from cofre.config import storage_path
from cofre.storage import FilePayload, read_blob


def _list_blobs(data_dir: str) -> List[str]:
    """Devuelve la lista de blobs guardados en el almacenamiento.

    Args:
        data_dir (str): Ruta del directorio de almacenamiento.

    Returns:
        List[str]: Archivos `.enc` ordenados alfabéticamente.
    """
    if not os.path.isdir(data_dir):
        return []
    return sorted([f for f in os.listdir(data_dir) if f.endswith(".enc")])


st.title("🔓 Descifrar")

data_dir = storage_path()
uploaded = st.file_uploader("Sube un archivo .enc", type=None)
stored = _list_blobs(data_dir)

blob = None
if uploaded:
    blob = uploaded.read()
elif stored:
    sel = st.selectbox("O selecciona un blob guardado:", stored, index=0)
    blob = read_blob(os.path.join(data_dir, sel))
else:
    st.info("No hay blobs guardados aún. Ve a **Cifrar** para añadir alguno.")
    st.stop()

st.write("**Tamaño del blob:**", len(blob))
st.code(f"SHA-512={sha512_hex(blob)}", language="text")

passphrase = st.text_input("Passphrase", type="password")
if st.button("Descifrar"):
    try:
        payload = decrypt(blob, passphrase, FilePayload)
    except FramingError as exc:
        st.error(f"El archivo no es un contenedor válido: {exc}")
    except AuthenticationError:
        st.error("Passphrase incorrecta o archivo manipulado.")
    except CofreError as exc:
        st.error(f"Error descifrando ({type(exc).__name__}): {exc}")
    else:
        st.success("Archivo descifrado correctamente.")
        st.download_button(
            "⬇️ Descargar archivo original",
            data=payload.to_bytes(),
            file_name=payload.name or "archivo_recuperado",
            mime="application/octet-stream",
        )
