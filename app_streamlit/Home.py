# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

from cofre.config import configure_logging

configure_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="Cofre", page_icon="🔐", layout="centered")

st.title("🔐 Cofre")
st.write(
    "Protege un archivo con una passphrase: JSON canónico → gzip → Argon2i → "
    "AES-256-GCM → contenedor versionado."
)
st.code("[versión:8 LE][salt:64][nonce:12][ciphertext+tag]", language="text")
st.info("Ve a **Cifrar** para proteger un archivo o a **Descifrar** para recuperarlo.")
