# --------------------------------------------------------------
# File: config.py
# Description: Configuración del entorno para la aplicación y el registro.
# --------------------------------------------------------------
"""Lectura de variables de entorno (con soporte `.env`)."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("COFRE_LOG_LEVEL", "WARNING").upper()


def storage_path() -> str:
    """Devuelve el directorio donde la aplicación guarda los blobs."""

    return os.getenv("STORAGE_PATH", "./_data")


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Aplica el nivel de registro al logger del paquete `cofre`."""

    logger = logging.getLogger("cofre")
    logger.setLevel(getattr(logging, level, logging.WARNING))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
