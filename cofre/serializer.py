# --------------------------------------------------------------
# File: serializer.py
# Description: Serialización canónica de valores estructurados a bytes.
# --------------------------------------------------------------
"""Adaptador de serialización basado en JSON canónico y Pydantic.

Los valores admitidos son modelos Pydantic, dataclasses y árboles de
`dict` (claves `str`), `list`, `str`, `int`, `float`, `bool` y `None`.
Cualquier otra construcción se rechaza porque no podría recuperarse de
forma exacta al deserializar.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Optional

from pydantic import BaseModel, PydanticUserError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from cofre.errors import SerializationError

_SCALARS = (str, int, float, bool, type(None))


def _check_tree(value: Any, path: str = "$") -> None:
    """Recorre el documento rechazando tipos que no sobreviven al viaje de ida y vuelta."""

    if isinstance(value, _SCALARS):
        return
    if isinstance(value, list):
        for index, item in enumerate(value):
            _check_tree(item, f"{path}[{index}]")
        return
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise SerializationError(f"Clave no textual en {path}: {key!r}")
            _check_tree(item, f"{path}.{key}")
        return
    raise SerializationError(f"Tipo no serializable en {path}: {type(value).__name__}")


def _to_document(value: Any) -> Any:
    try:
        if isinstance(value, BaseModel):
            return value.model_dump(mode="json")
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return TypeAdapter(type(value)).dump_python(value, mode="json")
    except (PydanticSerializationError, PydanticUserError) as exc:
        raise SerializationError(f"No se pudo serializar {type(value).__name__}: {exc}") from exc

    _check_tree(value)
    return value


def serialize(value: Any) -> bytes:
    """Convierte un valor en su codificación canónica UTF-8.

    Args:
        value (Any): Modelo, dataclass o documento JSON nativo.

    Returns:
        bytes: JSON compacto con claves ordenadas.

    Raises:
        SerializationError: Si el valor contiene construcciones no admitidas.

    """

    document = _to_document(value)
    try:
        text = json.dumps(
            document,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
        return text.encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"No se pudo serializar el valor: {exc}") from exc


def deserialize(data: bytes, model: Optional[Any] = None) -> Any:
    """Reconstruye un valor a partir de su codificación canónica.

    Args:
        data (bytes): Bytes producidos por `serialize`.
        model (Optional[Any]): Tipo esperado (modelo Pydantic, dataclass o
            cualquier tipo aceptado por `TypeAdapter`). Si se omite se
            devuelve el documento JSON tal cual.

    Returns:
        Any: Valor reconstruido.

    Raises:
        SerializationError: Si los bytes están mal formados o no encajan con
            el tipo esperado.

    """

    try:
        document = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise SerializationError(f"Codificación no válida: {exc}") from exc

    if model is None:
        return document
    try:
        return TypeAdapter(model).validate_python(document)
    except ValidationError as exc:
        raise SerializationError(f"El contenido no encaja con {model!r}: {exc}") from exc
    except PydanticUserError as exc:
        raise SerializationError(f"Tipo no admitido como destino: {model!r}: {exc}") from exc
