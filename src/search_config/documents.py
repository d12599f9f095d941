"""Config document types and assembly helpers.

A config document is the plain nested mapping handed to the indexing engine's
schema loader. Builders assemble documents from ``(key, value)`` slots and only
keep the slots the caller actually supplied; ``None`` marks an absent slot.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeAlias

import orjson

from search_config.errors import ConfigDeclarationError


ConfigValue: TypeAlias = "bool | int | str | ConfigDocument"
ConfigDocument: TypeAlias = "dict[str, ConfigValue]"


def assemble(slots: Iterable[tuple[str, Any]]) -> ConfigDocument:
    """Build a document from declared slots, skipping absent (``None``) values.

    Values are stored as given. ``False``, ``0`` and ``""`` are present values
    and produce a key like any other.
    """
    return {key: value for key, value in slots if value is not None}


def dumps(document: ConfigDocument, *, indent: bool = False) -> str:
    """Serialize a document to JSON text."""
    option = orjson.OPT_INDENT_2 if indent else None
    return orjson.dumps(document, option=option).decode("utf-8")


def loads(text: str | bytes) -> ConfigDocument:
    """Parse JSON text into a document.

    Raises:
        ConfigDeclarationError: If the text is not valid JSON or is not an object.
    """
    try:
        data = orjson.loads(text)
    except orjson.JSONDecodeError as exc:
        raise ConfigDeclarationError(f"Invalid JSON document: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigDeclarationError(f"Expected a JSON object, got {type(data).__name__}")
    return data
