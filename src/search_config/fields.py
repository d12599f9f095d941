"""Field configuration documents.

A field document wraps the field body under the field name::

    >>> build_field("body", indexed=True, tokenizer=build_tokenizer("en_stem"))
    {'body': {'indexed': True, 'tokenizer': {'type': 'en_stem'}}}

An empty body (``{"body": {}}``) tells the engine to use its defaults for every
attribute.
"""

from __future__ import annotations

from enum import Enum
import logging

from search_config.documents import ConfigDocument, assemble


logger = logging.getLogger(__name__)

FIELD_KEYS = (
    "indexed",
    "stored",
    "fast",
    "fieldnorms",
    "record",
    "expand_dots",
    "tokenizer",
    "normalizer",
)


class RecordMode(str, Enum):
    """What the index records per term occurrence."""

    BASIC = "basic"
    FREQ = "freq"
    POSITION = "position"


class Normalizer(str, Enum):
    """Normalization applied to fast-field values."""

    RAW = "raw"
    LOWERCASE = "lowercase"


def build_field(
    name: str,
    indexed: bool | None = None,
    stored: bool | None = None,
    fast: bool | None = None,
    fieldnorms: bool | None = None,
    record: str | None = None,
    expand_dots: bool | None = None,
    tokenizer: ConfigDocument | None = None,
    normalizer: str | None = None,
) -> ConfigDocument:
    """Build the config document for one field.

    The tokenizer document is embedded as given, without re-validation.
    """
    body = assemble(
        (
            ("indexed", indexed),
            ("stored", stored),
            ("fast", fast),
            ("fieldnorms", fieldnorms),
            ("record", record),
            ("expand_dots", expand_dots),
            ("tokenizer", tokenizer),
            ("normalizer", normalizer),
        )
    )
    logger.debug("Built field config", extra={"field_name": name, "keys": sorted(body)})
    return {name: body}


field = build_field
