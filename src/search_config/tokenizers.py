"""Tokenizer configuration documents.

A tokenizer document names a text-segmentation strategy under ``type`` and
carries its optional tuning parameters::

    >>> build_tokenizer("ngram", min_gram=3, max_gram=3)
    {'type': 'ngram', 'min_gram': 3, 'max_gram': 3}

Values are passed through as given. Range checks such as ``min_gram <=
max_gram`` belong to the indexing engine that consumes the document.
"""

from __future__ import annotations

from enum import Enum
import logging

from search_config.documents import ConfigDocument, assemble


logger = logging.getLogger(__name__)

TOKENIZER_KEYS = ("type", "min_gram", "max_gram", "prefix_only", "language", "pattern")


class TokenizerKind(str, Enum):
    """Tokenizer kinds understood by the indexing engine."""

    DEFAULT = "default"
    RAW = "raw"
    WHITESPACE = "whitespace"
    EN_STEM = "en_stem"
    STEM = "stem"
    NGRAM = "ngram"
    REGEX = "regex"
    SOURCE_CODE = "source_code"
    CHINESE_COMPATIBLE = "chinese_compatible"
    CHINESE_LINDERA = "chinese_lindera"
    JAPANESE_LINDERA = "japanese_lindera"
    KOREAN_LINDERA = "korean_lindera"
    ICU = "icu"


def build_tokenizer(
    name: str,
    min_gram: int | None = None,
    max_gram: int | None = None,
    prefix_only: bool | None = None,
    language: str | None = None,
    pattern: str | None = None,
) -> ConfigDocument:
    """Build the config document for one tokenizer.

    Args:
        name: Tokenizer kind, emitted under ``type``
        min_gram: Smallest n-gram length
        max_gram: Largest n-gram length
        prefix_only: Only emit n-grams anchored at the token start
        language: Language for stemming tokenizers
        pattern: Regular expression for the regex tokenizer

    Returns:
        ``{"type": name, ...}`` with one entry per supplied parameter
    """
    document = assemble(
        (
            ("type", name),
            ("min_gram", min_gram),
            ("max_gram", max_gram),
            ("prefix_only", prefix_only),
            ("language", language),
            ("pattern", pattern),
        )
    )
    logger.debug("Built tokenizer config", extra={"tokenizer_type": name, "keys": sorted(document)})
    return document


tokenizer = build_tokenizer
