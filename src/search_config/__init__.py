"""Declarative field and tokenizer configuration for full-text search indexes.

``tokenizer(...)`` builds a tokenizer document and ``field(...)`` builds a
field document that may embed one. Both are pure and return a fresh ``dict``
the caller owns.
"""

from search_config.declarations import (
    FieldDeclaration,
    TokenizerDeclaration,
    TokenizerDocument,
    declare_field,
    declare_tokenizer,
)
from search_config.documents import ConfigDocument, ConfigValue, assemble, dumps, loads
from search_config.errors import ConfigDeclarationError
from search_config.fields import FIELD_KEYS, Normalizer, RecordMode, build_field, field
from search_config.tokenizers import TOKENIZER_KEYS, TokenizerKind, build_tokenizer, tokenizer


__all__ = [
    "FIELD_KEYS",
    "TOKENIZER_KEYS",
    "ConfigDeclarationError",
    "ConfigDocument",
    "ConfigValue",
    "FieldDeclaration",
    "Normalizer",
    "RecordMode",
    "TokenizerDeclaration",
    "TokenizerDocument",
    "TokenizerKind",
    "assemble",
    "build_field",
    "build_tokenizer",
    "declare_field",
    "declare_tokenizer",
    "dumps",
    "field",
    "loads",
    "tokenizer",
]
