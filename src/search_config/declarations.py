"""Declaration boundary for field and tokenizer configs.

Builders trust their inputs. Declarations coming from outside the process
(JSON files, CLI flags, API payloads) are checked here first with strict types
so that a string never ends up where the engine expects a boolean, and unknown
keys never reach the schema loader.

Example:
    declare_field(
        {
            "name": "body",
            "indexed": True,
            "tokenizer": {"name": "ngram", "min_gram": 3, "max_gram": 3},
        }
    )
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, ValidationError

from search_config.documents import ConfigDocument, loads
from search_config.errors import ConfigDeclarationError
from search_config.fields import build_field
from search_config.tokenizers import build_tokenizer


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class TokenizerDeclaration(BaseModel):
    """Typed tokenizer declaration; ``name`` becomes the document's ``type``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: StrictStr
    min_gram: StrictInt | None = None
    max_gram: StrictInt | None = None
    prefix_only: StrictBool | None = None
    language: StrictStr | None = None
    pattern: StrictStr | None = None

    def build(self) -> ConfigDocument:
        return build_tokenizer(
            self.name,
            min_gram=self.min_gram,
            max_gram=self.max_gram,
            prefix_only=self.prefix_only,
            language=self.language,
            pattern=self.pattern,
        )


class TokenizerDocument(BaseModel):
    """An already built tokenizer document, checked against the keys the engine knows."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: StrictStr
    min_gram: StrictInt | None = None
    max_gram: StrictInt | None = None
    prefix_only: StrictBool | None = None
    language: StrictStr | None = None
    pattern: StrictStr | None = None

    def build(self) -> ConfigDocument:
        return build_tokenizer(
            self.type,
            min_gram=self.min_gram,
            max_gram=self.max_gram,
            prefix_only=self.prefix_only,
            language=self.language,
            pattern=self.pattern,
        )


class FieldDeclaration(BaseModel):
    """Typed field declaration.

    ``tokenizer`` takes either a tokenizer declaration (keyed by ``name``) or an
    already built tokenizer document (keyed by ``type``). Both are held to the
    same keys and types before the document is embedded.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: StrictStr
    indexed: StrictBool | None = None
    stored: StrictBool | None = None
    fast: StrictBool | None = None
    fieldnorms: StrictBool | None = None
    record: StrictStr | None = None
    expand_dots: StrictBool | None = None
    tokenizer: Annotated[
        TokenizerDeclaration | TokenizerDocument | None,
        Field(default=None, union_mode="left_to_right"),
    ]
    normalizer: StrictStr | None = None

    def build(self) -> ConfigDocument:
        tokenizer = self.tokenizer.build() if self.tokenizer is not None else None
        return build_field(
            self.name,
            indexed=self.indexed,
            stored=self.stored,
            fast=self.fast,
            fieldnorms=self.fieldnorms,
            record=self.record,
            expand_dots=self.expand_dots,
            tokenizer=tokenizer,
            normalizer=self.normalizer,
        )


def _format_errors(label: str, exc: ValidationError) -> str:
    parts = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return f"Invalid {label} declaration: " + "; ".join(parts)


def validate_declaration(model: type[ModelT], data: Mapping[str, Any] | str | bytes, label: str) -> ModelT:
    """Validate a mapping or JSON text against a declaration model.

    Raises:
        ConfigDeclarationError: If the data is not valid JSON or fails validation.
    """
    if isinstance(data, (str, bytes)):
        data = loads(data)
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        message = _format_errors(label, exc)
        logger.warning("Rejected %s declaration", label, extra={"error_count": exc.error_count()})
        raise ConfigDeclarationError(message, errors=exc.errors(include_url=False)) from exc


def declare_tokenizer(data: Mapping[str, Any] | str | bytes) -> ConfigDocument:
    """Validate a tokenizer declaration and build its document."""
    return validate_declaration(TokenizerDeclaration, data, "tokenizer").build()


def declare_field(data: Mapping[str, Any] | str | bytes) -> ConfigDocument:
    """Validate a field declaration and build its document."""
    return validate_declaration(FieldDeclaration, data, "field").build()
