"""Errors raised at the declaration boundary."""

from __future__ import annotations

from typing import Any


class ConfigDeclarationError(ValueError):
    """A field or tokenizer declaration could not be accepted.

    Raised before any document is built: the builders themselves never raise.
    ``errors`` carries the structured validation errors when they exist.
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []
