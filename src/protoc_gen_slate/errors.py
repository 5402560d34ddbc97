"""Exceptions raised by the documentation pipeline."""

from __future__ import annotations


class SlateError(RuntimeError):
    """Base class for fatal documentation generation errors."""


class ConfigError(SlateError):
    """Raised when the plugin options cannot be understood."""


class UnknownLanguageError(ConfigError):
    """Raised when a configured language has no registered example synthesizer."""

    def __init__(self, languages: list[str]) -> None:
        self.languages = languages
        names = ", ".join(f"'{name}'" for name in languages)
        super().__init__(f"unknown language(s): {names}")


class SourceReadError(SlateError):
    """Raised when the verbatim schema source of a file cannot be read."""


class SerializationError(SlateError):
    """Raised when the index front matter cannot be encoded."""


class SchemaError(SlateError):
    """Raised when the descriptor input cannot be decoded."""
