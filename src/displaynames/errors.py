"""Exceptions raised while loading and normalizing CLDR display names."""

from __future__ import annotations


class DisplayNamesError(Exception):
    """Base class for extraction failures."""


class MissingRequiredFieldError(DisplayNamesError):
    """A source record lacks a field the output schema cannot do without."""

    def __init__(self, locale: str, key: str, field: str, category: str = "currency") -> None:
        self.locale = locale
        self.key = key
        self.field = field
        self.category = category
        super().__init__(f"{field} does not exist for {category} {key} of locale {locale}.")


class InvalidLocaleIdentifierError(DisplayNamesError, ValueError):
    """A candidate locale string is not a well-formed BCP-47 tag."""

    def __init__(self, candidate: str) -> None:
        self.candidate = candidate
        super().__init__(f"Invalid locale {candidate!r}")


MissingFieldError = MissingRequiredFieldError


__all__ = [
    "DisplayNamesError",
    "InvalidLocaleIdentifierError",
    "MissingFieldError",
    "MissingRequiredFieldError",
]
