"""Translation lookup for category and tag display names.

Dictionaries map an internal key (e.g., "bestPractices") to the display
name in one language (e.g., "Bonnes Pratiques"). Languages do not
necessarily share the same key set, so every cross-language lookup has to
expect a missing key or an empty value.
"""

from collections.abc import Mapping
from typing import Protocol


class TranslationLookup(Protocol):
    """Per-language key to display name lookup."""

    def for_language(self, lang: str) -> Mapping[str, str]: ...


class TranslationTable:
    """Dictionary-backed translation lookup.

    Languages missing from the table behave as empty dictionaries.
    """

    __slots__ = ("_tables",)

    def __init__(self, tables: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self._tables = {lang: dict(table) for lang, table in (tables or {}).items()}

    def for_language(self, lang: str) -> Mapping[str, str]:
        return self._tables.get(lang, {})

    def languages(self) -> list[str]:
        return list(self._tables)


def available_names(lookup: TranslationLookup, lang: str) -> list[str]:
    """Display names available in a language."""
    return [value for value in lookup.for_language(lang).values() if value]


def translate_key(lookup: TranslationLookup, lang: str, key: str) -> str | None:
    """Display name of key in lang.

    Returns None when the key is absent or its value is empty.
    """
    return lookup.for_language(lang).get(key) or None


def find_key(lookup: TranslationLookup, lang: str, name: str) -> str | None:
    """Reverse lookup of the key whose display name in lang is name."""
    for key, value in lookup.for_language(lang).items():
        if value == name:
            return key
    return None
