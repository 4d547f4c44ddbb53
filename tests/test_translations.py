"""Tests for translation lookup helpers."""

from sitelang.core.translations import (
    TranslationTable,
    available_names,
    find_key,
    translate_key,
)


class TestTranslationTable:
    """Tests for TranslationTable and lookup helpers."""

    def test__for_language__unknown_language__empty(self) -> None:
        table = TranslationTable({"en": {"guide": "Guide"}})

        assert table.for_language("fr") == {}
        assert table.languages() == ["en"]

    def test__available_names__skips_empty_values(self) -> None:
        table = TranslationTable({"en": {"guide": "Guide", "draft": ""}})

        assert available_names(table, "en") == ["Guide"]

    def test__translate_key__missing_key__returns_none(self) -> None:
        table = TranslationTable({"en": {"guide": "Guide"}, "fr": {}})

        assert translate_key(table, "en", "guide") == "Guide"
        assert translate_key(table, "fr", "guide") is None

    def test__translate_key__empty_value__returns_none(self) -> None:
        """An empty value counts as no translation."""
        table = TranslationTable({"fr": {"guide": ""}})

        assert translate_key(table, "fr", "guide") is None

    def test__find_key__reverse_lookup(self) -> None:
        table = TranslationTable({"fr": {"bestPractices": "Bonnes Pratiques"}})

        assert find_key(table, "fr", "Bonnes Pratiques") == "bestPractices"
        assert find_key(table, "fr", "Best Practices") is None
        assert find_key(table, "en", "Bonnes Pratiques") is None
