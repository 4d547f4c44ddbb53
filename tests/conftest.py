"""Shared test fixtures."""

from pathlib import Path

import pytest
from sitelang.config import (
    Config,
    ContentConfig,
    I18nConfig,
    RoutesConfig,
    ServerConfig,
    SiteConfig,
    TranslationsConfig,
)
from sitelang.core.detection import PageDetectionManager
from sitelang.core.languages import Language, LanguageSet
from sitelang.core.routing import Routes, SiteSettings
from sitelang.core.translations import TranslationTable

CATEGORIES = {
    "en": {
        "framework": "Framework",
        "language": "Language",
        "performance": "Performance",
        "styling": "Styling",
        "backend": "Backend",
        "article": "Article",
    },
    "fr": {
        "framework": "Framework",
        "language": "Langage",
        "performance": "Performance",
        "styling": "Style",
        "backend": "Backend",
        "article": "Article",
    },
}

TAGS = {
    "en": {
        "guide": "Guide",
        "optimization": "Optimization",
        "bestPractices": "Best Practices",
        "comparison": "Comparison",
    },
    "fr": {
        "guide": "Guide",
        "optimization": "Optimisation",
        "bestPractices": "Bonnes Pratiques",
        "comparison": "Comparaison",
    },
}


@pytest.fixture
def languages() -> LanguageSet:
    return LanguageSet(
        [
            Language(code="en", label="English", flag="🇺🇸"),
            Language(code="fr", label="Français", flag="🇫🇷"),
        ],
        default="en",
    )


@pytest.fixture
def settings(languages: LanguageSet) -> SiteSettings:
    """Site settings with the sample category and tag dictionaries."""
    return SiteSettings(
        languages=languages,
        routes=Routes(),
        categories=TranslationTable(CATEGORIES),
        tags=TranslationTable(TAGS),
    )


@pytest.fixture
def manager(settings: SiteSettings) -> PageDetectionManager:
    return PageDetectionManager.create(settings)


@pytest.fixture
def articles_file(tmp_path: Path) -> Path:
    """Write a content listing with one translated and one untranslated article."""
    path = tmp_path / "articles.toml"
    path.write_text(
        """
[[articles]]
slug = "rest-api-guide"
lang = "en"
translation_id = "rest-api"

[[articles]]
slug = "guide-api-rest"
lang = "fr"
translation_id = "rest-api"

[[articles]]
slug = "guide"
lang = "en"
translation_id = "guide"
""",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def test_config(articles_file: Path) -> Config:
    """Create a test configuration with sample dictionaries and content listing."""
    return Config(
        server=ServerConfig(),
        site=SiteConfig(base_url="https://example.com"),
        i18n=I18nConfig(),
        routes=RoutesConfig(),
        translations=TranslationsConfig(categories=CATEGORIES, tags=TAGS),
        content=ContentConfig(articles_file=articles_file),
    )
