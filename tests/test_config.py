"""Tests for configuration loading."""

from pathlib import Path
from unittest.mock import patch

import pytest
from sitelang.config import Config, ContentConfig, ServerConfig
from sitelang.core.languages import Language, UnsupportedLanguageError


class TestConfigLoad:
    """Tests for Config.load()."""

    def test__explicit_path__loads_config(self, tmp_path: Path) -> None:
        """Load config from explicit path."""
        config_file = tmp_path / "sitelang.toml"
        config_file.write_text(
            """
environment = "production"

[server]
host = "0.0.0.0"
port = 3000

[site]
base_url = "https://example.com/"

[i18n]
default_language = "fr"

[[i18n.languages]]
code = "fr"
label = "Français"
flag = "🇫🇷"

[[i18n.languages]]
code = "en"
label = "English"

[routes]
blog_root = "posts"
tag_root = "tags"
category_roots = { fr = "categorie", en = "category" }

[translations.categories.en]
language = "Language"

[translations.categories.fr]
language = "Langage"

[translations.tags.en]
guide = "Guide"

[content]
articles_file = "content/articles.toml"
""",
            encoding="utf-8",
        )

        config = Config.load(config_file)

        assert config.environment == "production"
        assert config.is_production
        assert config.server.host == "0.0.0.0"
        assert config.server.port == 3000
        assert config.site.base_url == "https://example.com"
        assert config.i18n.default_language == "fr"
        assert config.i18n.languages == [
            Language(code="fr", label="Français", flag="🇫🇷"),
            Language(code="en", label="English"),
        ]
        assert config.routes.blog_root == "posts"
        assert config.routes.tag_root == "tags"
        assert config.routes.category_roots == {"fr": "categorie", "en": "category"}
        assert config.translations.categories == {
            "en": {"language": "Language"},
            "fr": {"language": "Langage"},
        }
        assert config.translations.tags == {"en": {"guide": "Guide"}}
        assert config.content.articles_file == tmp_path / "content" / "articles.toml"
        assert config.config_path == config_file

    def test__minimal_config__uses_defaults(self, tmp_path: Path) -> None:
        """Load minimal config with defaults."""
        config_file = tmp_path / "sitelang.toml"
        config_file.write_text("")

        config = Config.load(config_file)

        assert config.environment == "development"
        assert not config.is_production
        assert config.server.host == "127.0.0.1"
        assert config.server.port == 8080
        assert config.site.base_url == ""
        assert [language.code for language in config.i18n.languages] == ["en", "fr"]
        assert config.i18n.default_language == "en"
        assert config.routes.category_roots == {"en": "category", "fr": "categorie"}
        assert config.translations.categories == {}
        assert config.content.articles_file is None

    def test__missing_explicit_path__raises_error(self, tmp_path: Path) -> None:
        """Raise FileNotFoundError for missing explicit path."""
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            Config.load(tmp_path / "missing.toml")

    def test__no_config_found__returns_defaults(self) -> None:
        """Return default config when no file is discovered."""
        with patch.object(Config, "_discover_config", return_value=None):
            config = Config.load()

        assert config.config_path is None
        assert config.server.port == 8080
        assert config.i18n.default_language == "en"

    def test__missing_category_root__uses_default_language_root(self, tmp_path: Path) -> None:
        """Languages without a category root share the default language's root."""
        config_file = tmp_path / "sitelang.toml"
        config_file.write_text(
            """
[[i18n.languages]]
code = "en"
label = "English"

[[i18n.languages]]
code = "es"
label = "Español"

[routes]
category_roots = { en = "topics" }
""",
            encoding="utf-8",
        )

        config = Config.load(config_file)

        assert config.routes.category_roots == {"en": "topics", "es": "topics"}


class TestConfigDiscovery:
    """Tests for config file auto-discovery."""

    def test__config_in_cwd__discovered(self, tmp_path: Path) -> None:
        config_file = tmp_path / "sitelang.toml"
        config_file.write_text("[server]\nport = 9000\n")

        with patch("pathlib.Path.cwd", return_value=tmp_path):
            config = Config.load()

        assert config.config_path == config_file
        assert config.server.port == 9000

    def test__config_in_parent__discovered(self, tmp_path: Path) -> None:
        config_file = tmp_path / "sitelang.toml"
        config_file.write_text("")
        subdir = tmp_path / "a" / "b"
        subdir.mkdir(parents=True)

        with patch("pathlib.Path.cwd", return_value=subdir):
            config = Config.load()

        assert config.config_path == config_file


class TestConfigValidation:
    """Tests for configuration validation errors."""

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ('environment = 1', "environment must be a string"),
            ('server = "localhost"', "server section must be a dictionary"),
            ('[server]\nport = "8080"', "server.port must be an integer"),
            ('[server]\nhost = 1', "server.host must be a string"),
            ('[site]\nbase_url = 1', "site.base_url must be a string"),
            ('[i18n]\nlanguages = []', "i18n.languages must be a non-empty list"),
            ('[i18n]\nlanguages = ["en"]', "i18n.languages items must be tables"),
            ('[[i18n.languages]]\nlabel = "English"', "i18n.languages.code"),
            ('[i18n]\ndefault_language = 1', "i18n.default_language must be a string"),
            ('[routes]\nblog_root = ""', "routes.blog_root must be a non-empty string"),
            ('[routes]\ntag_root = 1', "routes.tag_root must be a non-empty string"),
            ('[routes]\ncategory_roots = "category"', "routes.category_roots must be a dictionary"),
            ('[routes.category_roots]\nfr = ""', "routes.category_roots.fr"),
            ('translations = 1', "translations section must be a dictionary"),
            ('[translations]\ncategories = 1', "translations.categories must be a dictionary"),
            ('[translations.tags]\nen = "Guide"', "translations.tags.en must be a dictionary"),
            ('[translations.tags.en]\nguide = 1', "translations.tags.en.guide must be a string"),
            ('[content]\narticles_file = 1', "content.articles_file must be a string"),
        ],
    )
    def test__invalid_value__raises_error(
        self, tmp_path: Path, content: str, message: str
    ) -> None:
        config_file = tmp_path / "sitelang.toml"
        config_file.write_text(content, encoding="utf-8")

        with pytest.raises(ValueError, match=message):
            Config.load(config_file)

    def test__duplicate_language__raises_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / "sitelang.toml"
        config_file.write_text(
            '[[i18n.languages]]\ncode = "en"\n\n[[i18n.languages]]\ncode = "en"\n',
            encoding="utf-8",
        )

        with pytest.raises(ValueError, match="Duplicate language code: en"):
            Config.load(config_file)

    def test__unknown_default_language__raises_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / "sitelang.toml"
        config_file.write_text('[i18n]\ndefault_language = "de"\n', encoding="utf-8")

        with pytest.raises(UnsupportedLanguageError, match="de"):
            Config.load(config_file)


    @pytest.mark.parametrize(
        "content",
        [
            '[translations.tags.de]\nguide = "Anleitung"\n',
            '[translations.categories.de]\nlanguage = "Sprache"\n',
            '[routes.category_roots]\nen = "category"\nde = "kategorie"\n',
        ],
    )
    def test__unsupported_language_key__raises_error(self, tmp_path: Path, content: str) -> None:
        """Dictionaries and category roots may only name supported languages."""
        config_file = tmp_path / "sitelang.toml"
        config_file.write_text(content, encoding="utf-8")

        with pytest.raises(UnsupportedLanguageError, match="de"):
            Config.load(config_file)

    def test__default_category_roots__follow_configured_languages(self, tmp_path: Path) -> None:
        """Built-in roots for dropped languages are not reported as errors."""
        config_file = tmp_path / "sitelang.toml"
        config_file.write_text(
            '[[i18n.languages]]\ncode = "en"\nlabel = "English"\n', encoding="utf-8"
        )

        config = Config.load(config_file)

        assert config.routes.category_roots == {"en": "category"}


class TestConfigToSettings:
    """Tests for Config.to_settings()."""

    def test__builds_site_settings(self, test_config: Config) -> None:
        settings = test_config.to_settings()

        assert settings.languages.codes == ["en", "fr"]
        assert settings.languages.default == "en"
        assert settings.category_root("fr") == "categorie"
        assert settings.categories.for_language("fr")["language"] == "Langage"
        assert settings.tags.for_language("en")["bestPractices"] == "Best Practices"
        assert not settings.production

    def test__production_environment__flags_settings(self, test_config: Config) -> None:
        config = test_config.with_overrides(environment="production")

        assert config.to_settings().production


class TestConfigWithOverrides:
    """Tests for Config.with_overrides()."""

    def test__overrides_applied(self, test_config: Config, tmp_path: Path) -> None:
        listing = tmp_path / "other.toml"

        config = test_config.with_overrides(host="0.0.0.0", port=9000, articles_file=listing)

        assert config.server == ServerConfig(host="0.0.0.0", port=9000)
        assert config.content == ContentConfig(articles_file=listing)

    def test__none_values__keep_existing(self, test_config: Config) -> None:
        config = test_config.with_overrides()

        assert config.server == test_config.server
        assert config.content == test_config.content
        assert config.environment == "development"

    def test__original_not_modified(self, test_config: Config) -> None:
        test_config.with_overrides(port=9000, environment="production")

        assert test_config.server.port == 8080
        assert test_config.environment == "development"
