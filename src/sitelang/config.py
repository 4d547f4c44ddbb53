"""Configuration management for sitelang.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from sitelang.core.languages import DEFAULT_FLAG, Language, LanguageSet
from sitelang.core.routing import Routes, SiteSettings
from sitelang.core.translations import TranslationTable

CONFIG_FILENAME = "sitelang.toml"
PRODUCTION = "production"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class SiteConfig:
    """Public site configuration."""

    base_url: str = ""


@dataclass
class I18nConfig:
    """Supported languages configuration."""

    languages: list[Language] = field(
        default_factory=lambda: [
            Language(code="en", label="English", flag="🇺🇸"),
            Language(code="fr", label="Français", flag="🇫🇷"),
        ]
    )
    default_language: str = "en"


@dataclass
class RoutesConfig:
    """Route segment names."""

    blog_root: str = "blog"
    tag_root: str = "tag"
    category_roots: dict[str, str] = field(
        default_factory=lambda: {"en": "category", "fr": "categorie"}
    )


@dataclass
class TranslationsConfig:
    """Category and tag dictionaries, keyed by language then internal key."""

    categories: dict[str, dict[str, str]] = field(default_factory=dict)
    tags: dict[str, dict[str, str]] = field(default_factory=dict)


@dataclass
class ContentConfig:
    """Content listing configuration."""

    articles_file: Path | None = None


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    site: SiteConfig
    i18n: I18nConfig
    routes: RoutesConfig
    translations: TranslationsConfig
    content: ContentConfig
    environment: str = "development"
    config_path: Path | None = None

    @property
    def is_production(self) -> bool:
        return self.environment == PRODUCTION

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for sitelang.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> "Config":
        """Create config with all defaults."""
        return cls(
            server=ServerConfig(),
            site=SiteConfig(),
            i18n=I18nConfig(),
            routes=RoutesConfig(),
            translations=TranslationsConfig(),
            content=ContentConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        if not isinstance(data, dict):
            raise ValueError("Configuration must be a dictionary")

        environment = data.get("environment", "development")
        if not isinstance(environment, str):
            raise ValueError("environment must be a string")

        i18n = cls._parse_i18n(data.get("i18n"))

        return cls(
            server=cls._parse_server(data.get("server")),
            site=cls._parse_site(data.get("site")),
            i18n=i18n,
            routes=cls._parse_routes(data.get("routes"), i18n),
            translations=cls._parse_translations(data.get("translations"), i18n),
            content=cls._parse_content(data.get("content"), path.parent),
            environment=environment,
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section."""
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_site(cls, data: object) -> SiteConfig:
        """Parse site configuration section."""
        if data is None:
            return SiteConfig()

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        base_url = data.get("base_url", "")
        if not isinstance(base_url, str):
            raise ValueError("site.base_url must be a string")

        return SiteConfig(base_url=base_url.rstrip("/"))

    @classmethod
    def _parse_i18n(cls, data: object) -> I18nConfig:
        """Parse i18n configuration section.

        The languages list, when present, replaces the default languages.
        """
        if data is None:
            return I18nConfig()

        if not isinstance(data, dict):
            raise ValueError("i18n section must be a dictionary")

        defaults = I18nConfig()
        languages = defaults.languages
        languages_raw = data.get("languages")
        if languages_raw is not None:
            if not isinstance(languages_raw, list) or not languages_raw:
                raise ValueError("i18n.languages must be a non-empty list")
            languages = [cls._parse_language(item) for item in languages_raw]

        default_language = data.get("default_language", languages[0].code)
        if not isinstance(default_language, str):
            raise ValueError("i18n.default_language must be a string")

        # Validates uniqueness and default membership
        LanguageSet(languages, default_language)

        return I18nConfig(languages=languages, default_language=default_language)

    @classmethod
    def _parse_language(cls, data: object) -> Language:
        """Parse one [[i18n.languages]] entry."""
        if not isinstance(data, dict):
            raise ValueError("i18n.languages items must be tables")

        code = data.get("code")
        if not isinstance(code, str) or not code:
            raise ValueError("i18n.languages.code must be a non-empty string")

        label = data.get("label", code)
        if not isinstance(label, str):
            raise ValueError("i18n.languages.label must be a string")

        flag = data.get("flag", DEFAULT_FLAG)
        if not isinstance(flag, str):
            raise ValueError("i18n.languages.flag must be a string")

        return Language(code=code, label=label, flag=flag)

    @classmethod
    def _parse_routes(cls, data: object, i18n: I18nConfig) -> RoutesConfig:
        """Parse routes configuration section.

        Languages without a category root use the default language's root.

        Raises:
            UnsupportedLanguageError: If a category root names a language
                                      outside i18n.languages
        """
        defaults = RoutesConfig()
        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ValueError("routes section must be a dictionary")

        blog_root = data.get("blog_root", defaults.blog_root)
        if not isinstance(blog_root, str) or not blog_root:
            raise ValueError("routes.blog_root must be a non-empty string")

        tag_root = data.get("tag_root", defaults.tag_root)
        if not isinstance(tag_root, str) or not tag_root:
            raise ValueError("routes.tag_root must be a non-empty string")

        roots_raw = data.get("category_roots")
        if roots_raw is None:
            roots_raw = defaults.category_roots
        else:
            if not isinstance(roots_raw, dict):
                raise ValueError("routes.category_roots must be a dictionary")
            for lang, root in roots_raw.items():
                if not isinstance(root, str) or not root:
                    raise ValueError(f"routes.category_roots.{lang} must be a non-empty string")
            cls._language_set(i18n).validate(roots_raw)

        codes = [language.code for language in i18n.languages]
        fallback_root = roots_raw.get(i18n.default_language, "category")
        category_roots = {code: roots_raw.get(code, fallback_root) for code in codes}

        return RoutesConfig(
            blog_root=blog_root,
            tag_root=tag_root,
            category_roots=category_roots,
        )

    @classmethod
    def _parse_translations(cls, data: object, i18n: I18nConfig) -> TranslationsConfig:
        """Parse translations configuration section.

        Raises:
            UnsupportedLanguageError: If a dictionary is keyed by a language
                                      outside i18n.languages
        """
        if data is None:
            return TranslationsConfig()

        if not isinstance(data, dict):
            raise ValueError("translations section must be a dictionary")

        categories = cls._parse_dictionaries(data.get("categories"), "categories")
        tags = cls._parse_dictionaries(data.get("tags"), "tags")

        language_set = cls._language_set(i18n)
        for tables in (categories, tags):
            language_set.validate(TranslationTable(tables).languages())

        return TranslationsConfig(categories=categories, tags=tags)

    @classmethod
    def _language_set(cls, i18n: I18nConfig) -> LanguageSet:
        return LanguageSet(i18n.languages, i18n.default_language)

    @classmethod
    def _parse_dictionaries(cls, data: object, name: str) -> dict[str, dict[str, str]]:
        """Parse a translations.<name> table of per-language dictionaries."""
        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ValueError(f"translations.{name} must be a dictionary")

        result: dict[str, dict[str, str]] = {}
        for lang, table in data.items():
            if not isinstance(table, dict):
                raise ValueError(f"translations.{name}.{lang} must be a dictionary")
            for key, value in table.items():
                if not isinstance(value, str):
                    raise ValueError(f"translations.{name}.{lang}.{key} must be a string")
            result[lang] = dict(table)
        return result

    @classmethod
    def _parse_content(cls, data: object, config_dir: Path) -> ContentConfig:
        """Parse content configuration section.

        Args:
            data: Raw content section data
            config_dir: Directory containing config file (for relative paths)
        """
        if data is None:
            return ContentConfig()

        if not isinstance(data, dict):
            raise ValueError("content section must be a dictionary")

        articles_file = data.get("articles_file")
        if articles_file is None:
            return ContentConfig()
        if not isinstance(articles_file, str):
            raise ValueError("content.articles_file must be a string")

        return ContentConfig(articles_file=config_dir / articles_file)

    def to_settings(self) -> SiteSettings:
        """Build the read-only settings used by detectors and mappers."""
        return SiteSettings(
            languages=LanguageSet(self.i18n.languages, self.i18n.default_language),
            routes=Routes(
                blog_root=self.routes.blog_root,
                tag_root=self.routes.tag_root,
                category_roots=dict(self.routes.category_roots),
            ),
            categories=TranslationTable(self.translations.categories),
            tags=TranslationTable(self.translations.tags),
            production=self.is_production,
        )

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        articles_file: Path | None = None,
        environment: str | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        content = self.content
        if articles_file is not None:
            content = replace(self.content, articles_file=articles_file)

        return replace(
            self,
            server=server,
            content=content,
            environment=environment if environment is not None else self.environment,
        )
