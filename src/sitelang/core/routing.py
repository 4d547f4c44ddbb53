"""Route shapes and the settings bundle shared by detectors and mappers.

Path shapes:
    /{blog_root}/{article_lang}/{slug...}      article (any site prefix)
    /{category_root}/{token}                   category, default language
    /{lang}/{category_root[lang]}/{token}      category, other languages
    /{tag_root}/{token}                        tag, default language
    /{lang}/{tag_root}/{token}                 tag, other languages
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from sitelang.core.languages import LanguageSet
from sitelang.core.paths import join_segments
from sitelang.core.translations import TranslationLookup, TranslationTable

DEFAULT_CATEGORY_ROOT = "category"


@dataclass(frozen=True)
class Routes:
    """List-root segment names per page kind."""

    blog_root: str = "blog"
    tag_root: str = "tag"
    category_roots: Mapping[str, str] = field(
        default_factory=lambda: {"en": "category", "fr": "categorie"}
    )


@dataclass(frozen=True)
class SiteSettings:
    """Read-only site data injected into detectors and mappers."""

    languages: LanguageSet
    routes: Routes = field(default_factory=Routes)
    categories: TranslationLookup = field(default_factory=TranslationTable)
    tags: TranslationLookup = field(default_factory=TranslationTable)
    production: bool = False

    def category_root(self, lang: str) -> str:
        """Localized category list-root segment, default language's as fallback."""
        roots = self.routes.category_roots
        return roots.get(lang) or roots.get(self.languages.default) or DEFAULT_CATEGORY_ROOT

    def category_path(self, lang: str, token: str) -> str:
        return self.languages.localize_path(
            join_segments(self.category_root(lang), token), lang
        )

    def tag_path(self, lang: str, token: str) -> str:
        return self.languages.localize_path(join_segments(self.routes.tag_root, token), lang)

    def article_path(self, lang: str, slug: str) -> str:
        return join_segments(self.routes.blog_root, lang, slug)
