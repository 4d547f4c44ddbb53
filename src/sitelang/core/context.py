"""Language context assembly for language switchers and hreflang links.

Combines page detection and URL mapping with per-language display
metadata. Assembly never fails on data conditions: a page that cannot be
mapped falls back to the normal-page mapping of the current path.
"""

import logging
from dataclasses import dataclass
from typing import Any

from sitelang.core.articles import Article
from sitelang.core.detection import PageDetectionManager
from sitelang.core.mappers import UrlMapping
from sitelang.core.pages import NormalPageInfo, PageInfo, PageKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LanguageLink:
    """Language switcher entry."""

    code: str
    url: str
    is_active: bool
    label: str
    flag: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "url": self.url,
            "is_active": self.is_active,
            "label": self.label,
            "flag": self.flag,
        }


@dataclass(frozen=True)
class HreflangLink:
    """SEO alternate link."""

    hreflang: str
    href: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"hreflang": self.hreflang, "href": self.href}


@dataclass(frozen=True)
class LanguageContext:
    """Everything header rendering needs to switch languages."""

    page: PageInfo
    current_lang: str
    url_mapping: UrlMapping
    links: list[LanguageLink]
    using_fallback: bool = False

    @property
    def kind(self) -> PageKind:
        return self.page.kind

    def hreflang_links(self, base_url: str = "") -> list[HreflangLink]:
        return build_hreflang_links(self.links, base_url)

    def to_dict(self, base_url: str = "") -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "page": self.page.to_dict(),
            "current_lang": self.current_lang,
            "using_fallback": self.using_fallback,
            "languages": [link.to_dict() for link in self.links],
            "hreflang": [link.to_dict() for link in self.hreflang_links(base_url)],
        }


def assemble_language_context(
    manager: PageDetectionManager,
    path: str,
    articles: list[Article] | None = None,
) -> LanguageContext:
    """Analyze a path and build its language switcher data.

    Args:
        manager: Detection manager for the site
        path: Request path
        articles: Content listing used to link article translations

    Returns:
        LanguageContext with one link per supported language

    Raises:
        UnsupportedLanguageError: If the content listing references an
                                  unsupported language
    """
    languages = manager.settings.languages
    analyzed = manager.analyze_page(path, articles)

    using_fallback = False
    if analyzed is None:
        page: PageInfo = NormalPageInfo(detected_lang=languages.lang_from_path(path))
        url_mapping = None
    else:
        page = analyzed.info
        url_mapping = analyzed.url_mapping

    if url_mapping is None:
        logger.debug(f"No {page.kind} mapping for {path}, using normal page mapping")
        using_fallback = True
        url_mapping = manager.create_url_mapping(
            NormalPageInfo(detected_lang=page.detected_lang), path
        ) or {}

    current_lang = page.detected_lang or languages.lang_from_path(path)

    links = []
    for language in languages:
        links.append(
            LanguageLink(
                code=language.code,
                url=url_mapping.get(language.code) or "/",
                is_active=language.code == current_lang,
                label=language.label,
                flag=language.flag,
            )
        )

    return LanguageContext(
        page=page,
        current_lang=current_lang,
        url_mapping={link.code: link.url for link in links},
        links=links,
        using_fallback=using_fallback,
    )


def build_hreflang_links(links: list[LanguageLink], base_url: str = "") -> list[HreflangLink]:
    """Build hreflang alternates from language switcher links.

    Args:
        links: Language links, one per supported language
        base_url: Absolute site URL prefixed to every path (e.g., "https://example.com")
    """
    base = base_url.rstrip("/")
    return [HreflangLink(hreflang=link.code, href=f"{base}{link.url}") for link in links]
