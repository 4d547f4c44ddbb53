"""Page detectors, one per page kind.

Each detector recognizes the path shape of its kind and extracts the
kind-local identifying data. Kind and language detection are independent:
an article with an unknown language segment is still an article.
"""

import logging
from typing import Protocol

from sitelang.core.pages import (
    ArticlePageInfo,
    CategoryPageInfo,
    NormalPageInfo,
    PageInfo,
    PageKind,
    TagPageInfo,
)
from sitelang.core.paths import split_segments
from sitelang.core.routing import SiteSettings
from sitelang.core.slugs import denormalize
from sitelang.core.translations import available_names

logger = logging.getLogger(__name__)


class PageDetector(Protocol):
    """Recognizes one page kind from a request path."""

    @property
    def kind(self) -> PageKind: ...

    def is_page_kind(self, path: str) -> bool: ...

    def extract_page_info(self, path: str) -> PageInfo | None: ...

    def detect_language(self, path: str) -> str | None: ...


class ArticleDetector:
    """Detects /blog/{lang}/{slug...} behind an optional site-language prefix."""

    kind = PageKind.ARTICLE

    def __init__(self, settings: SiteSettings) -> None:
        self._settings = settings

    def is_page_kind(self, path: str) -> bool:
        return self._article_segments(path) is not None

    def extract_page_info(self, path: str) -> ArticlePageInfo | None:
        segments = self._article_segments(path)
        if segments is None:
            return None

        slug = "/".join(segments[1:])
        return ArticlePageInfo(detected_lang=self.detect_language(path), slug=slug)

    def detect_language(self, path: str) -> str | None:
        """Language embedded as the first segment after the blog root."""
        segments = self._article_segments(path)
        if segments is None:
            return None

        article_lang = segments[0]
        if self._settings.languages.is_supported(article_lang):
            return article_lang
        return None

    def _article_segments(self, path: str) -> list[str] | None:
        """Segments after the blog root: [article_lang, *slug_parts]."""
        segments = split_segments(self._settings.languages.path_without_lang(path))
        if len(segments) >= 3 and segments[0] == self._settings.routes.blog_root:
            return segments[1:]
        return None


class CategoryDetector:
    """Detects /{category_root}/{token} and /{lang}/{category_root[lang]}/{token}."""

    kind = PageKind.CATEGORY

    def __init__(self, settings: SiteSettings) -> None:
        self._settings = settings

    def is_page_kind(self, path: str) -> bool:
        return self._match(path) is not None

    def extract_page_info(self, path: str) -> CategoryPageInfo | None:
        match = self._match(path)
        if match is None:
            return None

        lang, token = match
        name = denormalize(token, available_names(self._settings.categories, lang))
        if name is None:
            logger.debug(f"Category token {token!r} matches no {lang} category")
            return None

        return CategoryPageInfo(detected_lang=lang, name=name)

    def detect_language(self, path: str) -> str | None:
        match = self._match(path)
        return match[0] if match is not None else None

    def _match(self, path: str) -> tuple[str, str] | None:
        """Return (lang, token) when the path has a category shape."""
        settings = self._settings
        segments = split_segments(path)

        default = settings.languages.default
        if len(segments) == 2 and segments[0] == settings.category_root(default):
            return default, segments[1]

        if (
            len(segments) == 3
            and segments[0] in settings.languages.prefixed_codes
            and segments[1] == settings.category_root(segments[0])
        ):
            return segments[0], segments[2]

        return None


class TagDetector:
    """Detects /{tag_root}/{token} and /{lang}/{tag_root}/{token}.

    Unlike the category root, the tag root segment is not localized.
    """

    kind = PageKind.TAG

    def __init__(self, settings: SiteSettings) -> None:
        self._settings = settings

    def is_page_kind(self, path: str) -> bool:
        return self._match(path) is not None

    def extract_page_info(self, path: str) -> TagPageInfo | None:
        match = self._match(path)
        if match is None:
            return None

        lang, token = match
        name = denormalize(token, available_names(self._settings.tags, lang))
        if name is None:
            logger.debug(f"Tag token {token!r} matches no {lang} tag")
            return None

        return TagPageInfo(detected_lang=lang, name=name)

    def detect_language(self, path: str) -> str | None:
        match = self._match(path)
        return match[0] if match is not None else None

    def _match(self, path: str) -> tuple[str, str] | None:
        settings = self._settings
        segments = split_segments(path)
        tag_root = settings.routes.tag_root

        if len(segments) == 2 and segments[0] == tag_root:
            return settings.languages.default, segments[1]

        if (
            len(segments) == 3
            and segments[0] in settings.languages.prefixed_codes
            and segments[1] == tag_root
        ):
            return segments[0], segments[2]

        return None


class NormalDetector:
    """Fallback detector accepting every path.

    Must be the last detector of a chain since it shadows all others.
    """

    kind = PageKind.NORMAL

    def __init__(self, settings: SiteSettings) -> None:
        self._settings = settings

    def is_page_kind(self, path: str) -> bool:
        return True

    def extract_page_info(self, path: str) -> NormalPageInfo:
        return NormalPageInfo(detected_lang=self.detect_language(path))

    def detect_language(self, path: str) -> str:
        return self._settings.languages.lang_from_path(path)
