"""Page kinds and per-kind page information.

PageInfo is a closed union of frozen dataclasses discriminated by ``kind``.
Names and slugs are kind-local: they never include the language prefix or
the list-root segment that identifies the page kind.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar


class PageKind(StrEnum):
    """Logical page kinds recognized by the detection chain."""

    ARTICLE = "article"
    CATEGORY = "category"
    TAG = "tag"
    NORMAL = "normal"


@dataclass(frozen=True)
class ArticlePageInfo:
    """Article page: /blog/{lang}/{slug...}."""

    kind: ClassVar[PageKind] = PageKind.ARTICLE

    detected_lang: str | None
    slug: str
    translation_mapping: dict[str, str | None] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "kind": str(self.kind),
            "detected_lang": self.detected_lang,
            "slug": self.slug,
        }
        if self.translation_mapping is not None:
            result["translation_mapping"] = dict(self.translation_mapping)
        return result


@dataclass(frozen=True)
class CategoryPageInfo:
    """Category page carrying the display name in the detected language."""

    kind: ClassVar[PageKind] = PageKind.CATEGORY

    detected_lang: str | None
    name: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"kind": str(self.kind), "detected_lang": self.detected_lang, "name": self.name}


@dataclass(frozen=True)
class TagPageInfo:
    """Tag page carrying the display name in the detected language."""

    kind: ClassVar[PageKind] = PageKind.TAG

    detected_lang: str | None
    name: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"kind": str(self.kind), "detected_lang": self.detected_lang, "name": self.name}


@dataclass(frozen=True)
class NormalPageInfo:
    """Any other page."""

    kind: ClassVar[PageKind] = PageKind.NORMAL

    detected_lang: str | None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"kind": str(self.kind), "detected_lang": self.detected_lang}


PageInfo = ArticlePageInfo | CategoryPageInfo | TagPageInfo | NormalPageInfo


@dataclass(frozen=True)
class PageDetection:
    """Result of running the detection chain on a path."""

    kind: PageKind
    info: PageInfo
