"""Article content listing and cross-language translation mappings.

Articles sharing a ``translation_id`` are translations of one another. The
translation mapping of an article gives, for every supported language, the
kind-local slug of the sibling in that language or None.

Content listing format (TOML):

    [[articles]]
    slug = "guide"
    lang = "en"
    translation_id = "getting-started"
    title = "Getting Started"
"""

import logging
import re
import tomllib
from dataclasses import dataclass
from pathlib import Path

from sitelang.core.languages import LanguageSet
from sitelang.core.paths import split_segments
from sitelang.core.routing import Routes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Article:
    """Content listing entry with a kind-local slug."""

    slug: str
    lang: str
    translation_id: str
    title: str | None = None


def extract_slug_without_language_prefix(full_slug: str, language: str) -> str | None:
    """Strip a leading "{language}/" from a content slug.

    Examples:
        ("en/rest-api-guide", "en") -> "rest-api-guide"
        ("rest-api-guide", "en") -> None
    """
    if not full_slug or not language:
        return None

    match = re.match(rf"^{re.escape(language)}/(.+)$", full_slug)
    return match.group(1) if match else None


def build_translation_mapping(
    path: str,
    articles: list[Article],
    languages: LanguageSet,
    routes: Routes | None = None,
) -> dict[str, str | None] | None:
    """Build the translation mapping of the article addressed by path.

    Args:
        path: Request path, optionally prefixed with a site language
        articles: Every known article, in any language
        languages: Supported languages
        routes: Route shapes (defaults to Routes())

    Returns:
        Mapping with one entry per supported language, or None when the path
        is not an article path or the article is not in the listing

    Raises:
        UnsupportedLanguageError: If a related article uses an unsupported language
    """
    blog_root = (routes or Routes()).blog_root
    segments = split_segments(languages.path_without_lang(path))
    if len(segments) < 3 or segments[0] != blog_root:
        return None

    article_lang = segments[1]
    slug = "/".join(segments[2:])

    current = next(
        (a for a in articles if a.lang == article_lang and a.slug == slug),
        None,
    )
    if current is None:
        logger.debug(f"No article {article_lang}/{slug} in content listing")
        return None

    related = [a for a in articles if a.translation_id == current.translation_id]
    languages.validate(a.lang for a in related)

    mapping: dict[str, str | None] = dict.fromkeys(languages.codes)
    for article in related:
        mapping[article.lang] = article.slug
    return mapping


def load_articles(path: Path) -> list[Article]:
    """Load the content listing from a TOML file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the listing is malformed
    """
    if not path.exists():
        raise FileNotFoundError(f"Content listing not found: {path}")

    with path.open("rb") as f:
        data = tomllib.load(f)

    entries = data.get("articles", [])
    if not isinstance(entries, list):
        raise ValueError("articles must be a list of tables")

    return [_parse_article(entry, i) for i, entry in enumerate(entries)]


def _parse_article(entry: object, index: int) -> Article:
    if not isinstance(entry, dict):
        raise ValueError(f"articles[{index}] must be a table")

    values: dict[str, str] = {}
    for key in ("slug", "lang", "translation_id"):
        value = entry.get(key)
        if not isinstance(value, str) or not value:
            raise ValueError(f"articles[{index}].{key} must be a non-empty string")
        values[key] = value

    title = entry.get("title")
    if title is not None and not isinstance(title, str):
        raise ValueError(f"articles[{index}].title must be a string")

    slug = values["slug"]
    # Content slugs may still carry their language directory ("en/guide")
    slug = extract_slug_without_language_prefix(slug, values["lang"]) or slug

    return Article(
        slug=slug,
        lang=values["lang"],
        translation_id=values["translation_id"],
        title=title,
    )
