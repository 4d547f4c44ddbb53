"""URL mappers, one per page kind.

A mapper turns page information into the equivalent path of the same
resource in every supported language. Successful mappings always contain
exactly one entry per supported language.

Fallback policies differ on purpose:
    category  no reverse key for the name -> whole mapping fails (None)
    tag       no key or no translation -> normalized name reused per language
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from sitelang.core.pages import (
    ArticlePageInfo,
    CategoryPageInfo,
    NormalPageInfo,
    PageInfo,
    PageKind,
    TagPageInfo,
)
from sitelang.core.routing import SiteSettings
from sitelang.core.slugs import normalize
from sitelang.core.translations import find_key, translate_key

logger = logging.getLogger(__name__)

UrlMapping = dict[str, str]


@dataclass(frozen=True)
class MappingContext:
    """Per-call data some mappers need besides the page information.

    Attributes:
        current_path: Request path with the site language prefix stripped
        translation_mapping: Article slug per language (articles only)
    """

    current_path: str | None = None
    translation_mapping: Mapping[str, str | None] | None = None


class UrlMapper(Protocol):
    """Builds the per-language paths of one page kind."""

    @property
    def kind(self) -> PageKind: ...

    def create_url_mapping(
        self,
        info: PageInfo,
        context: MappingContext | None = None,
    ) -> UrlMapping | None: ...


class ArticleMapper:
    """Maps articles through their translation mapping.

    Languages without a translation point to their home page, which is
    every language when the article language is unknown.
    """

    kind = PageKind.ARTICLE

    def __init__(self, settings: SiteSettings) -> None:
        self._settings = settings

    def create_url_mapping(
        self,
        info: PageInfo,
        context: MappingContext | None = None,
    ) -> UrlMapping | None:
        if not isinstance(info, ArticlePageInfo):
            return None

        languages = self._settings.languages
        translations = self._translation_mapping(info, context)
        languages.validate(translations)

        mapping: UrlMapping = {}
        for lang in languages.codes:
            slug = translations.get(lang)
            if slug:
                mapping[lang] = self._settings.article_path(lang, slug)
            else:
                mapping[lang] = languages.home_path(lang)
        return mapping

    def _translation_mapping(
        self,
        info: ArticlePageInfo,
        context: MappingContext | None,
    ) -> Mapping[str, str | None]:
        if context is not None and context.translation_mapping is not None:
            return context.translation_mapping
        if info.translation_mapping is not None:
            return info.translation_mapping

        # Without sibling data only the article's own language is known
        logger.debug(f"No translation mapping for article {info.slug!r}")
        if info.detected_lang is None:
            return {}
        return {info.detected_lang: info.slug}


class CategoryMapper:
    """Maps categories through the category dictionary key of their name."""

    kind = PageKind.CATEGORY

    def __init__(self, settings: SiteSettings) -> None:
        self._settings = settings

    def create_url_mapping(
        self,
        info: PageInfo,
        context: MappingContext | None = None,
    ) -> UrlMapping | None:
        if not isinstance(info, CategoryPageInfo):
            return None

        settings = self._settings
        source_lang = info.detected_lang or settings.languages.default

        key = find_key(settings.categories, source_lang, info.name)
        if key is None:
            logger.warning(f"Category {info.name!r} not found in {source_lang} translations")
            return None

        mapping: UrlMapping = {}
        for lang in settings.languages.codes:
            name = translate_key(settings.categories, lang, key)
            if name is None:
                logger.warning(f"Category key {key!r} has no {lang} translation")
                mapping[lang] = settings.languages.home_path(lang)
                continue
            mapping[lang] = settings.category_path(lang, normalize(name))
        return mapping


class TagMapper:
    """Maps tags through the tag dictionary, reusing the name when untranslated."""

    kind = PageKind.TAG

    def __init__(self, settings: SiteSettings) -> None:
        self._settings = settings

    def create_url_mapping(
        self,
        info: PageInfo,
        context: MappingContext | None = None,
    ) -> UrlMapping | None:
        if not isinstance(info, TagPageInfo):
            return None

        settings = self._settings
        key = self._find_key(info)
        fallback_token = normalize(info.name)

        mapping: UrlMapping = {}
        for lang in settings.languages.codes:
            name = translate_key(settings.tags, lang, key) if key is not None else None
            if name is None:
                self._report_fallback(info.name, lang)
                mapping[lang] = settings.tag_path(lang, fallback_token)
                continue
            mapping[lang] = settings.tag_path(lang, normalize(name))
        return mapping

    def _find_key(self, info: TagPageInfo) -> str | None:
        """Reverse lookup in the source language first, then in the others."""
        languages = self._settings.languages
        source_lang = info.detected_lang or languages.default
        search_order = [source_lang] + [code for code in languages.codes if code != source_lang]
        for lang in search_order:
            key = find_key(self._settings.tags, lang, info.name)
            if key is not None:
                return key
        return None

    def _report_fallback(self, name: str, lang: str) -> None:
        if not self._settings.production:
            logger.warning(
                f"Tag {name!r} has no {lang} translation, using normalized version"
            )


class NormalMapper:
    """Maps any other page by re-prefixing its language-neutral path."""

    kind = PageKind.NORMAL

    def __init__(self, settings: SiteSettings) -> None:
        self._settings = settings

    def create_url_mapping(
        self,
        info: PageInfo,
        context: MappingContext | None = None,
    ) -> UrlMapping | None:
        if not isinstance(info, NormalPageInfo):
            return None

        current_path = "/"
        if context is not None and context.current_path:
            current_path = context.current_path

        languages = self._settings.languages
        return {lang: languages.localize_path(current_path, lang) for lang in languages.codes}
