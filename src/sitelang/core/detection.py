"""Page detection manager.

Runs an ordered first-match chain of detectors and dispatches page
information to the mapper registered for its kind. A manager holds only
read-only settings and may be shared between concurrent requests.
"""

import logging
from dataclasses import dataclass, replace

from sitelang.core.articles import Article, build_translation_mapping
from sitelang.core.detectors import (
    ArticleDetector,
    CategoryDetector,
    NormalDetector,
    PageDetector,
    TagDetector,
)
from sitelang.core.mappers import (
    ArticleMapper,
    CategoryMapper,
    MappingContext,
    NormalMapper,
    TagMapper,
    UrlMapper,
    UrlMapping,
)
from sitelang.core.pages import ArticlePageInfo, PageDetection, PageInfo, PageKind
from sitelang.core.routing import SiteSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalyzedPage:
    """Detection result together with its cross-language mapping."""

    detection: PageDetection
    url_mapping: UrlMapping | None

    @property
    def kind(self) -> PageKind:
        return self.detection.kind

    @property
    def info(self) -> PageInfo:
        return self.detection.info


class PageDetectionManager:
    """Ordered detector chain with per-kind URL mappers."""

    def __init__(
        self,
        settings: SiteSettings,
        detectors: list[PageDetector],
        mappers: list[UrlMapper],
    ) -> None:
        """Initialize manager.

        Args:
            settings: Site settings shared by detectors and mappers
            detectors: Detectors in priority order; a catch-all detector
                       must come last
            mappers: Mappers, at most one per page kind
        """
        self._settings = settings
        self._detectors = list(detectors)
        self._mappers = {mapper.kind: mapper for mapper in mappers}

    @classmethod
    def create(cls, settings: SiteSettings) -> "PageDetectionManager":
        """Create a manager with the standard article/category/tag/normal chain."""
        return cls(
            settings,
            detectors=[
                ArticleDetector(settings),
                CategoryDetector(settings),
                TagDetector(settings),
                NormalDetector(settings),
            ],
            mappers=[
                ArticleMapper(settings),
                CategoryMapper(settings),
                TagMapper(settings),
                NormalMapper(settings),
            ],
        )

    @property
    def settings(self) -> SiteSettings:
        return self._settings

    def detect_page(self, path: str) -> PageDetection | None:
        """Detect the kind of page a path represents.

        A detector whose shape matches but whose extraction fails does not
        stop the chain; the next detector is tried.

        Returns:
            First successful detection, None if no detector accepted the path
        """
        for detector in self._detectors:
            if not detector.is_page_kind(path):
                continue
            info = detector.extract_page_info(path)
            if info is not None:
                logger.debug(f"Detected {detector.kind} page for {path}")
                return PageDetection(kind=detector.kind, info=info)
            logger.debug(f"{detector.kind} detector matched {path} but extraction failed")
        return None

    def create_url_mapping(
        self,
        info: PageInfo,
        path: str,
        *,
        translation_mapping: dict[str, str | None] | None = None,
    ) -> UrlMapping | None:
        """Build the per-language paths of a detected page.

        Args:
            info: Detected page information
            path: Request path the page was detected from
            translation_mapping: Article slug per language (articles only)

        Returns:
            Mapping of language code to path, None if no mapper handles the
            page kind or the mapper rejected the page
        """
        mapper = self._mappers.get(info.kind)
        if mapper is None:
            return None

        context = MappingContext(
            current_path=self._settings.languages.path_without_lang(path),
            translation_mapping=translation_mapping,
        )
        return mapper.create_url_mapping(info, context)

    def analyze_page(
        self,
        path: str,
        articles: list[Article] | None = None,
    ) -> AnalyzedPage | None:
        """Detect a page and build its cross-language mapping.

        Args:
            path: Request path
            articles: Content listing used to link article translations

        Raises:
            UnsupportedLanguageError: If the content listing references an
                                      unsupported language
        """
        detection = self.detect_page(path)
        if detection is None:
            return None

        info = detection.info
        translation_mapping = None
        if isinstance(info, ArticlePageInfo) and articles is not None:
            translation_mapping = build_translation_mapping(
                path,
                articles,
                self._settings.languages,
                self._settings.routes,
            )
            if translation_mapping is not None:
                info = replace(info, translation_mapping=translation_mapping)
                detection = PageDetection(kind=detection.kind, info=info)

        url_mapping = self.create_url_mapping(
            detection.info,
            path,
            translation_mapping=translation_mapping,
        )
        return AnalyzedPage(detection=detection, url_mapping=url_mapping)
