"""Supported languages and language prefix handling.

The default language serves its pages without a prefix; every other
supported language prefixes all of its paths with "/{code}".
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from sitelang.core.paths import normalize_path, path_of

DEFAULT_FLAG = "🌐"


class UnsupportedLanguageError(ValueError):
    """Raised when data references a language outside the supported set."""

    def __init__(self, codes: Iterable[str], supported: Iterable[str]) -> None:
        self.codes = sorted(codes)
        self.supported = list(supported)
        super().__init__(
            f"Unsupported language(s): {', '.join(self.codes)}. "
            f"Valid languages are: {', '.join(self.supported)}"
        )


@dataclass(frozen=True)
class Language:
    """Supported language with display metadata."""

    code: str
    label: str
    flag: str = DEFAULT_FLAG

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"code": self.code, "label": self.label, "flag": self.flag}


class LanguageSet:
    """Closed set of supported languages with one designated default.

    Language order is preserved and drives the order of every per-language
    mapping built from this set.
    """

    __slots__ = ("_by_code", "_default", "_languages")

    def __init__(self, languages: list[Language], default: str) -> None:
        """Initialize language set.

        Args:
            languages: Supported languages in display order
            default: Code of the default (unprefixed) language

        Raises:
            ValueError: If the set is empty or codes are duplicated
            UnsupportedLanguageError: If default is not in the set
        """
        if not languages:
            raise ValueError("At least one language must be supported")

        by_code: dict[str, Language] = {}
        for language in languages:
            if language.code in by_code:
                raise ValueError(f"Duplicate language code: {language.code}")
            by_code[language.code] = language

        if default not in by_code:
            raise UnsupportedLanguageError([default], by_code)

        self._languages = list(languages)
        self._by_code = by_code
        self._default = default

    @property
    def default(self) -> str:
        return self._default

    @property
    def codes(self) -> list[str]:
        return [language.code for language in self._languages]

    @property
    def prefixed_codes(self) -> list[str]:
        """Codes of the languages whose paths carry a prefix."""
        return [code for code in self.codes if code != self._default]

    def __iter__(self) -> Iterator[Language]:
        return iter(self._languages)

    def __len__(self) -> int:
        return len(self._languages)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def is_supported(self, code: str | None) -> bool:
        return code is not None and code in self._by_code

    def get(self, code: str) -> Language:
        """Get language metadata by code.

        Raises:
            UnsupportedLanguageError: If code is not supported
        """
        language = self._by_code.get(code)
        if language is None:
            raise UnsupportedLanguageError([code], self._by_code)
        return language

    def validate(self, codes: Iterable[str]) -> None:
        """Ensure every code belongs to the supported set.

        Raises:
            UnsupportedLanguageError: Listing every unsupported code
        """
        invalid = {code for code in codes if code not in self._by_code}
        if invalid:
            raise UnsupportedLanguageError(invalid, self._by_code)

    def lang_from_path(self, path: str) -> str:
        """Detect the site language from the first path segment.

        Returns the default language when the path has no recognized prefix.
        """
        first = path_of(path).split("/")[1]
        if first in self._by_code:
            return first
        return self._default

    def path_without_lang(self, path: str) -> str:
        """Strip a recognized language prefix from the path.

        Examples:
            "/fr/about" -> "/about"
            "/about" -> "/about"
        """
        _, first, *rest = path_of(path).split("/")
        if first in self._by_code:
            return "/" + "/".join(rest)
        return path_of(path)

    def localize_path(self, path: str, lang: str) -> str:
        """Build the path of a language-neutral path in the given language.

        Examples:
            ("/about", "en") -> "/about"
            ("/about", "fr") -> "/fr/about"
            ("/", "fr") -> "/fr/"
        """
        clean = normalize_path(path)
        if lang == self._default:
            return clean
        return f"/{lang}{clean}"

    def home_path(self, lang: str) -> str:
        """Home page path of a language."""
        return self.localize_path("/", lang)
