"""Slug normalization for category and tag URLs.

Normalization is lossy: accented characters are dropped entirely rather
than transliterated ("Café" -> "caf"). Denormalization therefore needs the
universe of valid names to pick from.
"""

import re

NON_ASCII_RE = re.compile(r"[^\x00-\x7f]")
SEPARATOR_RUN_RE = re.compile(r"[^a-z0-9]+")


def normalize(name: str) -> str:
    """Convert a display name to a URL-safe token.

    Examples:
        "Best Practices" -> "best-practices"
        "Bonnes  Pratiques!" -> "bonnes-pratiques"
        "Génie" -> "gnie"
    """
    token = NON_ASCII_RE.sub("", name.lower())
    token = SEPARATOR_RUN_RE.sub("-", token)
    return token.strip("-")


def denormalize(token: str, candidates: list[str]) -> str | None:
    """Find the display name a URL token was normalized from.

    Args:
        token: Token taken from a URL (compared case-insensitively)
        candidates: Valid display names for the relevant language

    Returns:
        First candidate normalizing to token, None if no candidate matches
    """
    wanted = token.lower()
    for candidate in candidates:
        if normalize(candidate) == wanted:
            return candidate
    return None
