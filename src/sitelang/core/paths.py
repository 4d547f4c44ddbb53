"""Path segment utilities shared by detectors and mappers."""

from urllib.parse import urlsplit


def path_of(value: str) -> str:
    """Return the path component of a path or absolute URL.

    Query strings and fragments are dropped. Result always has a leading slash.
    """
    if "://" in value:
        value = urlsplit(value).path
    else:
        value = value.split("?", 1)[0].split("#", 1)[0]
    return normalize_path(value)


def normalize_path(path: str) -> str:
    """Normalize path to have leading slash."""
    return path if path.startswith("/") else f"/{path}"


def split_segments(path: str) -> list[str]:
    """Split a path into its non-empty segments.

    Args:
        path: Path or URL (e.g., "/fr/tag/guide/")

    Returns:
        Segments without empty entries (e.g., ["fr", "tag", "guide"])
    """
    return [segment for segment in path_of(path).split("/") if segment]


def join_segments(*segments: str) -> str:
    """Join segments into an absolute path."""
    return "/" + "/".join(segment.strip("/") for segment in segments if segment)
