"""
General utility functions used by the fetchers and normalizers.
Ported from yt-dlp's utils.py.
"""

from typing import Any

# Maximum length of an upstream body echoed back as a diagnostic
MAX_DETAILS_LENGTH = 500


def traverse_obj(obj: Any, *paths: Any) -> Any:
    """
    Traverse nested dicts/lists safely.
    Ported from yt-dlp's traverse_obj utility.

    Paths are tried in order and the first one resolving to a non-None
    value wins, so the argument order is the fallback order.

    Usage:
        traverse_obj(data, 'key1', 'key2', 'key3')
        traverse_obj(data, ('key1', 'key2'), ('alt_key1', 'alt_key2'))
    """
    for path in paths:
        if isinstance(path, (list, tuple)):
            result = obj
            for key in path:
                if result is None:
                    break
                if isinstance(result, dict):
                    result = result.get(key)
                elif isinstance(result, (list, tuple)):
                    try:
                        result = result[key]
                    except (IndexError, TypeError):
                        result = None
                else:
                    result = None
            if result is not None:
                return result
        else:
            if isinstance(obj, dict) and obj.get(path) is not None:
                return obj[path]
    return None


def int_or_none(v: Any) -> int | None:
    """Convert value to int or return None."""
    if v is None or isinstance(v, bool):
        return None
    try:
        return int(v)
    except (ValueError, TypeError, OverflowError):
        return None


def float_or_none(v: Any) -> float | None:
    """Convert value to float or return None."""
    if v is None or isinstance(v, bool):
        return None
    try:
        return float(v)
    except (ValueError, TypeError):
        return None


def str_or_none(v: Any) -> str | None:
    """Convert value to string or return None."""
    if v is None or isinstance(v, (dict, list)):
        return None
    result = str(v).strip()
    return result if result else None


def text_or_none(v: Any) -> str | None:
    """Return free text (captions) untouched when it is a string."""
    return v if isinstance(v, str) else None


def bool_or_none(v: Any) -> bool | None:
    if isinstance(v, bool):
        return v
    return None


def dict_or_none(v: Any) -> dict | None:
    return v if isinstance(v, dict) else None


def list_or_none(v: Any) -> list | None:
    return v if isinstance(v, list) else None


def truncate(text: str | None, limit: int = MAX_DETAILS_LENGTH) -> str | None:
    """Cut a diagnostic string down to *limit* characters."""
    if text is None:
        return None
    return text[:limit]


def redact(text: str | None, *secrets: str | None) -> str | None:
    """Replace every occurrence of the given secrets in *text*."""
    if not text:
        return text
    for secret in secrets:
        if secret:
            text = text.replace(secret, "[redacted]")
    return text
