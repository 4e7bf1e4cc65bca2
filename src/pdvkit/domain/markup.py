"""Request-payload hygiene: markup stripping and injection pattern detection.

``sanitize_payload`` cleans every string in a decoded JSON body (keys
included). ``find_suspicious`` reports which injection patterns a payload
trips so the caller can reject it before anything is persisted.
"""

from __future__ import annotations

import html
import re
from typing import Any

DEFAULT_MAX_DEPTH = 10

_TAG = re.compile(r"<[^>]*>")
_WHITESPACE = re.compile(r"\s+")

SUSPICIOUS_PATTERNS: dict[str, re.Pattern[str]] = {
    "sql_keyword": re.compile(
        r"\b(SELECT|INSERT|UPDATE|DELETE|DROP|UNION|CREATE|ALTER|EXEC|EXECUTE)\b",
        re.IGNORECASE,
    ),
    "sql_comment": re.compile(r"--|#|/\*|\*/"),
    "sql_or_tautology": re.compile(r"\bOR\b\s+\d+\s*=\s*\d+", re.IGNORECASE),
    "sql_and_tautology": re.compile(r"\bAND\b\s+\d+\s*=\s*\d+", re.IGNORECASE),
    "nosql_where": re.compile(r"\$where", re.IGNORECASE),
    "nosql_regex": re.compile(r"\$regex", re.IGNORECASE),
    "nosql_operator": re.compile(r"\$gt|\$lt|\$ne|\$eq", re.IGNORECASE),
    "path_traversal": re.compile(r"\.\./"),
    "null_byte": re.compile(r"%00"),
}


def sanitize_markup(value: Any) -> Any:
    """Strip tags, escape HTML specials, drop NULs, and collapse whitespace.

    Non-string values are returned unchanged.

    Examples:
        >>> sanitize_markup("<b>X-Burger</b>  & fritas")
        'X-Burger &amp; fritas'
    """
    if not isinstance(value, str):
        return value
    text = _TAG.sub("", value)
    text = html.escape(text, quote=True)
    text = text.replace("\0", "")
    return _WHITESPACE.sub(" ", text).strip()


def sanitize_payload(obj: Any, max_depth: int = DEFAULT_MAX_DEPTH, _depth: int = 0) -> Any:
    """Recursively apply :func:`sanitize_markup` to a decoded JSON value.

    Dict keys are sanitized as well as values. Sub-trees deeper than
    *max_depth* are returned as-is.
    """
    if _depth > max_depth or obj is None:
        return obj
    if isinstance(obj, str):
        return sanitize_markup(obj)
    if isinstance(obj, (list, tuple)):
        return [sanitize_payload(item, max_depth, _depth + 1) for item in obj]
    if isinstance(obj, dict):
        return {
            sanitize_markup(key): sanitize_payload(value, max_depth, _depth + 1)
            for key, value in obj.items()
        }
    return obj


def _match_names(value: Any) -> list[str]:
    if not isinstance(value, str):
        return []
    return [name for name, pattern in SUSPICIOUS_PATTERNS.items() if pattern.search(value)]


def find_suspicious(obj: Any) -> list[str]:
    """Return the sorted names of every suspicious pattern found in *obj*.

    Walks dict keys, dict values, and list items at any depth.
    """
    found: set[str] = set()
    stack = [obj]
    while stack:
        current = stack.pop()
        if isinstance(current, dict):
            for key, value in current.items():
                found.update(_match_names(key))
                stack.append(value)
        elif isinstance(current, (list, tuple)):
            stack.extend(current)
        else:
            found.update(_match_names(current))
    return sorted(found)


def is_suspicious(obj: Any) -> bool:
    """True when :func:`find_suspicious` reports at least one match."""
    return bool(find_suspicious(obj))
