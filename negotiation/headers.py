"""
Accept-family header values

Splits Accept, Accept-Charset, Accept-Encoding and Accept-Language header
text into QualifiedStringValue entries and orders them by preference.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from negotiation.quality import QualifiedStringValue, quality_sort_key

logger = logging.getLogger(__name__)

ACCEPT_HEADERS: tuple[str, ...] = ("Accept", "Accept-Charset", "Accept-Encoding", "Accept-Language")

LIST_SEPARATOR = ","
PARAM_SEPARATOR = ";"
PARAM_EQUAL = "="
QUALITY_PARAM = "q"
QUOTE = '"'
ESCAPE = "\\"


def _split_unquoted(text: str, separator: str) -> list[str]:
    """Split on ``separator`` except inside quoted strings."""
    parts: list[str] = []
    current: list[str] = []
    quoted = escaped = False
    for char in text:
        if escaped:
            escaped = False
        elif quoted and char == ESCAPE:
            escaped = True
        elif char == QUOTE:
            quoted = not quoted
        elif char == separator and not quoted:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return parts


def parse_header_values(header: str | None) -> list[QualifiedStringValue]:
    """Split a header into values, keeping the order the client sent.

    Only the ``q`` parameter is read; media-type parameters such as
    ``level=1`` stay out of the ranking. The quality is taken as-is from
    ``float()``; an unparsable one is left absent. Separators inside
    quoted parameter values, as in ``text/html;title="a,b"``, do not split.

    Args:
        header: Raw header text, e.g. "text/html, */*;q=0.8".

    Returns:
        The values in header order. Empty for a missing or blank header.
    """
    if not header:
        return []

    values: list[QualifiedStringValue] = []
    for part in _split_unquoted(header, LIST_SEPARATOR):
        token, *params = _split_unquoted(part, PARAM_SEPARATOR)
        token = token.strip()
        if not token:
            continue

        quality: float | None = None
        for param in params:
            key, _, raw = param.partition(PARAM_EQUAL)
            if key.strip().lower() != QUALITY_PARAM:
                continue
            try:
                quality = float(raw.strip())
            except ValueError:
                logger.debug("Ignoring unparsable quality %r for %r", raw, token)
            break

        values.append(QualifiedStringValue(value=token, quality=quality))

    return values


def sort_by_quality(values: Iterable[QualifiedStringValue], descending: bool = False) -> list[QualifiedStringValue]:
    """Return a stably sorted copy of ``values``.

    Ascending puts the least-preferred value first. ``descending=True`` puts
    the most-preferred first while still keeping header order between values
    that compare equal.
    """
    return sorted(values, key=quality_sort_key, reverse=descending)


def preferred_values(header: str | None) -> list[QualifiedStringValue]:
    """Parse a header and return its values most-preferred first."""
    return sort_by_quality(parse_header_values(header), descending=True)
