"""
Media type negotiation

Picks the representation to send for an Accept header from the media
types the server can produce.
"""

from __future__ import annotations

import logging

from negotiation.exceptions import NotAcceptableError
from negotiation.headers import preferred_values

logger = logging.getLogger(__name__)

SUBTYPE_SEPARATOR = "/"
ANY = "*"


def _split_media_range(media_range: str) -> tuple[str, str]:
    media_type, _, media_subtype = media_range.lower().partition(SUBTYPE_SEPARATOR)
    return media_type.strip(), (media_subtype.strip() or ANY)


def _matches(media_range: str, media_type: str) -> bool:
    range_type, range_subtype = _split_media_range(media_range)
    candidate_type, candidate_subtype = _split_media_range(media_type)
    if range_type == ANY:
        return True
    if range_type != candidate_type:
        return False
    return range_subtype in (ANY, candidate_subtype)


def select_media_type(accept: str | None, supported: list[str], default: str | None = None) -> str:
    """Return the supported media type the client prefers most.

    Ranges are tried most-preferred first. A range with q=0 refuses the
    matching types; a wildcard range will not pick a refused type, an
    explicit one still can.

    Args:
        accept:    Value of the Accept header, e.g. "text/html, */*;q=0.8".
        supported: Media types the server can produce, in server preference order.
        default:   Returned for a missing or blank header; the first supported
                   type when not given.

    Raises:
        NotAcceptableError: when the header rules out every supported type.
    """
    if not supported:
        raise NotAcceptableError(header="Accept", supported=[])

    ranges = preferred_values(accept)
    if not ranges:
        return default or supported[0]

    refused = {
        candidate
        for entry in ranges
        if entry.effective_quality <= 0
        for candidate in supported
        if _matches(entry.value, candidate)
    }

    for entry in ranges:
        if entry.effective_quality <= 0:
            continue
        wildcard_range = ANY in entry.value
        for candidate in supported:
            if wildcard_range and candidate in refused:
                continue
            if _matches(entry.value, candidate):
                logger.debug("Accept %r selected %s via %s", accept, candidate, entry.value)
                return candidate

    raise NotAcceptableError(header="Accept", supported=list(supported))
