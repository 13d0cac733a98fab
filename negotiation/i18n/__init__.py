"""
i18n (Internationalization) package

Provides language metadata and Accept-Language negotiation built on the
quality comparator.
"""

from .locale import (
    LANGUAGE_NAMES,
    get_language_info,
    parse_accept_language,
)

__all__ = [
    "LANGUAGE_NAMES",
    "get_language_info",
    "parse_accept_language",
]
