"""
Quality-value negotiation for Accept-family HTTP headers

Orders Accept, Accept-Charset, Accept-Encoding and Accept-Language values
by client preference and picks the best supported value.
"""

from .exceptions import InvalidInputError, NegotiationError, NotAcceptableError
from .headers import parse_header_values, preferred_values, sort_by_quality
from .quality import (
    QUALITY_COMPARER,
    QualifiedStringValue,
    QualityComparer,
    compare,
    quality_sort_key,
)

__all__ = [
    "QUALITY_COMPARER",
    "InvalidInputError",
    "NegotiationError",
    "NotAcceptableError",
    "QualifiedStringValue",
    "QualityComparer",
    "compare",
    "parse_header_values",
    "preferred_values",
    "quality_sort_key",
    "sort_by_quality",
]
