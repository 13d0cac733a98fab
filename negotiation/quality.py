"""
Quality-value ordering for Accept-family header values

Orders (value, quality) pairs taken from Accept, Accept-Charset,
Accept-Encoding and Accept-Language headers by the client's stated
preference. Sorting ascending puts the least-preferred entry first and the
most-preferred entry last.

When two entries carry the same quality, a wildcard ("*") sorts below a
concrete value so that e.g. ``gzip, *;q=1`` prefers ``gzip``. Non-wildcard
values of equal quality compare equal, so a stable sort keeps the order the
client sent them in.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key

from negotiation.exceptions import InvalidInputError

WILDCARD = "*"

# Quality assumed when a value carries no q parameter
DEFAULT_QUALITY = 1.0


@dataclass(frozen=True)
class QualifiedStringValue:
    """A header token with its optional quality value."""

    value: str
    quality: float | None = None

    @property
    def effective_quality(self) -> float:
        return self.quality if self.quality is not None else DEFAULT_QUALITY

    @property
    def is_wildcard(self) -> bool:
        return _same_token(self.value, WILDCARD)


def _same_token(left: str, right: str) -> bool:
    return left.casefold() == right.casefold()


class QualityComparer:
    """Three-way comparator over :class:`QualifiedStringValue`.

    Holds no state; use the shared :data:`QUALITY_COMPARER` instance or the
    module-level :func:`compare` rather than building new ones.
    """

    __slots__ = ()

    def compare(self, first: QualifiedStringValue, second: QualifiedStringValue) -> int:
        """Compare two values by quality, demoting wildcards on a tie.

        Returns -1, 0 or 1. Raises InvalidInputError if either side is None.
        """
        if first is None or second is None:
            raise InvalidInputError(
                "Cannot compare a missing header value",
                argument="first" if first is None else "second",
            )

        # Exact float comparison, no tolerance
        quality_difference = first.effective_quality - second.effective_quality
        if quality_difference < 0:
            return -1
        if quality_difference > 0:
            return 1

        if not _same_token(first.value, second.value):
            if first.is_wildcard:
                return -1
            if second.is_wildcard:
                return 1

        return 0

    __call__ = compare

    def __repr__(self) -> str:
        return "QUALITY_COMPARER"


QUALITY_COMPARER = QualityComparer()

compare = QUALITY_COMPARER.compare

# Key function for sorted()/list.sort()
quality_sort_key = cmp_to_key(compare)
