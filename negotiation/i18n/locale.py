"""
Locale helpers

Pure functions for BCP 47 locale handling:
- Accept-Language negotiation ordered by quality value
- Language metadata lookup
"""

from __future__ import annotations

import logging

from negotiation.headers import preferred_values

logger = logging.getLogger(__name__)

# ── Constants ─────────────────────────────────────────────────────────────────

# Human-readable names for supported locales (subset of BCP 47 code space)
LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "fr": "Français",
    "de": "Deutsch",
    "es": "Español",
    "ar": "العربية",
    "zh": "中文",
    "ja": "日本語",
    "pt": "Português",
    "it": "Italiano",
    "nl": "Nederlands",
}


# ── Public helpers ────────────────────────────────────────────────────────────


def parse_accept_language(header: str, supported: list[str]) -> str | None:
    """Parse an Accept-Language header and return the best matching locale.

    Algorithm:
    1. Order the header's tags most-preferred first with the quality
       comparator, so "*" yields to a concrete tag of the same q-value.
    2. Skip tags with q=0; the supported locales they name are refused.
    3. For each tag, try exact match in `supported`, then base-language match.
       A "*" tag matches the first supported locale. Neither the base-language
       fallback nor "*" will pick a refused locale.
    4. Return the first match or None if nothing matches.

    Args:
        header:    Value of the Accept-Language HTTP header, e.g.
                   "fr-CA,fr;q=0.9,en-US;q=0.8,en;q=0.7".
        supported: Ordered list of BCP 47 locale codes the server supports.

    Returns:
        The best matching locale from `supported`, or None.
    """
    if not header or not supported:
        return None

    supported_lower = [s.lower() for s in supported]
    ranked = preferred_values(header)

    refused: set[str] = set()
    for entry in ranked:
        if entry.effective_quality > 0:
            continue
        if entry.is_wildcard:
            refused.update(supported_lower)
        elif entry.value.lower() in supported_lower:
            refused.add(entry.value.lower())

    for entry in ranked:
        if entry.effective_quality <= 0:
            continue
        if entry.is_wildcard:
            for code, code_lower in zip(supported, supported_lower):
                if code_lower not in refused:
                    return code
            continue

        tag_lower = entry.value.lower()
        # Exact match
        if tag_lower in supported_lower:
            return supported[supported_lower.index(tag_lower)]
        # Base language match: "fr-CA" → try "fr"
        base = tag_lower.split("-")[0]
        if base in supported_lower and base not in refused:
            return supported[supported_lower.index(base)]

    logger.debug("No supported locale matches Accept-Language %r", header)
    return None


def get_language_info(locale: str) -> dict[str, str]:
    """Return a metadata dict describing the given locale.

    Args:
        locale: BCP 47 locale code, e.g. "ar", "fr".

    Returns:
        Dict with keys: ``code`` and ``name``.
    """
    return {
        "code": locale,
        "name": LANGUAGE_NAMES.get(locale, locale),
    }
