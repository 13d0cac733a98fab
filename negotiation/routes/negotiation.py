"""
Negotiation Routes

negotiation_router  (prefix: /api/v1/negotiation)
    GET    /preferences   → Accept-family header values, most-preferred first
    GET    /locale        → locale chosen by LanguageMiddleware
    GET    /media-type    → media type chosen from settings.supported_media_types
    GET    /languages     → list supported languages
"""

import logging

from fastapi import APIRouter, Request
from pydantic import BaseModel

from negotiation.config import settings
from negotiation.headers import ACCEPT_HEADERS, preferred_values
from negotiation.i18n.locale import get_language_info
from negotiation.media import select_media_type

negotiation_router = APIRouter(tags=["Negotiation"])
logger = logging.getLogger(__name__)


# ── Pydantic schemas ───────────────────────────────────────────────────────────


class PreferenceItem(BaseModel):
    value: str
    quality: float


class PreferenceList(BaseModel):
    header: str
    values: list[PreferenceItem]


class LocaleChoice(BaseModel):
    locale: str


class MediaTypeChoice(BaseModel):
    media_type: str


class LanguageInfo(BaseModel):
    code: str
    name: str


# ── Routes ─────────────────────────────────────────────────────────────────────


@negotiation_router.get("/preferences", response_model=list[PreferenceList])
async def list_preferences(request: Request) -> list[PreferenceList]:
    """Echo each Accept-family header on the request in preference order."""
    preferences = []
    for header in ACCEPT_HEADERS:
        raw = request.headers.get(header)
        if raw is None:
            continue
        preferences.append(
            PreferenceList(
                header=header,
                values=[
                    PreferenceItem(value=entry.value, quality=entry.effective_quality)
                    for entry in preferred_values(raw)
                ],
            )
        )
    return preferences


@negotiation_router.get("/locale", response_model=LocaleChoice)
async def negotiated_locale(request: Request) -> LocaleChoice:
    return LocaleChoice(locale=request.state.locale)


@negotiation_router.get("/media-type", response_model=MediaTypeChoice)
async def negotiated_media_type(request: Request) -> MediaTypeChoice:
    """Pick a media type for the request's Accept header (406 when none fits)."""
    media_type = select_media_type(
        request.headers.get("Accept"),
        settings.supported_media_types,
        default=settings.default_media_type,
    )
    request.state.media_type = media_type
    return MediaTypeChoice(media_type=media_type)


@negotiation_router.get("/languages", response_model=list[LanguageInfo])
async def list_supported_languages() -> list[LanguageInfo]:
    """List all supported languages with their names."""
    return [LanguageInfo(**get_language_info(code)) for code in settings.supported_languages]
