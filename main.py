import logging

import uvicorn
from fastapi import FastAPI

from negotiation.config import settings
from negotiation.exception_handlers import register_exception_handlers
from negotiation.middleware.language import LanguageMiddleware
from negotiation.middleware.logging import StructuredLoggingMiddleware, setup_structured_logging
from negotiation.routes.negotiation import negotiation_router

setup_structured_logging(log_level=settings.log_level, json_format=settings.environment != "development")
logger = logging.getLogger("negotiation.app")


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Quality-value negotiation for Accept-family headers",
        debug=settings.debug,
        version=settings.app_version,
    )

    # Starlette runs middleware LIFO: logging wraps language detection
    app.add_middleware(LanguageMiddleware)
    app.add_middleware(StructuredLoggingMiddleware)

    register_exception_handlers(app)

    app.include_router(negotiation_router, prefix="/api/v1/negotiation")

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    logger.info("%s %s started (%s)", settings.app_name, settings.app_version, settings.environment)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.debug)
