from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "Quality Negotiation"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Accept-Language negotiation
    default_language: str = "en"
    supported_languages: list[str] = ["en", "fr", "de", "es", "ar", "zh", "ja"]

    # Accept negotiation
    default_media_type: str = "application/json"
    supported_media_types: list[str] = ["application/json", "text/html", "text/plain"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
