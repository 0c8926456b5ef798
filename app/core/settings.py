"""Application settings management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global settings loaded from environment variables."""

    app_name: str = "WhatsApp Notifier"
    app_version: str = "0.1.0"
    environment: str = "development"
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    database_url: str = Field(default="sqlite:///./wa_notifier.db", alias="DATABASE_URL")

    newsapi_api_key: str | None = Field(default=None, alias="NEWSAPI_API_KEY")
    openweather_api_key: str | None = Field(default=None, alias="OPENWEATHER_API_KEY")

    openai_api_key: str | None = Field(default=None, alias="OPENAI_API_KEY")
    openai_model: str = Field(default="gpt-4o-mini", alias="OPENAI_MODEL")
    openai_base_url: str | None = Field(default=None, alias="OPENAI_BASE_URL")

    # Pause between consecutive sends of one broadcast; 0 sends back-to-back.
    dispatch_send_delay_seconds: float = Field(default=0.0, ge=0, alias="DISPATCH_SEND_DELAY_SECONDS")
    max_recipients: int = Field(default=100, gt=0, alias="MAX_RECIPIENTS")
    news_page_size: int = Field(default=10, ge=1, le=100, alias="NEWS_PAGE_SIZE")
    http_timeout_seconds: float = Field(default=30.0, gt=0, alias="HTTP_TIMEOUT_SECONDS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()
