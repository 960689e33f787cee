from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "127.0.0.1"
    port: int = 8000

    image_provider: str = "gemini"
    api_key: str = ""
    request_timeout_seconds: float = 120.0

    gemini_model_name: str = "gemini-2.5-flash-image"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"

    openai_model_name: str = "gpt-image-1"
    openai_base_url: str | None = None
