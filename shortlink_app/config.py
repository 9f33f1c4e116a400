from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment
    environment: str = "development"
    debug: bool = False

    # Application
    app_name: str = "URL Shortener"
    app_version: str = "1.0.0"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # URL Shortener specific
    base_url: str = "http://localhost:8080/"  # Codes are appended verbatim
    short_code_length: int = 6
    short_code_seed: Optional[int] = None  # Fixed seed makes codes reproducible

    # Snapshot persistence
    snapshot_backend: str = "json"  # Options: "json", "memory"
    snapshot_path: str = "urls.json"

    # Logging
    log_level: str = "INFO"

    # Discord bot
    discord_bot_token: Optional[str] = None
    bot_command_prefix: str = "!shorten "

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
