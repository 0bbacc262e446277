from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # REST backend consumed by the client
    api_base_url: str = "http://localhost:8080"
    api_timeout_seconds: float = 10.0

    # Fallback store (used when the backend is unreachable)
    fallback_enabled: bool = True
    fallback_delay_ms: int = 500

    # Database (reference backend)
    database_url: str = f"sqlite+aiosqlite:///{BASE_DIR / 'data' / 'taskboard.db'}"
    seed_demo_data: bool = True

    # Server
    server_host: str = "127.0.0.1"
    server_port: int = 8080
    cors_allow_origins: list[str] = ["http://localhost:3000"]

    # Logging
    log_level: str = "INFO"


settings = Settings()
