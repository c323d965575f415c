"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite+aiosqlite:///reports.db"

    # CORS
    cors_allowed_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "info"
    json_logs: bool = True

    # Request bodies carry embedded photos and attachments as data URLs
    max_request_bytes: int = 10 * 1024 * 1024

    # Live updates
    live_queue_size: int = 100
    sse_keepalive_seconds: float = 15.0

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "FIELDREPORTS_",
    }


settings = Settings()
