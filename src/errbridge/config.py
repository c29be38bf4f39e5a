from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Pydantic Settings automatically reads env vars matching field names (case-insensitive).
    In development, it also reads from .env file if present.
    """

    app_name: str = "errbridge"  # FastAPI title

    # Extract W3C traceparent headers so error payloads carry the caller's trace id
    trace_propagation: bool = True

    # Header read for (and echoed with) the per-request id bound to logs
    request_id_header: str = "X-Request-ID"

    # Let create_app configure structlog and the root logger; turn off when
    # the host service owns logging setup
    configure_logging: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
