# WORKFLOW: Core configuration management for the Packing List Analytics API.
# Used by: All modules throughout the application
# Configuration includes:
# - API settings (prefix, CORS, host/port)
# - CSV ingestion settings (delimiter, quoting policy, upload size)
# - Dashboard settings (top-N table length)
# - Logging configuration
#
# Loaded at startup and used by all services for consistent configuration.

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # API
    api_v1_prefix: str = "/api/v1"
    project_name: str = "Packing List Analytics API"
    version: str = "1.0.0"

    # Environment
    environment: str = "development"
    debug: bool = False

    # Logging
    log_level: str = "INFO"

    # CSV ingestion
    csv_delimiter: str = ","
    csv_quoted_fields: bool = True
    max_upload_chars: int = 5_000_000
    load_sample_on_startup: bool = True

    # Dashboard
    dashboard_top_n: int = 5

    # CORS
    allowed_origins: list[str] = ["*"]
    allowed_methods: list[str] = ["*"]
    allowed_headers: list[str] = ["*"]

    # API Server
    api_host: str = "0.0.0.0"
    api_port: int = 8001

    class Config:
        env_file = ".env"
        case_sensitive = False
        protected_namespaces = ('settings_',)


settings = Settings()
