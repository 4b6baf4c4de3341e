from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Cinema Checkout Client'
    VERSION: str = '0.1.0'
    DEBUG: bool = False

    # Backend API
    API_BASE_URL: str = 'http://localhost:8000/api'
    API_TIMEOUT_SECONDS: float = 10.0
    API_VERIFY_TLS: bool = True

    # Checkout
    DEFAULT_TICKET_TYPE: str = 'adult'
    DEFAULT_THEME: str = 'dark'

    # Session keep-alive: ping every 5 minutes
    KEEP_ALIVE_INTERVAL_SECONDS: float = 300.0

    # OpenTelemetry
    OTEL_SERVICE_NAME: str = 'cinema-checkout-client'
    OTEL_CONSOLE_EXPORT: bool = False

    @field_validator('API_BASE_URL', mode='before')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if isinstance(v, str):
            return v.rstrip('/')
        return v

    @field_validator('DEFAULT_THEME', mode='before')
    @classmethod
    def normalize_theme(cls, v: str) -> str:
        if isinstance(v, str) and v.strip().lower() in ('dark', 'light'):
            return v.strip().lower()
        return 'dark'


settings = Settings()  # type: ignore
