import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_VERIFY_URL = "https://www.google.com/recaptcha/api/siteverify"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RECAPTCHA_", env_file=".env", extra="ignore")

    # Server-side secret issued alongside the site key
    secret_key: str = ""

    # Override for staging endpoints or local fakes
    verify_url: str = DEFAULT_VERIFY_URL

    # Seconds; applied to connect, read, write and pool acquisition
    timeout: float = 10.0


def validate_settings(settings: Settings) -> None:
    """Warn about settings that will make every verification fail or leak."""
    if not settings.secret_key:
        logging.warning("RECAPTCHA_SECRET_KEY not set - verifier cannot be constructed")

    if not settings.verify_url.startswith("https://"):
        logging.warning(
            "RECAPTCHA_VERIFY_URL is not HTTPS - the secret key will be sent in cleartext"
        )


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    validate_settings(settings)
    return settings
