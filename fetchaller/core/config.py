import os

APP_NAME = "fetchaller"
APP_VERSION = "1.0.0"

# Rough average for English prose
CHARS_PER_TOKEN = 4


class Settings:
    # Tool defaults
    DEFAULT_MAX_TOKENS: int = int(os.getenv("FETCH_DEFAULT_MAX_TOKENS", "25000"))
    DEFAULT_TIMEOUT_SECONDS: int = int(os.getenv("FETCH_DEFAULT_TIMEOUT_SECONDS", "10"))

    # Transport
    ERROR_BODY_LIMIT: int = int(os.getenv("FETCH_ERROR_BODY_LIMIT", "1000"))
    USER_AGENT: str = os.getenv(
        "USER_AGENT",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    )

    # Diagnostics
    DEBUG: bool = os.getenv("FETCH_DEBUG", "0").lower() in ("1", "true", "yes")

settings = Settings()
