import os


class Settings:
    """Load environment variables once – used everywhere."""
    USER_AGENT: str = os.getenv(
        "USER_AGENT", "media-scraper/1.0 (+https://example.com)"
    )
    FETCH_TIMEOUT: int = int(os.getenv("FETCH_TIMEOUT", "30"))

    # Sent back verbatim on every /scrape/media response
    ACCESS_CONTROL_ALLOW_ORIGIN: str = os.getenv("ACCESS_CONTROL_ALLOW_ORIGIN", "")

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
