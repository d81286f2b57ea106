"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service runs out of the box against the seeded in‑memory catalogue.
In a real deployment you should at least override ``SECRET_KEY``.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "BookWise API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))
    algorithm: str = os.getenv("ALGORITHM", "HS256")

    # Artificial latency applied to every catalogue operation, emulating
    # a remote backend.  Set to ``0`` to disable (the test suite does).
    simulated_latency_ms: int = int(os.getenv("SIMULATED_LATENCY_MS", "500"))

    # Number of books per page returned by the listing pipeline.
    page_size: int = int(os.getenv("PAGE_SIZE", "5"))

    # Placeholder image service used for books without a cover.  The
    # ``{size}`` and ``{text}`` fields are substituted at request time.
    cover_placeholder_url: str = os.getenv(
        "COVER_PLACEHOLDER_URL",
        "https://placehold.co/{size}/3b82f6/ffffff?text={text}",
    )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
