import os
from dataclasses import dataclass


@dataclass(frozen=True)
class AppSettings:
    environment: str
    log_level: str


def get_settings() -> AppSettings:
    return AppSettings(
        environment=os.getenv("APP_ENV", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
