"""Configuration management for the membership service."""

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


class Settings:
    PROJECT_NAME: str = os.getenv("MEMBERSHIP_PROJECT_NAME", "Membership Service")
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./memberships.db")
    DEFAULT_ASSIGNED_BY: str = os.getenv("DEFAULT_ASSIGNED_BY", "Admin")
    DEFAULT_USER_ID: int = int(os.getenv("DEFAULT_USER_ID", "2000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()


__all__ = ["settings", "Settings", "get_settings"]
