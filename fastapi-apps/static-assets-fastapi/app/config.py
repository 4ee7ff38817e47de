"""Application configuration using Pydantic Settings."""

import os
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings

from cache_control_policy import (
    CacheControlPolicyConfig,
    load_policy_config,
    load_policy_config_from_yaml,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "static-assets-fastapi"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = os.environ.get("ENVIRONMENT", "development")
    DEBUG: bool = ENVIRONMENT == "development"

    # Server
    HOST: str = os.environ.get("HOST", "0.0.0.0")
    PORT: int = int(os.environ.get("PORT", "52010"))

    # Cache-Control policy
    # CACHE_CONTROL_RULES is a JSON list of [pattern, directive] pairs, e.g.
    # '[["text/html", "no-cache"], ["image/*", "public, max-age=86400"]]'
    CACHE_CONTROL_DEFAULT: str = "no-cache"
    CACHE_CONTROL_RULES: Optional[list[tuple[str, str]]] = None
    CACHE_CONTROL_CONFIG_FILE: Optional[str] = None
    CACHE_CONTROL_CONFIG_SECTION: Optional[str] = None

    class Config:
        case_sensitive = True
        env_file = None  # Use system env only

    def cache_control_policy(self) -> CacheControlPolicyConfig:
        """Build the policy config. A config file takes precedence over env rules."""
        if self.CACHE_CONTROL_CONFIG_FILE:
            return load_policy_config_from_yaml(
                self.CACHE_CONTROL_CONFIG_FILE,
                section=self.CACHE_CONTROL_CONFIG_SECTION,
            )
        return load_policy_config(
            {
                "default": self.CACHE_CONTROL_DEFAULT,
                "rules": self.CACHE_CONTROL_RULES,
            }
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
