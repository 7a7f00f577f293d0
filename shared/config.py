"""
Shared configuration management for the decision tree rule domain.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from shared.logging import configure_logging


class DecisionTreeConfig(BaseSettings):
    """Configuration for processes hosting decision tree rules."""

    model_config = SettingsConfigDict(
        env_prefix="DECISIONTREE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = Field(default="local")
    service_name: str = Field(default="decisiontree")

    # Logging
    log_level: str = Field(default="info")
    json_logs: bool = Field(default=True)


@lru_cache()
def get_config() -> DecisionTreeConfig:
    """Get the process-wide configuration."""
    return DecisionTreeConfig()


def setup_logging(config: Optional[DecisionTreeConfig] = None) -> DecisionTreeConfig:
    """Configure structured logging from settings."""
    config = config or get_config()
    configure_logging(config.service_name, config.log_level, json_logs=config.json_logs)
    return config
