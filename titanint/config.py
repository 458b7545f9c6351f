"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TitanIntConfig(BaseSettings):
    """TitanInt runtime configuration"""

    model_config = SettingsConfigDict(
        env_prefix="TITANINT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr

    # Parser limits
    max_digits: Optional[int] = Field(None, ge=1, description="Longest accepted digit run, None = unbounded")

    # Native integer conversion
    strict_int64: bool = False  # Reject ints outside [-2**63, 2**63 - 1]

    # Emit a DEBUG record for every arithmetic operation
    trace_operations: bool = False


# Global configuration instance
config = TitanIntConfig()


def get_config() -> TitanIntConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> TitanIntConfig:
    """Reload configuration from environment"""
    global config
    config = TitanIntConfig()
    return config
