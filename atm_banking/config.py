"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class AtmConfig(BaseSettings):
    """ATM banking configuration"""

    model_config = SettingsConfigDict(
        env_prefix="ATM_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr

    # Account defaults used by the BankingSystem factories
    default_minimum_balance: float = 0.0
    default_overdraft_limit: float = 0.0
    default_interest_rate: float = 0.0  # Percent per period
    default_compound_frequency: int = 12  # Monthly

    # ATM presentation
    console_output: bool = True  # Write outcome lines to stdout/stderr

    # Feature flags
    enable_events: bool = True


# Global configuration instance
config = AtmConfig()


def get_config() -> AtmConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> AtmConfig:
    """Reload configuration from environment"""
    global config
    config = AtmConfig()
    return config
