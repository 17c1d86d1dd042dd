"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BankSettings(BaseSettings):
    """Bank system configuration"""
    
    model_config = SettingsConfigDict(
        env_prefix="BANK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Persistence
    accounts_file: str = "accounts.json"
    transactions_file: str = "transactions.txt"
    
    # Business rules
    pin_length: int = Field(default=4, ge=1, le=12)
    allow_duplicate_account_numbers: bool = False
    history_substring_match: bool = False  # Legacy substring scan of the log
    
    # Logging configuration
    log_level: str = "WARNING"
    log_format: str = "text"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr
    
    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


# Global settings instance, created on first use
_settings: Optional[BankSettings] = None


def get_settings() -> BankSettings:
    """Get global settings instance"""
    global _settings
    if _settings is None:
        _settings = BankSettings()
    return _settings


def reload_settings() -> BankSettings:
    """Reload settings from environment"""
    global _settings
    _settings = BankSettings()
    return _settings
