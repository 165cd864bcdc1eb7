"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings


class AccrualConfig(BaseSettings):
    """Loan accrual calculator configuration"""

    # Logging configuration
    log_level: str = "WARNING"
    log_format: str = "json"  # json or text

    # Resource limits
    max_schedule_days: int = 36600  # ~100 years of daily entries

    # Output
    default_report_format: str = "table"  # table, csv or json

    class Config:
        env_prefix = "LOAN_ACCRUAL_"
        env_file = ".env"
        extra = "ignore"
        case_sensitive = False


# Global configuration instance
config = AccrualConfig()


def get_config() -> AccrualConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> AccrualConfig:
    """Reload configuration from environment"""
    global config
    config = AccrualConfig()
    return config
