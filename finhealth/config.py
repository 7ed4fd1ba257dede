"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "finhealth-gateway"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    # Dashboard defaults
    default_section_80_deductions: float = 150_000.0
    default_debt: float = 100_000.0  # used when the caller does not report debt
    trend_months: int = 6


settings = Settings()
