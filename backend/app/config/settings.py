from __future__ import annotations

from typing import List

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScanSettings(BaseModel):
    default_symbols: List[str] = Field(
        default_factory=lambda: ["RELIANCE", "TCS", "HDFCBANK", "INFY", "ICICIBANK"]
    )
    max_symbols: int = 5
    symbol_delay_seconds: float = 1.0

    @field_validator("max_symbols")
    @classmethod
    def validate_max_symbols(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_symbols must be at least 1, got {v}.")
        return v

    @field_validator("symbol_delay_seconds")
    @classmethod
    def validate_delay(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"symbol_delay_seconds must not be negative, got {v}.")
        return v


class ProviderSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STOCKSCANNER_",
        env_file=("../.env", ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )
    twelvedata_api_key: str | None = None
    twelvedata_base_url: str = "https://api.twelvedata.com"
    newsdata_api_key: str | None = None
    newsdata_base_url: str = "https://newsdata.io"
    request_timeout_seconds: float = 5.0
    exchange_suffix: str = ".NS"
    news_country: str = "in"
    news_language: str = "en"

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"request_timeout_seconds must be positive, got {v}.")
        return v


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STOCKSCANNER_",
        env_file=("../.env", ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    service_name: str = "AI Stock Scanner Backend"
    server_tag: str = "github-ai-backend"
    version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = Field(
        default=3000,
        validation_alias=AliasChoices("PORT", "STOCKSCANNER_PORT"),
    )
    api_prefix: str = "/api"
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    log_level: str = "INFO"
    log_json: bool = False
    log_file: str | None = None

    scan: ScanSettings = Field(default_factory=ScanSettings)
    providers: ProviderSettings = Field(default_factory=ProviderSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


def load_settings(**overrides) -> Settings:
    """Build the settings object handed to ``create_app`` at startup."""
    return Settings(**overrides)
