from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.models.schemas import SteppingPolicy


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Enigma Machine Simulator"
    app_env: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Limits
    max_text_length: int = 100_000

    # Default machine, rotors listed fastest first
    default_rotors: list[str] = ["I", "II", "III"]
    default_positions: str = "AAA"
    default_reflector: str = "B"
    default_plugboard: list[str] = ["AZ", "BY"]
    default_stepping: SteppingPolicy = SteppingPolicy.ODOMETER

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
