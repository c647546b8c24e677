import json
import os
from typing import Any, Dict, List, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

from fire_planner.core.rates import DEFAULT_CURRENCY_PREFIX
from fire_planner.schemas.profile import DEFAULT_PROFILE, FinancialProfile

CONFIG_ENV_VAR = "FIRE_PLANNER_CONFIG"

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when the configuration file cannot be loaded or parsed."""


class Settings(BaseModel):
    """Service settings, loaded from an optional JSON file."""

    model_config = ConfigDict(extra="forbid")

    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Origins allowed to call /api/*.",
    )
    log_level: str = Field("INFO", description="Minimum loguru level for the stderr sink.")
    log_file: Optional[str] = Field(
        None,
        description="Optional log file path (rotated at 10 MB). None disables the file sink.",
    )
    currency_prefix: str = Field(DEFAULT_CURRENCY_PREFIX)
    default_profile: FinancialProfile = Field(default=DEFAULT_PROFILE)

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("default_profile")
    @classmethod
    def check_default_profile(cls, v: FinancialProfile) -> FinancialProfile:
        if not v.currentAge <= v.targetAge <= v.lifeExpectancy:
            logger.warning(
                f"Default profile ages are out of order "
                f"({v.currentAge}/{v.targetAge}/{v.lifeExpectancy})."
            )
        return v


def load_config_from_json(file_path: str) -> Dict[str, Any]:
    """Loads and returns the configuration dictionary from a JSON file."""
    if not os.path.exists(file_path):
        raise ConfigurationError(f"Configuration file not found at: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Error parsing JSON file '{file_path}': {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Unexpected error reading config file '{file_path}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file '{file_path}' must contain a JSON object")
    return data


def load_settings(file_path: Optional[str] = None) -> Settings:
    """Build Settings from ``file_path``, the FIRE_PLANNER_CONFIG file, or defaults."""
    path = file_path or os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return Settings()

    logger.info(f"Loading configuration from: {path}")
    return Settings.model_validate(load_config_from_json(path))
