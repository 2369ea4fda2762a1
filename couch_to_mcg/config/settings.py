from datetime import date

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from couch_to_mcg.plans.constants import (
    DEFAULT_PHASE_2_START,
    DEFAULT_PHASE_3_START,
    DEFAULT_RACE_DATE,
    DEFAULT_RACE_NAME,
    DEFAULT_START_DATE,
)


class Settings(BaseSettings):
    start_date: date = Field(default=DEFAULT_START_DATE, validation_alias="COUCH_TO_MCG_START_DATE")
    race_date: date = Field(default=DEFAULT_RACE_DATE, validation_alias="COUCH_TO_MCG_RACE_DATE")
    race_name: str = Field(default=DEFAULT_RACE_NAME, validation_alias="COUCH_TO_MCG_RACE_NAME")
    phase_2_start: date = Field(
        default=DEFAULT_PHASE_2_START,
        validation_alias="COUCH_TO_MCG_PHASE_2_START",
        description="First day of the Strength & Power phase",
    )
    phase_3_start: date = Field(
        default=DEFAULT_PHASE_3_START,
        validation_alias="COUCH_TO_MCG_PHASE_3_START",
        description="First day of the Taper & Peak phase",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="LOG_FILE")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()
