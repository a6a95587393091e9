from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="DAYPLAN_LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="DAYPLAN_LOG_FILE")
    min_shrink_minutes: int = Field(
        default=0,
        ge=0,
        validation_alias="DAYPLAN_MIN_SHRINK_MINUTES",
        description="Shortest gap (minutes) shrink-to-fit may place into; 0 accepts any non-empty gap",
    )
    ui_min_block_minutes: int = Field(
        default=5,
        ge=0,
        validation_alias="DAYPLAN_UI_MIN_BLOCK_MINUTES",
        description="Presentation floor for picker lengths (not enforced by the engine)",
    )
    default_block_minutes: int = Field(
        default=30,
        gt=0,
        validation_alias="DAYPLAN_DEFAULT_BLOCK_MINUTES",
        description="Suggested length for a newly added block",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid DAYPLAN_LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="DAYPLAN_",
        extra="ignore",
    )


settings = Settings()
