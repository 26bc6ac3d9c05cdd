from loguru import logger
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_GYM_ROUND_DOWN_MAX = 0.2
DEFAULT_GYM_ROUND_HALF_MAX = 0.7


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="LIFTLOG_LOG_LEVEL")
    log_file: str = Field(default="", validation_alias="LIFTLOG_LOG_FILE")
    warmup_empty_bar_kg: float = Field(
        default=20.0,
        gt=0,
        validation_alias="LIFTLOG_WARMUP_EMPTY_BAR_KG",
        description="Load of the bar-only step prepended to lower-body barbell warm-ups",
    )
    gym_round_down_max: float = Field(
        default=DEFAULT_GYM_ROUND_DOWN_MAX,
        validation_alias="LIFTLOG_GYM_ROUND_DOWN_MAX",
        description="Largest fractional remainder that still rounds down to the whole kilo",
    )
    gym_round_half_max: float = Field(
        default=DEFAULT_GYM_ROUND_HALF_MAX,
        validation_alias="LIFTLOG_GYM_ROUND_HALF_MAX",
        description="Largest fractional remainder that still snaps to the half kilo",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LIFTLOG_",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LIFTLOG_LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @model_validator(mode="after")
    def validate_gym_rounding_break_points(self) -> "Settings":
        """Revert both break points to defaults when they do not describe a usable rule."""
        down = self.gym_round_down_max
        half = self.gym_round_half_max
        if not (0 <= down < 0.5 <= half < 1):
            logger.warning(
                f"Inconsistent gym rounding break points (LIFTLOG_GYM_ROUND_DOWN_MAX={down}, LIFTLOG_GYM_ROUND_HALF_MAX={half}). "
                f"Expected 0 <= down < 0.5 <= half < 1. Defaulting to "
                f"{DEFAULT_GYM_ROUND_DOWN_MAX}/{DEFAULT_GYM_ROUND_HALF_MAX}."
            )
            self.gym_round_down_max = DEFAULT_GYM_ROUND_DOWN_MAX
            self.gym_round_half_max = DEFAULT_GYM_ROUND_HALF_MAX
        return self


settings = Settings()
