"""Logging configuration settings."""

from pydantic import BaseModel, Field, field_validator


_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: str = Field(
        default="INFO",
        description="Log level for simplehttp loggers",
    )

    json_logs: bool = Field(
        default=False,
        description="Render log records as JSON instead of console output",
    )

    timing_logger: str | None = Field(
        default=None,
        description=(
            "Logger name for per-call timing lines; timing is disabled when unset"
        ),
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LEVELS:
            raise ValueError(
                f"Invalid log level {value!r}, expected one of {sorted(_LEVELS)}"
            )
        return level
