"""Settings models for the dialog runtime."""

from typing import Literal

from pydantic import BaseModel, Field

from dialogstack.core.constants import DEFAULT_LOCALE

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class PersistenceConfig(BaseModel):
    """Where conversation stacks are kept between turns."""

    backend: Literal["memory", "langgraph"] = Field(
        default="memory", description="Stack store backend"
    )
    namespace: str = Field(
        default="dialogstack.stacks",
        description="Dotted namespace used by the langgraph backend",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default="INFO", description="Log level for dialogstack loggers")
    file: str | None = Field(default=None, description="Rotating JSON log file, if any")


class DialogSettings(BaseModel):
    """Global settings for a DialogRunner."""

    default_locale: str = Field(
        default=DEFAULT_LOCALE, description="Locale used when an activity carries none"
    )
    persistence: PersistenceConfig = Field(default_factory=PersistenceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
