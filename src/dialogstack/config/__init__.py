"""Configuration module for dialogstack."""

from dialogstack.config.loader import SettingsLoader
from dialogstack.config.models import DialogSettings, LoggingConfig, PersistenceConfig

__all__ = ["DialogSettings", "LoggingConfig", "PersistenceConfig", "SettingsLoader"]
