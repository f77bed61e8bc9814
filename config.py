"""
Central configuration for rules, display and logging.
Pydantic models give type-safe configuration management.
"""
from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == 'true'


class UISettings(BaseModel):
    """Board display and interaction settings."""

    square_size: int = Field(default=72, ge=24, le=160, description="Pixels per board square")
    show_hints: bool = Field(default=True, description="Highlight legal destinations of the selected piece")
    show_selectable: bool = Field(default=True, description="Outline pieces the side to move may pick up")
    log_limit: int = Field(default=200, ge=1, le=10000, description="Events kept in the activity log")

    @field_validator('show_hints', 'show_selectable', mode='before')
    @classmethod
    def validate_bool_fields(cls, v):
        return bool(v)

    @field_validator('square_size', 'log_limit', mode='before')
    @classmethod
    def validate_int_fields(cls, v):
        return int(v)


class GameRulesSettings(BaseModel):
    """Game rules and variant settings."""

    advanced_mode: bool = Field(default=False, description="Forced captures, multi-jump chains and kinging")
    freeze_on_win: bool = Field(default=True, description="Reject further moves once a side has won")

    @field_validator('advanced_mode', 'freeze_on_win', mode='before')
    @classmethod
    def validate_bool_fields(cls, v):
        return bool(v)


class LoggingSettings(BaseModel):
    """Logging configuration."""

    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_to_file: bool = Field(default=False, description="Write logs to file")
    log_file_path: str = Field(default="checkers.log", description="Log file path")

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
        v_upper = v.upper() if isinstance(v, str) else str(v).upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper


class CheckersConfig(BaseModel):
    """Main configuration model for the Checkerboard game."""

    ui: UISettings = Field(default_factory=UISettings)
    rules: GameRulesSettings = Field(default_factory=GameRulesSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # Metadata
    version: str = Field(default="1.0.0", description="Configuration version")
    config_file: Optional[str] = Field(default=None, description="Path to config file")

    @classmethod
    def from_env(cls) -> 'CheckersConfig':
        """Create configuration from environment variables."""
        return cls(
            ui=UISettings(
                square_size=int(os.getenv('CHECKERS_SQUARE_SIZE', '72')),
                show_hints=_env_flag('CHECKERS_HINTS', 'true'),
                log_limit=int(os.getenv('CHECKERS_LOG_LIMIT', '200')),
            ),
            rules=GameRulesSettings(
                advanced_mode=_env_flag('CHECKERS_ADVANCED', 'false'),
                freeze_on_win=_env_flag('CHECKERS_FREEZE_ON_WIN', 'true'),
            ),
            logging=LoggingSettings(
                log_level=os.getenv('CHECKERS_LOG_LEVEL', 'INFO'),
                log_to_file=_env_flag('CHECKERS_LOG_FILE', 'false'),
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'ui': self.ui.model_dump(),
            'rules': self.rules.model_dump(),
            'logging': self.logging.model_dump(),
            'version': self.version,
            'config_file': self.config_file,
        }

    def save_to_file(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        config_dict = self.to_dict()
        config_dict['config_file'] = filepath

        with open(filepath, 'w') as f:
            json.dump(config_dict, f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str) -> 'CheckersConfig':
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)

        return cls(
            ui=UISettings(**data.get('ui', {})),
            rules=GameRulesSettings(**data.get('rules', {})),
            logging=LoggingSettings(**data.get('logging', {})),
            version=data.get('version', '1.0.0'),
            config_file=filepath,
        )

    def update_from_dict(self, updates: Dict[str, Any]) -> None:
        """Update configuration from dictionary."""
        for section, settings in updates.items():
            if hasattr(self, section) and isinstance(settings, dict):
                section_model = getattr(self, section)
                for key, value in settings.items():
                    if hasattr(section_model, key):
                        setattr(section_model, key, value)


# Global configuration instance
_config: Optional[CheckersConfig] = None


def get_config() -> CheckersConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = CheckersConfig.from_env()
    return _config


def load_config_from_file(filepath: str) -> CheckersConfig:
    """Load configuration from file and update global instance."""
    global _config
    _config = CheckersConfig.load_from_file(filepath)
    return _config


def reset_config() -> None:
    """Reset the global configuration to defaults."""
    global _config
    _config = None


def get_ui_settings() -> UISettings:
    return get_config().ui


def get_game_rules() -> GameRulesSettings:
    return get_config().rules


def get_logging_settings() -> LoggingSettings:
    return get_config().logging


def setup_logging() -> None:
    """Configure root logging once, controlled by the logging settings."""
    if getattr(setup_logging, "_configured", False):
        return
    settings = get_logging_settings()
    level: int = getattr(logging, settings.log_level, logging.INFO)
    handlers = [logging.StreamHandler()]
    if settings.log_to_file:
        handlers.append(logging.FileHandler(settings.log_file_path))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )
    setup_logging._configured = True  # type: ignore[attr-defined]
