"""
Configuration Management

Loads summarizer configuration from a YAML file and environment variables.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from .utils.file_utils import load_config as load_yaml_config
from .utils.logging_utils import get_logger

logger = get_logger(__name__)

# Resolved against the working directory, like the CLI's data paths
DEFAULT_CONFIG_FILE = Path('config') / 'summarizer_config.yaml'
DEFAULT_ENV_FILE = Path('.env')

# Environment variable -> (config key, type)
ENV_OVERRIDES = {
    'SUMMARIZER_MAX_INPUT_BYTES': ('limits.max_input_bytes', int),
    'SUMMARIZER_MAX_ROWS': ('limits.max_rows', int),
    'SUMMARIZER_SAMPLE_ROWS': ('sampling.sample_rows', int),
    'LOG_LEVEL': ('logging.level', str),
}


class Config:
    """
    Summarizer configuration manager.

    Loads configuration from:
    1. YAML file (config/summarizer_config.yaml in the working directory)
    2. Environment variables (.env in the working directory)

    Missing files are not an error; SummarizerSettings defaults apply.

    Example:
        >>> config = Config()
        >>> config.get('limits.max_rows')
        100000
    """

    def __init__(self, config_file: Optional[Union[str, Path]] = None, env_file: Optional[Union[str, Path]] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to YAML config file (optional)
            env_file: Path to .env file (optional, defaults to ./.env)
        """
        env_path = Path(env_file) if env_file else Path.cwd() / DEFAULT_ENV_FILE
        if env_path.exists():
            load_dotenv(env_path)
            logger.info(f"Loaded environment variables from: {env_path}")

        config_path = Path(config_file) if config_file else Path.cwd() / DEFAULT_CONFIG_FILE

        self.config: Dict[str, Any] = {}
        if config_path.exists():
            self.config = load_yaml_config(config_path)
            logger.info(f"Loaded config from: {config_path}")
        else:
            logger.warning(f"Config file not found: {config_path}, using defaults")

        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply environment variable overrides to config."""
        for env_name, (key, cast) in ENV_OVERRIDES.items():
            raw = os.getenv(env_name)
            if raw:
                try:
                    self.set(key, cast(raw))
                except ValueError:
                    raise ValueError(f"Invalid value for {env_name}: {raw!r}") from None

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Example:
            >>> config.get('sampling.sample_rows')
            10
            >>> config.get('nonexistent.key', 'default')
            'default'
        """
        value = self.config

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any):
        """Set a configuration value using dot notation."""
        keys = key.split('.')
        config = self.config

        for k in keys[:-1]:
            config = config.setdefault(k, {})

        config[keys[-1]] = value

    def to_dict(self) -> Dict[str, Any]:
        return self.config.copy()


class SummarizerSettings(BaseModel):
    """Per-call limits for the summarization engine."""

    model_config = ConfigDict(frozen=True)

    max_input_bytes: int = Field(
        default=5 * 1024 * 1024,
        gt=0,
        description="Largest accepted upload, in UTF-8 bytes"
    )

    max_rows: int = Field(
        default=100_000,
        gt=0,
        description="Largest accepted number of data rows (header excluded)"
    )

    sample_rows: int = Field(
        default=10,
        ge=0,
        description="Number of leading rows included as prompt context"
    )

    max_cell_length: int = Field(
        default=200,
        gt=0,
        description="Sample cells longer than this are truncated with an ellipsis"
    )

    @staticmethod
    def from_config(config: Optional[Config] = None) -> "SummarizerSettings":
        """Create settings from a Config, falling back to field defaults."""
        if config is None:
            return SummarizerSettings()

        values = {
            'max_input_bytes': config.get('limits.max_input_bytes'),
            'max_rows': config.get('limits.max_rows'),
            'sample_rows': config.get('sampling.sample_rows'),
            'max_cell_length': config.get('sampling.max_cell_length'),
        }

        return SummarizerSettings(**{k: v for k, v in values.items() if v is not None})


# Global config instance
_global_config = None


def get_config(config_file: Optional[Union[str, Path]] = None) -> Config:
    """
    Get or create the global configuration instance.

    Args:
        config_file: Path to config file (only used on first call)
    """
    global _global_config

    if _global_config is None:
        _global_config = Config(config_file)

    return _global_config
