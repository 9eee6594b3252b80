#!/usr/bin/env python3

"""
Configuration management for genomic range handling.

Centralized configuration with support for file-based configuration
and environment variable overrides.
"""

import os
import json
import logging
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any

import yaml

from .exceptions import ConfigurationError
from .formatting import STRING_METHODS

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


def _is_yaml(config_path: str) -> bool:
    return config_path.lower().endswith(('.yaml', '.yml'))


@dataclass
class RangeConfig:
    """Centralized configuration for range display and aggregation."""

    # Display settings
    string_method: str = 'lus'
    integer_width: int = 6

    # Aggregation
    normalize_strands: bool = False

    # Logging
    log_level: str = 'INFO'

    @classmethod
    def from_file(cls, config_path: str) -> 'RangeConfig':
        """Load configuration from file (JSON or YAML)."""
        if not os.path.exists(config_path):
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r') as f:
                if _is_yaml(config_path):
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML configuration file format: {e}")
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid configuration file format: {e}")
        except OSError as e:
            raise ConfigurationError(f"Error loading configuration: {e}")

        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Configuration file must contain a mapping: {config_path}")

        logging.info(f"Loaded configuration from {config_path}")
        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'RangeConfig':
        """Create configuration from dictionary."""
        # Filter out unknown keys
        known_keys = set(cls.__dataclass_fields__.keys())
        filtered_dict = {k: v for k, v in config_dict.items() if k in known_keys}

        try:
            return cls(**filtered_dict)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration parameters: {e}")

    @classmethod
    def from_env(cls) -> 'RangeConfig':
        """Load configuration from environment variables."""
        config = cls()

        # Map environment variables to config fields
        env_mappings = {
            'RANGES_STRING_METHOD': ('string_method', str),
            'RANGES_INTEGER_WIDTH': ('integer_width', int),
            'RANGES_NORMALIZE_STRANDS': ('normalize_strands', lambda x: x.lower() in ('true', '1', 'yes')),
            'RANGES_LOG_LEVEL': ('log_level', str.upper),
        }

        for env_var, (field_name, converter) in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value:
                try:
                    setattr(config, field_name, converter(env_value))
                except (ValueError, TypeError) as e:
                    raise ConfigurationError(f"Invalid environment variable {env_var}: {e}")

        config.validate()
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    def save_to_file(self, config_path: str) -> None:
        """Save configuration to file."""
        config_dict = self.to_dict()

        try:
            with open(config_path, 'w') as f:
                if _is_yaml(config_path):
                    yaml.safe_dump(config_dict, f, default_flow_style=False)
                else:
                    json.dump(config_dict, f, indent=2)
        except OSError as e:
            raise ConfigurationError(f"Error saving configuration: {e}")

    def validate(self) -> None:
        """Validate configuration parameters."""
        if self.string_method not in STRING_METHODS:
            raise ConfigurationError(f"string_method must be one of {', '.join(STRING_METHODS)}")

        if isinstance(self.integer_width, bool) or not isinstance(self.integer_width, int):
            raise ConfigurationError("integer_width must be an integer")

        if self.integer_width < 0:
            raise ConfigurationError("integer_width must be >= 0")

        if not isinstance(self.normalize_strands, bool):
            raise ConfigurationError("normalize_strands must be a boolean")

        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"log_level must be one of {', '.join(LOG_LEVELS)}")

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.validate()


def load_config(config_path: Optional[str] = None,
                use_env: bool = True) -> RangeConfig:
    """
    Load configuration with priority: file > environment > defaults.

    Args:
        config_path: Path to configuration file (optional)
        use_env: Whether to load environment variables

    Returns:
        RangeConfig: Loaded configuration
    """
    # Start with defaults
    config = RangeConfig()

    # Override with environment variables if requested
    if use_env:
        env_config = RangeConfig.from_env()
        # Merge non-default values from environment
        for field_name in RangeConfig.__dataclass_fields__:
            env_value = getattr(env_config, field_name)
            if env_value != getattr(config, field_name):
                setattr(config, field_name, env_value)

    # Override with file configuration if provided
    if config_path:
        file_config = RangeConfig.from_file(config_path)
        # Merge all values from file
        for field_name in RangeConfig.__dataclass_fields__:
            setattr(config, field_name, getattr(file_config, field_name))

    config.validate()
    return config
