# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Configuration module for the IPUZ importer.

Handles loading configuration from YAML files with defaults for
every setting.
"""

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, List

import yaml


DEFAULT_BLOCK_VALUE = "#"

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    directory: str = "./logs"
    file_prefix: str = "ipuz_importer"
    enable_console: bool = True


@dataclass
class ImporterConfig:
    """Complete configuration for the IPUZ importer."""
    block_value: str = DEFAULT_BLOCK_VALUE
    encoding: str = "utf-8"

    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        """Convert dicts to dataclass instances if needed."""
        if isinstance(self.logging, dict):
            self.logging = LoggingConfig(**self.logging)

    @classmethod
    def from_yaml(cls, path: str) -> 'ImporterConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            ImporterConfig instance

        Raises:
            ConfigValidationError: If file doesn't exist or is invalid
        """
        path = Path(path)
        if not path.exists():
            raise ConfigValidationError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML in {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"Configuration file must contain a YAML mapping, got {type(data)}"
            )

        config = cls._from_dict(data)

        errors = config.validate()
        if errors:
            raise ConfigValidationError(
                f"Invalid configuration in {path}: " + "; ".join(errors)
            )

        return config

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> 'ImporterConfig':
        """Create ImporterConfig from dictionary."""
        importer_data = data.get('importer') or {}

        config = cls(
            block_value=importer_data.get('block_value', cls.block_value),
            encoding=importer_data.get('encoding', cls.encoding),
        )

        if 'logging' in data:
            log_data = data['logging'] or {}
            config.logging = LoggingConfig(
                level=log_data.get('level', config.logging.level),
                directory=log_data.get('directory', config.logging.directory),
                file_prefix=log_data.get(
                    'file_prefix', config.logging.file_prefix
                ),
                enable_console=log_data.get(
                    'enable_console', config.logging.enable_console
                ),
            )

        return config

    def validate(self) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not isinstance(self.block_value, str) or not self.block_value:
            errors.append("block_value must be a non-empty string")

        try:
            "".encode(self.encoding)
        except (LookupError, TypeError):
            errors.append(f"Unknown encoding '{self.encoding}'")

        if str(self.logging.level).upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid log level '{self.logging.level}'. "
                f"Must be one of: {VALID_LOG_LEVELS}"
            )

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'importer': {
                'block_value': self.block_value,
                'encoding': self.encoding,
            },
            'logging': asdict(self.logging),
        }
