"""
Configuration Loader - YAML Loading with Validation.

Reads the report parameters from a YAML file and validates them with the
Pydantic models. A run without a configuration file uses the defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from training_reports.config.models import ReportConfig
from training_reports.resilience.error_handler import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config") / "default.yaml"


class ConfigLoader:
    """Loads and validates report configuration from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config paths
        """
        self._base_path = base_path or Path(".")

    def load(self, config_path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> ReportConfig:
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to YAML config file

        Returns:
            Validated ReportConfig object

        Raises:
            ConfigError: If the file cannot be read, is not UTF-8 YAML,
                         or holds invalid report parameters
        """
        path = self._resolve_path(config_path)
        return self._validate(self._load_yaml(path), path)

    def load_or_default(
        self, config_path: Union[str, Path] = DEFAULT_CONFIG_PATH
    ) -> ReportConfig:
        """
        Load configuration, falling back to the defaults when the file is absent.

        Raises:
            ConfigError: If the file exists but cannot be loaded
        """
        path = self._resolve_path(config_path)
        if not path.exists():
            logger.info(f"{path} not found, using built-in defaults")
            return ReportConfig()
        return self.load(config_path)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> ReportConfig:
        """Load configuration from dictionary."""
        return self._validate(config_dict, None)

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        """Resolve config path relative to base path."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML file as a mapping."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}", path) from e
        except UnicodeDecodeError as e:
            raise ConfigError(f"{path} is not UTF-8 text: {e}", path) from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Malformed YAML in {path}: {e}", path) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"{path} must hold a mapping, got {type(data).__name__}", path
            )
        return data

    def _validate(
        self, config_dict: Dict[str, Any], path: Optional[Path]
    ) -> ReportConfig:
        try:
            return ReportConfig.model_validate(config_dict)
        except ValidationError as e:
            source = path or "configuration"
            raise ConfigError(f"Invalid {source}:\n{e}", path) from e
