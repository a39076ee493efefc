"""
Configuration handling for the condensed audio maker
"""
import copy
import math
import os
import yaml
from typing import Dict, Any, Optional

from .services.errors import ConfigError


class Config:
    """Application configuration: defaults < YAML file < CLI arguments"""

    DEFAULT_CONFIG = {
        'output_dir': './output',
        'episodes': [],
        'dry_run': False,
        'timing': {
            'padding': 0.5,     # seconds added before and after each cue
            'merge_gap': 0.0    # silences up to this long are bridged
        }
    }

    NESTED_KEYS = ('timing',)

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize the configuration

        Args:
            config_file: Path to a YAML configuration file (optional)
        """
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file and os.path.exists(config_file):
            self.load_from_file(config_file)

    def load_from_file(self, config_file: str) -> None:
        """
        Load configuration from a YAML file

        Args:
            config_file: Path to the configuration file
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Error loading configuration file: {e}") from e

        if not file_config:
            return
        if not isinstance(file_config, dict):
            raise ConfigError("Configuration file must contain a mapping")

        for key, value in file_config.items():
            if key in self.NESTED_KEYS and isinstance(value, dict):
                self._deep_merge(self.config.setdefault(key, {}), value)
            else:
                self.config[key] = value

    def _deep_merge(self, base: dict, update: dict) -> None:
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Update the configuration with CLI arguments

        ``None`` values are ignored so unset flags keep file/default values.
        ``padding`` and ``merge_gap`` go to the ``timing`` section.
        """
        for key, value in args.items():
            if value is None:
                continue
            if key in self.DEFAULT_CONFIG['timing']:
                self.config.setdefault('timing', {})[key] = value
            else:
                self.config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def get_timing(self) -> Dict[str, float]:
        """Return ``padding`` and ``merge_gap`` as floats"""
        timing = self.config.get('timing') or {}
        defaults = self.DEFAULT_CONFIG['timing']
        resolved = {}
        for key, default in defaults.items():
            value = timing.get(key)
            try:
                resolved[key] = float(default if value is None else value)
            except (TypeError, ValueError) as e:
                raise ConfigError(f"Invalid value for timing.{key}: {value!r}") from e
            if not math.isfinite(resolved[key]) or resolved[key] < 0:
                raise ConfigError(f"timing.{key} must be a finite number >= 0, got {value!r}")
        return resolved

    def get_all(self) -> Dict[str, Any]:
        return self.config.copy()
