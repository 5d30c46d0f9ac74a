"""
Global configuration management for photo-album.

Implements Singleton pattern to ensure single source of truth for global settings.
Configuration hierarchy (highest to lowest priority):
1. Runtime overrides (set() / merge())
2. File named by the PHOTO_ALBUM_CONFIG environment variable
3. Global config file (configs/global_config.yaml)
4. Hardcoded defaults

Example:
    >>> from photo_album.config import get_global_config
    >>> config = get_global_config()
    >>> photos_dir = config.get_path('photos.directory')
    >>> prefix = config.get('album.filename_prefix')
"""

import copy
import os
import yaml
import logging
from pathlib import Path
from typing import Any, Dict, Optional


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = 'PHOTO_ALBUM_CONFIG'


class GlobalConfig:
    """
    Singleton class for global configuration management.

    Loads configuration from configs/global_config.yaml and provides
    access to settings across all modules.
    """

    _instance: Optional['GlobalConfig'] = None
    _config: Dict[str, Any] = {}
    _loaded: bool = False

    def __new__(cls) -> 'GlobalConfig':
        """Singleton pattern: ensure only one instance exists."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize configuration (only loads once)."""
        if not self._loaded:
            self._load_config()
            self._loaded = True

    def _config_path(self) -> Path:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            return Path(env_path)

        # photo_album/config.py -> project root
        project_root = Path(__file__).resolve().parent.parent
        return project_root / 'configs' / 'global_config.yaml'

    def _load_config(self) -> None:
        """Load configuration from YAML file over the defaults."""
        config_path = self._config_path()
        self._config = self._get_default_config()

        if config_path.exists():
            try:
                with open(config_path, 'r') as f:
                    loaded = yaml.safe_load(f) or {}
                self._deep_merge(self._config, loaded)
                logger.info(f"Loaded global config from: {config_path}")
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load global config: {e}. Using defaults.")
                self._config = self._get_default_config()
        else:
            logger.warning(f"Global config not found at {config_path}. Using defaults.")

    def _get_default_config(self) -> Dict[str, Any]:
        """Return hardcoded default configuration."""
        return {
            'photos': {
                'directory': '/photos',
                'extensions': ['.jpg', '.jpeg', '.png', '.gif', '.webp', '.bmp', '.tiff'],
            },
            'album': {
                'filename_prefix': 'Mai',
                'page': {
                    'size': 'A4',
                    'orientation': 'landscape',
                    'margin': 10,
                    'padding': 2,
                    'dpi': 200,
                },
                'document': {
                    'format': 'pdf',
                    'title': 'Photo Album',
                    'creator': 'photo-album',
                },
            },
            'server': {
                'host': '0.0.0.0',
                'port': 8000,
                'index_path': 'index.html',
            },
            'logging': {
                'level': 'INFO',
                'base_dir': 'logs',
                'log_to_console': True,
            },
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports nested keys with dots).

        Args:
            key: Configuration key (e.g., 'photos' or 'album.page.margin')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_path(self, key: str, default: str = '') -> Path:
        """Get configuration value as Path object."""
        path_str = self.get(key, default)
        return Path(path_str)

    def get_int(self, key: str, default: int = 0) -> int:
        """Get configuration value as integer."""
        value = self.get(key, default)
        try:
            return int(value)
        except (ValueError, TypeError):
            return default

    def get_float(self, key: str, default: float = 0.0) -> float:
        """Get configuration value as float."""
        value = self.get(key, default)
        try:
            return float(value)
        except (ValueError, TypeError):
            return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get configuration value as boolean."""
        value = self.get(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ('true', 'yes', '1', 'on')
        return bool(value)

    def set(self, key: str, value: Any) -> None:
        """
        Set configuration value (runtime only, not persisted).

        Args:
            key: Configuration key (supports nested with dots)
            value: Value to set

        Example:
            >>> config = get_global_config()
            >>> config.set('photos.directory', '/srv/photos')
        """
        keys = key.split('.')
        config = self._config

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def reload(self) -> None:
        """Reload configuration from file."""
        self._loaded = False
        self._load_config()
        self._loaded = True
        logger.info("Global configuration reloaded")

    def to_dict(self) -> Dict[str, Any]:
        """Return full configuration as an independent dictionary."""
        return copy.deepcopy(self._config)

    def merge(self, other_config: Dict[str, Any]) -> None:
        """
        Merge another configuration dict into global config.

        Args:
            other_config: Dictionary to merge (overwrites existing values)
        """
        self._deep_merge(self._config, other_config)

    def _deep_merge(self, base: Dict, updates: Dict) -> None:
        """Recursively merge updates into base dictionary."""
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value


# Singleton instance accessor
_global_config_instance: Optional[GlobalConfig] = None


def get_global_config() -> GlobalConfig:
    """
    Get the global configuration instance (Singleton).

    Example:
        >>> from photo_album.config import get_global_config
        >>> config = get_global_config()
        >>> margin = config.get_float('album.page.margin')
    """
    global _global_config_instance
    if _global_config_instance is None:
        _global_config_instance = GlobalConfig()
    return _global_config_instance
