"""Configuration management for Groot.

This module provides a clean interface for reading and writing
both repository-local and global configuration files.
"""

import os
import configparser
from pathlib import Path
from typing import Optional, Dict

TRUE_VALUES = ('1', 'true', 'yes', 'on')
FALSE_VALUES = ('0', 'false', 'no', 'off')

DEFAULTS = {
    ('core', 'allowempty'): 'true',
    ('core', 'stagemode'): 'append',
    ('core', 'verifyobjects'): 'true',
    ('color', 'ui'): 'true',
}


def split_key(key: str):
    """Split 'section.option' into its parts; bare keys go to [core]."""
    return tuple(key.split('.', 1)) if '.' in key else ('core', key)


class Config:
    """
    Manages Groot configuration files.

    Configuration is stored in INI format:
    - Global config: ~/.grootconfig
    - Repository config: .groot/config

    Repository config takes precedence over global config.
    Environment variables (GROOT_<SECTION>_<KEY>) take highest precedence.
    """

    GLOBAL_CONFIG_PATH = Path.home() / '.grootconfig'

    def __init__(self, repo_config_path: Optional[Path] = None):
        """
        Initialize Config manager.

        Args:
            repo_config_path: Path to repository config file, if in a repo
        """
        self.repo_config_path = repo_config_path
        self._global_config = None
        self._repo_config = None

    @property
    def global_config(self) -> configparser.ConfigParser:
        """Load and return global configuration."""
        if self._global_config is None:
            self._global_config = configparser.ConfigParser()
            if self.GLOBAL_CONFIG_PATH.exists():
                self._global_config.read(self.GLOBAL_CONFIG_PATH)
        return self._global_config

    @property
    def repo_config(self) -> Optional[configparser.ConfigParser]:
        """Load and return repository configuration."""
        if self._repo_config is None and self.repo_config_path:
            self._repo_config = configparser.ConfigParser()
            if self.repo_config_path.exists():
                self._repo_config.read(self.repo_config_path)
        return self._repo_config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Priority order (highest to lowest):
        1. Environment variables (GROOT_<SECTION>_<KEY>)
        2. Repository config
        3. Global config
        4. Fallback value, then built-in default

        Args:
            section: Config section (e.g., 'core', 'color')
            key: Config key (e.g., 'allowempty')
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        env_key = f"GROOT_{section.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        if self.repo_config and self.repo_config.has_option(section, key):
            return self.repo_config.get(section, key)

        if self.global_config.has_option(section, key):
            return self.global_config.get(section, key)

        if fallback is not None:
            return fallback
        return DEFAULTS.get((section, key))

    def get_bool(self, section: str, key: str, fallback: bool = False) -> bool:
        """
        Get a boolean configuration value.

        Raises:
            ValueError: If the stored value is not a recognised boolean
        """
        value = self.get(section, key)
        if value is None:
            return fallback
        lowered = value.strip().lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
        raise ValueError(f"Invalid boolean for {section}.{key}: {value!r}")

    def _target(self, global_config: bool):
        if global_config:
            return self.global_config, self.GLOBAL_CONFIG_PATH
        if not self.repo_config_path:
            raise ValueError("No repository config path available")
        if self._repo_config is None:
            self._repo_config = configparser.ConfigParser()
            if self.repo_config_path.exists():
                self._repo_config.read(self.repo_config_path)
        return self._repo_config, self.repo_config_path

    def set(self, section: str, key: str, value: str, global_config: bool = False) -> None:
        """
        Set a configuration value.

        Args:
            section: Config section
            key: Config key
            value: Value to set
            global_config: If True, write to global config; otherwise repo config
        """
        config, config_path = self._target(global_config)

        if not config.has_section(section):
            config.add_section(section)

        config.set(section, key, value)

        with open(config_path, 'w') as f:
            config.write(f)

    def unset(self, section: str, key: str, global_config: bool = False) -> bool:
        """
        Remove a configuration value.

        Args:
            section: Config section
            key: Config key
            global_config: If True, modify global config; otherwise repo config

        Returns:
            True if value was removed, False if it didn't exist
        """
        config, config_path = self._target(global_config)

        if not config.has_option(section, key):
            return False

        config.remove_option(section, key)

        # Remove empty sections
        if not config.options(section):
            config.remove_section(section)

        with open(config_path, 'w') as f:
            config.write(f)

        return True

    def list_all(self, global_only: bool = False, repo_only: bool = False) -> Dict[str, Dict[str, str]]:
        """
        List all configuration values.

        Args:
            global_only: Only show global config
            repo_only: Only show repo config

        Returns:
            Dict of sections to key-value dicts
        """
        result = {}

        if not repo_only:
            for section in self.global_config.sections():
                result.setdefault(section, {})
                for key, value in self.global_config.items(section):
                    result[section][f"{key} (global)"] = value

        if not global_only and self.repo_config:
            for section in self.repo_config.sections():
                result.setdefault(section, {})
                for key, value in self.repo_config.items(section):
                    result[section][key] = value

        return result


def get_config(repo=None) -> Config:
    """
    Get a Config instance.

    Args:
        repo: Repository instance, or None for global-only config

    Returns:
        Config instance
    """
    if repo:
        return Config(repo.config_file)
    return Config()
