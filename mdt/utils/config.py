#!/usr/bin/env python3
"""
Shared configuration utility for mdt.

Provides .env file discovery and typed access to the environment variables
that supply command-line defaults.
"""

import logging
import os
from pathlib import Path
from dotenv import load_dotenv
from typing import Optional

logger = logging.getLogger(__name__)

ENV_FILENAME = ".env.mdt"


class ConfigManager:
    """
    Centralized configuration management for mdt.

    Features:
    - .env.mdt discovery (current dir + up to 2 parent dirs)
    - Defaults for delimiter, header handling and log level
    """

    def __init__(self):
        self._env_loaded = False
        self._env_path: Optional[Path] = None
        self.load_environment()

    def load_environment(self) -> bool:
        """
        Search for and load the .env.mdt file.

        Search order:
        1. Current working directory
        2. One level up (parent directory)
        3. Two levels up (grandparent directory)

        Values already present in the environment are not overridden.

        Returns:
            bool: True if the file was found and loaded, False otherwise
        """
        if self._env_loaded:
            return True

        search_paths = [
            Path.cwd(),
            Path.cwd().parent,
            Path.cwd().parent.parent
        ]

        for search_path in search_paths:
            env_file = search_path / ENV_FILENAME
            if env_file.exists() and env_file.is_file():
                logger.debug(f"Loading {ENV_FILENAME} from: {env_file}")
                load_dotenv(env_file)
                self._env_path = env_file
                self._env_loaded = True
                return True

        logger.debug(f"No {ENV_FILENAME} found in current directory or up to 2 parent directories")
        return False

    @property
    def env_path(self) -> Optional[Path]:
        """Path of the loaded .env file, if any."""
        return self._env_path

    def get_default_delimiter(self) -> str:
        """
        Get the default CSV delimiter.

        Returns:
            str: Value of MDT_DELIMITER, or "," when unset or empty
        """
        return self.get_env_string("MDT_DELIMITER") or ","

    def get_default_no_header(self) -> bool:
        """
        Get whether tables are treated as headerless by default.

        Returns:
            bool: Value of MDT_NO_HEADER (default False)
        """
        return self.get_env_bool("MDT_NO_HEADER", False)

    def get_log_level(self) -> str:
        """
        Get the logging level name.

        Returns:
            str: Upper-cased MDT_LOG_LEVEL, or "WARNING" when unset or unknown
        """
        level = self.get_env_string("MDT_LOG_LEVEL", "WARNING").upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            logger.warning(f"Invalid MDT_LOG_LEVEL {level!r}, using WARNING")
            return "WARNING"
        return level

    def get_env_string(self, key: str, default: str = None) -> str:
        """
        Get string environment variable.

        Args:
            key: Environment variable name
            default: Default value if not found

        Returns:
            str: Environment variable value or default
        """
        return os.getenv(key, default)

    def get_env_bool(self, key: str, default: bool) -> bool:
        """
        Get boolean environment variable.

        Args:
            key: Environment variable name
            default: Default value if not found

        Returns:
            bool: True if value is 'true', '1', 'yes', 'on' (case-insensitive)
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')


# Global singleton instance for easy import
config = ConfigManager()


def get_default_delimiter() -> str:
    """Convenience function to get the default CSV delimiter."""
    return config.get_default_delimiter()


def get_default_no_header() -> bool:
    """Convenience function to get the default header handling."""
    return config.get_default_no_header()


def get_log_level() -> str:
    """Convenience function to get the logging level name."""
    return config.get_log_level()
