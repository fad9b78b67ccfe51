# Path: benchutil/config_loader.py
"""
Configuration Loader for benchutil

Loads report defaults and logging settings from the environment, after
reading an optional .env file in the working directory. Singleton
pattern ensures consistent configuration across all components.

The render functions never read the environment themselves; callers
turn this loader into a ReportConfiguration with
ReportConfiguration.from_loader().
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv

from .constants import DEFAULT_COLUMN_PADDING, ENV_PREFIX, OutputFormat


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

# Logging Defaults
DEFAULT_LOG_LEVEL: str = 'WARNING'

# Output Defaults
DEFAULT_OUTPUT_FORMAT: str = OutputFormat.TEXT.value


class ConfigLoader:
    """
    Singleton configuration loader for benchutil.

    Loads configuration from environment variables with type
    conversion and sensible defaults.

    Example:
        config = ConfigLoader()
        padding = config.get('column_padding')  # Returns int
        log_dir = config.get('log_dir')  # Returns Path or None
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads .env from the
        current working directory when one exists.
        """
        if ConfigLoader._initialized:
            return

        env_path = Path.cwd() / '.env'
        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # DEBUG
            # ================================================================
            'debug': self._get_bool('DEBUG', False),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_level': self._get_env('LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_dir': self._get_path('LOG_DIR'),
            'log_console': self._get_bool('LOG_CONSOLE', True),

            # ================================================================
            # OUTPUT CONFIGURATION
            # ================================================================
            'output_dir': self._get_path('OUTPUT_DIR'),
            'output_format': self._get_env('OUTPUT_FORMAT', DEFAULT_OUTPUT_FORMAT),

            # ================================================================
            # REPORT LAYOUT
            # ================================================================
            'column_padding': self._get_int('COLUMN_PADDING', DEFAULT_COLUMN_PADDING),
            'ops_descriptors': self._get_bool('OPS_DESCRIPTORS', False),
            'system_info': self._get_bool('SYSTEM_INFO', False),
            'detailed_system_info': self._get_bool('DETAILED_SYSTEM_INFO', False),
            'section_per_group': self._get_bool('SECTION_PER_GROUP', False),
            'section_headers': self._get_bool('SECTION_HEADERS', True),
            'name_sections': self._get_bool('NAME_SECTIONS', False),
        }

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

    def _get_path(self, key: str) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Variable name without the BENCHUTIL_ prefix

        Returns:
            Path object, or None when unset or empty
        """
        value = os.getenv(ENV_PREFIX + key)

        if value is None or value == '':
            return None

        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value)

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(ENV_PREFIX + key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def __repr__(self) -> str:
        """String representation showing the active output and log settings."""
        return (
            f"ConfigLoader("
            f"log_level={self._config.get('log_level')}, "
            f"output_format={self._config.get('output_format')})"
        )


__all__ = ['ConfigLoader']
