"""
Configuration module for the geomag web service.

Loads configuration from JSON file and environment variables.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

# Observatory metadata shipped with the package
BUNDLED_METADATA_FILE = Path(__file__).resolve().parent.parent / "data" / "observatories.json"


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'
        """
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = {}
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        with open(config_path, "r", encoding="utf-8") as f:
            self.config = json.load(f)

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        # Wave server
        if os.getenv("WAVESERVER_URL"):
            self.config.setdefault("waveserver", {})
            self.config["waveserver"]["base_url"] = os.getenv("WAVESERVER_URL")

        if os.getenv("WAVESERVER_TIMEOUT"):
            self.config.setdefault("waveserver", {})
            self.config["waveserver"]["timeout"] = int(os.getenv("WAVESERVER_TIMEOUT"))

        # Metadata
        if os.getenv("METADATA_FILE"):
            self.config.setdefault("metadata", {})
            self.config["metadata"]["file"] = os.getenv("METADATA_FILE")

        # Logging
        if os.getenv("LOG_LEVEL"):
            self.config.setdefault("logging", {})
            self.config["logging"]["level"] = os.getenv("LOG_LEVEL")

        if os.getenv("LOG_FILE"):
            self.config.setdefault("logging", {})
            self.config["logging"]["file"] = os.getenv("LOG_FILE")

    def _validate_config(self) -> None:
        """Validate that required configuration keys are present."""
        required_config = {
            "waveserver": ["base_url"],
        }

        missing_sections = [
            section for section in required_config if section not in self.config
        ]
        if missing_sections:
            raise ValueError(
                f"Missing required configuration sections: {', '.join(missing_sections)}"
            )

        missing_keys = []
        for section, keys in required_config.items():
            for key in keys:
                if not self.config[section].get(key):
                    missing_keys.append(f"{section}.{key}")

        if missing_keys:
            raise ValueError(
                f"Missing required configuration keys: {', '.join(missing_keys)}"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'waveserver.base_url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def waveserver_base_url(self) -> str:
        """Get wave server base URL."""
        return self.get("waveserver.base_url", "")

    @property
    def waveserver_timeout(self) -> int:
        """Get wave server timeout in seconds."""
        return self.get("waveserver.timeout", 30)

    @property
    def waveserver_max_retries(self) -> int:
        """Get maximum wave server retry attempts."""
        return self.get("waveserver.max_retries", 3)

    @property
    def waveserver_verify_ssl(self) -> bool:
        """Get wave server SSL verification setting."""
        return self.get("waveserver.verify_ssl", True)

    @property
    def metadata_file(self) -> str:
        """Get observatory metadata file path."""
        return self.get("metadata.file", str(BUNDLED_METADATA_FILE))

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self.get("logging.level", "INFO")

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path."""
        return self.get("logging.file")

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, waveserver={self.waveserver_base_url})"
