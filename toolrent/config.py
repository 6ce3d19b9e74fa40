"""Configuration management for the toolrent CLI."""
import os
from pathlib import Path
import yaml
from dotenv import load_dotenv

load_dotenv()

DEFAULTS = {
    "api": {
        "base_url": "http://localhost:8000",
        "timeout": 30,
        "retry_attempts": 3,
        "retry_min_wait": 1,
        "retry_max_wait": 10,
    },
    "rentals": {
        "default_admin_name": "Admin User",
        "activity_window_days": 4,
        "activity_limit": 10,
    },
    "logging": {
        "level": "INFO",
        "format": "%(message)s",
    },
}


class Config:
    """Application configuration loaded from config.yaml and environment variables."""

    def __init__(self, config_path=None):
        if config_path is None:
            config_path = Path(__file__).parent.parent / "config.yaml"

        self._config = {section: dict(values) for section, values in DEFAULTS.items()}

        if Path(config_path).exists():
            with open(config_path) as f:
                loaded = yaml.safe_load(f) or {}
            for section, values in loaded.items():
                self._config.setdefault(section, {}).update(values or {})

        self._load_env_overrides()

    def _load_env_overrides(self):
        """Load environment variable overrides."""
        self.api_url_override = os.getenv("TOOLRENT_API_URL")
        self.admin_name_override = os.getenv("TOOLRENT_ADMIN_NAME")
        self.log_level_override = os.getenv("TOOLRENT_LOG_LEVEL")

    @property
    def api_base_url(self):
        return (self.api_url_override or self._config["api"]["base_url"]).rstrip("/")

    @property
    def api_timeout(self):
        return self._config["api"]["timeout"]

    @property
    def retry_attempts(self):
        return self._config["api"]["retry_attempts"]

    @property
    def retry_min_wait(self):
        return self._config["api"]["retry_min_wait"]

    @property
    def retry_max_wait(self):
        return self._config["api"]["retry_max_wait"]

    @property
    def default_admin_name(self):
        return self.admin_name_override or self._config["rentals"]["default_admin_name"]

    @property
    def activity_window_days(self):
        return self._config["rentals"]["activity_window_days"]

    @property
    def activity_limit(self):
        return self._config["rentals"]["activity_limit"]

    @property
    def log_level(self):
        return (self.log_level_override or self._config["logging"]["level"]).upper()

    @property
    def log_format(self):
        return self._config["logging"]["format"]


# Global config instance
config = Config()
