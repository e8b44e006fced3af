"""Crowdin connection and local settings configuration."""

import os
from pathlib import Path
from typing import Optional

from .constants import CROWDIN_API_URL, CROWDIN_ENTERPRISE_API_URL, MAX_PAGE_SIZE
from .utils.config_loader import BaseConfig, load_config, merge_configs
from .utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.crowdin-metadata/config.yaml")

# Environment variable -> config key
ENV_OVERRIDES = {
    "CROWDIN_TOKEN": "token",
    "CROWDIN_ORGANIZATION": "organization",
    "CROWDIN_SETTINGS_FILE": "settings_file",
}


class CrowdinConfig(BaseConfig):
    """Settings for talking to Crowdin and storing document selections."""

    token: str = ""
    organization: Optional[str] = None
    api_url: Optional[str] = None

    requests_per_minute: int = 240
    timeout: int = 30
    max_retries: int = 3
    page_size: int = MAX_PAGE_SIZE

    settings_file: str = "~/.crowdin-metadata/settings.yaml"
    log_level: str = "INFO"

    @property
    def base_url(self) -> str:
        """API root; Crowdin Enterprise organizations get their own host."""
        if self.api_url:
            return self.api_url.rstrip("/")
        if self.organization:
            return CROWDIN_ENTERPRISE_API_URL.format(organization=self.organization)
        return CROWDIN_API_URL

    def validate_config(self) -> list[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if not self.token:
            errors.append("CROWDIN_TOKEN is not set")
        if self.requests_per_minute <= 0:
            errors.append("requests_per_minute must be positive")
        return errors

    @classmethod
    def load(cls, path: Optional[str | Path] = None) -> "CrowdinConfig":
        """Load configuration from YAML, then apply environment overrides.

        Args:
            path: Config file. When omitted, the default file is used if
                it exists.

        Raises:
            FileNotFoundError: If an explicit path doesn't exist
        """
        file_config: dict = {}
        if path is not None:
            file_config = load_config(Path(path).expanduser().resolve())
        elif DEFAULT_CONFIG_PATH.expanduser().exists():
            file_config = load_config(DEFAULT_CONFIG_PATH.expanduser())

        env_config = {
            key: os.environ[var]
            for var, key in ENV_OVERRIDES.items()
            if os.environ.get(var)
        }
        if env_config:
            logger.debug(f"Config overrides from environment: {sorted(env_config)}")

        return cls(**merge_configs(file_config, env_config))
