"""
Configuration state for wger-catalog: YAML files layered with environment
variables and validated by pydantic models.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from yarl import URL

logger = logging.getLogger(__name__)


# =============================================================================
# PYDANTIC MODELS - Type-Safe Configuration
# =============================================================================


class WgerSettings(BaseModel):
    """wger API configuration."""

    model_config = ConfigDict(extra="allow")

    base_url: str = Field(default="https://wger.de/api/v2")
    timeout: float = Field(default=30.0, gt=0)
    connect_timeout: float = Field(default=10.0, gt=0)
    verify_ssl: bool = Field(default=True)
    variation_delay: float = Field(default=0.2, ge=0)
    page_size: int | None = Field(default=None, ge=1)
    language: int | None = Field(default=None, ge=1)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an absolute http(s) URL with a valid host; strip trailing slash."""
        url = URL(v)
        if url.scheme not in ("http", "https"):
            raise ValueError("wger base_url must start with http:// or https://")
        host = url.raw_host
        if not host:
            raise ValueError(f"wger base_url has no host: {v}")
        # DNS labels: non-empty, at most 63 characters
        if any(not 0 < len(label) <= 63 for label in host.rstrip(".").split(".")):
            raise ValueError(f"wger base_url has an invalid host: {host}")
        return v.rstrip("/")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="allow")

    level: str = Field(default="INFO")
    json_logs: bool = Field(default=False)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class ConfigState(BaseModel):
    """Root configuration state."""

    model_config = ConfigDict(extra="allow")

    wger: WgerSettings = Field(default_factory=WgerSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Environment metadata
    env: str = Field(default="dev")
    config_dir: str = Field(default="./config")


# =============================================================================
# CONFIG LOADER
# =============================================================================

# Environment variable -> (section, key)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "WGER_BASE_URL": ("wger", "base_url"),
    "WGER_TIMEOUT": ("wger", "timeout"),
    "WGER_VARIATION_DELAY": ("wger", "variation_delay"),
    "LOG_LEVEL": ("logging", "level"),
}


def merge_dicts(base: dict, override: dict) -> dict:
    """Return ``base`` with ``override`` merged in; nested mappings merge recursively."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """
    Build ConfigState from layered sources, later layers winning:

      1. Defaults declared on the pydantic models
      2. <config_dir>/wger.yaml
      3. <config_dir>/env/<env>.yaml
      4. Environment variables listed in ENV_OVERRIDES
    """

    def __init__(self, config_dir: str = "./config", env: str | None = None):
        self.config_dir = Path(config_dir)
        self.env = env or os.getenv("WGER_ENV", "dev")

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        if not path.exists():
            logger.debug("Config file not found (using defaults): %s", path)
            return {}

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        return data

    def _env_layer(self) -> dict[str, Any]:
        layer: dict[str, Any] = {}
        for var, (section, key) in ENV_OVERRIDES.items():
            value = os.getenv(var)
            if value:
                layer.setdefault(section, {})[key] = value
        return layer

    def load(self) -> ConfigState:
        """
        Raises:
            ValueError: A config file is not a mapping
            pydantic.ValidationError: Merged values fail validation
        """
        logger.info("Loading configuration from %s (env: %s)", self.config_dir, self.env)

        config: dict[str, Any] = {}
        for layer in (
            self._load_yaml(self.config_dir / "wger.yaml"),
            self._load_yaml(self.config_dir / "env" / f"{self.env}.yaml"),
            self._env_layer(),
        ):
            config = merge_dicts(config, layer)
        config.update(env=self.env, config_dir=str(self.config_dir))

        try:
            state = ConfigState(**config)
        except ValidationError as e:
            logger.error("Configuration validation failed: %s", e)
            raise

        logger.info(
            "Configuration loaded: base_url=%s variation_delay=%s",
            state.wger.base_url,
            state.wger.variation_delay,
        )
        return state


def get_config(config_dir: str | None = None, env: str | None = None) -> ConfigState:
    """
    Load configuration from ``config_dir`` (default $WGER_CONFIG_DIR, then ./config).

    A missing directory is not an error: model defaults and the environment apply.
    """
    if config_dir is None:
        config_dir = os.getenv("WGER_CONFIG_DIR", "./config")
    if not Path(config_dir).exists():
        logger.warning("Config directory not found at %s, using defaults", config_dir)

    return ConfigLoader(config_dir=config_dir, env=env).load()
