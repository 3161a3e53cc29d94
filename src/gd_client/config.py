"""Centralized client configuration."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from gd_client.transport import DEFAULT_HOST

DEFAULT_DATA_DIR = Path.home() / ".local" / "gd-client"

_FLOAT_KEYS = ("cache_ttl", "request_timeout")
_STR_KEYS = ("host", "username", "password", "udid")


class Config(BaseModel):
    """Client-wide configuration."""

    model_config = ConfigDict(frozen=True)

    data_dir: Path = Field(default=DEFAULT_DATA_DIR, description="Base directory for configuration and logs")
    host: str = Field(default=DEFAULT_HOST, min_length=1, description="Server root URL")
    cache_ttl: float = Field(default=900.0, ge=0, description="Lifetime of cached results in seconds (0 = no caching)")
    request_timeout: float = Field(default=10.0, gt=0, description="Upper bound on one request in seconds")
    username: str | None = Field(default=None, description="Account name used by authenticated commands")
    password: str | None = Field(default=None, repr=False, description="Account password")
    udid: str = Field(default="gd-client", min_length=1, description="Device identifier sent with logins and ratings")

    @computed_field(description="Optional TOML configuration file")
    @property
    def config_path(self) -> Path:
        """Optional TOML configuration file."""
        return self.data_dir / "config.toml"

    @computed_field(description="Log file")
    @property
    def log_path(self) -> Path:
        """Log file."""
        return self.data_dir / "gd-client.log"

    @staticmethod
    def build(data_dir: Path | None = None) -> "Config":
        """Build a Config from defaults and optional config.toml. Ill-typed keys are ignored."""
        resolved_dir = data_dir if data_dir is not None else DEFAULT_DATA_DIR
        config_path = resolved_dir / "config.toml"

        kwargs: dict[str, Any] = {"data_dir": resolved_dir}
        if config_path.is_file():
            with config_path.open("rb") as f:
                toml_data = tomllib.load(f)
            for key in _FLOAT_KEYS:
                value = toml_data.get(key)
                if isinstance(value, int | float) and not isinstance(value, bool):
                    kwargs[key] = float(value)
            for key in _STR_KEYS:
                if isinstance(toml_data.get(key), str):
                    kwargs[key] = toml_data[key]

        return Config(**kwargs)
