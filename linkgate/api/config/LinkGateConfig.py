"""Top-level linkgate configuration."""

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import LINKGATE_HOME_EXT
from .CheckConfig import CheckConfig
from .LogConfig import LogConfig


class LinkGateConfig(BaseModel):
    """Top-level configuration. Every field has a default, so no file is needed."""

    model_config = ConfigDict(extra="forbid")

    check: CheckConfig = Field(default_factory=CheckConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get linkgate home directory based on LINKGATE_HOME or default to ~/.linkgate."""
        home_env = os.environ.get("LINKGATE_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / LINKGATE_HOME_EXT

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file inside the home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "LinkGateConfig":
        """Load and validate config from file, falling back to defaults.

        Raises:
            ValueError: If the config file cannot be read, holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ValueError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
