"""Command-line tool configuration loaded from YAML."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import ClassVar, Final, Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from tabletsettings.errors import ConfigError

# Load environment variables from .env file(s)
load_dotenv()

logger: Final = logging.getLogger(__name__)


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class ToolConfig(BaseModel):
    """Settings for the ``tabletsettings`` command itself.

    These never end up in a settings document. They only control how the
    CLI prints documents and which display size it assumes when none is
    given on the command line.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("tabletsettings.yaml"),
        Path("~/.config/tabletsettings/config.yaml").expanduser(),
    ]

    json_indent: int = Field(2, ge=0, le=8, description="Indentation of printed JSON documents")
    default_display_width: float = Field(
        1920.0, gt=0, description="Display width in pixels when --display is omitted"
    )
    default_display_height: float = Field(
        1080.0, gt=0, description="Display height in pixels when --display is omitted"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for :func:`logging.basicConfig`."""
        return getattr(logging, self.log_level)

    @classmethod
    def find(cls) -> Path | None:
        """Locate a config file from the environment or the default paths.

        Returns:
            Path to the config file, or None if there is none

        Raises:
            ConfigError: If TABLETSETTINGS_CONFIG points to a missing file
        """
        env_path = os.environ.get("TABLETSETTINGS_CONFIG")
        if env_path:
            path = Path(env_path)
            if not path.exists():
                raise ConfigError(f"Config file from TABLETSETTINGS_CONFIG not found: {path}")
            return path

        for default_path in cls.DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                return default_path
        return None

    @classmethod
    def load(cls, path: Path | None = None) -> ToolConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated ToolConfig object; defaults if no file was found

        Raises:
            ConfigError: If the file is missing, cannot be parsed or is invalid
        """
        if path is None:
            path = cls.find()
            if path is None:
                logger.debug("No config file found, using defaults")
                return cls()
        elif not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        try:
            raw = _interpolate_env(path.read_text(encoding="utf-8"))
            data = yaml.safe_load(raw)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Unable to read config YAML: {exc}") from exc

        logger.debug("Loaded config from %s", path)
        try:
            return cls.model_validate(data or {})
        except ValidationError as err:
            raise ConfigError(f"Invalid configuration:\n{err}") from err
