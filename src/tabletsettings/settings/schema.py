"""Persisted document schema for :class:`~tabletsettings.settings.model.Settings`.

The document uses the stable persisted key names (``DisplayWidth``,
``RelativeResetDelay``...) rather than the Python attribute names. Missing
keys fall back to the empty value and unknown keys are ignored, so older
and newer documents load without errors.
"""

from __future__ import annotations

import json
import logging
from datetime import timedelta
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_serializer, field_validator

from tabletsettings.constants import DISABLE_OUTPUT_MODE
from tabletsettings.errors import SettingsFormatError
from tabletsettings.settings.model import FIELD_NAMES, Settings
from tabletsettings.utils.time import TimeUtils

logger: Final = logging.getLogger(__name__)


class SettingsDocument(BaseModel):
    """Serialized form of the settings, keyed by persisted names."""

    model_config = ConfigDict(
        alias_generator=FIELD_NAMES.__getitem__,
        populate_by_name=True,
        extra="ignore",
    )

    # General
    output_mode: str | None = None
    filters: list[str] = Field(default_factory=list)
    auto_hook: bool = False

    # Absolute mode
    display_width: float = 0.0
    display_height: float = 0.0
    display_x: float = 0.0
    display_y: float = 0.0
    tablet_width: float = 0.0
    tablet_height: float = 0.0
    tablet_x: float = 0.0
    tablet_y: float = 0.0
    tablet_rotation: float = 0.0
    enable_clipping: bool = False
    enable_area_limiting: bool = False
    lock_aspect_ratio: bool = False

    # Relative mode
    x_sensitivity: float = 0.0
    y_sensitivity: float = 0.0
    relative_rotation: float = 0.0
    reset_time: timedelta = timedelta(0)

    # Bindings
    tip_activation_pressure: float = 0.0
    tip_button: str | None = None
    pen_buttons: list[str | None] = Field(default_factory=list)
    aux_buttons: list[str | None] = Field(default_factory=list)
    plugin_settings: dict[str, str] = Field(default_factory=dict)
    tools: list[str] = Field(default_factory=list)
    interpolators: list[str] = Field(default_factory=list)

    # ---- validators ----
    @field_validator("output_mode")
    @classmethod
    def normalize_output_mode(cls, v: str | None) -> str | None:
        return None if v == DISABLE_OUTPUT_MODE else v

    @field_validator(
        "filters", "pen_buttons", "aux_buttons", "tools", "interpolators", mode="before"
    )
    @classmethod
    def null_sequence(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("plugin_settings", mode="before")
    @classmethod
    def null_mapping(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_validator("reset_time", mode="before")
    @classmethod
    def parse_timespan(cls, v: Any) -> Any:
        """Accept ``hh:mm:ss.fffffff`` on top of pydantic's own formats."""
        if isinstance(v, str):
            parsed = TimeUtils.parse_timespan(v)
            if parsed is not None:
                return parsed
        return v

    @field_serializer("reset_time")
    def serialize_timespan(self, v: timedelta) -> str:
        return TimeUtils.format_timespan(v)

    # ---- conversions ----
    @classmethod
    def from_settings(cls, settings: Settings) -> SettingsDocument:
        """Snapshot the current field values of ``settings``."""
        return cls.model_validate(settings.values())

    def to_settings(self) -> Settings:
        """Build a new Settings instance from this document.

        The aspect ratio lock is applied last, so a locked document
        re-derives the tablet height once from the stored geometry.
        """
        return Settings(**{name: getattr(self, name) for name in FIELD_NAMES})

    def to_dict(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict keyed by persisted names."""
        return self.model_dump(by_alias=True)

    def to_json(self, indent: int | None = 2) -> str:
        """Dump to JSON text. Non-finite floats are written as NaN/Infinity."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def parse(cls, data: Any) -> SettingsDocument:
        """Validate a decoded document.

        Args:
            data: Mapping keyed by persisted names

        Returns:
            Validated document

        Raises:
            SettingsFormatError: If the document is malformed
        """
        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise SettingsFormatError(f"Invalid settings document:\n{err}", err) from err

    @classmethod
    def parse_json(cls, text: str | bytes) -> SettingsDocument:
        """Decode and validate JSON text.

        Raises:
            SettingsFormatError: If the text is not JSON or not a valid document
        """
        try:
            data = json.loads(text)
        except ValueError as err:
            raise SettingsFormatError(f"Settings are not valid JSON: {err}", err) from err

        if isinstance(data, dict):
            logger.debug("Parsed settings document with %d keys", len(data))
        return cls.parse(data)
