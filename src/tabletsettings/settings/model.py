"""The tablet-to-display settings model.

Four geometry fields (display width/height, tablet width/height) are
coupled when the aspect ratio is locked: changing one of them re-derives
its tablet counterpart so that

    tablet_width / tablet_height == display_width / display_height

holds once the assignment returns. The tablet setters call each other, so a
single instance-wide flag suppresses the second bounce of that cycle.

Nothing here validates geometry. Zero display dimensions make the ratio
infinite or NaN and that value is stored as-is; see
:mod:`tabletsettings.settings.validation` for an after-the-fact check.
"""

from __future__ import annotations

import copy
import logging
import math
from collections.abc import Mapping
from datetime import timedelta
from typing import Any, Final

from tabletsettings.area import Area, Position
from tabletsettings.constants import DISABLE_OUTPUT_MODE
from tabletsettings.notifier import Notifier, Observable

logger: Final = logging.getLogger(__name__)

# Attribute name -> persisted key
FIELD_NAMES: Final[dict[str, str]] = {
    "output_mode": "OutputMode",
    "filters": "Filters",
    "auto_hook": "AutoHook",
    "display_width": "DisplayWidth",
    "display_height": "DisplayHeight",
    "display_x": "DisplayXOffset",
    "display_y": "DisplayYOffset",
    "tablet_width": "TabletWidth",
    "tablet_height": "TabletHeight",
    "tablet_x": "TabletXOffset",
    "tablet_y": "TabletYOffset",
    "tablet_rotation": "TabletRotation",
    "enable_clipping": "EnableClipping",
    "enable_area_limiting": "EnableAreaLimiting",
    "lock_aspect_ratio": "LockAspectRatio",
    "x_sensitivity": "XSensitivity",
    "y_sensitivity": "YSensitivity",
    "relative_rotation": "RelativeRotation",
    "reset_time": "RelativeResetDelay",
    "tip_activation_pressure": "TipActivationPressure",
    "tip_button": "TipButton",
    "pen_buttons": "PenButtons",
    "aux_buttons": "AuxButtons",
    "plugin_settings": "PluginSettings",
    "tools": "Tools",
    "interpolators": "Interpolators",
}

_SEQUENCE_FIELDS: Final = (
    "filters",
    "pen_buttons",
    "aux_buttons",
    "tools",
    "interpolators",
)


def _divide(a: float, b: float) -> float:
    """Float division with IEEE-754 results instead of ZeroDivisionError."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _empty_values() -> dict[str, Any]:
    values: dict[str, Any] = {name: [] for name in _SEQUENCE_FIELDS}
    values.update(
        output_mode=None,
        auto_hook=False,
        display_width=0.0,
        display_height=0.0,
        display_x=0.0,
        display_y=0.0,
        tablet_width=0.0,
        tablet_height=0.0,
        tablet_x=0.0,
        tablet_y=0.0,
        tablet_rotation=0.0,
        enable_clipping=False,
        enable_area_limiting=False,
        lock_aspect_ratio=False,
        x_sensitivity=0.0,
        y_sensitivity=0.0,
        relative_rotation=0.0,
        reset_time=timedelta(0),
        tip_activation_pressure=0.0,
        tip_button=None,
        plugin_settings={},
    )
    return values


class Settings(Notifier):
    """Persisted driver settings: output mode, area mapping, bindings, plugins.

    ``Settings()`` is the empty instance (zeros, ``False``, ``None`` and empty
    collections). Field values may also be passed as keyword arguments; they
    are applied as by :meth:`update`.

    Collections are replaced as a whole to trigger a notification. Editing a
    list or dict in place is not observed.
    """

    # General
    filters = Observable[list[str]]()
    auto_hook = Observable[bool]()

    # Absolute mode
    display_x = Observable[float]()
    display_y = Observable[float]()
    tablet_x = Observable[float]()
    tablet_y = Observable[float]()
    tablet_rotation = Observable[float]()
    enable_clipping = Observable[bool]()
    enable_area_limiting = Observable[bool]()

    # Relative mode
    x_sensitivity = Observable[float]()
    y_sensitivity = Observable[float]()
    relative_rotation = Observable[float]()
    reset_time = Observable[timedelta]()

    # Bindings
    tip_activation_pressure = Observable[float]()
    tip_button = Observable["str | None"]()
    pen_buttons = Observable["list[str | None]"]()
    aux_buttons = Observable["list[str | None]"]()
    plugin_settings = Observable[dict[str, str]]()
    tools = Observable[list[str]]()
    interpolators = Observable[list[str]]()

    def __init__(self, **values: Any) -> None:
        super().__init__()
        self._size_changing = False
        for name, value in _empty_values().items():
            setattr(self, f"_{name}", value)
        self.update(values)

    # ---- general ----
    @property
    def output_mode(self) -> str | None:
        """Output mode plugin path, or None when output is disabled."""
        return self._output_mode

    @output_mode.setter
    def output_mode(self, value: str | None) -> None:
        self._set_if_changed("output_mode", None if value == DISABLE_OUTPUT_MODE else value)

    # ---- coupled geometry ----
    @property
    def display_width(self) -> float:
        return self._display_width

    @display_width.setter
    def display_width(self, value: float) -> None:
        self._set_if_changed("display_width", value)
        if self.lock_aspect_ratio:
            self.tablet_height = self._locked_height(self.tablet_width)

    @property
    def display_height(self) -> float:
        return self._display_height

    @display_height.setter
    def display_height(self, value: float) -> None:
        self._set_if_changed("display_height", value)
        if self.lock_aspect_ratio:
            self.tablet_width = self._locked_width(self.tablet_height)

    @property
    def tablet_width(self) -> float:
        return self._tablet_width

    @tablet_width.setter
    def tablet_width(self, value: float) -> None:
        self._set_if_changed("tablet_width", value)
        if self.lock_aspect_ratio and not self._size_changing:
            self._size_changing = True
            try:
                self.tablet_height = self._locked_height(value)
            finally:
                self._size_changing = False

    @property
    def tablet_height(self) -> float:
        return self._tablet_height

    @tablet_height.setter
    def tablet_height(self, value: float) -> None:
        self._set_if_changed("tablet_height", value)
        if self.lock_aspect_ratio and not self._size_changing:
            self._size_changing = True
            try:
                self.tablet_width = self._locked_width(value)
            finally:
                self._size_changing = False

    @property
    def lock_aspect_ratio(self) -> bool:
        """Whether tablet width/height follow the display aspect ratio."""
        return self._lock_aspect_ratio

    @lock_aspect_ratio.setter
    def lock_aspect_ratio(self, value: bool) -> None:
        self._set_if_changed("lock_aspect_ratio", value)
        if value:
            self.tablet_height = self._locked_height(self.tablet_width)

    def _locked_height(self, tablet_width: float) -> float:
        height = _divide(self.display_height, self.display_width) * tablet_width
        self._log_derived("tablet_height", height)
        return height

    def _locked_width(self, tablet_height: float) -> float:
        width = _divide(self.display_width, self.display_height) * tablet_height
        self._log_derived("tablet_width", width)
        return width

    def _log_derived(self, name: str, value: float) -> None:
        if math.isfinite(value):
            logger.debug("Aspect lock derived %s=%s", name, value)
        else:
            logger.warning(
                "Aspect lock derived non-finite %s=%s from display %sx%s",
                name,
                value,
                self.display_width,
                self.display_height,
            )

    # ---- areas ----
    def get_display_area(self) -> Area:
        """Display width, height and offset as an Area with zero rotation."""
        return Area(
            self.display_width,
            self.display_height,
            Position(self.display_x, self.display_y),
            0.0,
        )

    def set_display_area(self, area: Area) -> None:
        """Assign width, height, x and y from ``area``. Rotation is ignored."""
        self.display_width = area.width
        self.display_height = area.height
        self.display_x = area.position.x
        self.display_y = area.position.y

    def get_tablet_area(self) -> Area:
        """Tablet width, height, offset and rotation as an Area."""
        return Area(
            self.tablet_width,
            self.tablet_height,
            Position(self.tablet_x, self.tablet_y),
            self.tablet_rotation,
        )

    def set_tablet_area(self, area: Area) -> None:
        """Assign width, height, x, y and rotation from ``area``, in that order."""
        self.tablet_width = area.width
        self.tablet_height = area.height
        self.tablet_x = area.position.x
        self.tablet_y = area.position.y
        self.tablet_rotation = area.rotation

    # ---- bulk access ----
    def update(self, values: Mapping[str, Any]) -> None:
        """Assign several fields through their setters.

        ``lock_aspect_ratio`` is applied after every other field so that a
        locked set of values is stored first and re-derived once.

        Raises:
            TypeError: If a key is not a settings field
        """
        unknown = set(values) - FIELD_NAMES.keys()
        if unknown:
            raise TypeError(f"Unknown settings field(s): {', '.join(sorted(unknown))}")

        for name in FIELD_NAMES:
            if name in values and name != "lock_aspect_ratio":
                setattr(self, name, values[name])
        if "lock_aspect_ratio" in values:
            self.lock_aspect_ratio = values["lock_aspect_ratio"]

    def values(self) -> dict[str, Any]:
        """Current field values keyed by attribute name."""
        return {name: getattr(self, f"_{name}") for name in FIELD_NAMES}

    def copy(self) -> Settings:
        """Independent deep copy of the field values, without subscribers."""
        clone = Settings()
        for name, value in self.values().items():
            setattr(clone, f"_{name}", copy.deepcopy(value))
        return clone

    # ---- persistence helpers ----
    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict keyed by persisted names."""
        from tabletsettings.settings.schema import SettingsDocument

        return SettingsDocument.from_settings(self).to_dict()

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to JSON text keyed by persisted names."""
        from tabletsettings.settings.schema import SettingsDocument

        return SettingsDocument.from_settings(self).to_json(indent)

    @classmethod
    def from_dict(cls, data: Any) -> Settings:
        """Build settings from a persisted document.

        Raises:
            SettingsFormatError: If the document is malformed
        """
        from tabletsettings.settings.schema import SettingsDocument

        return SettingsDocument.parse(data).to_settings()

    @classmethod
    def from_json(cls, text: str | bytes) -> Settings:
        """Build settings from persisted JSON text.

        Raises:
            SettingsFormatError: If the text is not a valid document
        """
        from tabletsettings.settings.schema import SettingsDocument

        return SettingsDocument.parse_json(text).to_settings()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Settings):
            return NotImplemented
        return self.values() == other.values()

    # Mutable aggregate; not usable as a dict key or set member
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Settings(output_mode={self.output_mode!r}, "
            f"display={self.get_display_area()}, tablet={self.get_tablet_area()}, "
            f"lock_aspect_ratio={self.lock_aspect_ratio})"
        )
