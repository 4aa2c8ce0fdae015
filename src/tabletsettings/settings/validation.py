"""Geometry and binding checks performed outside the settings model.

The model stores whatever it is given. These checks report the values a
driver could not use, without raising and without changing anything.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from tabletsettings.constants import AUX_BUTTON_COUNT, PEN_BUTTON_COUNT
from tabletsettings.settings.model import FIELD_NAMES, Settings

_GEOMETRY_FIELDS = (
    "display_width",
    "display_height",
    "display_x",
    "display_y",
    "tablet_width",
    "tablet_height",
    "tablet_x",
    "tablet_y",
    "tablet_rotation",
)

_SIZE_FIELDS = ("display_width", "display_height", "tablet_width", "tablet_height")


@dataclass(frozen=True)
class GeometryIssue:
    """A single problem found in a settings instance."""

    field: str
    message: str

    @property
    def key(self) -> str:
        """Persisted name of the offending field."""
        return FIELD_NAMES[self.field]

    def __str__(self) -> str:
        return f"{self.key}: {self.message}"


def check_geometry(settings: Settings) -> list[GeometryIssue]:
    """Report unusable geometry, pressure and button slot values.

    Args:
        settings: Settings to inspect

    Returns:
        Issues in field order; empty if everything is usable
    """
    issues: list[GeometryIssue] = []

    for name in _GEOMETRY_FIELDS:
        value = getattr(settings, name)
        if not math.isfinite(value):
            issues.append(GeometryIssue(name, f"value {value} is not finite"))
        elif name in _SIZE_FIELDS and value <= 0:
            issues.append(GeometryIssue(name, f"size {value} must be positive"))

    pressure = settings.tip_activation_pressure
    if not 0.0 <= pressure <= 1.0:
        issues.append(
            GeometryIssue("tip_activation_pressure", f"pressure {pressure} is outside 0..1")
        )

    for name, expected in (("pen_buttons", PEN_BUTTON_COUNT), ("aux_buttons", AUX_BUTTON_COUNT)):
        count = len(getattr(settings, name))
        if count != expected:
            issues.append(GeometryIssue(name, f"has {count} slots, expected {expected}"))

    return issues
