"""Out-of-box settings."""

from __future__ import annotations

from datetime import timedelta
from typing import Final

from tabletsettings.binding import mouse_binding
from tabletsettings.constants import ABSOLUTE_MODE, AUX_BUTTON_COUNT, PEN_BUTTON_COUNT
from tabletsettings.settings.model import Settings


def create_defaults() -> Settings:
    """Build a new Settings instance with the default configuration.

    Absolute output mode with auto-hook and clipping on, the pen tip bound to
    the left mouse button at full activation pressure, every pen and aux
    button slot unbound, and relative mode at 10x sensitivity with a 100 ms
    reset delay. The aspect ratio lock is off and the areas are empty.
    """
    return Settings(
        output_mode=ABSOLUTE_MODE,
        auto_hook=True,
        enable_clipping=True,
        tip_button=mouse_binding("Left"),
        tip_activation_pressure=1.0,
        pen_buttons=[None] * PEN_BUTTON_COUNT,
        aux_buttons=[None] * AUX_BUTTON_COUNT,
        plugin_settings={},
        x_sensitivity=10.0,
        y_sensitivity=10.0,
        relative_rotation=0.0,
        reset_time=timedelta(milliseconds=100),
    )


# Shared template. Call .copy() before mutating.
DEFAULTS: Final = create_defaults()
