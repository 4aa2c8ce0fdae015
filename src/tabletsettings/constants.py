"""Identifiers and fixed sizes shared across the settings model."""

from typing import Final

# Slot counts for pen barrel buttons and tablet express keys
PEN_BUTTON_COUNT: Final = 2
AUX_BUTTON_COUNT: Final = 6

# Output mode value that means "no output mode"
DISABLE_OUTPUT_MODE: Final = "{Disable}"

# Built-in plugin identifiers
ABSOLUTE_MODE: Final = "OpenTabletDriver.Desktop.Output.AbsoluteMode"
MOUSE_BINDING: Final = "OpenTabletDriver.Desktop.Binding.MouseBinding"

# Separator between a binding's plugin path and its value
BINDING_SEPARATOR: Final = ", "
