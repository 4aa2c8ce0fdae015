"""Text formatting for areas and geometry values."""

from __future__ import annotations

from tabletsettings.area import Area


def format_number(value: float, digits: int = 3) -> str:
    """Format a float with trailing zeros removed.

    Args:
        value: Number to format (non-finite values are shown as inf/nan)
        digits: Maximum number of decimal places

    Returns:
        Formatted number string
    """
    text = f"{value:.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_area(area: Area, unit: str = "") -> str:
    """Format an area as ``W x H @ (X, Y)`` plus rotation when non-zero.

    Args:
        area: Area to format
        unit: Optional unit suffix for width and height

    Returns:
        Formatted area string
    """
    text = (
        f"{format_number(area.width)}{unit} x {format_number(area.height)}{unit}"
        f" @ ({format_number(area.x)}, {format_number(area.y)})"
    )
    if area.rotation:
        text += f" rotated {format_number(area.rotation)}°"
    return text
