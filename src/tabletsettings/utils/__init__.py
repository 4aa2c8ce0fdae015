"""Common utility functions and helpers for the tabletsettings package."""

from tabletsettings.utils.formatting import format_area, format_number
from tabletsettings.utils.time import TimeUtils

__all__ = [
    "TimeUtils",
    "format_area",
    "format_number",
]
