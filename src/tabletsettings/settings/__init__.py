"""Tablet driver settings.

This package provides:
- Settings: the observable settings model with the aspect ratio lock
- create_defaults / DEFAULTS: out-of-box settings
- SettingsDocument: the persisted document schema
- check_geometry: validation of unusable values
"""

from tabletsettings.settings.defaults import DEFAULTS, create_defaults
from tabletsettings.settings.model import FIELD_NAMES, Settings
from tabletsettings.settings.schema import SettingsDocument
from tabletsettings.settings.validation import GeometryIssue, check_geometry

__all__ = [
    "DEFAULTS",
    "FIELD_NAMES",
    "GeometryIssue",
    "Settings",
    "SettingsDocument",
    "check_geometry",
    "create_defaults",
]
