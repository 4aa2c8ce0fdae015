"""Tablet driver settings model.

Holds the mapping between a tablet's active area and a display area, the
pen/aux button bindings and free-form plugin settings, with change
notifications for every field.

Example usage:
    from tabletsettings import Area, Position, create_defaults

    settings = create_defaults()
    settings.subscribe(lambda change: print(change.name, change.new))
    settings.set_display_area(Area(1920, 1080, Position(960, 540)))
    settings.tablet_width = 152
    settings.lock_aspect_ratio = True  # tablet_height becomes 85.5
"""

__version__ = "0.1.0"

from tabletsettings.area import Area, Position
from tabletsettings.binding import BindingReference, mouse_binding
from tabletsettings.errors import (
    BindingFormatError,
    ConfigError,
    SettingsFormatError,
    TabletSettingsError,
)
from tabletsettings.notifier import Notifier, Observable, PropertyChange
from tabletsettings.settings import (
    DEFAULTS,
    FIELD_NAMES,
    GeometryIssue,
    Settings,
    SettingsDocument,
    check_geometry,
    create_defaults,
)

__all__ = [
    "__version__",
    "Area",
    "BindingFormatError",
    "BindingReference",
    "ConfigError",
    "DEFAULTS",
    "FIELD_NAMES",
    "GeometryIssue",
    "Notifier",
    "Observable",
    "Position",
    "PropertyChange",
    "SettingsFormatError",
    "Settings",
    "SettingsDocument",
    "TabletSettingsError",
    "check_geometry",
    "create_defaults",
    "mouse_binding",
]
