"""Tests for the persisted settings document.

These tests verify that:
1. Documents use the persisted key names
2. Durations are written as hh:mm:ss.fffffff and read in several formats
3. Missing and unknown keys are tolerated
4. Malformed documents raise SettingsFormatError
"""

import json
import math
from datetime import timedelta

import pytest

from tabletsettings.errors import SettingsFormatError
from tabletsettings.settings import FIELD_NAMES, Settings, SettingsDocument, create_defaults


def test_document_uses_persisted_keys() -> None:
    data = create_defaults().to_dict()
    assert list(data) == list(FIELD_NAMES.values())
    assert data["OutputMode"] == "OpenTabletDriver.Desktop.Output.AbsoluteMode"
    assert data["PenButtons"] == [None, None]
    assert data["RelativeResetDelay"] == "00:00:00.1000000"


def test_defaults_survive_json() -> None:
    defaults = create_defaults()
    assert Settings.from_json(defaults.to_json()) == defaults


def test_locked_document_loads_consistently() -> None:
    settings = Settings(display_width=1920.0, display_height=1080.0, tablet_width=200.0)
    settings.lock_aspect_ratio = True

    loaded = Settings.from_dict(settings.to_dict())

    assert loaded.lock_aspect_ratio is True
    assert loaded.tablet_height == pytest.approx(112.5)
    assert loaded.tablet_width == pytest.approx(200.0)


def test_missing_keys_use_empty_values() -> None:
    settings = Settings.from_dict({"DisplayWidth": 1920, "TabletRotation": 90})
    assert settings.display_width == 1920.0
    assert settings.tablet_rotation == 90.0
    assert settings.output_mode is None
    assert settings.aux_buttons == []


def test_unknown_keys_are_ignored() -> None:
    settings = Settings.from_dict({"AutoHook": True, "SomeFutureSetting": [1, 2]})
    assert settings.auto_hook is True


def test_null_collections_load_as_empty() -> None:
    settings = Settings.from_dict({"Filters": None, "PluginSettings": None})
    assert settings.filters == []
    assert settings.plugin_settings == {}


def test_disable_sentinel_loads_as_none() -> None:
    settings = Settings.from_dict({"OutputMode": "{Disable}"})
    assert settings.output_mode is None


@pytest.mark.parametrize(
    "value, expected",
    [
        ("00:00:00.2500000", timedelta(milliseconds=250)),
        ("PT0.5S", timedelta(milliseconds=500)),
        (1.5, timedelta(seconds=1.5)),
    ],
)
def test_reset_delay_formats(value: object, expected: timedelta) -> None:
    settings = Settings.from_dict({"RelativeResetDelay": value})
    assert settings.reset_time == expected


def test_plugin_settings_are_opaque() -> None:
    data = {"PluginSettings": {"Some.Plugin.Strength": "0.5", "": "empty key"}}
    settings = Settings.from_dict(data)
    assert settings.plugin_settings == data["PluginSettings"]
    assert settings.to_dict()["PluginSettings"] == data["PluginSettings"]


def test_non_finite_geometry_is_written_and_read() -> None:
    settings = Settings(tablet_width=100.0, display_height=1080.0)
    settings.lock_aspect_ratio = True

    text = settings.to_json()
    raw = json.loads(text)
    loaded = SettingsDocument.parse_json(text)

    assert math.isinf(raw["TabletHeight"])
    assert math.isinf(loaded.tablet_height)


def test_document_accepts_attribute_names() -> None:
    document = SettingsDocument(display_width=800.0, tip_button="x, y")
    assert document.to_dict()["DisplayWidth"] == 800.0
    assert document.to_settings().tip_button == "x, y"


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"DisplayWidth": "wide"},
        {"PenButtons": "Left"},
        {"PluginSettings": {"key": 1}},
    ],
)
def test_malformed_document_raises(data: object) -> None:
    with pytest.raises(SettingsFormatError) as info:
        Settings.from_dict(data)
    assert info.value.original_error is not None


def test_invalid_json_raises() -> None:
    with pytest.raises(SettingsFormatError):
        Settings.from_json("{not json")
