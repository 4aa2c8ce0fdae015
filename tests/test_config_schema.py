from pathlib import Path

import pytest

from tabletsettings.config import ToolConfig
from tabletsettings.errors import ConfigError

GOOD_YAML = """
json_indent: 4
default_display_width: 2560
default_display_height: 1440
log_level: DEBUG
"""

BAD_YAML = """
json_indent: 12
"""


def test_valid_config(tmp_path: Path) -> None:
    cfg_file = tmp_path / "good.yaml"
    cfg_file.write_text(GOOD_YAML)
    cfg = ToolConfig.load(cfg_file)
    assert isinstance(cfg, ToolConfig)
    assert cfg.json_indent == 4
    assert cfg.default_display_width == 2560.0
    assert cfg.log_level_value == 10


def test_invalid_config(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yaml"
    cfg_file.write_text(BAD_YAML)
    with pytest.raises(ConfigError):
        ToolConfig.load(cfg_file)


def test_missing_explicit_config(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        ToolConfig.load(tmp_path / "absent.yaml")


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "empty.yaml"
    cfg_file.write_text("")
    assert ToolConfig.load(cfg_file) == ToolConfig()


def test_env_interpolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TS_INDENT", "0")
    cfg_file = tmp_path / "env.yaml"
    cfg_file.write_text("json_indent: ${TS_INDENT}\n")
    assert ToolConfig.load(cfg_file).json_indent == 0


def test_env_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg_file = tmp_path / "env-path.yaml"
    cfg_file.write_text("log_level: WARNING\n")
    monkeypatch.setenv("TABLETSETTINGS_CONFIG", str(cfg_file))
    assert ToolConfig.load().log_level == "WARNING"


def test_env_path_missing(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TABLETSETTINGS_CONFIG", str(tmp_path / "nope.yaml"))
    with pytest.raises(ConfigError):
        ToolConfig.load()


def test_no_config_found_uses_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TABLETSETTINGS_CONFIG", raising=False)
    monkeypatch.setattr(ToolConfig, "DEFAULT_CONFIG_PATHS", [tmp_path / "missing.yaml"])
    assert ToolConfig.load() == ToolConfig()
