"""Tablet settings CLI.

Command-line helpers for inspecting tablet driver settings documents:
printing the defaults, previewing the area the aspect ratio lock derives,
and checking documents for unusable geometry.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final

import typer

from tabletsettings.config import ToolConfig
from tabletsettings.errors import TabletSettingsError
from tabletsettings.settings import Settings, check_geometry, create_defaults
from tabletsettings.utils.formatting import format_area

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Tablet driver settings CLI", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "tabletsettings.cli"

# Options shared by commands
CONFIG_OPTION = typer.Option(None, "--config", "-c", dir_okay=False, help="Tool config YAML")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
INDENT_OPTION = typer.Option(None, "--indent", min=0, max=8, help="JSON indentation")
DISPLAY_OPTION = typer.Option(None, "--display", "-d", help="Display size as WIDTHxHEIGHT")
TABLET_WIDTH_OPTION = typer.Option(..., "--tablet-width", "-w", help="Tablet area width (mm)")
X_OPTION = typer.Option(0.0, "--x", help="Tablet area centre X (mm)")
Y_OPTION = typer.Option(0.0, "--y", help="Tablet area centre Y (mm)")
ROTATION_OPTION = typer.Option(0.0, "--rotation", "-r", help="Tablet area rotation (degrees)")
FILE_ARGUMENT = typer.Argument(..., exists=True, dir_okay=False, help="Settings JSON file")


class State:
    """Per-invocation CLI state shared with sub-commands."""

    config: ToolConfig = ToolConfig()


state = State()


def _fail(exc: Exception) -> typer.Exit:
    typer.secho(str(exc), fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


def parse_display(text: str) -> tuple[float, float]:
    """Parse a ``WIDTHxHEIGHT`` display size.

    Raises:
        typer.BadParameter: If the text is not two numbers separated by 'x'
    """
    width, sep, height = text.lower().partition("x")
    try:
        if not sep:
            raise ValueError(text)
        return float(width), float(height)
    except ValueError as exc:
        raise typer.BadParameter(f"expected WIDTHxHEIGHT, got {text!r}") from exc


@app.callback()
def main(config: Path | None = CONFIG_OPTION, debug: bool = DEBUG_OPTION) -> None:
    """Load the tool configuration and set up logging."""
    try:
        state.config = ToolConfig.load(config)
    except TabletSettingsError as exc:
        raise _fail(exc) from exc

    logging.basicConfig(
        level=logging.DEBUG if debug else state.config.log_level_value,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


@app.command()
def defaults(indent: int | None = INDENT_OPTION) -> None:
    """Print the default settings document as JSON."""
    typer.echo(create_defaults().to_json(indent if indent is not None else state.config.json_indent))


@app.command()
def lock(
    tablet_width: float = TABLET_WIDTH_OPTION,
    display: str | None = DISPLAY_OPTION,
    x: float = X_OPTION,
    y: float = Y_OPTION,
    rotation: float = ROTATION_OPTION,
) -> None:
    """Show the tablet area the aspect ratio lock derives for a display."""
    if display is None:
        width, height = state.config.default_display_width, state.config.default_display_height
    else:
        width, height = parse_display(display)

    # The lock is applied last and derives the tablet height from the width
    settings = Settings(
        display_width=width,
        display_height=height,
        tablet_width=tablet_width,
        tablet_x=x,
        tablet_y=y,
        tablet_rotation=rotation,
        lock_aspect_ratio=True,
    )
    logger.debug("Locked %s", settings)

    typer.echo(f"Display: {format_area(settings.get_display_area(), 'px')}")
    typer.echo(f"Tablet:  {format_area(settings.get_tablet_area(), 'mm')}")


@app.command()
def check(file: Path = FILE_ARGUMENT) -> None:
    """Check a settings document for unusable geometry."""
    try:
        settings = Settings.from_json(file.read_bytes())
    except TabletSettingsError as exc:
        raise _fail(exc) from exc

    issues = check_geometry(settings)
    if not issues:
        typer.echo("✅ Settings valid")
        return

    for issue in issues:
        typer.secho(f"  • {issue}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a tool config YAML file."""
    try:
        ToolConfig.load(file)
        typer.echo("✅ Config valid")
    except TabletSettingsError as exc:
        raise _fail(exc) from exc


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
