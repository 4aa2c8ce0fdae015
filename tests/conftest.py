import pytest

from tabletsettings.notifier import PropertyChange
from tabletsettings.settings import Settings


@pytest.fixture
def settings() -> Settings:
    """Empty settings with a 1920x1080 display and no lock."""
    return Settings(display_width=1920.0, display_height=1080.0)


@pytest.fixture
def changes(settings: Settings) -> list[PropertyChange]:
    """Changes emitted by the ``settings`` fixture, in order."""
    received: list[PropertyChange] = []
    settings.subscribe(received.append)
    return received
