# src/tabletsettings/utils/time.py
"""Duration handling utilities."""

from __future__ import annotations

import re
from datetime import timedelta
from typing import Final

TICKS_PER_SECOND: Final = 10_000_000  # 100 ns ticks

_TIMESPAN_RE: Final = re.compile(
    r"^(?P<sign>-)?"
    r"(?:(?P<days>\d+)\.)?"
    r"(?P<hours>\d{1,2}):(?P<minutes>\d{2})"
    r"(?::(?P<seconds>\d{2})(?:\.(?P<fraction>\d{1,7}))?)?$"
)


class TimeUtils:
    """Conversions between timedelta and the persisted duration format.

    Durations are stored as ``[-][d.]hh:mm:ss[.fffffff]`` with a
    seven-digit (100 ns) fraction, e.g. ``"00:00:00.1000000"`` for 100 ms.
    """

    @staticmethod
    def format_timespan(delta: timedelta) -> str:
        """Format a timedelta as ``[-][d.]hh:mm:ss[.fffffff]``.

        Args:
            delta: Duration to format

        Returns:
            Formatted duration string
        """
        ticks = ((delta.days * 86400 + delta.seconds) * 1_000_000 + delta.microseconds) * 10
        sign = "-" if ticks < 0 else ""
        seconds, fraction = divmod(abs(ticks), TICKS_PER_SECOND)
        minutes, seconds = divmod(seconds, 60)
        hours, minutes = divmod(minutes, 60)
        days, hours = divmod(hours, 24)

        text = f"{hours:02d}:{minutes:02d}:{seconds:02d}"
        if days:
            text = f"{days}.{text}"
        if fraction:
            text = f"{text}.{fraction:07d}"
        return sign + text

    @staticmethod
    def parse_timespan(text: str) -> timedelta | None:
        """Parse a ``[-][d.]hh:mm[:ss[.fffffff]]`` duration string.

        Args:
            text: Duration string

        Returns:
            The parsed timedelta, or None if ``text`` is not in that format
        """
        match = _TIMESPAN_RE.match(text.strip())
        if match is None:
            return None

        fraction = (match["fraction"] or "").ljust(7, "0")
        delta = timedelta(
            days=int(match["days"] or 0),
            hours=int(match["hours"]),
            minutes=int(match["minutes"]),
            seconds=int(match["seconds"] or 0),
            microseconds=int(fraction) // 10,
        )
        return -delta if match["sign"] else delta
