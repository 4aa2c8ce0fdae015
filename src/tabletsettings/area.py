"""Geometric value types for display and tablet areas."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Position:
    """2D point, in display pixels or tablet millimetres."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Area:
    """Width, height, position and rotation of a mapped area.

    Areas are produced on demand from a settings instance and are never
    stored by it. No validation is applied: zero, negative and non-finite
    values are carried as given.
    """

    width: float
    height: float
    position: Position = field(default_factory=Position)
    rotation: float = 0.0  # degrees

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y
