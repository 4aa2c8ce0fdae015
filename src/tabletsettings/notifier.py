"""Change notification primitives.

Every mutable field of the settings model is stored in a private backing
slot named ``_<field>`` and written through :meth:`Notifier._set_if_changed`,
which stores the value and notifies subscribers only when it differs from
the current one.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final, Generic, TypeVar, overload

logger: Final = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class PropertyChange:
    """A single field change delivered to subscribers."""

    name: str
    old: Any
    new: Any


def _same(old: Any, new: Any) -> bool:
    """Value equality, with NaN equal to NaN so a repeated NaN is not a change."""
    if old == new:
        return True
    return (
        isinstance(old, float)
        and isinstance(new, float)
        and math.isnan(old)
        and math.isnan(new)
    )


ChangeCallback = Callable[[PropertyChange], None]


class Notifier:
    """Base class for objects that announce field changes.

    Subscribers are called synchronously, in subscription order, before the
    setter returns. Exceptions raised by a subscriber propagate to the code
    that assigned the field.
    """

    def __init__(self) -> None:
        self._subscribers: list[ChangeCallback] = []

    def subscribe(self, callback: ChangeCallback) -> None:
        """Register a callback for every field change."""
        self._subscribers.append(callback)

    def unsubscribe(self, callback: ChangeCallback) -> None:
        """Remove a previously registered callback. Unknown callbacks are ignored."""
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def _set_if_changed(self, name: str, value: Any) -> bool:
        """Store ``value`` in the backing slot of ``name`` if it differs.

        Args:
            name: Public field name; the value lives in ``_<name>``
            value: New value, compared with ``==`` against the current one
                (two NaN floats count as equal)

        Returns:
            True if the value changed and a notification was sent
        """
        slot = f"_{name}"
        old = getattr(self, slot)
        if _same(old, value):
            return False

        setattr(self, slot, value)
        self._notify(PropertyChange(name, old, value))
        return True

    def _notify(self, change: PropertyChange) -> None:
        logger.debug("%s: %r -> %r", change.name, change.old, change.new)
        for callback in list(self._subscribers):
            callback(change)


class Observable(Generic[T]):
    """Descriptor for a field with no side effects beyond notification.

    Example:
        class Pen(Notifier):
            pressure = Observable[float]()
    """

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    @overload
    def __get__(self, instance: None, owner: type) -> Observable[T]: ...

    @overload
    def __get__(self, instance: Notifier, owner: type) -> T: ...

    def __get__(self, instance: Notifier | None, owner: type) -> Observable[T] | T:
        if instance is None:
            return self
        return getattr(instance, f"_{self.name}")

    def __set__(self, instance: Notifier, value: T) -> None:
        instance._set_if_changed(self.name, value)
