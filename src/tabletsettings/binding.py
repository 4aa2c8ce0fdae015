"""Binding references stored in the tip, pen and aux button slots.

A binding reference names a binding plugin and the value passed to it,
encoded as ``"<plugin path>, <value>"``, for example
``"OpenTabletDriver.Desktop.Binding.MouseBinding, Left"``.
"""

from __future__ import annotations

from dataclasses import dataclass

from tabletsettings.constants import BINDING_SEPARATOR, MOUSE_BINDING
from tabletsettings.errors import BindingFormatError


@dataclass(frozen=True)
class BindingReference:
    """Plugin path plus value identifying a bindable action."""

    path: str
    value: str

    def __str__(self) -> str:
        return f"{self.path}{BINDING_SEPARATOR}{self.value}"

    @property
    def is_mouse(self) -> bool:
        """Whether this reference points at the built-in mouse binding."""
        return self.path == MOUSE_BINDING

    @classmethod
    def parse(cls, text: str) -> BindingReference:
        """Decode a stored binding string.

        Args:
            text: Encoded binding, split on the first separator

        Returns:
            The decoded reference

        Raises:
            BindingFormatError: If the separator is missing
        """
        path, sep, value = text.partition(BINDING_SEPARATOR)
        if not sep:
            raise BindingFormatError(f"Binding {text!r} is not of the form 'path, value'")
        return cls(path, value)

    @classmethod
    def from_string(cls, text: str | None) -> BindingReference | None:
        """Decode a slot value, treating ``None`` and ``""`` as unbound."""
        if not text:
            return None
        return cls.parse(text)


def mouse_binding(button: str) -> str:
    """Encode a mouse button binding, e.g. ``mouse_binding("Left")``."""
    return str(BindingReference(MOUSE_BINDING, button))
