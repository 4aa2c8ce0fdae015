import pytest

from tabletsettings.notifier import Notifier, Observable, PropertyChange


class Pen(Notifier):
    pressure = Observable[float]()
    buttons = Observable[list[str]]()

    def __init__(self) -> None:
        super().__init__()
        self._pressure = 0.0
        self._buttons = []


def test_change_emits_one_event() -> None:
    pen = Pen()
    received: list[PropertyChange] = []
    pen.subscribe(received.append)

    pen.pressure = 0.5

    assert received == [PropertyChange("pressure", 0.0, 0.5)]
    assert pen.pressure == 0.5


def test_same_value_emits_nothing() -> None:
    pen = Pen()
    pen.pressure = 0.5
    received: list[PropertyChange] = []
    pen.subscribe(received.append)

    pen.pressure = 0.5

    assert received == []


def test_equal_list_is_not_a_change() -> None:
    pen = Pen()
    pen.buttons = ["a", "b"]
    received: list[PropertyChange] = []
    pen.subscribe(received.append)

    pen.buttons = ["a", "b"]
    pen.buttons = ["a", "c"]

    assert [c.new for c in received] == [["a", "c"]]


def test_new_value_is_visible_inside_callback() -> None:
    pen = Pen()
    seen: list[float] = []
    pen.subscribe(lambda change: seen.append(pen.pressure))

    pen.pressure = 0.25

    assert seen == [0.25]


def test_set_if_changed_reports_change() -> None:
    pen = Pen()
    assert pen._set_if_changed("pressure", 1.0) is True
    assert pen._set_if_changed("pressure", 1.0) is False


def test_unsubscribe_stops_events() -> None:
    pen = Pen()
    received: list[PropertyChange] = []
    pen.subscribe(received.append)
    pen.unsubscribe(received.append)
    pen.unsubscribe(print)  # unknown callbacks are ignored

    pen.pressure = 1.0

    assert received == []


def test_subscriber_error_propagates_after_store() -> None:
    pen = Pen()

    def boom(change: PropertyChange) -> None:
        raise RuntimeError("subscriber failed")

    pen.subscribe(boom)
    with pytest.raises(RuntimeError):
        pen.pressure = 0.75
    assert pen.pressure == 0.75


def test_descriptor_on_class_returns_itself() -> None:
    assert isinstance(Pen.pressure, Observable)
    assert Pen.pressure.name == "pressure"


def test_repeated_nan_is_not_a_change() -> None:
    pen = Pen()
    received: list[PropertyChange] = []
    pen.subscribe(received.append)

    pen.pressure = float("nan")
    pen.pressure = float("nan")

    assert [c.name for c in received] == ["pressure"]
