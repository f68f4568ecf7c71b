from datetime import date, timedelta

import pytest

from pokelogs.errors import InvalidDate, InvalidPeriod, InvalidRange
from pokelogs.services.window import DateWindow, resolve_period


@pytest.mark.parametrize("length", [1, 3, 31, 366])
def test_offset_of_maps_window_days_one_to_one(length):
    window = DateWindow(start=date(2024, 2, 20), length=length)
    days = window.days()

    assert len(days) == length
    assert [window.offset_of(d) for d in days] == list(range(length))
    assert window.offset_of(window.start - timedelta(days=1)) is None
    assert window.offset_of(window.start + timedelta(days=length)) is None
    assert window.offset_of(date(1999, 1, 1)) is None


def test_window_rejects_non_positive_length():
    with pytest.raises(InvalidPeriod):
        DateWindow(start=date(2024, 1, 1), length=0)


def test_from_range_is_inclusive():
    window = DateWindow.from_range("28/02/2024", "02/03/2024")
    assert window.start == date(2024, 2, 28)
    assert window.length == 4
    assert window.end == date(2024, 3, 2)


def test_from_range_single_day():
    window = DateWindow.from_range("01/03/2024", "01/03/2024")
    assert window.length == 1


def test_from_range_end_before_start():
    with pytest.raises(InvalidRange) as exc:
        DateWindow.from_range("05/03/2024", "04/03/2024")
    assert exc.value.message == "La fecha inicio es después de la fecha fin"


def test_from_range_invalid_boundaries():
    with pytest.raises(InvalidDate) as exc:
        DateWindow.from_range("2024-03-01", "04/03/2024")
    assert exc.value.boundary == "start"
    assert "Fecha inicio inválida" in exc.value.message

    with pytest.raises(InvalidDate) as exc:
        DateWindow.from_range("01/03/2024", "32/03/2024")
    assert exc.value.boundary == "end"
    assert "Fecha fin inválida" in exc.value.message


def test_last_days_ends_today():
    window = DateWindow.last_days(7, today=date(2024, 3, 10))
    assert window.start == date(2024, 3, 4)
    assert window.end == date(2024, 3, 10)
    assert window.length == 7


def test_last_days_rejects_zero():
    with pytest.raises(InvalidPeriod):
        DateWindow.last_days(0, today=date(2024, 3, 10))


@pytest.mark.parametrize(
    "args, expected",
    [
        ((None, False, False), 7),
        ((10, False, False), 10),
        ((10, True, False), 3),
        ((10, False, True), 30),
        ((None, True, True), 30),
        ((None, True, False), 3),
    ],
)
def test_resolve_period_precedence(args, expected):
    assert resolve_period(*args) == expected


def test_oversized_periods_are_rejected():
    with pytest.raises(InvalidPeriod) as exc:
        DateWindow.last_days(1000000, today=date(2024, 3, 10))
    assert exc.value.message == "El número de días tiene que estar entre 1 y 3660"

    with pytest.raises(InvalidPeriod):
        DateWindow.from_range("01/01/2000", "31/12/2020")


def test_last_days_before_first_calendar_day():
    with pytest.raises(InvalidPeriod):
        DateWindow.last_days(10, today=date(1, 1, 5))
