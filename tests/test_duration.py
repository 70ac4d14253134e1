from datetime import timedelta

import pytest

from histsearch.duration import format_duration


def test_zero_is_zero_seconds():
    assert format_duration(timedelta(0)) == "0s"


def test_sub_millisecond_is_zero_seconds():
    assert format_duration(timedelta(microseconds=999)) == "0s"


@pytest.mark.parametrize("n", [1, 7, 59])
def test_seconds(n):
    assert format_duration(timedelta(seconds=n)) == f"{n}s"


@pytest.mark.parametrize("n", [1, 30, 59])
def test_minutes(n):
    assert format_duration(timedelta(minutes=n)) == f"{n}m"


@pytest.mark.parametrize("n", [1, 12, 23])
def test_hours(n):
    assert format_duration(timedelta(hours=n)) == f"{n}h"


@pytest.mark.parametrize("n", [1, 250, 999])
def test_milliseconds(n):
    assert format_duration(timedelta(milliseconds=n)) == f"{n}ms"


@pytest.mark.parametrize("n", [1, 3])
def test_years(n):
    assert format_duration(timedelta(seconds=31_557_600 * n)) == f"{n}y"


@pytest.mark.parametrize("n", [1, 5])
def test_months(n):
    assert format_duration(timedelta(seconds=2_630_016 * n)) == f"{n}mo"


def test_only_most_significant_unit_is_kept():
    assert format_duration(timedelta(hours=2, minutes=5, seconds=9)) == f"{2}h"


def test_seconds_win_over_millis():
    assert format_duration(timedelta(seconds=4, milliseconds=900)) == f"{4}s"


def test_negative_is_rejected():
    with pytest.raises(ValueError):
        format_duration(timedelta(seconds=-1))