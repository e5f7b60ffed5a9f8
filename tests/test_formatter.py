from datetime import timedelta

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from duration_formatter.errors import InvalidAccuracyError, InvalidDurationError, InvalidUnitsError
from duration_formatter.formatter import CONCISE, CONCISE_LOW_ACCURACY, LONG, DurationFormatter
from duration_formatter.units import DAY_UNITS, Unit

YEAR = 31556952
MONTH = 2629746
WEEK = 604800
DAY = 86400


def test_zero():
    assert LONG.format(0) == "0 секунд"
    assert CONCISE.format(0) == "0с"
    assert LONG.format(timedelta(0)) == "0 секунд"


def test_sub_second_is_zero():
    assert LONG.format(0.5) == "0 секунд"
    assert CONCISE.format(timedelta(milliseconds=900)) == "0с"


@pytest.mark.parametrize("seconds", range(2, 60))
def test_seconds_plural(seconds):
    assert LONG.format(seconds) == f"{seconds} секунд"
    assert CONCISE.format(seconds) == f"{seconds}с"


def test_one_second_is_singular():
    assert LONG.format(1) == "1 секунда"
    assert CONCISE.format(1) == "1с"


def test_minute_threshold():
    assert LONG.format(59) == "59 секунд"
    assert LONG.format(60) == "1 минута"
    assert CONCISE.format(60) == "1м"
    assert LONG.format(61) == "1 минута"


def test_largest_unit_only():
    assert LONG.format(3661) == "1 час"
    assert CONCISE.format(3661) == "1ч"
    assert LONG.format(timedelta(hours=1, minutes=1, seconds=1)) == "1 час"


def test_concise_template_does_not_depend_on_count():
    assert CONCISE.format(timedelta(minutes=1)) == "1м"
    assert CONCISE.format(timedelta(minutes=5)) == "5м"


@pytest.mark.parametrize(
    "seconds, long_text, short_text",
    [
        (2 * 3600, "2 часов", "2ч"),
        (DAY, "1 день", "1д"),
        (6 * DAY, "6 дней", "6д"),
        (WEEK, "1 неделя", "1нед"),
        (3 * WEEK, "3 недель", "3нед"),
        (MONTH - 1, "4 недель", "4нед"),
        (MONTH, "1 месяц", "1мес"),
        (11 * MONTH, "11 месяцев", "11мес"),
        (YEAR, "1 год", "1г"),
        (2 * YEAR + 5 * DAY, "2 лет", "2г"),
    ],
)
def test_units(seconds, long_text, short_text):
    assert LONG.format(seconds) == long_text
    assert CONCISE.format(seconds) == short_text


def test_day_units_cap_at_days():
    three_weeks = 3 * WEEK
    assert LONG.format(three_weeks, DAY_UNITS) == "21 дней"
    assert CONCISE.format(2 * YEAR, DAY_UNITS) == f"{2 * YEAR // DAY}д"
    assert LONG.format(three_weeks, "day") == "21 дней"


def test_default_units_on_instance():
    days_only = DurationFormatter(units=DAY_UNITS)
    assert days_only.format(3 * WEEK) == "21 дней"
    assert days_only.format(3 * WEEK, "full") == "3 недель"


def test_ordering_without_fitting_unit_falls_back_to_zero_seconds():
    assert LONG.format(59, [Unit.HOURS, Unit.MINUTES]) == "0 секунд"
    assert CONCISE.format(59, [Unit.HOURS]) == "0с"


def test_low_accuracy_matches_concise():
    for seconds in (0, 1, 59, 60, 3661, DAY + 1, 5 * WEEK, 3 * YEAR + 7):
        assert CONCISE_LOW_ACCURACY.format(seconds) == CONCISE.format(seconds)


def test_presets():
    assert LONG.concise is False
    assert CONCISE.concise is True
    assert CONCISE_LOW_ACCURACY.concise is True
    assert CONCISE_LOW_ACCURACY.accuracy == 3
    assert LONG.accuracy == sys.maxsize


def test_callable():
    assert LONG(3661) == LONG.format(3661)
    assert CONCISE(120, "day") == "2м"


@pytest.mark.parametrize("value", [-1, timedelta(days=-1), "5 minutes"])
def test_rejects_invalid_duration(value):
    with pytest.raises(InvalidDurationError):
        LONG.format(value)


@pytest.mark.parametrize("accuracy", [0, -3, 1.5, True])
def test_rejects_invalid_accuracy(accuracy):
    with pytest.raises(InvalidAccuracyError):
        DurationFormatter(True, accuracy)


def test_rejects_invalid_units():
    with pytest.raises(InvalidUnitsError):
        LONG.format(10, [])
    with pytest.raises(InvalidUnitsError):
        DurationFormatter(units="hourly")


def test_repr():
    assert repr(LONG) == "DurationFormatter(concise=False, accuracy=max)"
    assert repr(CONCISE_LOW_ACCURACY) == "DurationFormatter(concise=True, accuracy=3)"


def test_single_unit_ordering():
    assert LONG.format(120, Unit.MINUTES) == "2 минут"
    assert CONCISE.format(30, Unit.MINUTES) == "0с"
