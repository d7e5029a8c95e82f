"""Tests for derived attributes: priority, due status, date formatting."""

from datetime import date, datetime, timedelta

import pytest

from taskpad.core.derive import (
    DueDateStatus,
    Priority,
    calculate_priority,
    days_until_due,
    format_date,
    get_due_date_status,
)


@pytest.fixture
def now():
    return datetime(2025, 1, 15, 10, 0)


@pytest.fixture
def today(now):
    return now.date()


class TestDaysUntilDue:
    def test_no_due_date(self, now):
        assert days_until_due(None, now) is None

    def test_due_today_mid_morning(self, now, today):
        assert days_until_due(today, now) == 0

    def test_due_tomorrow(self, now, today):
        assert days_until_due(today + timedelta(days=1), now) == 1

    def test_due_yesterday(self, now, today):
        assert days_until_due(today - timedelta(days=1), now) == -1

    def test_exact_midnight(self, today):
        midnight = datetime(2025, 1, 15)
        assert days_until_due(today, midnight) == 0
        assert days_until_due(today - timedelta(days=1), midnight) == -1

    def test_just_before_midnight(self, today):
        late = datetime(2025, 1, 15, 23, 59)
        assert days_until_due(today, late) == 0
        assert days_until_due(today + timedelta(days=1), late) == 1

    def test_accepts_plain_date(self, today):
        assert days_until_due(today + timedelta(days=4), today) == 4


class TestCalculatePriority:
    @pytest.mark.parametrize(
        "offset, expected",
        [
            (-10, Priority.OVERDUE),
            (-1, Priority.OVERDUE),
            (0, Priority.HIGH),
            (1, Priority.HIGH),
            (2, Priority.MEDIUM),
            (3, Priority.MEDIUM),
            (4, Priority.LOW),
            (30, Priority.LOW),
        ],
    )
    def test_tiers(self, now, today, offset, expected):
        assert calculate_priority(today + timedelta(days=offset), now) == expected

    def test_no_due_date_is_low(self, now):
        assert calculate_priority(None, now) == Priority.LOW

    def test_rank_order(self):
        ranks = [p.rank for p in (Priority.OVERDUE, Priority.HIGH, Priority.MEDIUM, Priority.LOW)]
        assert ranks == [0, 1, 2, 3]


class TestGetDueDateStatus:
    def test_no_due_date(self, now):
        assert get_due_date_status(None, now) == DueDateStatus("", "")

    def test_overdue_plural(self, now, today):
        status = get_due_date_status(today - timedelta(days=2), now)
        assert status == DueDateStatus("overdue", "Overdue by 2 days")

    def test_overdue_singular(self, now, today):
        status = get_due_date_status(today - timedelta(days=1), now)
        assert status == DueDateStatus("overdue", "Overdue by 1 day")

    def test_due_today(self, now, today):
        assert get_due_date_status(today, now) == DueDateStatus("due-soon", "Due today")

    def test_due_tomorrow(self, now, today):
        status = get_due_date_status(today + timedelta(days=1), now)
        assert status == DueDateStatus("due-soon", "Due tomorrow")

    def test_due_in_a_few_days(self, now, today):
        status = get_due_date_status(today + timedelta(days=3), now)
        assert status == DueDateStatus("due-soon", "Due in 3 days")

    def test_far_future_has_no_class(self, now, today):
        status = get_due_date_status(today + timedelta(days=5), now)
        assert status == DueDateStatus("", "Due 5 days")

    @pytest.mark.parametrize("offset", range(-5, 10))
    def test_agrees_with_priority(self, now, today, offset):
        due = today + timedelta(days=offset)
        priority = calculate_priority(due, now)
        status = get_due_date_status(due, now)

        assert (priority == Priority.OVERDUE) == (status.css_class == "overdue")
        if offset in (0, 1):
            assert priority == Priority.HIGH
            assert status.css_class == "due-soon"


class TestFormatDate:
    def test_empty(self):
        assert format_date(None) == ""
        assert format_date("") == ""

    def test_date(self):
        assert format_date(date(2025, 1, 5)) == "Jan 5, 2025"

    def test_iso_string(self):
        assert format_date("2025-12-25") == "Dec 25, 2025"
