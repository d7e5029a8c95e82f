"""Tests for sorting, filtering and statistics."""

from datetime import date, datetime, timedelta

import pytest

from taskpad.core.derive import Priority
from taskpad.core.query import (
    filter_tasks_by_tag,
    get_all_tags,
    get_task_stats,
    sort_tasks,
)
from taskpad.core.tasks import Task


@pytest.fixture
def now():
    return datetime(2025, 1, 15, 10, 0)


@pytest.fixture
def today(now):
    return now.date()


def make_task(task_id, minutes=0, **kwargs):
    kwargs.setdefault("created_at", datetime(2025, 1, 1) + timedelta(minutes=minutes))
    return Task(id=task_id, text=f"Task {task_id}", **kwargs)


@pytest.fixture
def sample_tasks(today):
    return [
        make_task("a", 1, due_date=today + timedelta(days=5), tags=["#work"]),
        make_task("b", 3, due_date=None, tags=["#home", "#errand"]),
        make_task("c", 2, due_date=today - timedelta(days=1), priority=Priority.OVERDUE),
        make_task("d", 4, due_date=today, tags=["#work"], priority=Priority.HIGH),
        make_task("e", 0, due_date=None),
    ]


def ids(tasks):
    return [t.id for t in tasks]


class TestSortTasks:
    def test_created_newest_first(self, sample_tasks):
        assert ids(sort_tasks(sample_tasks, "created")) == ["d", "b", "c", "a", "e"]

    def test_default_is_created(self, sample_tasks):
        assert sort_tasks(sample_tasks) == sort_tasks(sample_tasks, "created")

    def test_unknown_criterion_falls_back_to_created(self, sample_tasks):
        assert sort_tasks(sample_tasks, "bogus") == sort_tasks(sample_tasks, "created")

    def test_due_date_undated_last(self, sample_tasks):
        assert ids(sort_tasks(sample_tasks, "dueDate")) == ["c", "d", "a", "b", "e"]

    def test_priority_uses_cached_value(self):
        tasks = [
            make_task("low", priority=Priority.LOW),
            make_task("overdue", priority=Priority.OVERDUE),
            make_task("high", priority=Priority.HIGH),
        ]
        assert ids(sort_tasks(tasks, "priority")) == ["overdue", "high", "low"]

    def test_priority_ties_keep_input_order(self):
        tasks = [
            make_task("m1", priority=Priority.MEDIUM),
            make_task("h1", priority=Priority.HIGH),
            make_task("m2", priority=Priority.MEDIUM),
            make_task("h2", priority=Priority.HIGH),
        ]
        assert ids(sort_tasks(tasks, "priority")) == ["h1", "h2", "m1", "m2"]

    def test_priority_live_with_now(self, today, now):
        # Cached priority is stale: the task became overdue since it was saved
        stale = make_task("stale", due_date=today - timedelta(days=2), priority=Priority.LOW)
        fresh = make_task("fresh", due_date=today + timedelta(days=2), priority=Priority.MEDIUM)

        assert ids(sort_tasks([fresh, stale], "priority")) == ["fresh", "stale"]
        assert ids(sort_tasks([fresh, stale], "priority", now=now)) == ["stale", "fresh"]

    def test_does_not_mutate_input(self, sample_tasks):
        before = list(sample_tasks)
        result = sort_tasks(sample_tasks, "dueDate")
        assert sample_tasks == before
        assert result is not sample_tasks

    @pytest.mark.parametrize("criterion", ["created", "dueDate", "priority"])
    def test_is_permutation_and_idempotent(self, sample_tasks, criterion):
        once = sort_tasks(sample_tasks, criterion)
        twice = sort_tasks(once, criterion)

        assert sorted(ids(once)) == sorted(ids(sample_tasks))
        assert twice == once


class TestFilterTasksByTag:
    def test_no_tag_returns_input(self, sample_tasks):
        assert filter_tasks_by_tag(sample_tasks, "") is sample_tasks
        assert filter_tasks_by_tag(sample_tasks, None) is sample_tasks

    def test_filters(self, sample_tasks):
        assert ids(filter_tasks_by_tag(sample_tasks, "#work")) == ["a", "d"]

    def test_case_insensitive(self, sample_tasks):
        assert ids(filter_tasks_by_tag(sample_tasks, "#Work")) == ["a", "d"]

    def test_no_match(self, sample_tasks):
        assert filter_tasks_by_tag(sample_tasks, "#nothing") == []


class TestGetAllTags:
    def test_sorted_unique(self, sample_tasks):
        assert get_all_tags(sample_tasks) == ["#errand", "#home", "#work"]

    def test_empty(self):
        assert get_all_tags([]) == []


class TestGetTaskStats:
    def test_mixed_collection(self, now, today):
        tasks = [
            make_task("1", completed=True),
            make_task("2", due_date=today - timedelta(days=1)),
            make_task("3", due_date=today + timedelta(days=2)),
            make_task("4"),
        ]
        stats = get_task_stats(tasks, now)

        assert stats.total == 4
        assert stats.completed == 1
        assert stats.pending == 3
        assert stats.overdue == 1
        assert stats.completion_rate == 25

    def test_completed_tasks_are_not_overdue(self, now, today):
        tasks = [make_task("1", completed=True, due_date=today - timedelta(days=3))]
        assert get_task_stats(tasks, now).overdue == 0

    def test_due_today_is_overdue_after_midnight(self, now, today):
        assert get_task_stats([make_task("1", due_date=today)], now).overdue == 1

    def test_due_today_at_exact_midnight_is_not_overdue(self, today):
        midnight = datetime(2025, 1, 15)
        assert get_task_stats([make_task("1", due_date=today)], midnight).overdue == 0

    def test_due_tomorrow_is_not_overdue(self, now, today):
        tasks = [make_task("1", due_date=today + timedelta(days=1))]
        assert get_task_stats(tasks, now).overdue == 0

    def test_empty(self, now):
        stats = get_task_stats([], now)
        assert (stats.total, stats.completed, stats.pending, stats.overdue) == (0, 0, 0, 0)
        assert stats.completion_rate == 0

    def test_rate_rounds_half_up(self, now):
        tasks = [make_task("done", completed=True)] + [make_task(str(i)) for i in range(7)]
        assert get_task_stats(tasks, now).completion_rate == 13

    def test_rate_rounds_to_nearest(self, now):
        tasks = [make_task("1", completed=True), make_task("2", completed=True), make_task("3")]
        assert get_task_stats(tasks, now).completion_rate == 67
