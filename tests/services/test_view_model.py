"""Unit tests for the task view model (sorting, blocking, timeline)."""

from __future__ import annotations

from datetime import date

from conftest import make_task

from taskfeed_cli.services.normalizer import normalize
from taskfeed_cli.services.view_model import (
    blocking_tasks,
    is_blocked,
    resolve_reference,
    sort_by_deadline,
    task_bar,
    task_bars,
    timeline_range,
)

TODAY = date(2025, 6, 1)


class TestSortByDeadline:
    def test_normalized_rows_sort_soonest_first(self):
        tasks = normalize(
            [
                {"Task": "A", "Deadline": "2025-03-01"},
                {"Task": "B", "Deadline": "2025-02-01"},
            ],
            today=TODAY,
        )
        assert [t.name for t in sort_by_deadline(tasks)] == ["B", "A"]

    def test_missing_deadlines_last_in_input_order(self):
        tasks = [
            make_task("1", "no-1"),
            make_task("2", "late", deadline=date(2025, 5, 1)),
            make_task("3", "no-2"),
            make_task("4", "early", deadline=date(2025, 1, 1)),
        ]
        assert [t.name for t in sort_by_deadline(tasks)] == ["early", "late", "no-1", "no-2"]

    def test_equal_deadlines_keep_input_order(self):
        due = date(2025, 2, 2)
        tasks = [make_task(str(i), deadline=due) for i in range(1, 5)]
        assert [t.id for t in sort_by_deadline(tasks)] == ["1", "2", "3", "4"]

    def test_does_not_mutate_input(self):
        tasks = [make_task("1", deadline=date(2025, 3, 1)), make_task("2", deadline=date(2025, 1, 1))]
        sort_by_deadline(tasks)
        assert [t.id for t in tasks] == ["1", "2"]


class TestResolveReference:
    def test_id_takes_precedence_over_name(self):
        tasks = [make_task("1", "2"), make_task("2", "Other")]
        assert resolve_reference("2", tasks).name == "Other"

    def test_falls_back_to_exact_name(self):
        tasks = [make_task("1", "Wiring")]
        assert resolve_reference("Wiring", tasks).id == "1"
        assert resolve_reference("wiring", tasks) is None


class TestIsBlocked:
    def test_no_prerequisites(self, dependency_tasks):
        assert is_blocked(dependency_tasks[3], dependency_tasks) is False

    def test_unresolvable_reference_does_not_block(self):
        task = make_task("1", pre_requisites=["Nonexistent"])
        assert is_blocked(task, [task]) is False

    def test_self_reference_does_not_block(self):
        task = make_task("1", "Self", pre_requisites=["1", "Self"])
        assert is_blocked(task, [task]) is False

    def test_open_prerequisite_blocks_until_completed(self, dependency_tasks):
        a, b = dependency_tasks[0], dependency_tasks[1]
        assert is_blocked(a, dependency_tasks) is True

        done_b = b.model_copy(update={"completed": True})
        updated = [a, done_b, *dependency_tasks[2:]]
        assert is_blocked(a, updated) is False

    def test_name_reference_blocks(self, dependency_tasks):
        assert is_blocked(dependency_tasks[2], dependency_tasks) is True

    def test_single_hop_only(self):
        # C -> B (completed) -> A (open): C is not blocked
        a = make_task("1", "A")
        b = make_task("2", "B", pre_requisites=["1"], completed=True)
        c = make_task("3", "C", pre_requisites=["2"])
        assert is_blocked(c, [a, b, c]) is False

    def test_blocking_tasks_lists_each_blocker_once(self):
        b = make_task("2", "B")
        a = make_task("1", "A", pre_requisites=["2", "B"])
        assert [t.id for t in blocking_tasks(a, [a, b])] == ["2"]


class TestTimelineRange:
    def test_padded_window(self):
        tasks = [make_task("1", start_date=date(2025, 1, 10), deadline=date(2025, 1, 15))]
        timeline = timeline_range(tasks, today=TODAY)

        assert timeline.start == date(2025, 1, 8)
        assert timeline.end == date(2025, 1, 20)
        assert timeline.total_days == 13

    def test_empty_list_is_one_day_at_today(self):
        timeline = timeline_range([], today=TODAY)
        assert (timeline.start, timeline.end, timeline.total_days) == (TODAY, TODAY, 1)

    def test_no_deadlines_gives_default_window(self):
        timeline = timeline_range([make_task("1"), make_task("2")], today=TODAY)

        assert timeline.start == TODAY
        assert timeline.end == date(2025, 6, 8)
        assert timeline.total_days == 8

    def test_spans_earliest_start_and_latest_deadline(self):
        tasks = [
            make_task("1", start_date=date(2025, 1, 5)),
            make_task("2", start_date=date(2025, 1, 10), deadline=date(2025, 1, 12)),
            make_task("3", start_date=date(2025, 1, 20), deadline=date(2025, 2, 1)),
        ]
        timeline = timeline_range(tasks, today=TODAY)

        assert timeline.start == date(2025, 1, 3)
        assert timeline.end == date(2025, 2, 6)
        assert timeline.total_days == 35

    def test_days_iterates_whole_window(self):
        tasks = [make_task("1", start_date=date(2025, 1, 10), deadline=date(2025, 1, 10))]
        days = list(timeline_range(tasks, today=TODAY).days())

        assert days[0] == date(2025, 1, 8)
        assert days[-1] == date(2025, 1, 15)
        assert len(days) == 8

    def test_deadline_before_start_still_gives_a_window(self):
        task = make_task("1", start_date=date(2025, 3, 10), deadline=date(2025, 3, 1))
        timeline = timeline_range([task], today=TODAY)

        assert timeline.start == date(2025, 2, 27)
        assert timeline.end == date(2025, 3, 15)
        assert timeline.total_days == 17

    def test_past_deadlines_without_start_column(self):
        tasks = normalize(
            [{"Task": "A", "Deadline": "2025-01-15"}, {"Task": "B", "Deadline": "2025-02-01"}],
            today=date(2026, 10, 19),
        )
        timeline = timeline_range(tasks, today=date(2026, 10, 19))

        assert timeline.start == date(2025, 1, 13)
        assert timeline.end == date(2026, 10, 24)
        assert timeline.total_days == (timeline.end - timeline.start).days + 1
        assert all(bar.duration_days <= 0 for _, bar in task_bars(tasks, timeline))


class TestTaskBars:
    def test_offset_and_inclusive_duration(self):
        task = make_task("1", start_date=date(2025, 1, 10), deadline=date(2025, 1, 15))
        timeline = timeline_range([task], today=TODAY)
        bar = task_bar(task, timeline)

        assert bar.offset_days == 2
        assert bar.duration_days == 6

    def test_single_day_task_has_duration_one(self):
        task = make_task("1", start_date=date(2025, 1, 10), deadline=date(2025, 1, 10))
        bar = task_bar(task, timeline_range([task], today=TODAY))
        assert bar.duration_days == 1

    def test_tasks_without_deadline_are_skipped(self, dependency_tasks):
        timeline = timeline_range(dependency_tasks, today=TODAY)
        drawn = [task.name for task, _ in task_bars(dependency_tasks, timeline)]
        assert drawn == ["A", "B", "D"]

    def test_bars_carry_blocked_flag(self, dependency_tasks):
        timeline = timeline_range(dependency_tasks, today=TODAY)
        flags = {task.name: bar.blocked for task, bar in task_bars(dependency_tasks, timeline)}
        assert flags == {"A": True, "B": False, "D": False}

    def test_covers(self):
        task = make_task("1", start_date=date(2025, 1, 10), deadline=date(2025, 1, 11))
        bar = task_bar(task, timeline_range([task], today=TODAY))
        assert [bar.covers(i) for i in range(5)] == [False, False, True, True, False]
