"""Tests for neurolearn/tasks/breakdown.py and routines.py

Executive function helpers:
- New tasks arrive with three micro steps
- Status toggles cycle predictably
- Routine checklists track progress per block
"""

import pytest

from neurolearn.tasks.breakdown import DEFAULT_TASKS, TaskBoard, TaskStatus, build_micro_steps
from neurolearn.tasks.routines import ROUTINE_BLUEPRINT, RoutineChecklist


class TestMicroSteps:
    def test_uses_first_three_words(self):
        steps = build_micro_steps("Write history essay introduction tonight")

        assert steps == (
            "Define success for “Write history essay”",
            "Break “Write history essay” into 10-min moves",
            "Check-in with energy meter after progress",
        )

    def test_short_title(self):
        assert build_micro_steps("Revise")[0] == "Define success for “Revise”"

    def test_empty_title_falls_back(self):
        assert build_micro_steps("   ")[0] == "Define success for “task”"


class TestTaskBoard:
    def test_starts_with_default_tasks(self):
        board = TaskBoard()
        assert [t.title for t in board.tasks] == [t.title for t in DEFAULT_TASKS]

    def test_add_creates_not_started_task(self):
        board = TaskBoard()
        task = board.add("  Plan maths revision  ")

        assert task.title == "Plan maths revision"
        assert task.status is TaskStatus.NOT_STARTED
        assert len(task.steps) == 3
        assert task.id not in {t.id for t in DEFAULT_TASKS}

    def test_blank_title_ignored(self):
        board = TaskBoard()
        assert board.add("   ") is None
        assert len(board.tasks) == len(DEFAULT_TASKS)

    def test_toggle_cycle(self):
        board = TaskBoard(tasks=())
        task = board.add("Read chapter")

        assert board.toggle(task.id).status is TaskStatus.IN_PROGRESS
        assert board.toggle(task.id).status is TaskStatus.DONE
        assert board.toggle(task.id).status is TaskStatus.IN_PROGRESS

    def test_toggle_unknown_task(self):
        assert TaskBoard().toggle(999) is None

    def test_to_dict(self):
        data = TaskBoard().tasks[0].to_dict()
        assert data["status"] == "in-progress"
        assert isinstance(data["steps"], list)


class TestRoutines:
    def test_all_steps_start_unchecked(self):
        routines = RoutineChecklist()
        for block in ROUTINE_BLUEPRINT:
            assert routines.progress(block) == 0

    def test_toggle_and_progress(self):
        routines = RoutineChecklist()

        assert routines.toggle("morning", 0) is True
        assert routines.progress("morning") == pytest.approx(1 / 3)
        assert routines.toggle("morning", 0) is False
        assert routines.progress("morning") == 0

    def test_unknown_block(self):
        with pytest.raises(KeyError):
            RoutineChecklist().toggle("afternoon", 0)

    def test_unknown_step(self):
        with pytest.raises(IndexError):
            RoutineChecklist().toggle("evening", 7)

    def test_to_dict(self):
        data = RoutineChecklist().to_dict()
        assert data["evening"][0] == {"step": "Log wins in journal", "done": False}
