"""
Tool: Task Breakdown
Purpose: Turn a one-line task into three micro steps

"Revise biology" is not a task, it's a project. Every new task gets a
success definition, a 10-minute split and an energy check-in so the
first move is always obvious.

Usage:
    from neurolearn.tasks.breakdown import TaskBoard

    board = TaskBoard()
    task = board.add("Write history essay intro")
    board.toggle(task.id)     # not-started -> in-progress
"""

import itertools
from dataclasses import dataclass, replace
from enum import Enum


class TaskStatus(str, Enum):
    NOT_STARTED = "not-started"
    IN_PROGRESS = "in-progress"
    DONE = "done"


@dataclass(frozen=True)
class Task:
    id: int
    title: str
    steps: tuple[str, ...]
    status: TaskStatus = TaskStatus.NOT_STARTED

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "steps": list(self.steps),
            "status": self.status.value,
        }


DEFAULT_TASKS: tuple[Task, ...] = (
    Task(
        1,
        "Biology mock prep",
        ("Skim module overview", "Generate flashcards", "Schedule recap for Friday"),
        TaskStatus.IN_PROGRESS,
    ),
    Task(
        2,
        "Executive function practice",
        ("Pick breathable task size", "Switch on focus timer", "Check-in with energy meter"),
    ),
)


def build_micro_steps(title: str) -> tuple[str, ...]:
    """Three micro steps named after the first three words of the title."""
    base = " ".join(title.split()[:3]) or "task"
    return (
        f"Define success for “{base}”",
        f"Break “{base}” into 10-min moves",
        "Check-in with energy meter after progress",
    )


def next_status(status: TaskStatus) -> TaskStatus:
    """Toggle cycle: done reopens to in-progress, anything else moves forward."""
    if status is TaskStatus.IN_PROGRESS:
        return TaskStatus.DONE
    return TaskStatus.IN_PROGRESS


class TaskBoard:
    """In-session task list."""

    def __init__(self, tasks: tuple[Task, ...] = DEFAULT_TASKS):
        self.tasks: list[Task] = list(tasks)
        self._ids = itertools.count(max((t.id for t in tasks), default=0) + 1)

    def add(self, title: str) -> Task | None:
        """Add a task with generated micro steps. Blank titles are ignored."""
        title = title.strip()
        if not title:
            return None
        task = Task(next(self._ids), title, build_micro_steps(title))
        self.tasks.append(task)
        return task

    def toggle(self, task_id: int) -> Task | None:
        for index, task in enumerate(self.tasks):
            if task.id == task_id:
                self.tasks[index] = replace(task, status=next_status(task.status))
                return self.tasks[index]
        return None
