"""Executive function support: task breakdown and routine checklists

Philosophy:
    The first step should never need planning.
    Every task arrives pre-split; routines stay identical day to day.
"""

from neurolearn.tasks.breakdown import DEFAULT_TASKS, Task, TaskBoard, TaskStatus, build_micro_steps
from neurolearn.tasks.routines import ROUTINE_BLUEPRINT, RoutineChecklist

__all__ = [
    "DEFAULT_TASKS",
    "ROUTINE_BLUEPRINT",
    "RoutineChecklist",
    "Task",
    "TaskBoard",
    "TaskStatus",
    "build_micro_steps",
]
