"""Pomodoro timer and its event-loop tick driver."""

from neurolearn.timer.driver import TimerDriver
from neurolearn.timer.pomodoro import CompletedCycle, PomodoroMode, PomodoroTimer

__all__ = ["CompletedCycle", "PomodoroMode", "PomodoroTimer", "TimerDriver"]
