"""
Tool: Pomodoro Timer
Purpose: Focus/break countdown state machine

The timer itself never sleeps; something calls tick() once per second
while it runs (see timer/driver.py). When the countdown reaches zero the
timer stops, flips mode and refills to the new mode's full duration.

Usage:
    from neurolearn.timer.pomodoro import PomodoroTimer

    timer = PomodoroTimer()
    timer.start()
    cycle = timer.tick()     # CompletedCycle when a countdown just finished
    timer.format_remaining() # "24:59"
"""

from dataclasses import dataclass
from enum import Enum


class PomodoroMode(str, Enum):
    FOCUS = "focus"
    BREAK = "break"


DEFAULT_PRESETS: dict[PomodoroMode, int] = {
    PomodoroMode.FOCUS: 25,
    PomodoroMode.BREAK: 5,
}


@dataclass(frozen=True)
class CompletedCycle:
    """A countdown that ran to zero."""

    mode: PomodoroMode
    duration_minutes: int


class PomodoroTimer:
    """Countdown over two named durations (minutes)."""

    def __init__(self, focus_minutes: int = 25, break_minutes: int = 5):
        self.presets = {
            PomodoroMode.FOCUS: focus_minutes,
            PomodoroMode.BREAK: break_minutes,
        }
        self.mode = PomodoroMode.FOCUS
        self.running = False
        self.seconds_remaining = self.duration_seconds(self.mode)

    def duration_seconds(self, mode: PomodoroMode) -> int:
        return self.presets[mode] * 60

    def start(self) -> None:
        self.running = True

    def pause(self) -> None:
        self.running = False

    def toggle(self) -> bool:
        """Start when paused, pause when running. Returns the new running flag."""
        self.running = not self.running
        return self.running

    def reset(self) -> None:
        """Stop and refill the current mode."""
        self.running = False
        self.seconds_remaining = self.duration_seconds(self.mode)

    def set_mode(self, mode: PomodoroMode | str) -> bool:
        """
        Switch mode while stopped, refilling to that mode's duration.

        Ignored while running. Returns True when the switch happened.
        """
        if self.running:
            return False
        self.mode = PomodoroMode(mode)
        self.seconds_remaining = self.duration_seconds(self.mode)
        return True

    def tick(self) -> CompletedCycle | None:
        """Advance one second. Does nothing while stopped."""
        if not self.running:
            return None

        if self.seconds_remaining > 1:
            self.seconds_remaining -= 1
            return None

        finished = CompletedCycle(self.mode, self.presets[self.mode])
        self.running = False
        self.mode = PomodoroMode.BREAK if self.mode is PomodoroMode.FOCUS else PomodoroMode.FOCUS
        self.seconds_remaining = self.duration_seconds(self.mode)
        return finished

    def format_remaining(self) -> str:
        minutes, seconds = divmod(self.seconds_remaining, 60)
        return f"{minutes:02d}:{seconds:02d}"

    def to_dict(self) -> dict:
        return {
            "mode": self.mode.value,
            "seconds_remaining": self.seconds_remaining,
            "running": self.running,
            "display": self.format_remaining(),
        }
