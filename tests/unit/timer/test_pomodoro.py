"""Tests for neurolearn/timer/pomodoro.py

Countdown rules:
- tick only counts down while running
- reaching zero stops, flips mode and refills
- mode switches only while stopped
"""

import pytest

from neurolearn.timer.pomodoro import CompletedCycle, PomodoroMode, PomodoroTimer


@pytest.fixture
def timer():
    return PomodoroTimer()


class TestInitialState:
    def test_starts_on_full_focus(self, timer):
        assert timer.mode is PomodoroMode.FOCUS
        assert timer.seconds_remaining == 25 * 60
        assert timer.running is False
        assert timer.format_remaining() == "25:00"


class TestTick:
    def test_tick_ignored_while_stopped(self, timer):
        assert timer.tick() is None
        assert timer.seconds_remaining == 1500

    def test_tick_counts_down(self, timer):
        timer.start()
        timer.tick()
        assert timer.seconds_remaining == 1499
        assert timer.format_remaining() == "24:59"

    def test_focus_expiry_flips_to_break(self, timer):
        timer.seconds_remaining = 1
        timer.start()

        cycle = timer.tick()

        assert cycle == CompletedCycle(PomodoroMode.FOCUS, 25)
        assert timer.running is False
        assert timer.mode is PomodoroMode.BREAK
        assert timer.seconds_remaining == 300

    def test_break_expiry_flips_to_focus(self, timer):
        timer.set_mode("break")
        timer.seconds_remaining = 1
        timer.start()

        cycle = timer.tick()

        assert cycle.mode is PomodoroMode.BREAK
        assert timer.mode is PomodoroMode.FOCUS
        assert timer.seconds_remaining == 1500

    def test_full_short_cycle(self):
        timer = PomodoroTimer(focus_minutes=1, break_minutes=1)
        timer.start()
        cycles = [timer.tick() for _ in range(60)]

        assert cycles[:-1] == [None] * 59
        assert cycles[-1].duration_minutes == 1
        assert timer.mode is PomodoroMode.BREAK


class TestControls:
    def test_toggle(self, timer):
        assert timer.toggle() is True
        assert timer.toggle() is False

    def test_pause_keeps_remaining(self, timer):
        timer.start()
        timer.tick()
        timer.pause()
        assert timer.seconds_remaining == 1499

    def test_reset_stops_and_refills(self, timer):
        timer.start()
        timer.tick()
        timer.reset()

        assert timer.running is False
        assert timer.seconds_remaining == 1500

    def test_set_mode_while_stopped(self, timer):
        assert timer.set_mode(PomodoroMode.BREAK) is True
        assert timer.seconds_remaining == 300

    def test_set_mode_ignored_while_running(self, timer):
        timer.start()
        assert timer.set_mode("break") is False
        assert timer.mode is PomodoroMode.FOCUS

    def test_set_mode_rejects_unknown(self, timer):
        with pytest.raises(ValueError):
            timer.set_mode("nap")

    def test_to_dict(self, timer):
        assert timer.to_dict() == {
            "mode": "focus",
            "seconds_remaining": 1500,
            "running": False,
            "display": "25:00",
        }
