"""NeuroLearn Test Suite

This package contains all tests for the NeuroLearn adaptive dashboard.

Test organization:
- unit/: Unit tests for individual modules
  - preferences/: Profile model, clamping and persistence mapping
  - quiz/: Question bank, engine and personalisation resolver
  - storage/: SQLite and hosted REST backends
  - timer/: Pomodoro state machine and its asyncio driver
  - session/: LearningSession end to end against SQLite
- integration/: Dashboard API tests through FastAPI's TestClient

Running tests:
    # All tests
    pytest

    # Specific module
    pytest tests/unit/quiz/
"""
