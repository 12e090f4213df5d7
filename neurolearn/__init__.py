"""NeuroLearn - adaptive learning dashboard engine for neurodivergent learners

Philosophy:
    Ask three gentle questions, then get out of the way.
    The dashboard tunes itself from the onboarding quiz and every
    control stays adjustable afterwards.

Components:
    preferences/: Preference profile model and load/save service
    quiz/: Onboarding quiz engine and personalization resolver
    timer/: Pomodoro timer and its tick driver
    energy/: Energy check-ins
    tasks/: Task breakdown and routine checklists
    content/: Multi-format lesson content and tutor stub
    storage/: SQLite and hosted (REST) persistence backends
    session.py: Session application tying the pieces together

Configuration: args/neurolearn.yaml
"""

from pathlib import Path

__version__ = "0.1.0"

# Path constants
PROJECT_ROOT = Path(__file__).parent.parent
DB_PATH = PROJECT_ROOT / "data" / "neurolearn.db"
CONFIG_PATH = PROJECT_ROOT / "args" / "neurolearn.yaml"
