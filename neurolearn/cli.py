#!/usr/bin/env python3
"""
NeuroLearn Command Line Interface

Main entry point for the `neurolearn` command.

Usage:
    neurolearn dashboard                          # Start the dashboard server
    neurolearn preferences show --user alice      # Print stored preferences
    neurolearn preferences set --user alice theme=dark text_scale=1.2
    neurolearn quiz --user alice                  # Take the onboarding quiz
    neurolearn energy log --user alice --level 60 --feeling "foggy"
    neurolearn energy list --user alice --days 7
    neurolearn --version                          # Show version
"""

import argparse
import asyncio
import json
import sys

from dotenv import load_dotenv

from neurolearn import __version__
from neurolearn.config import load_config
from neurolearn.errors import NeuroLearnError
from neurolearn.logging_config import bind_user, setup_logging
from neurolearn.session import LearningSession
from neurolearn.storage import get_backend


def _parse_assignments(pairs: list[str]) -> dict:
    """Turn ['theme=dark', 'focus_mode=true'] into typed values."""
    changes = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep:
            raise ValueError(f"Expected field=value, got {pair!r}")
        lowered = raw.lower()
        if lowered in ("true", "false"):
            changes[key] = lowered == "true"
        else:
            try:
                changes[key] = float(raw)
            except ValueError:
                changes[key] = raw
    return changes


async def _with_session(user_id: str, action):
    bind_user(user_id)
    config = load_config()
    backend = get_backend(config)
    session = LearningSession(user_id, backend, config)
    try:
        await session.load()
        return await action(session)
    finally:
        await session.close()
        await backend.close()


def cmd_dashboard(args):
    """Handle dashboard subcommand."""
    import uvicorn

    print(f"Starting NeuroLearn Dashboard at http://{args.host}:{args.port}")
    print("Press Ctrl+C to stop")

    uvicorn.run(
        "neurolearn.dashboard.backend.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )


def cmd_preferences(args):
    """Handle preferences subcommand."""

    async def show(session: LearningSession):
        return {"success": session.last_error is None, "profile": session.profile.to_dict()}

    async def update(session: LearningSession):
        return await session.update_preferences(**_parse_assignments(args.changes))

    result = asyncio.run(_with_session(args.user, update if args.action == "set" else show))
    print(json.dumps(result, indent=2))
    return 0 if result["success"] else 1


def cmd_quiz(args):
    """Walk through the onboarding quiz in the terminal."""

    async def run(session: LearningSession):
        quiz = session.quiz
        while True:
            question = quiz.current_question
            print(f"\n[{quiz.step + 1}/{quiz.question_count}] {question.prompt}")
            print(f"  {question.description}")
            for number, option in enumerate(question.options, start=1):
                print(f"  {number}. {option.label} - {option.support}")

            try:
                choice = input("  Choose a number (b = back): ").strip().lower()
            except EOFError:
                return None

            if choice == "b":
                session.quiz_back()
                continue
            if not choice.isdigit() or not 1 <= int(choice) <= len(question.options):
                print("  Please pick one of the numbers above.")
                continue

            session.answer(question.key.value, question.options[int(choice) - 1].value)
            result = await session.advance_quiz()
            if result is not None:
                return {**result, "notes": list(session.notes)}

    result = asyncio.run(_with_session(args.user, run))
    if result is None:
        print("\nQuiz cancelled.")
        return 1

    print()
    for note in result.get("notes", []):
        print(f"  * {note}")
    if not result["success"]:
        print(f"  (Saved locally only: {result['error']})")
    return 0


def cmd_energy(args):
    """Handle energy subcommand."""

    async def log(session: LearningSession):
        return await session.log_energy(args.level, args.feeling, args.notes)

    async def history(session: LearningSession):
        entries = await session.energy_history(args.days)
        return {"success": True, "entries": [e.to_dict() for e in entries]}

    result = asyncio.run(_with_session(args.user, log if args.action == "log" else history))
    print(json.dumps(result, indent=2))
    return 0 if result["success"] else 1


def cmd_version(args):
    """Show version information."""
    print(f"NeuroLearn version {__version__}")


def main():
    """Main CLI entry point."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="neurolearn",
        description="NeuroLearn - Adaptive learning dashboard for neurodivergent learners",
    )
    parser.add_argument(
        "--version", "-V", action="store_true", help="Show version and exit"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Dashboard subcommand
    dashboard_parser = subparsers.add_parser("dashboard", help="Start the dashboard server")
    dashboard_parser.add_argument(
        "--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)"
    )
    dashboard_parser.add_argument(
        "--port", type=int, default=8080, help="Port to bind to (default: 8080)"
    )
    dashboard_parser.add_argument(
        "--reload", action="store_true", help="Enable auto-reload for development"
    )
    dashboard_parser.set_defaults(func=cmd_dashboard)

    # Preferences subcommand
    prefs_parser = subparsers.add_parser("preferences", help="Show or edit preferences")
    prefs_parser.add_argument("action", choices=["show", "set"])
    prefs_parser.add_argument("--user", required=True, help="User ID")
    prefs_parser.add_argument("changes", nargs="*", help="field=value pairs for 'set'")
    prefs_parser.set_defaults(func=cmd_preferences)

    # Quiz subcommand
    quiz_parser = subparsers.add_parser("quiz", help="Take the onboarding quiz")
    quiz_parser.add_argument("--user", required=True, help="User ID")
    quiz_parser.set_defaults(func=cmd_quiz)

    # Energy subcommand
    energy_parser = subparsers.add_parser("energy", help="Log or list energy check-ins")
    energy_parser.add_argument("action", choices=["log", "list"])
    energy_parser.add_argument("--user", required=True, help="User ID")
    energy_parser.add_argument("--level", type=float, default=50, help="Slider position 0-100")
    energy_parser.add_argument("--feeling", default="", help="How you're feeling")
    energy_parser.add_argument("--notes", help="Optional notes")
    energy_parser.add_argument("--days", type=int, default=7, help="History window in days")
    energy_parser.set_defaults(func=cmd_energy)

    args = parser.parse_args()

    if args.version:
        cmd_version(args)
        return 0

    if not args.command:
        parser.print_help()
        return 0

    setup_logging(config=load_config())
    try:
        return args.func(args) or 0
    except (NeuroLearnError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
