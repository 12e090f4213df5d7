"""
Routine checklists - predictable morning and evening anchors.
"""

ROUTINE_BLUEPRINT: dict[str, tuple[str, ...]] = {
    "morning": (
        "Check today’s focus cue",
        "Skim schedule visual",
        "Complete grounding exercise",
    ),
    "evening": (
        "Log wins in journal",
        "Set tomorrow’s top 3",
        "Run 5-min calm down audio",
    ),
}


class RoutineChecklist:
    """Tick-off state for each routine block."""

    def __init__(self, blueprint: dict[str, tuple[str, ...]] = ROUTINE_BLUEPRINT):
        self.blueprint = blueprint
        self.checked: dict[str, list[bool]] = {
            block: [False] * len(steps) for block, steps in blueprint.items()
        }

    def toggle(self, block: str, index: int) -> bool:
        """Flip one step. Raises KeyError/IndexError for unknown block or step."""
        steps = self.checked[block]
        if not 0 <= index < len(steps):
            raise IndexError(f"{block} has no step {index}")
        steps[index] = not steps[index]
        return steps[index]

    def progress(self, block: str) -> float:
        steps = self.checked[block]
        return sum(steps) / len(steps) if steps else 0.0

    def to_dict(self) -> dict:
        return {
            block: [
                {"step": step, "done": done}
                for step, done in zip(self.blueprint[block], self.checked[block])
            ]
            for block in self.blueprint
        }
