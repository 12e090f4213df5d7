"""
Tutor stub - calm, stepwise explanations.

Stands in for the AI tutor until a model is wired up: every answer uses
the same three-step shape (what it is, why it matters, one next action)
so the pacing stays predictable.
"""

TUTOR_GREETING = (
    "Ask anything — NeuroLearn will answer with calm pacing, short paragraphs, "
    "and optional next-steps."
)


def explain(prompt: str) -> str | None:
    """Return a stepwise explanation for prompt, or None for a blank prompt."""
    request = prompt.strip()
    if not request:
        return None
    return (
        f"Thanks for sharing. Here’s a calm explanation of “{request}”:\n"
        "• Step 1 — What it is: break the idea into one short sentence.\n"
        "• Step 2 — Why it matters: connect to something you already know.\n"
        "• Step 3 — Try it: describe a tiny action you can take now.\n\n"
        "Need it shorter, visual, or voiced? Toggle a new mode anytime."
    )
