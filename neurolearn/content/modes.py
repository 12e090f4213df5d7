"""
Lesson content in every learning mode.

The same lesson (how neurons signal) in five formats. The session's
active mode picks which one the dashboard shows first.
"""

from dataclasses import dataclass

from neurolearn.preferences.models import LearningMode


@dataclass(frozen=True)
class ModeContent:
    title: str
    lead: str
    body: tuple[str, ...]
    meta: str | None = None

    def to_dict(self) -> dict:
        return {"title": self.title, "lead": self.lead, "body": list(self.body), "meta": self.meta}


LEARNING_MODE_CONTENT: dict[LearningMode, ModeContent] = {
    LearningMode.TEXT: ModeContent(
        "Simplified text mode",
        "Sentences stay under 12 words, headings chunk information, and key terms are bolded.",
        (
            "Neurons share information using small electrical signals.",
            "Think of dendrites as tree branches that listen for messages.",
            "Axons are long cables that send messages forward.",
        ),
        "Reading time: 2 min · Best for dyslexia + focus drift",
    ),
    LearningMode.AUDIO: ModeContent(
        "Audio mode",
        "Friendly narrator keeps a neutral tone. Speed + pitch stay adjustable.",
        (
            "Narrator: “In neurons, information flows in one direction, like a relay race.”",
            "Pause markers every 90 seconds keep listening light.",
            "Soft chimes indicate topic changes.",
        ),
        "Voice pack: Neutral | Speed: 0.85x",
    ),
    LearningMode.VISUAL: ModeContent(
        "Visual storyboard",
        "Icons + timelines replace dense paragraphs.",
        (
            "Panel 1: Neuron overview with colour-coded parts.",
            "Panel 2: Signal journey mapped as a subway line.",
            "Panel 3: Brain areas light up when they activate.",
        ),
        "Great for autism profiles preferring predictability.",
    ),
    LearningMode.GAMIFIED: ModeContent(
        "Gamified mission",
        "Micro-challenges turn revision into a low-pressure quest.",
        (
            "Mission: “Guide a signal through the neuron correctly.”",
            "Rewards: focus streaks, gentle confetti, badges you can hide.",
            "Adaptive difficulty keeps questions short when attention dips.",
        ),
        "3 XP · Sensory-safe animations",
    ),
    LearningMode.MATH: ModeContent(
        "Step-by-step breakdown",
        "Math-heavy ideas slow down into bite-sized moves.",
        (
            "1. Identify what the question gives you.",
            "2. Translate numbers into a visual bar or grid.",
            "3. Solve one micro-step at a time with hints.",
        ),
        "Optimised for dyscalculia support.",
    ),
}


def get_mode_content(mode: LearningMode | str) -> ModeContent:
    return LEARNING_MODE_CONTENT[LearningMode(mode)]
