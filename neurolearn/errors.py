"""Error taxonomy for NeuroLearn.

A missing preference row is not an error: stores return ``None`` and the
caller applies defaults. Everything that can go wrong while talking to a
store surfaces as ``PersistenceError``; bad preference edits surface as
``InvalidPreferenceError``. Out-of-range numbers are clamped, not rejected.
"""


class NeuroLearnError(Exception):
    """Base class for all NeuroLearn errors."""


class PersistenceError(NeuroLearnError):
    """A write to or read from an external store failed."""

    def __init__(self, message: str, operation: str = "", user_id: str | None = None):
        super().__init__(message)
        self.operation = operation
        self.user_id = user_id


class InvalidPreferenceError(NeuroLearnError, ValueError):
    """A preference edit named an unknown field or an unusable value."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


__all__ = ["InvalidPreferenceError", "NeuroLearnError", "PersistenceError"]
