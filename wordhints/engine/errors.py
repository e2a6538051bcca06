"""
Exception types raised by the engine.

All of them are ValueError subclasses so callers that only care about
"bad input" can keep catching ValueError.
"""


class WordError(ValueError):
    """A word breaks the dictionary contract (length or alphabet)."""


class HintSyntaxError(ValueError):
    """Hint text (or a feedback pattern) could not be parsed."""


class HintConflictError(ValueError):
    """Two constraint sets cannot both hold for the same hidden word."""
