from __future__ import annotations

"""Composition errors (domain layer).

Every failure raised by the engine derives from `HangulError`, so callers that
only want to ignore a rejected keystroke can catch that single type.

    HangulError
    ├── JamoError
    │   ├── UnexpectedJamo
    │   └── IncompatibleCombine
    └── SyllableError
        ├── ExpectedInitialOrMedial
        └── ExpectedMedial
"""

from typing import Any


class HangulError(ValueError):
    """Base class for all composition errors."""


# -----------------------------------------------------------------------------
# Jamo level
# -----------------------------------------------------------------------------

class JamoError(HangulError):
    pass


class UnexpectedJamo(JamoError):
    """A narrowing conversion was attempted on a jamo outside that subtype."""

    def __init__(self, jamo: Any) -> None:
        self.jamo = jamo
        super().__init__("Did not expect {} <{!r}>".format(jamo, jamo))


class IncompatibleCombine(JamoError):
    """Two jamo of the same category cannot merge into one."""

    def __init__(self, first: Any, second: Any) -> None:
        self.first = first
        self.second = second
        super().__init__(
            "Cannot combine {} <{!r}> with {} <{!r}>".format(first, first, second, second)
        )


# -----------------------------------------------------------------------------
# Syllable level
# -----------------------------------------------------------------------------

class SyllableError(HangulError):
    pass


class ExpectedInitialOrMedial(SyllableError):
    def __init__(self, jamo: Any, state: Any) -> None:
        self.jamo = jamo
        self.state = state
        super().__init__(
            "Jamo {} <{!r}> cannot start a syllable (state {})".format(jamo, jamo, _state_name(state))
        )


class ExpectedMedial(SyllableError):
    def __init__(self, jamo: Any, state: Any) -> None:
        self.jamo = jamo
        self.state = state
        super().__init__(
            "Expected a medial, got {} <{!r}> (state {})".format(jamo, jamo, _state_name(state))
        )


def _state_name(state: Any) -> str:
    return str(getattr(state, "name", state))
