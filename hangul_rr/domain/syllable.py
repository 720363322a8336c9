from __future__ import annotations

"""Single-syllable state machine (domain layer).

A `Syllable` holds an optional initial, medial and final jamo and is built up
one jamo at a time with `push()`. A jamo that does not fit into the syllable,
but could start the next one, is returned as an *overflow* syllable instead
of raising; the containing `Hangul` appends it.

States (derived from the contents, never stored):

    START       nothing set; next must be initial or medial
    MEDIAL      initial only; next must be medial
    OPEN        initial + medial, no final, medial can still become a diphthong
    OPEN_FINAL  initial + medial, and either no final yet or an extensible one
    END         nothing more can be appended in place
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from functools import total_ordering
from typing import Final, Optional

from hangul_rr.domain.errors import (
    ExpectedInitialOrMedial,
    ExpectedMedial,
    HangulError,
    IncompatibleCombine,
    SyllableError,
)
from hangul_rr.domain.jamo import FinalJamo, InitialJamo, Jamo, MedialJamo

logger = logging.getLogger(__name__)


# Unicode Hangul Syllables block
SYLLABLE_BASE: Final[int] = 0xAC00
SYLLABLE_LAST: Final[int] = 0xD7A3
INITIAL_STRIDE: Final[int] = 588  # 21 medials * 28 finals
MEDIAL_STRIDE: Final[int] = 28

_INITIALS: Final[tuple[InitialJamo, ...]] = tuple(InitialJamo)
_MEDIALS: Final[tuple[MedialJamo, ...]] = tuple(MedialJamo)
_FINALS: Final[tuple[FinalJamo, ...]] = tuple(FinalJamo)


class SyllableState(Enum):
    START = auto()
    MEDIAL = auto()
    OPEN = auto()
    OPEN_FINAL = auto()
    END = auto()


@total_ordering
@dataclass(eq=False)
class Syllable:
    initial: Optional[InitialJamo] = None
    medial: Optional[MedialJamo] = None
    final: Optional[FinalJamo] = None

    def __post_init__(self) -> None:
        if self.medial is not None and self.initial is None:
            raise SyllableError("A medial requires an initial")
        if self.final is not None and self.medial is None:
            raise SyllableError("A final requires a medial")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_jamo(cls, jamo: Jamo) -> Syllable:
        """Start a new syllable with `jamo`.

        Raises:
            ExpectedInitialOrMedial: for jamo that can only be a final (e.g. ㄳ).
        """
        syl = cls()
        syl.push(jamo)
        return syl

    @classmethod
    def from_char(cls, ch: str) -> Syllable:
        """Decompose a displayed syllable back into its jamo.

        Accepts a precomposed syllable (U+AC00..U+D7A3) or the compatibility
        glyph of a lone initial, i.e. everything `str(Syllable)` can produce.
        """
        if len(ch) != 1:
            raise HangulError("Expected a single character, got {!r}".format(ch))

        code = ord(ch)
        if SYLLABLE_BASE <= code <= SYLLABLE_LAST:
            index = code - SYLLABLE_BASE
            fin = index % MEDIAL_STRIDE
            return cls(
                initial=_INITIALS[index // INITIAL_STRIDE],
                medial=_MEDIALS[(index % INITIAL_STRIDE) // MEDIAL_STRIDE],
                final=_FINALS[fin - 1] if fin else None,
            )

        jamo = Jamo.from_char(ch)
        return cls(initial=InitialJamo.from_jamo(jamo))

    def copy(self) -> Syllable:
        return Syllable(self.initial, self.medial, self.final)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def state(self) -> SyllableState:
        if self.initial is None:
            return SyllableState.START
        if self.medial is None:
            return SyllableState.MEDIAL
        if self.final is None:
            if self.medial.combine_possible():
                return SyllableState.OPEN
            return SyllableState.OPEN_FINAL
        if self.final.append_possible():
            return SyllableState.OPEN_FINAL
        return SyllableState.END

    def is_empty(self) -> bool:
        return self.initial is None

    def possible(self) -> list[Jamo]:
        """Every jamo `push()` would absorb in place (no overflow, no error)."""
        state = self.state()
        if state is SyllableState.START:
            return Jamo.all_initial() + Jamo.all_medial()
        if state is SyllableState.MEDIAL:
            return Jamo.all_medial()
        medial = self.medial
        if state is SyllableState.OPEN and medial is not None:
            return [m.jamo for m in medial.combine_possible()] + Jamo.all_final()
        if state is SyllableState.OPEN_FINAL:
            if self.final is None:
                return Jamo.all_final()
            return [f.jamo for f in self.final.append_possible()]
        return []

    # ------------------------------------------------------------------
    # Push / pop
    # ------------------------------------------------------------------

    def push(self, jamo: Jamo) -> Optional[Syllable]:
        """Absorb `jamo`, or return the overflow syllable it starts.

        The syllable is left unchanged when an overflow is returned or an
        error is raised.

        Raises:
            ExpectedInitialOrMedial: `jamo` cannot start a syllable and does not fit.
            ExpectedMedial: an initial is waiting for its vowel and `jamo` is not one.
            IncompatibleCombine: a final-only jamo cannot extend the current final.
        """
        state = self.state()
        initial = jamo.as_initial()
        medial = jamo.as_medial()
        final = jamo.as_final()

        if state is SyllableState.START:
            if initial is not None:
                self.initial = initial
                return None
            if medial is not None:
                self.initial = InitialJamo.SILENT
                self.medial = medial
                return None
            raise ExpectedInitialOrMedial(jamo, state)

        if state is SyllableState.MEDIAL:
            if medial is not None:
                self.medial = medial
                return None
            raise ExpectedMedial(jamo, state)

        current = self.medial
        if state is SyllableState.OPEN and current is not None:
            if medial is not None:
                try:
                    self.medial = current.combine(medial)
                except IncompatibleCombine:
                    return self._overflow(jamo, state)
                return None
            if final is not None:
                self.final = final
                return None
            return self._overflow(jamo, state)

        if state is SyllableState.OPEN_FINAL:
            if final is not None:
                if self.final is None:
                    self.final = final
                    return None
                try:
                    self.final = self.final.append(final)
                except IncompatibleCombine:
                    if initial is None:
                        raise
                    return self._overflow(jamo, state)
                return None
            return self._overflow(jamo, state)

        return self._overflow(jamo, state)

    def _overflow(self, jamo: Jamo, state: SyllableState) -> Syllable:
        if jamo.as_initial() is None and jamo.as_medial() is None:
            raise ExpectedInitialOrMedial(jamo, state)
        logger.debug("Overflow %r after %r in state %s", jamo, self, state.name)
        return Syllable.from_jamo(jamo)

    def pop(self) -> Optional[Jamo]:
        """Remove and return the last jamo; clusters give up their second part."""
        if self.final is not None:
            base, addendum = self.final.components()
            if addendum is not None:
                self.final = base
                return addendum.jamo
            self.final = None
            return base.jamo

        if self.medial is not None:
            first, second = self.medial.components()
            if second is not None:
                self.medial = first
                return second.jamo
            self.medial = None
            return first.jamo

        if self.initial is not None:
            jamo = self.initial.jamo
            self.initial = None
            return jamo

        return None

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def codepoint(self) -> Optional[int]:
        """Precomposed codepoint, or None until initial and medial are set."""
        if self.initial is None or self.medial is None:
            return None
        fin = self.final.id() if self.final is not None else 0
        code = SYLLABLE_BASE + self.initial.id() * INITIAL_STRIDE + self.medial.id() * MEDIAL_STRIDE + fin
        if not SYLLABLE_BASE <= code <= SYLLABLE_LAST:
            raise SyllableError("Codepoint {:#x} outside the Hangul syllable block".format(code))
        return code

    def __str__(self) -> str:
        if self.initial is None:
            return ""
        code = self.codepoint()
        if code is None:
            return str(self.initial)
        return chr(code)

    # Ordering, equality and hashing follow the displayed form.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Syllable):
            return NotImplemented
        return str(self) == str(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Syllable):
            return NotImplemented
        return str(self) < str(other)

    def __hash__(self) -> int:
        return hash(str(self))
