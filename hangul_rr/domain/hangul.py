from __future__ import annotations

"""Multi-syllable Hangul string (domain layer).

`Hangul` is an ordered list of `Syllable`s. Jamo are always pushed into the
last syllable; overflow syllables are appended behind it. Every syllable
except possibly the last one is non-empty.

Serialisation is the display string itself: `str(h)` and `Hangul.from_str()`
round-trip, which is what the vocabulary log stores on disk.
"""

import logging
from functools import total_ordering
from typing import Iterable, Iterator, Optional, overload

from hangul_rr.domain.errors import HangulError
from hangul_rr.domain.jamo import Jamo
from hangul_rr.domain.syllable import Syllable

logger = logging.getLogger(__name__)


@total_ordering
class Hangul:
    __slots__ = ("_syllables",)

    def __init__(self, syllables: Iterable[Syllable] = ()) -> None:
        self._syllables: list[Syllable] = list(syllables)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_jamo(cls, jamo: Iterable[Jamo]) -> Hangul:
        hangul = cls()
        for j in jamo:
            hangul.push_back(j)
        return hangul

    @classmethod
    def from_str(cls, text: str) -> Hangul:
        """Rebuild a Hangul from its display string (one syllable per character).

        Raises:
            HangulError: if a character is neither a precomposed syllable nor the
                glyph of an initial consonant.
        """
        try:
            return cls(Syllable.from_char(ch) for ch in text)
        except HangulError as e:
            raise HangulError("Cannot read {!r} as Hangul: {}".format(text, e)) from e

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def push_back(self, jamo: Jamo) -> None:
        """Push `jamo` into the last syllable, appending any overflow.

        Raises:
            HangulError: propagated from `Syllable.push` when `jamo` cannot be used.
        """
        if not self._syllables:
            self._syllables.append(Syllable())

        overflow = self._syllables[-1].push(jamo)
        if overflow is not None:
            self._syllables.append(overflow)

    def pop_back(self) -> Optional[Jamo]:
        """Remove the most recent jamo; emptied syllables disappear.

        The sole remaining syllable is kept even when it becomes empty.
        """
        if not self._syllables:
            return None

        last = self._syllables[-1]
        if last.is_empty() and len(self._syllables) > 1:
            self._syllables.pop()
            return self.pop_back()

        jamo = last.pop()
        if last.is_empty() and len(self._syllables) > 1:
            self._syllables.pop()
        return jamo

    def break_with(self, jamo: Jamo) -> None:
        """Start a new syllable with `jamo`, whatever the last syllable could accept.

        Raises:
            ExpectedInitialOrMedial: if `jamo` cannot start a syllable.
        """
        logger.debug("Break before %r", jamo)
        self.append(Syllable.from_jamo(jamo))

    def append(self, syllable: Syllable) -> None:
        if self._syllables and self._syllables[-1].is_empty():
            self._syllables[-1] = syllable
        else:
            self._syllables.append(syllable)

    def clear(self) -> None:
        self._syllables.clear()

    def copy(self) -> Hangul:
        return Hangul(s.copy() for s in self._syllables)

    def last(self) -> Optional[Syllable]:
        return self._syllables[-1] if self._syllables else None

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._syllables)

    def __iter__(self) -> Iterator[Syllable]:
        return iter(self._syllables)

    @overload
    def __getitem__(self, index: int) -> Syllable: ...

    @overload
    def __getitem__(self, index: slice) -> list[Syllable]: ...

    def __getitem__(self, index):
        return self._syllables[index]

    def is_empty(self) -> bool:
        return all(s.is_empty() for s in self._syllables)

    # ------------------------------------------------------------------
    # Display / comparison
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return "".join(str(s) for s in self._syllables)

    def __repr__(self) -> str:
        return "Hangul({!r})".format(str(self))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hangul):
            return NotImplemented
        return str(self) == str(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Hangul):
            return NotImplemented
        return str(self) < str(other)

    def __hash__(self) -> int:
        return hash(str(self))
