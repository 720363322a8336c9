from __future__ import annotations

import logging
from typing import Optional

from hangul_rr.domain.hangul import Hangul
from hangul_rr.domain.hangul_parser import HangulParser
from hangul_rr.domain.jamo import Jamo
from hangul_rr.domain.romanization import rr
from hangul_rr.domain.syllable import Syllable
from hangul_rr.services.vocabulary_log import VocabularyLog

logger = logging.getLogger(__name__)


class SubmitError(ValueError):
    """Raised by `ComposerController.submit` when a field is empty."""


class ComposerController:
    """Composition state behind the romanization input.

    Responsibilities:
    - hold the committed Hangul, the syllable being typed and the overflow text
    - re-parse the syllable whenever the romanization input changes
    - commit / undo syllables and submit the word to a vocabulary log

    This class has no Qt dependencies; `RrInputUiController` wires it to widgets.
    """

    def __init__(self, parser: Optional[HangulParser] = None) -> None:
        self._parser = parser if parser is not None else HangulParser()
        self._hangul = Hangul()
        self._syllable = Syllable()
        self._overflow = ""

    @property
    def parser(self) -> HangulParser:
        return self._parser

    @property
    def hangul(self) -> Hangul:
        return self._hangul

    @property
    def syllable(self) -> Syllable:
        return self._syllable

    @property
    def overflow(self) -> str:
        """Romanized text the current syllable could not absorb."""
        return self._overflow

    def is_empty(self) -> bool:
        return self._hangul.is_empty()

    def display(self) -> str:
        return "{}{}".format(self._hangul, self._syllable)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def set_rr(self, text: str) -> None:
        self._syllable, self._overflow = self._parser.parse_syllable(text or "")

    def push(self) -> str:
        """Commit the syllable being typed; returns the text to keep in the input."""
        if not self._syllable.is_empty():
            self._hangul.append(self._syllable)
            logger.debug("Committed %s -> %s", self._syllable, self._hangul)
        rest = self._overflow
        self.set_rr(rest)
        return rest

    def pop(self) -> Optional[Jamo]:
        return self._hangul.pop_back()

    def clear(self) -> None:
        self._hangul = Hangul()
        self._syllable = Syllable()
        self._overflow = ""

    # ------------------------------------------------------------------
    # Hints
    # ------------------------------------------------------------------

    def possible(self) -> list[Jamo]:
        return self._syllable.possible()

    def combinations(self) -> list[tuple[str, str]]:
        """(glyph, romanization) pairs that can still extend the final or medial."""
        syl = self._syllable
        if syl.final is not None:
            candidates = [f.jamo for f in syl.final.append_possible()]
        elif syl.medial is not None:
            candidates = [m.jamo for m in syl.medial.combine_possible()]
        else:
            candidates = []
        return [(str(j), rr(j)) for j in candidates]

    # ------------------------------------------------------------------
    # Vocabulary
    # ------------------------------------------------------------------

    def submit(self, description: str, log: VocabularyLog) -> Hangul:
        """Store the committed Hangul with `description` and reset the input.

        Raises:
            SubmitError: if the Hangul or the description is empty.
        """
        if self._hangul.is_empty():
            raise SubmitError("Hangul field is empty!")
        description = (description or "").strip()
        if not description:
            raise SubmitError("Description field is empty!")

        word = self._hangul.copy()
        replaced = log.insert_entry(word, description)
        if replaced is not None:
            logger.info("Replaced vocabulary entry %s (%r)", replaced[0], replaced[1])
        self.clear()
        return word

    def word(self) -> Hangul:
        """Committed Hangul plus the syllable still being typed."""
        word = self._hangul.copy()
        if not self._syllable.is_empty():
            word.append(self._syllable.copy())
        return word

    def find(self, log: VocabularyLog) -> tuple[Hangul, bool]:
        """Point the log's cursor at the typed word and reset the input.

        Returns:
            (word looked up, whether it was found)

        Raises:
            SubmitError: if nothing has been typed.
        """
        word = self._require_word()
        found = log.index_at(word)
        self.clear()
        return word, found

    def delete(self, log: VocabularyLog) -> tuple[Hangul, Optional[tuple[Hangul, str]]]:
        """Remove the typed word from the log and reset the input.

        Returns:
            (word looked up, the removed entry or None)

        Raises:
            SubmitError: if nothing has been typed.
        """
        word = self._require_word()
        removed = log.remove_entry(word)
        self.clear()
        return word, removed

    def _require_word(self) -> Hangul:
        word = self.word()
        if word.is_empty():
            raise SubmitError("Hangul field is empty!")
        return word
