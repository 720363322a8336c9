from __future__ import annotations

"""Romanization tokenizer (domain layer).

`HangulParser` turns free-form romanized text into jamo with a longest-match
lookup (3, then 2, then 1 characters) against the shared romanization trie,
and feeds the result into a `Hangul` or a single `Syllable`.

A run of break characters (space or hyphen by default) before a token forces
that token to start a new syllable.

Text that matches no table entry is not an error: the tokenizer reports "no
jamo" and leaves the remainder untouched, so `parse()` stops there and hands
the unconsumed text back to the caller.
"""

import logging
from typing import Final, Optional

from hangul_rr.domain.errors import HangulError
from hangul_rr.domain.hangul import Hangul
from hangul_rr.domain.jamo import Jamo
from hangul_rr.domain.romanization import MAX_TOKEN_LENGTH, romanization_trie
from hangul_rr.domain.syllable import Syllable
from hangul_rr.domain.trie import Trie

logger = logging.getLogger(__name__)


BREAK_CHARACTERS: Final[str] = " -"


class HangulParser:
    def __init__(
            self,
            trie: Optional[Trie[str, Jamo]] = None,
            *,
            break_characters: str = BREAK_CHARACTERS,
    ) -> None:
        self._trie = trie if trie is not None else romanization_trie()
        self._breaks = frozenset(break_characters or "")

    @property
    def trie(self) -> Trie[str, Jamo]:
        return self._trie

    @property
    def break_characters(self) -> str:
        return "".join(sorted(self._breaks))

    # ------------------------------------------------------------------
    # Tokenizer
    # ------------------------------------------------------------------

    def parse_jamo(self, text: str) -> tuple[Optional[Jamo], bool, str]:
        """Read one jamo from the start of `text`.

        Returns:
            (jamo or None, whether break characters preceded it, remainder)
        """
        rest = text
        is_break = False
        while rest and rest[0] in self._breaks:
            is_break = True
            rest = rest[1:]

        for length in range(MAX_TOKEN_LENGTH, 0, -1):
            if length > len(rest):
                continue
            jamo = self._trie.get_str(rest[:length])
            if jamo is not None:
                return jamo, is_break, rest[length:]

        return None, is_break, rest

    # ------------------------------------------------------------------
    # Driving Hangul / Syllable
    # ------------------------------------------------------------------

    def parse_token(self, hangul: Hangul, text: str) -> str:
        """Consume one token of `text` into `hangul` and return the remainder.

        Raises:
            HangulError: if the token's jamo cannot be used at this position.
        """
        jamo, is_break, rest = self.parse_jamo(text)
        if jamo is None:
            return rest

        if is_break:
            hangul.break_with(jamo)
        else:
            hangul.push_back(jamo)
        return rest

    def parse(self, hangul: Hangul, text: str) -> str:
        """Consume as much of `text` as possible; returns the unconsumed rest."""
        prev = None
        cur = text
        while prev != cur:
            prev = cur
            cur = self.parse_token(hangul, cur)
        if cur:
            logger.debug("Unconsumed romanization: %r", cur)
        return cur

    def parse_syllable(self, text: str) -> tuple[Syllable, str]:
        """Build a single syllable from the start of `text`.

        Stops before the first jamo that would overflow or be rejected, at an
        unmatched run, or at a break once the syllable has content.

        Returns:
            (syllable so far, unconsumed remainder)
        """
        syl = Syllable()
        rest = text
        while rest:
            jamo, is_break, after = self.parse_jamo(rest)
            if jamo is None:
                return syl, after
            if is_break and not syl.is_empty():
                return syl, rest

            try:
                overflow = syl.push(jamo)
            except HangulError as e:
                logger.debug("parse_syllable stopped at %r: %s", rest, e)
                return syl, rest
            if overflow is not None:
                return syl, rest

            rest = after
        return syl, rest

    def with_prefix(self, token: str) -> list[tuple[str, Jamo]]:
        """Every (spelling, jamo) reachable from the partial spelling `token`."""
        return self._trie.with_prefix(token)
