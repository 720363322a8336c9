from __future__ import annotations

"""Fixed romanization table (domain layer).

One canonical Latin spelling per jamo (1 to 3 ASCII letters). The table is
compiled in; it is not loaded from YAML because every other part of the
engine (trie, tokenizer, tests) relies on it being exactly this set.

Primary API:
- ROMANIZATION: ordered (spelling, jamo) pairs
- rr(jamo): spelling for a jamo
- romanization_trie(): the shared, frozen prefix tree built from the table
"""

from functools import lru_cache
from typing import Final

from hangul_rr.domain.jamo import Jamo
from hangul_rr.domain.trie import Trie


MAX_TOKEN_LENGTH: Final[int] = 3

ROMANIZATION: Final[tuple[tuple[str, Jamo], ...]] = (
    # --- consonants (initial and/or final) ---
    ("g", Jamo.G),
    ("gg", Jamo.GG),
    ("gs", Jamo.GS),
    ("n", Jamo.N),
    ("nc", Jamo.NC),
    ("nch", Jamo.NCH),
    ("d", Jamo.D),
    ("dd", Jamo.DD),
    ("r", Jamo.R),
    ("lg", Jamo.LG),
    ("lm", Jamo.LM),
    ("lb", Jamo.LB),
    ("ls", Jamo.LS),
    ("lt", Jamo.LT),
    ("lph", Jamo.LPH),
    ("lh", Jamo.LH),
    ("m", Jamo.M),
    ("b", Jamo.B),
    ("bb", Jamo.BB),
    ("bs", Jamo.BS),
    ("s", Jamo.S),
    ("ss", Jamo.SS),
    ("ng", Jamo.SILENT),
    ("j", Jamo.J),
    ("jj", Jamo.JJ),
    ("ch", Jamo.CH),
    ("k", Jamo.K),
    ("t", Jamo.T),
    ("p", Jamo.P),
    ("h", Jamo.H),
    # --- vowels ---
    ("a", Jamo.A),
    ("ae", Jamo.AE),
    ("ya", Jamo.YA),
    ("yae", Jamo.YAE),
    ("eo", Jamo.EO),
    ("e", Jamo.E),
    ("yeo", Jamo.YEO),
    ("ye", Jamo.YE),
    ("o", Jamo.O),
    ("wa", Jamo.WA),
    ("wae", Jamo.WAE),
    ("oe", Jamo.OE),
    ("yo", Jamo.YO),
    ("u", Jamo.U),
    ("wo", Jamo.WO),
    ("we", Jamo.WE),
    ("wi", Jamo.WI),
    ("yu", Jamo.YU),
    ("eu", Jamo.EU),
    ("ui", Jamo.UI),
    ("i", Jamo.I),
)

_RR_BY_JAMO: Final[dict[Jamo, str]] = {j: s for s, j in ROMANIZATION}


def rr(jamo: Jamo) -> str:
    """Return the romanized spelling of `jamo` (e.g. Jamo.SILENT -> "ng")."""
    return _RR_BY_JAMO[jamo]


@lru_cache(maxsize=None)
def romanization_trie() -> Trie[str, Jamo]:
    """Build (once) and return the frozen romanization trie."""
    tree: Trie[str, Jamo] = Trie()
    for spelling, jamo in ROMANIZATION:
        tree.insert_str(spelling, jamo)
    return tree.freeze()
