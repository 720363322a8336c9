from __future__ import annotations

"""Jamo classification (domain layer).

This module contains *no* Qt/UI dependencies.

It centralises:
- The generic `Jamo` enumeration (Hangul Compatibility Jamo, U+3131..U+3163)
- The three positional views: `InitialJamo` (U+1100..), `MedialJamo` (U+1161..)
  and `FinalJamo` (U+11A8..)
- The vowel (diphthong) and consonant (cluster) combination tables

Enum values are the Unicode codepoints, so `id()` is a plain offset into the
relevant Unicode sub-block and feeds the syllable composition formula:

    0xAC00 + initial.id() * 588 + medial.id() * 28 + final.id()

Widening a positional jamo to `Jamo` is always possible (`.jamo`). Narrowing a
`Jamo` is partial: `InitialJamo.from_jamo()` and friends raise `UnexpectedJamo`,
while `Jamo.as_initial()` and friends return None.
"""

from enum import Enum
from typing import Final, Optional

from hangul_rr.domain.errors import IncompatibleCombine, UnexpectedJamo


# -----------------------------------------------------------------------------
# Generic jamo
# -----------------------------------------------------------------------------

class Jamo(Enum):
    """Any relevant jamo; values are compatibility-jamo codepoints."""

    G = 0x3131  # ㄱ
    GG = 0x3132  # ㄲ
    GS = 0x3133  # ㄳ
    N = 0x3134  # ㄴ
    NC = 0x3135  # ㄵ
    NCH = 0x3136  # ㄶ
    D = 0x3137  # ㄷ
    DD = 0x3138  # ㄸ
    R = 0x3139  # ㄹ
    LG = 0x313A  # ㄺ
    LM = 0x313B  # ㄻ
    LB = 0x313C  # ㄼ
    LS = 0x313D  # ㄽ
    LT = 0x313E  # ㄾ
    LPH = 0x313F  # ㄿ
    LH = 0x3140  # ㅀ
    M = 0x3141  # ㅁ
    B = 0x3142  # ㅂ
    BB = 0x3143  # ㅃ
    BS = 0x3144  # ㅄ
    S = 0x3145  # ㅅ
    SS = 0x3146  # ㅆ
    SILENT = 0x3147  # ㅇ
    J = 0x3148  # ㅈ
    JJ = 0x3149  # ㅉ
    CH = 0x314A  # ㅊ
    K = 0x314B  # ㅋ
    T = 0x314C  # ㅌ
    P = 0x314D  # ㅍ
    H = 0x314E  # ㅎ
    A = 0x314F  # ㅏ
    AE = 0x3150  # ㅐ
    YA = 0x3151  # ㅑ
    YAE = 0x3152  # ㅒ
    EO = 0x3153  # ㅓ
    E = 0x3154  # ㅔ
    YEO = 0x3155  # ㅕ
    YE = 0x3156  # ㅖ
    O = 0x3157  # ㅗ
    WA = 0x3158  # ㅘ
    WAE = 0x3159  # ㅙ
    OE = 0x315A  # ㅚ
    YO = 0x315B  # ㅛ
    U = 0x315C  # ㅜ
    WO = 0x315D  # ㅝ
    WE = 0x315E  # ㅞ
    WI = 0x315F  # ㅟ
    YU = 0x3160  # ㅠ
    EU = 0x3161  # ㅡ
    UI = 0x3162  # ㅢ
    I = 0x3163  # ㅣ

    def id(self) -> int:
        return self.value - 0x3131

    @classmethod
    def all(cls) -> list[Jamo]:
        return list(cls)

    @classmethod
    def all_initial(cls) -> list[Jamo]:
        return [j.jamo for j in InitialJamo]

    @classmethod
    def all_medial(cls) -> list[Jamo]:
        return [j.jamo for j in MedialJamo]

    @classmethod
    def all_final(cls) -> list[Jamo]:
        return [j.jamo for j in FinalJamo]

    @classmethod
    def from_char(cls, ch: str) -> Jamo:
        """Return the jamo for a compatibility-jamo glyph (e.g. "ㄱ")."""
        try:
            return cls(ord(ch))
        except (TypeError, ValueError):
            raise UnexpectedJamo(ch) from None

    def as_initial(self) -> Optional[InitialJamo]:
        return InitialJamo.__members__.get(self.name)

    def as_medial(self) -> Optional[MedialJamo]:
        return MedialJamo.__members__.get(self.name)

    def as_final(self) -> Optional[FinalJamo]:
        return FinalJamo.__members__.get(self.name)

    def __str__(self) -> str:
        return chr(self.value)

    def __repr__(self) -> str:
        return "{}({:#x})".format(self.name, self.value)


class _PositionalJamo(Enum):
    """Shared behaviour of the three positional views."""

    @property
    def jamo(self) -> Jamo:
        return Jamo[self.name]

    @classmethod
    def from_jamo(cls, jamo: Jamo):
        try:
            return cls[jamo.name]
        except KeyError:
            raise UnexpectedJamo(jamo) from None

    @classmethod
    def all(cls) -> list:
        return list(cls)

    def __str__(self) -> str:
        # Displayed through the compatibility glyph, like the generic jamo.
        return str(self.jamo)

    def __repr__(self) -> str:
        return "{}({:#x})".format(self.name, self.value)


# -----------------------------------------------------------------------------
# Initials (choseong)
# -----------------------------------------------------------------------------

class InitialJamo(_PositionalJamo):
    G = 0x1100
    GG = 0x1101
    N = 0x1102
    D = 0x1103
    DD = 0x1104
    R = 0x1105
    M = 0x1106
    B = 0x1107
    BB = 0x1108
    S = 0x1109
    SS = 0x110A
    SILENT = 0x110B
    J = 0x110C
    JJ = 0x110D
    CH = 0x110E
    K = 0x110F
    T = 0x1110
    P = 0x1111
    H = 0x1112

    def id(self) -> int:
        return self.value - 0x1100


# -----------------------------------------------------------------------------
# Medials (jungseong)
# -----------------------------------------------------------------------------

class MedialKind(Enum):
    TALL = "tall"
    WIDE = "wide"
    FULL = "full"


class MedialJamo(_PositionalJamo):
    A = 0x1161
    AE = 0x1162
    YA = 0x1163
    YAE = 0x1164
    EO = 0x1165
    E = 0x1166
    YEO = 0x1167
    YE = 0x1168
    O = 0x1169
    WA = 0x116A
    WAE = 0x116B
    OE = 0x116C
    YO = 0x116D
    U = 0x116E
    WO = 0x116F
    WE = 0x1170
    WI = 0x1171
    YU = 0x1172
    EU = 0x1173
    UI = 0x1174
    I = 0x1175

    def id(self) -> int:
        return self.value - 0x1161

    def kind(self) -> MedialKind:
        return _MEDIAL_KIND[self]

    def combine_possible(self) -> list[MedialJamo]:
        """Vowels that may follow this one (in writing order) to form a diphthong."""
        return list(_MEDIAL_FOLLOWERS.get(self, ()))

    def combine(self, other: MedialJamo) -> MedialJamo:
        """Combine two simple vowels into a diphthong.

        The pair is normalised to (Wide, Tall) first, so `a.combine(b)` and
        `b.combine(a)` agree.

        Raises:
            IncompatibleCombine: if the pair is not in the diphthong table.
        """
        kinds = (self.kind(), other.kind())
        if kinds == (MedialKind.TALL, MedialKind.WIDE):
            return other.combine(self)
        if kinds != (MedialKind.WIDE, MedialKind.TALL):
            raise IncompatibleCombine(self.jamo, other.jamo)

        combined = _DIPHTHONGS.get((self, other))
        if combined is None:
            raise IncompatibleCombine(self.jamo, other.jamo)
        return combined

    def components(self) -> tuple[MedialJamo, Optional[MedialJamo]]:
        """Split a diphthong into (wide, tall); simple vowels return (self, None)."""
        return _DIPHTHONG_PARTS.get(self, (self, None))


_MEDIAL_KIND: Final[dict[MedialJamo, MedialKind]] = {
    MedialJamo.A: MedialKind.TALL,
    MedialJamo.AE: MedialKind.TALL,
    MedialJamo.YA: MedialKind.TALL,
    MedialJamo.YAE: MedialKind.TALL,
    MedialJamo.EO: MedialKind.TALL,
    MedialJamo.E: MedialKind.TALL,
    MedialJamo.YEO: MedialKind.TALL,
    MedialJamo.YE: MedialKind.TALL,
    MedialJamo.O: MedialKind.WIDE,
    MedialJamo.WA: MedialKind.FULL,
    MedialJamo.WAE: MedialKind.FULL,
    MedialJamo.OE: MedialKind.FULL,
    MedialJamo.YO: MedialKind.WIDE,
    MedialJamo.U: MedialKind.WIDE,
    MedialJamo.WO: MedialKind.FULL,
    MedialJamo.WE: MedialKind.FULL,
    MedialJamo.WI: MedialKind.FULL,
    MedialJamo.YU: MedialKind.WIDE,
    MedialJamo.EU: MedialKind.WIDE,
    MedialJamo.UI: MedialKind.FULL,
    MedialJamo.I: MedialKind.TALL,
}

# (wide, tall) -> diphthong
_DIPHTHONGS: Final[dict[tuple[MedialJamo, MedialJamo], MedialJamo]] = {
    (MedialJamo.O, MedialJamo.A): MedialJamo.WA,
    (MedialJamo.O, MedialJamo.AE): MedialJamo.WAE,
    (MedialJamo.O, MedialJamo.I): MedialJamo.OE,
    (MedialJamo.U, MedialJamo.EO): MedialJamo.WO,
    (MedialJamo.U, MedialJamo.E): MedialJamo.WE,
    (MedialJamo.U, MedialJamo.I): MedialJamo.WI,
    (MedialJamo.EU, MedialJamo.I): MedialJamo.UI,
}

_DIPHTHONG_PARTS: Final[dict[MedialJamo, tuple[MedialJamo, MedialJamo]]] = {
    v: k for k, v in _DIPHTHONGS.items()
}

_MEDIAL_FOLLOWERS: Final[dict[MedialJamo, tuple[MedialJamo, ...]]] = {
    MedialJamo.O: (MedialJamo.A, MedialJamo.AE, MedialJamo.I),
    MedialJamo.U: (MedialJamo.EO, MedialJamo.E, MedialJamo.I),
    MedialJamo.EU: (MedialJamo.I,),
}


# -----------------------------------------------------------------------------
# Finals (jongseong)
# -----------------------------------------------------------------------------

class FinalJamo(_PositionalJamo):
    G = 0x11A8
    GG = 0x11A9
    GS = 0x11AA
    N = 0x11AB
    NC = 0x11AC
    NCH = 0x11AD
    D = 0x11AE
    R = 0x11AF
    LG = 0x11B0
    LM = 0x11B1
    LB = 0x11B2
    LS = 0x11B3
    LT = 0x11B4
    LPH = 0x11B5
    LH = 0x11B6
    M = 0x11B7
    B = 0x11B8
    BS = 0x11B9
    S = 0x11BA
    SS = 0x11BB
    SILENT = 0x11BC
    J = 0x11BD
    CH = 0x11BE
    K = 0x11BF
    T = 0x11C0
    P = 0x11C1
    H = 0x11C2

    def id(self) -> int:
        # 1-indexed: index 0 of the Unicode block means "no final".
        return self.value - 0x11A8 + 1

    def append_possible(self) -> list[FinalJamo]:
        return [b for (a, b) in _CLUSTERS if a is self]

    def append(self, other: FinalJamo) -> FinalJamo:
        """Extend this consonant into a cluster.

        Raises:
            IncompatibleCombine: if (self, other) is not a known cluster.
        """
        cluster = _CLUSTERS.get((self, other))
        if cluster is None:
            raise IncompatibleCombine(self.jamo, other.jamo)
        return cluster

    def components(self) -> tuple[FinalJamo, Optional[FinalJamo]]:
        """Split a cluster into (base, addendum); simple finals return (self, None)."""
        return _CLUSTER_PARTS.get(self, (self, None))


# (base, addendum) -> cluster, in table order
_CLUSTERS: Final[dict[tuple[FinalJamo, FinalJamo], FinalJamo]] = {
    (FinalJamo.G, FinalJamo.S): FinalJamo.GS,
    (FinalJamo.N, FinalJamo.J): FinalJamo.NC,
    (FinalJamo.N, FinalJamo.H): FinalJamo.NCH,
    (FinalJamo.R, FinalJamo.G): FinalJamo.LG,
    (FinalJamo.R, FinalJamo.M): FinalJamo.LM,
    (FinalJamo.R, FinalJamo.B): FinalJamo.LB,
    (FinalJamo.R, FinalJamo.S): FinalJamo.LS,
    (FinalJamo.R, FinalJamo.T): FinalJamo.LT,
    (FinalJamo.R, FinalJamo.P): FinalJamo.LPH,
    (FinalJamo.R, FinalJamo.H): FinalJamo.LH,
    (FinalJamo.B, FinalJamo.S): FinalJamo.BS,
}

_CLUSTER_PARTS: Final[dict[FinalJamo, tuple[FinalJamo, FinalJamo]]] = {
    v: k for k, v in _CLUSTERS.items()
}
