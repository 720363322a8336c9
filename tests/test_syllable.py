import itertools

import pytest

from hangul_rr.domain.errors import (
    ExpectedInitialOrMedial,
    ExpectedMedial,
    HangulError,
    IncompatibleCombine,
    SyllableError,
    UnexpectedJamo,
)
from hangul_rr.domain.jamo import FinalJamo, InitialJamo, Jamo, MedialJamo
from hangul_rr.domain.syllable import Syllable, SyllableState


def _build(*jamo):
    syl = Syllable()
    for j in jamo:
        assert syl.push(j) is None
    return syl


def _fields(syl):
    return syl.initial, syl.medial, syl.final


ALL_SYLLABLES = [
    Syllable(i, m, f)
    for i, m, f in itertools.product(InitialJamo, MedialJamo, [None, *FinalJamo])
]


def test_g_a_g_builds_gag():
    syl = Syllable()
    assert str(syl) == ""

    assert syl.push(Jamo.G) is None
    assert str(syl) == "ㄱ"
    assert syl.state() is SyllableState.MEDIAL

    assert syl.push(Jamo.A) is None
    assert str(syl) == "가"

    assert syl.push(Jamo.G) is None
    assert str(syl) == "각"
    assert syl.final is FinalJamo.G


def test_vowel_first_gets_silent_initial():
    syl = _build(Jamo.A)
    assert syl.initial is InitialJamo.SILENT
    assert str(syl) == "아"


def test_a_o_o_overflows_twice():
    syl = _build(Jamo.A)

    overflow = syl.push(Jamo.O)
    assert str(syl) == "아"
    assert overflow is not None and str(overflow) == "오"

    second = overflow.push(Jamo.O)
    assert str(overflow) == "오"
    assert second is not None and str(second) == "오"


def test_wide_vowel_combines_in_writing_order():
    syl = _build(Jamo.G, Jamo.O)
    assert syl.state() is SyllableState.OPEN
    assert syl.push(Jamo.A) is None
    assert str(syl) == "과"


def test_states():
    assert Syllable().state() is SyllableState.START
    assert _build(Jamo.G).state() is SyllableState.MEDIAL
    assert _build(Jamo.G, Jamo.O).state() is SyllableState.OPEN
    assert _build(Jamo.G, Jamo.A).state() is SyllableState.OPEN_FINAL
    assert _build(Jamo.G, Jamo.A, Jamo.R).state() is SyllableState.OPEN_FINAL
    assert _build(Jamo.G, Jamo.A, Jamo.M).state() is SyllableState.END
    assert _build(Jamo.G, Jamo.A, Jamo.R, Jamo.G).state() is SyllableState.END


def test_final_cluster_then_overflow():
    syl = _build(Jamo.D, Jamo.A, Jamo.R, Jamo.G)
    assert syl.final is FinalJamo.LG

    overflow = syl.push(Jamo.N)
    assert str(syl) == "닭"
    assert str(overflow) == "ㄴ"


def test_final_does_not_migrate_to_next_syllable():
    syl = _build(Jamo.G, Jamo.A, Jamo.N)
    overflow = syl.push(Jamo.A)
    assert str(syl) == "간"
    assert str(overflow) == "아"


def test_codepoint_formula():
    for syl in ALL_SYLLABLES:
        fin = syl.final.id() if syl.final is not None else 0
        expected = 0xAC00 + syl.initial.id() * 588 + syl.medial.id() * 28 + fin
        assert syl.codepoint() == expected
        assert 0xAC00 <= expected <= 0xD7A3


def test_from_char_inverts_display():
    for syl in ALL_SYLLABLES:
        assert _fields(Syllable.from_char(str(syl))) == _fields(syl)

    lone = Syllable.from_char("ㄲ")
    assert _fields(lone) == (InitialJamo.GG, None, None)


@pytest.mark.parametrize("ch, exc", [("a", HangulError), ("ㅏ", UnexpectedJamo), ("ㄳ", UnexpectedJamo), ("가나", HangulError)])
def test_from_char_rejects(ch, exc):
    with pytest.raises(exc):
        Syllable.from_char(ch)


def test_pop_then_push_reversed_restores_syllable():
    for syl in ALL_SYLLABLES:
        work = syl.copy()
        popped = []
        while True:
            j = work.pop()
            if j is None:
                break
            popped.append(j)
        assert work.is_empty()

        rebuilt = _build(*reversed(popped))
        assert _fields(rebuilt) == _fields(syl)


def test_pop_splits_clusters_and_diphthongs():
    syl = _build(Jamo.G, Jamo.O, Jamo.A, Jamo.R, Jamo.G)
    assert str(syl) == "괅"
    assert [syl.pop() for _ in range(6)] == [Jamo.G, Jamo.R, Jamo.A, Jamo.O, Jamo.G, None]


SAMPLES = [
    Syllable(),
    _build(Jamo.G),
    _build(Jamo.G, Jamo.O),
    _build(Jamo.G, Jamo.A),
    _build(Jamo.G, Jamo.A, Jamo.R),
    _build(Jamo.G, Jamo.A, Jamo.N),
    _build(Jamo.G, Jamo.A, Jamo.G, Jamo.S),
    _build(Jamo.G, Jamo.WA),
]


@pytest.mark.parametrize("syl", SAMPLES, ids=lambda s: str(s) or "empty")
def test_possible_is_exactly_what_push_absorbs(syl):
    possible = set(syl.possible())
    for j in Jamo:
        work = syl.copy()
        if j in possible:
            assert work.push(j) is None, j
            continue
        try:
            overflow = work.push(j)
        except HangulError:
            overflow = None
        else:
            assert overflow is not None, j
        # rejected jamo never change the syllable
        assert _fields(work) == _fields(syl)


def test_push_errors():
    with pytest.raises(ExpectedInitialOrMedial):
        Syllable().push(Jamo.GS)
    with pytest.raises(ExpectedMedial):
        _build(Jamo.G).push(Jamo.N)
    with pytest.raises(ExpectedInitialOrMedial):
        _build(Jamo.G, Jamo.A, Jamo.M).push(Jamo.GS)
    with pytest.raises(IncompatibleCombine):
        _build(Jamo.G, Jamo.A, Jamo.R).push(Jamo.GS)


def test_push_error_leaves_syllable_unchanged():
    syl = _build(Jamo.G, Jamo.A, Jamo.R)
    with pytest.raises(HangulError):
        syl.push(Jamo.GS)
    assert _fields(syl) == (InitialJamo.G, MedialJamo.A, FinalJamo.R)


def test_from_jamo():
    assert str(Syllable.from_jamo(Jamo.H)) == "ㅎ"
    assert str(Syllable.from_jamo(Jamo.EU)) == "으"
    with pytest.raises(ExpectedInitialOrMedial):
        Syllable.from_jamo(Jamo.LH)


def test_invalid_combinations_are_rejected():
    with pytest.raises(SyllableError):
        Syllable(medial=MedialJamo.A)
    with pytest.raises(SyllableError):
        Syllable(InitialJamo.G, final=FinalJamo.G)


def test_ordering_and_hash_follow_display():
    ga = Syllable(InitialJamo.G, MedialJamo.A)
    gag = Syllable(InitialJamo.G, MedialJamo.A, FinalJamo.G)
    na = Syllable(InitialJamo.N, MedialJamo.A)

    assert sorted([na, gag, ga]) == [ga, gag, na]
    assert Syllable.from_jamo(Jamo.A) == Syllable(InitialJamo.SILENT, MedialJamo.A)
    assert len({ga, ga.copy(), gag}) == 2


def test_open_syllable_offers_diphthong_followers_and_finals():
    syl = _build(Jamo.G, Jamo.U)
    assert syl.state() is SyllableState.OPEN
    assert syl.possible() == [Jamo.EO, Jamo.E, Jamo.I] + Jamo.all_final()

    assert syl.push(Jamo.EO) is None
    assert syl.medial is MedialJamo.WO
    assert syl.state() is SyllableState.OPEN_FINAL
