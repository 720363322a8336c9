import pytest

from hangul_rr.domain.errors import ExpectedInitialOrMedial, HangulError
from hangul_rr.domain.hangul import Hangul
from hangul_rr.domain.jamo import Jamo


def test_push_back_creates_first_syllable():
    h = Hangul()
    assert len(h) == 0
    assert h.is_empty()

    h.push_back(Jamo.G)
    assert len(h) == 1
    assert str(h) == "ㄱ"


def test_push_back_appends_overflow():
    h = Hangul.from_jamo([Jamo.A, Jamo.O, Jamo.O])
    assert str(h) == "아오오"
    assert len(h) == 3


def test_push_back_error_propagates():
    h = Hangul()
    with pytest.raises(ExpectedInitialOrMedial):
        h.push_back(Jamo.GS)


def test_break_with_starts_new_syllable():
    h = Hangul.from_jamo([Jamo.G, Jamo.A])
    h.break_with(Jamo.G)
    assert str(h) == "가ㄱ"
    assert len(h) == 2

    # without the break the consonant would have become a final
    h2 = Hangul.from_jamo([Jamo.G, Jamo.A])
    h2.push_back(Jamo.G)
    assert str(h2) == "각"


def test_break_with_replaces_empty_syllable():
    h = Hangul()
    h.push_back(Jamo.G)
    h.pop_back()
    assert len(h) == 1

    h.break_with(Jamo.A)
    assert len(h) == 1
    assert str(h) == "아"


def test_break_with_final_only_jamo_raises():
    h = Hangul.from_jamo([Jamo.G, Jamo.A])
    with pytest.raises(ExpectedInitialOrMedial):
        h.break_with(Jamo.GS)
    assert str(h) == "가"


def test_pop_back_walks_back_through_syllables():
    h = Hangul.from_jamo([Jamo.G, Jamo.A, Jamo.N, Jamo.A])
    assert str(h) == "간아"

    assert h.pop_back() is Jamo.A
    assert str(h) == "간ㅇ"
    assert h.pop_back() is Jamo.SILENT
    assert str(h) == "간"
    assert len(h) == 1
    assert h.pop_back() is Jamo.N
    assert h.pop_back() is Jamo.A
    assert h.pop_back() is Jamo.G

    # the sole syllable stays, empty
    assert len(h) == 1
    assert str(h) == ""
    assert h.is_empty()
    assert h.pop_back() is None


def test_pop_back_on_empty():
    assert Hangul().pop_back() is None


def test_append_and_last():
    h = Hangul.from_str("가")
    h.append(Hangul.from_str("나")[0])
    assert str(h) == "가나"
    assert str(h.last()) == "나"
    assert Hangul().last() is None


@pytest.mark.parametrize("text", ["한국어", "ㄱ", "닭고기", "가ㄴ", ""])
def test_from_str_round_trip(text):
    h = Hangul.from_str(text)
    assert str(h) == text
    assert len(h) == len(text)
    assert Hangul.from_str(str(h)) == h


@pytest.mark.parametrize("text", ["abc", "가a", "ㅏ"])
def test_from_str_rejects(text):
    with pytest.raises(HangulError):
        Hangul.from_str(text)


def test_copy_is_independent():
    h = Hangul.from_str("각")
    c = h.copy()
    c.pop_back()
    assert str(h) == "각"
    assert str(c) == "가"


def test_clear():
    h = Hangul.from_str("한국")
    h.clear()
    assert len(h) == 0
    assert str(h) == ""


def test_ordering_and_hash():
    words = [Hangul.from_str(t) for t in ("나무", "가방", "가")]
    assert [str(w) for w in sorted(words)] == ["가", "가방", "나무"]
    assert Hangul.from_str("갑아") == Hangul.from_jamo([Jamo.G, Jamo.A, Jamo.B, Jamo.A])
    assert len({Hangul.from_str("가"), Hangul.from_jamo([Jamo.G, Jamo.A])}) == 1
    assert repr(Hangul.from_str("가")) == "Hangul('가')"
