import pytest

from hangul_rr.controllers import ComposerController, SubmitError
from hangul_rr.domain.hangul import Hangul
from hangul_rr.domain.jamo import Jamo
from hangul_rr.services.vocabulary_log import VocabularyLog


@pytest.fixture
def composer(parser):
    return ComposerController(parser)


def test_set_rr_builds_current_syllable(composer):
    composer.set_rr("gan")
    assert composer.display() == "간"
    assert composer.overflow == ""
    assert composer.is_empty()


def test_set_rr_keeps_overflow(composer):
    composer.set_rr("gaga")
    assert str(composer.syllable) == "각"
    assert composer.overflow == "a"


def test_push_commits_and_reparses_overflow(composer):
    composer.set_rr("gaga")
    assert composer.push() == "a"

    assert str(composer.hangul) == "각"
    assert str(composer.syllable) == "아"
    assert composer.display() == "각아"
    assert not composer.is_empty()


def test_push_with_empty_input_commits_nothing(composer):
    composer.set_rr("")
    assert composer.push() == ""
    assert len(composer.hangul) == 0


def test_pop_removes_from_committed_hangul(composer):
    composer.set_rr("han")
    composer.push()
    composer.set_rr("gug")
    composer.push()
    assert composer.display() == "한국"

    assert composer.pop() is Jamo.G
    assert composer.display() == "한구"
    assert composer.pop() is Jamo.U
    assert composer.pop() is Jamo.G
    assert composer.display() == "한"


def test_pop_on_nothing(composer):
    assert composer.pop() is None


def test_combinations(composer):
    composer.set_rr("go")
    assert composer.combinations() == [("ㅏ", "a"), ("ㅐ", "ae"), ("ㅣ", "i")]

    composer.set_rr("gar")
    pairs = composer.combinations()
    assert len(pairs) == 7
    assert pairs[0] == ("ㄱ", "g")

    composer.set_rr("ga")
    assert composer.combinations() == []

    composer.set_rr("")
    assert composer.combinations() == []


def test_possible(composer):
    assert len(composer.possible()) == 19 + 21
    composer.set_rr("g")
    assert composer.possible() == Jamo.all_medial()


def test_submit_requires_hangul(composer):
    with pytest.raises(SubmitError, match="Hangul field is empty!"):
        composer.submit("something", VocabularyLog())


def test_submit_requires_description(composer):
    composer.set_rr("mur")
    composer.push()
    with pytest.raises(SubmitError, match="Description field is empty!"):
        composer.submit("   ", VocabularyLog())
    assert composer.display() == "물"


def test_submit_inserts_and_clears(composer):
    log = VocabularyLog()
    composer.set_rr("mur")
    composer.push()

    word = composer.submit(" water ", log)
    assert word == Hangul.from_str("물")
    assert log.entries() == [(Hangul.from_str("물"), "water")]
    assert composer.display() == ""
    assert composer.is_empty()


def test_clear(composer):
    composer.set_rr("gaga")
    composer.push()
    composer.clear()
    assert composer.display() == ""
    assert composer.overflow == ""


def _log_with(*pairs):
    log = VocabularyLog()
    for text, description in pairs:
        log.insert_entry(Hangul.from_str(text), description)
    return log


def test_word_includes_syllable_being_typed(composer):
    composer.set_rr("han")
    composer.push()
    composer.set_rr("gug")
    assert str(composer.word()) == "한국"
    assert str(composer.hangul) == "한"


def test_find_moves_log_cursor(composer):
    log = _log_with(("가방", "bag"), ("물", "water"), ("한국", "Korea"))
    composer.set_rr("mur")

    word, found = composer.find(log)
    assert found
    assert word == Hangul.from_str("물")
    assert log.current_entry() == (Hangul.from_str("물"), "water")
    assert composer.display() == ""


def test_find_missing_word_keeps_cursor(composer):
    log = _log_with(("가방", "bag"), ("물", "water"))
    log.select(1)
    composer.set_rr("na")

    word, found = composer.find(log)
    assert not found
    assert str(word) == "나"
    assert log.index == 1


def test_delete_removes_entry(composer):
    log = _log_with(("가방", "bag"), ("물", "water"))
    composer.set_rr("mur")

    word, removed = composer.delete(log)
    assert removed == (Hangul.from_str("물"), "water")
    assert log.entries() == [(Hangul.from_str("가방"), "bag")]
    assert composer.display() == ""

    composer.set_rr("mur")
    assert composer.delete(log) == (Hangul.from_str("물"), None)


def test_find_and_delete_require_hangul(composer):
    log = _log_with(("물", "water"))
    with pytest.raises(SubmitError, match="Hangul field is empty!"):
        composer.find(log)
    with pytest.raises(SubmitError, match="Hangul field is empty!"):
        composer.delete(log)
    assert len(log) == 1
