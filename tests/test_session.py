from advisor.engine import Session, Outcome, Observation, compute


def test_session_narrows_to_single_word():
    s = Session(["soare", "socko", "songs", "socks"])
    assert s.outcome is Outcome.OPEN

    assert s.observe(Observation("soare", "gg...")) is Outcome.OPEN
    assert s.candidates == ["socko", "songs", "socks"]

    assert s.observe(Observation("socko", "gg...")) is Outcome.SOLVED
    assert s.answer == "songs"
    assert len(s.history) == 2


def test_session_empty_when_feedback_is_impossible():
    s = Session(["soare", "socko", "songs", "socks"])
    assert s.observe(Observation("soare", "ggggy")) is Outcome.EMPTY
    assert s.answer is None
    assert len(s) == 0


def test_session_does_not_touch_dictionary():
    words = ["soare", "socko", "songs", "socks"]
    s = Session(words)
    s.observe(Observation("soare", compute("soare", "songs")))
    assert words == ["soare", "socko", "songs", "socks"]
