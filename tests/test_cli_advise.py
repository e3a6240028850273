from apps.cli.advise import play, main
from advisor.engine import Session, Outcome


def _feed(lines):
    it = iter(lines)

    def _input(_prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return _input


def test_play_solves(capsys):
    session = Session(["soare", "socko", "songs", "socks"])
    outcome = play(session, input_fn=_feed([
        "cr",        # not five letters
        "zzzzz",     # not in the word list
        "soare", "gg",  # bad feedback format
        "SOARE", "GG...",
        "socko", "gg...",
    ]))
    assert outcome is Outcome.SOLVED
    out = capsys.readouterr().out
    assert "There are 4 possible words left" in out
    assert "not a five-letter word" in out
    assert "not in the word list" in out
    assert "doesn't match the format" in out
    assert "You win! The word is songs" in out


def test_play_reports_empty(capsys):
    session = Session(["soare", "socko", "songs", "socks"])
    outcome = play(session, input_fn=_feed(["soare", "ggggy"]))
    assert outcome is Outcome.EMPTY
    assert "No words remaining" in capsys.readouterr().out


def test_play_stops_at_end_of_input():
    session = Session(["soare", "socko", "songs", "socks"])
    assert play(session, input_fn=_feed([])) is Outcome.OPEN


def test_play_over_limit_shows_sample(capsys):
    session = Session(["soare", "socko", "songs", "socks"])
    play(session, limit=2, seed=5, input_fn=_feed([]))
    assert "too many to brute force" in capsys.readouterr().out


def test_main_missing_word_list(tmp_path, capsys):
    assert main(["--words", str(tmp_path / "missing.txt")]) == 1
    assert "Word list not found" in capsys.readouterr().err
