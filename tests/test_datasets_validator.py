from pathlib import Path

import pytest
from advisor.datasets import validate_wordlists, pretty_summary, read_words, read_frequencies


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    words = tmp_path / "words.txt"
    freqs = tmp_path / "freqs.txt"
    _write(words, ["crane", "raise", "stare", "trace"])
    _write(freqs, ["crane 100", "raise 50", "other 7"])

    rep = validate_wordlists(str(words), str(freqs))
    assert rep["passed"] is True
    assert rep["words"]["count"] == 4
    assert rep["frequency_coverage"] == 0.5
    s = pretty_summary(rep)
    assert "words=4" in s and "coverage=50.0%" in s and s.endswith("OK")


def test_validate_wordlists_flags_errors(tmp_path: Path):
    words = tmp_path / "words.txt"
    # 'cranes' wrong length, '???' invalid chars, 'Raise' not lowercase, 'stare' twice
    words.write_text("stare\ncranes\n???\nRaise\nstare\n", encoding="utf-8")

    rep = validate_wordlists(str(words))
    assert rep["passed"] is False
    assert rep["frequencies"] is None
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlists_missing_file(tmp_path: Path):
    rep = validate_wordlists(str(tmp_path / "nope.txt"))
    assert rep["passed"] is False
    assert rep["words"]["exists"] is False
    assert any("not found" in msg for msg in rep["issues"])
    assert "FAIL" in pretty_summary(rep)


def test_read_words_normalizes_and_skips(tmp_path: Path):
    words = tmp_path / "words.txt"
    words.write_text("Crane\n\nstare\ncranes\ncrane\n  TRACE  \n", encoding="utf-8")
    assert read_words(words) == ["crane", "stare", "trace"]


def test_read_words_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_words(tmp_path / "missing.txt")


def test_read_frequencies(tmp_path: Path):
    freqs = tmp_path / "freqs.txt"
    freqs.write_text("crane 100\nbroken line here\nSTARE 3\nnocount\n\ntrace -4\n", encoding="utf-8")
    assert read_frequencies(freqs) == {"crane": 100, "stare": 3}


def test_frequency_counts_must_be_ascii_digits(tmp_path: Path):
    words = tmp_path / "words.txt"
    freqs = tmp_path / "freqs.txt"
    _write(words, ["crane", "slate"])
    # '²' passes str.isdigit() but int() rejects it
    freqs.write_text("crane 100\nslate ²\n", encoding="utf-8")

    assert read_frequencies(freqs) == {"crane": 100}
    rep = validate_wordlists(str(words), str(freqs))
    assert rep["frequencies"]["invalid_lines"] == 1
    assert rep["frequencies"]["count"] == 1
