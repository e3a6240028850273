from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, Iterable, List

from advisor.engine.validation import is_word

log = logging.getLogger(__name__)


def is_count(text: str) -> bool:
    """True if `text` is a non-negative integer written in ASCII digits."""
    return text.isascii() and text.isdecimal()


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def read_words(p: Path | str) -> List[str]:
    """
    Read a newline-separated dictionary: lowercase, drop blanks, skip anything
    that is not a 5-letter word, drop repeats (first occurrence wins).
    """
    words: List[str] = []
    seen = set()
    skipped = 0
    for ln in read_lines(p):
        w = ln.strip().lower()
        if not w:
            continue
        if not is_word(w):
            skipped += 1
            continue
        if w not in seen:
            seen.add(w)
            words.append(w)
    if skipped:
        log.warning("%s: skipped %d line(s) that are not 5-letter words", p, skipped)
    log.info("Read %d words from %s", len(words), p)
    return words


def read_frequencies(p: Path | str) -> Dict[str, int]:
    """
    Read a usage-frequency table with one `word count` pair per line.
    Lines that don't split into a word and a non-negative integer are skipped.
    """
    table: Dict[str, int] = {}
    skipped = 0
    for ln in read_lines(p):
        parts = ln.split()
        if not parts:
            continue
        if len(parts) != 2 or not is_count(parts[1]):
            skipped += 1
            continue
        table[parts[0].lower()] = int(parts[1])
    if skipped:
        log.warning("%s: skipped %d malformed frequency line(s)", p, skipped)
    log.info("Read %d word frequencies from %s", len(table), p)
    return table
