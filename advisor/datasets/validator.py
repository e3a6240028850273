"""
Dataset validator for the advisor.

What this module does:
- Validate a dictionary file (one lowercase 5-letter word per line) and,
  optionally, a usage-frequency file (`word count` per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Report how many dictionary words have a usage frequency.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from advisor.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("words.txt", "frequencies.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple
import hashlib

from advisor.engine.validation import is_word
from .io import is_count


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID entries after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid entries (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (words, frequencies) pair."""
    words: FileReport
    frequencies: Optional[FileReport]
    frequency_coverage: float   # share of dictionary words with a frequency entry
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check_words(path: Path) -> Tuple[List[str], int]:
    """
    Rules:
      - one token per line
      - must be lowercase a-z, exactly 5 letters
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and is_word(w):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _load_and_check_frequencies(path: Path) -> Tuple[List[str], int]:
    """
    Rules:
      - `word count`, whitespace separated
      - count is a non-negative integer

    Returns:
      (words_with_counts, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            parts = raw.split()
            if len(parts) == 2 and is_count(parts[1]):
                valid.append(parts[0].lower())
            else:
                invalid += 1

    return valid, invalid


def _file_report(path: Path, valid: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(valid),
        sha256=_sha256_file(path),
        unique_count=len(set(valid)),
        invalid_lines=invalid,
    )


def _missing(path: str) -> FileReport:
    return FileReport(path, False, 0, "", 0, 0)


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(words_path: str, frequencies_path: str | None = None) -> Dict:
    """
    Validate the dictionary (and optional frequency table).

    Parameters
    ----------
    words_path : str
        Path to the dictionary (one word per line).
    frequencies_path : str, optional
        Path to a `word count` usage-frequency file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid flags
          - frequency coverage of the dictionary
          - `passed` boolean (strict: non-empty dictionary with no invalid lines)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    words_p = Path(words_path)
    freq_p = Path(frequencies_path) if frequencies_path else None

    if not words_p.exists():
        issues.append(f"words file not found: {words_path}")
        freq_rep = None
        if freq_p is not None:
            freq_rep = _missing(frequencies_path)
            if not freq_p.exists():
                issues.append(f"frequencies file not found: {frequencies_path}")
        rep = ValidationReport(_missing(words_path), freq_rep, 0.0, False, issues)
        return asdict(rep)

    words, words_invalid = _load_and_check_words(words_p)
    words_rep = _file_report(words_p, words, words_invalid)

    if words_rep.count == 0:
        issues.append("words file contains 0 valid words")
    if words_invalid:
        issues.append(f"words has {words_invalid} invalid line(s)")
    if words_rep.count != words_rep.unique_count:
        issues.append("words contains duplicate lines")

    freq_rep: Optional[FileReport] = None
    coverage = 0.0
    freq_ok = True
    if freq_p is not None:
        if not freq_p.exists():
            issues.append(f"frequencies file not found: {frequencies_path}")
            freq_rep = _missing(frequencies_path)
            freq_ok = False
        else:
            freq_words, freq_invalid = _load_and_check_frequencies(freq_p)
            freq_rep = _file_report(freq_p, freq_words, freq_invalid)
            if freq_invalid:
                # Not fatal: the reader skips them and missing words count as 0.
                issues.append(f"frequencies has {freq_invalid} invalid line(s)")
            known: Set[str] = set(freq_words)
            unique_words = set(words)
            if unique_words:
                coverage = len(unique_words & known) / len(unique_words)

    passed = words_rep.count > 0 and words_invalid == 0 and freq_ok

    rep = ValidationReport(
        words=words_rep,
        frequencies=freq_rep,
        frequency_coverage=round(coverage, 4),
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=12972 (uniq=12972, sha=abc123...) | frequencies=9041 (coverage=69.7%) | OK
    """
    w = report["words"]
    f = report.get("frequencies")
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    w_sha = (w.get("sha256") or "")[:12]
    parts = [f"words={w['count']} (uniq={w['unique_count']}, sha={w_sha})"]
    if f is not None:
        parts.append(f"frequencies={f['count']} (coverage={100.0 * report['frequency_coverage']:.1f}%)")
    parts.append(status)
    return " | ".join(parts)
