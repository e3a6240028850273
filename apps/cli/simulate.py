# apps/cli/simulate.py
"""
Batch simulation: play the advisor against known answers.

This script:
  1) Validates the dictionary (and frequency table) and prints a summary.
  2) Instantiates the requested ranker and picks the answers to play.
  3) Plays each game with a live progress indicator and writes:
       - CSV:  per-case results + guess/feedback history columns
       - JSON: manifest with config, wordlist hashes, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import Sequence

from tqdm import tqdm

from advisor.datasets import validate_wordlists, pretty_summary, read_words, read_frequencies
from advisor.harness import run_case, MAX_TURNS
from advisor.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from advisor.rankers import create_ranker, get_ranker_ids


def main(argv: Sequence[str] | None = None) -> int:
    """
    Parse CLI args, validate datasets, run the batch with progress, and write outputs.
    """
    ranker_choices = ", ".join(get_ranker_ids())

    ap = argparse.ArgumentParser(description="wordle-advisor: simulate games against known answers")
    ap.add_argument("--ranker", default="auto", help=f"ranker id (one of: {ranker_choices})")
    ap.add_argument("--words", default="words.txt", help="dictionary (starting candidate set)")
    ap.add_argument("--answers", help="answers to play (default: the whole dictionary)")
    ap.add_argument("--frequencies", help="optional usage-frequency table")
    ap.add_argument("--sample", type=int, help="play only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--max-turns", type=int, default=MAX_TURNS)
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 1) Validate and print a one-liner summary
    rep = validate_wordlists(args.words, args.frequencies)
    print(pretty_summary(rep))
    if not rep["words"]["exists"]:
        print("\n".join(rep["issues"]), file=sys.stderr)
        return 1

    # 2) Load lists
    try:
        words = read_words(args.words)
        answers = read_words(args.answers) if args.answers else list(words)
        frequencies = read_frequencies(args.frequencies) if args.frequencies else None
    except FileNotFoundError as e:
        print(f"Word list not found: {e}", file=sys.stderr)
        return 1

    try:
        ranker = create_ranker(args.ranker)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 1

    # 3) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(answers):
        pool = list(answers)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(answers)
    total = len(cases)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0
    iterator = tqdm(cases, ncols=80, desc=ranker.id, unit="game") if mode == "bar" else cases

    # 4) Run batch with live progress
    for idx, ans in enumerate(iterator, 1):
        r = run_case(ranker, ans, dictionary=words, frequencies=frequencies,
                     max_turns=args.max_turns, seed=args.seed + idx)
        r["ranker_id"] = ranker.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_turns)
    solved = [r for r in results if r["success"]]
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(results),
        "solved": len(solved),
        "mean_guesses": (sum(r["guesses"] for r in solved) / len(solved)) if solved else None,
        "ranker_id": ranker.id,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Solved {len(solved)}/{len(results)}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
