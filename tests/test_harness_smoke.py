import csv
import json

from advisor.rankers import create_ranker
from advisor.harness import run_case, run_batch, write_csv, write_manifest

WORDS = ["crane", "raise", "stare", "trace", "cared"]


def test_run_case_smoke():
    ranker = create_ranker("auto")
    r = run_case(ranker, "crane", dictionary=WORDS, max_turns=6, seed=42)
    assert "success" in r and "history" in r
    # Should solve within 6 in this tiny set
    assert r["success"] is True
    assert r["history"][-1] == ("crane", "ggggg")


def test_run_case_answer_outside_dictionary():
    ranker = create_ranker("letter_freq")
    r = run_case(ranker, "zzzzz", dictionary=WORDS, seed=1)
    assert r["success"] is False
    assert r["guesses"] >= 1


def test_run_batch_and_reports(tmp_path):
    ranker = create_ranker("random")
    results = run_batch(ranker, WORDS, dictionary=WORDS, seed=3, sample=3)
    assert len(results) == 3
    assert all(r["success"] for r in results)
    assert all(r["ranker_id"] == "random" for r in results)

    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"), max_turns=6)
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [row["answer"] for row in rows] == WORDS[:3]
    assert rows[0]["feedback_1"] != ""

    m_path = write_manifest({"num_cases": 3}, str(tmp_path / "m.json"))
    assert json.loads(open(m_path, encoding="utf-8").read())["num_cases"] == 3
