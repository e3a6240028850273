import pytest
from advisor.engine import compute, matches, Observation
from advisor.rankers import (
    best_by_elimination, elimination_scores, best_by_letter_frequency,
    best_by_usage_frequency, suggest, create_ranker, get_ranker_ids,
)

WORDS = ["crane", "slate", "trace", "pzazz"]


def _literal_score(guess, candidates):
    return sum(
        sum(1 for c in candidates if matches(Observation(guess, compute(guess, s)), c))
        for s in candidates
    )


def test_elimination_scores_match_definition():
    cands = ["soare", "socko", "songs", "socks", "knoll", "llama", "chalk", "balls", "blush"]
    scores = elimination_scores(cands)
    assert [int(x) for x in scores] == [_literal_score(g, cands) for g in cands]


def test_best_by_elimination_order():
    cands = ["cigar", "cigat", "cigas", "tbsxq"]
    # 'tbsxq' splits the set into four singletons (score 4); the others score 6
    assert [int(x) for x in elimination_scores(cands)] == [6, 6, 6, 4]
    assert best_by_elimination(cands) == ["tbsxq", "cigar", "cigat", "cigas"]


def test_best_by_elimination_degenerate():
    assert best_by_elimination([]) == []
    assert best_by_elimination(["knoll"]) == ["knoll"]
    assert [int(x) for x in elimination_scores(["knoll"])] == [1]


def test_best_by_elimination_does_not_mutate():
    cands = ["cigar", "cigat", "cigas", "tbsxq"]
    snapshot = list(cands)
    best_by_elimination(cands)
    assert cands == snapshot


def test_letter_frequency_global():
    assert best_by_letter_frequency(WORDS, by_position=False) == ["pzazz", "trace", "crane", "slate"]


def test_letter_frequency_positional_ties_keep_input_order():
    assert best_by_letter_frequency(WORDS, by_position=True) == ["crane", "trace", "slate", "pzazz"]


def test_letter_frequency_distinct_only():
    assert best_by_letter_frequency(WORDS, by_position=False, distinct_only=True) == \
        ["trace", "crane", "slate"]


def test_usage_frequency_missing_is_zero():
    table = {"slate": 10, "trace": 30}
    assert best_by_usage_frequency(WORDS, table) == ["trace", "slate", "crane", "pzazz"]


@pytest.mark.parametrize("fn", [
    lambda c: best_by_letter_frequency(c, by_position=True),
    lambda c: best_by_letter_frequency(c, by_position=False),
    lambda c: best_by_usage_frequency(c, {}),
])
def test_rankings_on_empty(fn):
    assert fn([]) == []


def test_suggest_under_limit():
    s = suggest(WORDS, frequencies={"crane": 5})
    assert s.remaining == 4
    assert sorted(s.by_elimination) == sorted(WORDS)
    assert s.sample == []
    assert s.by_usage[0] == "crane"
    assert s.best == s.by_elimination[0]


def test_suggest_over_limit_falls_back():
    s = suggest(WORDS, limit=2, seed=1)
    assert s.by_elimination is None
    assert sorted(s.sample) == sorted(WORDS)
    assert s.by_usage is None
    assert s.best == "crane"


def test_registry():
    ids = get_ranker_ids()
    for rid in ["auto", "elimination", "letter_freq", "letter_freq_distinct",
                "positional_freq", "random", "usage_freq"]:
        assert rid in ids
    with pytest.raises(ValueError):
        create_ranker("nope")


def test_random_ranker_is_seeded():
    a, b = create_ranker("random"), create_ranker("random")
    a.reset(seed=7)
    b.reset(seed=7)
    assert a.rank(WORDS) == b.rank(WORDS)
    assert sorted(a.rank(WORDS)) == sorted(WORDS)


def test_usage_ranker_uses_reset_table():
    r = create_ranker("usage_freq")
    r.reset(frequencies={"pzazz": 1})
    assert r.rank(WORDS)[0] == "pzazz"
