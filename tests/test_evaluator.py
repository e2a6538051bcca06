import itertools

import pytest
from wordhints.engine import calculate_hints, filter_candidates, merge_hints, make_hints
from wordhints.search import find_best, find_best_for, find_best_pairs, percent

WORDS = [
    "APPLE", "ANGLE", "TABLE", "CABLE", "SABLE", "FABLE", "GABLE", "MAPLE",
    "LLAMA", "CRANE", "TOAST", "SPEED",
]


def _brute_score(guess, targets, dictionary, restriction=None):
    total = 0
    for t in targets:
        h = calculate_hints(t, guess)
        if restriction is not None:
            h = merge_hints(h, restriction)
        total += len(filter_candidates(dictionary, h))
    return total


def test_find_best_scores_match_brute_force():
    records = find_best(WORDS, workers=1, top=None)
    assert len(records) == len(WORDS)
    for r in records:
        assert r.score == _brute_score(r.word, WORDS, WORDS)
    assert [r.score for r in records] == sorted(r.score for r in records)


def test_find_best_is_identical_across_worker_counts():
    one = find_best(WORDS, workers=1, top=None)
    two = find_best(WORDS, workers=2, top=None)
    assert [(r.word, r.score) for r in one] == [(r.word, r.score) for r in two]
    assert find_best(WORDS, workers=1) == find_best(WORDS, workers=1)


def test_disjoint_words_tie_in_dictionary_order():
    words = ["ABCDE", "FGHIJ", "KLMNO"]
    records = find_best(words, workers=1)
    assert [r.word for r in records] == words
    assert len({r.score for r in records}) == 1
    assert [r.index for r in records] == [0, 1, 2]


def test_target_words_win_ties_over_guess_only_words():
    targets = ["ABCDE", "FGHIJ"]
    guesses = ["VWXYZ", "ABCDE"]
    records = find_best(targets, guesses, workers=1)
    # VWXYZ learns nothing (score 4), ABCDE isolates both (score 2)
    assert [(r.word, r.score, r.list_score) for r in records] == [
        ("ABCDE", 2, 1), ("VWXYZ", 4, 0)]


def test_top_truncates():
    assert len(find_best(WORDS, workers=1, top=3)) == 3


def test_find_best_for_no_matches():
    result = find_best_for(make_hints(fixed=[("Z", 0)]), WORDS, workers=1)
    assert result.matches == [] and result.records == []
    assert result.solved is None


def test_find_best_for_single_match_skips_search():
    result = find_best_for(calculate_hints("SPEED", "SPEED"), WORDS, workers=1)
    assert result.matches == ["SPEED"]
    assert result.solved == "SPEED"
    assert result.records == []


def test_find_best_for_restricted_scores():
    hints = calculate_hints("TABLE", "ANGLE")
    result = find_best_for(hints, WORDS, workers=1, top=None)
    assert result.matches == ["TABLE", "CABLE", "SABLE", "FABLE", "MAPLE"]
    for r in result.records:
        assert r.score == _brute_score(r.word, result.matches, result.matches, hints)
        expected = 2 if r.word in result.matches else 1
        assert r.list_score == expected
    keys = [(r.score, -r.list_score) for r in result.records]
    assert keys == sorted(keys)


def test_find_best_for_is_identical_across_worker_counts():
    hints = calculate_hints("TABLE", "ANGLE")
    one = find_best_for(hints, WORDS, workers=1, top=None)
    two = find_best_for(hints, WORDS, workers=3, top=None)
    assert [(r.word, r.score) for r in one.records] == [(r.word, r.score) for r in two.records]


def test_find_best_pairs_matches_brute_force():
    words = WORDS[:6]
    expected = []
    for index, (a, b) in enumerate(itertools.combinations(words, 2)):
        score = 0
        for t in words:
            h = merge_hints(calculate_hints(t, a), calculate_hints(t, b))
            score += len(filter_candidates(words, h))
        expected.append((score, index, (a, b)))
    expected.sort()

    got = find_best_pairs(words, workers=1, top=5)
    assert [(r.score, r.index, r.words) for r in got] == expected[:5]

    got2 = find_best_pairs(words, workers=2, top=5)
    assert [(r.score, r.index, r.words) for r in got2] == expected[:5]


def test_find_best_pairs_rejects_empty_top():
    with pytest.raises(ValueError):
        find_best_pairs(WORDS, top=0)


def test_invalid_worker_count():
    with pytest.raises(ValueError):
        find_best(WORDS, workers=0)


def test_percent():
    assert percent(5, 10) == 5.0
    assert percent(0, 0) == 0.0


def test_worker_logs_counter_stats(caplog):
    from wordhints.search import evaluator
    from wordhints.search.evaluator import Record

    evaluator._init_worker(WORDS, WORDS, None)
    try:
        evaluator._score_guess(Record(0, "CRANE"))
        with caplog.at_level("DEBUG", logger="wordhints.search.counter"):
            evaluator._log_worker_stats()
    finally:
        evaluator._SCORER = None
    assert any("scans" in r.getMessage() and r.getMessage().startswith("worker ")
               for r in caplog.records)
