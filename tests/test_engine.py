import pytest
from wordhints.engine import (
    WordError, HintSyntaxError, UNKNOWN, make_hints, score, calculate_hints,
    hints_from_feedback, matches_hints, filter_candidates, validate_guess, parse_word,
    check_words,
)

WORDS = [
    "APPLE", "ANGLE", "TABLE", "PASTA", "TOAST", "CHEAP", "LLAMA", "EERIE",
    "SPEED", "ABIDE", "ALLOY", "LOYAL", "LEVEL", "BELLE", "SCOOP", "CRANE",
]


# --- feedback patterns (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("BELLE", "LEVEL", "-GYYY"),
    ("LEVEL", "LEVEL", "GGGGG"),
    ("LEMON", "LEVEL", "GG---"),
    ("COOLS", "SCOOP", "YYG-Y"),
    ("RAISE", "CRANE", "YY--G"),
    ("STARE", "crane", "--GYG"),
])
def test_score_golden(guess, answer, expected):
    assert score(guess, answer) == expected


def test_apple_angle_scenario():
    hints = calculate_hints("APPLE", "ANGLE")
    assert hints == make_hints(fixed=[("A", 0), ("L", 3), ("E", 4)], bad="NG")
    assert hints.moving == ()
    assert hints.required == ""
    assert matches_hints("APPLE", hints) is True
    assert matches_hints("TABLE", hints) is False


def test_pasta_single_a_pins_exact_count():
    # TOAST holds one A, at neither of PASTA's A positions
    hints = calculate_hints("TOAST", "PASTA")
    assert hints == make_hints(moving=[("A", 1), ("S", 2), ("T", 3)],
                               required="AST", bad="PA")
    assert hints.required.count("A") == 1
    assert "A" in hints.bad
    assert matches_hints("TOAST", hints) is True
    # two As: the second one lands on a position no obligation covers
    assert matches_hints("ASTRA", hints) is False


def test_fixed_and_bad_same_letter():
    # guess has two Es, target one: one E is fixed, the other is bad
    hints = calculate_hints("ABIDE", "EERIE")
    assert ("E", 4) in [(h.letter, h.index) for h in hints.fixed]
    assert "E" in hints.bad
    assert "E" not in hints.required
    assert matches_hints("ABIDE", hints)
    assert not matches_hints("EBIDE", hints)


def test_hints_from_feedback_agrees_with_calculate_hints():
    for t in WORDS:
        for g in WORDS:
            assert hints_from_feedback(g, score(g, t)) == calculate_hints(t, g)


def test_hints_from_feedback_rejects_bad_pattern():
    with pytest.raises(HintSyntaxError):
        hints_from_feedback("CRANE", "GGXGG")
    with pytest.raises(WordError):
        hints_from_feedback("CRANE", "GGG")


def test_calculate_hints_length_mismatch():
    with pytest.raises(WordError):
        calculate_hints("CRANE", "CRANES")


def test_soundness_target_matches_own_hints():
    for t in WORDS:
        for g in WORDS:
            assert matches_hints(t, calculate_hints(t, g)), (t, g)


def test_matches_respect_fixed_and_moving_positions():
    for g in WORDS:
        for t1 in WORDS:
            h1 = calculate_hints(t1, g)
            for w in WORDS:
                if not matches_hints(w, h1):
                    continue
                for h in h1.fixed:
                    assert w[h.index] == h.letter, (w, g, t1)
                for h in h1.moving:
                    if h.index != UNKNOWN:
                        assert w[h.index] != h.letter, (w, g, t1)
                if calculate_hints(w, g).key() == h1.key():
                    assert matches_hints(t1, calculate_hints(w, g))


def test_unknown_moving_position_only_requires_letter():
    hints = make_hints(moving=[("A", UNKNOWN)], required="A")
    assert matches_hints("APPLE", hints)
    assert not matches_hints("SCOOP", hints)


def test_required_occurrences_need_distinct_positions():
    hints = make_hints(required="LL")
    assert matches_hints("LLAMA", hints)
    assert not matches_hints("ANGLE", hints)
    # the fixed L cannot double as a required one
    assert not matches_hints("ANGLE", make_hints(fixed=[("L", 3)], required="L"))


def test_filter_candidates_preserves_order():
    hints = calculate_hints("CRANE", "RAISE")
    cand = filter_candidates(WORDS, hints)
    assert "CRANE" in cand and "SCOOP" not in cand
    assert cand == [w for w in WORDS if w in cand]


def test_validate_guess():
    allowed = ["CRANE", "RAISE", "STARE"]
    assert validate_guess("crane", allowed, N=5) is True
    assert validate_guess("CRANES", allowed, N=5) is False
    assert validate_guess("???", allowed, N=5) is False


def test_parse_word():
    assert parse_word(" crane ") == "CRANE"
    with pytest.raises(WordError):
        parse_word("cran3")


def test_check_words_contract():
    assert check_words(["CRANE", "SLATE"]) == ["CRANE", "SLATE"]
    with pytest.raises(WordError):
        check_words(["CRANE", "slate"])
    with pytest.raises(WordError):
        check_words(["CRANE", "SLATES"])
    with pytest.raises(WordError):
        check_words(["CRANE"], N=6)
