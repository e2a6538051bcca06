import pytest
from wordhints.engine import (
    HintConflictError, calculate_hints, make_hints, matches_hints, merge_hints,
)

WORDS = [
    "APPLE", "ANGLE", "TABLE", "PASTA", "TOAST", "CHEAP", "LLAMA", "EERIE",
    "SPEED", "ABIDE", "ALLOY", "LOYAL",
]


def test_merge_is_exactly_both_constraints():
    for t in WORDS:
        for g1 in WORDS:
            a = calculate_hints(t, g1)
            for g2 in WORDS:
                b = calculate_hints(t, g2)
                m = merge_hints(a, b)
                for w in WORDS:
                    assert matches_hints(w, m) == (matches_hints(w, a) and matches_hints(w, b)), \
                        (t, g1, g2, w)


def test_toast_then_pasta():
    # CHEAP has one A, at position 4 (1-based)
    a = calculate_hints("CHEAP", "TOAST")
    b = calculate_hints("CHEAP", "PASTA")
    m = merge_hints(a, b)
    assert m == make_hints(moving=[("A", 2), ("A", 1), ("P", 0)],
                           required="AP", bad="OSTA")
    assert m.key() == "|P0A1A2|AP|AOST"


def test_required_uses_max_not_sum():
    a = make_hints(moving=[("L", 0)], required="L")
    b = make_hints(moving=[("L", 1)], required="L")
    assert merge_hints(a, b).required == "L"


def test_fixed_occurrences_not_double_counted():
    a = make_hints(moving=[("L", 0)], required="L")
    b = make_hints(fixed=[("L", 3)])
    m = merge_hints(a, b)
    assert m.required == ""
    assert matches_hints("ANGLE", m)
    # a's lower bound on total Ls is kept when b fixes a different letter
    m2 = merge_hints(a, make_hints(fixed=[("A", 0)]))
    assert m2.required == "L"


def test_merge_is_symmetric():
    a = calculate_hints("LLAMA", "ALLOY")
    b = calculate_hints("LLAMA", "LOYAL")
    assert merge_hints(a, b) == merge_hints(b, a)


def test_fixed_disagreement_raises():
    with pytest.raises(HintConflictError):
        merge_hints(make_hints(fixed=[("A", 0)]), make_hints(fixed=[("B", 0)]))


def test_contradictory_counts_raise():
    exactly_one = make_hints(moving=[("A", 1)], required="A", bad="A")
    at_least_two = make_hints(required="AA")
    with pytest.raises(HintConflictError):
        merge_hints(exactly_one, at_least_two)
