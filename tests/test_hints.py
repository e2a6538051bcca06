import pytest
from wordhints.engine import Hint, Hints, HintConflictError, UNKNOWN, make_hints


def test_key_ignores_construction_order():
    a = make_hints(fixed=[("L", 3), ("A", 0)], moving=[("P", 2), ("B", 1)],
                   required="PB", bad="NGN")
    b = make_hints(fixed=[("A", 0), ("L", 3)], moving=[("B", 1), ("P", 2), ("B", 1)],
                   required="BP", bad="GN")
    assert a == b
    assert hash(a) == hash(b)
    assert a.key() == b.key() == "A0L3|B1P2|BP|GN"


def test_key_keeps_required_multiplicity():
    assert make_hints(required="A").key() != make_hints(required="AA").key()


def test_key_distinguishes_categories():
    keys = {
        make_hints(fixed=[("A", 0)]).key(),
        make_hints(moving=[("A", 0)]).key(),
        make_hints(required="A").key(),
        make_hints(bad="A").key(),
        make_hints(moving=[("A", UNKNOWN)]).key(),
    }
    assert len(keys) == 5


def test_hint_objects_and_tuples_are_interchangeable():
    assert Hints(fixed=(Hint("A", 0),)) == make_hints(fixed=[("A", 0)])


def test_two_fixed_letters_on_one_position_conflict():
    with pytest.raises(HintConflictError):
        make_hints(fixed=[("A", 0), ("B", 0)])


def test_repeated_fixed_hint_collapses():
    assert make_hints(fixed=[("A", 0), ("A", 0)]).fixed == (Hint("A", 0),)


def test_is_empty():
    assert Hints().is_empty()
    assert not make_hints(bad="Z").is_empty()
