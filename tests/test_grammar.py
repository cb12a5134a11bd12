# File: tests/test_grammar.py
"""
Test grammar expansion (mini_arbor.grammar).

WHY THESE TESTS?
---------------
Every tree starts as an expanded string. If expansion is wrong or
non-deterministic, branch ids shift between rebuilds and pruning records
point at the wrong branches.
"""

import pytest

from mini_arbor.grammar import expand, expanded_length
from mini_arbor.catalog import SPECIES


def test_growth_example():
    """
    The textbook bracketed grammar F -> F[+F]F, one and two generations.
    """
    rules = {"F": "F[+F]F"}

    assert expand("F", rules, 1) == "F[+F]F"
    assert expand("F", rules, 2) == "F[+F]F[+F[+F]F]F[+F]F"

    print("✓ Growth example matches")


def test_zero_iterations_returns_axiom():
    rules = {"F": "FF", "X": "F[+X]"}
    for axiom in ["", "F", "X+F", "[F]-X"]:
        assert expand(axiom, rules, 0) == axiom


def test_expansion_is_deterministic():
    """
    Same inputs must give byte-identical output on every call.
    """
    rules = {"X": "F[+X]F[-X]+X", "F": "FF"}
    first = expand("X", rules, 4)
    for _ in range(5):
        assert expand("X", rules, 4) == first


def test_unknown_symbols_are_terminal():
    """
    Symbols without a rule are copied unchanged, never an error.
    """
    assert expand("AXB", {"X": "YY"}, 1) == "AYYB"
    assert expand("AXB", {"X": "YY"}, 3) == "AYYB"
    assert expand("Q", {}, 5) == "Q"


def test_empty_axiom():
    assert expand("", {"F": "FF"}, 3) == ""


def test_empty_replacement_deletes_symbol():
    """
    A rule mapping to "" removes the symbol in the next generation.
    """
    assert expand("FXF", {"X": ""}, 1) == "FF"


def test_rules_apply_in_parallel():
    """
    Each pass rewrites the string of the previous pass, not its own output.
    A -> B and B -> A swap every generation.
    """
    rules = {"A": "B", "B": "A"}
    assert expand("AB", rules, 1) == "BA"
    assert expand("AB", rules, 2) == "AB"


@pytest.mark.parametrize("bad", [-1, -10])
def test_negative_iterations_rejected(bad):
    with pytest.raises(ValueError):
        expand("F", {"F": "FF"}, bad)
    with pytest.raises(ValueError):
        expanded_length("F", {"F": "FF"}, bad)


@pytest.mark.parametrize("bad", [1.5, "3", None, True])
def test_non_integer_iterations_rejected(bad):
    with pytest.raises(ValueError):
        expand("F", {"F": "FF"}, bad)


def test_expanded_length_matches_expand():
    """
    The counting shortcut must agree with the real expansion for every
    catalog grammar at small iteration counts.
    """
    for species in SPECIES:
        for n in range(4):
            expected = len(expand(species.axiom, species.rules, n))
            assert expanded_length(species.axiom, species.rules, n) == expected, \
                f"{species.id} at {n} iterations"

    print("✓ expanded_length agrees with expand for all species")


def test_expanded_length_known_values():
    rules = {"F": "F[+F]F"}
    assert expanded_length("F", rules, 0) == 1
    assert expanded_length("F", rules, 1) == 6
    assert expanded_length("F", rules, 2) == 21
    # F -> FF doubles every generation
    assert expanded_length("F", {"F": "FF"}, 20) == 2 ** 20
