# File: tests/test_catalog.py
"""
Test the species catalog (mini_arbor.catalog).
"""

import pytest

from mini_arbor.catalog import (
    Species,
    SPECIES,
    DEFAULT_SPECIES,
    get_species,
    list_species,
    UnknownSpeciesError,
)
from mini_arbor.config import CONFIG
from mini_arbor.turtle import interpret
from mini_arbor.tree import tree_stats


def test_species_ids_unique():
    ids = [s.id for s in SPECIES]
    assert len(ids) == len(set(ids))
    assert [s.id for s in list_species()] == ids
    assert DEFAULT_SPECIES is SPECIES[0]


def test_get_species():
    for s in SPECIES:
        assert get_species(s.id) is s


def test_unknown_species():
    with pytest.raises(UnknownSpeciesError):
        get_species("baobab")
    # Also catchable as a plain KeyError
    with pytest.raises(KeyError):
        get_species("baobab")


def test_species_is_frozen():
    with pytest.raises(Exception):  # dataclasses.FrozenInstanceError
        DEFAULT_SPECIES.default_angle = 90.0


def test_defaults_within_config_ranges():
    """
    Selecting a species must never put the simulation out of range.
    """
    lo_a, hi_a = CONFIG.angle_range
    lo_s, hi_s = CONFIG.step_range
    for s in SPECIES:
        assert lo_a <= s.default_angle <= hi_a, s.id
        assert lo_s <= s.default_step <= hi_s, s.id


def test_every_species_grows():
    for s in SPECIES:
        stats = tree_stats(s.grow(2))
        assert stats['n_segments'] > 0, s.id

    print("✓ All catalog species produce a tree")


def test_grow_uses_species_defaults():
    s = get_species("apple")
    expected = interpret(s.symbols(2), s.default_angle, s.default_step)
    assert s.grow(2) == expected

    custom = interpret(s.symbols(2), 15.0, 0.5)
    assert s.grow(2, angle=15.0, step=0.5) == custom


def test_to_dict_round_trip():
    s = get_species("birch")
    d = s.to_dict()
    assert Species(**d) == s
    assert d['rules'] is not s.rules
