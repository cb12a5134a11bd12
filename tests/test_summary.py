# File: tests/test_summary.py
"""
Test tabular summaries (mini_arbor.summary).
"""

import numpy as np
import pytest

from mini_arbor.summary import segments_frame, depth_profile, pruning_summary, COLUMNS
from mini_arbor.tree import filter_tree, subtree_of
from mini_arbor.turtle import interpret


@pytest.fixture
def small_tree():
    return interpret("F[+F]F", 90.0, 2.0)


def test_segments_frame(small_tree):
    df = segments_frame(small_tree)

    assert list(df.columns) == COLUMNS
    assert list(df['id']) == ["root-0", "root-0-0", "root-0-1"]
    assert list(df['parent_id']) == ["root", "root-0", "root-0"]
    assert list(df['depth']) == [0, 1, 0]
    assert list(df['n_children']) == [2, 0, 0]
    np.testing.assert_allclose(df['length'], [2.0, 2.0, 2.0])
    np.testing.assert_allclose(df.loc[1, ['x1', 'y1', 'z1']].astype(float), [-2.0, 2.0, 0.0], atol=1e-12)


def test_segments_frame_empty():
    df = segments_frame(interpret("", 25.0, 1.0))
    assert df.empty
    assert list(df.columns) == COLUMNS


def test_depth_profile(small_tree):
    prof = depth_profile(small_tree)
    assert list(prof['depth']) == [0, 1]
    assert list(prof['n_segments']) == [2, 1]
    np.testing.assert_allclose(prof['total_length'], [4.0, 2.0])


def test_pruning_summary(small_tree):
    pruned = filter_tree(small_tree, subtree_of(small_tree, "root-0-0"))
    summary = pruning_summary(small_tree, pruned)

    assert summary['n_segments_full'] == 3
    assert summary['n_segments_pruned'] == 2
    assert summary['n_removed'] == 1
    assert summary['length_removed'] == pytest.approx(2.0)
    assert summary['fraction_removed'] == pytest.approx(1 / 3)


def test_pruning_summary_nothing_pruned(small_tree):
    summary = pruning_summary(small_tree, filter_tree(small_tree, set()))
    assert summary['n_removed'] == 0
    assert summary['fraction_removed'] == 0.0


def test_pruning_summary_empty_tree():
    empty = interpret("", 25.0, 1.0)
    summary = pruning_summary(empty, empty)
    assert summary['n_segments_full'] == 0
    assert summary['fraction_removed'] == 0.0
