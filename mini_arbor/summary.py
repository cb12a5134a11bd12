# mini_arbor/summary.py
"""
Tabular summaries of generated and pruned trees.
"""

from typing import Dict, Any

import numpy as np
import pandas as pd

from .model import BranchSegment
from .tree import visible_segments

COLUMNS = [
    'id', 'parent_id', 'depth',
    'x0', 'y0', 'z0', 'x1', 'y1', 'z1',
    'length', 'n_children',
]


def segments_frame(tree: BranchSegment) -> pd.DataFrame:
    """
    One row per drawn segment (root placeholder excluded), in pre-order.

    Columns: id, parent_id, depth, x0..z0 (start), x1..z1 (end), length,
    n_children.
    """
    segments = visible_segments(tree)
    if not segments:
        return pd.DataFrame(columns=COLUMNS)

    starts = np.array([s.start for s in segments], dtype=float)
    ends = np.array([s.end for s in segments], dtype=float)

    df = pd.DataFrame({
        'id': [s.id for s in segments],
        'parent_id': [s.parent_id for s in segments],
        'depth': [s.depth for s in segments],
        'x0': starts[:, 0], 'y0': starts[:, 1], 'z0': starts[:, 2],
        'x1': ends[:, 0], 'y1': ends[:, 1], 'z1': ends[:, 2],
        'length': np.linalg.norm(ends - starts, axis=1),
        'n_children': [len(s.children) for s in segments],
    })
    return df[COLUMNS]


def depth_profile(tree: BranchSegment) -> pd.DataFrame:
    """Segment count and total length per depth level."""
    df = segments_frame(tree)
    if df.empty:
        return pd.DataFrame(columns=['depth', 'n_segments', 'total_length'])
    return (
        df.groupby('depth')
        .agg(n_segments=('id', 'size'), total_length=('length', 'sum'))
        .reset_index()
    )


def pruning_summary(full: BranchSegment, pruned: BranchSegment) -> Dict[str, Any]:
    """
    Compare the control tree with its pruned counterpart.

    Returns:
        dict with segment counts and lengths for both trees, how many
        segments were removed, and the removed fraction of total length
    """
    full_df = segments_frame(full)
    pruned_df = segments_frame(pruned)

    full_length = float(full_df['length'].sum()) if not full_df.empty else 0.0
    pruned_length = float(pruned_df['length'].sum()) if not pruned_df.empty else 0.0
    removed_length = full_length - pruned_length

    return {
        'n_segments_full': len(full_df),
        'n_segments_pruned': len(pruned_df),
        'n_removed': len(full_df) - len(pruned_df),
        'length_full': full_length,
        'length_pruned': pruned_length,
        'length_removed': removed_length,
        'fraction_removed': removed_length / full_length if full_length > 0 else 0.0,
    }
