# mini_arbor/tree.py
"""
TREE OPERATIONS: Subtree lookup and pruning filter
==================================================

Pruning works in two steps:

1. When the user clicks a branch, `subtree_of(full_tree, branch_id)` returns
   that branch's id plus every id below it. The caller adds the whole set
   to its pruned-id record.

2. Whenever the pruned-id set changes, `filter_tree(full_tree, pruned_ids)`
   builds a new tree without those segments.

Because step 1 always records a complete subtree, step 2 only needs to test
each node's own id. It never has to check ancestors.

All traversals use explicit stacks. A long chain of F's is a deep path in
the tree, and recursion would cap the usable iteration count.
"""

from typing import Dict, Iterator, List, Optional, Set, AbstractSet, Any

import numpy as np

from .model import BranchSegment


def walk(tree: BranchSegment) -> Iterator[BranchSegment]:
    """Pre-order, left-to-right iteration over `tree` and all its descendants."""
    stack = [tree]
    while stack:
        seg = stack.pop()
        yield seg
        stack.extend(reversed(seg.children))


def subtree_of(tree: BranchSegment, target_id: str) -> Set[str]:
    """
    Ids of the segment `target_id` and all of its descendants.

    Searches depth-first and stops at the first match. Ids are unique in a
    generated tree, so there is at most one.

    Args:
        tree: Root of the tree to search
        target_id: Id of the clicked branch

    Returns:
        Set of ids (inclusive of target_id); empty if not found
    """
    for seg in walk(tree):
        if seg.id == target_id:
            return {s.id for s in walk(seg)}
    return set()


def filter_tree(tree: BranchSegment, pruned_ids: AbstractSet[str]) -> BranchSegment:
    """
    New tree without the segments in `pruned_ids` and everything under them.

    Surviving segments keep all their fields; only `children` changes.
    The top node of `tree` is always kept, so the result has the same root
    identity as the input.

    Args:
        tree: Full (unpruned) tree
        pruned_ids: Ids to remove

    Returns:
        Filtered copy of the tree
    """
    if not pruned_ids:
        return tree.with_children(tree.children)

    # Collect survivors top-down, skipping pruned subtrees entirely.
    survivors: List[BranchSegment] = []
    stack = [tree]
    while stack:
        seg = stack.pop()
        survivors.append(seg)
        for child in seg.children:
            if child.id not in pruned_ids:
                stack.append(child)

    # Rebuild bottom-up: every survivor appears after its parent.
    rebuilt: Dict[str, BranchSegment] = {}
    for seg in reversed(survivors):
        kept = [rebuilt.pop(c.id) for c in seg.children if c.id in rebuilt]
        rebuilt[seg.id] = seg.with_children(kept)
    return rebuilt[tree.id]


def find_segment(tree: BranchSegment, segment_id: str) -> Optional[BranchSegment]:
    """First segment with id `segment_id`, or None."""
    for seg in walk(tree):
        if seg.id == segment_id:
            return seg
    return None


def find_parent(tree: BranchSegment, segment_id: str) -> Optional[BranchSegment]:
    """
    The segment that owns `segment_id`, or None for the root or an unknown id.

    Resolved through the child's `parent_id`, not by scanning child lists.
    """
    index = index_tree(tree)
    seg = index.get(segment_id)
    if seg is None or seg.parent_id is None:
        return None
    return index.get(seg.parent_id)


def index_tree(tree: BranchSegment) -> Dict[str, BranchSegment]:
    """Map of id -> segment for every segment in `tree`."""
    return {seg.id: seg for seg in walk(tree)}


def visible_segments(tree: BranchSegment, pruned_ids: AbstractSet[str] = frozenset()) -> List[BranchSegment]:
    """
    Drawable segments: descendants of the root placeholder that are not
    pruned, in pre-order. The root itself has no geometry and is excluded.
    """
    out = []
    stack = [c for c in reversed(tree.children) if c.id not in pruned_ids]
    while stack:
        seg = stack.pop()
        out.append(seg)
        stack.extend(c for c in reversed(seg.children) if c.id not in pruned_ids)
    return out


def tree_stats(tree: BranchSegment) -> Dict[str, Any]:
    """
    Summary numbers for a tree (root placeholder excluded).

    Returns:
        dict with n_segments, n_tips, max_depth, total_length
    """
    segments = visible_segments(tree)
    if not segments:
        return {
            'n_segments': 0,
            'n_tips': 0,
            'max_depth': None,
            'total_length': 0.0,
        }

    starts = np.array([s.start for s in segments])
    ends = np.array([s.end for s in segments])
    lengths = np.linalg.norm(ends - starts, axis=1)

    return {
        'n_segments': len(segments),
        'n_tips': sum(1 for s in segments if s.is_tip),
        'max_depth': max(s.depth for s in segments),
        'total_length': float(lengths.sum()),
    }
