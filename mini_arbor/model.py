# mini_arbor/model.py
"""
MODEL DEFINITIONS: BranchSegment
================================

PURPOSE:
--------
The interpreter turns a grammar string into a tree of branch segments.
Each segment is one drawn `F` step: a straight piece of wood between two
3D points. Segments own their children; the link back to the parent is
only an id string, never an object reference.

IDENTITY SCHEME:
----------------
Ids are derived from the path through the tree, not generated randomly:

    root                  (placeholder, depth -1, zero length)
    root-0                first segment drawn from the root
    root-0-0              first segment drawn from root-0
    root-0-1              second segment drawn from root-0

The same grammar, iteration count and symbol string always yield the same
ids, so a pruning record keyed by id stays valid when only angle or step
size change.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional, Tuple

import numpy as np

Point3 = Tuple[float, float, float]

ROOT_ID = "root"
ROOT_DEPTH = -1
ORIGIN: Point3 = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class BranchSegment:
    """
    One branch segment of a generated tree.

    Parameters:
    -----------
    id : str
        Path-derived identity, unique within the tree ("root-0-2-1")

    parent_id : str or None
        Id of the owning segment; None only for the root placeholder

    start, end : (x, y, z)
        Segment endpoints in world space

    depth : int
        Bracket nesting level at which the segment was drawn.
        The root placeholder is -1; the trunk is 0.

    children : tuple of BranchSegment
        Child segments in creation order (left-to-right grammar scan)

    Notes:
    ------
    - frozen=True and tuple children: a built tree is never mutated.
      Pruning produces a new tree (see mini_arbor.tree.filter_tree).
    """
    id: str
    parent_id: Optional[str]
    start: Point3
    end: Point3
    depth: int
    children: Tuple['BranchSegment', ...] = field(default=())

    @property
    def is_tip(self) -> bool:
        return len(self.children) == 0

    @property
    def length(self) -> float:
        return float(np.linalg.norm(np.subtract(self.end, self.start)))

    def with_children(self, children) -> 'BranchSegment':
        """Copy of this segment with a different child tuple."""
        return BranchSegment(
            id=self.id,
            parent_id=self.parent_id,
            start=self.start,
            end=self.end,
            depth=self.depth,
            children=tuple(children),
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Nested plain-dict form of the subtree rooted here.

        Built with an explicit stack so deeply chained trunks do not hit
        the interpreter's recursion limit.
        """
        out = _fields(self)
        stack = [(self, out)]
        while stack:
            seg, seg_dict = stack.pop()
            for child in seg.children:
                child_dict = _fields(child)
                seg_dict['children'].append(child_dict)
                stack.append((child, child_dict))
        return out

    def __repr__(self) -> str:
        return (f"BranchSegment({self.id!r}, depth={self.depth}, "
                f"children={len(self.children)})")


def _fields(seg: BranchSegment) -> Dict[str, Any]:
    return {
        'id': seg.id,
        'parent_id': seg.parent_id,
        'start': list(seg.start),
        'end': list(seg.end),
        'depth': seg.depth,
        'children': [],
    }


def child_id(parent_id: str, index: int) -> str:
    """Id of the `index`-th (zero-based) child drawn from `parent_id`."""
    return f"{parent_id}-{index}"
