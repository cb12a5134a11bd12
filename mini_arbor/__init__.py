# mini_arbor - L-system Tree Growth and Pruning Engine
"""
MINI-ARBOR: Procedural Trees You Can Prune
==========================================

This package provides:
- L-system grammar expansion
- 3D turtle interpretation into a branch tree with stable ids
- Subtree lookup and pruning filters
- An in-memory simulation state comparing a control tree to a pruned one

ARCHITECTURE:
-------------
    kernel/         Orientation math (axis-angle quaternion rotation)
    model.py        BranchSegment data structure and id scheme
    grammar.py      Grammar expansion
    turtle.py       Turtle interpreter (string -> tree)
    tree.py         Subtree lookup, filtering, traversal helpers
    catalog.py      Built-in tree species
    config.py       Parameter ranges and defaults
    simulation.py   Simulation state and pruning record
    summary.py      Tabular summaries (pandas)

USAGE:
------
    from mini_arbor import expand, interpret, subtree_of, filter_tree

    symbols = expand("F", {"F": "F[+F]F"}, 3)
    tree = interpret(symbols, angle_deg=25.0, step=1.0)

    removed = subtree_of(tree, "root-0-0")
    pruned = filter_tree(tree, removed)
"""

from .model import BranchSegment, ROOT_ID
from .grammar import expand, expanded_length
from .turtle import interpret
from .tree import subtree_of, filter_tree, walk, find_segment, find_parent

__version__ = "0.1.0"

__all__ = [
    'BranchSegment',
    'ROOT_ID',
    'expand',
    'expanded_length',
    'interpret',
    'subtree_of',
    'filter_tree',
    'walk',
    'find_segment',
    'find_parent',
]
