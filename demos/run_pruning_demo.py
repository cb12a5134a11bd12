#!/usr/bin/env python3
"""
RUN_PRUNING_DEMO: Grow a Tree, Prune a Branch, Compare
======================================================

This demo walks through the whole pruning workflow:
1. Pick a species from the catalog
2. Grow the full (control) tree
3. Prune one branch - its whole subtree goes with it
4. Change the angle and show the pruning record still applies
5. Export the segment table for both trees

Run with:
    python demos/run_pruning_demo.py

Outputs:
    artifacts/control_segments.csv  - Segments of the unpruned tree
    artifacts/pruned_segments.csv   - Segments of the pruned tree
"""

import sys
import os
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mini_arbor.catalog import get_species
from mini_arbor.simulation import SimulationState
from mini_arbor.summary import segments_frame, depth_profile, pruning_summary
from mini_arbor.tree import tree_stats


def print_header(text: str):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {text}")
    print("=" * 70)


def main():
    print_header("1. SPECIES")
    state = SimulationState()
    state.select_species(get_species("apple"))
    state.set_iterations(3)
    print(f"  Species:    {state.species.common_name} ({state.species.scientific_name})")
    print(f"  Axiom:      {state.species.axiom}")
    print(f"  Rules:      {state.species.rules}")
    print(f"  Iterations: {state.iterations}")
    print(f"  Angle:      {state.angle:.1f}°")
    print(f"  Step size:  {state.step_size:.1f}")

    print_header("2. CONTROL TREE")
    full = state.full_tree()
    stats = tree_stats(full)
    print(f"  Segments:     {stats['n_segments']}")
    print(f"  Tips:         {stats['n_tips']}")
    print(f"  Max depth:    {stats['max_depth']}")
    print(f"  Total length: {stats['total_length']:.2f}")
    print("\n  Depth profile:")
    print(depth_profile(full).to_string(index=False))

    print_header("3. PRUNE")
    # First side branch off the trunk
    target = full.children[0].children[0].id
    removed = state.prune(target)
    print(f"  Pruned {target}: {len(removed)} segments removed")
    summary = pruning_summary(state.full_tree(), state.pruned_tree())
    print(f"  Control: {summary['n_segments_full']} segments")
    print(f"  Pruned:  {summary['n_segments_pruned']} segments")
    print(f"  Removed: {summary['fraction_removed'] * 100:.1f}% of total length")

    print_header("4. CHANGE ANGLE")
    state.set_angle(35.0)
    summary = pruning_summary(state.full_tree(), state.pruned_tree())
    print(f"  Angle now {state.angle:.1f}° - pruning record kept")
    print(f"  Pruned:  {summary['n_segments_pruned']} segments "
          f"(removed {summary['n_removed']})")

    print_header("5. EXPORT")
    os.makedirs("artifacts", exist_ok=True)
    segments_frame(state.full_tree()).to_csv("artifacts/control_segments.csv", index=False)
    segments_frame(state.pruned_tree()).to_csv("artifacts/pruned_segments.csv", index=False)
    print("  Wrote artifacts/control_segments.csv")
    print("  Wrote artifacts/pruned_segments.csv")


if __name__ == "__main__":
    main()
