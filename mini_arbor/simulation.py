# mini_arbor/simulation.py
"""
SIMULATION STATE: Control tree vs. pruned tree
==============================================

Holds what a user has chosen (species, iterations, angle, step size,
thickness) and which branch ids they have pruned, and derives the two trees
the app shows side by side:

    full_tree()    the unpruned "control" tree, rebuilt whenever the
                   species, iterations, angle or step size change
    pruned_tree()  the full tree filtered by the pruned-id set

State lives in memory only. Nothing is written to disk.

Pruned ids survive angle and step changes: ids depend only on the grammar
string, so the same ids name the same branches after a rebuild. Changing
species clears pruning; changing iterations does not, and ids that no longer
exist simply match nothing.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, FrozenSet, Tuple, Dict, Any

from .catalog import Species, DEFAULT_SPECIES
from .config import CONFIG, check_range
from .grammar import expand, expanded_length
from .model import BranchSegment, ROOT_ID
from .tree import subtree_of, filter_tree
from .turtle import interpret

logger = logging.getLogger(__name__)


class GrowthLimitError(RuntimeError):
    """Raised when a grammar would expand past CONFIG.max_symbols."""
    pass


def build_tree(
    axiom: str,
    rules: Dict[str, str],
    iterations: int,
    angle: float,
    step: float,
    max_symbols: Optional[int] = None,
) -> BranchSegment:
    """
    Run the full pipeline: expand the grammar, then interpret it.

    Args:
        axiom, rules, iterations: Grammar inputs
        angle: Branching angle in degrees
        step: Segment length
        max_symbols: Size guard (defaults to CONFIG.max_symbols)

    Raises:
        GrowthLimitError: If the expanded string would be too long
        ValueError: For negative iterations or non-finite angle/step
    """
    limit = CONFIG.max_symbols if max_symbols is None else max_symbols
    size = expanded_length(axiom, rules, iterations)
    if size > limit:
        raise GrowthLimitError(
            f"Grammar expands to {size} symbols after {iterations} iterations "
            f"(limit {limit}). Reduce iterations."
        )
    symbols = expand(axiom, rules, iterations)
    tree = interpret(symbols, angle, step)
    logger.info("Built tree: %d symbols, iterations=%d, angle=%.1f, step=%.2f",
                size, iterations, angle, step)
    return tree


@dataclass
class SimulationState:
    """
    User-controlled simulation parameters plus the pruned-id record.

    Setters validate against CONFIG ranges and raise ValueError when a
    value is out of range.
    """
    species: Species = DEFAULT_SPECIES
    iterations: int = CONFIG.default_iterations
    angle: float = DEFAULT_SPECIES.default_angle
    step_size: float = DEFAULT_SPECIES.default_step
    thickness: float = CONFIG.default_thickness
    pruned_ids: FrozenSet[str] = frozenset()

    _cache_key: Optional[Tuple] = field(default=None, init=False, repr=False, compare=False)
    _cache_tree: Optional[BranchSegment] = field(default=None, init=False, repr=False, compare=False)

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------

    def select_species(self, species: Species) -> None:
        """Switch species, adopt its default angle/step, and clear pruning."""
        self.species = species
        self.angle = species.default_angle
        self.step_size = species.default_step
        self.pruned_ids = frozenset()
        logger.info("Selected species %s", species.id)

    def set_iterations(self, iterations: int) -> None:
        if isinstance(iterations, bool) or not isinstance(iterations, int):
            raise ValueError(f"iterations must be an integer, got {iterations!r}")
        self.iterations = check_range("iterations", iterations, CONFIG.iterations_range)

    def set_angle(self, angle: float) -> None:
        self.angle = float(check_range("angle", angle, CONFIG.angle_range))

    def set_step_size(self, step_size: float) -> None:
        self.step_size = float(check_range("step_size", step_size, CONFIG.step_range))

    def set_thickness(self, thickness: float) -> None:
        self.thickness = float(check_range("thickness", thickness, CONFIG.thickness_range))

    # ------------------------------------------------------------------
    # Trees
    # ------------------------------------------------------------------

    @property
    def tree_key(self) -> Tuple:
        """Everything the full tree depends on."""
        return (
            self.species.axiom,
            tuple(sorted(self.species.rules.items())),
            self.iterations,
            self.angle,
            self.step_size,
        )

    def full_tree(self) -> BranchSegment:
        """The unpruned tree; rebuilt only when `tree_key` changes."""
        key = self.tree_key
        if self._cache_key != key:
            self._cache_tree = build_tree(
                self.species.axiom,
                self.species.rules,
                self.iterations,
                self.angle,
                self.step_size,
            )
            self._cache_key = key
        return self._cache_tree

    def pruned_tree(self) -> BranchSegment:
        """The full tree without pruned branches."""
        return filter_tree(self.full_tree(), self.pruned_ids)

    # ------------------------------------------------------------------
    # Pruning
    # ------------------------------------------------------------------

    def prune(self, branch_id: str) -> FrozenSet[str]:
        """
        Prune `branch_id` and everything growing from it.

        Returns:
            The ids removed by this action (empty for the root placeholder
            or an unknown id)
        """
        if branch_id == ROOT_ID:
            return frozenset()
        closure = frozenset(subtree_of(self.full_tree(), branch_id))
        if closure:
            self.pruned_ids = self.pruned_ids | closure
            logger.info("Pruned %s (%d segments, %d total)",
                        branch_id, len(closure), len(self.pruned_ids))
        return closure

    def clear_pruned(self) -> None:
        self.pruned_ids = frozenset()

    def reset(self) -> None:
        """Restore default parameters (species defaults for angle/step) and clear pruning."""
        self.iterations = CONFIG.default_iterations
        self.angle = self.species.default_angle
        self.step_size = self.species.default_step
        self.thickness = CONFIG.default_thickness
        self.pruned_ids = frozenset()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'species': self.species.id,
            'iterations': self.iterations,
            'angle': self.angle,
            'step_size': self.step_size,
            'thickness': self.thickness,
            'n_pruned': len(self.pruned_ids),
        }
