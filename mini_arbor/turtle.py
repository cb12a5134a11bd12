# mini_arbor/turtle.py
"""
TURTLE INTERPRETER: Grammar string -> BranchSegment tree
========================================================

PURPOSE:
--------
Walk an expanded L-system string symbol by symbol with a 3D "turtle" and
record every forward step as a BranchSegment. Bracketed sub-strings become
side branches.

THE TURTLE:
-----------
The turtle has a position and a local frame of three orthonormal vectors:

    H (heading)  direction of the next forward step, starts at +Y
    L (left)     starts at +X
    U (up)       starts at +Z

    Symbol   Rotation
    ------   --------------------------------
    +  -     turn left/right:   H, L about U
    &  ^     pitch down/up:     H, U about L
    \\  /     roll left/right:   L, U about H
    |        turn around:       H, L about U by 180 degrees

    F        draw a segment of length `step` along H
    [  ]     push / pop (position, frame, depth) and the current parent
    other    ignored

BRANCH STRUCTURE:
-----------------
Each F becomes a child of the "current parent" segment and then becomes the
current parent itself, so a straight run of F's is a chain. `[` saves the
current parent alongside the turtle state, so everything drawn inside the
brackets hangs off the segment where the bracket opened.

`]` with nothing saved is a no-op. Malformed grammars degrade into a
smaller tree instead of failing.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

import numpy as np

from .kernel.rotation import rotate_frame
from .model import BranchSegment, Point3, ROOT_ID, ROOT_DEPTH, ORIGIN, child_id

logger = logging.getLogger(__name__)

INITIAL_HEADING = (0.0, 1.0, 0.0)
INITIAL_LEFT = (1.0, 0.0, 0.0)
INITIAL_UP = (0.0, 0.0, 1.0)

# symbol -> (axis, sign); the angle is multiplied by sign
ROTATIONS = {
    '+': ('up', 1.0),
    '-': ('up', -1.0),
    '&': ('left', 1.0),
    '^': ('left', -1.0),
    '\\': ('heading', 1.0),
    '/': ('heading', -1.0),
}


@dataclass
class TurtleState:
    """Position, orientation frame and nesting depth of the turtle."""
    position: np.ndarray
    heading: np.ndarray
    left: np.ndarray
    up: np.ndarray
    depth: int = 0

    @classmethod
    def initial(cls) -> 'TurtleState':
        return cls(
            position=np.zeros(3),
            heading=np.array(INITIAL_HEADING),
            left=np.array(INITIAL_LEFT),
            up=np.array(INITIAL_UP),
            depth=0,
        )

    def copy(self) -> 'TurtleState':
        return TurtleState(
            position=self.position.copy(),
            heading=self.heading.copy(),
            left=self.left.copy(),
            up=self.up.copy(),
            depth=self.depth,
        )

    def rotate(self, axis: str, angle: float) -> None:
        """Rotate the two frame vectors orthogonal to `axis` by `angle` radians."""
        if axis == 'up':
            self.heading, self.left = rotate_frame(self.up, angle, self.heading, self.left)
        elif axis == 'left':
            self.heading, self.up = rotate_frame(self.left, angle, self.heading, self.up)
        elif axis == 'heading':
            self.left, self.up = rotate_frame(self.heading, angle, self.left, self.up)
        else:
            raise ValueError(f"Unknown rotation axis: {axis}")


@dataclass
class _Draft:
    """Mutable arena entry used while the tree is being drawn."""
    id: str
    parent_id: Optional[str]
    start: Point3
    end: Point3
    depth: int
    child_ids: List[str]


def _as_point(v: np.ndarray) -> Point3:
    return (float(v[0]), float(v[1]), float(v[2]))


def _check_finite(name: str, value) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a real number, got {value!r}")
    if not np.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")
    return value


def interpret(symbols: Iterable[str], angle_deg: float, step: float) -> BranchSegment:
    """
    Interpret an expanded L-system string into a branch tree.

    Args:
        symbols: Expanded grammar string (or any iterable of 1-char tokens)
        angle_deg: Turn/pitch/roll angle in degrees
        step: Length of each F segment

    Returns:
        root: Placeholder root BranchSegment (id "root", depth -1) whose
              descendants are the drawn segments

    Raises:
        ValueError: If angle_deg or step is not a finite number

    Example:
        >>> root = interpret("F", 25.0, 2.0)
        >>> root.children[0].end
        (0.0, 2.0, 0.0)
    """
    angle = np.radians(_check_finite("angle_deg", angle_deg))
    step = _check_finite("step", step)

    arena: Dict[str, _Draft] = {
        ROOT_ID: _Draft(ROOT_ID, None, ORIGIN, ORIGIN, ROOT_DEPTH, []),
    }
    order: List[str] = [ROOT_ID]

    state = TurtleState.initial()
    parent = ROOT_ID
    state_stack: List[TurtleState] = []
    parent_stack: List[str] = []

    for symbol in symbols:
        if symbol == 'F':
            new_position = state.position + state.heading * step
            owner = arena[parent]
            seg_id = child_id(parent, len(owner.child_ids))
            arena[seg_id] = _Draft(
                id=seg_id,
                parent_id=parent,
                start=_as_point(state.position),
                end=_as_point(new_position),
                depth=state.depth,
                child_ids=[],
            )
            owner.child_ids.append(seg_id)
            order.append(seg_id)
            parent = seg_id
            state.position = new_position

        elif symbol in ROTATIONS:
            axis, sign = ROTATIONS[symbol]
            state.rotate(axis, sign * angle)

        elif symbol == '|':
            state.rotate('up', np.pi)

        elif symbol == '[':
            state_stack.append(state.copy())
            parent_stack.append(parent)
            state.depth += 1

        elif symbol == ']':
            if state_stack:
                state = state_stack.pop()
                parent = parent_stack.pop()

    root = _freeze(arena, order)
    logger.debug("Interpreted %d segments (angle=%.2f deg, step=%.3f)",
                 len(order) - 1, np.degrees(angle), step)
    return root


def _freeze(arena: Dict[str, _Draft], order: List[str]) -> BranchSegment:
    """
    Convert the draft arena into immutable BranchSegments.

    Children are always drawn after their parent, so walking the creation
    order backwards guarantees every child is frozen before its parent.
    """
    frozen: Dict[str, BranchSegment] = {}
    for seg_id in reversed(order):
        draft = arena.pop(seg_id)
        frozen[seg_id] = BranchSegment(
            id=draft.id,
            parent_id=draft.parent_id,
            start=draft.start,
            end=draft.end,
            depth=draft.depth,
            children=tuple(frozen.pop(c) for c in draft.child_ids),
        )
    return frozen[ROOT_ID]
