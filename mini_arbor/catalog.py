# mini_arbor/catalog.py
"""
CATALOG: TREE SPECIES
=====================

PURPOSE:
--------
Each species is an L-system grammar plus the angle and step size that make
it look right. Picking a species is how a user chooses what kind of tree to
grow; the simulation then only varies iterations, angle and step.

GRAMMAR ALPHABET:
-----------------
    F        grow one segment
    + - & ^ \\ / |   turn, pitch, roll, turn around
    [ ]      start / end a side branch
    X, A...  growth markers: rewritten by rules but never drawn

Markers like X let a grammar describe branching structure without drawing
extra segments at every generation. They are ignored by the interpreter.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .grammar import expand
from .model import BranchSegment
from .turtle import interpret


class UnknownSpeciesError(KeyError):
    """Raised when a species id is not in the catalog."""
    pass


@dataclass(frozen=True)
class Species:
    """
    A tree species defined by an L-system.

    Parameters:
    -----------
    id : str
        Short identifier used in requests ("birch")

    common_name, scientific_name : str
        Display names

    axiom : str
        Start string of the grammar

    rules : dict
        Productions {symbol: replacement}

    default_angle : float
        Branching angle in degrees

    default_step : float
        Segment length
    """
    id: str
    common_name: str
    scientific_name: str
    axiom: str
    rules: Dict[str, str] = field(hash=False)
    default_angle: float = 22.5
    default_step: float = 1.0

    def symbols(self, iterations: int) -> str:
        """Expanded grammar string after `iterations` generations."""
        return expand(self.axiom, self.rules, iterations)

    def grow(
        self,
        iterations: int,
        angle: Optional[float] = None,
        step: Optional[float] = None,
    ) -> BranchSegment:
        """
        Grow the full tree for this species.

        Angle and step fall back to the species defaults.
        """
        angle = self.default_angle if angle is None else angle
        step = self.default_step if step is None else step
        return interpret(self.symbols(iterations), angle, step)

    def to_dict(self) -> Dict:
        return {
            'id': self.id,
            'common_name': self.common_name,
            'scientific_name': self.scientific_name,
            'axiom': self.axiom,
            'rules': dict(self.rules),
            'default_angle': self.default_angle,
            'default_step': self.default_step,
        }


SPECIES: Tuple[Species, ...] = (
    Species(
        id="oak",
        common_name="Oak",
        scientific_name="Quercus robur",
        axiom="F",
        rules={"F": "FF-[-F+F+F]+[+F-F-F]"},
        default_angle=22.5,
        default_step=1.0,
    ),
    Species(
        id="birch",
        common_name="Birch",
        scientific_name="Betula pendula",
        axiom="X",
        rules={"X": "F[+X]F[-X]+X", "F": "FF"},
        default_angle=20.0,
        default_step=0.6,
    ),
    Species(
        id="pine",
        common_name="Scots Pine",
        scientific_name="Pinus sylvestris",
        axiom="X",
        rules={"X": "F[&+X][&-X]/[&X]FX", "F": "FF"},
        default_angle=25.7,
        default_step=0.5,
    ),
    Species(
        id="apple",
        common_name="Apple",
        scientific_name="Malus domestica",
        axiom="F",
        rules={"F": "F[+F]F[-F][F]"},
        default_angle=25.0,
        default_step=1.2,
    ),
    Species(
        id="willow",
        common_name="Weeping Willow",
        scientific_name="Salix babylonica",
        axiom="A",
        rules={"A": "F[&+A][&-A]\\\\A"},
        default_angle=35.0,
        default_step=1.0,
    ),
)

_BY_ID: Dict[str, Species] = {s.id: s for s in SPECIES}

DEFAULT_SPECIES = SPECIES[0]


def list_species() -> List[Species]:
    """All catalog species, in display order."""
    return list(SPECIES)


def get_species(species_id: str) -> Species:
    """
    Look up a species by id.

    Raises:
        UnknownSpeciesError: If the id is not in the catalog
    """
    try:
        return _BY_ID[species_id]
    except KeyError:
        raise UnknownSpeciesError(species_id) from None
