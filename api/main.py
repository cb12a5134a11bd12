# api/main.py
"""
FastAPI backend for PruneCraft - exposes the mini_arbor engine as a REST API.
"""

import logging
from typing import Dict, List, Optional, Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from mini_arbor.catalog import Species, get_species, list_species, UnknownSpeciesError, DEFAULT_SPECIES
from mini_arbor.config import CONFIG
from mini_arbor.grammar import expanded_length
from mini_arbor.model import BranchSegment, ROOT_ID
from mini_arbor.simulation import build_tree, GrowthLimitError
from mini_arbor.summary import pruning_summary
from mini_arbor.tree import subtree_of, filter_tree, walk, tree_stats

logger = logging.getLogger(__name__)


app = FastAPI(
    title="PruneCraft API",
    description="L-system tree growth and pruning engine",
    version=CONFIG.version,
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request/Response Models
# =============================================================================

class TreeParams(BaseModel):
    """Grammar and turtle parameters for tree generation."""
    species_id: Optional[str] = Field(None, description="Catalog species; ignored if axiom is given")
    axiom: Optional[str] = Field(None, description="Custom grammar start string")
    rules: Dict[str, str] = Field(default_factory=dict, description="Custom productions {symbol: replacement}")
    iterations: int = Field(
        CONFIG.default_iterations,
        ge=CONFIG.iterations_range[0], le=CONFIG.iterations_range[1],
        description="Growth generations",
    )
    angle: Optional[float] = Field(
        None, ge=CONFIG.angle_range[0], le=CONFIG.angle_range[1],
        description="Branching angle (degrees); species default if omitted",
    )
    step_size: Optional[float] = Field(
        None, ge=CONFIG.step_range[0], le=CONFIG.step_range[1],
        description="Segment length; species default if omitted",
    )


class PruneParams(TreeParams):
    """Tree parameters plus the current pruning record and the clicked branch."""
    branch_id: str = Field(..., description="Id of the branch to prune")
    pruned_ids: List[str] = Field(default_factory=list, description="Ids already pruned")


class SpeciesData(BaseModel):
    id: str
    common_name: str
    scientific_name: str
    axiom: str
    rules: Dict[str, str]
    default_angle: float
    default_step: float


class SegmentData(BaseModel):
    """One segment; children are referenced by id."""
    id: str
    parent_id: Optional[str]
    start: List[float]
    end: List[float]
    depth: int
    children: List[str]


class StatsData(BaseModel):
    n_segments: int
    n_tips: int
    max_depth: Optional[int]
    total_length: float


class TreeResult(BaseModel):
    """Generated tree as a flat, pre-ordered segment list."""
    root_id: str
    n_symbols: int
    stats: StatsData
    segments: List[SegmentData]
    params: Dict[str, Any]


class PruneResult(BaseModel):
    removed_ids: List[str]
    pruned_ids: List[str]
    summary: Dict[str, Any]
    tree: TreeResult


# =============================================================================
# Helpers
# =============================================================================

def resolve_grammar(params: TreeParams) -> Dict[str, Any]:
    """Pick the grammar and fill in angle/step defaults."""
    species: Species = get_species(params.species_id) if params.species_id else DEFAULT_SPECIES
    custom = params.axiom is not None
    axiom, rules = (params.axiom, params.rules) if custom else (species.axiom, species.rules)

    return {
        'species_id': None if custom else species.id,
        'axiom': axiom,
        'rules': dict(rules),
        'iterations': params.iterations,
        'angle': params.angle if params.angle is not None else species.default_angle,
        'step_size': params.step_size if params.step_size is not None else species.default_step,
    }


def generate(params: TreeParams) -> Dict[str, Any]:
    """Build the full tree, mapping engine errors to HTTP errors."""
    try:
        grammar = resolve_grammar(params)
        tree = build_tree(
            grammar['axiom'], grammar['rules'], grammar['iterations'],
            grammar['angle'], grammar['step_size'],
        )
    except UnknownSpeciesError as e:
        raise HTTPException(status_code=404, detail=f"Unknown species: {e.args[0]}")
    except (GrowthLimitError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {'grammar': grammar, 'tree': tree}


def serialize_tree(tree: BranchSegment, grammar: Dict[str, Any]) -> TreeResult:
    segments = [
        SegmentData(
            id=seg.id,
            parent_id=seg.parent_id,
            start=list(seg.start),
            end=list(seg.end),
            depth=seg.depth,
            children=[c.id for c in seg.children],
        )
        for seg in walk(tree)
    ]
    return TreeResult(
        root_id=tree.id,
        n_symbols=expanded_length(grammar['axiom'], grammar['rules'], grammar['iterations']),
        stats=StatsData(**tree_stats(tree)),
        segments=segments,
        params=grammar,
    )


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "PruneCraft API"}


@app.get("/api/species", response_model=List[SpeciesData])
async def species():
    """List the built-in species."""
    return [SpeciesData(**s.to_dict()) for s in list_species()]


@app.post("/api/tree", response_model=TreeResult)
async def generate_tree(params: TreeParams):
    """Generate the full, unpruned tree."""
    built = generate(params)
    return serialize_tree(built['tree'], built['grammar'])


@app.post("/api/prune", response_model=PruneResult)
async def prune_branch(params: PruneParams):
    """
    Prune a branch: add its whole subtree to the pruned set and return the
    pruned tree. Pruning the root placeholder or an unknown id changes nothing.
    """
    built = generate(params)
    full = built['tree']

    removed = set() if params.branch_id == ROOT_ID else subtree_of(full, params.branch_id)
    pruned_ids = set(params.pruned_ids) | removed
    pruned = filter_tree(full, pruned_ids)
    logger.info("Pruned %s: %d removed, %d total", params.branch_id, len(removed), len(pruned_ids))

    return PruneResult(
        removed_ids=sorted(removed),
        pruned_ids=sorted(pruned_ids),
        summary=pruning_summary(full, pruned),
        tree=serialize_tree(pruned, built['grammar']),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
