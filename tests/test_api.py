# File: tests/test_api.py
"""
Smoke tests for the REST API (api/main.py).
"""

import pytest
from fastapi.testclient import TestClient

from api.main import app
from mini_arbor.catalog import SPECIES


@pytest.fixture
def client():
    return TestClient(app)


CUSTOM = {
    "axiom": "F",
    "rules": {"F": "F[+F]F"},
    "iterations": 1,
    "angle": 30.0,
    "step_size": 1.0,
}


def test_health(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_species_list(client):
    r = client.get("/api/species")
    assert r.status_code == 200
    data = r.json()
    assert [s["id"] for s in data] == [s.id for s in SPECIES]


def test_generate_custom_grammar(client):
    r = client.post("/api/tree", json=CUSTOM)
    assert r.status_code == 200
    data = r.json()

    assert data["root_id"] == "root"
    assert data["n_symbols"] == 6
    assert data["stats"]["n_segments"] == 3
    assert [s["id"] for s in data["segments"]] == ["root", "root-0", "root-0-0", "root-0-1"]
    assert data["segments"][1]["children"] == ["root-0-0", "root-0-1"]
    assert data["params"]["species_id"] is None

    print("✓ /api/tree returns flat segment list")


def test_generate_species_defaults(client):
    r = client.post("/api/tree", json={"species_id": "birch", "iterations": 2})
    assert r.status_code == 200
    params = r.json()["params"]
    assert params["species_id"] == "birch"
    assert params["angle"] == 20.0
    assert params["step_size"] == 0.6


def test_unknown_species_is_404(client):
    r = client.post("/api/tree", json={"species_id": "baobab", "iterations": 2})
    assert r.status_code == 404


@pytest.mark.parametrize("field, value", [
    ("iterations", 0),
    ("iterations", 8),
    ("angle", 5.0),
    ("step_size", 3.0),
])
def test_out_of_range_params_rejected(client, field, value):
    r = client.post("/api/tree", json={**CUSTOM, field: value})
    assert r.status_code == 422


def test_growth_limit_is_400(client):
    r = client.post("/api/tree", json={"species_id": "oak", "iterations": 7})
    assert r.status_code == 400


def test_prune(client):
    r = client.post("/api/prune", json={**CUSTOM, "branch_id": "root-0-0"})
    assert r.status_code == 200
    data = r.json()

    assert data["removed_ids"] == ["root-0-0"]
    assert data["pruned_ids"] == ["root-0-0"]
    assert data["summary"]["n_removed"] == 1
    assert [s["id"] for s in data["tree"]["segments"]] == ["root", "root-0", "root-0-1"]


def test_prune_keeps_previous_record(client):
    r = client.post("/api/prune", json={
        **CUSTOM,
        "branch_id": "root-0-1",
        "pruned_ids": ["root-0-0"],
    })
    data = r.json()
    assert data["removed_ids"] == ["root-0-1"]
    assert data["pruned_ids"] == ["root-0-0", "root-0-1"]
    assert [s["id"] for s in data["tree"]["segments"]] == ["root", "root-0"]


def test_prune_root_is_noop(client):
    r = client.post("/api/prune", json={**CUSTOM, "branch_id": "root"})
    data = r.json()
    assert data["removed_ids"] == []
    assert data["summary"]["n_removed"] == 0
