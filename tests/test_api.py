import json

import pytest
from fastapi.testclient import TestClient
from api import app
from phrases import UVB76_PHRASES, NEURO_PHRASES

client = TestClient(app)

def test_new_session():
    resp = client.get("/session/new")
    assert resp.status_code == 200
    data = resp.json()
    assert data["total"] == len(data["phrases"]) == len(UVB76_PHRASES) + len(NEURO_PHRASES)
    assert set(data["phrases"][0]) == {"id", "text"}

def test_answer_roundtrip_against_new_deck():
    phrases = client.get("/session/new").json()["phrases"]
    for p in phrases[:4]:
        resp = client.post("/session/answer", json={"phraseId": p["id"], "guess": True})
        assert resp.status_code == 200
        body = resp.json()
        assert body == {"correct": p["id"].startswith("real_"), "isReal": p["id"].startswith("real_")}

def test_answer_wrong_guess():
    resp = client.post("/session/answer", json={"phraseId": "fake_1", "guess": True})
    assert resp.json() == {"correct": False, "isReal": False}

@pytest.mark.parametrize("body", [
    {"guess": True},
    {"phraseId": "", "guess": True},
    {"phraseId": "   ", "guess": True},
    {"phraseId": "real_1"},
    {"phraseId": "real_1", "guess": "true"},
    {"phraseId": "real_1", "guess": 1},
])
def test_malformed_answer_is_400(body):
    resp = client.post("/session/answer", json=body)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid request"}

def test_unknown_tag_is_rejected():
    resp = client.post("/session/answer", json={"phraseId": "neuro_1", "guess": False})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Unknown phrase identifier"}

def test_wrong_method():
    assert client.post("/session/new").status_code == 405
    assert client.get("/session/answer").status_code == 405

def test_legacy_routes():
    assert client.get("/api/game/new").status_code == 200
    resp = client.post("/api/game/check", json={"phraseId": "real_1", "guess": True})
    assert resp.json() == {"correct": True, "isReal": True}

def test_pool_file_failure_is_500(tmp_path, monkeypatch):
    bad = tmp_path / "pool.json"
    bad.write_text(json.dumps({"authentic": ["x"]}), encoding="utf-8")
    monkeypatch.setenv("UVB_PHRASES_FILE", str(bad))
    resp = client.get("/session/new")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to load phrases"}

def test_pool_file_replaces_bundled(tmp_path, monkeypatch):
    pool = tmp_path / "pool.json"
    pool.write_text(json.dumps({"authentic": [" А "], "fabricated": ["Б"]}), encoding="utf-8")
    monkeypatch.setenv("UVB_PHRASES_FILE", str(pool))
    data = client.get("/session/new").json()
    assert data["total"] == 2
    assert sorted(p["text"] for p in data["phrases"]) == ["А", "Б"]

@pytest.mark.parametrize("pool", [
    {"authentic": "АБВ", "fabricated": ["Б"]},
    {"authentic": ["А"], "fabricated": [None, 7]},
    {"authentic": ["А", "   "], "fabricated": ["Б"]},
    {"authentic": ["А"], "fabricated": [""]},
])
def test_malformed_pool_file_is_500(tmp_path, monkeypatch, pool):
    path = tmp_path / "pool.json"
    path.write_text(json.dumps(pool), encoding="utf-8")
    monkeypatch.setenv("UVB_PHRASES_FILE", str(path))
    resp = client.get("/session/new")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to load phrases"}

def test_unparsable_pool_file_is_500(tmp_path, monkeypatch):
    path = tmp_path / "pool.json"
    path.write_text("{not json", encoding="utf-8")
    monkeypatch.setenv("UVB_PHRASES_FILE", str(path))
    assert client.get("/session/new").status_code == 500
