import pytest
from fastapi.testclient import TestClient

from predictor import backend


@pytest.fixture(scope="module")
def client():
    assert backend.ENGINE is not None
    return TestClient(backend.app)


def test_health(client):
    body = client.get("/health").json()
    assert body["ok"] is True
    assert body["diseases"] == 49


def test_autocomplete(client):
    r = client.get("/symptoms/autocomplete", params={"prefix": "loss of"})
    assert r.status_code == 200
    assert r.json()["suggestions"][0] == "loss of height"

    r = client.get("/symptoms/autocomplete", params={"prefix": "loss", "limit": 2})
    assert len(r.json()["suggestions"]) == 2

    r = client.get("/symptoms/autocomplete", params={"prefix": "zzz"})
    assert r.json()["suggestions"] == []


def test_autocomplete_requires_prefix(client):
    assert client.get("/symptoms/autocomplete").status_code == 422
    for prefix in ["   ", "!!", "123", "- -"]:
        r = client.get("/symptoms/autocomplete", params={"prefix": prefix})
        assert r.status_code == 400, prefix


def test_dataset_ships_inside_package():
    from pathlib import Path
    from predictor import config

    path = Path(config.DATASET_PATH)
    assert path.is_file()
    assert path.parent.parent == Path(backend.__file__).resolve().parent


def test_lookup(client):
    body = client.get("/symptoms/lookup", params={"symptom": "Fever"}).json()
    assert body == {"symptom": "Fever", "exists": True, "has_prefix": True}
    body = client.get("/symptoms/lookup", params={"symptom": "fev"}).json()
    assert body["exists"] is False and body["has_prefix"] is True


def test_predict(client):
    r = client.post("/predict", json={"symptoms": ["fever", "cough", "fatigue"], "top_n": 3})
    assert r.status_code == 200
    preds = r.json()["predictions"]
    assert len(preds) == 3
    assert preds[0]["confidence"] >= preds[-1]["confidence"]
    for p in preds:
        assert 0.0 <= p["confidence"] <= 1.0
        assert p["total_symptoms"] == 3
        assert p["percent"] == pytest.approx(p["confidence"] * 100)


def test_predict_empty(client):
    r = client.post("/predict", json={"symptoms": []})
    assert r.status_code == 200
    assert r.json()["predictions"] == []
    r = client.post("/predict", json={"symptoms": ["  ", ""]})
    assert r.json()["predictions"] == []


def test_predict_top_n_validation(client):
    assert client.post("/predict", json={"symptoms": ["fever"], "top_n": 0}).status_code == 422
    assert client.post("/predict", json={"symptoms": ["fever"], "top_n": 10_000}).status_code == 422


def test_disease_detail(client):
    body = client.get("/diseases/Flu").json()
    assert body["name"] == "Flu"
    assert body["neighbors"][0] == {"disease": "COVID-19", "shared_symptoms": 3}
    assert 0.0 <= body["rank"] <= 1.0
    assert client.get("/diseases/Nope").status_code == 404


def test_rank(client):
    rows = client.get("/rank", params={"limit": 3}).json()
    assert [r["rank"] for r in rows] == [1, 2, 3]
    assert rows[0]["score"] == 1.0


def test_unavailable_engine(client, monkeypatch):
    monkeypatch.setattr(backend, "ENGINE", None)
    assert client.post("/predict", json={"symptoms": ["fever"]}).status_code == 503
    assert client.get("/health").json()["ok"] is False
