from fastapi.testclient import TestClient

from api.main import app

client = TestClient(app)


def test_stats_on_empty_ledger():
    response = client.get("/stats")
    assert response.status_code == 200
    assert response.json() == {"count_mutant_dna": 0, "count_human_dna": 0, "ratio": 0.0}


def test_stats_count_distinct_submissions(mutant_dna, human_dna):
    client.post("/mutant", json={"dna": mutant_dna})
    client.post("/mutant", json={"dna": mutant_dna})
    client.post("/mutant", json={"dna": human_dna})
    client.post("/mutant", json={"dna": ["TTTT", "TTTT", "TTTT", "TTTT"]})

    data = client.get("/stats").json()
    assert data["count_mutant_dna"] == 2
    assert data["count_human_dna"] == 1
    assert data["ratio"] == 2 / 3
