from fastapi.testclient import TestClient

from birth_number.presentation.api.main import app

client = TestClient(app)


def test_health():
    assert client.get("/health").json() == {"status": "ok"}


def test_get_birth_number():
    resp = client.get("/v1/birth-numbers/01017000027")
    assert resp.status_code == 200
    body = resp.json()
    assert body["birth_date"] == "1970-01-01"
    assert body["personal_number"] == "00027"
    assert body["valid"] is True


def test_get_birth_number_rejects_bad_format():
    resp = client.get("/v1/birth-numbers/0101700002")
    assert resp.status_code == 422


def test_validate_batch():
    resp = client.post("/v1/birth-numbers/validate", json={"numbers": ["01017000027", "23"]})
    assert resp.status_code == 200
    body = resp.json()
    assert body["valid"] == 1
    assert body["invalid"] == 1
    assert body["items"][1] == {"number": "23", "valid": False}


def test_validate_batch_requires_list():
    resp = client.post("/v1/birth-numbers/validate", json={"numbers": "01017000027"})
    assert resp.status_code == 422


def test_metrics_counts_validations():
    client.get("/v1/birth-numbers/12056647528")
    resp = client.get("/metrics")
    assert resp.status_code == 200
    assert "birth_number_validations_total" in resp.text
