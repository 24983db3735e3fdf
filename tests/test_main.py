# tests/test_main.py
from fastapi.testclient import TestClient
from doctranslate.main import app

def test_root():
    with TestClient(app) as client:
        response = client.get("/")
        assert response.status_code == 200
        assert response.json() == {"message": "DocTranslate API is running"}
