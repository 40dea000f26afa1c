"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from api import app


@pytest.fixture
def client():
    return TestClient(app)


SUM = {
    "type": "infixop",
    "children": [{"text": "3"}, {"text": "+"}, {"text": "21"}],
}


class TestSpeechEndpoint:

    def test_generate(self, client):
        resp = client.post("/api/speech", json={"tree": SUM, "locale": "es"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["speech"] == "tres más veintiuno"
        assert body["locale"] == "es"
        assert body["tree"]["children"][1]["role"] == "addition"

    def test_unknown_domain_is_404(self, client):
        resp = client.post("/api/speech", json={"tree": SUM, "domain": "nothing"})
        assert resp.status_code == 404

    def test_malformed_tree_is_422(self, client):
        resp = client.post("/api/speech", json={"tree": {"type": "hologram"}})
        assert resp.status_code == 422

    def test_superscript_digit_is_not_malformed(self, client):
        tree = {"type": "superscript", "children": [{"text": "x"}, {"text": "²"}]}
        resp = client.post("/api/speech", json={"tree": tree, "locale": "en"})
        assert resp.status_code == 200
        assert resp.json()["speech"] == "x raised to the ² power"

    def test_missing_tree_is_422(self, client):
        assert client.post("/api/speech", json={}).status_code == 422


class TestMeaningEndpoint:

    def test_known_glyph(self, client):
        body = client.get("/api/meaning/+").json()
        assert body["type"] == "operator"
        assert body["role"] == "addition"

    def test_secondary(self, client):
        body = client.get("/api/meaning/d").json()
        assert "d" in body["secondary"]

    def test_unknown_glyph(self, client):
        body = client.get("/api/meaning/%E2%98%83").json()  # snowman
        assert body == {
            "glyph": "☃",
            "type": "unknown",
            "role": "unknown",
            "font": "unknown",
            "secondary": {},
        }


class TestNumbersEndpoint:

    def test_number_words(self, client):
        body = client.get("/api/numbers/fr/80").json()
        assert body["cardinal"] == "quatre-vingts"
        assert body["ordinal"] == "quatre-vingtième"
        assert body["simple_ordinal"] == "80e"

    def test_unknown_locale(self, client):
        assert client.get("/api/numbers/de/3").status_code == 404

    def test_negative(self, client):
        assert client.get("/api/numbers/en/-3").status_code == 422


class TestLocalesEndpoint:

    def test_lists_rule_sets(self, client):
        body = client.get("/api/locales").json()
        assert set(body) == {"en", "es", "fr"}
        assert {"domain": "mathspeak", "style": "brief"} in body["en"]
