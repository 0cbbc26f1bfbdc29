import httpx
import pytest
from fastapi.testclient import TestClient

from conftest import gemini_transport
from wordpilot.corrector import FAILURE_MESSAGE, TextCorrector
from wordpilot.main import app, get_corrector


@pytest.fixture
def use_transport(settings):
    def install(transport):
        corrector = TextCorrector(settings, transport=transport)
        app.dependency_overrides[get_corrector] = lambda: corrector
        return TestClient(app)

    yield install
    app.dependency_overrides.clear()


def test_correct_json(use_transport):
    client = use_transport(gemini_transport("Main **Karachi** ja raha hoon"))
    resp = client.post("/correct", json={"text": "I am going to Karachi", "mode": "Roman Urdu"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["corrected_text"] == "Main Karachi ja raha hoon"
    assert data["untranslatable_words"] == ["Karachi"]
    assert data["mode"] == "Roman Urdu"
    assert data["notice"] is None


def test_correct_json_empty_text(use_transport):
    calls = []
    client = use_transport(gemini_transport("unused", calls=calls))
    resp = client.post("/correct", json={"text": "   ", "mode": "Prompt Enhance"})
    assert resp.status_code == 200
    assert resp.json()["corrected_text"] == ""
    assert resp.json()["is_translated"] is False
    assert resp.json()["untranslatable_words"] == []
    assert calls == []


def test_correct_json_failure_carries_notice(use_transport):
    client = use_transport(gemini_transport(error=httpx.ConnectError))
    resp = client.post("/correct", json={"text": "bonjour"})
    data = resp.json()
    assert data["corrected_text"] == "bonjour"
    assert data["mode"] == "English"
    assert data["notice"] == FAILURE_MESSAGE


def test_correct_json_rejects_unknown_mode(use_transport):
    client = use_transport(gemini_transport("x"))
    resp = client.post("/correct", json={"text": "hi", "mode": "Klingon"})
    assert resp.status_code == 422


def test_home_page(use_transport):
    client = use_transport(gemini_transport("x"))
    resp = client.get("/")
    assert resp.status_code == 200
    assert "Word Pilot" in resp.text
    assert "Translated text will appear here" in resp.text


def test_form_post_highlights_words(use_transport):
    client = use_transport(gemini_transport("Call **<Ali>** at the office"))
    resp = client.post("/", data={"text": "Ali ko office pe call karo", "mode": "English"})
    assert resp.status_code == 200
    assert '<span class="untranslatable">&lt;Ali&gt;</span>' in resp.text
    assert "**" not in resp.text.split('id="output"')[1].split("</div>")[0]


def test_form_post_failure_shows_notice(use_transport):
    client = use_transport(gemini_transport(status=500, payload={"error": {"message": "internal"}}))
    resp = client.post("/", data={"text": "bonjour", "mode": "Prompt Enhance"})
    assert resp.status_code == 200
    assert FAILURE_MESSAGE in resp.text
    assert "bonjour" in resp.text


def test_healthz(use_transport):
    client = use_transport(gemini_transport("x"))
    assert client.get("/healthz").json() == {"status": "ok", "model": "gemini-test"}


def test_correct_json_unencodable_text_is_echoed(use_transport):
    client = use_transport(gemini_transport("ok"))
    resp = client.post(
        "/correct",
        content=b'{"text": "hi \\ud800"}',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["corrected_text"] == "hi \ud800"
    assert data["untranslatable_words"] == []
    assert data["notice"] == FAILURE_MESSAGE
