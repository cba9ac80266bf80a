from fastapi.testclient import TestClient

from dictionary_api.app.main import app


def _add(client, word, meaning="meaning", **extra):
    return client.post("/api/v1/words/", json={"word": word, "meaning": meaning, **extra})


def test_add_returns_created_entry_with_defaults(client):
    resp = _add(client, "  Serendipity ", "a happy accident")
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Word added!"
    assert body["word"]["word"] == "serendipity"
    assert body["word"]["language"] == "unknown"
    assert body["word"]["addedBy"] == "anonymous"


def test_add_accepts_language_and_contributor(client):
    resp = _add(client, "gato", "cat", language="Spanish", addedBy="lu")
    assert resp.status_code == 201
    assert resp.json()["word"]["language"] == "Spanish"
    assert resp.json()["word"]["addedBy"] == "lu"


def test_add_missing_fields_is_invalid_input(client):
    resp = client.post("/api/v1/words/", json={"word": "cat"})
    assert resp.status_code == 400
    assert resp.json()["kind"] == "invalid_input"
    assert resp.json()["error"]

    resp = client.post("/api/v1/words/", json={"word": "  ", "meaning": "x"})
    assert resp.status_code == 400


def test_add_wrong_types_is_invalid_input(client):
    resp = client.post("/api/v1/words/", json={"word": ["cat"], "meaning": "x"})
    assert resp.status_code == 400
    assert resp.json()["kind"] == "invalid_input"


def test_duplicate_add_is_conflict(client):
    assert _add(client, "cat", "a small feline").status_code == 201
    resp = _add(client, "CAT", "a tiger")
    assert resp.status_code == 409
    assert resp.json()["kind"] == "conflict"
    assert client.get("/api/v1/words/cat").json()["meaning"] == "a small feline"


def test_define_variants_and_not_found(client):
    _add(client, "Hello", "a greeting")
    resp = client.get("/api/v1/words/HELLO")
    assert resp.status_code == 200
    assert resp.json()["word"] == "hello"
    assert resp.json()["meaning"] == "a greeting"

    resp = client.get("/api/v1/words/goodbye")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Word not found", "kind": "not_found"}


def test_update_and_delete(client):
    _add(client, "cat", "a small feline")
    resp = client.put("/api/v1/words/Cat", json={"meaning": "a domestic feline", "addedBy": "zoe"})
    assert resp.status_code == 200
    assert resp.json()["meaning"] == "a domestic feline"
    assert resp.json()["addedBy"] == "zoe"
    assert resp.json()["language"] == "unknown"

    resp = client.delete("/api/v1/words/CAT")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Word deleted", "word": "cat"}
    assert client.get("/api/v1/words/cat").status_code == 404
    assert client.delete("/api/v1/words/cat").status_code == 404


def test_update_missing_word_is_not_found(client):
    resp = client.put("/api/v1/words/ghost", json={"meaning": "boo"})
    assert resp.status_code == 404
    assert client.get("/api/v1/words/ghost").status_code == 404


def test_update_blank_meaning_is_invalid_input(client):
    _add(client, "cat", "a small feline")
    resp = client.put("/api/v1/words/cat", json={"meaning": " "})
    assert resp.status_code == 400


def test_suggest(client):
    for word in ["car", "cat", "cap", "dog", "cab", "cam", "can"]:
        _add(client, word)
    resp = client.get("/api/v1/suggest", params={"q": "Ca"})
    assert resp.status_code == 200
    words = resp.json()
    assert len(words) == 5
    assert "dog" not in words
    assert all(w.startswith("ca") for w in words)

    assert client.get("/api/v1/suggest", params={"q": "do"}).json() == ["dog"]
    assert client.get("/api/v1/suggest", params={"q": "c"}).json() == []
    assert client.get("/api/v1/suggest", params={"q": " "}).json() == []
    assert client.get("/api/v1/suggest").json() == []


def test_legacy_routes_share_behavior(client):
    resp = client.post("/add", json={"word": "Cat", "meaning": "a small feline", "language": "English"})
    assert resp.status_code == 201
    assert client.post("/add", json={"word": "cat", "meaning": "x"}).status_code == 409
    assert client.get("/define/CAT").json()["language"] == "English"
    assert client.get("/define/dog").status_code == 404
    assert client.get("/suggest", params={"q": "ca"}).json() == ["cat"]


def test_health_reports_word_count(client):
    _add(client, "cat")
    resp = client.get("/api/v1/health/")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "words": 1}


def test_storage_failure_is_not_masked_as_not_found(broken_db):
    # No context manager: startup would try to migrate the broken path.
    client = TestClient(app)
    resp = client.get("/api/v1/words/cat")
    assert resp.status_code == 503
    assert resp.json()["kind"] == "storage_unavailable"
    assert client.get("/api/v1/health/").status_code == 503
    assert client.get("/api/v1/suggest", params={"q": "cat"}).json() == []


def test_word_named_suggest_is_reachable(client):
    assert _add(client, "suggest", "to propose").status_code == 201
    resp = client.get("/api/v1/words/suggest")
    assert resp.status_code == 200
    assert resp.json()["meaning"] == "to propose"
    assert client.get("/define/Suggest").json()["word"] == "suggest"
    assert client.get("/api/v1/suggest", params={"q": "sug"}).json() == ["suggest"]
    assert client.delete("/api/v1/words/suggest").status_code == 200
