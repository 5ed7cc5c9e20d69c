from conftest import FixedChoice
from wordle_round import create_app
from wordle_round.config.app_config import Config, TestingConfig
from wordle_round.services.session_store import get_session_store, initialize_session_store


def new_game(client):
    resp = client.post("/api/new_game")
    assert resp.status_code == 200
    return resp.get_json()["game_id"]


def press(client, game_id, key):
    return client.post(f"/api/game/{game_id}/key", json={"key": key})


def test_new_game(client):
    resp = client.post("/api/new_game")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["success"]
    assert data["state"]["attempt_count"] == 0
    assert data["state"]["board"] == []
    assert data["state"]["game_state"] == "playing"
    assert data["state"]["answer"] is None
    assert len(get_session_store()) == 1


def test_set_guess_and_submit(client):
    game_id = new_game(client)

    resp = client.put(f"/api/game/{game_id}/guess", json={"text": "CRA"})
    data = resp.get_json()
    assert data["applied"]
    assert data["state"]["current_guess"] == "cra"

    resp = client.put(f"/api/game/{game_id}/guess", json={"text": "cr@"})
    assert not resp.get_json()["applied"]

    resp = client.post(f"/api/game/{game_id}/submit")
    data = resp.get_json()
    assert data["outcome"] == "invalid_length"
    assert data["state"]["message"] == "Enter a 5-letter word."
    assert data["state"]["attempt_count"] == 0

    client.put(f"/api/game/{game_id}/guess", json={"text": "crate"})
    data = client.post(f"/api/game/{game_id}/submit").get_json()
    assert data["outcome"] == "accepted"
    assert data["state"]["board"] == [
        {"guess": "crate", "result": ["correct", "correct", "correct", "absent", "correct"]}
    ]
    assert data["state"]["keyboard_hints"]["t"] == "absent"


def test_virtual_keyboard_win(client):
    game_id = new_game(client)
    for key in ["c", "r", "a", "n", "e"]:
        assert press(client, game_id, key).get_json()["applied"]

    data = press(client, game_id, "Enter").get_json()
    assert data["state"]["game_state"] == "won"
    assert data["state"]["answer"] == "crane"
    assert data["state"]["message"] == "Congratulations! You guessed it!"

    assert not press(client, game_id, "a").get_json()["applied"]


def test_unknown_word(client):
    game_id = new_game(client)
    client.put(f"/api/game/{game_id}/guess", json={"text": "zzzzz"})
    data = client.post(f"/api/game/{game_id}/submit").get_json()
    assert data["outcome"] == "not_in_dictionary"
    assert data["state"]["message"] == "Not in word list!"


def test_state_and_reset(client):
    game_id = new_game(client)
    client.put(f"/api/game/{game_id}/guess", json={"text": "plant"})
    client.post(f"/api/game/{game_id}/submit")

    data = client.get(f"/api/game/{game_id}/state").get_json()
    assert data["state"]["attempt_count"] == 1

    data = client.post(f"/api/game/{game_id}/reset").get_json()
    assert data["success"]
    assert data["state"]["attempt_count"] == 0
    assert data["state"]["board"] == []
    assert data["state"]["keyboard_hints"] == {}


def test_bad_requests(client):
    game_id = new_game(client)
    assert client.put(f"/api/game/{game_id}/guess", json={}).status_code == 400
    assert client.post(f"/api/game/{game_id}/key", json={"key": 5}).status_code == 400
    assert client.post(f"/api/game/{game_id}/key", data="nope").status_code == 400


def test_unknown_game(client):
    assert client.get("/api/game/missing/state").status_code == 404
    assert client.post("/api/game/missing/submit").status_code == 404
    assert client.post("/api/game/missing/reset").status_code == 404
    assert client.post("/api/game/missing/key", json={"key": "a"}).status_code == 404


def test_delete_game(client):
    game_id = new_game(client)
    resp = client.delete(f"/api/game/{game_id}")
    assert resp.status_code == 200
    assert resp.get_json()["success"]
    assert client.get(f"/api/game/{game_id}/state").status_code == 404
    assert client.delete(f"/api/game/{game_id}").status_code == 404


def test_health(client):
    new_game(client)
    data = client.get("/api/health").get_json()
    assert data["status"] == "healthy"
    assert data["active_games"] == 1
    assert data["dictionary"]["total_words"] == 12


def test_letter_budget_flag_reaches_new_games(dictionary, monkeypatch):
    monkeypatch.setattr(Config, "LETTER_BUDGET_FEEDBACK", True)
    initialize_session_store(dictionary, rng=FixedChoice("crane"))
    app, _ = create_app(TestingConfig)
    client = app.test_client()

    game_id = new_game(client)
    client.put(f"/api/game/{game_id}/guess", json={"text": "eerie"})
    data = client.post(f"/api/game/{game_id}/submit").get_json()
    assert data["state"]["board"][0]["result"] == ["absent", "absent", "present", "absent", "correct"]


def test_reference_feedback_by_default(client):
    game_id = new_game(client)
    client.put(f"/api/game/{game_id}/guess", json={"text": "eerie"})
    data = client.post(f"/api/game/{game_id}/submit").get_json()
    assert data["state"]["board"][0]["result"] == ["present", "present", "present", "absent", "correct"]
