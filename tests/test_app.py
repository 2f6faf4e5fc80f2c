"""Tests for the HTTP session bridge."""


class TestHttpBridge:
    def test_health(self, client) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_state(self, client) -> None:
        body = client.get("/state").json()
        assert body["mode"] == "Interval"
        assert body["challenge_type"] == "interval"
        assert body["hint"] == "F#3"
        assert len(body["choices"]) == 13
        assert body["choice_names"]["P5"] == "perfect fifth"
        assert body["score"] == {"correct": 0, "total": 0}

    def test_answer_round_trip(self, client) -> None:
        response = client.post("/answer", json={"answer": "P1"})
        assert response.status_code == 200
        body = response.json()
        assert body["result"]["verdict"] == {"is_correct": True, "correct_label": "P1"}
        assert body["result"]["next_in_ms"] == 900
        assert body["state"]["score"] == {"correct": 1, "total": 1}
        assert body["state"]["message"] == "Correct!"

    def test_switch_mode_and_answer_chord(self, client) -> None:
        body = client.post("/mode", json={"mode": "Chord"}).json()
        assert body["challenge_type"] == "chord"
        result = client.post("/answer", json={"answer": "F#3 min"}).json()["result"]
        assert result["verdict"] == {"is_correct": False, "correct_label": "F#3 maj"}
        assert result["message"] == "Wrong - correct: F#3 maj"

    def test_unknown_answer_is_bad_request(self, client) -> None:
        response = client.post("/answer", json={"answer": "X9"})
        assert response.status_code == 400
        assert client.get("/state").json()["score"] == {"correct": 0, "total": 0}

    def test_unknown_mode_is_bad_request(self, client) -> None:
        response = client.post("/mode", json={"mode": "Rhythm"})
        assert response.status_code == 400

    def test_missing_answer_field(self, client) -> None:
        response = client.post("/answer", json={})
        assert response.status_code == 422

    def test_answer_without_challenge_conflicts(self, client, session) -> None:
        session.challenge = None
        response = client.post("/answer", json={"answer": "P1"})
        assert response.status_code == 409
        assert client.get("/replay").status_code == 409

    def test_play_returns_plan(self, client) -> None:
        client.post("/mode", json={"mode": "Scale"})
        body = client.post("/play").json()
        assert body["state"]["challenge_type"] == "scale"
        plan = body["plan"]
        assert len(plan) == 8
        assert plan[0] == {"pitch": "F#3", "inter_note_delay_ms": 80, "duration": "16n"}
        assert plan[-1]["inter_note_delay_ms"] == 0

    def test_replay_plan(self, client) -> None:
        plan = client.get("/replay").json()["plan"]
        assert [step["pitch"] for step in plan] == ["F#3", "F#3"]
        assert plan[0]["inter_note_delay_ms"] == 250

    def test_next_clears_message(self, client) -> None:
        client.post("/answer", json={"answer": "m2"})
        body = client.post("/next").json()
        assert body["message"] == ""
        assert body["score"] == {"correct": 0, "total": 1}

    def test_reset(self, client) -> None:
        client.post("/answer", json={"answer": "P1"})
        body = client.post("/reset").json()
        assert body["score"] == {"correct": 0, "total": 0}
        assert body["message"] == ""
