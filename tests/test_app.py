"""Tests for the Flask routes."""

import pytest

import main
from config import Settings
from engine import PlaybackState, PollingScheduler

from conftest import FakeClock


@pytest.fixture
def app_clock(monkeypatch) -> FakeClock:
    clock = FakeClock()
    monkeypatch.setattr(main, "PollingScheduler", lambda: PollingScheduler(clock=clock))
    return clock


@pytest.fixture
def client(app_clock):
    main.app.config["TESTING"] = True
    main._SESSIONS.clear()
    with main.app.test_client() as c:
        yield c
    main._SESSIONS.clear()


def _run(client, algo_key="linear_search", form=None):
    body = {"algo_key": algo_key}
    if form is not None:
        body["form"] = form
    return client.post("/api/run", json=body)


LINEAR_FORM = {"array": "1, 2, 3, 4, 5", "target": "5"}


def test_index_renders_page(client) -> None:
    resp = client.get("/")
    assert resp.status_code == 200
    page = resp.get_data(as_text=True)
    assert 'id="algo-selector"' in page
    assert "Run an algorithm to start." in page


def test_algorithm_listing(client) -> None:
    data = client.get("/api/algorithms").get_json()
    keys = [a["key"] for a in data]
    assert "dijkstra" in keys
    assert len(keys) == 31
    bubble = next(a for a in data if a["key"] == "bubble_sort")
    assert bubble["fields"] == ["array"]
    assert bubble["random_input"] is True


def test_run_installs_trace_ready(client) -> None:
    resp = _run(client, form=LINEAR_FORM)
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["state"] == "ready"
    assert data["index"] == 0
    assert data["total_steps"] == 7
    assert data["snapshot"]["step_number"] == 0
    assert "Analytics" in data["analytics"]
    assert 'class="frame"' in data["canvas"]


def test_run_with_sample_form_when_none_given(client) -> None:
    data = _run(client, "bubble_sort").get_json()
    assert data["state"] == "ready"
    assert data["total_steps"] > 2


def test_bad_input_names_the_field(client) -> None:
    resp = _run(client, form={"array": "1, x", "target": "1"})
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["field"] == "array"
    assert "not an integer" in body["error"]


def test_non_object_form_is_rejected(client) -> None:
    resp = client.post("/api/run", json={"algo_key": "linear_search", "form": [1, 2]})
    assert resp.status_code == 400
    assert resp.get_json()["field"] == "form"


def test_unknown_algorithm_is_rejected(client) -> None:
    resp = _run(client, "bogo_sort")
    assert resp.status_code == 400
    assert "Unknown algorithm" in resp.get_json()["error"]


def test_failed_run_keeps_previous_trace(client) -> None:
    _run(client, form=LINEAR_FORM)
    _run(client, form={"array": "", "target": ""})
    data = client.get("/api/state").get_json()
    assert data["total_steps"] == 7


def test_step_and_seek(client) -> None:
    _run(client, form=LINEAR_FORM)
    data = client.post("/api/step/next").get_json()
    assert (data["ok"], data["index"], data["state"]) == (True, 1, "paused")
    data = client.post("/api/step/prev").get_json()
    assert data["index"] == 0
    data = client.post("/api/seek", json={"index": 6}).get_json()
    assert data["state"] == "complete"
    assert data["snapshot"]["is_final"] is True
    assert "Result" in data["result"]
    assert client.post("/api/seek", json={"index": 99}).get_json()["ok"] is False
    assert client.post("/api/seek", json={"index": "x"}).status_code == 400


def test_controls_before_run_are_refused(client) -> None:
    data = client.post("/api/play").get_json()
    assert data["ok"] is False
    assert data["state"] == "idle"
    assert data["snapshot"] is None


def test_play_then_poll_advances(client, app_clock) -> None:
    _run(client, form=LINEAR_FORM)
    client.post("/api/speed", json={"preset": "turbo"})
    data = client.post("/api/play").get_json()
    assert (data["ok"], data["state"]) == (True, "playing")

    app_clock.advance(0.125)
    data = client.get("/api/state").get_json()
    assert data["ticks"] == 2
    assert data["index"] == 2

    app_clock.advance(10)
    data = client.get("/api/state").get_json()
    assert data["state"] == "complete"
    assert data["index"] == 6


def test_pause_stops_playback(client, app_clock) -> None:
    _run(client, form=LINEAR_FORM)
    client.post("/api/speed", json={"preset": "turbo"})
    client.post("/api/play")
    app_clock.advance(0.0625)
    data = client.post("/api/pause").get_json()
    assert (data["ok"], data["state"], data["index"]) == (True, "paused", 1)
    app_clock.advance(10)
    assert client.get("/api/state").get_json()["index"] == 1


def test_reset_keeps_or_drops_trace(client) -> None:
    _run(client, form=LINEAR_FORM)
    client.post("/api/seek", json={"index": 3})
    data = client.post("/api/reset", json={}).get_json()
    assert (data["state"], data["index"]) == ("ready", 0)
    data = client.post("/api/reset", json={"keep_trace": False}).get_json()
    assert data["state"] == "idle"
    assert data["total_steps"] == 0


def test_speed_presets_and_milliseconds(client) -> None:
    assert client.post("/api/speed", json={"preset": "slow"}).get_json() == {"speed_ms": 1000}
    assert client.post("/api/speed", json={"ms": 5}).get_json() == {"speed_ms": 20}
    assert client.post("/api/speed", json={"preset": "warp"}).status_code == 400
    resp = client.post("/api/speed", json={"ms": "fast"})
    assert resp.status_code == 400
    assert resp.get_json()["field"] == "ms"


def test_select_algorithm_resets_to_idle(client) -> None:
    _run(client, form=LINEAR_FORM)
    data = client.post("/api/config/algo", json={"algo_key": "dfs"}).get_json()
    assert data["algo_key"] == "dfs"
    assert data["state"] == "idle"
    assert "<textarea" in data["form"]
    assert "Depth-First Search" in data["pseudocode"]


def test_random_inputs_are_seeded(client) -> None:
    client.post("/api/config/algo", json={"algo_key": "binary_search"})
    first = client.post("/api/inputs/random", json={"seed": 42, "size": 8}).get_json()
    second = client.post("/api/inputs/random", json={"seed": 42, "size": 8}).get_json()
    assert first["values"] == second["values"]
    values = [int(v) for v in first["values"]["array"].split(", ")]
    assert values == sorted(values)
    assert len(values) == 8
    assert int(first["values"]["target"]) in values
    assert _run(client, "binary_search", first["values"]).get_json()["state"] == "ready"


def test_random_graph_input_for_graph_algorithms(client) -> None:
    client.post("/api/config/algo", json={"algo_key": "dijkstra"})
    first = client.post("/api/inputs/random", json={"seed": 5, "size": 6}).get_json()
    second = client.post("/api/inputs/random", json={"seed": 5, "size": 6}).get_json()
    assert first["values"] == second["values"]
    assert first["values"]["start"] == "A"
    assert len(first["values"]["graph"].splitlines()) == 6
    data = _run(client, "dijkstra", first["values"]).get_json()
    assert data["state"] == "ready"


def test_random_inputs_refused_without_a_generator(client) -> None:
    client.post("/api/config/algo", json={"algo_key": "knapsack"})
    assert client.post("/api/inputs/random", json={"seed": 1}).status_code == 400


def test_compare_within_a_family(client) -> None:
    resp = client.post(
        "/api/compare",
        json={"left": "binary_search", "right": "linear_search", "form": {"array": "1 2 3 4 5 6 7 8", "target": "8"}},
    )
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["winner_steps"] == "Binary Search"
    assert data["left"]["label"] == "Binary Search"
    assert "Comparison" in data["comparison"]


def test_compare_across_families_is_rejected(client) -> None:
    resp = client.post("/api/compare", json={"left": "bubble_sort", "right": "bfs"})
    assert resp.status_code == 400
    assert "same family" in resp.get_json()["error"]


def test_sessions_are_isolated(client) -> None:
    _run(client, form=LINEAR_FORM)
    with main.app.test_client() as other:
        assert other.get("/api/state").get_json()["state"] == "idle"
    assert client.get("/api/state").get_json()["state"] == "ready"


def test_least_recently_used_sessions_are_dropped(client, monkeypatch) -> None:
    monkeypatch.setattr(main, "get_settings", lambda: Settings(max_sessions=2))
    _run(client, form=LINEAR_FORM)
    first = next(iter(main._SESSIONS.values()))
    client.post("/api/speed", json={"preset": "turbo"})
    client.post("/api/play")
    assert first.controller.state is PlaybackState.PLAYING

    for _ in range(2):
        with main.app.test_client() as other:
            other.get("/api/state")
    assert len(main._SESSIONS) == 2
    assert first not in main._SESSIONS.values()
    assert first.controller.state is PlaybackState.PAUSED
    assert client.get("/api/state").get_json()["state"] == "idle"


def test_idle_sessions_expire(client, monkeypatch, app_clock) -> None:
    monkeypatch.setattr(main, "get_settings", lambda: Settings(session_ttl=60))
    monkeypatch.setattr(main, "_clock", app_clock)
    _run(client, form=LINEAR_FORM)
    app_clock.advance(30)
    assert client.get("/api/state").get_json()["state"] == "ready"

    other = main.app.test_client()
    other.get("/api/state")
    app_clock.advance(61)
    assert client.get("/api/state").get_json()["state"] == "ready"
    assert len(main._SESSIONS) == 1
