"""
main.py — AlgoTrace Flask App
==============================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  GET  /api/algorithms         – registry listing
  POST /api/config/algo        – select algorithm (input form + pseudocode)
  POST /api/inputs/random      – seeded random array or graph input
  POST /api/run                – validate inputs, materialize, install trace
  POST /api/play               – start auto-advance
  POST /api/pause              – stop auto-advance
  POST /api/reset              – back to step 0 (or idle)
  POST /api/speed              – change speed (preset name or ms)
  POST /api/seek               – jump to step N
  POST /api/step/next          – advance one step
  POST /api/step/prev          – rewind one step
  GET  /api/state              – fire due ticks, return the current frame
  POST /api/compare            – run two algorithms on one input, compare

State management:
  The Flask session cookie only carries a session id.  Everything else
  lives server-side in _SESSIONS, one entry per browser:
    • controller      – PlaybackController holding the installed Trace
    • scheduler       – PollingScheduler feeding the controller's ticks
    • algo_key        – selected algorithm
    • form            – last submitted input values
  Each entry has its own lock; the controller is driven by one request
  at a time.  Entries idle longer than session_ttl, or beyond
  max_sessions (least recently used first), are dropped and their
  controllers closed.
"""

import logging
import secrets
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, render_template_string, request, session

import inputs
from algorithms import AlgoInfo, list_algorithms, require_algorithm
from config import get_settings
from engine import (
    PlaybackController,
    PollingScheduler,
    ProducerContractError,
    SPEED_PRESETS,
    compare,
    materialize,
)
from inputs import InputError
from structures import Graph
from logging_setup import init_logging
from ui import (
    render_snapshot,
    playback_controls,
    algorithm_selector,
    input_form,
    pseudocode_viewer,
    message_panel,
    result_panel,
    analytics_panel,
    comparison_panel,
)

logger = logging.getLogger(__name__)

DEFAULT_ALGO = "binary_search"

app = Flask(__name__)
app.secret_key = get_settings().secret_key or secrets.token_hex(32)


# ---------------------------------------------------------------------------
# Server-side session registry
# ---------------------------------------------------------------------------
@dataclass
class UserSession:
    controller: PlaybackController
    scheduler:  PollingScheduler
    algo_key:   str                = DEFAULT_ALGO
    trace_key:  Optional[str]      = None   # algorithm that produced the installed trace
    form:       Dict[str, Any]     = field(default_factory=dict)
    last_seen:  float              = 0.0
    lock:       threading.Lock     = field(default_factory=threading.Lock)


# least recently used first
_SESSIONS: "OrderedDict[str, UserSession]" = OrderedDict()
_SESSIONS_LOCK = threading.Lock()
_clock = time.monotonic


def _new_session() -> UserSession:
    scheduler = PollingScheduler()
    speed = SPEED_PRESETS.get(get_settings().default_speed, SPEED_PRESETS["medium"])
    return UserSession(controller=PlaybackController(scheduler, speed_ms=speed), scheduler=scheduler)


def _expire_sessions(now: float, max_sessions: int, ttl: float) -> List[UserSession]:
    """Pop idle and overflow sessions; caller holds _SESSIONS_LOCK."""
    dropped = []
    while _SESSIONS:
        sid, oldest = next(iter(_SESSIONS.items()))
        if now - oldest.last_seen <= ttl and len(_SESSIONS) <= max_sessions:
            break
        del _SESSIONS[sid]
        dropped.append(oldest)
    return dropped


def get_user_session() -> UserSession:
    """The caller's UserSession, created on first use."""
    settings = get_settings()
    now = _clock()
    sid = session.get("sid")
    with _SESSIONS_LOCK:
        if sid is None or sid not in _SESSIONS:
            sid = secrets.token_hex(16)
            session["sid"] = sid
            _SESSIONS[sid] = _new_session()
        us = _SESSIONS[sid]
        us.last_seen = now
        _SESSIONS.move_to_end(sid)
        dropped = _expire_sessions(now, settings.max_sessions, settings.session_ttl)
    for old in dropped:
        with old.lock:
            old.controller.close()
    if dropped:
        logger.info("Dropped %d idle session(s), %d live", len(dropped), len(_SESSIONS))
    return us


def _json() -> Dict[str, Any]:
    return request.get_json(silent=True) or {}


def _form(data: Dict[str, Any], info: AlgoInfo) -> Dict[str, Any]:
    form = data.get("form") or info.sample_form()
    if not isinstance(form, dict):
        raise InputError("form", "expected an object of field values")
    return form


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------
@app.errorhandler(InputError)
def handle_input_error(exc: InputError):
    logger.info("Rejected input for %s: %s", exc.field, exc.message)
    return jsonify({"error": exc.message, "field": exc.field}), 400


@app.errorhandler(ValueError)
def handle_value_error(exc: ValueError):
    logger.info("Rejected request: %s", exc)
    return jsonify({"error": str(exc)}), 400


@app.errorhandler(ProducerContractError)
def handle_contract_error(exc: ProducerContractError):
    logger.exception("Producer broke its contract")
    return jsonify({"error": str(exc)}), 500


# ---------------------------------------------------------------------------
# Frame payload: what every playback route returns
# ---------------------------------------------------------------------------
def frame_payload(us: UserSession, **extra: Any) -> Dict[str, Any]:
    ctl = us.controller
    snap = ctl.current
    info = require_algorithm(us.trace_key or us.algo_key)
    payload = {
        "canvas":      render_snapshot(snap),
        "pseudocode":  pseudocode_viewer(
            pseudocode_lines=info.pseudocode,
            current_line=snap.pseudocode_line if snap else None,
            algo_label=info.label,
        ),
        "message":     message_panel(snap.message if snap else ""),
        "result":      result_panel(snap.result if snap else None),
        "playback":    playback_controls(ctl.state, ctl.index, ctl.total_steps, ctl.speed_ms),
        "snapshot":    snap.to_dict() if snap else None,
    }
    payload.update(ctl.status())
    payload.update(extra)
    return payload


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    us = get_user_session()
    with us.lock:
        info = require_algorithm(us.algo_key)
        frame = frame_payload(us)
        html = render_template_string(
            INDEX_TEMPLATE,
            canvas=frame["canvas"],
            playback=frame["playback"],
            algo_selector=algorithm_selector(list_algorithms(), selected_key=us.algo_key),
            form=input_form(info, us.form or None),
            pseudocode=frame["pseudocode"],
            message=frame["message"],
            result=frame["result"],
            analytics=analytics_panel(us.controller.trace.metrics if us.controller.trace else None),
            comparison=comparison_panel(),
            description=info.description,
        )
    return html


# ---------------------------------------------------------------------------
# API: Registry & Config
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    return jsonify([
        {
            "key": a.key,
            "label": a.label,
            "family": a.family,
            "tags": a.tags,
            "complexity_time": a.complexity_time,
            "complexity_space": a.complexity_space,
            "description": a.description,
            "fields": [f.name for f in a.fields],
            "random_input": a.has_random_input,
        }
        for a in list_algorithms()
    ])


@app.route("/api/config/algo", methods=["POST"])
def api_config_algo():
    info = require_algorithm(str(_json().get("algo_key", DEFAULT_ALGO)))
    us = get_user_session()
    with us.lock:
        us.algo_key = info.key
        us.form = {}
        us.trace_key = None
        us.controller.reset(keep_trace=False)
        return jsonify({
            "algo_key": info.key,
            "form": input_form(info),
            "description": info.description,
            **frame_payload(us),
        })


@app.route("/api/inputs/random", methods=["POST"])
def api_inputs_random():
    data = _json()
    us = get_user_session()
    with us.lock:
        info = require_algorithm(us.algo_key)
        if not info.has_random_input:
            raise ValueError(f"{info.label} has no random input")
        settings = get_settings()
        rng = inputs.make_rng(data.get("seed"))
        form = info.sample_form()
        if info.random_graph:
            size = inputs.parse_int(data.get("size", 7), "size", minimum=1, maximum=settings.max_graph_nodes)
            weights = (1, 9) if "weighted" in info.tags else (1, 1)
            graph = Graph.generate_random(rng, num_nodes=size, weight_range=weights)
            form["graph"] = graph.to_adjacency_list()
            form["start"] = graph.node_ids()[0]
            form["directed"] = ""
        else:
            size = inputs.parse_int(data.get("size", 10), "size", minimum=1, maximum=settings.max_array_length)
            if info.parse_inputs is inputs.sorted_search_form:
                array = inputs.random_sorted_array(rng, size)
            else:
                array = inputs.random_array(rng, size)
            form["array"] = ", ".join(str(v) for v in array)
            if "target" in form:
                form["target"] = str(rng.choice(array))
        us.form = form
        return jsonify({"values": form, "form": input_form(info, form)})


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    data = _json()
    us = get_user_session()
    with us.lock:
        info = require_algorithm(str(data.get("algo_key", us.algo_key)))
        form = _form(data, info)
        kwargs = info.parse_inputs(form, get_settings())
        trace = us.controller.run(info.fn, label=info.label, **kwargs)
        us.algo_key = info.key
        us.trace_key = info.key
        us.form = dict(form)
        logger.info("Run %s: %d snapshots", info.key, len(trace))
        return jsonify(frame_payload(us, analytics=analytics_panel(trace.metrics)))


# ---------------------------------------------------------------------------
# API: Playback
# ---------------------------------------------------------------------------
@app.route("/api/play", methods=["POST"])
def api_play():
    us = get_user_session()
    with us.lock:
        ok = us.controller.play()
        return jsonify(frame_payload(us, ok=ok))


@app.route("/api/pause", methods=["POST"])
def api_pause():
    us = get_user_session()
    with us.lock:
        us.scheduler.poll()
        ok = us.controller.pause()
        return jsonify(frame_payload(us, ok=ok))


@app.route("/api/reset", methods=["POST"])
def api_reset():
    keep = inputs.parse_bool(_json().get("keep_trace", True))
    us = get_user_session()
    with us.lock:
        us.controller.reset(keep_trace=keep)
        if not keep:
            us.trace_key = None
        return jsonify(frame_payload(us, ok=True))


@app.route("/api/speed", methods=["POST"])
def api_speed():
    data = _json()
    us = get_user_session()
    with us.lock:
        if "preset" in data:
            us.controller.set_speed_preset(str(data["preset"]))
        else:
            us.controller.set_speed(inputs.parse_int(data.get("ms"), "ms", minimum=1, maximum=60_000))
        return jsonify({"speed_ms": us.controller.speed_ms})


@app.route("/api/seek", methods=["POST"])
def api_seek():
    index = inputs.parse_int(_json().get("index"), "index")
    us = get_user_session()
    with us.lock:
        ok = us.controller.seek(index)
        return jsonify(frame_payload(us, ok=ok))


@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    us = get_user_session()
    with us.lock:
        ok = us.controller.next_step()
        return jsonify(frame_payload(us, ok=ok))


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    us = get_user_session()
    with us.lock:
        ok = us.controller.prev_step()
        return jsonify(frame_payload(us, ok=ok))


@app.route("/api/state")
def api_state():
    us = get_user_session()
    with us.lock:
        fired = us.scheduler.poll()
        return jsonify(frame_payload(us, ticks=fired))


# ---------------------------------------------------------------------------
# API: Comparison Mode
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    data = _json()
    left_info = require_algorithm(str(data.get("left", "")))
    right_info = require_algorithm(str(data.get("right", "")))
    if left_info.family != right_info.family:
        raise ValueError("Comparison needs two algorithms from the same family")
    form = _form(data, left_info)
    settings = get_settings()

    left = _materialize(left_info, form, settings)
    right = _materialize(right_info, form, settings)
    result = compare(left, right)
    return jsonify({
        "comparison": comparison_panel(result),
        "left": result.left.to_dict(),
        "right": result.right.to_dict(),
        "winner_steps": result.winner_steps,
        "winner_comparisons": result.winner_comparisons,
        "winner_swaps": result.winner_swaps,
    })


def _materialize(info: AlgoInfo, form, settings):
    return materialize(info.produce(form, settings), label=info.label)


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>AlgoTrace</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-panel: #161b22;
      --border: #30363d;
      --text: #e6edf3;
      --muted: #7d8590;
      --accent: #0ea5e9;
      --highlight: #06b6d4;
    }

    body {
      background: var(--bg-dark);
      color: var(--text);
      font-family: 'DM Sans', system-ui, sans-serif;
      display: grid;
      grid-template-columns: 320px 1fr 340px;
      gap: 16px;
      padding: 16px;
      min-height: 100vh;
    }
    .panel { background: var(--bg-panel); border: 1px solid var(--border); border-radius: 8px; padding: 12px; margin-bottom: 12px; }
    .panel h3 { font-size: 14px; margin-bottom: 8px; color: var(--accent); }
    label { display: block; margin-bottom: 8px; font-size: 13px; color: var(--muted); }
    input[type=text], textarea, select { width: 100%; background: var(--bg-dark); color: var(--text); border: 1px solid var(--border); border-radius: 4px; padding: 6px; font-family: 'JetBrains Mono', monospace; }
    button { background: var(--bg-dark); color: var(--text); border: 1px solid var(--border); border-radius: 4px; padding: 6px 10px; cursor: pointer; }
    button:disabled { opacity: 0.4; cursor: default; }
    .btn-primary { background: var(--accent); border-color: var(--accent); width: 100%; margin-top: 8px; }
    .button-row { display: flex; gap: 6px; margin-bottom: 8px; }
    #scrubber { width: 100%; margin: 8px 0; }
    .finished-badge { color: #10b981; font-weight: 700; }
    .form-error { color: #ef4444; font-size: 13px; min-height: 16px; }
    #canvas { overflow: auto; }
    .code-block { font-family: 'JetBrains Mono', monospace; font-size: 13px; background: var(--bg-panel); border: 1px solid var(--border); border-radius: 8px; padding: 8px; }
    .code-title { color: var(--accent); margin-bottom: 6px; }
    .code-line { white-space: pre; padding: 1px 4px; }
    .code-line.highlight { background: var(--highlight); color: var(--bg-dark); }
    .explanation-text { padding: 12px; font-size: 14px; }
    table { font-size: 13px; }
    .placeholder { color: var(--muted); font-size: 13px; }
  </style>
</head>
<body>
  <aside>
    <div id="algo-selector-wrap">{{ algo_selector|safe }}</div>
    <p class="placeholder" id="algo-description">{{ description }}</p>
    <div id="form-wrap">{{ form|safe }}</div>
    <div id="playback">{{ playback|safe }}</div>
  </aside>

  <main>
    <div id="canvas">{{ canvas|safe }}</div>
    <div id="message">{{ message|safe }}</div>
    <div id="result">{{ result|safe }}</div>
  </main>

  <aside>
    <div id="pseudocode">{{ pseudocode|safe }}</div>
    <div id="analytics">{{ analytics|safe }}</div>
    <div id="comparison">{{ comparison|safe }}</div>
  </aside>

  <script>
    let pollTimer = null;

    async function post(url, body = {}) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(body),
      });
      const data = await res.json();
      const err = document.getElementById('form-error');
      if (err) err.textContent = res.ok ? '' : (data.error || 'Request failed');
      return res.ok ? data : null;
    }

    function readForm() {
      const form = document.getElementById('input-form');
      const values = {};
      if (!form) return values;
      form.querySelectorAll('input, textarea').forEach((el) => {
        values[el.name] = el.type === 'checkbox' ? el.checked : el.value;
      });
      return values;
    }

    function applyFrame(data) {
      if (!data) return;
      for (const id of ['canvas', 'pseudocode', 'message', 'result', 'playback', 'analytics']) {
        if (data[id] !== undefined) document.getElementById(id).innerHTML = data[id];
      }
      if (data.form !== undefined) document.getElementById('form-wrap').innerHTML = data.form;
      if (data.description !== undefined) document.getElementById('algo-description').textContent = data.description;
      bindPlayback();
      schedulePoll(data.state);
    }

    function schedulePoll(state) {
      clearTimeout(pollTimer);
      if (state === 'playing') {
        pollTimer = setTimeout(async () => {
          const res = await fetch('/api/state');
          applyFrame(await res.json());
        }, 50);
      }
    }

    function bindPlayback() {
      const on = (id, fn) => { const el = document.getElementById(id); if (el) el.onclick = fn; };
      on('btn-rewind', async () => applyFrame(await post('/api/seek', {index: 0})));
      on('btn-prev', async () => applyFrame(await post('/api/step/prev')));
      on('btn-next', async () => applyFrame(await post('/api/step/next')));
      on('btn-end', async () => {
        const total = parseInt(document.getElementById('total-steps').textContent, 10);
        applyFrame(await post('/api/seek', {index: total - 1}));
      });
      on('btn-play', async () => {
        const state = document.querySelector('.playback-controls').dataset.state;
        applyFrame(await post(state === 'playing' ? '/api/pause' : '/api/play'));
      });
      on('btn-reset', async () => applyFrame(await post('/api/reset')));
      const scrub = document.getElementById('scrubber');
      if (scrub) scrub.onchange = async (e) => applyFrame(await post('/api/seek', {index: parseInt(e.target.value, 10)}));
      const speed = document.getElementById('speed-selector');
      if (speed) speed.onchange = async (e) => post('/api/speed', {preset: e.target.value});
      const random = document.getElementById('btn-random');
      if (random) random.onclick = async (e) => {
        e.preventDefault();
        const data = await post('/api/inputs/random', {});
        if (data) document.getElementById('form-wrap').innerHTML = data.form;
        bindPlayback();
      };
    }

    document.getElementById('algo-selector').addEventListener('change', async (e) => {
      applyFrame(await post('/api/config/algo', {algo_key: e.target.value}));
    });

    document.getElementById('btn-run').addEventListener('click', async () => {
      const algo = document.getElementById('algo-selector').value;
      applyFrame(await post('/api/run', {algo_key: algo, form: readForm()}));
    });

    bindPlayback();
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    settings = get_settings()
    init_logging(settings.log_level, settings.log_file)
    logger.info("AlgoTrace listening on http://%s:%d", settings.host, settings.port)
    app.run(debug=settings.debug, host=settings.host, port=settings.port)
