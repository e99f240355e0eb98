"""Tests for the playback controller state machine."""

import pytest

from algorithms.linear_search import linear_search
from algorithms.snapshot import SnapshotBuilder, StructureKind
from engine import MIN_SPEED_MS, PlaybackController, PlaybackState, ProducerContractError


def _load(controller: PlaybackController) -> None:
    # init + 5 checks + final = 7 snapshots
    controller.run(linear_search, label="Linear", array=[1, 2, 3, 4, 5], target=5)


def test_starts_idle_and_refuses_play(controller: PlaybackController) -> None:
    assert controller.state is PlaybackState.IDLE
    assert controller.current is None
    assert controller.total_steps == 0
    assert controller.play() is False
    assert controller.seek(0) is False
    assert controller.jump_to_end() is False


def test_run_installs_trace_ready_at_zero(controller: PlaybackController) -> None:
    trace = controller.run(linear_search, array=[1, 2, 3, 4, 5], target=5)
    assert controller.state is PlaybackState.READY
    assert controller.index == 0
    assert controller.total_steps == len(trace) == 7
    assert controller.current is trace[0]
    assert trace.label == "linear_search"


def test_play_advances_one_step_per_tick(controller, scheduler, clock) -> None:
    _load(controller)
    assert controller.play() is True
    assert controller.state is PlaybackState.PLAYING
    assert controller.has_timer
    clock.advance(0.05)
    scheduler.poll()
    assert controller.index == 0
    clock.advance(0.06)
    scheduler.poll()
    assert controller.index == 1
    assert scheduler.pending == 1


def test_playback_completes_and_releases_timer(controller, scheduler, clock) -> None:
    _load(controller)
    controller.play()
    clock.advance(1.0)
    scheduler.poll()
    assert controller.index == 6
    assert controller.state is PlaybackState.COMPLETE
    assert not controller.has_timer
    assert scheduler.pending == 0
    assert controller.current.is_final


def test_pause_stops_ticks(controller, scheduler, clock) -> None:
    _load(controller)
    controller.play()
    clock.advance(0.1)
    scheduler.poll()
    assert controller.pause() is True
    assert controller.state is PlaybackState.PAUSED
    assert scheduler.pending == 0
    clock.advance(1.0)
    scheduler.poll()
    assert controller.index == 1
    assert controller.pause() is False


def test_resume_from_pause(controller, scheduler, clock) -> None:
    _load(controller)
    controller.play()
    clock.advance(0.1)
    scheduler.poll()
    controller.pause()
    assert controller.play() is True
    clock.advance(0.1)
    scheduler.poll()
    assert controller.index == 2


def test_at_most_one_timer(controller, scheduler) -> None:
    _load(controller)
    for _ in range(5):
        controller.play()
        controller.play()
        controller.pause()
    controller.play()
    assert scheduler.pending == 1


def test_seek_refused_while_playing(controller) -> None:
    _load(controller)
    controller.play()
    assert controller.seek(3) is False
    assert controller.next_step() is False
    assert controller.index == 0


@pytest.mark.parametrize(
    ("index", "state"),
    [(0, PlaybackState.READY), (3, PlaybackState.PAUSED), (6, PlaybackState.COMPLETE)],
)
def test_seek_settles_state(controller, index: int, state: PlaybackState) -> None:
    _load(controller)
    assert controller.seek(index) is True
    assert controller.index == index
    assert controller.state is state


def test_seek_out_of_range_is_a_no_op(controller) -> None:
    _load(controller)
    controller.seek(2)
    assert controller.seek(7) is False
    assert controller.seek(-1) is False
    assert controller.index == 2


def test_step_navigation(controller) -> None:
    _load(controller)
    assert controller.prev_step() is False
    assert controller.next_step() is True
    assert controller.next_step() is True
    assert controller.prev_step() is True
    assert controller.index == 1
    assert controller.jump_to_end() is True
    assert controller.state is PlaybackState.COMPLETE
    assert controller.next_step() is False
    assert controller.rewind() is True
    assert controller.state is PlaybackState.READY


def test_scrubbing_backwards_shows_historical_snapshots(controller) -> None:
    _load(controller)
    controller.jump_to_end()
    final = controller.current
    controller.seek(1)
    assert controller.current.step_number == 1
    assert controller.current.structure == [1, 2, 3, 4, 5]
    assert controller.current.result is None
    controller.jump_to_end()
    assert controller.current is final


def test_play_from_complete_is_refused_until_rewound(controller) -> None:
    _load(controller)
    controller.jump_to_end()
    assert controller.play() is False
    controller.rewind()
    assert controller.play() is True


def test_play_at_last_index_goes_complete(controller) -> None:
    sb = SnapshotBuilder(StructureKind.ARRAY, [])
    controller.run(lambda: iter([sb.build(is_final=True, result={})]))
    assert controller.state is PlaybackState.READY
    assert controller.play() is False
    assert controller.state is PlaybackState.COMPLETE
    assert not controller.has_timer


def test_speed_change_applies_from_next_tick(controller, scheduler, clock) -> None:
    _load(controller)
    controller.play()
    clock.advance(0.1)
    scheduler.poll()
    controller.set_speed(500)
    clock.advance(0.1)
    scheduler.poll()
    assert controller.index == 2
    clock.advance(0.25)
    scheduler.poll()
    assert controller.index == 2
    clock.advance(0.3)
    scheduler.poll()
    assert controller.index == 3


def test_speed_is_clamped_and_presets_validated(controller) -> None:
    controller.set_speed(1)
    assert controller.speed_ms == MIN_SPEED_MS
    controller.set_speed_preset("slow")
    assert controller.speed_ms == 1000
    with pytest.raises(ValueError):
        controller.set_speed_preset("warp")


def test_run_while_playing_cancels_timer(controller, scheduler) -> None:
    _load(controller)
    controller.play()
    controller.run(linear_search, array=[9], target=9)
    assert controller.state is PlaybackState.READY
    assert controller.index == 0
    assert scheduler.pending == 0


def test_failed_run_keeps_previous_trace(controller, scheduler) -> None:
    _load(controller)
    previous = controller.trace
    controller.play()
    with pytest.raises(ProducerContractError):
        controller.run(lambda: iter([]), label="broken")
    assert controller.trace is previous
    assert controller.state is PlaybackState.PAUSED
    assert scheduler.pending == 0


def test_reset_keeps_or_drops_trace(controller, scheduler) -> None:
    _load(controller)
    controller.seek(4)
    controller.reset()
    assert (controller.state, controller.index) == (PlaybackState.READY, 0)
    controller.play()
    controller.reset(keep_trace=False)
    assert controller.state is PlaybackState.IDLE
    assert controller.trace is None
    assert scheduler.pending == 0


def test_toggle_play(controller) -> None:
    _load(controller)
    assert controller.toggle_play() is True
    assert controller.is_playing
    assert controller.toggle_play() is True
    assert controller.state is PlaybackState.PAUSED


def test_close_releases_timer(controller, scheduler) -> None:
    _load(controller)
    controller.play()
    controller.close()
    assert controller.state is PlaybackState.PAUSED
    assert scheduler.pending == 0


def test_on_change_reports_every_transition(scheduler, clock) -> None:
    events = []
    controller = PlaybackController(
        scheduler,
        speed_ms=100,
        on_change=lambda snap, state: events.append((snap.step_number if snap else None, state)),
    )
    controller.run(linear_search, array=[1], target=1)
    controller.play()
    clock.advance(1.0)
    scheduler.poll()
    assert events == [
        (0, PlaybackState.READY),
        (0, PlaybackState.PLAYING),
        (1, PlaybackState.PLAYING),
        (2, PlaybackState.COMPLETE),
    ]


def test_status_snapshot(controller) -> None:
    _load(controller)
    controller.seek(2)
    assert controller.status() == {"state": "paused", "index": 2, "total_steps": 7, "speed_ms": 100}
