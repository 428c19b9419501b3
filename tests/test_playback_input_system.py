from heapviz.events.bus import EVENT_COMMAND_REJECTED, EVENT_PLAYBACK_COMMAND, EventBus
from heapviz.systems.playback_input_system import (
    COMMAND_PAUSE,
    COMMAND_RESTART,
    COMMAND_RESUME,
    COMMAND_SET_LEVELS,
    COMMAND_SET_SPEED,
    COMMAND_TOGGLE_PAUSE,
    PlaybackInputSystem,
)
from tests.helpers import make_engine


def _wire(values=(3, 1, 4), levels=1):
    bus = EventBus()
    controller = make_engine(list(values), levels=levels, bus=bus, speed_ms=300)
    PlaybackInputSystem(bus, controller)
    rejected = []
    bus.subscribe(EVENT_COMMAND_REJECTED, lambda sender, **k: rejected.append(k))
    return bus, controller, rejected


def test_pause_resume_and_toggle():
    bus, controller, rejected = _wire()
    bus.emit(EVENT_PLAYBACK_COMMAND, command=COMMAND_PAUSE)
    assert controller.state.paused
    bus.emit(EVENT_PLAYBACK_COMMAND, command=COMMAND_RESUME)
    assert not controller.state.paused
    bus.emit(EVENT_PLAYBACK_COMMAND, command=COMMAND_TOGGLE_PAUSE)
    assert controller.state.paused
    bus.emit(EVENT_PLAYBACK_COMMAND, command=COMMAND_TOGGLE_PAUSE)
    assert not controller.state.paused
    assert rejected == []


def test_speed_and_levels_commands():
    bus, controller, rejected = _wire()
    bus.emit(EVENT_PLAYBACK_COMMAND, command=COMMAND_SET_SPEED, value=150)
    bus.emit(EVENT_PLAYBACK_COMMAND, command=COMMAND_SET_LEVELS, value=2)
    assert controller.state.speed_ms == 150
    assert len(controller.heap) == 3
    assert rejected == []


def test_restart_command_resets_progress():
    bus, controller, rejected = _wire()
    controller.tick()
    controller.tick()
    bus.emit(EVENT_PLAYBACK_COMMAND, command=COMMAND_RESTART)
    assert controller.state.current < 0
    assert controller.heap.values() == [0]


def test_illegal_commands_are_reported_synchronously():
    bus, controller, rejected = _wire()
    bus.emit(EVENT_PLAYBACK_COMMAND, command=COMMAND_SET_SPEED, value=-10)
    assert controller.state.speed_ms == 300
    assert len(rejected) == 1
    assert rejected[0]["command"] == COMMAND_SET_SPEED
    assert rejected[0]["value"] == -10
    assert "positive" in rejected[0]["reason"]

    bus.emit(EVENT_PLAYBACK_COMMAND, command="rewind")
    assert rejected[-1]["command"] == "rewind"


def test_non_finite_speed_is_reported_as_rejected():
    bus, controller, rejected = _wire()
    for value in (float("nan"), float("inf")):
        bus.emit(EVENT_PLAYBACK_COMMAND, command=COMMAND_SET_SPEED, value=value)
    assert controller.state.speed_ms == 300
    assert [r["command"] for r in rejected] == [COMMAND_SET_SPEED, COMMAND_SET_SPEED]
    assert all("finite" in r["reason"] for r in rejected)
