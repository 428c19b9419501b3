from heapviz.events.bus import EventBus, EVENT_PLAYBACK_CHANGED


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)

    bus.subscribe(EVENT_PLAYBACK_CHANGED, handler)
    bus.emit(EVENT_PLAYBACK_CHANGED, paused=True, speed_ms=300, levels=2)

    assert received == {"paused": True, "speed_ms": 300, "levels": 2}


def test_emit_without_subscribers_is_silent():
    bus = EventBus()
    bus.emit("nobody_listens", value=1)


def test_lambda_subscribers_stay_connected():
    bus = EventBus()
    seen = []
    bus.subscribe("ping", lambda sender, **k: seen.append(k["n"]))
    bus.emit("ping", n=1)
    bus.emit("ping", n=2)
    assert seen == [1, 2]
