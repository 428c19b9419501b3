from __future__ import annotations

import logging
from typing import Any

from heapviz.errors import InvalidConfiguration
from heapviz.events.bus import EVENT_COMMAND_REJECTED, EVENT_PLAYBACK_COMMAND, EventBus
from heapviz.systems.playback_controller import PlaybackController

logger = logging.getLogger(__name__)

COMMAND_PAUSE = "pause"
COMMAND_RESUME = "resume"
COMMAND_TOGGLE_PAUSE = "toggle_pause"
COMMAND_RESTART = "restart"
COMMAND_SET_SPEED = "set_speed"
COMMAND_SET_LEVELS = "set_levels"


class PlaybackInputSystem:
    """Routes playback commands from the bus to the controller.

    Rejections are reported back on the bus in the same call, so whoever issued
    the command learns about it before ``emit`` returns.
    """

    def __init__(self, event_bus: EventBus, controller: PlaybackController) -> None:
        self.event_bus = event_bus
        self.controller = controller
        self.event_bus.subscribe(EVENT_PLAYBACK_COMMAND, self._on_command)

    def _on_command(self, sender: Any, **payload: Any) -> None:
        command = payload.get("command")
        value = payload.get("value")
        try:
            self.handle(command, value)
        except InvalidConfiguration as exc:
            logger.warning("rejected %s(%r): %s", command, value, exc)
            self.event_bus.emit(EVENT_COMMAND_REJECTED, command=command, value=value, reason=str(exc))

    def handle(self, command: str | None, value: Any = None) -> None:
        controller = self.controller
        if command == COMMAND_PAUSE:
            controller.pause()
        elif command == COMMAND_RESUME:
            controller.resume()
        elif command == COMMAND_TOGGLE_PAUSE:
            if controller.state.paused:
                controller.resume()
            else:
                controller.pause()
        elif command == COMMAND_RESTART:
            controller.restart()
        elif command == COMMAND_SET_SPEED:
            controller.set_speed(value)
        elif command == COMMAND_SET_LEVELS:
            controller.set_levels(value)
        else:
            raise InvalidConfiguration(f"unknown playback command {command!r}")
