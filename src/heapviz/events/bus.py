from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that are not stored in a variable alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"    # payload: dt=float (seconds since last frame)


# ============================================================================
# PLAYBACK COMMANDS
# ============================================================================
EVENT_PLAYBACK_COMMAND = "playback_command"    # payload: command=str, value=int|None
EVENT_COMMAND_REJECTED = "command_rejected"    # payload: command=str, value=Any, reason=str
EVENT_PLAYBACK_CHANGED = "playback_changed"    # payload: paused=bool, speed_ms=int, levels=int


# ============================================================================
# HEAP STEPPING
# ============================================================================
EVENT_HEAP_REBUILT = "heap_rebuilt"              # payload: levels=int, item_count=int
EVENT_ITEMS_ADVANCED = "items_advanced"          # payload: current=int
EVENT_INSERTION_STARTED = "insertion_started"    # payload: index=int, value=int, swaps=int
EVENT_SWAP_APPLIED = "swap_applied"              # payload: entry=SwapEntry
EVENT_RUN_COMPLETED = "run_completed"            # payload: current=int
EVENT_STEP_TRANSITION = "step_transition"        # payload: result=TickResult, duration_ms=int
