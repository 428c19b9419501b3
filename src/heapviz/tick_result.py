"""Outcome of a single ``tick()``.

Exactly one of these is returned per call so the caller that owns the timer can
decide what to animate and when to schedule the next tick.
"""
from dataclasses import dataclass
from typing import Union

from heapviz.components.swap_entry import SwapEntry


@dataclass(frozen=True, slots=True)
class NoOp:
    """Nothing changed (paused heartbeat, or the run already completed)."""


@dataclass(frozen=True, slots=True)
class SwapApplied:
    entry: SwapEntry


@dataclass(frozen=True, slots=True)
class InsertionStarted:
    index: int
    value: int
    swaps: int  # entries queued, root<->item exchange included


@dataclass(frozen=True, slots=True)
class Advanced:
    """Items shifted and ``current`` moved without starting an insertion."""
    current: int


@dataclass(frozen=True, slots=True)
class Completed:
    current: int


TickResult = Union[NoOp, SwapApplied, InsertionStarted, Advanced, Completed]
