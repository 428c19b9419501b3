import random

from heapviz.constants import LEAD_IN_TICKS
from heapviz.events.bus import (
    EVENT_INSERTION_STARTED,
    EVENT_RUN_COMPLETED,
    EVENT_SWAP_APPLIED,
    EventBus,
)
from heapviz.layout import tree_layout
from heapviz.systems.heap_store import is_max_heap
from heapviz.systems.insertion_stepper import StepperPhase
from heapviz.tick_result import Advanced, Completed, InsertionStarted, NoOp, SwapApplied
from heapviz.world import create_engine
from tests.helpers import make_engine, run_until_completed


def _swaps_by_insertion(results):
    """Count swaps applied after each InsertionStarted, keyed by item index."""
    counts = {}
    current = None
    for result in results:
        if isinstance(result, InsertionStarted):
            current = result.index
            counts[current] = 0
        elif isinstance(result, SwapApplied):
            counts[current] += 1
    return counts


def test_single_node_heap_keeps_the_maximum():
    controller = make_engine([5, 9, 3], levels=1)
    results = run_until_completed(controller)

    assert controller.heap.values() == [9]
    counts = _swaps_by_insertion(results)
    assert counts == {0: 1, 1: 1}
    assert 2 not in counts
    assert results[-1] == Completed(3)
    kinds = [type(r) for r in results]
    assert kinds == [
        Advanced, InsertionStarted, SwapApplied,
        InsertionStarted, SwapApplied,
        Advanced, Advanced, Completed,
    ]


def test_three_node_heap_trace_is_reproducible():
    first = make_engine([1, 2, 3, 4], levels=2)
    run_until_completed(first)
    trace = list(first.queue.applied)

    second = make_engine([1, 2, 3, 4], levels=2)
    run_until_completed(second)

    assert first.heap.value_at(0) == 4
    assert trace == second.queue.applied
    assert len(trace) == 4

    first.restart()
    run_until_completed(first)
    assert first.queue.applied == trace


def test_first_insertion_happens_after_lead_in():
    controller = make_engine([5], levels=1)
    assert controller.state.current == -LEAD_IN_TICKS
    for _ in range(LEAD_IN_TICKS - 1):
        assert isinstance(controller.tick(), Advanced)
    result = controller.tick()
    assert result == InsertionStarted(index=0, value=5, swaps=1)


def test_current_item_lines_up_under_the_root_when_inserted():
    controller = make_engine([5, 9], levels=2)
    while not isinstance(controller.tick(), InsertionStarted):
        pass
    snap = controller.snapshot()
    assert snap.items[0].position[0] == tree_layout(0, 2)[0]


def test_current_never_advances_while_swaps_pending():
    controller = make_engine([3, 8, 1, 9, 9, 12, 2], levels=3)
    for _ in range(100):
        pending = len(controller.queue)
        before = controller.state.current
        result = controller.tick()
        if pending:
            assert controller.state.current == before
            assert isinstance(result, SwapApplied)
        if isinstance(result, Completed):
            break


def test_heap_property_holds_after_every_drain():
    rng = random.Random(7)
    values = [rng.randint(1, 99) for _ in range(40)]
    controller = make_engine(values, levels=4)
    for _ in range(500):
        result = controller.tick()
        if isinstance(result, SwapApplied) and not controller.queue:
            assert is_max_heap(controller.heap.values())
        if isinstance(result, Completed):
            break
    assert controller.heap.value_at(0) == max(values)


def test_in_heap_flips_once_per_item():
    controller = make_engine([4, 6, 2, 8, 8, 1], levels=2)
    flips = {}
    previous = {node.key: node.in_heap for node in controller.snapshot().items}
    for _ in range(200):
        result = controller.tick()
        snap = controller.snapshot()
        for node in snap.heap_nodes:
            assert node.in_heap
            if node.key.startswith("item-") and not previous.get(node.key, True):
                flips[node.key] = flips.get(node.key, 0) + 1
        previous = {n.key: n.in_heap for n in snap.heap_nodes + snap.items}
        if isinstance(result, Completed):
            break
    assert flips == {"item-0": 1, "item-1": 1, "item-3": 1}


def test_equal_value_does_not_insert():
    controller = make_engine([5, 5], levels=1)
    results = run_until_completed(controller)
    inserted = [r.index for r in results if isinstance(r, InsertionStarted)]
    assert inserted == [0]


def test_completion_is_reported_once():
    bus = EventBus()
    completed = []
    bus.subscribe(EVENT_RUN_COMPLETED, lambda sender, **k: completed.append(k["current"]))
    controller = make_engine([1], levels=1, bus=bus)
    run_until_completed(controller)
    assert controller.stepper.phase is StepperPhase.DONE
    assert controller.tick() == NoOp()
    assert controller.tick() == NoOp()
    assert completed == [1]


def test_phases_follow_the_queue():
    controller = make_engine([5, 9], levels=1)
    assert controller.stepper.phase is StepperPhase.IDLE
    while not isinstance(controller.tick(), InsertionStarted):
        pass
    assert controller.stepper.phase is StepperPhase.DRAINING
    controller.tick()
    assert controller.stepper.phase is StepperPhase.IDLE


def test_events_mirror_tick_results():
    bus = EventBus()
    seen = []
    bus.subscribe(EVENT_INSERTION_STARTED, lambda sender, **k: seen.append(("insert", k["index"])))
    bus.subscribe(EVENT_SWAP_APPLIED, lambda sender, **k: seen.append(("swap", k["entry"].b.index)))
    controller = make_engine([2, 1, 7], levels=1, bus=bus)
    run_until_completed(controller)
    assert seen == [("insert", 0), ("swap", 0), ("insert", 2), ("swap", 2)]


def test_empty_item_source_completes_after_lead_in():
    controller = create_engine(EventBus(), levels=1, item_count=0)
    results = run_until_completed(controller)
    assert all(isinstance(r, Advanced) for r in results[:-1])
    assert controller.heap.values() == [0]
