"""Tests for ProcessState — counter atomicity and uptime arithmetic."""

from concurrent.futures import ThreadPoolExecutor

from heartbeat.core.process_state import ProcessState


def test_counter_starts_at_zero():
    assert ProcessState().counter == 0


def test_increment_returns_post_increment_value():
    state = ProcessState()
    assert state.increment_counter() == 1
    assert state.increment_counter() == 2
    assert state.counter == 2


def test_concurrent_increments_are_distinct_and_contiguous():
    state = ProcessState()
    state.increment_counter()  # pre-test value 1
    n = 500
    with ThreadPoolExecutor(max_workers=16) as pool:
        values = list(pool.map(lambda _: state.increment_counter(), range(n)))
    assert len(set(values)) == n
    assert sorted(values) == list(range(2, 2 + n))
    assert state.counter == 1 + n


def test_uptime_ms_from_injected_now():
    state = ProcessState(started_at=100.0)
    assert state.uptime_ms(now=100.0) == 0
    assert state.uptime_ms(now=101.5) == 1500


def test_uptime_ms_never_negative():
    state = ProcessState(started_at=100.0)
    assert state.uptime_ms(now=99.0) == 0


def test_uptime_ms_is_non_decreasing():
    state = ProcessState()
    first = state.uptime_ms()
    second = state.uptime_ms()
    assert 0 <= first <= second


def test_states_do_not_share_counters():
    a, b = ProcessState(), ProcessState()
    a.increment_counter()
    assert b.counter == 0
