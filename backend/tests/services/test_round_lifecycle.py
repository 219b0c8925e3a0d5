"""Round Lifecycle: Idle/Active transitions, rejected transitions and reset isolation.

Tests cover:
    - start on Idle opens exactly one round at the clock's "now"
    - start on Active raises and leaves exactly one open round
    - stop on Idle raises and mutates nothing
    - stop closes the open round; a 125 s round is "00:02:05"
    - reset deletes only the target group's rounds
    - unknown group ids are rejected before any state check
"""

import logging

import pytest

from workhours.core.aggregation import elapsed_seconds
from workhours.core.domain_types import GroupId, RoundState
from workhours.core.errors import (
    GroupNotFoundError, RoundAlreadyRunningError, RoundNotRunningError,
)
from workhours.core.format_duration import format_duration
from tests.fake_clock import T0


async def test_fresh_group_is_idle(lifecycle, group_a):
    assert await lifecycle.state(group_a.id) is RoundState.IDLE
    assert await lifecycle.is_running(group_a.id) is False


async def test_start_opens_round_at_now(lifecycle, store, group_a):
    r = await lifecycle.start(group_a.id)

    assert r.start_time == T0
    assert r.end_time is None
    assert await lifecycle.state(group_a.id) is RoundState.ACTIVE
    assert await store.find_open_round(group_a.id) == r


async def test_start_twice_rejected(lifecycle, store, clock, group_a):
    await lifecycle.start(group_a.id)
    clock.advance(5)

    with pytest.raises(RoundAlreadyRunningError) as exc:
        await lifecycle.start(group_a.id)

    assert exc.value.http_status == 409
    rounds = await store.list_rounds(group_a.id)
    assert len(rounds) == 1
    assert rounds[0].start_time == T0


async def test_stop_on_idle_rejected_and_nothing_changes(
    lifecycle, store, clock, group_a,
):
    first = await lifecycle.start(group_a.id)
    clock.advance(60)
    await lifecycle.stop(group_a.id)
    before = await store.list_rounds(group_a.id)

    clock.advance(60)
    with pytest.raises(RoundNotRunningError):
        await lifecycle.stop(group_a.id)

    assert await store.list_rounds(group_a.id) == before
    assert before[0].id == first.id


async def test_stop_on_fresh_group_rejected(lifecycle, store, group_a):
    with pytest.raises(RoundNotRunningError):
        await lifecycle.stop(group_a.id)
    assert await store.list_rounds(group_a.id) == []


async def test_start_then_stop_125_seconds(lifecycle, clock, group_a):
    await lifecycle.start(group_a.id)
    clock.advance(125)

    r = await lifecycle.stop(group_a.id)

    assert await lifecycle.state(group_a.id) is RoundState.IDLE
    assert elapsed_seconds(r, r.end_time) == 125
    assert format_duration(elapsed_seconds(r, r.end_time)) == "00:02:05"


async def test_groups_run_independently(lifecycle, group_a, group_b):
    await lifecycle.start(group_a.id)
    await lifecycle.start(group_b.id)
    await lifecycle.stop(group_a.id)

    assert await lifecycle.state(group_a.id) is RoundState.IDLE
    assert await lifecycle.state(group_b.id) is RoundState.ACTIVE


async def test_reset_only_touches_target_group(
    lifecycle, store, clock, group_a, group_b,
):
    await lifecycle.start(group_a.id)
    await lifecycle.start(group_b.id)
    clock.advance(30)
    await lifecycle.stop(group_b.id)

    deleted = await lifecycle.reset(group_a.id)

    assert deleted == 1
    assert await lifecycle.state(group_a.id) is RoundState.IDLE
    assert await store.list_rounds(group_a.id) == []
    assert len(await store.list_rounds(group_b.id)) == 1


async def test_reset_on_empty_group(lifecycle, group_a):
    assert await lifecycle.reset(group_a.id) == 0


async def test_start_after_reset_of_open_round(lifecycle, clock, group_a):
    await lifecycle.start(group_a.id)
    await lifecycle.reset(group_a.id)
    clock.advance(10)

    r = await lifecycle.start(group_a.id)

    assert r.start_time == clock()


@pytest.mark.parametrize("operation", ["start", "stop", "reset"])
async def test_unknown_group_rejected(lifecycle, store, operation):
    with pytest.raises(GroupNotFoundError):
        await getattr(lifecycle, operation)(GroupId(999))
    assert await store.list_rounds(None) == []


async def test_transitions_logged(lifecycle, clock, group_a, caplog):
    caplog.set_level(logging.INFO, logger="workhours.services.round_lifecycle")

    await lifecycle.start(group_a.id)
    clock.advance(125)
    await lifecycle.stop(group_a.id)

    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("Started new round") for m in messages)
    assert any("(duration: 00:02:05)" in m for m in messages)
