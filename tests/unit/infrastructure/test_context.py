# nosec B101

import asyncio

import pytest

from exchangerate.domain.exceptions import DeadlineExceededError, RequestCancelledError
from exchangerate.infrastructure.context import RequestContext


async def _value(value, delay=0.0):
    await asyncio.sleep(delay)
    return value


def test_new_context_is_live():
    context = RequestContext()

    assert not context.cancelled
    assert not context.expired
    assert context.remaining() is None
    context.check()


def test_cancel_marks_context_cancelled():
    context = RequestContext()
    context.cancel()

    assert context.cancelled
    with pytest.raises(RequestCancelledError):
        context.check()


def test_with_timeout_sets_deadline():
    context = RequestContext.with_timeout(30)

    assert context.timeout == 30
    assert 0 < context.remaining() <= 30


def test_zero_timeout_is_already_expired():
    context = RequestContext(timeout=0)

    assert context.expired
    with pytest.raises(DeadlineExceededError):
        context.check()


async def test_run_returns_operation_result():
    context = RequestContext(timeout=5)

    assert await context.run(lambda: _value(42)) == 42


async def test_run_on_cancelled_context_does_not_start_operation():
    context = RequestContext()
    context.cancel()
    started = []

    def operation():
        started.append(True)
        return _value(1)

    with pytest.raises(RequestCancelledError):
        await context.run(operation)

    assert started == []


async def test_cancel_aborts_in_flight_operation():
    context = RequestContext()
    asyncio.get_running_loop().call_later(0.05, context.cancel)

    with pytest.raises(RequestCancelledError):
        await context.run(lambda: _value(1, delay=5))


async def test_deadline_aborts_in_flight_operation():
    context = RequestContext(timeout=0.05)

    with pytest.raises(DeadlineExceededError):
        await context.run(lambda: _value(1, delay=5))


async def test_operation_errors_propagate():
    async def failing():
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        await RequestContext().run(failing)
