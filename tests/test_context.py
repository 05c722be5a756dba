from __future__ import annotations

import time

import pytest

from scalrx.context import CallContext
from scalrx.errors import RequestError


def test_background_context_never_expires() -> None:
    ctx = CallContext.background()

    assert ctx.remaining() is None
    ctx.check()


def test_with_timeout_counts_down() -> None:
    ctx = CallContext.with_timeout(30)

    remaining = ctx.remaining()
    assert remaining is not None
    assert 0 < remaining <= 30


def test_expired_deadline_fails_check() -> None:
    ctx = CallContext(deadline=time.monotonic() - 1)

    assert ctx.remaining() == 0.0
    with pytest.raises(RequestError, match="deadline exceeded"):
        ctx.check()


def test_cancel_fails_check() -> None:
    ctx = CallContext.with_timeout(30)
    ctx.cancel()

    assert ctx.cancelled
    with pytest.raises(RequestError, match="canceled"):
        ctx.check()
