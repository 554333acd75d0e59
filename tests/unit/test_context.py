# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import threading
import time

from starling.context import CallContext
from starling.errors import Cancelled, DeadlineExceeded


def test_background_context_is_never_done():
    ctx = CallContext.background()
    assert ctx.done() is False
    assert ctx.error() is None
    assert ctx.remaining() is None


def test_cancel_sets_error():
    ctx = CallContext()
    ctx.cancel()
    assert ctx.cancelled is True
    assert ctx.done() is True
    assert isinstance(ctx.error(), Cancelled)


def test_deadline_expires(monkeypatch):
    now = [1000.0]
    monkeypatch.setattr(time, "monotonic", lambda: now[0])
    ctx = CallContext(timeout=2)
    assert ctx.remaining() == 2.0
    assert ctx.done() is False

    now[0] += 3
    assert ctx.expired() is True
    assert ctx.remaining() == 0.0
    assert isinstance(ctx.error(), DeadlineExceeded)


def test_cancellation_wins_over_deadline():
    ctx = CallContext(timeout=0)
    ctx.cancel()
    assert isinstance(ctx.error(), Cancelled)


def test_child_inherits_earlier_parent_deadline(monkeypatch):
    monkeypatch.setattr(time, "monotonic", lambda: 50.0)
    parent = CallContext(timeout=1)
    child = parent.with_timeout(10)
    assert child.deadline == parent.deadline == 51.0

    shorter = parent.with_timeout(0.5)
    assert shorter.deadline == 50.5


def test_cancelling_parent_cancels_children():
    parent = CallContext()
    child = parent.with_timeout(60)
    parent.cancel()
    assert child.cancelled is True
    assert isinstance(child.error(), Cancelled)

    late_child = CallContext(parent=parent)
    assert late_child.cancelled is True


def test_cancelling_child_leaves_parent_alone():
    parent = CallContext()
    child = CallContext(parent=parent)
    child.cancel()
    assert parent.done() is False


def test_cancel_from_another_thread():
    ctx = CallContext()
    worker = threading.Thread(target=ctx.cancel)
    worker.start()
    worker.join()
    assert ctx.done() is True


def test_context_manager_cancels_on_exit():
    with CallContext() as ctx:
        assert ctx.done() is False
    assert ctx.cancelled is True
