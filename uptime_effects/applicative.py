"""Minimal applicative interface over a computation wrapper.

Aggregation code in this package never inspects *how* a value is produced.
It only needs three operations on the wrapper ``F``:

* ``pure`` lifts a plain value into ``F``;
* ``product`` combines two independently wrapped values into a wrapped pair;
* ``map`` applies a plain function inside ``F``.

``product`` never lets one side depend on the other's result, which is what
allows the asynchronous instances to run lookups side by side.  Instances are
passed around explicitly; there is no registry keyed on the wrapper type.

Three instances are provided:

* ``IdentityApplicative`` where the wrapped value is the value itself;
* ``AwaitableApplicative`` over ``asyncio`` awaitables;
* ``FutureApplicative`` over ``concurrent.futures.Future``.
"""

from __future__ import annotations

import asyncio
import operator
from collections.abc import Awaitable, Callable, Iterable
from concurrent.futures import Future
from typing import Any, Protocol


class Applicative(Protocol):
    """Lift-and-combine capability for a wrapper ``F``.

    Wrapped values are typed as ``Any`` because the wrapper itself is the
    parameter being abstracted over.
    """

    def pure(self, value: Any) -> Any:
        """Return ``value`` wrapped in ``F``."""
        ...

    def product(self, fa: Any, fb: Any) -> Any:
        """Return ``F[(a, b)]`` from independent ``F[a]`` and ``F[b]``."""
        ...

    def map(self, fa: Any, func: Callable[[Any], Any]) -> Any:
        """Return ``F[func(a)]`` from ``F[a]``."""
        ...


def map2(app: Applicative, fa: Any, fb: Any, func: Callable[[Any, Any], Any]) -> Any:
    return app.map(app.product(fa, fb), lambda pair: func(pair[0], pair[1]))


def traverse(app: Applicative, items: Iterable[Any], func: Callable[[Any], Any]) -> Any:
    """Apply ``func`` to every item and collect the results into ``F[list]``.

    Results keep the input order.  An empty ``items`` yields ``pure([])``.
    Wrapped values are combined as a balanced tree, so completing any one of
    them resolves at most O(log n) nested ``product``/``map`` steps.
    """
    wrapped = [func(item) for item in items]
    if not wrapped:
        return app.pure([])
    return _combine(app, wrapped, 0, len(wrapped))


def _combine(app: Applicative, wrapped: list[Any], lo: int, hi: int) -> Any:
    if hi - lo == 1:
        return app.map(wrapped[lo], lambda value: [value])
    mid = (lo + hi) // 2
    left = _combine(app, wrapped, lo, mid)
    right = _combine(app, wrapped, mid, hi)
    return map2(app, left, right, operator.add)


def sequence(app: Applicative, wrapped: Iterable[Any]) -> Any:
    """Turn a sequence of ``F[a]`` into ``F[list[a]]``."""
    return traverse(app, wrapped, lambda fa: fa)


class IdentityApplicative:
    """The trivial wrapper: values are used as-is."""

    def pure(self, value: Any) -> Any:
        return value

    def product(self, fa: Any, fb: Any) -> tuple[Any, Any]:
        return (fa, fb)

    def map(self, fa: Any, func: Callable[[Any], Any]) -> Any:
        return func(fa)


class AwaitableApplicative:
    """Wrapper over awaitables resolved on the running event loop.

    Every operation returns a fresh coroutine, so a wrapped value must be
    awaited exactly once.  If one side of ``product`` fails, the other side is
    cancelled before the error propagates.
    """

    def pure(self, value: Any) -> Awaitable[Any]:
        async def _pure() -> Any:
            return value

        return _pure()

    def product(self, fa: Awaitable[Any], fb: Awaitable[Any]) -> Awaitable[tuple[Any, Any]]:
        async def _product() -> tuple[Any, Any]:
            task_a = asyncio.ensure_future(fa)
            task_b = asyncio.ensure_future(fb)
            try:
                a, b = await asyncio.gather(task_a, task_b)
            except BaseException:
                task_a.cancel()
                task_b.cancel()
                raise
            return (a, b)

        return _product()

    def map(self, fa: Awaitable[Any], func: Callable[[Any], Any]) -> Awaitable[Any]:
        async def _map() -> Any:
            return func(await fa)

        return _map()


def _forward_failure(src: Future[Any], out: Future[Any]) -> bool:
    """Copy cancellation or an exception from ``src`` onto ``out``."""
    if src.cancelled():
        out.cancel()
        return True
    exc = src.exception()
    if exc is not None:
        out.set_exception(exc)
        return True
    return False


class FutureApplicative:
    """Wrapper over ``concurrent.futures.Future``.

    Combination is callback driven and never blocks the calling thread.  The
    first failure seen on an input (exception or cancellation) is carried to
    the resulting future.
    """

    def pure(self, value: Any) -> Future[Any]:
        fut: Future[Any] = Future()
        fut.set_result(value)
        return fut

    def product(self, fa: Future[Any], fb: Future[Any]) -> Future[tuple[Any, Any]]:
        out: Future[tuple[Any, Any]] = Future()

        def _on_b(done_b: Future[Any]) -> None:
            if not _forward_failure(done_b, out):
                out.set_result((fa.result(), done_b.result()))

        def _on_a(done_a: Future[Any]) -> None:
            if not _forward_failure(done_a, out):
                fb.add_done_callback(_on_b)

        fa.add_done_callback(_on_a)
        return out

    def map(self, fa: Future[Any], func: Callable[[Any], Any]) -> Future[Any]:
        out: Future[Any] = Future()

        def _on_done(done: Future[Any]) -> None:
            if _forward_failure(done, out):
                return
            try:
                out.set_result(func(done.result()))
            except Exception as e:
                out.set_exception(e)

        fa.add_done_callback(_on_done)
        return out


IDENTITY = IdentityApplicative()
AWAITABLE = AwaitableApplicative()
FUTURE = FutureApplicative()
