from __future__ import annotations
import asyncio
from typing import Awaitable, Callable, Generic, TypeVar

A = TypeVar("A"); B = TypeVar("B")


class Task(Generic[A]):
    """An asynchronous computation that has not started.

    A Task wraps a zero-argument callable returning an awaitable. Building or
    combining Tasks does no work; each call ``task()`` hands back a fresh
    awaitable, so running a Task twice gives two independent executions.

    Example:
        ```python
        async def fetch() -> int:
            await asyncio.sleep(0.01)
            return 42

        t = map(Task(fetch), lambda x: x + 1)
        assert await t() == 43
        ```
    """
    def __init__(self, thunk: Callable[[], Awaitable[A]]): self._thunk = thunk
    def __call__(self) -> Awaitable[A]: return self._thunk()
    def __repr__(self) -> str: return f"Task({self._thunk!r})"


def of(a: A) -> Task[A]:
    async def run(): return a
    return Task(run)


def from_io(io: Callable[[], A]) -> Task[A]:
    async def run(): return io()
    return Task(run)


def map(fa: Task[A], f: Callable[[A], B]) -> Task[B]:
    async def run(): return f(await fa())
    return Task(run)


def ap(fab: Task[Callable[[A], B]], fa: Task[A]) -> Task[B]:
    # both sides are started before either is awaited; completion order is free
    async def run():
        f, a = await asyncio.gather(fab(), fa())
        return f(a)
    return Task(run)


def ap_seq(fab: Task[Callable[[A], B]], fa: Task[A]) -> Task[B]:
    return chain(fab, lambda f: map(fa, f))


def chain(fa: Task[A], f: Callable[[A], Task[B]]) -> Task[B]:
    async def run(): return await f(await fa())()
    return Task(run)


class TaskMonad:
    of = staticmethod(of)
    map = staticmethod(map)
    ap = staticmethod(ap)
    chain = staticmethod(chain)
    from_io = staticmethod(from_io)

    @staticmethod
    def from_task(fa: Task[A]) -> Task[A]: return fa


class TaskSeqMonad(TaskMonad):
    ap = staticmethod(ap_seq)


task = TaskMonad()
task_seq = TaskSeqMonad()
