"""Asynchronous computations that settle to a ``Result``.

A TaskResult is just a ``Task[Result[E, A]]``: awaiting it always yields
``Ok`` or ``Err``, never an exception. The functions here take the
TaskResult first; ``rtepy.effect`` builds its environment-aware surface on
top of the ``task_result`` record at the bottom of this module.
"""
from __future__ import annotations
from typing import Any, Awaitable, Callable, TypeVar

from . import task as T
from .option import Option
from .result import Err, Ok, Result, ap as result_ap
from .task import Task

E = TypeVar("E"); A = TypeVar("A"); B = TypeVar("B"); M = TypeVar("M")


def left(e: E) -> Task[Result[E, Any]]:
    return T.of(Err(e))


def right(a: A) -> Task[Result[Any, A]]:
    return T.of(Ok(a))


def right_task(ma: Task[A]) -> Task[Result[Any, A]]:
    return T.map(ma, Ok)


def left_task(me: Task[E]) -> Task[Result[E, Any]]:
    return T.map(me, Err)


def right_io(ma: Callable[[], A]) -> Task[Result[Any, A]]:
    return right_task(T.from_io(ma))


def left_io(me: Callable[[], E]) -> Task[Result[E, Any]]:
    return left_task(T.from_io(me))


def from_result(ma: Result[E, A]) -> Task[Result[E, A]]:
    return T.of(ma)


def from_io_result(ma: Callable[[], Result[E, A]]) -> Task[Result[E, A]]:
    return T.from_io(ma)


def from_option(on_none: Callable[[], E]) -> Callable[[Option[A]], Task[Result[E, A]]]:
    return lambda ma: ma.fold(lambda: left(on_none()), right)


def from_predicate(predicate: Callable[[A], bool], on_false: Callable[[A], E]) -> Callable[[A], Task[Result[E, A]]]:
    return lambda a: right(a) if predicate(a) else left(on_false(a))


def try_catch(thunk: Callable[[], Awaitable[A]], on_error: Callable[[Exception], E]) -> Task[Result[E, A]]:
    async def run():
        try: return Ok(await thunk())
        except Exception as ex: return Err(on_error(ex))
    return Task(run)


def map(fa: Task[Result[E, A]], f: Callable[[A], B]) -> Task[Result[E, B]]:
    return T.map(fa, lambda ra: ra.map(f))


def ap(fab: Task[Result[E, Callable[[A], B]]], fa: Task[Result[E, A]]) -> Task[Result[E, B]]:
    return T.ap(T.map(fab, lambda rf: lambda ra: result_ap(rf, ra)), fa)


def ap_seq(fab: Task[Result[E, Callable[[A], B]]], fa: Task[Result[E, A]]) -> Task[Result[E, B]]:
    return chain(fab, lambda f: map(fa, f))


def chain(fa: Task[Result[E, A]], f: Callable[[A], Task[Result[E, B]]]) -> Task[Result[E, B]]:
    return T.chain(fa, lambda ra: f(ra.value) if ra.is_ok() else T.of(ra))  # type: ignore[attr-defined]


def alt(fx: Task[Result[E, A]], fy: Callable[[], Task[Result[E, A]]]) -> Task[Result[E, A]]:
    return T.chain(fx, lambda rx: fy() if rx.is_err() else T.of(rx))


def bimap(fa: Task[Result[E, A]], f: Callable[[E], M], g: Callable[[A], B]) -> Task[Result[M, B]]:
    return T.map(fa, lambda ra: ra.bimap(f, g))


def map_left(fa: Task[Result[E, A]], f: Callable[[E], M]) -> Task[Result[M, A]]:
    return T.map(fa, lambda ra: ra.map_err(f))


def fold(on_err: Callable[[E], Task[B]], on_ok: Callable[[A], Task[B]]) -> Callable[[Task[Result[E, A]]], Task[B]]:
    return lambda ma: T.chain(ma, lambda ra: ra.fold(on_err, on_ok))


def get_or_else(on_err: Callable[[E], Task[A]]) -> Callable[[Task[Result[E, A]]], Task[A]]:
    return lambda ma: T.chain(ma, lambda ra: ra.fold(on_err, T.of))


def or_else(f: Callable[[E], Task[Result[M, A]]]) -> Callable[[Task[Result[E, A]]], Task[Result[M, A]]]:
    return lambda ma: T.chain(ma, lambda ra: f(ra.error) if ra.is_err() else T.of(ra))  # type: ignore[attr-defined]


class TaskResultMonad:
    of = staticmethod(right)
    map = staticmethod(map)
    ap = staticmethod(ap)
    chain = staticmethod(chain)
    alt = staticmethod(alt)
    bimap = staticmethod(bimap)
    map_left = staticmethod(map_left)
    from_io = staticmethod(right_io)
    from_task = staticmethod(right_task)


class TaskResultSeqMonad(TaskResultMonad):
    ap = staticmethod(ap_seq)


task_result = TaskResultMonad()
task_result_seq = TaskResultSeqMonad()
