"""Environment-dependent, asynchronous, failable computations.

An ``Effect[R, E, A]`` is a callable ``R -> Task[Result[E, A]]``. Building,
combining and transforming Effects never touches the environment and never
starts work; only ``run(effect, r)`` does.

Combinators come in two shapes:

* data-last functions for use with ``pipe`` (``map(f)``, ``chain(f)``,
  ``local(f)``, ``or_else(f)`` ...), each returning a function of the Effect;
* fluent methods on ``Effect`` itself (``eff.map(f).chain(g)``).

The ``reader_task_result`` and ``reader_task_result_seq`` records carry the
data-first algebra; they differ only in ``ap`` (independent vs sequential).

Example:
    ```python
    from rtepy import effect as RTE
    from rtepy.function import pipe
    from rtepy.result import Ok

    greeting = pipe(
        RTE.asks(lambda env: env["name"]),
        RTE.chain(lambda n: RTE.right(n) if n else RTE.left("empty name")),
        RTE.map(lambda n: f"hello {n}"),
    )
    assert await RTE.run(greeting, {"name": "ada"}) == Ok("hello ada")
    ```
"""
from __future__ import annotations
from typing import Any, Awaitable, Callable, Generic, TypeVar

from . import task_result as TR
from .function import identity
from .option import Option
from .reader import Reader
from .reader_t import ReaderT
from .result import Result
from .task import Task

R = TypeVar("R"); Q = TypeVar("Q"); E = TypeVar("E"); M = TypeVar("M")
A = TypeVar("A"); B = TypeVar("B")

_T = ReaderT(TR.task_result)


class Effect(Generic[R, E, A]):
    def __init__(self, run: Callable[[R], Task[Result[E, A]]]): self._run_impl = run
    def __call__(self, r: R) -> Task[Result[E, A]]: return self._run_impl(r)
    def __repr__(self) -> str: return f"Effect({self._run_impl!r})"

    def map(self, f: Callable[[A], B]) -> "Effect[R, E, B]":
        return _map(self, f)

    # self holds the function; fa the argument
    def ap(self, fa: "Effect[R, E, Any]") -> "Effect[R, E, Any]":
        return _ap(self, fa)

    def ap_seq(self, fa: "Effect[R, E, Any]") -> "Effect[R, E, Any]":
        return _ap_seq(self, fa)

    def chain(self, f: Callable[[A], "Effect[R, E, B]"]) -> "Effect[R, E, B]":
        return _chain(self, f)

    flat_map = chain

    def chain_first(self, f: Callable[[A], "Effect[R, E, B]"]) -> "Effect[R, E, A]":
        return chain_first(f)(self)

    def alt(self, that: Callable[[], "Effect[R, E, A]"]) -> "Effect[R, E, A]":
        return _alt(self, that)

    def bimap(self, f: Callable[[E], M], g: Callable[[A], B]) -> "Effect[R, M, B]":
        return _bimap(self, f, g)

    def map_left(self, f: Callable[[E], M]) -> "Effect[R, M, A]":
        return _map_left(self, f)

    def local(self, f: Callable[[Q], R]) -> "Effect[Q, E, A]":
        return local(f)(self)

    def fold(self, on_err: Callable[[E], Callable[[R], Task[B]]], on_ok: Callable[[A], Callable[[R], Task[B]]]) -> Reader[R, Task[B]]:
        return fold(on_err, on_ok)(self)

    def get_or_else(self, on_err: Callable[[E], Callable[[R], Task[A]]]) -> Reader[R, Task[A]]:
        return get_or_else(on_err)(self)

    def or_else(self, f: Callable[[E], "Effect[R, M, A]"]) -> "Effect[R, M, A]":
        return or_else(f)(self)

    async def run(self, r: R) -> Result[E, A]:
        return await run(self, r)


# constructors

def right(a: A) -> Effect[Any, Any, A]:
    return Effect(_T.of(a))


def from_task_result(ma: Task[Result[E, A]]) -> Effect[Any, E, A]:
    return Effect(_T.from_m(ma))


def left(e: E) -> Effect[Any, E, Any]:
    return from_task_result(TR.left(e))


def right_task(ma: Task[A]) -> Effect[Any, Any, A]:
    return from_task_result(TR.right_task(ma))


def left_task(me: Task[E]) -> Effect[Any, E, Any]:
    return from_task_result(TR.left_task(me))


def right_io(ma: Callable[[], A]) -> Effect[Any, Any, A]:
    return from_task_result(TR.right_io(ma))


def left_io(me: Callable[[], E]) -> Effect[Any, E, Any]:
    return from_task_result(TR.left_io(me))


def right_reader(ma: Callable[[R], A]) -> Effect[R, Any, A]:
    return Effect(_T.from_reader(ma))


def left_reader(me: Callable[[R], E]) -> Effect[R, E, Any]:
    return Effect(lambda r: TR.left(me(r)))


def from_result(ma: Result[E, A]) -> Effect[Any, E, A]:
    return from_task_result(TR.from_result(ma))


def from_io_result(ma: Callable[[], Result[E, A]]) -> Effect[Any, E, A]:
    return from_task_result(TR.from_io_result(ma))


def from_option(on_none: Callable[[], E]) -> Callable[[Option[A]], Effect[Any, E, A]]:
    return lambda ma: ma.fold(lambda: left(on_none()), right)


def from_predicate(predicate: Callable[[A], bool], on_false: Callable[[A], E]) -> Callable[[A], Effect[Any, E, A]]:
    return lambda a: right(a) if predicate(a) else left(on_false(a))


def try_catch(f: Callable[[R], Awaitable[A]], on_error: Callable[[Exception], E]) -> Effect[R, E, A]:
    """Wrap an exception-raising coroutine function of the environment.

    ``f(r)`` is called only when the Effect's Task runs; any ``Exception`` it
    raises becomes ``Err(on_error(ex))``.
    """
    return Effect(lambda r: TR.try_catch(lambda: f(r), on_error))


def ask() -> Effect[R, Any, R]:
    return Effect(_T.ask())


def asks(f: Callable[[R], A]) -> Effect[R, Any, A]:
    return Effect(_T.asks(f))


# data-first algebra

def _map(fa: Effect[R, E, A], f: Callable[[A], B]) -> Effect[R, E, B]:
    return Effect(_T.map(fa, f))


def _ap(fab: Effect[R, E, Callable[[A], B]], fa: Effect[R, E, A]) -> Effect[R, E, B]:
    return Effect(_T.ap(fab, fa))


def _ap_seq(fab: Effect[R, E, Callable[[A], B]], fa: Effect[R, E, A]) -> Effect[R, E, B]:
    return _chain(fab, lambda f: _map(fa, f))


def _chain(fa: Effect[R, E, A], f: Callable[[A], Effect[R, E, B]]) -> Effect[R, E, B]:
    return Effect(_T.chain(fa, f))


def _alt(fx: Effect[R, E, A], fy: Callable[[], Effect[R, E, A]]) -> Effect[R, E, A]:
    return Effect(lambda r: TR.alt(fx(r), lambda: fy()(r)))


def _bimap(fa: Effect[R, E, A], f: Callable[[E], M], g: Callable[[A], B]) -> Effect[R, M, B]:
    return Effect(lambda r: TR.bimap(fa(r), f, g))


def _map_left(fa: Effect[R, E, A], f: Callable[[E], M]) -> Effect[R, M, A]:
    return Effect(lambda r: TR.map_left(fa(r), f))


class ReaderTaskResult:
    of = staticmethod(right)
    map = staticmethod(_map)
    ap = staticmethod(_ap)
    chain = staticmethod(_chain)
    alt = staticmethod(_alt)
    bimap = staticmethod(_bimap)
    map_left = staticmethod(_map_left)
    from_io = staticmethod(right_io)
    from_task = staticmethod(right_task)


class ReaderTaskResultSeq(ReaderTaskResult):
    ap = staticmethod(_ap_seq)


reader_task_result = ReaderTaskResult()
reader_task_result_seq = ReaderTaskResultSeq()


# data-last combinators

def map(f: Callable[[A], B]) -> Callable[[Effect[R, E, A]], Effect[R, E, B]]:
    return lambda fa: _map(fa, f)


def ap(fa: Effect[R, E, A]) -> Callable[[Effect[R, E, Callable[[A], B]]], Effect[R, E, B]]:
    return lambda fab: _ap(fab, fa)


def ap_seq(fa: Effect[R, E, A]) -> Callable[[Effect[R, E, Callable[[A], B]]], Effect[R, E, B]]:
    return lambda fab: _ap_seq(fab, fa)


def ap_first(fb: Effect[R, E, B]) -> Callable[[Effect[R, E, A]], Effect[R, E, A]]:
    return lambda fa: _ap(_map(fa, lambda a: lambda _: a), fb)


def ap_second(fb: Effect[R, E, B]) -> Callable[[Effect[R, E, A]], Effect[R, E, B]]:
    return lambda fa: _ap(_map(fa, lambda _: lambda b: b), fb)


def chain(f: Callable[[A], Effect[R, E, B]]) -> Callable[[Effect[R, E, A]], Effect[R, E, B]]:
    return lambda ma: _chain(ma, f)


def chain_first(f: Callable[[A], Effect[R, E, B]]) -> Callable[[Effect[R, E, A]], Effect[R, E, A]]:
    return lambda ma: _chain(ma, lambda a: _map(f(a), lambda _: a))


def flatten(mma: Effect[R, E, Effect[R, E, A]]) -> Effect[R, E, A]:
    return _chain(mma, identity)


def alt(that: Callable[[], Effect[R, E, A]]) -> Callable[[Effect[R, E, A]], Effect[R, E, A]]:
    return lambda fa: _alt(fa, that)


def bimap(f: Callable[[E], M], g: Callable[[A], B]) -> Callable[[Effect[R, E, A]], Effect[R, M, B]]:
    return lambda fa: _bimap(fa, f, g)


def map_left(f: Callable[[E], M]) -> Callable[[Effect[R, E, A]], Effect[R, M, A]]:
    return lambda fa: _map_left(fa, f)


def local(f: Callable[[Q], R]) -> Callable[[Effect[R, E, A]], Effect[Q, E, A]]:
    return lambda ma: Effect(_T.local(ma, f))


def fold(
    on_err: Callable[[E], Callable[[R], Task[B]]],
    on_ok: Callable[[A], Callable[[R], Task[B]]],
) -> Callable[[Effect[R, E, A]], Reader[R, Task[B]]]:
    """Collapse both outcomes into one deferred value.

    Each handler returns an environment-dependent Task and receives the same
    environment the Effect ran with. Exactly one handler runs per execution.
    """
    return lambda ma: Reader(lambda r: TR.fold(lambda e: on_err(e)(r), lambda a: on_ok(a)(r))(ma(r)))


def get_or_else(on_err: Callable[[E], Callable[[R], Task[A]]]) -> Callable[[Effect[R, E, A]], Reader[R, Task[A]]]:
    return lambda ma: Reader(lambda r: TR.get_or_else(lambda e: on_err(e)(r))(ma(r)))


def or_else(f: Callable[[E], Effect[R, M, A]]) -> Callable[[Effect[R, E, A]], Effect[R, M, A]]:
    return lambda ma: Effect(lambda r: TR.or_else(lambda e: f(e)(r))(ma(r)))


async def run(ma: Effect[R, E, A], r: R) -> Result[E, A]:
    """Execute ``ma`` against the environment ``r``.

    This is the only place work happens. Domain failures come back as
    ``Err``; nothing is raised for them.
    """
    return await ma(r)()
