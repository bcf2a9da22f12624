from __future__ import annotations
from typing import Any, Callable, Generic, TypeVar

from .typeclass import Monad

R = TypeVar("R"); Q = TypeVar("Q"); A = TypeVar("A"); B = TypeVar("B")


class ReaderT(Generic[R]):
    """Lift a base effect into an environment-parameterized effect.

    Given a capability record ``M`` for some base effect (``of``/``map``/
    ``ap``/``chain``), ``ReaderT(M)`` works with plain callables
    ``r -> M<A>``. Every operation threads the *same* environment through
    both sides of a combination and leaves evaluation order to ``M``.

    Args:
        M: Capability record of the base effect; must satisfy ``Monad``.

    Raises:
        TypeError: If ``M`` is missing any of ``of``/``map``/``ap``/``chain``.

    Example:
        ```python
        from rtepy.result import result, Ok

        T = ReaderT(result)
        plus_n = T.chain(T.of(1), lambda a: T.asks(lambda r: a + r["n"]))
        assert plus_n({"n": 2}) == Ok(3)
        ```
    """
    def __init__(self, M: Monad):
        if not isinstance(M, Monad):
            raise TypeError(f"ReaderT needs a Monad capability record, got {M!r}")
        self.M = M

    def of(self, a: A) -> Callable[[Any], Any]:
        M = self.M
        return lambda _: M.of(a)

    def map(self, fa: Callable[[R], Any], f: Callable[[A], B]) -> Callable[[R], Any]:
        M = self.M
        return lambda r: M.map(fa(r), f)

    def ap(self, fab: Callable[[R], Any], fa: Callable[[R], Any]) -> Callable[[R], Any]:
        M = self.M
        return lambda r: M.ap(fab(r), fa(r))

    def chain(self, fa: Callable[[R], Any], f: Callable[[A], Callable[[R], Any]]) -> Callable[[R], Any]:
        M = self.M
        return lambda r: M.chain(fa(r), lambda a: f(a)(r))

    def ask(self) -> Callable[[R], Any]:
        M = self.M
        return lambda r: M.of(r)

    def asks(self, f: Callable[[R], A]) -> Callable[[R], Any]:
        M = self.M
        return lambda r: M.of(f(r))

    def local(self, fa: Callable[[R], Any], f: Callable[[Q], R]) -> Callable[[Q], Any]:
        return lambda q: fa(f(q))

    def from_reader(self, ma: Callable[[R], A]) -> Callable[[R], Any]:
        M = self.M
        return lambda r: M.of(ma(r))

    def from_m(self, ma: Any) -> Callable[[Any], Any]:
        return lambda _: ma
