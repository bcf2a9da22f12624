from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .errors import Failure

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")
M = TypeVar("M")


class Result(Generic[E, A]):
    def is_ok(self) -> bool: raise NotImplementedError
    def is_err(self) -> bool: return not self.is_ok()

    def map(self, f: Callable[[A], B]) -> "Result[E, B]":
        if self.is_ok():
            return Ok(f(self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def map_err(self, f: Callable[[E], B]) -> "Result[B, A]":
        if self.is_err():
            return Err(f(self.error))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def bimap(self, on_err: Callable[[E], M], on_ok: Callable[[A], B]) -> "Result[M, B]":
        if self.is_ok():
            return Ok(on_ok(self.value))  # type: ignore[attr-defined]
        return Err(on_err(self.error))  # type: ignore[attr-defined]

    def and_then(self, f: Callable[[A], "Result[E, B]"]) -> "Result[E, B]":
        if self.is_ok():
            return f(self.value)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def or_else(self, f: Callable[[E], "Result[M, A]"]) -> "Result[M, A]":
        if self.is_err():
            return f(self.error)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def fold(self, on_err: Callable[[E], B], on_ok: Callable[[A], B]) -> B:
        if self.is_ok():
            return on_ok(self.value)  # type: ignore[attr-defined]
        return on_err(self.error)  # type: ignore[attr-defined]

    def get_or_else(self, default: A) -> A:
        return self.value if self.is_ok() else default  # type: ignore[attr-defined]

    def unwrap(self) -> A:
        if self.is_ok():
            return self.value  # type: ignore[attr-defined]
        raise Failure(self.error)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Ok(Result[E, A]):
    value: A
    def is_ok(self) -> bool: return True


@dataclass(frozen=True)
class Err(Result[E, A]):
    error: E
    def is_ok(self) -> bool: return False


def of(a: A) -> Result[Any, A]:
    return Ok(a)


def map(fa: Result[E, A], f: Callable[[A], B]) -> Result[E, B]:
    return fa.map(f)


def ap(fab: Result[E, Callable[[A], B]], fa: Result[E, A]) -> Result[E, B]:
    # an Err in function position wins over one in value position
    if fab.is_err():
        return fab  # type: ignore[return-value]
    if fa.is_err():
        return fa  # type: ignore[return-value]
    return Ok(fab.value(fa.value))  # type: ignore[attr-defined]


def chain(fa: Result[E, A], f: Callable[[A], Result[E, B]]) -> Result[E, B]:
    return fa.and_then(f)


class ResultMonad:
    of = staticmethod(of)
    map = staticmethod(map)
    ap = staticmethod(ap)
    chain = staticmethod(chain)


result = ResultMonad()
