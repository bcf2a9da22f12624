from __future__ import annotations
from typing import Any, Callable, Generic, TypeVar

R = TypeVar("R")
Q = TypeVar("Q")
A = TypeVar("A")
B = TypeVar("B")


class Reader(Generic[R, A]):
    """A pure computation that needs an environment ``R`` to produce ``A``.

    Anywhere a Reader is accepted, a plain ``R -> A`` callable works too.
    """
    def __init__(self, run: Callable[[R], A]): self._run = run
    def __call__(self, r: R) -> A: return self._run(r)

    @staticmethod
    def of(a: A) -> "Reader[Any, A]":
        return Reader(lambda _: a)

    def map(self, f: Callable[[A], B]) -> "Reader[R, B]":
        return Reader(lambda r: f(self(r)))

    def chain(self, f: Callable[[A], Callable[[R], B]]) -> "Reader[R, B]":
        return Reader(lambda r: f(self(r))(r))

    def local(self, f: Callable[[Q], R]) -> "Reader[Q, A]":
        return Reader(lambda q: self(f(q)))


def ask() -> Reader[R, R]:
    return Reader(lambda r: r)


def asks(f: Callable[[R], A]) -> Reader[R, A]:
    return Reader(f)
