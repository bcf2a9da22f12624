from __future__ import annotations
from typing import Callable, Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")


class IO(Generic[A]):
    """A synchronous side-effecting computation that has not run yet.

    ``IO(thunk)`` stores the thunk; calling the IO runs it, once per call.
    """
    def __init__(self, thunk: Callable[[], A]): self._thunk = thunk
    def __call__(self) -> A: return self._thunk()
    def __repr__(self) -> str: return f"IO({self._thunk!r})"

    @staticmethod
    def of(a: A) -> "IO[A]":
        return IO(lambda: a)

    def map(self, f: Callable[[A], B]) -> "IO[B]":
        return IO(lambda: f(self()))

    def chain(self, f: Callable[[A], "IO[B]"]) -> "IO[B]":
        return IO(lambda: f(self())())
