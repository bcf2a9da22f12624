from __future__ import annotations
from functools import reduce
from typing import Any, Callable, TypeVar

A = TypeVar("A")


def identity(a: A) -> A:
    return a


def constant(a: A) -> Callable[..., A]:
    return lambda *_: a


def pipe(a: Any, *fns: Callable[[Any], Any]) -> Any:
    """Thread ``a`` through ``fns`` left to right: ``pipe(a, f, g) == g(f(a))``."""
    return reduce(lambda acc, f: f(acc), fns, a)


def flow(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    return lambda a: pipe(a, *fns)
