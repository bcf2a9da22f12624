"""Capability records for the algebra.

Python has no higher-kinded generics, so an algebra (``of``/``map``/``ap``/
``chain`` for some effect type) is an ordinary object passed around
explicitly. These protocols name the shape each record must have; every
effect module exposes one or two concrete records (``task``, ``task_seq``,
``task_result``, ``result``, ``reader_task_result`` ...).

The effect values themselves stay opaque here, hence the ``Any`` signatures.
"""
from __future__ import annotations
from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class Functor(Protocol):
    def map(self, fa: Any, f: Callable[[Any], Any]) -> Any: ...


@runtime_checkable
class Apply(Functor, Protocol):
    def ap(self, fab: Any, fa: Any) -> Any: ...


@runtime_checkable
class Applicative(Apply, Protocol):
    def of(self, a: Any) -> Any: ...


@runtime_checkable
class Monad(Applicative, Protocol):
    def chain(self, fa: Any, f: Callable[[Any], Any]) -> Any: ...


@runtime_checkable
class Bifunctor(Protocol):
    def bimap(self, fea: Any, f: Callable[[Any], Any], g: Callable[[Any], Any]) -> Any: ...
    def map_left(self, fea: Any, f: Callable[[Any], Any]) -> Any: ...


@runtime_checkable
class Alt(Functor, Protocol):
    def alt(self, fx: Any, fy: Callable[[], Any]) -> Any: ...


@runtime_checkable
class MonadIO(Monad, Protocol):
    def from_io(self, fa: Callable[[], Any]) -> Any: ...


@runtime_checkable
class MonadTask(MonadIO, Protocol):
    def from_task(self, fa: Any) -> Any: ...
