from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T]):
    """A value that may be absent, consumed by ``from_option``.

    Only elimination is offered: ``fold`` runs exactly one of its handlers.
    """
    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    def fold(self, on_none: Callable[[], U], on_some: Callable[[T], U]) -> U:
        if self.is_some():
            return on_some(self.value)  # type: ignore[attr-defined]
        return on_none()


@dataclass(frozen=True)
class Some(Option[T]):
    value: T
    def is_some(self) -> bool: return True


class _None(Option[None]):
    __slots__ = ()
    def __repr__(self) -> str: return "NONE"
    def __reduce__(self): return "NONE"
    def is_some(self) -> bool: return False


NONE: Option[None] = _None()


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE  # type: ignore[return-value]
