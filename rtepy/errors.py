from __future__ import annotations
from typing import Generic, TypeVar

E = TypeVar("E")


class Failure(Exception, Generic[E]):
    """Raised when a failed Result is forced at an unwrap boundary.

    Ordinary pipelines never see this: failures travel as ``Err`` values and
    only ``Result.unwrap`` and ``Runtime.run_or_raise`` turn them into an
    exception for callers that prefer one. The typed error is kept on
    ``error``; the message is its repr.
    """
    def __init__(self, error: E):
        super().__init__(repr(error)); self.error = error
