from __future__ import annotations
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

import anyio

from .effect import Effect, run
from .logger import ConsoleLogger, get_logger, log_outcome
from .result import Result

R = TypeVar("R"); Q = TypeVar("Q"); E = TypeVar("E"); A = TypeVar("A")


class Runtime(Generic[R]):
    """Runs Effects against one environment supplied at the outer edge.

    The environment is handed to every Effect by reference and never
    modified. ``provide`` derives a new Runtime for a transformed environment
    and leaves this one alone.

    Args:
        env: Environment passed to every Effect this runtime runs
        logger: Logger for run records (default: the module logger)
        backend_options: Options forwarded to ``anyio.run`` by ``run_sync``
            (for example ``{"use_uvloop": True}``)

    Example:
        ```python
        rt = Runtime({"db_url": "sqlite://"})
        result = await rt.run(load_users)

        # from synchronous code
        result = rt.run_sync(load_users)
        ```
    """
    def __init__(self, env: R, logger: Optional[ConsoleLogger] = None, backend_options: Optional[Dict[str, Any]] = None):
        self.env = env
        self.logger = logger or get_logger()
        self.backend_options = dict(backend_options or {})

    def provide(self, f: Callable[[R], Q]) -> "Runtime[Q]":
        return Runtime(f(self.env), logger=self.logger, backend_options=self.backend_options)

    async def run(self, eff: Effect[R, E, A]) -> Result[E, A]:
        """Execute ``eff`` and return its settled Result.

        Raises:
            TypeError: If ``eff`` is not callable
        """
        if not callable(eff):
            raise TypeError(f"Runtime.run expects an Effect, got {type(eff).__name__}")
        self.logger.debug("run start", effect=type(eff).__name__)
        res = await run(eff, self.env)
        log_outcome(self.logger, "run", res, err_level="DEBUG")
        return res

    async def run_or_raise(self, eff: Effect[R, E, A]) -> A:
        """Execute ``eff`` and return its success value.

        Raises:
            Failure: Carrying the error when ``eff`` settles to ``Err``
        """
        return (await self.run(eff)).unwrap()

    def run_sync(self, eff: Effect[R, E, A]) -> Result[E, A]:
        """Blocking variant of ``run`` for callers outside an event loop.

        Tasks are asyncio-based, so the asyncio backend is always used.
        """
        return anyio.run(self.run, eff, backend="asyncio", backend_options=self.backend_options or None)
