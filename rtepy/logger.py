from __future__ import annotations
import sys, datetime as _dt, json
from typing import Any, Callable, Dict, Optional, TypeVar

from .effect import Effect
from .result import Result
from .task import Task

R = TypeVar("R"); E = TypeVar("E"); A = TypeVar("A")

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


class ConsoleLogger:
    def __init__(self, name: str = "rtepy", level: str = "INFO", json_output: bool = False, context: Optional[Dict[str, Any]] = None):
        self.name = name
        self.level = _LEVELS.get(level.upper(), 20)
        self.json_output = json_output
        self.context = dict(context or {})

    def set_level(self, level: str) -> None:
        self.level = _LEVELS.get(level.upper(), self.level)

    def bind(self, **fields: Any) -> "ConsoleLogger":
        ctx = dict(self.context); ctx.update(fields)
        return ConsoleLogger(self.name, level=self.level_name, json_output=self.json_output, context=ctx)

    @property
    def level_name(self) -> str:
        for k, v in _LEVELS.items():
            if v == self.level: return k
        return "INFO"

    def enabled(self, level: str) -> bool:
        return _LEVELS[level] >= self.level

    def _log(self, level: str, msg: str, **fields: Any) -> None:
        if not self.enabled(level):
            return
        ts = _dt.datetime.now(_dt.timezone.utc).isoformat()
        all_fields: Dict[str, Any] = {}
        all_fields.update(self.context)
        all_fields.update(fields)
        if self.json_output:
            data: Dict[str, Any] = {"ts": ts, "name": self.name, "level": level, "msg": msg}
            if all_fields:
                data["fields"] = all_fields
            print(json.dumps(data, separators=(",", ":"), default=repr), file=sys.stderr)
        else:
            extras = "".join([f" {k}={v}" for k, v in sorted(all_fields.items())]) if all_fields else ""
            print(f"[{ts}] {self.name} {level}: {msg}{extras}", file=sys.stderr)

    def log(self, level: str, msg: str, **fields: Any) -> None: self._log(level.upper(), msg, **fields)
    def debug(self, msg: str, **fields: Any) -> None: self._log("DEBUG", msg, **fields)
    def info(self, msg: str, **fields: Any) -> None: self._log("INFO", msg, **fields)
    def warn(self, msg: str, **fields: Any) -> None: self._log("WARN", msg, **fields)
    def error(self, msg: str, **fields: Any) -> None: self._log("ERROR", msg, **fields)


_default = ConsoleLogger()


def get_logger() -> ConsoleLogger:
    return _default


def log_outcome(logger: ConsoleLogger, label: str, res: Result[Any, Any], err_level: str = "WARN") -> None:
    if res.is_ok():
        logger.debug(f"{label} ok")
    else:
        logger.log(err_level, f"{label} err", error=repr(res.error))  # type: ignore[attr-defined]


def traced(label: str, logger: Optional[ConsoleLogger] = None) -> Callable[[Effect[R, E, A]], Effect[R, E, A]]:
    """Log when an Effect starts and how it settles.

    ``start`` and ``ok`` go out at DEBUG, ``err`` at WARN with the error's
    repr. The wrapped Effect's outcome and timing are unchanged.

    Example:
        ```python
        fetch_user = pipe(load_user, traced("load_user", ConsoleLogger(level="DEBUG")))
        ```
    """
    def go(ma: Effect[R, E, A]) -> Effect[R, E, A]:
        def at(r: R) -> Task[Result[E, A]]:
            async def run():
                lg = logger or get_logger()
                lg.debug(f"{label} start")
                res = await ma(r)()
                log_outcome(lg, label, res)
                return res
            return Task(run)
        return Effect(at)
    return go
