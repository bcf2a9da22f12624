from .effect import (
    Effect,
    right,
    left,
    from_task_result,
    right_task,
    left_task,
    right_io,
    left_io,
    right_reader,
    left_reader,
    from_result,
    from_io_result,
    from_option,
    from_predicate,
    try_catch,
    ask,
    asks,
    local,
    fold,
    get_or_else,
    or_else,
    run,
    reader_task_result,
    reader_task_result_seq,
)
from . import effect, task_result
from .reader_t import ReaderT
from .typeclass import Functor, Apply, Applicative, Monad, Bifunctor, Alt, MonadIO, MonadTask
from .task import Task
from .result import Result, Ok, Err
from .option import Option, Some, NONE, from_nullable
from .io import IO
from .reader import Reader
from .function import pipe, flow, identity, constant
from .errors import Failure
from .logger import ConsoleLogger, get_logger, traced
from .runtime import Runtime
