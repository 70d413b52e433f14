from .errors import AppError, ErrorCategory, ErrorKind
from .result import Failure, Result, Success, collect
from .unit_of_work import UnitOfWork

__all__ = [
    "AppError",
    "ErrorCategory",
    "ErrorKind",
    "Failure",
    "Result",
    "Success",
    "UnitOfWork",
    "collect",
]
