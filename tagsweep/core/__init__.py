"""Core types: results, errors and configuration."""

from .config import CleanupConfig, load_config
from .errors import CleanupError, ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "CleanupConfig",
    "load_config",
    # errors
    "CleanupError",
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
