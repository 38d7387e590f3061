"""Monadic Error Handling System

Type-safe error handling modeled on Haskell's Either and Rust's Result.

Key components:
- Result[T, E]: Monadic container for success/failure
- AppError: Error value with code, message, context and metadata
- ErrorCode: Hierarchical error code taxonomy
- Builder functions: Ergonomic error construction
- FastAPI handlers: AppError → JSON response

Usage:
    from core.errors import Ok, Err, Result, AppError, invalid_format

    def parse_case(value: str) -> Result[GrammaticalCase, AppError]:
        case = CASE_ALIASES.get(value.lower())
        if case is None:
            return invalid_format("case", "one of the seven case names", value)
        return Ok(case)

    match parse_case("gen"):
        case Ok(case):
            print(case.value)
        case Err(error):
            log.warning(error.message, code=error.code.name)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    sequence_results,
)

from .builders import (
    validation_error,
    invalid_format,
    out_of_range,
    unsupported_word,
    not_found,
)

from .handlers import (
    AppErrorException,
    register_error_handlers,
    result_to_response,
    raise_result,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "sequence_results",
    "validation_error",
    "invalid_format",
    "out_of_range",
    "unsupported_word",
    "not_found",
    "AppErrorException",
    "register_error_handlers",
    "result_to_response",
    "raise_result",
]
