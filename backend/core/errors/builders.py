"""Error Builder Functions

Ergonomic constructors for AppError instances, grouped by error category.
Each builder returns `Err[AppError]` so call sites can `return` it directly
from a function typed as `Result[..., AppError]`.
"""
from __future__ import annotations

from .types import AppError, ErrorCode, ErrorContext, Err


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    value: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, "value": value, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def invalid_format(
    field: str, expected: str, got: str | None = None, origin: str = ""
) -> Err[AppError]:
    msg = f"Invalid format for '{field}': expected {expected}"
    if got:
        msg += f", got '{got}'"
    return validation_error(
        msg,
        code=ErrorCode.E2002_INVALID_FORMAT,
        field=field,
        value=got,
        expected=expected,
        origin=origin,
    )


def out_of_range(
    field: str,
    value: int,
    *,
    max_value: int,
    origin: str = "",
) -> Err[AppError]:
    return validation_error(
        f"'{field}' is {value}, maximum is {max_value}",
        code=ErrorCode.E2003_OUT_OF_RANGE,
        field=field,
        value=str(value),
        max=max_value,
        origin=origin,
    )


def unsupported_word(
    word: str,
    gender: str | None = None,
    *,
    origin: str = "",
    cause: Exception | None = None,
) -> Err[AppError]:
    """Word that no declension group accepts."""
    msg = f"Cannot determine declension group for '{word}'"
    if gender:
        msg += f" ({gender})"
    meta = {"word": word, "gender": gender}
    return Err(AppError(
        code=ErrorCode.E2030_UNSUPPORTED_WORD,
        message=msg,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
        cause=cause,
    ))


# =============================================================================
# Lookup Errors (E4xxx)
# =============================================================================

def not_found(entity: str, id: str | None = None, origin: str = "") -> Err[AppError]:
    msg = f"{entity} not found"
    if id:
        msg += f": {id}"
    return Err(AppError(
        code=ErrorCode.E4010_NOT_FOUND,
        message=msg,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in {"entity": entity, "entity_id": id}.items() if v is not None},
    ))
