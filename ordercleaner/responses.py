"""Building of success, error and validation response bodies."""

from __future__ import annotations

import dataclasses
import json
import math
from http import HTTPStatus
from typing import Any

from ordercleaner.helpers import parse_to, to_snake_case
from ordercleaner.models import (
    ErrorDetail,
    FieldValidationError,
    Message,
    ValidateError,
    ValidateMessage,
)

ERR_VALIDATION_FAILED = "VALIDATION_FAILED"
ERR_INVALID_INPUT = "INVALID_INPUT"
ERR_NOT_FOUND = "NOT_FOUND"
ERR_SOMETHING_WRONG = "SOMETHING_WRONG"
ERR_BAD_REQUEST = "BAD_REQUEST"

ERROR_STATUS_TEXT = {
    ERR_VALIDATION_FAILED: "Validation Failed",
    ERR_NOT_FOUND: "Not Found",
    ERR_SOMETHING_WRONG: "Something Wrong",
}

ERROR_MESSAGE = {
    ERR_INVALID_INPUT: "Invalid format of the input",
    ERR_NOT_FOUND: "Data Not Found",
    ERR_SOMETHING_WRONG: "Something Wrong",
}

ERRORS_STATUS_CODE = {
    ERR_SOMETHING_WRONG: HTTPStatus.INTERNAL_SERVER_ERROR.value,
    ERR_VALIDATION_FAILED: HTTPStatus.UNPROCESSABLE_ENTITY.value,
    ERR_BAD_REQUEST: HTTPStatus.BAD_REQUEST.value,
    ERR_NOT_FOUND: HTTPStatus.NOT_FOUND.value,
}

# Reason phrases that newer Python releases changed; the classic wording is kept.
_STATUS_TEXT_OVERRIDES = {
    413: "Request Entity Too Large",
    416: "Requested Range Not Satisfiable",
    422: "Unprocessable Entity",
}


def _status_text(status_code: int) -> str:
    if status_code in _STATUS_TEXT_OVERRIDES:
        return _STATUS_TEXT_OVERRIDES[status_code]
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


def get_status_code(error: BaseException | None) -> int:
    """HTTP status for an error whose text is a known error code; 500 otherwise."""
    if error is None:
        return HTTPStatus.INTERNAL_SERVER_ERROR.value
    return ERRORS_STATUS_CODE.get(str(error), HTTPStatus.INTERNAL_SERVER_ERROR.value)


def get_message(error: BaseException | None) -> str:
    """Human-readable message for an error, falling back to its own text."""
    if error is None:
        return ERROR_MESSAGE[ERR_SOMETHING_WRONG]
    return ERROR_MESSAGE.get(str(error)) or str(error)


def get_error_code(error: BaseException | None) -> str:
    """The error's text if it is a known error code, else an empty string."""
    if error is None:
        return ""
    text = str(error)
    if text in ERRORS_STATUS_CODE or text in ERROR_MESSAGE:
        return text
    return ""


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "+Inf" if value > 0 else "-Inf"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)


def _describe(error: FieldValidationError) -> str:
    text = f"Validation failed on field '{error.field}', condition: {error.tag}"
    if error.param:
        text += f" {{ {error.param} }}"
    if error.value is not None and error.value != "":
        text += f", actual: {_format_value(error.value)}"
    return text


def parse_validate_message(error: BaseException) -> ValidateError:
    """Describe why a request was rejected."""
    if isinstance(error, FieldValidationError):
        return ValidateError(
            error_code=error.tag.upper(),
            field=error.field,
            message=_describe(error),
        )
    return ValidateError(error_code=ERR_INVALID_INPUT, message=str(error))


def handle_bad_request(error: BaseException) -> tuple[int, dict[str, Any]]:
    """Status and body for a request that could not be decoded or validated."""
    body = ValidateMessage(
        status_text=ERROR_STATUS_TEXT[ERR_VALIDATION_FAILED],
        error=parse_validate_message(error),
    )
    return HTTPStatus.BAD_REQUEST.value, body.to_dict()


def handle_error(status_code: int, message: Message) -> tuple[int, dict[str, Any]]:
    """Status and body for a failed request, filling in status text and error code."""
    status_text = message.status_text or _status_text(status_code)
    error = message.error
    if error is not None and not error.error_code:
        error = dataclasses.replace(error, error_code=to_snake_case(status_text).upper())
    filled = dataclasses.replace(message, status_text=status_text, error=error)
    return status_code, filled.to_dict()


def handle_success(status_code: int, result: Any) -> tuple[int, dict[str, Any]]:
    """Status and body wrapping a result; a result that cannot be encoded becomes null."""
    try:
        payload = parse_to(result)
        json.dumps(payload, allow_nan=False)
    except (TypeError, ValueError):
        payload = None
    return status_code, {"result": payload}


__all__ = [
    "ERR_BAD_REQUEST",
    "ERR_INVALID_INPUT",
    "ERR_NOT_FOUND",
    "ERR_SOMETHING_WRONG",
    "ERR_VALIDATION_FAILED",
    "ERRORS_STATUS_CODE",
    "ERROR_MESSAGE",
    "ERROR_STATUS_TEXT",
    "ErrorDetail",
    "get_error_code",
    "get_message",
    "get_status_code",
    "handle_bad_request",
    "handle_error",
    "handle_success",
    "parse_validate_message",
]