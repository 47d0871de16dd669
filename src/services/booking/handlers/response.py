from pydantic import BaseModel, ValidationError

from services.booking.applications.outcome import Err, Outcome
from services.shared.domain import ErrorKind
from services.shared.utils import error_response, success_response

_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.EMPTY: 404,
    ErrorKind.INVALID_RANGE: 400,
    ErrorKind.INSUFFICIENT_INVENTORY: 409,
    ErrorKind.CONFLICT: 409,
    ErrorKind.STORE_FAILURE: 503,
}


def to_api_response(outcome: Outcome, success_status: int = 200) -> dict:
    """Ok / Err を API Gateway のレスポンス形式に変換する"""
    if isinstance(outcome, Err):
        return error_response(
            _STATUS_CODES[outcome.kind],
            outcome.kind.value,
            outcome.message,
            retryable=outcome.retryable,
            resource=outcome.resource,
        )

    value = outcome.value
    if isinstance(value, list):
        data = [item.model_dump() for item in value]
    elif isinstance(value, BaseModel):
        data = value.model_dump()
    else:
        data = value
    return success_response(data, status_code=success_status)


def validation_error_response(error: ValidationError) -> dict:
    return error_response(
        400,
        ErrorKind.INVALID_RANGE.value,
        "Invalid request body",
        details=error.errors(include_url=False, include_context=False),
    )


def missing_parameter_response(name: str) -> dict:
    return error_response(400, ErrorKind.INVALID_RANGE.value, f"{name} is required")
