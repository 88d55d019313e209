from __future__ import annotations

import json
from typing import NoReturn

from .exceptions import (
    AttributeNotFoundError,
    DriverDisabledError,
    ElementNotFoundError,
    GenericServerError,
    InvalidProxySchemeError,
    InvalidSearchValueError,
    JavascriptExecutionError,
    MissingParameterError,
    NetleniumError,
    ResourceNotFoundError,
    ResponseParseError,
    SessionError,
    SessionExpiredError,
    SessionNotFoundError,
    TooManySessionsError,
    UnauthorizedError,
    UnknownErrorCodeError,
    UnsupportedDriverError,
    UnsupportedRequestMethodError,
    WindowHandlerNotFoundError,
)

RAW_BODY_ERROR_CODE = 1
GENERAL_ERROR_CODE = 100

ERROR_CODES: dict[int, type[NetleniumError]] = {
    101: AttributeNotFoundError,
    102: InvalidProxySchemeError,
    103: UnsupportedDriverError,
    104: UnsupportedRequestMethodError,
    105: SessionExpiredError,
    106: WindowHandlerNotFoundError,
    107: SessionError,
    108: SessionNotFoundError,
    109: UnauthorizedError,
    110: TooManySessionsError,
    111: ResourceNotFoundError,
    112: JavascriptExecutionError,
    113: MissingParameterError,
    114: InvalidSearchValueError,
    115: DriverDisabledError,
    116: ElementNotFoundError,
}


def _error_code(value: object) -> int | None:
    # bool is an int subclass but never a valid code
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if not isinstance(value, int):
        return None
    return value


def map_error(raw_body: str) -> NetleniumError:
    """Decode the body of a failed command into the matching client error.

    The body is expected to be ``{"ErrorCode": int, "Message": str}``. A body
    that is not a JSON object yields :class:`ResponseParseError`; codes that
    are missing or not in the table yield :class:`UnknownErrorCodeError`.
    """
    try:
        payload = json.loads(raw_body)
    except (TypeError, ValueError) as exc:
        error = ResponseParseError(
            message=f"Cannot parse {raw_body!r}, {exc}",
            raw_text=raw_body if isinstance(raw_body, str) else repr(raw_body),
        )
        error.__cause__ = exc
        return error
    if not isinstance(payload, dict):
        return ResponseParseError(
            message=f"Cannot parse {raw_body!r}, expected a JSON object",
            raw_text=raw_body,
        )

    code = _error_code(payload.get("ErrorCode"))
    message = payload.get("Message")
    message = "" if message is None else str(message)

    if code == RAW_BODY_ERROR_CODE:
        return GenericServerError(message=raw_body)
    if code == GENERAL_ERROR_CODE:
        return GenericServerError(message=message)
    mapped = ERROR_CODES.get(code) if code is not None else None
    if mapped is None:
        shown = code if code is not None else payload.get("ErrorCode")
        return UnknownErrorCodeError(message=f"Unknown error code: {shown}", error_code=code)
    return mapped(message=message)


def raise_for_error(raw_body: str) -> NoReturn:
    error = map_error(raw_body)
    raise error from error.__cause__
