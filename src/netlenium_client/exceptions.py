from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class FailureKind(str, Enum):
    GENERIC = "generic"
    ATTRIBUTE_NOT_FOUND = "attribute_not_found"
    INVALID_PROXY_SCHEME = "invalid_proxy_scheme"
    UNSUPPORTED_DRIVER = "unsupported_driver"
    UNSUPPORTED_REQUEST_METHOD = "unsupported_request_method"
    SESSION_EXPIRED = "session_expired"
    WINDOW_HANDLER_NOT_FOUND = "window_handler_not_found"
    SESSION_ERROR = "session_error"
    SESSION_NOT_FOUND = "session_not_found"
    UNAUTHORIZED = "unauthorized"
    TOO_MANY_SESSIONS = "too_many_sessions"
    RESOURCE_NOT_FOUND = "resource_not_found"
    JAVASCRIPT_EXECUTION = "javascript_execution"
    MISSING_PARAMETER = "missing_parameter"
    INVALID_SEARCH_VALUE = "invalid_search_value"
    DRIVER_DISABLED = "driver_disabled"
    ELEMENT_NOT_FOUND = "element_not_found"
    UNKNOWN_ERROR_CODE = "unknown_error_code"
    RESPONSE_PARSE = "response_parse"
    REQUEST = "request"
    TRANSPORT = "transport"


@dataclass
class NetleniumError(Exception):
    message: str

    kind: ClassVar[FailureKind] = FailureKind.GENERIC

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"


class GenericServerError(NetleniumError):
    """Server-side failure without a dedicated error code (codes 1 and 100)."""


@dataclass
class TransportError(NetleniumError):
    """Network failure before the server returned a response."""

    kind: ClassVar[FailureKind] = FailureKind.TRANSPORT


@dataclass
class RequestError(NetleniumError):
    """The server answered with a non-success status; the body is kept undecoded."""

    status_code: int = 0
    results_content: str = ""

    kind: ClassVar[FailureKind] = FailureKind.REQUEST


@dataclass
class ResponseParseError(NetleniumError):
    raw_text: str = ""

    kind: ClassVar[FailureKind] = FailureKind.RESPONSE_PARSE


@dataclass
class UnknownErrorCodeError(NetleniumError):
    error_code: int | None = None

    kind: ClassVar[FailureKind] = FailureKind.UNKNOWN_ERROR_CODE


class AttributeNotFoundError(NetleniumError):
    kind = FailureKind.ATTRIBUTE_NOT_FOUND


class InvalidProxySchemeError(NetleniumError):
    kind = FailureKind.INVALID_PROXY_SCHEME


class UnsupportedDriverError(NetleniumError):
    kind = FailureKind.UNSUPPORTED_DRIVER


class UnsupportedRequestMethodError(NetleniumError):
    kind = FailureKind.UNSUPPORTED_REQUEST_METHOD


class SessionExpiredError(NetleniumError):
    kind = FailureKind.SESSION_EXPIRED


class WindowHandlerNotFoundError(NetleniumError):
    kind = FailureKind.WINDOW_HANDLER_NOT_FOUND


class SessionError(NetleniumError):
    kind = FailureKind.SESSION_ERROR


class SessionNotFoundError(NetleniumError):
    kind = FailureKind.SESSION_NOT_FOUND


class UnauthorizedError(NetleniumError):
    kind = FailureKind.UNAUTHORIZED


class TooManySessionsError(NetleniumError):
    kind = FailureKind.TOO_MANY_SESSIONS


class ResourceNotFoundError(NetleniumError):
    kind = FailureKind.RESOURCE_NOT_FOUND


class JavascriptExecutionError(NetleniumError):
    kind = FailureKind.JAVASCRIPT_EXECUTION


class MissingParameterError(NetleniumError):
    kind = FailureKind.MISSING_PARAMETER


class InvalidSearchValueError(NetleniumError):
    kind = FailureKind.INVALID_SEARCH_VALUE


class DriverDisabledError(NetleniumError):
    kind = FailureKind.DRIVER_DISABLED


class ElementNotFoundError(NetleniumError):
    kind = FailureKind.ELEMENT_NOT_FOUND
