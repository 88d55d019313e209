from .clients import AdminClient, BaseClient
from .config import DEFAULT_ENDPOINT, ClientConfig, ConfigError, load_config
from .decoders import decode_sessions
from .error_mapper import map_error, raise_for_error
from .exceptions import (
    AttributeNotFoundError,
    DriverDisabledError,
    ElementNotFoundError,
    FailureKind,
    GenericServerError,
    InvalidProxySchemeError,
    InvalidSearchValueError,
    JavascriptExecutionError,
    MissingParameterError,
    NetleniumError,
    RequestError,
    ResourceNotFoundError,
    ResponseParseError,
    SessionError,
    SessionExpiredError,
    SessionNotFoundError,
    TooManySessionsError,
    TransportError,
    UnauthorizedError,
    UnknownErrorCodeError,
    UnsupportedDriverError,
    UnsupportedRequestMethodError,
    WindowHandlerNotFoundError,
)
from .models import Driver, ProxyConfiguration, ProxyScheme, Session, Window, parse_driver, parse_proxy_scheme
from .transport import CommandTransport, HttpTransport

__version__ = "0.1.0"

__all__ = [
    "AdminClient",
    "AttributeNotFoundError",
    "BaseClient",
    "ClientConfig",
    "CommandTransport",
    "ConfigError",
    "DEFAULT_ENDPOINT",
    "Driver",
    "DriverDisabledError",
    "ElementNotFoundError",
    "FailureKind",
    "GenericServerError",
    "HttpTransport",
    "InvalidProxySchemeError",
    "InvalidSearchValueError",
    "JavascriptExecutionError",
    "MissingParameterError",
    "NetleniumError",
    "ProxyConfiguration",
    "ProxyScheme",
    "RequestError",
    "ResourceNotFoundError",
    "ResponseParseError",
    "Session",
    "SessionError",
    "SessionExpiredError",
    "SessionNotFoundError",
    "TooManySessionsError",
    "TransportError",
    "UnauthorizedError",
    "UnknownErrorCodeError",
    "UnsupportedDriverError",
    "UnsupportedRequestMethodError",
    "Window",
    "WindowHandlerNotFoundError",
    "decode_sessions",
    "load_config",
    "map_error",
    "parse_driver",
    "parse_proxy_scheme",
    "raise_for_error",
    "__version__",
]
