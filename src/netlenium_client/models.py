from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Driver(str, Enum):
    CHROME = "chrome"
    FIREFOX = "firefox"
    OPERA = "opera"
    AUTO = "auto"


class ProxyScheme(str, Enum):
    HTTP = "http"
    HTTPS = "https"


_DRIVERS = {
    "chrome": Driver.CHROME,
    "firefox": Driver.FIREFOX,
    "opera": Driver.OPERA,
}

_PROXY_SCHEMES = {
    "http": ProxyScheme.HTTP,
    "https": ProxyScheme.HTTPS,
}


def parse_driver(value: object) -> Driver:
    """Map a wire driver name to :class:`Driver`, falling back to ``auto``."""
    if isinstance(value, Driver):
        return value
    if not isinstance(value, str):
        return Driver.AUTO
    return _DRIVERS.get(value, Driver.AUTO)


def parse_proxy_scheme(value: object) -> ProxyScheme:
    """Map a wire proxy scheme to :class:`ProxyScheme`, falling back to ``http``."""
    if isinstance(value, ProxyScheme):
        return value
    if not isinstance(value, str):
        return ProxyScheme.HTTP
    return _PROXY_SCHEMES.get(value, ProxyScheme.HTTP)


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)


class Window(_WireModel):
    id: str = Field(alias="ID")
    title: str | None = Field(default=None, alias="Title")
    url: str | None = Field(default=None, alias="Url")


class ProxyConfiguration(_WireModel):
    enabled: bool = Field(alias="Enabled")
    scheme: ProxyScheme = Field(default=ProxyScheme.HTTP, alias="Scheme")
    host: str | None = Field(default=None, alias="Host")
    port: int = Field(alias="Port")
    authentication_required: bool = Field(alias="AuthenticationRequired")
    username: str | None = Field(default=None, alias="Username")
    password: str | None = Field(default=None, alias="Password", repr=False)

    @field_validator("scheme", mode="before")
    @classmethod
    def _coerce_scheme(cls, value: object) -> ProxyScheme:
        return parse_proxy_scheme(value)


class Session(_WireModel):
    id: str = Field(alias="ID")
    created: str = Field(alias="Created")
    last_activity: str = Field(alias="LastActivity")
    driver: Driver = Field(default=Driver.AUTO, alias="Driver")
    current_window: Window = Field(alias="CurrentWindow")
    proxy_configuration: ProxyConfiguration = Field(alias="ProxyConfiguration")

    @field_validator("driver", mode="before")
    @classmethod
    def _coerce_driver(cls, value: object) -> Driver:
        return parse_driver(value)


class SessionListResponse(_WireModel):
    sessions: List[Session] = Field(alias="Sessions")
