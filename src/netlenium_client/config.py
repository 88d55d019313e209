from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Callable, TypeVar

from dotenv import load_dotenv

DEFAULT_ENDPOINT = "http://localhost:6410"
TRUE_WORDS = frozenset({"1", "true", "yes", "on"})

_N = TypeVar("_N", int, float)


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ClientConfig:
    env_name: str = "dev"
    endpoint: str = DEFAULT_ENDPOINT
    auth_password: str | None = field(default=None, repr=False)
    connect_timeout_seconds: float = 5.0
    read_timeout_seconds: float = 10.0
    max_connections: int = 20
    verify_ssl: bool = True
    log_level: str = "WARNING"

    @property
    def normalized_env(self) -> str:
        return self.env_name.lower().strip()


def _read_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in TRUE_WORDS


def _read_number(name: str, default: str, cast: Callable[[str], _N]) -> _N:
    raw = os.getenv(name) or default
    try:
        return cast(raw)
    except ValueError as exc:
        kind = "an integer" if cast is int else "a number"
        raise ConfigError(f"Invalid {name}: expected {kind}, got {raw!r}") from exc


def _validate(condition: bool, message: str) -> None:
    if not condition:
        raise ConfigError(message)


def load_config(env_file: str | None = None) -> ClientConfig:
    """Load config from environment with optional .env override."""
    load_dotenv(env_file)

    env_name = (os.getenv("NETLENIUM_ENV") or "dev").strip()
    env_key = env_name.upper()

    endpoint = (
        (os.getenv(f"NETLENIUM_ENDPOINT_{env_key}") or "").strip()
        or (os.getenv("NETLENIUM_ENDPOINT") or "").strip()
        or DEFAULT_ENDPOINT
    )
    _validate(
        endpoint.startswith(("http://", "https://")),
        f"Invalid NETLENIUM_ENDPOINT: expected an http(s) URL, got {endpoint!r}",
    )

    auth_password = os.getenv("NETLENIUM_AUTH_PASSWORD") or None

    timeout_seconds = _read_number("NETLENIUM_TIMEOUT_SECONDS", "10", float)
    _validate(
        timeout_seconds > 0,
        f"Invalid NETLENIUM_TIMEOUT_SECONDS: expected > 0, got {timeout_seconds}",
    )

    connect_timeout_seconds = _read_number(
        "NETLENIUM_CONNECT_TIMEOUT_SECONDS", str(min(timeout_seconds, 5.0)), float
    )
    _validate(
        connect_timeout_seconds > 0,
        (
            "Invalid NETLENIUM_CONNECT_TIMEOUT_SECONDS: "
            f"expected > 0, got {connect_timeout_seconds}"
        ),
    )

    read_timeout_seconds = _read_number(
        "NETLENIUM_READ_TIMEOUT_SECONDS",
        str(max(timeout_seconds, connect_timeout_seconds)),
        float,
    )
    _validate(
        read_timeout_seconds > 0,
        f"Invalid NETLENIUM_READ_TIMEOUT_SECONDS: expected > 0, got {read_timeout_seconds}",
    )

    max_connections = _read_number("NETLENIUM_MAX_CONNECTIONS", "20", int)
    _validate(
        max_connections >= 1,
        f"Invalid NETLENIUM_MAX_CONNECTIONS: expected >= 1, got {max_connections}",
    )

    verify_ssl = _read_bool("NETLENIUM_VERIFY_SSL", True)

    log_level = (os.getenv("NETLENIUM_LOG_LEVEL") or "WARNING").strip().upper()
    _validate(
        isinstance(logging.getLevelName(log_level), int),
        f"Invalid NETLENIUM_LOG_LEVEL: unknown level {log_level!r}",
    )

    return ClientConfig(
        env_name=env_name,
        endpoint=endpoint.rstrip("/"),
        auth_password=auth_password,
        connect_timeout_seconds=connect_timeout_seconds,
        read_timeout_seconds=read_timeout_seconds,
        max_connections=max_connections,
        verify_ssl=verify_ssl,
        log_level=log_level,
    )
