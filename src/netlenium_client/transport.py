from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import urljoin

import requests
from requests.adapters import HTTPAdapter

from .config import ClientConfig
from .exceptions import RequestError, TransportError

logger = logging.getLogger(__name__)


class CommandTransport(Protocol):
    def send_command(self, endpoint: str, command: str, parameters: Mapping[str, str]) -> str: ...


@dataclass
class HttpTransport:
    connect_timeout_seconds: float = 5.0
    read_timeout_seconds: float = 10.0
    max_connections: int = 20
    verify_ssl: bool = True
    session: requests.Session | None = None

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = requests.Session()
            adapter = HTTPAdapter(
                pool_connections=self.max_connections,
                pool_maxsize=self.max_connections,
            )
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)

    def close(self) -> None:
        if self.session is not None:
            self.session.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @classmethod
    def from_config(cls, config: ClientConfig) -> HttpTransport:
        return cls(
            connect_timeout_seconds=config.connect_timeout_seconds,
            read_timeout_seconds=config.read_timeout_seconds,
            max_connections=config.max_connections,
            verify_ssl=config.verify_ssl,
        )

    @staticmethod
    def build_url(endpoint: str, command: str) -> str:
        base = endpoint.rstrip("/") + "/"
        return urljoin(base, command.lstrip("/"))

    def send_command(self, endpoint: str, command: str, parameters: Mapping[str, str]) -> str:
        if self.session is None:
            raise RuntimeError("HTTP session not initialized")
        url = self.build_url(endpoint, command)
        # parameter values may hold the shared secret, only log the keys
        logger.debug("send_command %s params=%s", url, sorted(parameters))
        try:
            response = self.session.post(
                url,
                data=dict(parameters),
                headers={"Accept": "application/json"},
                timeout=(self.connect_timeout_seconds, self.read_timeout_seconds),
                verify=self.verify_ssl,
            )
        except requests.RequestException as exc:
            logger.warning("send_command %s failed: %s", url, type(exc).__name__)
            raise TransportError(message=str(exc)) from exc

        if not response.ok:
            logger.warning("send_command %s returned HTTP %s", url, response.status_code)
            raise RequestError(
                message=f"Command {command!r} failed with HTTP {response.status_code}",
                status_code=response.status_code,
                results_content=response.text,
            )
        return response.text
