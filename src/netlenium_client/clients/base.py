from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from ..config import DEFAULT_ENDPOINT
from ..transport import CommandTransport, HttpTransport

AUTH_PARAMETER = "auth"


@dataclass(frozen=True)
class BaseClient:
    endpoint: str = DEFAULT_ENDPOINT
    auth_password: str | None = field(default=None, repr=False)
    transport: CommandTransport = field(default_factory=HttpTransport, repr=False, compare=False)

    def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _command_parameters(self, parameters: Mapping[str, str] | None) -> dict[str, str]:
        merged = dict(parameters or {})
        if self.auth_password is not None:
            merged[AUTH_PARAMETER] = self.auth_password
        return merged

    def send_command(self, command: str, parameters: Mapping[str, str] | None = None) -> str:
        """Send one command and return the raw response body.

        Non-success responses raise :class:`~netlenium_client.exceptions.RequestError`
        with the undecoded body.
        """
        if not command:
            raise ValueError("command must be a non-empty string")
        return self.transport.send_command(self.endpoint, command, self._command_parameters(parameters))
