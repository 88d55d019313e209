from __future__ import annotations

import logging

from ..config import ClientConfig
from ..decoders import decode_sessions
from ..error_mapper import map_error
from ..exceptions import RequestError
from ..models import Session
from ..transport import HttpTransport
from .base import BaseClient

logger = logging.getLogger(__name__)

ACTIVE_SESSIONS_COMMAND = "admin/active_sessions"


class AdminClient(BaseClient):
    """Administrative commands of a Netlenium server."""

    @classmethod
    def from_config(cls, config: ClientConfig) -> AdminClient:
        return cls(
            endpoint=config.endpoint,
            auth_password=config.auth_password,
            transport=HttpTransport.from_config(config),
        )

    def get_sessions(self) -> list[Session]:
        try:
            response_text = self.send_command(ACTIVE_SESSIONS_COMMAND)
        except RequestError as exc:
            error = map_error(exc.results_content)
            logger.warning("%s failed: %s", ACTIVE_SESSIONS_COMMAND, error)
            raise error from exc
        return decode_sessions(response_text)
