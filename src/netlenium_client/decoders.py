from __future__ import annotations

from .models import Session, SessionListResponse


def decode_sessions(response_text: str) -> list[Session]:
    """Decode an ``admin/active_sessions`` body, keeping the server's order.

    Structural problems raise :class:`pydantic.ValidationError`.
    """
    response = SessionListResponse.model_validate_json(response_text)
    return list(response.sessions)
