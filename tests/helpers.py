from __future__ import annotations

from typing import Any


def session_item(**overrides: Any) -> dict[str, Any]:
    item: dict[str, Any] = {
        "ID": "session-1",
        "Created": "2024-05-01T10:00:00Z",
        "LastActivity": "2024-05-01T10:05:00Z",
        "Driver": "chrome",
        "CurrentWindow": {"ID": "window-1", "Title": "Example Domain", "Url": "https://example.com/"},
        "ProxyConfiguration": {
            "Enabled": True,
            "Scheme": "https",
            "Host": "proxy.local",
            "Port": 3128,
            "AuthenticationRequired": True,
            "Username": "proxy-user",
            "Password": "proxy-pass",
        },
    }
    item.update(overrides)
    return item
