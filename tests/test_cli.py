from __future__ import annotations

import json

import pytest
import responses

from netlenium_client.cli import main

from tests.helpers import session_item

SESSIONS_URL = "http://netlenium.test:6410/admin/active_sessions"


@responses.activate
def test_sessions_command_prints_sessions(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("NETLENIUM_ENDPOINT", "http://netlenium.test:6410")
    monkeypatch.setenv("NETLENIUM_AUTH_PASSWORD", "s3cr3t")
    responses.add(responses.POST, SESSIONS_URL, json={"Sessions": [session_item(Driver="firefox")]}, status=200)

    main(["sessions"])

    output = json.loads(capsys.readouterr().out)
    assert output["sessions"][0]["id"] == "session-1"
    assert output["sessions"][0]["driver"] == "firefox"
    assert output["sessions"][0]["proxy_configuration"]["scheme"] == "https"
    assert responses.calls[0].request.body == "auth=s3cr3t"


@responses.activate
def test_sessions_command_reports_decoded_failure(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("NETLENIUM_ENDPOINT", "http://netlenium.test:6410")
    responses.add(responses.POST, SESSIONS_URL, json={"ErrorCode": 115, "Message": "driver disabled"}, status=400)

    with pytest.raises(SystemExit) as excinfo:
        main(["sessions"])

    assert excinfo.value.code == 1
    output = json.loads(capsys.readouterr().out)
    assert output == {"error": "driver_disabled", "message": "driver disabled"}


def test_invalid_config_exits(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("NETLENIUM_MAX_CONNECTIONS", "zero")

    with pytest.raises(SystemExit) as excinfo:
        main(["sessions"])

    assert excinfo.value.code == 2
    assert json.loads(capsys.readouterr().out)["error"] == "config"
