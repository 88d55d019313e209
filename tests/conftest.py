from __future__ import annotations

import os

import pytest

ENV_PREFIX = "NETLENIUM_"


@pytest.fixture(autouse=True)
def clean_netlenium_env(monkeypatch: pytest.MonkeyPatch):
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    yield
    # load_dotenv writes straight into os.environ
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            os.environ.pop(key, None)
