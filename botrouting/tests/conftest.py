"""Shared pytest fixtures for botrouting tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from botbuilder.schema import Activity, ResourceResponse

from .factories import SERVICE_URL, make_activity

_ENV_KEYS = (
    "BOT_APP_ID",
    "BOT_APP_PASSWORD",
    "BOT_APP_TENANT_ID",
    "BOTROUTING_SEND_TIMEOUT",
)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch):
    from botrouting.config.settings import reset_cfg

    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    reset_cfg()
    yield
    monkeypatch.undo()
    reset_cfg()


@pytest.fixture()
def activity() -> Activity:
    return make_activity()


@pytest.fixture()
def connector() -> AsyncMock:
    conn = AsyncMock()
    conn.service_url = SERVICE_URL
    conn.reply_to_activity.return_value = ResourceResponse(id="reply-1")
    conn.send_to_conversation.return_value = ResourceResponse(id="sent-1")
    return conn


@pytest.fixture()
def connector_factory(connector: AsyncMock) -> MagicMock:
    return MagicMock(return_value=connector)
