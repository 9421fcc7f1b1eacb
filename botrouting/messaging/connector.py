"""Connector capability -- the outbound side of the Bot Framework.

Routing helpers never talk to ``botframework.connector`` directly; they ask a
:data:`ConnectorFactory` for a :class:`Connector` bound to a service URL.
The default factory wraps the SDK's async ``ConnectorClient``; tests pass
their own factory returning mocks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

from botbuilder.schema import Activity
from botframework.connector.aio import ConnectorClient
from botframework.connector.auth import MicrosoftAppCredentials

from ..config.settings import cfg

logger = logging.getLogger(__name__)


class Connector(Protocol):
    """Sends activities to one channel service endpoint."""

    service_url: str

    async def reply_to_activity(self, activity: Activity) -> Any: ...

    async def send_to_conversation(self, activity: Activity) -> Any: ...

    async def close(self) -> None: ...


ConnectorFactory = Callable[[str], Connector]


class BotFrameworkConnector:
    """:class:`Connector` backed by ``botframework.connector.aio.ConnectorClient``."""

    def __init__(
        self,
        service_url: str,
        credentials: MicrosoftAppCredentials | None = None,
    ) -> None:
        self.service_url = service_url
        self._credentials = credentials or MicrosoftAppCredentials(
            cfg.app_id,
            cfg.app_password,
            channel_auth_tenant=cfg.app_tenant_id or None,
        )
        self.client = ConnectorClient(self._credentials, base_url=service_url)

    async def reply_to_activity(self, activity: Activity) -> Any:
        conversation_id = _conversation_id(activity)
        if not activity.reply_to_id:
            logger.debug(
                "[connector] no reply_to_id on reply; sending to conversation %s",
                conversation_id,
            )
            return await self.client.conversations.send_to_conversation(
                conversation_id, activity
            )
        return await self.client.conversations.reply_to_activity(
            conversation_id, activity.reply_to_id, activity
        )

    async def send_to_conversation(self, activity: Activity) -> Any:
        return await self.client.conversations.send_to_conversation(
            _conversation_id(activity), activity
        )

    async def close(self) -> None:
        # SDKClientAsync only exposes the async context manager protocol.
        await self.client.__aexit__(None, None, None)

    def __repr__(self) -> str:
        return f"BotFrameworkConnector(service_url={self.service_url!r})"


def default_connector_factory(service_url: str) -> Connector:
    return BotFrameworkConnector(service_url)


def _conversation_id(activity: Activity) -> str | None:
    return activity.conversation.id if activity.conversation else None
