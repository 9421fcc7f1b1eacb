"""Replies and outbound bundles -- build message activities and hand them to a connector."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import TypeVar

from botbuilder.schema import (
    Activity,
    ActivityTypes,
    ChannelAccount,
    ConversationReference,
)

from ..config.settings import cfg
from ..util.result import Result
from .connector import Connector, ConnectorFactory, default_connector_factory
from .errors import DeliveryError, InvalidReferenceError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class OutboundBundle:
    """A connector bound to a service URL plus the activity to send through it."""

    connector: Connector
    activity: Activity


async def reply_to(
    activity: Activity | None,
    text: str | None,
    *,
    connector_factory: ConnectorFactory | None = None,
    log: logging.Logger | None = None,
    timeout: float | None = None,
) -> Result:
    """Reply to *activity* with *text* along the same conversation.

    Returns a skipped :class:`Result` when there is nothing to send, and an
    ok result carrying the connector response otherwise. Transport errors
    and timeouts raise :class:`DeliveryError`. Cancelling the awaiting task
    cancels the send.
    """
    log = log or logger
    if activity is None or not text:
        log.debug(
            "[reply] Either the activity is None or the message is empty - activity: %s; message: %r",
            activity.id if activity is not None else None, text,
        )
        return Result.skip("Either the activity is None or the message is empty")

    reply = activity.create_reply(text)
    factory = connector_factory or default_connector_factory
    connector = factory(activity.service_url)
    try:
        response = await _with_timeout(connector.reply_to_activity(reply), timeout)
    except Exception as exc:
        log.warning(
            "[reply] Reply to %s via %s failed: %s",
            activity.id, activity.service_url, exc,
        )
        raise DeliveryError(
            f"Failed to reply to activity {activity.id}: {exc}",
            service_url=activity.service_url,
        ) from exc
    finally:
        await connector.close()

    log.debug("[reply] Replied to %s on channel %s", activity.id, activity.channel_id)
    return Result.ok("sent", value=response)


def build_outbound_bundle(
    service_url: str,
    activity: Activity,
    *,
    connector_factory: ConnectorFactory | None = None,
) -> OutboundBundle:
    """Pair *activity* with a new connector for *service_url*. Nothing is sent."""
    factory = connector_factory or default_connector_factory
    return OutboundBundle(connector=factory(service_url), activity=activity)


def build_reference_bundle(
    reference: ConversationReference,
    text: str,
    sender: ChannelAccount | None = None,
    *,
    connector_factory: ConnectorFactory | None = None,
) -> OutboundBundle:
    """Build a message for the conversation of *reference* and bundle it.

    If the reference names a user, that user becomes the recipient;
    otherwise the whole conversation is addressed. *sender*, when given,
    becomes the ``from`` account.
    """
    if reference is None:
        raise InvalidReferenceError("reference is None")

    activity = Activity(
        type=ActivityTypes.message,
        conversation=reference.conversation,
        text=text,
    )
    if sender is not None:
        activity.from_property = sender
    if reference.user is not None:
        activity.recipient = reference.user

    return build_outbound_bundle(
        reference.service_url, activity, connector_factory=connector_factory
    )


async def dispatch_bundle(
    bundle: OutboundBundle,
    *,
    log: logging.Logger | None = None,
    timeout: float | None = None,
) -> Result:
    """Send the activity of *bundle* to its conversation.

    The connector is left open; whoever built the bundle owns it.
    """
    log = log or logger
    service_url = getattr(bundle.connector, "service_url", None)
    try:
        response = await _with_timeout(
            bundle.connector.send_to_conversation(bundle.activity), timeout
        )
    except Exception as exc:
        log.warning("[dispatch] Send via %s failed: %s", service_url, exc)
        raise DeliveryError(
            f"Failed to send activity: {exc}", service_url=service_url
        ) from exc
    return Result.ok("sent", value=response)


async def _with_timeout(aw: Awaitable[T], timeout: float | None) -> T:
    if timeout is None:
        timeout = cfg.send_timeout
    if timeout and timeout > 0:
        return await asyncio.wait_for(aw, timeout)
    return await aw

