"""Message routing helpers -- references, mentions, replies, and the connector seam."""

from .connector import BotFrameworkConnector, Connector, ConnectorFactory, default_connector_factory
from .errors import DeliveryError, InvalidReferenceError, RoutingError
from .mentions import get_mentions, mention_text, strip_mentions
from .references import (
    accounts_match,
    create_recipient_reference,
    create_sender_reference,
    find_matching,
    is_bot,
    resolve_account,
)
from .replies import (
    OutboundBundle,
    build_outbound_bundle,
    build_reference_bundle,
    dispatch_bundle,
    reply_to,
)

__all__ = [
    "BotFrameworkConnector",
    "Connector",
    "ConnectorFactory",
    "DeliveryError",
    "InvalidReferenceError",
    "OutboundBundle",
    "RoutingError",
    "accounts_match",
    "build_outbound_bundle",
    "build_reference_bundle",
    "create_recipient_reference",
    "create_sender_reference",
    "default_connector_factory",
    "dispatch_bundle",
    "find_matching",
    "get_mentions",
    "is_bot",
    "mention_text",
    "reply_to",
    "resolve_account",
    "strip_mentions",
]
