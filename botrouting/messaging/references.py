"""Conversation references -- build them from activities and compare participants."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from botbuilder.schema import Activity, ChannelAccount, ConversationReference

from .errors import InvalidReferenceError

logger = logging.getLogger(__name__)


def create_sender_reference(activity: Activity) -> ConversationReference:
    """Return a reference whose user is the sender (``from``) of *activity*."""
    _require(activity, "activity")
    return ConversationReference(
        user=activity.from_property,
        bot=None,
        conversation=activity.conversation,
        channel_id=activity.channel_id,
        service_url=activity.service_url,
    )


def create_recipient_reference(activity: Activity) -> ConversationReference:
    """Return a reference whose bot is the recipient of *activity*."""
    _require(activity, "activity")
    return ConversationReference(
        user=None,
        bot=activity.recipient,
        conversation=activity.conversation,
        channel_id=activity.channel_id,
        service_url=activity.service_url,
    )


def is_bot(reference: ConversationReference) -> bool:
    _require(reference, "reference")
    return reference.bot is not None


def resolve_account(reference: ConversationReference) -> ChannelAccount | None:
    """Return the populated account of *reference*, preferring the user."""
    _require(reference, "reference")
    if reference.user is not None:
        return reference.user
    if reference.bot is not None:
        return reference.bot
    return None


def accounts_match(
    reference1: ConversationReference, reference2: ConversationReference
) -> bool:
    """Return True if both references point at the same participant.

    Bots are compared with bots and users with users; a bot never matches a
    user even when the IDs coincide. Accounts or IDs that are missing simply
    fail the match.
    """
    _require(reference1, "reference1")
    _require(reference2, "reference2")

    if reference1.bot is not None and reference2.bot is not None:
        return _same_id(reference1.bot, reference2.bot)
    if reference1.user is not None and reference2.user is not None:
        return _same_id(reference1.user, reference2.user)
    return False


def find_matching(
    target: ConversationReference,
    candidates: Iterable[ConversationReference] | None,
    *,
    log: logging.Logger | None = None,
) -> list[ConversationReference]:
    """Return the *candidates* whose account matches *target*, in input order.

    A missing target or a ``None`` entry among the candidates is logged and
    yields an empty list. Any other error propagates.
    """
    log = log or logger
    if not candidates:
        return []
    try:
        return [c for c in candidates if accounts_match(target, c)]
    except InvalidReferenceError as exc:
        log.warning("[lookup] Failed to find a conversation reference: %s", exc)
        return []


def _same_id(account1: ChannelAccount, account2: ChannelAccount) -> bool:
    return account1.id is not None and account1.id == account2.id


def _require(value: object, name: str) -> None:
    if value is None:
        raise InvalidReferenceError(f"{name} is None")
