"""Mention handling -- pull mention entities off an activity and strip them from text."""

from __future__ import annotations

from typing import Any

from botbuilder.core import TurnContext
from botbuilder.schema import Activity


def get_mentions(activity: Activity) -> list[Any]:
    """Return the mention entities of *activity* in their original order.

    Entities built in code are usually ``Mention`` instances; entities that
    came off the wire are plain ``Entity`` objects of type ``"mention"``.
    Both count. Entities without a type are ignored.
    """
    typed = [e for e in activity.entities or [] if getattr(e, "type", None)]
    return TurnContext.get_mentions(Activity(entities=typed))


def mention_text(entity: Any) -> str | None:
    """Return the literal text a mention occupies in the message body."""
    text = getattr(entity, "text", None)
    if text:
        return text
    extra = getattr(entity, "additional_properties", None) or {}
    return extra.get("text")


def strip_mentions(activity: Activity) -> str | None:
    """Remove every mention's text from the message body and trim the result.

    Empty or missing text is returned as-is. Mentions without text are
    skipped. Each mention is removed one occurrence at a time until none is
    left, so text that only appears after an earlier removal goes too.
    """
    stripped = activity.text
    if not stripped:
        return stripped

    for mention in get_mentions(activity):
        text = mention_text(mention)
        if not text:
            continue
        while text in stripped:
            stripped = stripped.replace(text, "", 1)

    return stripped.strip()
