"""Builders for Bot Framework objects used across the tests."""

from __future__ import annotations

from botbuilder.schema import Activity, ActivityTypes, ChannelAccount, ConversationAccount

SERVICE_URL = "https://smba.trafficmanager.net/emea/"


def make_activity(
    text: str | None = "hello",
    *,
    activity_id: str = "act-1",
    sender_id: str = "user-1",
    recipient_id: str = "bot-1",
    conversation_id: str = "conv-1",
    channel_id: str = "msteams",
    service_url: str = SERVICE_URL,
    entities: list | None = None,
) -> Activity:
    return Activity(
        type=ActivityTypes.message,
        id=activity_id,
        text=text,
        from_property=ChannelAccount(id=sender_id, name="Alice"),
        recipient=ChannelAccount(id=recipient_id, name="Router"),
        conversation=ConversationAccount(id=conversation_id, name="Main"),
        channel_id=channel_id,
        service_url=service_url,
        entities=entities,
    )
