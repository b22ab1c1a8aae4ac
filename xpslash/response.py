"""Interaction response data built up immutably."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from typing import Any, Mapping


class MessageFlags(enum.IntFlag):
    """Flags attached to a message."""

    CROSSPOSTED = 1 << 0
    IS_CROSSPOST = 1 << 1
    SUPPRESS_EMBEDS = 1 << 2
    SOURCE_MESSAGE_DELETED = 1 << 3
    URGENT = 1 << 4
    HAS_THREAD = 1 << 5
    EPHEMERAL = 1 << 6
    LOADING = 1 << 7
    SUPPRESS_NOTIFICATIONS = 1 << 12


class InteractionResponseType(enum.IntEnum):
    """Kinds of interaction responses."""

    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4
    DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE = 5
    DEFERRED_UPDATE_MESSAGE = 6
    UPDATE_MESSAGE = 7
    APPLICATION_COMMAND_AUTOCOMPLETE_RESULT = 8
    MODAL = 9


def embed(description: str) -> dict[str, Any]:
    """Return an embed holding only ``description``."""
    return {"description": description}


_FIELDS = (
    "allowed_mentions",
    "attachments",
    "choices",
    "components",
    "content",
    "custom_id",
    "embeds",
    "flags",
    "title",
    "tts",
)


@dataclass(frozen=True)
class SlashResponse:
    """The data of a reply to an interaction; unset fields are None."""

    allowed_mentions: dict[str, Any] | None = None
    attachments: list[Any] | None = None
    choices: list[Any] | None = None
    components: list[Any] | None = None
    content: str | None = None
    custom_id: str | None = None
    embeds: list[dict[str, Any]] | None = None
    flags: MessageFlags | None = None
    title: str | None = None
    tts: bool | None = None

    @classmethod
    def with_embed_text(cls, text: str) -> SlashResponse:
        """Return a response with one embed whose description is ``text``."""
        return cls(embeds=[embed(text)])

    def with_changes(self, **kwargs: Any) -> SlashResponse:
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **kwargs)

    def ephemeral(self, ephemeral: bool) -> SlashResponse:
        """Return a copy with the ephemeral flag set or cleared."""
        if self.flags is not None:
            if ephemeral:
                flags = self.flags | MessageFlags.EPHEMERAL
            else:
                flags = self.flags & ~MessageFlags.EPHEMERAL
            return self.with_changes(flags=MessageFlags(flags))
        if ephemeral:
            return self.with_changes(flags=MessageFlags.EPHEMERAL)
        return self

    def to_data(self) -> dict[str, Any]:
        """Return the wire form of the response data, leaving out unset fields."""
        data: dict[str, Any] = {}
        for name in _FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            data[name] = int(value) if name == "flags" else value
        return data

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> SlashResponse:
        """Build a response from its wire form."""
        values = {name: data[name] for name in _FIELDS if data.get(name) is not None}
        if "flags" in values:
            values["flags"] = MessageFlags(values["flags"])
        return cls(**values)

    def to_interaction_response(self) -> dict[str, Any]:
        """Wrap the data as a channel-message interaction response."""
        return {
            "type": int(InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE),
            "data": self.to_data(),
        }