"""Leaderboard pages and their navigation controls."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Any, Sequence

from xpslash.errors import ErrorKind, SlashError
from xpslash.response import InteractionResponseType, MessageFlags

USERS_PER_PAGE = 10

_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


class ButtonStyle(enum.IntEnum):
    """Visual styles of a button."""

    PRIMARY = 1
    SECONDARY = 2
    SUCCESS = 3
    DANGER = 4
    LINK = 5


@dataclass(frozen=True)
class Button:
    """A message button."""

    custom_id: str
    label: str
    style: ButtonStyle
    disabled: bool = False
    emoji: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form of the button."""
        data: dict[str, Any] = {
            "type": 2,
            "custom_id": self.custom_id,
            "label": self.label,
            "style": int(self.style),
            "disabled": self.disabled,
        }
        if self.emoji is not None:
            data["emoji"] = {"name": self.emoji}
        return data


@dataclass(frozen=True)
class LeaderboardEntry:
    """One ranked user."""

    id: int
    level: int


@dataclass(frozen=True)
class LeaderboardPage:
    """A rendered leaderboard page."""

    content: str
    buttons: tuple[Button, ...]
    flags: MessageFlags

    def to_data(self) -> dict[str, Any]:
        """Return the interaction response data for this page."""
        return {
            "allowed_mentions": {"parse": []},
            "components": [
                {"type": 1, "components": [button.to_dict() for button in self.buttons]}
            ],
            "content": self.content,
            "flags": int(self.flags),
        }


def control_options(zpage: int, next_page_exists: bool) -> list[Button]:
    """Return the five navigation buttons for zero-indexed page ``zpage``."""
    return [
        Button("page_indicator", f"Page {zpage + 1}", ButtonStyle.SECONDARY, disabled=True),
        Button(str(zpage - 1), "Previous", ButtonStyle.PRIMARY, disabled=zpage == 0, emoji="⬅"),
        Button(
            "jump_modal",
            "Go to page",
            ButtonStyle.PRIMARY,
            disabled=not next_page_exists and zpage == 0,
        ),
        Button(
            str(zpage + 1), "Next", ButtonStyle.PRIMARY, disabled=not next_page_exists, emoji="➡️"
        ),
        Button("delete_leaderboard", "Delete", ButtonStyle.DANGER, emoji="🗑️"),
    ]


def page_for_rank(rank: int) -> int:
    """Return the zero-indexed page a rank is shown on."""
    return int(rank / USERS_PER_PAGE)


def render_leaderboard(
    users: Sequence[LeaderboardEntry], zpage: int, show_off: bool | None
) -> LeaderboardPage:
    """Render a page from up to ``USERS_PER_PAGE + 1`` fetched users.

    The extra user, when present, only signals that a next page exists.
    """
    if zpage < 0:
        raise SlashError(ErrorKind.PAGE_DOES_NOT_EXIST)
    if not users:
        raise SlashError(ErrorKind.NO_USERS_FOR_PAGE if zpage == 0 else ErrorKind.NO_RANKS_YET)

    next_page_exists = len(users) >= USERS_PER_PAGE + 1
    lines = ["### Leaderboard"]
    first_rank = zpage * USERS_PER_PAGE + 1
    for rank, user in enumerate(users[:USERS_PER_PAGE], start=first_rank):
        lines.append(f"**#{rank}.** <@{user.id}> - Level {user.level}")
    content = "".join(f"{line}\n" for line in lines)

    buttons = control_options(zpage, next_page_exists)
    if show_off:
        flags = MessageFlags(0)
    else:
        buttons = buttons[:-1]
        flags = MessageFlags.EPHEMERAL
    return LeaderboardPage(content=content, buttons=tuple(buttons), flags=flags)


def _parse_i64(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise SlashError(ErrorKind.STR_TO_INT)
    value = int(text)
    if not _I64_MIN <= value <= _I64_MAX:
        raise SlashError(ErrorKind.STR_TO_INT)
    return value


def parse_jump_input(value: str | None) -> int:
    """Turn the page typed into the jump modal into a zero-indexed page."""
    if value is None:
        raise SlashError(ErrorKind.NO_DESTINATION_IN_COMPONENT)
    return _parse_i64(value) - 1


def jump_modal() -> dict[str, Any]:
    """Return the modal response that asks which page to jump to."""
    text_input = {
        "type": 4,
        "custom_id": "jump_modal_input",
        "label": "Jump Destination",
        "style": 1,
        "min_length": 1,
        "max_length": 8,
        "placeholder": "What page to jump to",
        "required": True,
    }
    return {
        "type": int(InteractionResponseType.MODAL),
        "data": {
            "custom_id": "jump_modal",
            "title": "Go to page..",
            "components": [{"type": 1, "components": [text_input]}],
        },
    }


def component_target(custom_id: str) -> str | int:
    """Return the action of a pressed button: a command name or a target page."""
    if custom_id in ("jump_modal", "delete_leaderboard"):
        return custom_id
    return _parse_i64(custom_id)