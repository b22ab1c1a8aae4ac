"""Resolution of rank-card edit choices and the preview user for guild cards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from xpslash.errors import ErrorKind, SlashError

CUSTOM_CARD_NULL_SENTINEL = "NULL"
DEFAULT_CARD_LAYOUT = "classic.svg"


@dataclass(frozen=True)
class ConfigItem:
    """A selectable card resource: a font, toy image or layout."""

    display_name: str
    internal_name: str


@dataclass(frozen=True)
class PreviewUser:
    """The stand-in member shown on a guild's preview card."""

    id: int
    name: str = "Preview"
    global_name: str | None = None
    nick: str | None = None
    avatar: str | None = None
    local_avatar: str | None = None
    bot: bool = False


def resolve_choice(
    items: Iterable[ConfigItem], chosen: str | None, error_kind: ErrorKind
) -> str | None:
    """Return the internal name matching ``chosen``.

    Returns None when nothing was chosen or the null sentinel was chosen;
    raises SlashError with ``error_kind`` when no item matches.
    """
    if chosen is None:
        return None
    match = next((item.internal_name for item in items if item.internal_name == chosen), None)
    if match is None:
        raise SlashError(error_kind)
    if match == CUSTOM_CARD_NULL_SENTINEL:
        return None
    return match


def fake_user(snowflake: int) -> PreviewUser:
    """Return the preview member used when rendering a guild's default card."""
    return PreviewUser(id=snowflake)