"""Validation of guild configuration changes and the permissions checkup text."""

from __future__ import annotations

from dataclasses import dataclass

from xpslash.errors import ErrorKind, SlashError
from xpslash.permissions import CanAddRole
from xpslash.schema import ChannelType

DEFAULT_MAX_XP_PER_MESSAGE = 25
DEFAULT_MIN_XP_PER_MESSAGE = 15
LEVEL_UP_MESSAGE_MAX_BYTES = 512
TEMPLATE_VARIABLES = (
    "user_id",
    "user_mention",
    "user_username",
    "user_display_name",
    "user_nickname",
    "old_level",
    "level",
    "xp",
)

_I16_MIN = -(1 << 15)
_I16_MAX = (1 << 15) - 1


class GuildConfigError(ValueError):
    """Raised when a guild configuration is inconsistent."""

    def __init__(self, min_xp: int, max_xp: int) -> None:
        self.min = min_xp
        self.max = max_xp
        super().__init__(
            f"The selected minimum XP value of {min_xp} is more than the selected maximum of {max_xp}"
        )


def validate_xp_range(min_xp: int | None, max_xp: int | None) -> tuple[int, int]:
    """Return the effective (min, max) XP per message, raising if min exceeds max."""
    effective_max = DEFAULT_MAX_XP_PER_MESSAGE if max_xp is None else max_xp
    effective_min = DEFAULT_MIN_XP_PER_MESSAGE if min_xp is None else min_xp
    if effective_max < effective_min:
        raise GuildConfigError(effective_min, effective_max)
    return effective_min, effective_max


def safecast_to_i16(value: int | None) -> int | None:
    """Pass a value through if it fits in a signed 16-bit integer."""
    if value is None:
        return None
    if not _I16_MIN <= value <= _I16_MAX:
        raise SlashError(ErrorKind.INVALID_INT)
    return value


def _template_variables(template: str) -> list[str]:
    variables: list[str] = []
    chars = iter(template)
    for char in chars:
        if char == "\\":
            if next(chars, None) is None:
                raise SlashError(ErrorKind.TEMPLATE, "template ends with an escape character")
        elif char == "{":
            name = []
            for inner in chars:
                if inner == "}":
                    break
                name.append(inner)
            else:
                raise SlashError(ErrorKind.TEMPLATE, "unclosed `{` in template")
            variables.append("".join(name))
    return variables


def check_level_up_message(message: str | None) -> list[str]:
    """Check a level-up template and return the variables it uses."""
    if message is None:
        return []
    if len(message.encode("utf-8")) > LEVEL_UP_MESSAGE_MAX_BYTES:
        raise SlashError(ErrorKind.LEVEL_UP_MESSAGE_TOO_LONG)
    variables = _template_variables(message)
    for name in variables:
        if name not in TEMPLATE_VARIABLES:
            raise SlashError(ErrorKind.UNKNOWN_INTERPOLATION_VARIABLE, name)
    return variables


def check_level_up_channel(kind: ChannelType | None) -> ChannelType | None:
    """Require the level-up channel, when given, to be a text channel."""
    if kind is not None and kind != ChannelType.GUILD_TEXT:
        raise SlashError(ErrorKind.LEVEL_UP_CHANNEL_MUST_BE_TEXT)
    return kind


@dataclass(frozen=True)
class EmojiBool:
    """A boolean shown as a check or cross emoji."""

    value: bool

    def __str__(self) -> str:
        return "✅" if self.value else "❎"


_ROLE_STATUS = {
    CanAddRole.YES: "✅",
    CanAddRole.NO_MANAGE_ROLES: "⚠️ No manage roles permission!",
    CanAddRole.HIGHEST_ROLE_IS_LOWER_ROLE_THAN_TARGET: (
        "⚠️ My highest role is lower than the ones I need to assign!"
    ),
    CanAddRole.ROLE_IS_MANAGED: "⚠️ That role is managed by another bot.",
}


def perms_report(can_add_roles: CanAddRole, can_message: bool | None) -> str:
    """Return the permissions checkup text.

    ``can_message`` is None when no level-up channel is configured.
    """
    good_msg_state = EmojiBool(can_message is not False)
    return (
        f"Can add roles: {_ROLE_STATUS[can_add_roles]}\n"
        f"Can message in level up channel: {good_msg_state}"
    )