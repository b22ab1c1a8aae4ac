"""Application command schema: option and command models plus validation."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Iterable


class OptionType(enum.IntEnum):
    """Kinds of command options, with their wire values."""

    SUB_COMMAND = 1
    SUB_COMMAND_GROUP = 2
    STRING = 3
    INTEGER = 4
    BOOLEAN = 5
    USER = 6
    CHANNEL = 7
    ROLE = 8
    MENTIONABLE = 9
    NUMBER = 10
    ATTACHMENT = 11


class CommandType(enum.IntEnum):
    """Kinds of application commands."""

    CHAT_INPUT = 1
    USER = 2
    MESSAGE = 3


class ChannelType(enum.IntEnum):
    """Kinds of channels."""

    GUILD_TEXT = 0
    DM = 1
    GUILD_VOICE = 2
    GROUP_DM = 3
    GUILD_CATEGORY = 4
    GUILD_ANNOUNCEMENT = 5
    ANNOUNCEMENT_THREAD = 10
    PUBLIC_THREAD = 11
    PRIVATE_THREAD = 12
    GUILD_STAGE_VOICE = 13
    GUILD_DIRECTORY = 14
    GUILD_FORUM = 15


class Permissions(enum.IntFlag):
    """Guild permission bits."""

    CREATE_INSTANT_INVITE = 1 << 0
    KICK_MEMBERS = 1 << 1
    BAN_MEMBERS = 1 << 2
    ADMINISTRATOR = 1 << 3
    MANAGE_CHANNELS = 1 << 4
    MANAGE_GUILD = 1 << 5
    VIEW_CHANNEL = 1 << 10
    SEND_MESSAGES = 1 << 11
    MANAGE_MESSAGES = 1 << 13
    MANAGE_ROLES = 1 << 28
    MODERATE_MEMBERS = 1 << 40


class CommandValidationError(ValueError):
    """Raised when a command definition breaks the platform's limits."""


_SUBCOMMAND_KINDS = (OptionType.SUB_COMMAND, OptionType.SUB_COMMAND_GROUP)

NAME_LENGTH_MAX = 32
DESCRIPTION_LENGTH_MAX = 100
OPTIONS_COUNT_MAX = 25
STRING_LENGTH_MAX = 6000
COMMAND_TOTAL_LENGTH_MAX = 4000


@dataclass(frozen=True)
class CommandOption:
    """One option (or subcommand) of an application command."""

    name: str
    description: str
    kind: OptionType
    required: bool = False
    options: tuple[CommandOption, ...] = ()
    min_value: int | float | None = None
    max_value: int | float | None = None
    min_length: int | None = None
    max_length: int | None = None
    autocomplete: bool = False
    channel_types: tuple[ChannelType, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation of this option."""
        data: dict[str, Any] = {
            "type": int(self.kind),
            "name": self.name,
            "description": self.description,
        }
        if self.required:
            data["required"] = True
        if self.kind in _SUBCOMMAND_KINDS or self.options:
            data["options"] = [option.to_dict() for option in self.options]
        for key in ("min_value", "max_value", "min_length", "max_length"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        if self.autocomplete:
            data["autocomplete"] = True
        if self.channel_types:
            data["channel_types"] = [int(kind) for kind in self.channel_types]
        return data


@dataclass(frozen=True)
class Command:
    """A top-level application command."""

    name: str
    description: str
    kind: CommandType = CommandType.CHAT_INPUT
    options: tuple[CommandOption, ...] = field(default=())
    dm_permission: bool | None = None
    default_member_permissions: Permissions | None = None
    version: int = 1

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation of this command."""
        data: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "type": int(self.kind),
            "options": [option.to_dict() for option in self.options],
            "version": str(self.version),
        }
        if self.dm_permission is not None:
            data["dm_permission"] = self.dm_permission
        if self.default_member_permissions is not None:
            data["default_member_permissions"] = str(int(self.default_member_permissions))
        return data

    def find_option(self, name: str) -> CommandOption:
        """Return the top-level option called ``name``; raise KeyError if absent."""
        for option in self.options:
            if option.name == name:
                return option
        raise KeyError(name)


def subcommand(name: str, description: str, options: Iterable[CommandOption]) -> CommandOption:
    """Build a subcommand option holding ``options``."""
    return CommandOption(
        name=name,
        description=description,
        kind=OptionType.SUB_COMMAND,
        options=tuple(options),
    )


def _check_chat_name(name: str, what: str) -> None:
    if not 1 <= len(name) <= NAME_LENGTH_MAX:
        raise CommandValidationError(f"{what} name {name!r} must be 1 to {NAME_LENGTH_MAX} characters")
    for char in name:
        if not (char.isalnum() or char in "-_"):
            raise CommandValidationError(f"{what} name {name!r} contains invalid character {char!r}")
        if char != char.lower():
            raise CommandValidationError(f"{what} name {name!r} must be lowercase")


def _check_description(description: str, what: str) -> None:
    if not 1 <= len(description) <= DESCRIPTION_LENGTH_MAX:
        raise CommandValidationError(
            f"{what} description must be 1 to {DESCRIPTION_LENGTH_MAX} characters"
        )


def _check_options(options: tuple[CommandOption, ...]) -> int:
    """Validate a list of sibling options and return their character total."""
    if len(options) > OPTIONS_COUNT_MAX:
        raise CommandValidationError(f"at most {OPTIONS_COUNT_MAX} options are allowed")
    seen: set[str] = set()
    optional_seen = False
    total = 0
    for option in options:
        _check_chat_name(option.name, "option")
        _check_description(option.description, f"option {option.name!r}")
        if option.name in seen:
            raise CommandValidationError(f"duplicate option name {option.name!r}")
        seen.add(option.name)
        if option.kind not in _SUBCOMMAND_KINDS:
            if option.required and optional_seen:
                raise CommandValidationError(
                    f"required option {option.name!r} follows an optional option"
                )
            if not option.required:
                optional_seen = True
        if option.min_length is not None and not 0 <= option.min_length <= STRING_LENGTH_MAX:
            raise CommandValidationError(f"option {option.name!r} has invalid min_length")
        if option.max_length is not None and not 1 <= option.max_length <= STRING_LENGTH_MAX:
            raise CommandValidationError(f"option {option.name!r} has invalid max_length")
        if (
            option.min_length is not None
            and option.max_length is not None
            and option.min_length > option.max_length
        ):
            raise CommandValidationError(f"option {option.name!r} has min_length above max_length")
        if (
            option.min_value is not None
            and option.max_value is not None
            and option.min_value > option.max_value
        ):
            raise CommandValidationError(f"option {option.name!r} has min_value above max_value")
        total += len(option.name) + len(option.description)
        total += _check_options(option.options)
    return total


def validate_command(command: Command) -> Command:
    """Check ``command`` against the platform limits and return it unchanged."""
    if command.kind == CommandType.CHAT_INPUT:
        _check_chat_name(command.name, "command")
        _check_description(command.description, "command")
    else:
        if not 1 <= len(command.name) <= NAME_LENGTH_MAX:
            raise CommandValidationError(
                f"command name {command.name!r} must be 1 to {NAME_LENGTH_MAX} characters"
            )
        if command.description:
            raise CommandValidationError("context menu commands must have an empty description")
        if command.options:
            raise CommandValidationError("context menu commands cannot have options")
    total = len(command.name) + len(command.description) + _check_options(command.options)
    if total > COMMAND_TOTAL_LENGTH_MAX:
        raise CommandValidationError(
            f"command {command.name!r} is {total} characters, above {COMMAND_TOTAL_LENGTH_MAX}"
        )
    return command