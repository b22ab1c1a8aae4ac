"""The full set of commands the bot registers."""

from __future__ import annotations

from xpslash.admin_defs import admin_command
from xpslash.card_defs import card_command, guild_card_command
from xpslash.config_defs import config_command
from xpslash.experience_defs import xp_command
from xpslash.gdpr_defs import gdpr_command
from xpslash.levels_defs import leaderboard_command, rank_command
from xpslash.manage_defs import manage_command
from xpslash.rewards_defs import rewards_command
from xpslash.schema import Command, CommandType


def help_command() -> Command:
    """Return the ``help`` command."""
    return Command(
        name="help",
        description="Learn about how to use experienced",
        dm_permission=True,
    )


def context_command(name: str, kind: CommandType) -> Command:
    """Return a context-menu command with no description or options."""
    return Command(name=name, description="", kind=CommandType(kind))


def get_commands() -> list[Command]:
    """Return the commands registered globally, in registration order."""
    return [
        xp_command(),
        rank_command(),
        card_command(),
        help_command(),
        gdpr_command(),
        manage_command(),
        config_command(),
        guild_card_command(),
        leaderboard_command(),
        rewards_command(),
        context_command("Get level", CommandType.USER),
        context_command("Get author level", CommandType.MESSAGE),
    ]


def admin_commands() -> list[Command]:
    """Return the commands registered only in the control guild."""
    return [admin_command()]