"""Definitions of the leaderboard and rank commands."""

from __future__ import annotations

from xpslash.schema import Command, CommandOption, OptionType


def leaderboard_command() -> Command:
    """Return the ``leaderboard`` command."""
    return Command(
        name="leaderboard",
        description="See the leaderboard for this server",
        dm_permission=False,
        options=(
            CommandOption("user", "User to check level of", OptionType.USER),
            CommandOption("page", "Page to jump to", OptionType.INTEGER, min_value=1),
            CommandOption("show_off", "Want to show this off to everyone?", OptionType.BOOLEAN),
        ),
    )


def rank_command() -> Command:
    """Return the ``rank`` command."""
    return Command(
        name="rank",
        description="Check someone's rank and level",
        dm_permission=False,
        options=(
            CommandOption("user", "User to check level of", OptionType.USER),
            CommandOption("showoff", "Show off this card publicly", OptionType.BOOLEAN),
        ),
    )