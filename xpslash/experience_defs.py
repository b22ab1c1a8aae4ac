"""Definition of the experience management command."""

from __future__ import annotations

from xpslash.schema import Command, CommandOption, OptionType, Permissions, subcommand


def _user(description: str) -> CommandOption:
    return CommandOption("user", description, OptionType.USER, required=True)


def _positive(name: str, description: str) -> CommandOption:
    return CommandOption(name, description, OptionType.INTEGER, required=True, min_value=1)


def xp_command() -> Command:
    """Return the ``xp`` command for moderating user experience."""
    return Command(
        name="xp",
        description="Manage user experience in this guild",
        dm_permission=False,
        default_member_permissions=Permissions.MODERATE_MEMBERS,
        options=(
            subcommand(
                "add",
                "Add experience points to a user",
                [
                    _user("User to add experience to"),
                    _positive("amount", "Amount of experience to add"),
                ],
            ),
            subcommand(
                "remove",
                "Remove experience points from a user",
                [
                    _user("User to remove experience from"),
                    _positive("amount", "Amount of experience to remove"),
                ],
            ),
            subcommand(
                "reset",
                "Reset a user's experienced progress & remove them from the leaderboard",
                [_user("User to remove")],
            ),
            subcommand(
                "set",
                "Set a user's experience value",
                [
                    _user("User to set XP of"),
                    _positive("xp", "value to set their current XP to"),
                ],
            ),
        ),
    )