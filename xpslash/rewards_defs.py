"""Definition of the role rewards command."""

from __future__ import annotations

from xpslash.schema import Command, CommandOption, OptionType, Permissions, subcommand


def rewards_command() -> Command:
    """Return the ``rewards`` command for automatic role rewards."""
    return Command(
        name="rewards",
        description="Manage automatic role rewards",
        dm_permission=False,
        default_member_permissions=Permissions.ADMINISTRATOR,
        options=(
            subcommand(
                "add",
                "Add a new leveling reward",
                [
                    CommandOption(
                        "level",
                        "What level to grant the role reward at",
                        OptionType.INTEGER,
                        required=True,
                        min_value=1,
                    ),
                    CommandOption("role", "What role to grant", OptionType.ROLE, required=True),
                ],
            ),
            subcommand(
                "remove",
                "Remove a leveling reward",
                [
                    CommandOption(
                        "level",
                        "What level of role reward to remove",
                        OptionType.INTEGER,
                        min_value=1,
                    ),
                    CommandOption("role", "What role reward to remove", OptionType.ROLE),
                ],
            ),
            subcommand("list", "Show a list of leveling rewards", []),
        ),
    )