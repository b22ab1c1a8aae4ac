"""Definition of the bulk data management command."""

from __future__ import annotations

from xpslash.schema import Command, CommandOption, OptionType, Permissions, subcommand

CONFIRMATION_STRING = "I Understand The Risks"


def manage_command() -> Command:
    """Return the ``manage`` command for bulk actions on guild XP."""
    return Command(
        name="manage",
        description="Do bulk actions on user XP in your server",
        dm_permission=False,
        default_member_permissions=Permissions.ADMINISTRATOR,
        options=(
            subcommand(
                "reset",
                "DANGER: Reset ALL the leveling data for your guild! This is IRREVERSIBLE!",
                [
                    CommandOption(
                        "confirm_message",
                        f'"{CONFIRMATION_STRING}", to ensure you know this will delete '
                        "ALL YOUR DATA",
                        OptionType.STRING,
                        required=True,
                    )
                ],
            ),
            subcommand(
                "import",
                "Import leveling data from another Discord bot or other source",
                [
                    CommandOption(
                        "levels", "Leveling JSON file", OptionType.ATTACHMENT, required=True
                    ),
                    CommandOption(
                        "overwrite",
                        "Overwrite, rather then summing with previous leveling data",
                        OptionType.BOOLEAN,
                    ),
                ],
            ),
            subcommand("export", "Export this server's leveling data into a JSON file", []),
        ),
    )