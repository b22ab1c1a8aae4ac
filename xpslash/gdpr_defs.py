"""Definition of the data-protection command."""

from __future__ import annotations

from xpslash.schema import Command, CommandOption, OptionType, subcommand


def gdpr_command() -> Command:
    """Return the ``gdpr`` command for deleting or downloading personal data."""
    return Command(
        name="gdpr",
        description="Exercise your rights under the GDPR",
        dm_permission=True,
        options=(
            subcommand(
                "delete",
                "Delete all of your data from Experienced",
                [
                    CommandOption(
                        "user",
                        "Your @username (for confirmation)",
                        OptionType.USER,
                        required=True,
                    )
                ],
            ),
            subcommand("download", "Download all of your data stored by Experienced", []),
        ),
    )