"""Definition of the global administration command."""

from __future__ import annotations

from xpslash.schema import Command, CommandOption, OptionType, Permissions, subcommand


def _guild(description: str) -> CommandOption:
    return CommandOption("guild", description, OptionType.STRING, required=True)


def _user(description: str) -> CommandOption:
    return CommandOption("user", description, OptionType.USER, required=True)


def admin_command() -> Command:
    """Return the ``admin`` command used to manage the bot globally."""
    return Command(
        name="admin",
        description="Globally manage the bot",
        dm_permission=False,
        default_member_permissions=Permissions.ADMINISTRATOR,
        options=(
            subcommand("leave", "Leave a guild", [_guild("Guild to leave")]),
            subcommand("resetguild", "Reset the stats of a guild", [_guild("Guild to reset")]),
            subcommand(
                "resetuser",
                "Reset the stats & custom card of a user",
                [_user("User to reset")],
            ),
            subcommand(
                "setnick",
                "Set the bot's nickname in a guild",
                [
                    _guild("Guild to set nick in"),
                    CommandOption(
                        "name",
                        "Name to set",
                        OptionType.STRING,
                        min_length=1,
                        max_length=32,
                    ),
                ],
            ),
            subcommand(
                "banguild",
                "Ban a guild from using the bot",
                [
                    _guild("Guild to ban"),
                    CommandOption("duration", "How many days to ban for", OptionType.NUMBER),
                ],
            ),
            subcommand(
                "pardonguild",
                "Unban a guild from using the bot",
                [_guild("Guild to pardon")],
            ),
            subcommand(
                "guildstats",
                "Get some basic info about a guild the bot is in",
                [_guild("Guild to fetch stats of")],
            ),
            subcommand("stats", "Get some basic stats about the bot in general", []),
            subcommand(
                "inspectcooldown",
                "Find cooldown for user in guild",
                [_guild("Guild to inspect cooldown in"), _user("User ID")],
            ),
        ),
    )