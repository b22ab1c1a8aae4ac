"""Definition of the per-guild configuration command."""

from __future__ import annotations

from xpslash.schema import (
    ChannelType,
    Command,
    CommandOption,
    OptionType,
    Permissions,
    subcommand,
)

MAX_MESSAGE_COOLDOWN = 28800
MAX_XP_PER_MESSAGE_LIMIT = 32767
LEVEL_UP_MESSAGE_MAX_LENGTH = 512


def config_command() -> Command:
    """Return the ``config`` command for guild behaviour settings."""
    levels = subcommand(
        "levels",
        "Configure level-up behavior",
        [
            CommandOption(
                "level_up_message",
                "Message to send when a user levels up. See the docs for template variables.",
                OptionType.STRING,
                min_length=1,
                max_length=LEVEL_UP_MESSAGE_MAX_LENGTH,
            ),
            CommandOption(
                "level_up_channel",
                "Where to send level up messages",
                OptionType.CHANNEL,
                channel_types=(ChannelType.GUILD_TEXT,),
            ),
            CommandOption(
                "ping_users",
                "Enable push notifications to users when they level up and are mentioned",
                OptionType.BOOLEAN,
            ),
            CommandOption(
                "max_xp_per_message",
                "Maximum amount of XP per message (Default 25)",
                OptionType.INTEGER,
                min_value=0,
                max_value=MAX_XP_PER_MESSAGE_LIMIT,
            ),
            CommandOption(
                "min_xp_per_message",
                "Minimum amount of XP per message (Default 15)",
                OptionType.INTEGER,
                min_value=0,
                max_value=MAX_XP_PER_MESSAGE_LIMIT,
            ),
            CommandOption(
                "message_cooldown",
                "How many seconds users must wait between messages that are able to earn XP",
                OptionType.INTEGER,
                min_value=0,
                max_value=MAX_MESSAGE_COOLDOWN,
            ),
        ],
    )
    rewards = subcommand(
        "rewards",
        "Configure role reward behavior",
        [
            CommandOption(
                "one_at_a_time",
                "Remove all existing Experienced-managed roles when assigning a new one",
                OptionType.BOOLEAN,
            )
        ],
    )
    return Command(
        name="config",
        description="Configure the behavior of the bot in your server",
        dm_permission=False,
        default_member_permissions=Permissions.ADMINISTRATOR,
        options=(
            subcommand("reset", "Reset your guild's configuration", []),
            subcommand("get", "Get your guild's configuration", []),
            rewards,
            levels,
            subcommand(
                "perms_checkup",
                "See if Experienced has the proper permissions in your server",
                [],
            ),
        ),
    )