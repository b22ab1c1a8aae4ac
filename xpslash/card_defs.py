"""Definitions of the user and guild rank-card commands."""

from __future__ import annotations

from xpslash.schema import Command, CommandOption, OptionType, Permissions, subcommand

_COLOR_FIELDS = (
    ("background", "What color to use for the background"),
    ("border", "What color to use for the border"),
    ("username", "What color to use for your username"),
    ("rank", "What color to use for your rank"),
    ("level", "What color to use for your level"),
    ("progress_foreground", "What color to use for the progress bar's filled part"),
    ("progress_background", "What color to use for the progress bar's empty part"),
    (
        "foreground_xp_count",
        "What color to use for the xp count when in the progress bar's filled part",
    ),
    (
        "background_xp_count",
        "What color to use for the xp count when in the progress bar's empty part",
    ),
)


def color_option(name: str, description: str) -> CommandOption:
    """Return an optional hex-colour string option."""
    return CommandOption(
        name=name,
        description=description,
        kind=OptionType.STRING,
        min_length=6,
        max_length=7,
    )


def _reset() -> CommandOption:
    return subcommand("reset", "Reset your card to defaults", [])


def _edit() -> CommandOption:
    options = [color_option(name, description) for name, description in _COLOR_FIELDS]
    options += [
        CommandOption("font", "What font to use in the card", OptionType.STRING, autocomplete=True),
        CommandOption(
            "toy_image", "What toy image to use in the card", OptionType.STRING, autocomplete=True
        ),
        CommandOption(
            "card_layout", "What layout to use for the card", OptionType.STRING, autocomplete=True
        ),
    ]
    return subcommand(
        "edit",
        "Edit card colors by specifying hex codes for values you would like to change.",
        options,
    )


def card_command() -> Command:
    """Return the ``card`` command for a user's own rank card."""
    return Command(
        name="card",
        description="Set hex codes for different color schemes in your rank card.",
        dm_permission=True,
        options=(
            _reset(),
            subcommand(
                "fetch",
                "Get your current card settings, including defaults.",
                [CommandOption("user", "User to fetch settings of", OptionType.USER)],
            ),
            _edit(),
        ),
    )


def guild_card_command() -> Command:
    """Return the ``guild-card`` command for a server's default rank card."""
    return Command(
        name="guild-card",
        description=(
            "Set hex codes for different color schemes in your server's default rank card."
        ),
        dm_permission=False,
        default_member_permissions=Permissions.ADMINISTRATOR,
        options=(
            _reset(),
            subcommand("fetch", "Get your server's current default card settings.", []),
            _edit(),
        ),
    )