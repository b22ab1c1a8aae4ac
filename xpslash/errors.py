"""Errors raised while handling interactions, with their user-facing messages."""

from __future__ import annotations

import enum
from typing import Any

from xpslash.response import MessageFlags, SlashResponse


class ErrorKind(enum.Enum):
    """Every kind of failure, each carrying a code and a message template."""

    PARSE = ("parse", "Interaction parser encountered an error!")
    TASK_PANICKED = ("task_panicked", "Processing task panicked!")
    DISCORD_HTTP = ("discord_http", "Discord error!")
    HTTP = ("http", "HTTP error!")
    IMAGE_SOURCE_ATTACHMENT = ("image_source_attachment", "Invalid message attachment!")
    IMAGE_GENERATOR = ("image_generator", "SVG renderer encountered an error!")
    DATABASE = ("database", "Database encountered an error")
    SQL = ("sql", "Manual SQL use encountered an error")
    WRONG_ARGUMENT_COUNT = ("wrong_argument_count", "Command had wrong number of arguments!")
    FORMAT = ("format", "Text formatting returned an error")
    STR_TO_INT = ("str_to_int", "Could not convert string to int")
    INVALID_INT = ("invalid_int", "Could not convert one type of int to another")
    CSV = ("csv", "CSV error")
    JSON = ("json", "JSON error")
    IO = ("io", "I/O error")
    TEMPLATE = ("template", "Could not build template: {0}")
    DISCORD_API_DESERIALIZATION = ("discord_api_deserialization", "Discord API decoding error")
    INVALID_GUILD_CONFIG = ("invalid_guild_config", "Invalid guild config: {0}")
    PERMISSION_CHECK = ("permission_check", "Permission fetch error: {0}")
    UNRECOGNIZED_COMMAND = ("unrecognized_command", "Discord sent a command that is not known!")
    NO_INVOKER = (
        "no_invoker",
        "Discord did not send a user object for the command invoker when it was required!",
    )
    NO_TARGET = (
        "no_target",
        "Discord did not send a user object for the command target when it was required!",
    )
    NO_RESOLVED_DATA = ("no_resolved_data", "Discord did not send part of the Resolved Data!")
    NO_MESSAGE_TARGET_ID = ("no_message_target_id", "Discord did not send target ID for message!")
    WRONG_INTERACTION_DATA = (
        "wrong_interaction_data",
        "Discord sent interaction data for an unsupported interaction type!",
    )
    NO_INTERACTION_DATA = ("no_interaction_data", "Discord did not send any interaction data!")
    NO_GUILD_ID = ("no_guild_id", "Discord did not send a guild ID!")
    CSV_INTO_INNER = ("csv_into_inner", "CSV encountered an IntoInner error")
    INVALID_FONT = ("invalid_font", "Invalid font")
    INVALID_CARD = ("invalid_card", "Invalid card")
    NOT_CONTROL_GUILD = ("not_control_guild", "This command only works in the control guild!")
    NOT_CONTROL_USER = ("not_control_user", "This command only works as a control user!")
    IMPORT_FILE_TOO_BIG = (
        "import_file_too_big",
        "That file is too big to import automatically. "
        "Please contact support to set up imports for your server.",
    )
    NO_USERS_FOR_PAGE = ("no_users_for_page", "This page does not exist!")
    PAGE_DOES_NOT_EXIST = ("page_does_not_exist", "This page does not exist!")
    NO_MODAL_ACTION_ROW = ("no_modal_action_row", "This modal did not contain any action rows!")
    NO_FORM_FIELD = ("no_form_field", "This modal did not contain the required form field!")
    NO_DESTINATION_IN_COMPONENT = (
        "no_destination_in_component",
        "This modal did not contain the required form data!",
    )
    RAW_HTTP_BODY = ("raw_http_body", "HTTP body error!")
    XP_WOULD_BE_NEGATIVE = ("xp_would_be_negative", "That would make this user's XP negative!")
    UNKNOWN_INTERPOLATION_VARIABLE = (
        "unknown_interpolation_variable",
        "Unknown variable `{0}` used in level-up message!",
    )
    LEVEL_UP_MESSAGE_TOO_LONG = (
        "level_up_message_too_long",
        "Level up message must be less than 512 characters!",
    )
    LEVEL_UP_CHANNEL_MUST_BE_TEXT = (
        "level_up_channel_must_be_text",
        "Level up channel must be a text channel!",
    )
    UNKNOWN_CARD = ("unknown_card", "That card does not exist!")
    UNKNOWN_TOY = ("unknown_toy", "That toy does not exist!")
    UNKNOWN_FONT = ("unknown_font", "That font does not exist!")
    NO_AUTOCOMPLETE_FOR_COMMAND = (
        "no_autocomplete_for_command",
        "There is no autocomplete for that command.",
    )
    NO_INTERACTION_MESSAGE = (
        "no_interaction_message",
        "Discord didn't send an interaction message for that message component",
    )
    NO_INTERACTION_INVOCATION_ON_INTERACTION_MESSAGE = (
        "no_interaction_invocation_on_interaction_message",
        "Discord sent an interaction response message without interaction invocation data",
    )
    NOT_YOUR_LEADERBOARD = ("not_your_leaderboard", "You didn't create this leaderboard.")
    BOTS_DONT_LEVEL = (
        "bots_dont_level",
        "Bots do not have leveling data. If one does somehow, "
        "you can still use /xp experience reset on it.",
    )
    NO_RANKS_YET = ("no_ranks_yet", "Nobody in this server is ranked yet.")
    NO_LAST_MESSAGE = ("no_last_message", "This user does not have a most recent message.")

    def __init__(self, code: str, template: str) -> None:
        self.code = code
        self.template = template

    @property
    def needs_detail(self) -> bool:
        """Whether the message template embeds a detail value."""
        return "{0}" in self.template


class SlashError(Exception):
    """A failure while handling an interaction, shown to the user as text."""

    def __init__(self, kind: ErrorKind, detail: Any = None) -> None:
        if kind.needs_detail and detail is None:
            raise TypeError(f"{kind.name} needs a detail value")
        self.kind = kind
        self.detail = detail
        super().__init__(self.message)

    @property
    def message(self) -> str:
        """The user-facing message."""
        if self.kind.needs_detail:
            return self.kind.template.format(self.detail)
        return self.kind.template

    def __str__(self) -> str:
        return self.message

    def to_response(self) -> dict[str, Any]:
        """Return the ephemeral interaction response that reports this error."""
        return SlashResponse(
            content=self.message, flags=MessageFlags.EPHEMERAL
        ).to_interaction_response()