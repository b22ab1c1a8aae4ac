"""The reply to the help command."""

from __future__ import annotations

from xpslash.response import SlashResponse

DOCS_URL = "https://xp.example.com/docs/"
SUPPORT_URL = "https://xp.example.com/discord"
HELP_MESSAGE = f"Visit [the docs](<{DOCS_URL}>) or [join the discord](<{SUPPORT_URL}>)"


def help_response() -> SlashResponse:
    """Return the ephemeral help message."""
    return SlashResponse.with_embed_text(HELP_MESSAGE).ephemeral(True)