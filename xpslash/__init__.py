"""Slash command definitions, responses and interaction helpers for a chat leveling bot."""

__version__ = "0.1.0"