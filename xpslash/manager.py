"""Bulk import and export of guild level data."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterable

from xpslash.errors import ErrorKind, SlashError
from xpslash.manage_defs import CONFIRMATION_STRING

MAX_IMPORT_SIZE = 1024 * 1024 * 10

_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1
_U64_MAX = (1 << 64) - 1


@dataclass(frozen=True)
class ImportUser:
    """One user's XP in an import or export file."""

    id: int
    xp: int

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, with the id as a string."""
        return {"id": str(self.id), "xp": self.xp}


def _parse_id(value: Any) -> int:
    if isinstance(value, bool):
        raise SlashError(ErrorKind.JSON)
    if isinstance(value, str):
        if not value.isascii() or not value.isdigit():
            raise SlashError(ErrorKind.JSON)
        value = int(value)
    if not isinstance(value, int) or not 0 < value <= _U64_MAX:
        raise SlashError(ErrorKind.JSON)
    return value


def _parse_xp(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SlashError(ErrorKind.JSON)
    if not _I64_MIN <= value <= _I64_MAX:
        raise SlashError(ErrorKind.JSON)
    return value


def parse_import(data: bytes | str) -> list[ImportUser]:
    """Parse an import file: a JSON array of ``{"id", "xp"}`` objects."""
    raw = data.encode("utf-8") if isinstance(data, str) else data
    if len(raw) > MAX_IMPORT_SIZE:
        raise SlashError(ErrorKind.RAW_HTTP_BODY)
    try:
        parsed = json.loads(raw)
    except (ValueError, UnicodeDecodeError) as exc:
        raise SlashError(ErrorKind.JSON) from exc
    if not isinstance(parsed, list):
        raise SlashError(ErrorKind.JSON)
    users: list[ImportUser] = []
    for entry in parsed:
        if not isinstance(entry, dict) or "id" not in entry or "xp" not in entry:
            raise SlashError(ErrorKind.JSON)
        users.append(ImportUser(id=_parse_id(entry["id"]), xp=_parse_xp(entry["xp"])))
    return users


def export_json(users: Iterable[ImportUser]) -> bytes:
    """Return users as pretty-printed JSON, readable by ``parse_import``."""
    return json.dumps([user.to_dict() for user in users], indent=2).encode("utf-8")


def import_summary(user_count: int, seconds: float) -> str:
    """Return the message sent after an import finishes."""
    return f"Imported XP data for {user_count} users in {seconds:.2f} seconds!"


def reset_confirmed(confirmation: str) -> bool:
    """Whether the typed confirmation allows a guild reset."""
    return confirmation == CONFIRMATION_STRING