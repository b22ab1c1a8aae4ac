"""Personal data export and deletion confirmation."""

from __future__ import annotations

import csv
import io
from typing import Iterable

DELETED_MESSAGE = "All data wiped. Thank you for using experienced."
MISMATCH_MESSAGE = "Please make sure the username you entered is correct!"


def levels_csv(records: Iterable[tuple[int, int]]) -> bytes:
    """Return CSV of ``(guild, xp)`` records with a header; empty bytes if none."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    wrote_header = False
    for guild, xp in records:
        if not wrote_header:
            writer.writerow(["guild", "xp"])
            wrote_header = True
        writer.writerow([guild, xp])
    return buffer.getvalue().encode("utf-8")


def deletion_message(requested_id: int, invoker_id: int) -> str:
    """Return the reply to a deletion request; data is deleted only when the ids match."""
    if requested_id == invoker_id:
        return DELETED_MESSAGE
    return MISMATCH_MESSAGE