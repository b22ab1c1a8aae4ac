"""Autocomplete suggestions for the rank-card edit command."""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from xpslash.card_edit import CUSTOM_CARD_NULL_SENTINEL, ConfigItem

logger = logging.getLogger(__name__)

MAX_CHOICES = 25


@dataclass(frozen=True)
class Choice:
    """One autocomplete suggestion."""

    name: str
    value: str

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form of the choice."""
        return {"name": self.name, "value": self.value}


def choices(focused: str | None, options: Iterable[ConfigItem], nullable: bool) -> list[Choice]:
    """Suggest options whose display name contains the typed text.

    ``focused`` is the text of the focused field, or None when that field
    is not the one being completed.
    """
    if focused is None:
        return []
    output: list[Choice] = []
    if nullable:
        output.append(Choice("None", CUSTOM_CARD_NULL_SENTINEL))
    output.extend(
        Choice(item.display_name, item.internal_name)
        for item in options
        if focused in item.display_name
    )
    return output


def card_choices(
    font: str | None,
    toy_image: str | None,
    card_layout: str | None,
    fonts: Sequence[ConfigItem],
    toys: Sequence[ConfigItem],
    cards: Sequence[ConfigItem],
) -> list[Choice]:
    """Return at most 25 suggestions for the card edit command: fonts, toys, then cards."""
    font_choices = choices(font, fonts, False)
    card_layout_choices = choices(card_layout, cards, False)
    toy_choices = choices(toy_image, toys, True)
    logger.debug(
        "picked choices fonts=%s cards=%s toys=%s", font_choices, card_layout_choices, toy_choices
    )
    chained = itertools.chain(font_choices, toy_choices, card_layout_choices)
    return list(itertools.islice(chained, MAX_CHOICES))