"""Text for role reward commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class RewardRole:
    """A role granted on reaching a level."""

    id: int
    requirement: int


def format_reward_added(role_id: int, level: int) -> str:
    """Return the confirmation for a newly added reward."""
    return f"Added role reward <@&{role_id}> at level {level}!"


def format_rewards_deleted(count: int) -> str:
    """Return the confirmation for deleted rewards."""
    pluralizer = "" if count == 1 else "s"
    return f"Deleted {count} role reward{pluralizer}."


def format_reward_list(rewards: Iterable[RewardRole]) -> str:
    """List rewards ordered by level requirement, one per line."""
    ordered = sorted(rewards, key=lambda role: role.requirement)
    if not ordered:
        return "No role rewards set for this server"
    return "".join(
        f"Role reward <@&{role.id}> at level {role.requirement}\n" for role in ordered
    )