"""Permission checks against an in-memory view of guilds, roles and channels."""

from __future__ import annotations

import enum
import functools
import logging
import operator
from dataclasses import dataclass, field
from typing import Sequence

from xpslash.schema import Permissions

logger = logging.getLogger(__name__)

ALL_PERMISSIONS = Permissions(functools.reduce(operator.or_, (p.value for p in Permissions), 0))


class CanAddRole(enum.Enum):
    """Outcome of checking whether the bot may hand out a set of roles."""

    YES = "yes"
    NO_MANAGE_ROLES = "no_manage_roles"
    HIGHEST_ROLE_IS_LOWER_ROLE_THAN_TARGET = "highest_role_is_lower_role_than_target"
    ROLE_IS_MANAGED = "role_is_managed"

    def can_update_roles(self) -> bool:
        """Whether roles can be updated at all."""
        return self is CanAddRole.YES


class PermissionCheckError(Exception):
    """Raised when the cache lacks what a permission check needs."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    @classmethod
    def _unknown_role(cls, role_id: int) -> PermissionCheckError:
        return cls("unknown_role", f"Unknown role: <@&{role_id}>")

    @classmethod
    def _root(cls) -> PermissionCheckError:
        return cls("cache_root", "Could not load permissions")

    @classmethod
    def _channel(cls) -> PermissionCheckError:
        return cls("cache_channel", "Could not load channels")


@dataclass(frozen=True)
class RoleInfo:
    """A cached role."""

    id: int
    position: int
    managed: bool = False
    permissions: Permissions = Permissions(0)


@dataclass
class PermissionCache:
    """Cached guild state used to compute a member's permissions.

    ``members`` maps ``(guild_id, user_id)`` to the member's role ids; the
    everyone role of a guild shares the guild's id. ``channels`` maps a
    channel id to its guild id, and ``overwrites`` maps a channel id to
    ``{target_id: (allow, deny)}`` where the target is a role or member id.
    """

    roles: dict[int, RoleInfo] = field(default_factory=dict)
    guild_owners: dict[int, int] = field(default_factory=dict)
    members: dict[tuple[int, int], tuple[int, ...]] = field(default_factory=dict)
    channels: dict[int, int] = field(default_factory=dict)
    overwrites: dict[int, dict[int, tuple[Permissions, Permissions]]] = field(
        default_factory=dict
    )

    def root_permissions(self, user_id: int, guild_id: int) -> Permissions:
        """Return the guild-wide permissions of a member."""
        owner = self.guild_owners.get(guild_id)
        if owner is None:
            raise PermissionCheckError._root()
        if owner == user_id:
            return ALL_PERMISSIONS
        member_roles = self.members.get((guild_id, user_id))
        if member_roles is None:
            raise PermissionCheckError._root()
        everyone = self.roles.get(guild_id)
        perms = Permissions(everyone.permissions) if everyone else Permissions(0)
        for role_id in member_roles:
            role = self.roles.get(role_id)
            if role is None:
                raise PermissionCheckError._unknown_role(role_id)
            perms |= role.permissions
        if Permissions.ADMINISTRATOR in perms:
            return ALL_PERMISSIONS
        return Permissions(perms)

    def channel_permissions(self, user_id: int, channel_id: int) -> Permissions:
        """Return a member's permissions in a channel after overwrites."""
        guild_id = self.channels.get(channel_id)
        if guild_id is None:
            raise PermissionCheckError._channel()
        try:
            perms = self.root_permissions(user_id, guild_id)
        except PermissionCheckError as exc:
            raise PermissionCheckError._channel() from exc
        if Permissions.ADMINISTRATOR in perms:
            return perms
        overwrites = self.overwrites.get(channel_id, {})
        member_roles = self.members.get((guild_id, user_id), ())

        if guild_id in overwrites:
            allow, deny = overwrites[guild_id]
            perms = (perms & ~deny) | allow

        role_allow = Permissions(0)
        role_deny = Permissions(0)
        for role_id in member_roles:
            if role_id in overwrites:
                allow, deny = overwrites[role_id]
                role_allow |= allow
                role_deny |= deny
        perms = (perms & ~role_deny) | role_allow

        if user_id in overwrites:
            allow, deny = overwrites[user_id]
            perms = (perms & ~deny) | allow

        if Permissions.VIEW_CHANNEL not in perms:
            return Permissions(0)
        return Permissions(perms)

    def member_highest_role(self, guild_id: int, user_id: int) -> int | None:
        """Return the id of the member's highest cached role, if any."""
        member_roles = self.members.get((guild_id, user_id), ())
        known = [self.roles[role_id] for role_id in member_roles if role_id in self.roles]
        if not known:
            return None
        return max(known, key=lambda role: (role.position, -role.id)).id

    def role(self, role_id: int) -> RoleInfo | None:
        """Return the cached role with this id, if present."""
        return self.roles.get(role_id)


def can_manage_roles(
    cache: PermissionCache, bot_id: int, guild_id: int, targets: Sequence[int]
) -> CanAddRole:
    """Check whether the bot can assign every role in ``targets``."""
    if not targets:
        return CanAddRole.YES

    if Permissions.MANAGE_ROLES not in cache.root_permissions(bot_id, guild_id):
        logger.debug("No permissions to add role to any user in guild %s", guild_id)
        return CanAddRole.NO_MANAGE_ROLES

    highest_role = cache.member_highest_role(guild_id, bot_id)
    if highest_role is None:
        raise PermissionCheckError(
            "no_highest_role_for_self", "Highest known role for self was not found in cache!"
        )
    own_role = cache.role(highest_role)
    if own_role is None:
        raise PermissionCheckError(
            "unknown_position_for_own_highest_role", "Got unknown role for own highest role!"
        )
    my_position = own_role.position

    max_position: int | None = None
    max_role = targets[0]
    for role_id in targets:
        role = cache.role(role_id)
        if role is None:
            raise PermissionCheckError(
                "no_target_role_in_cache", "Target role was not found in cache!"
            )
        if role.managed:
            return CanAddRole.ROLE_IS_MANAGED
        if max_position is None or role.position > max_position:
            max_position = role.position
            max_role = role.id

    assert max_position is not None
    if my_position > max_position or max_role < bot_id:
        return CanAddRole.YES
    return CanAddRole.HIGHEST_ROLE_IS_LOWER_ROLE_THAN_TARGET


def can_create_message(cache: PermissionCache, bot_id: int, channel_id: int) -> bool:
    """Whether the bot may send messages in a channel."""
    perms = cache.channel_permissions(bot_id, channel_id)
    logger.debug("Permissions %d in channel %s", int(perms), channel_id)
    return Permissions.SEND_MESSAGES in perms


def snowflake_to_timestamp(snowflake: int) -> int:
    """Convert a snowflake to seconds since the platform epoch."""
    if snowflake < 0:
        raise ValueError("snowflakes are never negative")
    return (snowflake >> 22) // 1000