import pytest

from xpslash.config_checks import (
    DEFAULT_MAX_XP_PER_MESSAGE,
    DEFAULT_MIN_XP_PER_MESSAGE,
    EmojiBool,
    GuildConfigError,
    check_level_up_channel,
    check_level_up_message,
    perms_report,
    safecast_to_i16,
    validate_xp_range,
)
from xpslash.errors import ErrorKind, SlashError
from xpslash.permissions import CanAddRole
from xpslash.schema import ChannelType


def test_validate_defaults():
    assert validate_xp_range(None, None) == (15, 25)
    assert validate_xp_range(DEFAULT_MAX_XP_PER_MESSAGE, None) == (
        DEFAULT_MAX_XP_PER_MESSAGE,
        DEFAULT_MAX_XP_PER_MESSAGE,
    )


def test_validate_min_above_max():
    with pytest.raises(GuildConfigError) as info:
        validate_xp_range(30, 20)
    assert str(info.value) == (
        "The selected minimum XP value of 30 is more than the selected maximum of 20"
    )
    with pytest.raises(GuildConfigError) as info:
        validate_xp_range(None, DEFAULT_MIN_XP_PER_MESSAGE - 1)
    assert info.value.min == DEFAULT_MIN_XP_PER_MESSAGE


def test_safecast():
    assert safecast_to_i16(None) is None
    assert safecast_to_i16(32767) == 32767
    assert safecast_to_i16(-32768) == -32768
    with pytest.raises(SlashError) as info:
        safecast_to_i16(32768)
    assert info.value.kind is ErrorKind.INVALID_INT


def test_level_up_message_ok():
    assert check_level_up_message("{user_mention} reached {level}!") == ["user_mention", "level"]
    assert check_level_up_message(None) == []
    assert check_level_up_message("plain \\{text}") == []


def test_level_up_message_unknown_variable():
    with pytest.raises(SlashError) as info:
        check_level_up_message("hello {nobody}")
    assert info.value.kind is ErrorKind.UNKNOWN_INTERPOLATION_VARIABLE
    assert str(info.value) == "Unknown variable `nobody` used in level-up message!"


def test_level_up_message_errors():
    with pytest.raises(SlashError) as info:
        check_level_up_message("x" * 513)
    assert info.value.kind is ErrorKind.LEVEL_UP_MESSAGE_TOO_LONG
    with pytest.raises(SlashError) as info:
        check_level_up_message("broken {level")
    assert info.value.kind is ErrorKind.TEMPLATE


def test_level_up_channel():
    assert check_level_up_channel(ChannelType.GUILD_TEXT) is ChannelType.GUILD_TEXT
    assert check_level_up_channel(None) is None
    with pytest.raises(SlashError) as info:
        check_level_up_channel(ChannelType.GUILD_VOICE)
    assert info.value.kind is ErrorKind.LEVEL_UP_CHANNEL_MUST_BE_TEXT


def test_emoji_bool():
    assert str(EmojiBool(True)) == "✅"
    assert str(EmojiBool(False)) == "❎"


def test_perms_report():
    assert perms_report(CanAddRole.YES, None) == (
        "Can add roles: ✅\nCan message in level up channel: ✅"
    )
    report = perms_report(CanAddRole.ROLE_IS_MANAGED, False)
    assert report.startswith("Can add roles: ⚠️ That role is managed by another bot.")
    assert report.endswith("❎")