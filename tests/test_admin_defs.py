from xpslash.admin_defs import admin_command
from xpslash.schema import OptionType, Permissions, validate_command


def _sub_option(sub, name):
    return next(o for o in sub.options if o.name == name)


def test_admin_is_valid():
    cmd = admin_command()
    assert validate_command(cmd) is cmd
    assert cmd.name == "admin"


def test_admin_permissions():
    cmd = admin_command()
    assert cmd.default_member_permissions == Permissions.ADMINISTRATOR
    assert cmd.dm_permission is False


def test_subcommand_order():
    names = [o.name for o in admin_command().options]
    assert names == [
        "leave",
        "resetguild",
        "resetuser",
        "setnick",
        "banguild",
        "pardonguild",
        "guildstats",
        "stats",
        "inspectcooldown",
    ]
    assert all(o.kind == OptionType.SUB_COMMAND for o in admin_command().options)


def test_setnick_name_limits():
    name = _sub_option(admin_command().find_option("setnick"), "name")
    assert (name.min_length, name.max_length) == (1, 32)
    assert name.required is False


def test_banguild_duration_optional_number():
    duration = _sub_option(admin_command().find_option("banguild"), "duration")
    assert duration.kind == OptionType.NUMBER
    assert duration.required is False


def test_user_options_are_users():
    cmd = admin_command()
    assert _sub_option(cmd.find_option("resetuser"), "user").kind == OptionType.USER
    inspect = cmd.find_option("inspectcooldown")
    assert [o.name for o in inspect.options] == ["guild", "user"]
    assert all(o.required for o in inspect.options)


def test_stats_has_no_options():
    assert admin_command().find_option("stats").options == ()