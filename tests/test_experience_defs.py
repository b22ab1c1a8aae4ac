import pytest

from xpslash.experience_defs import xp_command
from xpslash.schema import OptionType, Permissions, validate_command


def test_xp_valid():
    cmd = xp_command()
    assert validate_command(cmd) is cmd
    assert [o.name for o in cmd.options] == ["add", "remove", "reset", "set"]


def test_xp_permissions():
    cmd = xp_command()
    assert cmd.default_member_permissions == Permissions.MODERATE_MEMBERS
    assert cmd.dm_permission is False


@pytest.mark.parametrize("sub,amount", [("add", "amount"), ("remove", "amount"), ("set", "xp")])
def test_amounts_positive_and_required(sub, amount):
    option = xp_command().find_option(sub)
    assert [o.name for o in option.options] == ["user", amount]
    value = option.options[1]
    assert value.kind == OptionType.INTEGER
    assert value.min_value == 1
    assert value.required is True
    assert option.options[0].kind == OptionType.USER


def test_reset_only_user():
    reset = xp_command().find_option("reset")
    assert [(o.name, o.required) for o in reset.options] == [("user", True)]


def test_xp_wire_format():
    data = xp_command().to_dict()
    assert data["default_member_permissions"] == str(int(Permissions.MODERATE_MEMBERS))
    assert [o["name"] for o in data["options"]] == ["add", "remove", "reset", "set"]