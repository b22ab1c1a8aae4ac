from xpslash.manage_defs import CONFIRMATION_STRING, manage_command
from xpslash.schema import OptionType, Permissions, validate_command


def test_metadata():
    command = manage_command()
    assert command.name == "manage"
    assert command.default_member_permissions == Permissions.ADMINISTRATOR
    assert [option.name for option in command.options] == ["reset", "import", "export"]


def test_reset_description_quotes_confirmation():
    (confirm,) = manage_command().find_option("reset").options
    assert confirm.required is True
    assert f'"{CONFIRMATION_STRING}"' in confirm.description


def test_import_takes_attachment_first():
    levels, overwrite = manage_command().find_option("import").options
    assert levels.kind == OptionType.ATTACHMENT
    assert levels.required is True
    assert overwrite.kind == OptionType.BOOLEAN
    assert overwrite.required is False


def test_validates():
    command = manage_command()
    assert validate_command(command) is command