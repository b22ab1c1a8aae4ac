from xpslash.levels_defs import leaderboard_command, rank_command
from xpslash.schema import OptionType, validate_command


def test_leaderboard_options():
    command = leaderboard_command()
    assert command.name == "leaderboard"
    assert command.dm_permission is False
    assert [option.name for option in command.options] == ["user", "page", "show_off"]
    assert all(not option.required for option in command.options)


def test_leaderboard_page_starts_at_one():
    page = leaderboard_command().find_option("page")
    assert page.kind == OptionType.INTEGER
    assert page.min_value == 1
    assert page.max_value is None


def test_rank_options():
    command = rank_command()
    assert command.name == "rank"
    assert command.find_option("user").kind == OptionType.USER
    assert command.find_option("showoff").kind == OptionType.BOOLEAN


def test_both_validate():
    for command in (leaderboard_command(), rank_command()):
        assert validate_command(command) is command