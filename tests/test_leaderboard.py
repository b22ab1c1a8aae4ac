import pytest

from xpslash.errors import ErrorKind, SlashError
from xpslash.leaderboard import (
    USERS_PER_PAGE,
    ButtonStyle,
    LeaderboardEntry,
    component_target,
    control_options,
    jump_modal,
    page_for_rank,
    parse_jump_input,
    render_leaderboard,
)
from xpslash.response import InteractionResponseType, MessageFlags


def entries(count):
    return [LeaderboardEntry(id=1000 + n, level=n) for n in range(count)]


def test_first_page_controls():
    buttons = control_options(0, False)
    assert len(buttons) == 5
    assert buttons[0].label == "Page 1"
    assert buttons[0].disabled
    assert buttons[1].disabled and buttons[2].disabled and buttons[3].disabled
    assert not buttons[4].disabled
    assert buttons[4].style is ButtonStyle.DANGER


def test_buttons_point_at_neighbour_pages():
    zpage = 3
    buttons = control_options(zpage, True)
    assert component_target(buttons[1].custom_id) == zpage - 1
    assert component_target(buttons[3].custom_id) == zpage + 1
    assert not buttons[1].disabled and not buttons[3].disabled


def test_render_private_page_with_more():
    page = render_leaderboard(entries(USERS_PER_PAGE + 1), 0, None)
    lines = page.content.splitlines()
    assert lines[0] == "### Leaderboard"
    assert len(lines) == USERS_PER_PAGE + 1
    assert lines[1] == "**#1.** <@1000> - Level 0"
    assert page.flags == MessageFlags.EPHEMERAL
    assert len(page.buttons) == 4
    assert not page.buttons[3].disabled
    assert all(b.custom_id != "delete_leaderboard" for b in page.buttons)


def test_render_public_page():
    page = render_leaderboard(entries(3), 2, True)
    assert page.flags == MessageFlags(0)
    assert len(page.buttons) == 5
    assert page.buttons[3].disabled
    assert "**#21.** <@1000>" in page.content
    data = page.to_data()
    assert data["content"] == page.content
    assert len(data["components"][0]["components"]) == 5


def test_render_errors():
    with pytest.raises(SlashError) as info:
        render_leaderboard(entries(2), -1, None)
    assert info.value.kind is ErrorKind.PAGE_DOES_NOT_EXIST
    with pytest.raises(SlashError) as info:
        render_leaderboard([], 0, None)
    assert info.value.kind is ErrorKind.NO_USERS_FOR_PAGE
    with pytest.raises(SlashError) as info:
        render_leaderboard([], 4, None)
    assert info.value.kind is ErrorKind.NO_RANKS_YET


def test_page_for_rank():
    assert page_for_rank(1) == 0
    assert page_for_rank(USERS_PER_PAGE * 3 + 1) == 3


def test_parse_jump_input():
    assert parse_jump_input("5") == 4
    with pytest.raises(SlashError) as info:
        parse_jump_input("five")
    assert info.value.kind is ErrorKind.STR_TO_INT
    with pytest.raises(SlashError) as info:
        parse_jump_input(None)
    assert info.value.kind is ErrorKind.NO_DESTINATION_IN_COMPONENT


def test_jump_modal():
    modal = jump_modal()
    assert modal["type"] == InteractionResponseType.MODAL
    assert modal["data"]["custom_id"] == "jump_modal"
    field = modal["data"]["components"][0]["components"][0]
    assert field["custom_id"] == "jump_modal_input"
    assert field["max_length"] == 8


def test_component_target():
    assert component_target("jump_modal") == "jump_modal"
    assert component_target("delete_leaderboard") == "delete_leaderboard"
    assert component_target("-1") == -1
    with pytest.raises(SlashError) as info:
        component_target("page_indicator")
    assert info.value.kind is ErrorKind.STR_TO_INT