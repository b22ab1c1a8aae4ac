import pytest

from xpslash.response import InteractionResponseType, MessageFlags, SlashResponse, embed


def test_new_response_is_empty():
    assert SlashResponse().to_data() == {}


def test_with_embed_text():
    response = SlashResponse.with_embed_text("hello")
    assert response.embeds == [embed("hello")]
    assert response.embeds[0]["description"] == "hello"
    assert response.flags is None


def test_ephemeral_sets_flag_when_unset():
    assert SlashResponse().ephemeral(True).flags == MessageFlags.EPHEMERAL


def test_ephemeral_false_leaves_unset_flags_unset():
    assert SlashResponse().ephemeral(False).flags is None


def test_ephemeral_false_keeps_other_flags():
    start = SlashResponse(flags=MessageFlags.SUPPRESS_EMBEDS | MessageFlags.EPHEMERAL)
    assert start.ephemeral(False).flags == MessageFlags.SUPPRESS_EMBEDS


def test_ephemeral_true_adds_to_existing_flags():
    flags = SlashResponse(flags=MessageFlags.SUPPRESS_EMBEDS).ephemeral(True).flags
    assert MessageFlags.EPHEMERAL in flags
    assert MessageFlags.SUPPRESS_EMBEDS in flags


def test_builders_do_not_mutate_original():
    original = SlashResponse(content="a")
    changed = original.with_changes(content="b", tts=True)
    assert original.content == "a"
    assert (changed.content, changed.tts) == ("b", True)


def test_with_changes_rejects_unknown_field():
    with pytest.raises(TypeError):
        SlashResponse().with_changes(colour="red")


def test_to_data_omits_unset_and_serialises_flags():
    data = SlashResponse(content="hi").ephemeral(True).to_data()
    assert data == {"content": "hi", "flags": int(MessageFlags.EPHEMERAL)}
    assert type(data["flags"]) is int


def test_round_trip_through_data():
    response = SlashResponse(
        content="x",
        custom_id="jump_modal",
        title="t",
        embeds=[embed("e")],
        components=[],
        tts=False,
    ).ephemeral(True)
    assert SlashResponse.from_data(response.to_data()) == response


def test_interaction_response_wraps_data():
    wrapped = SlashResponse(content="hi").to_interaction_response()
    assert wrapped["type"] == InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE
    assert wrapped["data"] == {"content": "hi"}