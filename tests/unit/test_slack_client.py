import pytest
from unittest.mock import MagicMock
from slack_sdk.errors import SlackApiError

from superhuman_fm.schemas.preferences import ChannelRef
from superhuman_fm.slack.client import SlackClientWrapper


def test_list_member_channels_request_and_order():
    """
    WHY: Preselection relies on the user's channels in the order Slack returns them.
    HOW: Mock `users_conversations` and call `list_member_channels`.
    EXPECTED: Public and private, non-archived channels requested with limit 100; order preserved.
    """
    client = MagicMock()
    client.users_conversations.return_value = {
        "ok": True,
        "channels": [{"id": "C2", "name": "all-b", "is_private": False}, {"id": "C1", "name": "all-a"}],
    }
    wrapper = SlackClientWrapper(client)

    channels = wrapper.list_member_channels("U1")

    client.users_conversations.assert_called_once_with(
        user="U1",
        types="public_channel,private_channel",
        exclude_archived=True,
        limit=100
    )
    assert channels == [ChannelRef(id="C2", name="all-b"), ChannelRef(id="C1", name="all-a")]


def test_list_member_channels_empty_response():
    client = MagicMock()
    client.users_conversations.return_value = {"ok": True}
    assert SlackClientWrapper(client).list_member_channels("U1") == []


def test_get_channel():
    client = MagicMock()
    client.conversations_info.return_value = {"ok": True, "channel": {"id": "C1", "name": "all-eng"}}
    assert SlackClientWrapper(client).get_channel("C1") == ChannelRef(id="C1", name="all-eng")
    client.conversations_info.assert_called_once_with(channel="C1")


def test_post_payload_passes_through():
    client = MagicMock()
    payload = {"channel": "U1", "text": "hi"}
    SlackClientWrapper(client).post_payload(payload)
    client.chat_postMessage.assert_called_once_with(channel="U1", text="hi")


def test_post_payload_is_not_retried():
    """
    WHY: Dispatch failures are reported, never retried by the app.
    HOW: Make `chat_postMessage` raise a rate limit error.
    EXPECTED: The error propagates after a single call.
    """
    client = MagicMock()
    client.chat_postMessage.side_effect = SlackApiError("ratelimited", {"ok": False, "error": "ratelimited"})

    with pytest.raises(SlackApiError):
        SlackClientWrapper(client).post_payload({"channel": "U1", "text": "hi"})
    assert client.chat_postMessage.call_count == 1


def test_views_calls():
    client = MagicMock()
    client.views_publish.return_value = {"ok": True}
    wrapper = SlackClientWrapper(client)

    assert wrapper.publish_home("U1", {"type": "home"}) is True
    wrapper.open_view("T1", {"type": "modal"})

    client.views_publish.assert_called_once_with(user_id="U1", view={"type": "home"})
    client.views_open.assert_called_once_with(trigger_id="T1", view={"type": "modal"})


def test_default_client_uses_bot_token():
    from superhuman_fm.config import get_settings
    wrapper = SlackClientWrapper()
    assert wrapper.client.token == get_settings().SLACK_BOT_TOKEN
