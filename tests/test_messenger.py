from unittest.mock import Mock, patch

import requests

from location_relay.messenger import discord_sender, send_discord_message


@patch("location_relay.messenger.requests.post")
def test_send_message(mock_post):
    mock_post.return_value = Mock(ok=True, status_code=200)

    assert send_discord_message("tok", "42", "hello") is True
    mock_post.assert_called_once_with(
        "https://discord.com/api/v10/channels/42/messages",
        headers={"Authorization": "Bot tok", "Content-Type": "application/json"},
        json={"content": "hello"},
    )


@patch("location_relay.messenger.requests.post")
def test_api_error_returns_false(mock_post):
    mock_post.return_value = Mock(ok=False, status_code=401, text='{"message": "401: Unauthorized"}')

    assert send_discord_message("bad", "42", "hello") is False


@patch("location_relay.messenger.requests.post")
def test_network_error_returns_false(mock_post):
    mock_post.side_effect = requests.ConnectionError("connection refused")

    assert send_discord_message("tok", "42", "hello") is False


@patch("location_relay.messenger.requests.post")
def test_bound_sender_uses_api_base(mock_post):
    mock_post.return_value = Mock(ok=True, status_code=200)
    send = discord_sender("http://discord.test/api")

    assert send("tok", "7", "hi") is True
    assert mock_post.call_args.args[0] == "http://discord.test/api/channels/7/messages"
