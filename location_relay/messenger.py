import logging
from typing import Callable

import requests

from location_relay.config import Config

# (token, channel_id, text) -> sent?
MessageSender = Callable[[str, str, str], bool]


def send_discord_message(token, channel_id, text, api_base=Config.DISCORD_API_BASE):
    """
    Post a text message to a Discord channel as a bot.

    :param token: Discord bot token.
    :param channel_id: Destination channel id.
    :param text: Message content.
    :param api_base: Discord REST API root.
    :return: True if Discord accepted the message, False otherwise. Never raises.
    """
    url = f"{api_base}/channels/{channel_id}/messages"
    headers = {
        'Authorization': f"Bot {token}",
        'Content-Type': 'application/json',
    }

    try:
        response = requests.post(url, headers=headers, json={'content': text})
    except requests.RequestException as e:
        logging.error(f"Discord message send error: {e}")
        return False

    if not response.ok:
        logging.error(f"Discord API error: {response.status_code} {response.text}")
    return response.ok


def discord_sender(api_base=Config.DISCORD_API_BASE) -> MessageSender:
    """Bind send_discord_message to an API root, giving the (token, channel_id, text) signature."""
    def send(token, channel_id, text):
        return send_discord_message(token, channel_id, text, api_base=api_base)
    return send
