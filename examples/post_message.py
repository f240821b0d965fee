#!/usr/bin/env python3
"""
Post a message and read channel info.

Usage:
    export SLACK_BOT_TOKEN="xoxb-..."
    python examples/post_message.py C0123456789
"""

import asyncio
import sys

from slack_webapi import ChatPostMessageRequest, SlackClient
from slack_webapi.telemetry import LogLevel, SlackLogger


async def main(channel: str) -> None:
    """Run the example."""
    SlackLogger.configure(level=LogLevel.DEBUG, format="text")

    async with SlackClient() as client:
        # Token comes from SLACK_BOT_TOKEN / SLACK_API_TOKEN
        session = client.open_session()

        info = await session.get("conversations.info", [("channel", channel)])
        if not info.get("ok"):
            print(f"conversations.info failed: {info.get('error')}")
            return
        print(f"Posting to #{info['channel']['name']}")

        resp = await session.chat_post_message(
            ChatPostMessageRequest(channel=channel, text="Hello from slack-webapi")
        )
        print(f"ok={resp.ok} ts={resp.ts} error={resp.error}")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1]))
