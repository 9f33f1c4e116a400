"""
Discord bot front-end.

Listens for `!shorten <URL>` messages and answers in the same channel.
Requires DISCORD_BOT_TOKEN and the message content intent.

Run with:
    shortlink-bot
"""

import asyncio
import logging
import sys

import discord

from shortlink_app.bot.handler import ShortenCommandHandler
from shortlink_app.config import settings
from shortlink_app.dependencies import get_url_service
from shortlink_app.logging_config import configure_logging


logger = logging.getLogger(__name__)


class ShortenBot(discord.Client):
    """discord.py client that forwards commands to ShortenCommandHandler"""

    def __init__(self, handler: ShortenCommandHandler, **kwargs):
        intents = discord.Intents.default()
        intents.message_content = True
        super().__init__(intents=intents, **kwargs)
        self.handler = handler

    async def on_ready(self):
        logger.info("Discord bot connected as %s", self.user)

    async def on_message(self, message: discord.Message):
        # Ignore messages from the bot itself
        if message.author == self.user:
            return
        if not self.handler.is_command(message.content):
            return

        # The store does blocking disk I/O; keep it off the event loop
        reply = await asyncio.to_thread(self.handler.handle, message.content)
        if reply is not None:
            await message.channel.send(reply)


def main() -> int:
    configure_logging(settings.log_level)

    token = settings.discord_bot_token
    if not token:
        logger.error("DISCORD_BOT_TOKEN environment variable not set")
        return 1

    handler = ShortenCommandHandler(get_url_service(), prefix=settings.bot_command_prefix)
    bot = ShortenBot(handler)
    bot.run(token, log_handler=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
