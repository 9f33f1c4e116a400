"""
Chat command handling, independent of any chat library.

The handler turns the text of an inbound message into the text of the
reply (or None when the message is not addressed to us). Failures are
reported back to the user as a message; they never escape into the
gateway client.
"""

import logging
from typing import Optional

from shortlink_app.services.url_service import URLService


logger = logging.getLogger(__name__)


class ShortenCommandHandler:
    """Handles `!shorten <URL>` style commands"""

    def __init__(self, url_service: URLService, prefix: str = "!shorten "):
        self.url_service = url_service
        self.prefix = prefix
        # "!shorten" on its own should still get the usage hint
        self._bare_command = prefix.strip()

    @property
    def usage(self) -> str:
        return f"Please provide a URL to shorten. Usage: `{self._bare_command} <URL>`"

    def is_command(self, content: str) -> bool:
        stripped = content.strip()
        return stripped.startswith(self.prefix) or stripped == self._bare_command

    def handle(self, content: str) -> Optional[str]:
        """
        Build the reply for one message.

        Returns:
            Reply text, or None if the message is not a command
        """
        if not self.is_command(content):
            return None

        long_url = content.strip()[len(self._bare_command):].strip()
        if not long_url:
            return self.usage

        try:
            short_url = self.url_service.shorten(long_url)
        except Exception:
            logger.exception("Error shortening URL from chat command")
            return "❌ Failed to shorten URL."

        return f"🔗 Short URL: {short_url}"
