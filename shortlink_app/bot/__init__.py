"""
Chat bot front-end.

Only the handler is imported here; the Discord client lives in
bot.client so the handler works without discord.py installed.
"""

from .handler import ShortenCommandHandler

__all__ = [
    "ShortenCommandHandler",
]
