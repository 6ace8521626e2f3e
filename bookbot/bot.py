"""
Discord client that feeds gateway messages into the command router.
"""

import logging
from typing import Optional

import discord

from .router import CommandRouter

logger = logging.getLogger(__name__)


def default_intents() -> discord.Intents:
    """Guild and message intents, plus message content so commands can be read."""
    intents = discord.Intents.default()
    intents.guilds = True
    intents.guild_messages = True
    intents.message_content = True
    return intents


class BookBot(discord.Client):
    """Long-lived gateway session owning a single ``CommandRouter``."""

    def __init__(self, router: Optional[CommandRouter] = None, **kwargs):
        kwargs.setdefault("intents", default_intents())
        super().__init__(**kwargs)
        self.router = router or CommandRouter()

    async def on_ready(self) -> None:
        logger.info(f"Logged in as {self.user}!")

    async def on_message(self, message: discord.Message) -> None:
        await self.router.handle(message)
