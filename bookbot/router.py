"""
Command routing: classify inbound chat messages and answer them.
"""

import asyncio
import logging
import random
from typing import Callable, Optional, Sequence, Tuple

from .books_api import BookSearchError, GoogleBooksClient
from .cards import help_card, recommend_card, search_card
from .models import BookResult, Command

logger = logging.getLogger(__name__)

# Reply texts
SEARCH_PROMPT = "Please provide a book title to search for."
SEARCH_NO_RESULTS = "No books found for that title."
SEARCH_ERROR = "There was an error fetching book data. Please try again later."
RECOMMEND_PROMPT = "Please provide an author name for recommendations."
RECOMMEND_NO_RESULTS = "No recommendations found for that author."
RECOMMEND_ERROR = "There was an error fetching the recommendations. Please try again later."
PING_PENDING = "Pinging..."
PING_RESULT = "Pong! Response time: {ms}ms"

Picker = Callable[[Sequence[BookResult]], BookResult]


def classify(text: str) -> Tuple[Optional[Command], str]:
    """
    Match a message against the known commands.

    Help and Ping must match the whole message; Search and Recommend match on
    the leading whitespace-delimited token and take the rest as argument.

    Args:
        text: Raw message content

    Returns:
        The matched command (or None) and the space-joined argument text
    """
    if text == Command.HELP.value:
        return Command.HELP, ""

    tokens = text.split()
    if tokens and tokens[0] in (Command.SEARCH.value, Command.RECOMMEND.value):
        return Command(tokens[0]), " ".join(tokens[1:])

    if text == Command.PING.value:
        return Command.PING, ""

    return None, ""


def response_time_ms(message, reply) -> int:
    """Milliseconds between a message and our reply to it, never negative."""
    elapsed = reply.created_at - message.created_at
    return max(0, round(elapsed.total_seconds() * 1000))


class CommandRouter:
    """
    Dispatches chat messages to the command handlers.

    The router is stateless between messages; the book client and the picker
    are injected once at construction.
    """

    def __init__(self, books: Optional[GoogleBooksClient] = None, pick: Picker = random.choice):
        self.books = books or GoogleBooksClient()
        self.pick = pick

    async def handle(self, message) -> Optional[Command]:
        """
        Answer a single inbound message.

        Args:
            message: A ``discord.Message`` (or anything with ``content``,
                ``author.bot``, ``channel`` and ``created_at``)

        Returns:
            The command that was handled, or None when the message was ignored
        """
        if message.author.bot:
            return None

        command, argument = classify(message.content)
        if command is Command.HELP:
            await message.channel.send(embed=help_card().to_embed())
        elif command is Command.SEARCH:
            await self.search(message.channel, argument)
        elif command is Command.RECOMMEND:
            await self.recommend(message.channel, argument)
        elif command is Command.PING:
            await self.ping(message)
        return command

    async def search(self, channel, title: str) -> None:
        if not title:
            await channel.send(SEARCH_PROMPT)
            return

        try:
            books = await asyncio.to_thread(self.books.search_by_title, title)
        except BookSearchError as e:
            logger.error(f"Error fetching book data for {title!r}: {e}")
            await channel.send(SEARCH_ERROR)
            return

        if not books:
            await channel.send(SEARCH_NO_RESULTS)
            return
        await channel.send(embed=search_card(books[0]).to_embed())

    async def recommend(self, channel, author: str) -> None:
        if not author:
            await channel.send(RECOMMEND_PROMPT)
            return

        try:
            books = await asyncio.to_thread(self.books.search_by_author, author)
        except BookSearchError as e:
            logger.error(f"Error fetching recommendations for {author!r}: {e}")
            await channel.send(RECOMMEND_ERROR)
            return

        if not books:
            await channel.send(RECOMMEND_NO_RESULTS)
            return
        await channel.send(embed=recommend_card(self.pick(books)).to_embed())

    async def ping(self, message) -> None:
        reply = await message.channel.send(PING_PENDING)
        await reply.edit(content=PING_RESULT.format(ms=response_time_ms(message, reply)))
