"""
Pydantic models for the Bookbot application.
"""

from enum import Enum
from typing import List, Optional

import discord
from pydantic import BaseModel, Field

from . import settings

UNKNOWN_AUTHOR = "Unknown Author"
NO_DESCRIPTION = "No description available."
UNTITLED = "Untitled"


class Command(str, Enum):
    """Commands understood by the bot, keyed by their literal trigger."""

    HELP = f"{settings.COMMAND_PREFIX}help"
    SEARCH = f"{settings.COMMAND_PREFIX}search"
    RECOMMEND = f"{settings.COMMAND_PREFIX}recommend"
    PING = f"{settings.COMMAND_PREFIX}ping"


class ImageLinks(BaseModel):
    """Cover images attached to a volume."""

    thumbnail: Optional[str] = None
    smallThumbnail: Optional[str] = None


class VolumeInfo(BaseModel):
    """The subset of a Google Books ``volumeInfo`` record the bot reads."""

    title: Optional[str] = None
    authors: Optional[List[str]] = None
    description: Optional[str] = None
    imageLinks: Optional[ImageLinks] = None
    infoLink: Optional[str] = None


class BookResult(BaseModel):
    """
    A single volume returned by the book-search API.

    Every nested field is optional upstream. The properties below normalise
    them and apply the title and author fallbacks.
    """

    id: Optional[str] = None
    volumeInfo: VolumeInfo = Field(default_factory=VolumeInfo)

    @property
    def title(self) -> str:
        return self.volumeInfo.title or UNTITLED

    @property
    def authors(self) -> str:
        names = [a for a in self.volumeInfo.authors or [] if a]
        return ", ".join(names) or UNKNOWN_AUTHOR

    @property
    def description(self) -> Optional[str]:
        """Raw description, or ``None`` when the API sent nothing usable."""
        text = (self.volumeInfo.description or "").strip()
        return text or None

    @property
    def thumbnail(self) -> Optional[str]:
        links = self.volumeInfo.imageLinks
        return links.thumbnail if links else None

    @property
    def info_link(self) -> Optional[str]:
        return self.volumeInfo.infoLink


class CardField(BaseModel):
    name: str
    value: str
    inline: bool = False


class Card(BaseModel):
    """
    A structured reply, rendered by Discord as an embed.

    Kept independent of discord.py so cards can also be printed by the CLI.
    """

    title: str
    url: Optional[str] = None
    color: int = settings.EMBED_COLOR
    author: Optional[str] = None
    description: Optional[str] = None
    fields: List[CardField] = Field(default_factory=list)
    thumbnail: Optional[str] = None
    footer: Optional[str] = None

    def to_embed(self) -> discord.Embed:
        """Convert the card into a ``discord.Embed``."""
        embed = discord.Embed(
            title=self.title,
            url=self.url,
            description=self.description,
            color=self.color,
        )
        if self.author:
            embed.set_author(name=self.author)
        for field in self.fields:
            embed.add_field(name=field.name, value=field.value, inline=field.inline)
        if self.thumbnail:
            embed.set_thumbnail(url=self.thumbnail)
        if self.footer:
            embed.set_footer(text=self.footer)
        return embed
