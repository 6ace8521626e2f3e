"""
Rendering of command replies into cards.

Everything here is pure: book records in, ``Card`` models out.
"""

from typing import Optional

from . import settings
from .models import NO_DESCRIPTION, BookResult, Card, CardField, Command

NO_PLOT = "No plot description available."

# Discord rejects embeds that exceed these lengths
MAX_TITLE_LENGTH = 256
MAX_DESCRIPTION_LENGTH = 4096
MAX_FIELD_VALUE_LENGTH = 1024

HELP_ENTRIES = [
    (f"{Command.SEARCH.value} <book title>", "Search for a book by its title."),
    (f"{Command.RECOMMEND.value} <author>", "Get a book recommendation from a specific author."),
    (Command.PING.value, "Check the bot's response time."),
    (Command.HELP.value, "Show this help message."),
]


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 1] + "…"


def plot_summary(description: Optional[str]) -> str:
    """
    Return the description up to and including its first period.

    When the description has no period the whole text is used with a period
    appended. Missing descriptions yield ``NO_PLOT``.
    """
    if not description:
        return NO_PLOT
    return description.split(".", 1)[0] + "."


def help_card() -> Card:
    """Static card listing every supported command."""
    return Card(
        title="Available Commands",
        description="Here are the commands you can use:",
        fields=[CardField(name=name, value=value) for name, value in HELP_ENTRIES],
    )


def _book_card(book: BookResult) -> Card:
    return Card(
        title=_truncate(book.title, MAX_TITLE_LENGTH),
        url=book.info_link,
        author=_truncate(book.authors, MAX_TITLE_LENGTH),
        description=_truncate(book.description or NO_DESCRIPTION, MAX_DESCRIPTION_LENGTH),
        thumbnail=book.thumbnail,
        footer=settings.FOOTER_TEXT,
    )


def search_card(book: BookResult) -> Card:
    """Card for the first result of a title search."""
    return _book_card(book)


def recommend_card(book: BookResult) -> Card:
    """Card for a recommended book, with a one-sentence ``Plot`` field."""
    card = _book_card(book)
    card.fields.append(
        CardField(name="Plot", value=_truncate(plot_summary(book.description), MAX_FIELD_VALUE_LENGTH))
    )
    return card
