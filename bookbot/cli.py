"""
Command-line interface for Bookbot.
Runs the Discord bot, or answers search/recommend queries straight from a terminal.
"""

import logging
import random
import sys
from typing import List

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from . import settings
from .bot import BookBot
from .books_api import BookSearchError, GoogleBooksClient
from .cards import recommend_card, search_card
from .models import Card
from .router import (
    RECOMMEND_ERROR,
    RECOMMEND_NO_RESULTS,
    SEARCH_ERROR,
    SEARCH_NO_RESULTS,
)

app = typer.Typer(
    name="bookbot",
    help="Discord bot that looks up books on Google Books",
    add_completion=False
)

console = Console()


def render_card(card: Card) -> Panel:
    """Lay out a card as a rich panel."""
    lines = [f"[bold]{escape(card.author)}[/]"] if card.author else []
    if card.description:
        lines.append(escape(card.description))
    for field in card.fields:
        lines.append(f"\n[bold]{escape(field.name)}[/]\n{escape(field.value)}")
    if card.url:
        lines.append(f"\n{escape(card.url)}")
    if card.thumbnail:
        lines.append(f"[dim]Cover: {escape(card.thumbnail)}[/]")

    return Panel(
        "\n".join(lines),
        title=escape(card.title),
        subtitle=card.footer,
        border_style=f"#{card.color:06x}"
    )


def _client() -> GoogleBooksClient:
    try:
        return GoogleBooksClient(api_key=settings.require("GOOGLE_API_KEY"))
    except RuntimeError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)


@app.command()
def run() -> None:
    """
    Start the Discord bot and keep it running until the session ends.
    """
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    try:
        token = settings.require("DISCORD_TOKEN")
        settings.require("GOOGLE_API_KEY")
    except RuntimeError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    BookBot().run(token, log_handler=None)


@app.command()
def search(
    title: List[str] = typer.Argument(
        ...,
        help="Book title to search for"
    )
) -> None:
    """
    Search for a book by its title and print the first result.
    """
    client = _client()

    try:
        books = client.search_by_title(" ".join(title))
    except BookSearchError as e:
        console.print(f"[red]{SEARCH_ERROR}[/]\n[dim]{escape(str(e))}[/]")
        sys.exit(1)

    if not books:
        console.print(f"[yellow]{SEARCH_NO_RESULTS}[/]")
        return
    console.print(render_card(search_card(books[0])))


@app.command()
def recommend(
    author: List[str] = typer.Argument(
        ...,
        help="Author to get a recommendation from"
    )
) -> None:
    """
    Recommend a random book by the given author.
    """
    client = _client()

    try:
        books = client.search_by_author(" ".join(author))
    except BookSearchError as e:
        console.print(f"[red]{RECOMMEND_ERROR}[/]\n[dim]{escape(str(e))}[/]")
        sys.exit(1)

    if not books:
        console.print(f"[yellow]{RECOMMEND_NO_RESULTS}[/]")
        return
    console.print(render_card(recommend_card(random.choice(books))))


if __name__ == "__main__":
    app()
