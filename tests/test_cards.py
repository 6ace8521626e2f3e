"""
Tests for card rendering.
"""

import discord

from bookbot import settings
from bookbot.cards import (
    MAX_FIELD_VALUE_LENGTH,
    MAX_TITLE_LENGTH,
    NO_PLOT,
    help_card,
    plot_summary,
    recommend_card,
    search_card,
)
from bookbot.models import BookResult, NO_DESCRIPTION, UNKNOWN_AUTHOR

from doubles import make_volume


def test_plot_summary_first_sentence():
    text = "Paul travels to Arrakis. He meets the Fremen. Spice flows."
    assert plot_summary(text) == "Paul travels to Arrakis."


def test_plot_summary_without_period():
    assert plot_summary("A desert planet") == "A desert planet."


def test_plot_summary_missing():
    assert plot_summary(None) == NO_PLOT
    assert plot_summary("") == NO_PLOT


def test_help_card_lists_four_commands():
    card = help_card()

    assert card.title == "Available Commands"
    assert [f.name for f in card.fields] == [
        "!search <book title>",
        "!recommend <author>",
        "!ping",
        "!help",
    ]
    assert card.color == 0x0099FF


class TestBookCards:
    """Test cases for search and recommendation cards."""

    def test_search_card(self):
        book = BookResult.model_validate(make_volume(
            authors=["Frank Herbert"],
            description="Set on the desert planet Arrakis.",
            thumbnail="http://books.google.com/thumb.jpg",
        ))

        card = search_card(book)

        assert card.title == "Dune"
        assert card.author == "Frank Herbert"
        assert card.description == "Set on the desert planet Arrakis."
        assert card.url == "https://books.google.com/books?id=dune"
        assert card.thumbnail == "http://books.google.com/thumb.jpg"
        assert card.footer == settings.FOOTER_TEXT
        assert card.fields == []

    def test_search_card_fallbacks(self):
        book = BookResult.model_validate(make_volume(authors=None, description=None))

        card = search_card(book)

        assert card.author == UNKNOWN_AUTHOR
        assert card.description == NO_DESCRIPTION
        assert card.thumbnail is None

    def test_recommend_card_plot(self):
        book = BookResult.model_validate(make_volume(
            title="Children of Dune",
            authors=["Frank Herbert"],
            description="The twins inherit the throne. Leto changes.",
        ))

        card = recommend_card(book)

        assert card.title == "Children of Dune"
        assert len(card.fields) == 1
        assert card.fields[0].name == "Plot"
        assert card.fields[0].value == "The twins inherit the throne."

    def test_recommend_card_without_description(self):
        book = BookResult.model_validate(make_volume(authors=["Frank Herbert"]))

        card = recommend_card(book)

        assert card.description == NO_DESCRIPTION
        assert card.fields[0].value == NO_PLOT

    def test_long_title_and_author_are_truncated(self):
        book = BookResult.model_validate(make_volume(
            title="T" * 300,
            authors=["A" * 200, "B" * 200],
        ))

        card = search_card(book)

        assert len(card.title) == MAX_TITLE_LENGTH
        assert len(card.author) == MAX_TITLE_LENGTH
        assert card.title.startswith("T" * 255)

    def test_long_plot_is_truncated(self):
        book = BookResult.model_validate(make_volume(description="x" * 5000))

        card = recommend_card(book)

        assert len(card.fields[0].value) == MAX_FIELD_VALUE_LENGTH
        assert len(card.description) <= 4096


class TestEmbedConversion:
    """Test cases for turning cards into Discord embeds."""

    def test_to_embed(self):
        book = BookResult.model_validate(make_volume(
            authors=["Frank Herbert"],
            description="Spice. Sand.",
            thumbnail="http://books.google.com/thumb.jpg",
        ))

        embed = recommend_card(book).to_embed()

        assert isinstance(embed, discord.Embed)
        assert embed.title == "Dune"
        assert embed.url == "https://books.google.com/books?id=dune"
        assert embed.author.name == "Frank Herbert"
        assert embed.thumbnail.url == "http://books.google.com/thumb.jpg"
        assert embed.footer.text == "Powered by Google Books API"
        assert embed.color.value == 0x0099FF
        assert [(f.name, f.value) for f in embed.fields] == [("Plot", "Spice.")]

    def test_to_embed_without_thumbnail(self):
        book = BookResult.model_validate(make_volume(authors=["Frank Herbert"]))

        embed = search_card(book).to_embed()

        assert embed.thumbnail.url is None
