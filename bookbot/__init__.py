"""
Bookbot: a Discord bot that looks up books on the Google Books API.

This package classifies chat commands (!help, !search, !recommend, !ping),
queries Google Books for search and recommendation requests, and replies with
rich embeds. It can also be driven from the terminal through the ``bookbot`` CLI.
"""

from .books_api import BookSearchError, GoogleBooksClient
from .models import BookResult, Card, Command
from .router import CommandRouter, classify

__version__ = "1.0.0"
