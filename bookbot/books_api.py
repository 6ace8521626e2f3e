"""
Google Books client used by the command handlers.
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from . import settings
from .models import BookResult

logger = logging.getLogger(__name__)


class BookSearchError(Exception):
    """Raised when the book-search API cannot be reached or answers with an error."""


class GoogleBooksClient:
    """
    Thin wrapper around the Google Books ``volumes`` endpoint.

    A single ``requests.Session`` is reused for all calls so connections are
    pooled. Calls are blocking; async callers should run them in a thread.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.GOOGLE_API_KEY
        self.base_url = base_url or settings.GOOGLE_BOOKS_API_URL
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT
        self.session = session or requests.Session()

    def search_by_title(self, title: str) -> List[BookResult]:
        """
        Search volumes by free-text title.

        Args:
            title: The title (or any free text) to search for

        Returns:
            Matching volumes in API order, possibly empty
        """
        return self._query({"q": title})

    def search_by_author(
        self, author: str, max_results: int = settings.RECOMMEND_MAX_RESULTS
    ) -> List[BookResult]:
        """
        Search volumes written by the given author.

        Args:
            author: Author name, passed through the ``inauthor:`` filter
            max_results: Upper bound on the number of volumes returned

        Returns:
            Matching volumes, possibly empty
        """
        return self._query({"q": f"inauthor:{author}", "maxResults": max_results})

    def _query(self, params: Dict[str, Any]) -> List[BookResult]:
        if self.api_key:
            params = {**params, "key": self.api_key}

        logger.debug(f"Querying Google Books with q={params['q']!r}")
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise BookSearchError(f"Google Books request failed: {e}") from e
        except ValueError as e:
            raise BookSearchError(f"Google Books returned invalid JSON: {e}") from e

        items = data.get("items") if isinstance(data, dict) else None
        if not isinstance(items, list):
            return []
        return _parse_items(items)


def _parse_items(items: List[Any]) -> List[BookResult]:
    """
    Validate volume records one by one, skipping the unreadable ones.

    Raises:
        BookSearchError: If records were returned but none could be read
    """
    books = []
    for item in items:
        try:
            books.append(BookResult.model_validate(item))
        except ValidationError as e:
            logger.warning(f"Skipping unreadable Google Books record: {e}")

    if items and not books:
        raise BookSearchError("Google Books returned no readable records")
    return books
