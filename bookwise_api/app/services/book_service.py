"""
Business logic for books.

``BookService`` lists, reads, creates, edits and deletes books held in
an ``EntityStore``.  Listing runs a fixed pipeline: text search, genre
filter, optional year sort, join with reviews, optional rating sort
and finally page slicing.  Editing and deleting are restricted to the
user who added the book; deleting a book also deletes its reviews.
"""

import logging
import math
from typing import List, Optional
from urllib.parse import quote

from ..core.config import settings
from ..core.errors import Forbidden, NotFound
from ..core.latency import simulate_delay
from ..core.store import EntityStore
from ..schemas.book import BookCreate, BookPage, BookRead, BookUpdate, BookWithReviews
from ..schemas.review import RatingStats
from .auth_service import AuthService
from .statistics_service import StatisticsService

logger = logging.getLogger(__name__)

YEAR_SORTS = {"year_asc": False, "year_desc": True}
RATING_SORTS = {"rating_asc": False, "rating_desc": True}


def placeholder_cover(title: str, size: str = "400x600") -> str:
    """URL of a generated cover showing the book title."""
    return settings.cover_placeholder_url.format(size=size, text=quote(title, safe=""))


def with_cover(book: BookRead, size: str = "400x600") -> BookRead:
    """Copy of ``book`` with a placeholder cover filled in when it has none."""
    if book.cover_image_url:
        return book.model_copy(deep=True)
    return book.model_copy(update={"cover_image_url": placeholder_cover(book.title, size)}, deep=True)


class BookService:
    """Service for books and their joined review statistics."""

    def __init__(
        self,
        store: EntityStore,
        auth: AuthService,
        latency_ms: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> None:
        self.store = store
        self.auth = auth
        self.latency_ms = latency_ms
        self.page_size = page_size or settings.page_size

    async def list_books(
        self,
        page: int = 1,
        search_term: str = "",
        genre: str = "",
        sort_by: str = "",
    ) -> BookPage:
        """Return one page of books matching the filters.

        ``sort_by`` is one of ``year_asc``, ``year_desc``, ``rating_asc``
        or ``rating_desc``; anything else keeps store order.  Pages are
        1-indexed and a page past the end (or below 1) is empty.
        """
        with self.store.lock:
            books: List[BookRead] = list(self.store.books)

            if search_term:
                needle = search_term.lower()
                books = [b for b in books if needle in b.title.lower() or needle in b.author.lower()]

            if genre:
                books = [b for b in books if b.genre == genre]

            if sort_by in YEAR_SORTS:
                books.sort(key=lambda b: b.year, reverse=YEAR_SORTS[sort_by])

            joined = [
                StatisticsService.join(with_cover(b), self.store.reviews_for_book(b.id))
                for b in books
            ]

        if sort_by in RATING_SORTS:
            joined.sort(key=lambda b: b.average_rating, reverse=RATING_SORTS[sort_by])

        total_pages = math.ceil(len(joined) / self.page_size)
        if page < 1:
            page_items: List[BookWithReviews] = []
        else:
            start = (page - 1) * self.page_size
            page_items = joined[start:start + self.page_size]
        return await simulate_delay(BookPage(books=page_items, total_pages=total_pages), self.latency_ms)

    async def get_book_by_id(self, book_id: str) -> BookWithReviews:
        with self.store.lock:
            book = self.store.find_book(book_id)
            if book is None:
                raise NotFound("Book not found.")
            result = StatisticsService.join(with_cover(book), self.store.reviews_for_book(book_id))
        return await simulate_delay(result, self.latency_ms)

    async def get_rating_stats(self, book_id: str) -> RatingStats:
        """Average, count and star histogram of a book's reviews."""
        with self.store.lock:
            if self.store.find_book(book_id) is None:
                raise NotFound("Book not found.")
            result = StatisticsService.compute_stats(self.store.reviews_for_book(book_id))
        return await simulate_delay(result, self.latency_ms)

    async def add_book(self, data: BookCreate, token: str) -> BookRead:
        """Add a book owned by the token's user.

        Calling this twice with the same data creates two books.
        """
        user_id = self.auth.authorize(token)
        with self.store.lock:
            book = BookRead(
                **data.model_dump(exclude={"cover_image_url"}),
                id=self.store.next_id("books"),
                added_by=user_id,
                cover_image_url=data.cover_image_url or placeholder_cover(data.title),
            )
            self.store.books.insert(0, book)
            result = book.model_copy(deep=True)
        logger.info("User %s added book %s '%s'", user_id, result.id, result.title)
        return await simulate_delay(result, self.latency_ms)

    async def update_book(self, book_id: str, patch: BookUpdate, token: str) -> BookRead:
        """Apply the fields set in ``patch`` to a book the caller owns."""
        with self.store.lock:
            index = self._index_of(book_id)
            user_id = self.auth.authorize(token)
            book = self.store.books[index]
            if book.added_by != user_id:
                logger.warning("User %s may not edit book %s", user_id, book_id)
                raise Forbidden()
            changes = patch.changes()
            updated = book.model_copy(update=changes)
            self.store.books[index] = updated
            result = updated.model_copy(deep=True)
        logger.info("User %s updated book %s (%s)", user_id, book_id, ", ".join(sorted(changes)) or "no changes")
        return await simulate_delay(result, self.latency_ms)

    async def delete_book(self, book_id: str, token: str) -> None:
        """Delete a book the caller owns together with all of its reviews."""
        with self.store.lock:
            index = self._index_of(book_id)
            user_id = self.auth.authorize(token)
            if self.store.books[index].added_by != user_id:
                logger.warning("User %s may not delete book %s", user_id, book_id)
                raise Forbidden()
            del self.store.books[index]
            before = len(self.store.reviews)
            self.store.reviews = [r for r in self.store.reviews if r.book_id != book_id]
            removed = before - len(self.store.reviews)
        logger.info("User %s deleted book %s and %d review(s)", user_id, book_id, removed)
        return await simulate_delay(None, self.latency_ms)

    def _index_of(self, book_id: str) -> int:
        for index, book in enumerate(self.store.books):
            if book.id == book_id:
                return index
        raise NotFound("Book not found.")
