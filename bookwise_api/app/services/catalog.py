"""
The catalogue operation set.

``Catalog`` wires the services to a single ``EntityStore`` and exposes
every operation callers need in one object.  The HTTP layer keeps one
instance on ``app.state``; library users and tests construct their
own, usually with ``latency_ms=0``.
"""

from typing import Optional

from ..core.config import settings
from ..core.store import EntityStore
from ..schemas.activity import UserActivity
from ..schemas.book import BookCreate, BookPage, BookRead, BookUpdate, BookWithReviews
from ..schemas.review import RatingStats, ReviewCreate, ReviewRead, ReviewUpdate
from ..schemas.user import LoginResult, UserCreate, UserRead
from .activity_service import ActivityService
from .auth_service import AuthService
from .book_service import BookService
from .review_service import ReviewService


class Catalog:
    """Facade over the user, book, review and activity services."""

    def __init__(
        self,
        store: Optional[EntityStore] = None,
        latency_ms: Optional[int] = None,
        page_size: Optional[int] = None,
        secret_key: Optional[str] = None,
    ) -> None:
        self.store = store if store is not None else EntityStore()
        if latency_ms is None:
            latency_ms = settings.simulated_latency_ms
        self.auth = AuthService(self.store, latency_ms, secret_key)
        self.books = BookService(self.store, self.auth, latency_ms, page_size)
        self.reviews = ReviewService(self.store, self.auth, latency_ms)
        self.activity = ActivityService(self.store, self.auth, latency_ms)

    def reset(self) -> None:
        """Restore the seed data.  Intended for tests."""
        self.store.reset()

    def authorize(self, token: str) -> str:
        return self.auth.authorize(token)

    async def signup(self, name: str, email: str, password: str) -> UserRead:
        return await self.auth.signup(UserCreate(name=name, email=email, password=password))

    async def login(self, email: str, password: str) -> LoginResult:
        return await self.auth.login(email, password)

    async def list_books(self, page: int = 1, search_term: str = "", genre: str = "", sort_by: str = "") -> BookPage:
        return await self.books.list_books(page, search_term, genre, sort_by)

    async def get_book_by_id(self, book_id: str) -> BookWithReviews:
        return await self.books.get_book_by_id(book_id)

    async def get_rating_stats(self, book_id: str) -> RatingStats:
        return await self.books.get_rating_stats(book_id)

    async def add_book(self, data: BookCreate, token: str) -> BookRead:
        return await self.books.add_book(data, token)

    async def update_book(self, book_id: str, patch: BookUpdate, token: str) -> BookRead:
        return await self.books.update_book(book_id, patch, token)

    async def delete_book(self, book_id: str, token: str) -> None:
        await self.books.delete_book(book_id, token)

    async def add_review(self, data: ReviewCreate, token: str) -> ReviewRead:
        return await self.reviews.add_review(data, token)

    async def update_review(self, review_id: str, patch: ReviewUpdate, token: str) -> ReviewRead:
        return await self.reviews.update_review(review_id, patch, token)

    async def delete_review(self, review_id: str, token: str) -> None:
        await self.reviews.delete_review(review_id, token)

    async def get_user_activity(self, token: str) -> UserActivity:
        return await self.activity.get_user_activity(token)
