"""
Per-user activity: the books a user added and the reviews they wrote.
"""

from typing import Optional

from ..core.latency import simulate_delay
from ..core.store import EntityStore
from ..schemas.activity import UserActivity
from ..schemas.review import ReviewWithBookTitle
from .auth_service import AuthService
from .book_service import with_cover

UNKNOWN_BOOK_TITLE = "Unknown Book"


class ActivityService:

    def __init__(self, store: EntityStore, auth: AuthService, latency_ms: Optional[int] = None) -> None:
        self.store = store
        self.auth = auth
        self.latency_ms = latency_ms

    async def get_user_activity(self, token: str) -> UserActivity:
        """Books added by and reviews written by the token's user.

        Each review carries the current title of its book, or
        ``"Unknown Book"`` when the book no longer exists.
        """
        user_id = self.auth.authorize(token)
        with self.store.lock:
            user_books = [with_cover(b, "100x150") for b in self.store.books if b.added_by == user_id]
            user_reviews = []
            for review in self.store.reviews:
                if review.user_id != user_id:
                    continue
                book = self.store.find_book(review.book_id)
                user_reviews.append(
                    ReviewWithBookTitle(
                        **review.model_dump(),
                        book_title=book.title if book else UNKNOWN_BOOK_TITLE,
                    )
                )
            result = UserActivity(user_books=user_books, user_reviews=user_reviews)
        return await simulate_delay(result, self.latency_ms)
