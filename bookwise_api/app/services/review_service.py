"""
Business logic for reviews.

A review is posted by a user about one book.  The poster must present
a token issued to the same user named in the payload, and the book
must exist.  The reviewer's name is copied onto the review when it is
posted.  Only the author of a review may edit or delete it, and an
edit may change nothing but the rating and the text.
"""

import logging
from typing import Optional

from ..core.errors import Forbidden, NotFound, Unauthorized
from ..core.latency import simulate_delay
from ..core.store import EntityStore
from ..schemas.review import ReviewCreate, ReviewRead, ReviewUpdate
from .auth_service import AuthService


class ReviewService:
    """Service for handling book reviews."""

    def __init__(self, store: EntityStore, auth: AuthService, latency_ms: Optional[int] = None) -> None:
        self.store = store
        self.auth = auth
        self.latency_ms = latency_ms

    async def add_review(self, data: ReviewCreate, token: str) -> ReviewRead:
        """Post a new review.

        Raises ``Unauthorized`` unless ``token`` belongs to
        ``data.user_id`` and ``NotFound`` if the book does not exist.
        The review is placed first among the book's reviews.
        """
        logger = logging.getLogger(__name__)
        caller_id = self.auth.authorize(token)
        with self.store.lock:
            user = self.store.find_user(data.user_id)
            if user is None or user.id != caller_id:
                logger.warning("User %s tried to post a review as %s", caller_id, data.user_id)
                raise Unauthorized()
            if self.store.find_book(data.book_id) is None:
                raise NotFound("Book not found.")
            review = ReviewRead(
                id=self.store.next_id("reviews"),
                book_id=data.book_id,
                user_id=user.id,
                rating=data.rating,
                review_text=data.review_text,
                user_name=user.name,
            )
            self.store.reviews.insert(0, review)
            result = review.model_copy(deep=True)
        logger.info(
            "User %s submitted review %s for book %s", caller_id, result.id, result.book_id
        )
        return await simulate_delay(result, self.latency_ms)

    async def update_review(self, review_id: str, patch: ReviewUpdate, token: str) -> ReviewRead:
        logger = logging.getLogger(__name__)
        with self.store.lock:
            index = self._index_of(review_id)
            caller_id = self.auth.authorize(token)
            review = self.store.reviews[index]
            if review.user_id != caller_id:
                logger.warning("User %s may not edit review %s", caller_id, review_id)
                raise Forbidden()
            changes = patch.model_dump(exclude_unset=True, exclude_none=True)
            updated = review.model_copy(update=changes)
            self.store.reviews[index] = updated
            result = updated.model_copy(deep=True)
        logger.info("User %s updated review %s", caller_id, review_id)
        return await simulate_delay(result, self.latency_ms)

    async def delete_review(self, review_id: str, token: str) -> None:
        logger = logging.getLogger(__name__)
        with self.store.lock:
            index = self._index_of(review_id)
            caller_id = self.auth.authorize(token)
            if self.store.reviews[index].user_id != caller_id:
                logger.warning("User %s may not delete review %s", caller_id, review_id)
                raise Forbidden()
            del self.store.reviews[index]
        logger.info("User %s deleted review %s", caller_id, review_id)
        return await simulate_delay(None, self.latency_ms)

    def _index_of(self, review_id: str) -> int:
        for index, review in enumerate(self.store.reviews):
            if review.id == review_id:
                return index
        raise NotFound("Review not found.")
