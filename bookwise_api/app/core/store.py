"""
In-memory entity store.

The ``EntityStore`` owns the three collections the catalogue works
with (users, books and reviews), the id counters for each of them and
a re-entrant lock.  Collections are plain lists ordered most recent
first; new entities are inserted at the front.

Services never keep references to stored objects beyond a single
call: they take ``store.lock``, read or mutate the lists, copy what
they return and release the lock.  That makes every operation atomic
with respect to the others, whether they run on one event loop or on
several threads.

The store is constructed pre-seeded and can only be brought back to
the seed state through ``reset()``.
"""

import logging
import threading
from typing import Dict, List, Optional

from ..schemas.book import BookRead
from ..schemas.review import ReviewRead
from ..schemas.user import UserRecord
from .fixtures import seed_books, seed_reviews, seed_users

logger = logging.getLogger(__name__)

COLLECTIONS = ("users", "books", "reviews")


class EntityStore:
    """Mutable in-memory collections plus their id counters."""

    def __init__(self, seed: bool = True) -> None:
        self.lock = threading.RLock()
        self.users: List[UserRecord] = []
        self.books: List[BookRead] = []
        self.reviews: List[ReviewRead] = []
        self._counters: Dict[str, int] = {name: 0 for name in COLLECTIONS}
        self._seed = seed
        self.reset()

    def reset(self) -> None:
        """Drop every entity and reload the seed fixture (if enabled)."""
        with self.lock:
            if self._seed:
                self.users = seed_users()
                self.books = seed_books()
                self.reviews = seed_reviews()
            else:
                self.users, self.books, self.reviews = [], [], []
            # Counters continue after the highest seeded id so the first
            # generated id never collides with a fixture entity.
            for name in COLLECTIONS:
                self._counters[name] = max((int(item.id) for item in getattr(self, name)), default=0)
            logger.debug(
                "Store reset: %d users, %d books, %d reviews",
                len(self.users), len(self.books), len(self.reviews),
            )

    def next_id(self, collection: str) -> str:
        """Return a fresh id for ``collection``.

        Ids come from a counter that only moves forward, so an id that
        belonged to a deleted entity is never handed out again.
        """
        with self.lock:
            self._counters[collection] += 1
            return str(self._counters[collection])

    # Lookups.  Callers are expected to hold ``lock``.

    def find_user(self, user_id: str) -> Optional[UserRecord]:
        return next((u for u in self.users if u.id == user_id), None)

    def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        return next((u for u in self.users if u.email == email), None)

    def find_book(self, book_id: str) -> Optional[BookRead]:
        return next((b for b in self.books if b.id == book_id), None)

    def find_review(self, review_id: str) -> Optional[ReviewRead]:
        return next((r for r in self.reviews if r.id == review_id), None)

    def reviews_for_book(self, book_id: str) -> List[ReviewRead]:
        return [r for r in self.reviews if r.book_id == book_id]
