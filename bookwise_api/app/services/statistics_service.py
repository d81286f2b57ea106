"""
Rating aggregation.

Average ratings are never stored: they are derived from the review
collection every time a book is returned.  This module holds the
arithmetic and the helpers that build joined ``BookWithReviews``
views.  A caller holding such a view can keep it current after it
adds, edits or deletes a review with the ``with_review_*`` helpers
instead of fetching the book again.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from ..schemas.book import BookRead, BookWithReviews
from ..schemas.review import RatingStats, ReviewRead


class StatisticsService:
    """Pure functions computing review statistics."""

    @staticmethod
    def average_rating(reviews: Iterable[ReviewRead]) -> float:
        """Arithmetic mean of the ratings, or ``0`` for no reviews."""
        ratings = [r.rating for r in reviews]
        if not ratings:
            return 0
        return sum(ratings) / len(ratings)

    @staticmethod
    def rating_distribution(reviews: Iterable[ReviewRead]) -> Dict[int, int]:
        """Number of reviews per star value, always keyed 1 through 5."""
        counts = {star: 0 for star in range(1, 6)}
        for review in reviews:
            if 1 <= review.rating <= 5:
                counts[review.rating] += 1
        return counts

    @classmethod
    def compute_stats(cls, reviews: Iterable[ReviewRead]) -> RatingStats:
        reviews = list(reviews)
        return RatingStats(
            average_rating=cls.average_rating(reviews),
            count=len(reviews),
            distribution=cls.rating_distribution(reviews),
        )

    @classmethod
    def join(cls, book: BookRead, reviews: List[ReviewRead]) -> BookWithReviews:
        """Build the joined view of ``book``.  Inputs are deep-copied."""
        return BookWithReviews(
            **book.model_dump(),
            reviews=[r.model_copy(deep=True) for r in reviews],
            average_rating=cls.average_rating(reviews),
        )

    # Refreshing a view the caller already holds.

    @classmethod
    def with_review_added(cls, view: BookWithReviews, review: ReviewRead) -> BookWithReviews:
        """Return ``view`` with ``review`` prepended and the average recomputed.

        A review already present in the view is replaced in place.
        """
        if review.book_id != view.id:
            return view.model_copy(deep=True)
        if any(r.id == review.id for r in view.reviews):
            return cls.with_review_replaced(view, review)
        return cls._rebuild(view, [review] + list(view.reviews))

    @classmethod
    def with_review_replaced(cls, view: BookWithReviews, review: ReviewRead) -> BookWithReviews:
        reviews = [review if r.id == review.id else r for r in view.reviews]
        return cls._rebuild(view, reviews)

    @classmethod
    def with_review_removed(cls, view: BookWithReviews, review_id: str) -> BookWithReviews:
        return cls._rebuild(view, [r for r in view.reviews if r.id != review_id])

    @classmethod
    def _rebuild(cls, view: BookWithReviews, reviews: List[ReviewRead]) -> BookWithReviews:
        return view.model_copy(
            update={
                "reviews": [r.model_copy(deep=True) for r in reviews],
                "average_rating": cls.average_rating(reviews),
            },
            deep=True,
        )
