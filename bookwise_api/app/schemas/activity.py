"""Schema for a user's own books and reviews."""

from typing import List

from pydantic import BaseModel

from .book import BookRead
from .review import ReviewWithBookTitle


class UserActivity(BaseModel):
    user_books: List[BookRead]
    user_reviews: List[ReviewWithBookTitle]
