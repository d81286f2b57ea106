"""
Seed data loaded into every freshly constructed store.

One user (Alice) owns all six books; four reviews are spread over
three of them.  The data is returned as new model instances on every
call so a store reset never shares objects with a previous run.
"""

from typing import List

from ..schemas.book import BookRead
from ..schemas.review import ReviewRead
from ..schemas.user import UserRecord


def seed_users() -> List[UserRecord]:
    return [
        UserRecord(id="1", name="Alice", email="alice@example.com", password="password123"),
    ]


def seed_books() -> List[BookRead]:
    rows = [
        ("1", "The Hobbit", "J.R.R. Tolkien", "A fantasy novel.", "Fantasy", 1937, "10441294"),
        ("2", "1984", "George Orwell", "A dystopian novel.", "Dystopian", 1949, "12662369"),
        ("3", "To Kill a Mockingbird", "Harper Lee", "A novel about injustice.", "Classic", 1960, "10206240"),
        ("4", "The Great Gatsby", "F. Scott Fitzgerald", "A novel about the American dream.", "Classic", 1925, "13137910"),
        ("5", "Dune", "Frank Herbert", "A science fiction epic.", "Sci-Fi", 1965, "10074218"),
        ("6", "Pride and Prejudice", "Jane Austen", "A romantic novel.", "Romance", 1813, "12845749"),
    ]
    return [
        BookRead(
            id=book_id,
            title=title,
            author=author,
            description=description,
            genre=genre,
            year=year,
            added_by="1",
            cover_image_url=f"https://covers.openlibrary.org/b/id/{cover_id}-L.jpg",
        )
        for book_id, title, author, description, genre, year, cover_id in rows
    ]


def seed_reviews() -> List[ReviewRead]:
    return [
        ReviewRead(id="1", book_id="1", user_id="1", rating=5, review_text="An absolute classic!", user_name="Alice"),
        ReviewRead(id="2", book_id="1", user_id="1", rating=4, review_text="A great read for all ages.", user_name="Alice"),
        ReviewRead(id="3", book_id="2", user_id="1", rating=5, review_text="Chilling and thought-provoking.", user_name="Alice"),
        ReviewRead(id="4", book_id="5", user_id="1", rating=5, review_text="Mind-bending sci-fi.", user_name="Alice"),
    ]
