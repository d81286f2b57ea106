"""
Pydantic models for book data.

``BookBase`` holds the editable fields; ``BookCreate`` is the payload
for adding a book and ``BookRead`` the stored/returned shape with the
server-assigned ``id`` and ``added_by``.  ``BookUpdate`` is a partial
patch: only fields that are explicitly set are applied, and it has no
``id`` or ``added_by`` field, so a patch can never transfer ownership.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .review import ReviewRead

CLEARABLE_FIELDS = {"description", "cover_image_url"}


class BookBase(BaseModel):
    title: str = Field(..., min_length=1, examples=["Dune"])
    author: str = Field(..., min_length=1, examples=["Frank Herbert"])
    description: str = Field("", examples=["A science fiction epic."])
    genre: str = Field("", examples=["Sci-Fi"])
    year: int = Field(..., examples=[1965])
    cover_image_url: Optional[str] = Field(None, examples=["https://covers.openlibrary.org/b/id/10074218-L.jpg"])


class BookCreate(BookBase):
    """Schema for adding a book."""
    pass


class BookRead(BookBase):
    """Schema for reading a book from the API."""

    id: str
    added_by: str

    model_config = {
        "from_attributes": True,
    }


class BookUpdate(BaseModel):
    """Schema for updating a book.

    All fields are optional; only provided fields will be updated.
    Unknown fields (including ``id`` and ``added_by``) are rejected.
    An explicit ``null`` clears ``description`` and ``cover_image_url``
    (the placeholder cover then applies) and is ignored elsewhere.
    """

    title: Optional[str] = Field(None, min_length=1)
    author: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    genre: Optional[str] = None
    year: Optional[int] = None
    cover_image_url: Optional[str] = None

    model_config = {
        "extra": "forbid",
    }

    def changes(self) -> Dict[str, Any]:
        """Fields set in the patch, ready to merge into a ``BookRead``."""
        changes = self.model_dump(exclude_unset=True)
        if "description" in changes and changes["description"] is None:
            changes["description"] = ""
        return {k: v for k, v in changes.items() if v is not None or k in CLEARABLE_FIELDS}


class BookWithReviews(BookRead):
    """A book joined with its reviews and their average rating."""

    reviews: List[ReviewRead] = Field(default_factory=list)
    average_rating: float = 0


class BookPage(BaseModel):
    books: List[BookWithReviews]
    total_pages: int
