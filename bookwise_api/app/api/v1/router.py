"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers (auth, books, reviews,
users) under a unified prefix.  When new domains are introduced,
update this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import (
    auth,
    books,
    reviews,
    users,
)

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(books.router, prefix="/books", tags=["books"])
# The reviews router defines its own "/reviews" paths internally.
router.include_router(reviews.router, tags=["reviews"])
router.include_router(users.router, prefix="/users", tags=["users"])
