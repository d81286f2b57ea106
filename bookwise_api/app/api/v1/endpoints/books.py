"""
Book endpoints for API v1.

Listing and reading are public.  Adding requires a bearer token;
editing and deleting additionally require that the caller added the
book.  Deleting a book removes its reviews as well.
"""

from fastapi import APIRouter, Depends, Query, status

from bookwise_api.app.api.deps import as_http_error, get_catalog
from bookwise_api.app.core.errors import BookwiseError
from bookwise_api.app.core.security import get_bearer_token
from bookwise_api.app.schemas.book import BookCreate, BookPage, BookRead, BookUpdate, BookWithReviews
from bookwise_api.app.schemas.review import RatingStats
from bookwise_api.app.services.catalog import Catalog


router = APIRouter()


@router.get("/", response_model=BookPage)
async def list_books(
    page: int = Query(1),
    search: str = Query("", description="Case-insensitive match on title or author"),
    genre: str = Query("", description="Exact genre"),
    sort_by: str = Query("", description="'rating_desc', 'rating_asc', 'year_desc' or 'year_asc'"),
    catalog: Catalog = Depends(get_catalog),
) -> BookPage:
    """List books with search, genre filter, sorting and pagination.

    A page past the last one returns an empty list, not an error.
    """
    return await catalog.list_books(page, search, genre, sort_by)


@router.get("/{book_id}", response_model=BookWithReviews)
async def get_book(book_id: str, catalog: Catalog = Depends(get_catalog)) -> BookWithReviews:
    try:
        return await catalog.get_book_by_id(book_id)
    except BookwiseError as e:
        raise as_http_error(e)


@router.get("/{book_id}/stats", response_model=RatingStats)
async def get_book_stats(book_id: str, catalog: Catalog = Depends(get_catalog)) -> RatingStats:
    """Average rating, review count and star histogram of a book."""
    try:
        return await catalog.get_rating_stats(book_id)
    except BookwiseError as e:
        raise as_http_error(e)


@router.post("/", response_model=BookRead, status_code=status.HTTP_201_CREATED)
async def create_book(
    data: BookCreate,
    token: str = Depends(get_bearer_token),
    catalog: Catalog = Depends(get_catalog),
) -> BookRead:
    try:
        return await catalog.add_book(data, token)
    except BookwiseError as e:
        raise as_http_error(e)


@router.patch("/{book_id}", response_model=BookRead)
async def update_book(
    book_id: str,
    patch: BookUpdate,
    token: str = Depends(get_bearer_token),
    catalog: Catalog = Depends(get_catalog),
) -> BookRead:
    """Update the given fields of a book.  Only its owner may do so."""
    try:
        return await catalog.update_book(book_id, patch, token)
    except BookwiseError as e:
        raise as_http_error(e)


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_book(
    book_id: str,
    token: str = Depends(get_bearer_token),
    catalog: Catalog = Depends(get_catalog),
) -> None:
    try:
        await catalog.delete_book(book_id, token)
    except BookwiseError as e:
        raise as_http_error(e)
    return None
