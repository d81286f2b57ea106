"""
API endpoints for book reviews.

Posting requires a token issued to the ``user_id`` in the payload.
Only the author of a review can edit or delete it.
"""

from fastapi import APIRouter, Depends, status

from bookwise_api.app.api.deps import as_http_error, get_catalog
from bookwise_api.app.core.errors import BookwiseError
from bookwise_api.app.core.security import get_bearer_token
from bookwise_api.app.schemas.review import ReviewCreate, ReviewRead, ReviewUpdate
from bookwise_api.app.services.catalog import Catalog


router = APIRouter()


@router.post(
    "/reviews",
    response_model=ReviewRead,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a review",
)
async def create_review(
    data: ReviewCreate,
    token: str = Depends(get_bearer_token),
    catalog: Catalog = Depends(get_catalog),
) -> ReviewRead:
    try:
        return await catalog.add_review(data, token)
    except BookwiseError as e:
        raise as_http_error(e)


@router.patch(
    "/reviews/{review_id}",
    response_model=ReviewRead,
    summary="Edit a review",
)
async def update_review(
    review_id: str,
    patch: ReviewUpdate,
    token: str = Depends(get_bearer_token),
    catalog: Catalog = Depends(get_catalog),
) -> ReviewRead:
    try:
        return await catalog.update_review(review_id, patch, token)
    except BookwiseError as e:
        raise as_http_error(e)


@router.delete(
    "/reviews/{review_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a review",
)
async def delete_review(
    review_id: str,
    token: str = Depends(get_bearer_token),
    catalog: Catalog = Depends(get_catalog),
) -> None:
    try:
        await catalog.delete_review(review_id, token)
    except BookwiseError as e:
        raise as_http_error(e)
    return None
