"""
User endpoints for API v1.

Currently only the caller's own activity (books added, reviews
written) is exposed.
"""

from fastapi import APIRouter, Depends

from bookwise_api.app.api.deps import as_http_error, get_catalog
from bookwise_api.app.core.errors import BookwiseError
from bookwise_api.app.core.security import get_bearer_token
from bookwise_api.app.schemas.activity import UserActivity
from bookwise_api.app.services.catalog import Catalog


router = APIRouter()


@router.get("/me/activity", response_model=UserActivity)
async def my_activity(
    token: str = Depends(get_bearer_token),
    catalog: Catalog = Depends(get_catalog),
) -> UserActivity:
    try:
        return await catalog.get_user_activity(token)
    except BookwiseError as e:
        raise as_http_error(e)
