"""
Authentication endpoints for API v1.

Signup registers a user; login exchanges email and password for a
bearer token to send as ``Authorization: Bearer <token>`` on every
mutating request.
"""

from fastapi import APIRouter, Depends, status

from bookwise_api.app.api.deps import as_http_error, get_catalog
from bookwise_api.app.core.errors import BookwiseError
from bookwise_api.app.schemas.user import LoginResult, UserCreate, UserLogin, UserRead
from bookwise_api.app.services.catalog import Catalog


router = APIRouter()


@router.post("/signup", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def signup(data: UserCreate, catalog: Catalog = Depends(get_catalog)) -> UserRead:
    """Register a new user.  Returns 409 if the email is taken."""
    try:
        return await catalog.signup(data.name, data.email, data.password)
    except BookwiseError as e:
        raise as_http_error(e)


@router.post("/login", response_model=LoginResult)
async def login(data: UserLogin, catalog: Catalog = Depends(get_catalog)) -> LoginResult:
    try:
        return await catalog.login(data.email, data.password)
    except BookwiseError as e:
        raise as_http_error(e)
