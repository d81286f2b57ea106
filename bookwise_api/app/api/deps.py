"""
Shared FastAPI dependencies.

The catalogue instance lives on ``app.state`` (see ``main.create_app``)
so tests can mount the routes over their own store.
"""

from fastapi import HTTPException, Request

from bookwise_api.app.core.errors import BookwiseError
from bookwise_api.app.services.catalog import Catalog


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def as_http_error(exc: BookwiseError) -> HTTPException:
    """Translate a rejected operation into the matching HTTP error."""
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return HTTPException(status_code=exc.status_code, detail=str(exc), headers=headers)
