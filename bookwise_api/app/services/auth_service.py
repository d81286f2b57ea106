"""
Business logic for users and the access gate.

``AuthService`` registers users, logs them in and turns bearer tokens
back into user ids.  Every mutating catalogue operation goes through
``authorize`` before it touches the store; ownership checks are done
by the calling service afterwards.

Passwords are stored and compared as given.  Hashing is deliberately
out of scope for this in-memory backend.
"""

import logging
from typing import Optional

from ..core.errors import AlreadyExists, InvalidCredentials, Unauthorized
from ..core.latency import simulate_delay
from ..core.security import create_access_token, decode_access_token
from ..core.store import EntityStore
from ..schemas.user import LoginResult, UserCreate, UserRead, UserRecord


class AuthService:
    """Signup, login and token verification against an ``EntityStore``."""

    def __init__(
        self,
        store: EntityStore,
        latency_ms: Optional[int] = None,
        secret_key: Optional[str] = None,
    ) -> None:
        self.store = store
        self.latency_ms = latency_ms
        self.secret_key = secret_key

    def issue_token(self, user_id: str) -> str:
        return create_access_token({"sub": user_id}, secret_key=self.secret_key)

    def authorize(self, token: Optional[str]) -> str:
        """Return the id of the user ``token`` was issued to.

        Raises ``Unauthorized`` if the token is missing, invalid,
        expired or names a user that does not exist.
        """
        logger = logging.getLogger(__name__)
        payload = decode_access_token(token or "", secret_key=self.secret_key)
        if not payload or not payload.get("sub"):
            logger.warning("Rejected invalid or expired token")
            raise Unauthorized()
        user_id = str(payload["sub"])
        with self.store.lock:
            if self.store.find_user(user_id) is None:
                logger.warning("Rejected token for unknown user %s", user_id)
                raise Unauthorized()
        return user_id

    async def signup(self, data: UserCreate) -> UserRead:
        """Register a new user.  Emails are unique."""
        logger = logging.getLogger(__name__)
        with self.store.lock:
            if self.store.find_user_by_email(data.email):
                raise AlreadyExists()
            user = UserRecord(
                id=self.store.next_id("users"),
                name=data.name,
                email=data.email,
                password=data.password,
            )
            self.store.users.append(user)
            result = user.public()
        logger.info("Registered user %s (%s)", result.id, result.email)
        return await simulate_delay(result, self.latency_ms)

    async def login(self, email: str, password: str) -> LoginResult:
        """Authenticate by email and password and issue a token."""
        with self.store.lock:
            user = self.store.find_user_by_email(email)
            if user is None or user.password != password:
                logging.getLogger(__name__).info("Failed login for %s", email)
                raise InvalidCredentials()
            result = LoginResult(user=user.public(), token=self.issue_token(user.id))
        return await simulate_delay(result, self.latency_ms)
