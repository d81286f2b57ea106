"""
Application package initializer.

``core`` holds configuration, logging, security helpers and the
in‑memory store; ``schemas`` the pydantic models; ``services`` the
business logic; ``api`` the versioned HTTP routes.
"""

from .main import app  # noqa: F401
