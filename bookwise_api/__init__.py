"""
Top‑level package for the BookWise API.

All functionality lives in submodules under ``app``; the library
entry point is ``bookwise_api.app.services.catalog.Catalog``.
"""

__all__ = []
