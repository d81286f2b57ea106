"""
Simulated network latency.

Catalogue operations behave like calls to a remote backend: they
return only after an artificial delay.  The delay is applied to a
result that has already been computed and copied, never around the
mutation itself.
"""

import asyncio
from typing import Optional, TypeVar

from .config import settings

T = TypeVar("T")


async def simulate_delay(data: T, delay_ms: Optional[int] = None) -> T:
    """Sleep for ``delay_ms`` milliseconds (default from settings) and return ``data``."""
    if delay_ms is None:
        delay_ms = settings.simulated_latency_ms
    if delay_ms > 0:
        await asyncio.sleep(delay_ms / 1000)
    return data
