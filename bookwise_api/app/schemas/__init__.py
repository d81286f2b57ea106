"""
Pydantic schema definitions.

The same models serve as API payloads and as the records held by the
in‑memory store; the store keeps its own copies and never hands them
out directly.
"""
