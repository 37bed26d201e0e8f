from __future__ import annotations

from uuid import uuid4


def generate_id() -> str:
    """Opaque node/project id; only uniqueness within a snapshot matters."""
    return uuid4().hex


__all__ = ["generate_id"]
