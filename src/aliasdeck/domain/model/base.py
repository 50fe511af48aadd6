"""Identity helpers."""

from __future__ import annotations

from uuid import uuid4


def new_id() -> str:
    """Return a fresh opaque record id.

    Ids are never derived from alias or target, so renaming keeps identity.
    """
    return str(uuid4())
