from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """Domain entity: an account that owns classes, teachers, students and attendance.

    Note: identity_id is also the token handed to the client.
    """

    identity_id: str
    email: str
    secret_hash: str
