from __future__ import annotations

from typing import Optional, Protocol

from .model import Identity


class IdentityRepository(Protocol):
    """Repository interface for identities.

    Note: the service layer depends on this interface, never on MongoDB directly.
    """

    def get_by_email(self, email: str) -> Optional[Identity]:
        raise NotImplementedError

    def create_identity(self, *, email: str, secret_hash: str) -> str:
        """Persist a new identity and return its id.

        Raises ConflictError if the email is already registered.
        """

        raise NotImplementedError
