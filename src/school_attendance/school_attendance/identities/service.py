from __future__ import annotations

import logging

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError, ConflictError, ValidationError
from .repository import IdentityRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or secret"


def normalize_email(email) -> str:
    return require_non_empty(email, "Email").lower()


class IdentityService:
    """Use cases: sign up and log in.

    The returned token is the identity id; it never expires.
    """

    def __init__(self, identities: IdentityRepository):
        self._identities = identities

    def register(self, email, secret) -> str:
        email = normalize_email(email)
        if not isinstance(secret, str) or not secret:
            raise ValidationError("Secret is required")

        if self._identities.get_by_email(email):
            raise ConflictError("Email already in use")

        identity_id = self._identities.create_identity(email=email, secret_hash=generate_password_hash(secret))
        logger.info("registered identity %s (%s)", identity_id, email)
        return identity_id

    def authenticate(self, email, secret) -> str:
        try:
            email = normalize_email(email)
        except ValidationError:
            raise AuthenticationError(INVALID_CREDENTIALS)

        identity = self._identities.get_by_email(email)
        if not identity or not isinstance(secret, str):
            logger.info("login rejected for %s", email)
            raise AuthenticationError(INVALID_CREDENTIALS)

        try:
            ok = check_password_hash(identity.secret_hash, secret)
        except Exception:
            # e.g. empty or corrupted hashes
            ok = False

        if not ok:
            logger.info("login rejected for %s", email)
            raise AuthenticationError(INVALID_CREDENTIALS)

        return identity.identity_id
