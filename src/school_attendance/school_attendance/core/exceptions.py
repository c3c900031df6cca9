class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when a create payload is missing fields or violates domain rules."""

    status_code = 400


class ConflictError(DomainError):
    """Raised when a unique field (e.g. an identity email) is already taken."""

    status_code = 400


class AuthenticationError(DomainError):
    """Raised for bad credentials or a missing/invalid identity token."""

    status_code = 401


class NotFoundOrUnauthorizedError(DomainError):
    """Raised when a delete target does not exist or belongs to another identity.

    Both cases share one error so callers cannot probe for foreign records.
    """

    status_code = 404
