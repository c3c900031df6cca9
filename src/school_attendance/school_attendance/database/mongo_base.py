from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Type

from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from ..core.exceptions import DomainError


@contextmanager
def unique_violation_as(error_cls: Type[DomainError], message: str) -> Iterator[None]:
    """Translate a unique-index violation into a domain error.

    Services pre-check uniqueness, but two concurrent inserts can both pass
    the check; the index is what finally decides.
    """

    try:
        yield
    except DuplicateKeyError as exc:
        raise error_cls(message) from exc


def owner_filter(owner_id: ObjectId, **extra: Any) -> Dict[str, Any]:
    """Mandatory ownership predicate applied to every record query."""
    filt: Dict[str, Any] = {"userId": owner_id}
    filt.update(extra)
    return filt
