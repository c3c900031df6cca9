from __future__ import annotations

from typing import Optional

from ..core.constants import IDENTITIES_COLLECTION
from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mongo_base import unique_violation_as
from .model import Identity
from .repository import IdentityRepository


class MongoIdentityRepository(IdentityRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _collection(self):
        return self._conn_factory.database()[IDENTITIES_COLLECTION]

    def get_by_email(self, email: str) -> Optional[Identity]:
        doc = self._collection().find_one({"email": email})
        if not doc:
            return None
        return Identity(
            identity_id=str(doc["_id"]),
            email=doc["email"],
            secret_hash=doc.get("secretHash", ""),
        )

    def create_identity(self, *, email: str, secret_hash: str) -> str:
        with unique_violation_as(ConflictError, "Email already in use"):
            result = self._collection().insert_one({"email": email, "secretHash": secret_hash})
        return str(result.inserted_id)
