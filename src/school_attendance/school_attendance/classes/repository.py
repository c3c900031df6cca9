from __future__ import annotations

from ..records.repository import OwnedRecordRepository
from .model import ClassRecord

ClassRepository = OwnedRecordRepository[ClassRecord]
