from __future__ import annotations

from typing import Dict

from ..records.service import OwnedRecordService


class DashboardService:
    """Use case: per-identity totals shown on the dashboard cards."""

    def __init__(self, *services: OwnedRecordService):
        self._services = services

    def summary(self, owner_id: str) -> Dict[str, int]:
        return {svc.kind.value: svc.count(owner_id) for svc in self._services}
