from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_identity, identity_required, json_body
from ..core.constants import API_PREFIX
from .service import OwnedRecordService


def register_owned_routes(app: Flask, service: OwnedRecordService, *, deletable: bool = True) -> None:
    """Bind GET/POST (and optionally DELETE) routes for one record kind."""

    kind = service.kind.value
    base = f"{API_PREFIX}/{kind}"

    @identity_required
    def list_records():
        return jsonify([r.to_dict() for r in service.list(current_identity())])

    @identity_required
    def create_record():
        record = service.create(current_identity(), json_body())
        return jsonify(record.to_dict())

    app.add_url_rule(base, endpoint=f"list_{kind}", view_func=list_records, methods=["GET"])
    app.add_url_rule(base, endpoint=f"create_{kind}", view_func=create_record, methods=["POST"])

    if deletable:

        @identity_required
        def delete_record(record_id: str):
            service.delete(current_identity(), record_id)
            return jsonify({"success": True})

        app.add_url_rule(
            f"{base}/<record_id>", endpoint=f"delete_{kind}", view_func=delete_record, methods=["DELETE"]
        )
