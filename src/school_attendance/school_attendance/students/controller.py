from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_identity, identity_required
from ..container import Container
from ..core.constants import API_PREFIX
from ..records.controller import register_owned_routes


def register(app: Flask, container: Container) -> None:
    @app.route(f"{API_PREFIX}/students/next-admission-no", methods=["GET"], endpoint="next_admission_no")
    @identity_required
    def next_admission_no():
        return jsonify({"admissionNo": container.student_service.next_admission_no(current_identity())})

    register_owned_routes(app, container.student_service)
