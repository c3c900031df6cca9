from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_identity, identity_required
from ..container import Container
from ..core.constants import API_PREFIX
from ..database.bootstrap import ping


def register(app: Flask, container: Container) -> None:
    @app.route(f"{API_PREFIX}/dashboard/summary", methods=["GET"], endpoint="dashboard_summary")
    @identity_required
    def dashboard_summary():
        return jsonify(container.dashboard_service.summary(current_identity()))

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        if container.conn is None:
            return jsonify({"status": "ok", "database": "not configured"})
        try:
            ping(container.conn.database())
        except Exception as e:
            app.logger.warning("health check: database unreachable (%s)", e)
            return jsonify({"status": "degraded", "database": "unreachable"}), 503
        return jsonify({"status": "ok", "database": "ok"})
