from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container
from ..core.constants import API_PREFIX


def register(app: Flask, container: Container) -> None:
    @app.route(f"{API_PREFIX}/identity/signup", methods=["POST"], endpoint="signup")
    def signup():
        data = json_body()
        token = container.identity_service.register(data.get("email"), data.get("secret"))
        return jsonify({"success": True, "token": token})

    @app.route(f"{API_PREFIX}/identity/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        token = container.identity_service.authenticate(data.get("email"), data.get("secret"))
        return jsonify({"success": True, "token": token})
