from __future__ import annotations

from flask import Flask

from ..container import Container
from ..records.controller import register_owned_routes


def register(app: Flask, container: Container) -> None:
    # Attendance rows are append-only over the API.
    register_owned_routes(app, container.attendance_service, deletable=False)
