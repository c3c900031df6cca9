from __future__ import annotations

from flask import Flask

from ..container import Container
from ..records.controller import register_owned_routes


def register(app: Flask, container: Container) -> None:
    register_owned_routes(app, container.teacher_service)
