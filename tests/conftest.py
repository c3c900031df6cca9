from __future__ import annotations

import pytest

from config import testing as testing_settings
from src.school_attendance.school_attendance.container import Container
from src.school_attendance.school_attendance.main import create_app

from tests.fakes import build_fake_container


@pytest.fixture
def container() -> Container:
    return build_fake_container()


@pytest.fixture
def app(container):
    return create_app(settings=testing_settings, container=container)


@pytest.fixture
def client(app):
    return app.test_client()
