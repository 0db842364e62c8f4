import logging

import pytest
import structlog
from fastapi.testclient import TestClient

from status_api.core.config import AppSettings
from status_api.main import create_app

HEALTH_BODY = {"status": "ok", "app": "backend"}
HELLO_BODY = {"message": "Hola desde Spring Boot", "status": "ok"}


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def client(settings: AppSettings) -> TestClient:
    return TestClient(create_app(settings))


@pytest.fixture
def restore_logging():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    try:
        yield
    finally:
        root_logger.handlers[:] = handlers
        root_logger.setLevel(level)
        structlog.reset_defaults()
