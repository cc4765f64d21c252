from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.deps import get_context
from src.api.main import create_app
from src.app_shell.context import ServiceContext
from src.rules.loader import load_rules
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def rules_path() -> Path:
    """Path to the real rules file at the project root."""
    return PROJECT_ROOT / "organizer.yaml"


@pytest.fixture
def rules(rules_path: Path) -> Rules:
    return load_rules(rules_path)


@pytest.fixture
def ctx(rules: Rules) -> ServiceContext:
    """
    Services over a fresh, empty store (no seed data).
    """
    return ServiceContext.create(rules)


@pytest.fixture
def app(ctx: ServiceContext) -> FastAPI:
    """Application wired to the test context."""
    app = create_app()
    app.dependency_overrides[get_context] = lambda: ctx
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
