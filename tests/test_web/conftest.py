from __future__ import annotations

import pytest

from grid_designer.config import DesignerConfig
from grid_designer.store import GridSystemStore
from grid_designer.web.app import create_app


@pytest.fixture
def store():
    """A fresh store holding the default grid system."""
    return GridSystemStore()


@pytest.fixture
def app(store):
    """Create a Flask app for testing."""
    application = create_app(config=DesignerConfig(), store=store)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def first_id(store) -> str:
    return store.state.preferences_list[0].id
