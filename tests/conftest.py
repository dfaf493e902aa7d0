from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from debtplan.app import create_app
from debtplan.config import TestingConfig


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app(TestingConfig())
    with app.test_client() as test_client:
        yield test_client
