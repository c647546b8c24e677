from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from fire_planner.app import create_app
from fire_planner.config import Settings
from fire_planner.schemas.profile import DEFAULT_PROFILE, FinancialProfile


@pytest.fixture()
def client() -> FlaskClient:
    flask_app = create_app(Settings(log_level="WARNING"))
    with flask_app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def default_profile() -> FinancialProfile:
    return DEFAULT_PROFILE
