from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from soldier_savings.app import create_app
from soldier_savings.config import Settings


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(database_path=str(tmp_path / "runs.db"))


@pytest.fixture()
def app(settings: Settings) -> Flask:
    return create_app(settings)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
