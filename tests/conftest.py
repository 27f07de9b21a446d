import os
import sys

import pytest

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from sandwich_app import create_app
from sandwich_app.extensions import db
from sandwich_app.services.data_client import get_data_client


@pytest.fixture()
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        "SECRET_KEY": "test-secret",
        "SEED_DEFAULTS": False,
        "SNAPSHOT_POLL_INTERVAL": 0,
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def data_client(app):
    return get_data_client()


@pytest.fixture()
def menu(data_client):
    """A small set of breads, ingredients and sauces to build sandwiches from."""
    return {
        "white": data_client.breads.create(name="White Bread"),
        "rye": data_client.breads.create(name="Rye"),
        "lettuce": data_client.ingredients.create(name="Lettuce"),
        "ham": data_client.ingredients.create(name="Ham"),
        "cheese": data_client.ingredients.create(name="Cheese"),
        "mayo": data_client.sauces.create(name="Mayo"),
        "mustard": data_client.sauces.create(name="Mustard"),
    }
