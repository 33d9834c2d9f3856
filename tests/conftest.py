import pytest

from apps.api.app import create_app
from shared.db import db


@pytest.fixture()
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
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
def no_sleep(monkeypatch):
    slept = []
    monkeypatch.setattr("services.collector.newsapi.time.sleep", slept.append)
    return slept
