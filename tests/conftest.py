"""Shared pytest fixtures."""

import uuid
from datetime import datetime, timedelta

import pytest

from restoconsult import create_app
from restoconsult.extensions import db as _db
from restoconsult.models import User, Inquiry, BlogPost, UserRole
from restoconsult.services.identity import SessionContext
from restoconsult.store import get_client, QueryResult, StoreError

ADMIN_EMAIL = 'admin@example.com'
ADMIN_PASSWORD = 'secret123'


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def query_client(app):
    return get_client()


@pytest.fixture
def admin_user(db):
    user = User(email=ADMIN_EMAIL, name='Admin User', role=UserRole.ADMIN.value)
    user.set_password(ADMIN_PASSWORD)
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def editor_user(db):
    user = User(email='editor@example.com', name='Editor', role='writer')
    user.set_password('editor123')
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def identity(admin_user):
    return SessionContext.from_user(admin_user)


@pytest.fixture
def admin_client(client, admin_user):
    client.post('/auth', data={'email': ADMIN_EMAIL, 'password': ADMIN_PASSWORD})
    return client


@pytest.fixture
def make_inquiry(db):
    """Insert an inquiry; ``age`` days in the past."""
    def _make(age=0, **fields):
        values = {
            'name': 'Jane Doe',
            'email': 'jane@example.com',
            'message': 'Please call me back.',
        }
        values.update(fields)
        inquiry = Inquiry(created_at=datetime.utcnow() - timedelta(days=age), **values)
        db.session.add(inquiry)
        db.session.commit()
        return inquiry
    return _make


@pytest.fixture
def make_post(db, admin_user):
    def _make(age=0, **fields):
        values = {
            'title': 'Menu basics',
            'slug': f'post-{uuid.uuid4().hex[:8]}',
            'content': 'Price every plate.',
            'tags': [],
            'author_id': admin_user.id,
        }
        values.update(fields)
        post = BlogPost(created_at=datetime.utcnow() - timedelta(days=age), **values)
        db.session.add(post)
        db.session.commit()
        return post
    return _make


class FailingTable:
    """Table builder whose every call chains and whose execute fails."""

    def __init__(self, message):
        self.message = message

    def __getattr__(self, name):
        return lambda *args, **kwargs: self

    def execute(self):
        return QueryResult(error=StoreError(self.message))


class FailingClient:
    """Query client that reports ``message`` for every table."""

    def __init__(self, message='permission denied for table'):
        self.message = message

    def table(self, name):
        return FailingTable(self.message)


@pytest.fixture
def failing_client():
    return FailingClient()
