# backend/tests/conftest.py

import pytest
from werkzeug.security import generate_password_hash

from masjid_manager import create_app, db as _db
from masjid_manager.repositories import get_repository
from masjid_manager.utils.auth import create_access_token
from masjid_manager.utils.constants import Roles

TEST_PASSWORD = 'password123'


@pytest.fixture(scope='function')
def app():
    """A fresh application (and in-memory database) for every test."""
    return create_app('testing')

@pytest.fixture(scope='function')
def db(app):
    """Function-level database setup. Creates and tears down tables for each test function."""
    with app.app_context():
        _db.create_all()

        yield _db

        _db.session.remove()
        _db.drop_all()

@pytest.fixture(scope='function')
def test_client(app, db):
    """A test client for the app, ensuring the DB is initialized."""
    return app.test_client()

@pytest.fixture(scope='function')
def repository(db):
    """The SQLAlchemy repository owned by the test app."""
    return get_repository()


def make_user(repository, user_id, role, mosque_id, name=None, password=TEST_PASSWORD):
    return repository.add_user({
        'id': user_id,
        'name': name or f'{role} {user_id}',
        'username': user_id,
        'email': f'{user_id}@masjid.test',
        'password_hash': generate_password_hash(password),
        'role': role,
        'mosque_id': mosque_id,
        'avatar': None,
    })

def auth_headers(user):
    """Bearer header for a user dict. Needs an application context."""
    return {'Authorization': f'Bearer {create_access_token(user)}'}


@pytest.fixture(scope='function')
def tenants(repository):
    """
    Two mosques with staff:
    an Admin, an Imam and a Muazzin of mosque-a, and an Imam of mosque-b.
    """
    repository.add_mosque({'id': 'mosque-a', 'name': 'Masjid A', 'address': '1 First St', 'logo_url': None})
    repository.add_mosque({'id': 'mosque-b', 'name': 'Masjid B', 'address': '2 Second St', 'logo_url': None})
    return {
        'admin': make_user(repository, 'admin', Roles.ADMIN, 'mosque-a', name='Admin User'),
        'imam': make_user(repository, 'imam', Roles.IMAM, 'mosque-a', name='Imam Ahmed'),
        'muazzin': make_user(repository, 'muazzin', Roles.MUAZZIN, 'mosque-a', name='Bilal Khan'),
        'imam_b': make_user(repository, 'imam_b', Roles.IMAM, 'mosque-b', name='Imam Yusuf'),
    }

@pytest.fixture(scope='function')
def auth_headers_for_admin(tenants):
    return auth_headers(tenants['admin'])

@pytest.fixture(scope='function')
def auth_headers_for_imam(tenants):
    return auth_headers(tenants['imam'])

@pytest.fixture(scope='function')
def auth_headers_for_muazzin(tenants):
    return auth_headers(tenants['muazzin'])

@pytest.fixture(scope='function')
def auth_headers_for_imam_b(tenants):
    return auth_headers(tenants['imam_b'])
