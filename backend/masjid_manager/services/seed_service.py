"""
Seed Service
------------
Bootstraps a fresh installation: the demo data set and the admin account.
Both operations are safe to run more than once.
"""
from flask import current_app
from werkzeug.security import generate_password_hash

from .. import demo_data
from ..collection_types import Collection
from ..models import generate_id
from ..utils.avatar import generate_avatar_url, generate_logo_url
from ..utils.case_mapping import to_camel_case, to_snake_case
from ..utils.constants import Roles

DEFAULT_MOSQUE = {
    'name': 'Al-Rahma Masjid',
    'address': '123 Islamic Way, Muslim Town',
}

_DEMO_RECORDS = (
    (Collection.MEMBERS, demo_data.DEMO_MEMBERS),
    (Collection.ANNOUNCEMENTS, demo_data.DEMO_ANNOUNCEMENTS),
    (Collection.DONATIONS, demo_data.DEMO_DONATIONS),
    (Collection.EVENTS, demo_data.DEMO_EVENTS),
    (Collection.AUDIT_LOGS, demo_data.DEMO_AUDIT_LOGS),
)


def seed_demo_data(repository):
    """
    Loads the demo mosques and their records, plus the demo admin.

    Returns False without touching anything when mosques already exist.
    """
    if repository.list_mosques():
        current_app.logger.info("Initial data already exists; skipping demo seed.")
        return False

    for mosque in to_snake_case(demo_data.DEMO_MOSQUES):
        mosque['logo_url'] = generate_logo_url(mosque['name'])
        repository.add_mosque(mosque)

        for index, prayer in enumerate(demo_data.DEMO_PRAYER_SCHEDULE, start=1):
            repository.add_record(Collection.PRAYER_TIMES, {
                'id': f"pt-{mosque['id']}-{index}",
                'mosque_id': mosque['id'],
                **prayer,
            })

    for collection, records in _DEMO_RECORDS:
        for record in to_snake_case(records):
            repository.add_record(collection, record)

    ensure_admin(repository, demo_data.DEMO_ADMIN['email'], demo_data.DEMO_ADMIN['password'],
                 name=demo_data.DEMO_ADMIN['name'], username=demo_data.DEMO_ADMIN['username'])
    current_app.logger.info("Demo data loaded.")
    return True


def ensure_admin(repository, email, password, name='Admin', username='admin'):
    """
    Creates the admin account, or resets its password if it already exists.

    If there is no mosque yet a default one is created first, so the admin
    always has somewhere to land. Returns (user, created).
    """
    existing = repository.find_user_by_email(email)
    if existing:
        repository.update_user(existing['id'], {'password_hash': generate_password_hash(password)})
        current_app.logger.info(f"Admin {email} already exists; password reset.")
        return existing, False

    mosques = repository.list_mosques()
    if mosques:
        mosque_id = mosques[0]['id']
    else:
        mosque_id = generate_id('mosque')
        repository.add_mosque({
            'id': mosque_id,
            'logo_url': generate_logo_url(DEFAULT_MOSQUE['name']),
            **DEFAULT_MOSQUE,
        })
        current_app.logger.info("No mosque found, created the default mosque.")

    user = repository.add_user({
        'id': generate_id('user'),
        'name': name,
        'username': username,
        'email': email,
        'password_hash': generate_password_hash(password),
        'role': Roles.ADMIN,
        'mosque_id': mosque_id,
        'avatar': generate_avatar_url(name),
    })
    current_app.logger.info(f"Admin {email} created.")
    return user, True


def export_snapshot(repository):
    """Dumps every mosque and its records in the camelCase wire format."""
    snapshot = []
    for mosque in repository.list_mosques():
        entry = {key: value for key, value in mosque.items() if key != 'created_at'}
        for collection in Collection:
            entry[collection.value] = repository.list_records(collection, mosque['id'])
        snapshot.append(entry)
    return to_camel_case(snapshot)
