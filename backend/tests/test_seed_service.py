# tests/test_seed_service.py

from werkzeug.security import check_password_hash

from masjid_manager.collection_types import Collection
from masjid_manager.services.seed_service import ensure_admin, export_snapshot, seed_demo_data
from masjid_manager.utils.constants import Roles


def test_seed_demo_data(repository):
    assert seed_demo_data(repository) is True

    mosques = repository.list_mosques()
    assert {mosque['id'] for mosque in mosques} == {'mosque-1', 'mosque-2', 'mosque-3'}
    assert all(mosque['logo_url'] for mosque in mosques)
    assert repository.count_records(Collection.PRAYER_TIMES, 'mosque-3') == 5
    assert repository.count_records(Collection.MEMBERS, 'mosque-1') == 4

    donation = repository.get_record(Collection.DONATIONS, 'd1')
    assert donation['donor_name'] == 'John Doe'
    assert donation['mosque_id'] == 'mosque-1'

    admin = repository.find_user_by_email('admin@masjid.com')
    assert admin['role'] == Roles.ADMIN

def test_seed_is_skipped_when_data_exists(repository):
    seed_demo_data(repository)
    assert seed_demo_data(repository) is False
    assert len(repository.list_mosques()) == 3

def test_demo_admin_can_sign_in(test_client, repository):
    seed_demo_data(repository)
    response = test_client.post('/api/login', json={'email': 'admin@masjid.com', 'password': 'password123'})
    assert response.status_code == 200

def test_ensure_admin_creates_default_mosque(repository):
    user, created = ensure_admin(repository, 'root@masjid.test', 'secret-pass')

    assert created is True
    mosques = repository.list_mosques()
    assert [mosque['name'] for mosque in mosques] == ['Al-Rahma Masjid']
    assert user['mosque_id'] == mosques[0]['id']
    assert user['avatar'].startswith('https://ui-avatars.com/')

def test_ensure_admin_resets_password(repository):
    ensure_admin(repository, 'root@masjid.test', 'first-pass')
    user, created = ensure_admin(repository, 'root@masjid.test', 'second-pass')

    assert created is False
    stored = repository.get_user(user['id'])
    assert check_password_hash(stored['password_hash'], 'second-pass')
    assert len(repository.list_mosques()) == 1

def test_export_snapshot_uses_wire_format(repository):
    seed_demo_data(repository)
    snapshot = export_snapshot(repository)

    first = next(mosque for mosque in snapshot if mosque['id'] == 'mosque-1')
    assert 'logoUrl' in first
    assert 'createdAt' not in first
    assert first['donations'][0]['donorName']
    assert all(member['mosqueId'] == 'mosque-1' for member in first['members'])
    assert len(first['prayerTimes']) == 5
