# tests/test_mosque_routes.py

from freezegun import freeze_time

from masjid_manager.collection_types import Collection


def test_list_mosques_is_public(test_client, tenants):
    response = test_client.get('/api/mosques')
    assert response.status_code == 200
    assert {mosque['id'] for mosque in response.json} == {'mosque-a', 'mosque-b'}
    assert 'logoUrl' in response.json[0]

def test_admin_creates_mosque(test_client, auth_headers_for_admin):
    response = test_client.post(
        '/api/mosques', json={'name': 'Al-Noor Islamic Center', 'address': '789 Wisdom Rd'},
        headers=auth_headers_for_admin
    )
    assert response.status_code == 201
    assert response.json['id'].startswith('mosque-')
    assert response.json['logoUrl'].startswith('https://api.dicebear.com/')

def test_create_mosque_requires_name(test_client, auth_headers_for_admin):
    response = test_client.post('/api/mosques', json={'address': 'Nowhere'}, headers=auth_headers_for_admin)
    assert response.status_code == 422

def test_only_admins_manage_mosques(test_client, auth_headers_for_imam):
    response = test_client.post('/api/mosques', json={'name': 'Mine'}, headers=auth_headers_for_imam)
    assert response.status_code == 403
    assert response.json['error'] == "Role 'Admin' required."
    assert test_client.delete('/api/mosques/mosque-a', headers=auth_headers_for_imam).status_code == 403

def test_anonymous_cannot_create_mosque(test_client, tenants):
    assert test_client.post('/api/mosques', json={'name': 'Mine'}).status_code == 401

def test_update_mosque(test_client, auth_headers_for_admin):
    response = test_client.put('/api/mosques/mosque-b', json={'address': '22 New St'}, headers=auth_headers_for_admin)
    assert response.status_code == 200
    assert response.json['address'] == '22 New St'
    assert response.json['name'] == 'Masjid B'

def test_update_missing_mosque(test_client, auth_headers_for_admin):
    response = test_client.put('/api/mosques/missing', json={'name': 'X'}, headers=auth_headers_for_admin)
    assert response.status_code == 404

def test_delete_mosque_cascades(test_client, repository, auth_headers_for_admin):
    repository.add_record(Collection.MEMBERS, {'id': 'mem-1', 'mosque_id': 'mosque-b', 'name': 'Aisha', 'role': 'Committee'})

    response = test_client.delete('/api/mosques/mosque-b', headers=auth_headers_for_admin)
    assert response.status_code == 200
    assert response.json == {'success': True}
    assert repository.get_mosque('mosque-b') is None
    assert repository.get_record(Collection.MEMBERS, 'mem-1') is None
    assert repository.get_user('imam_b')['mosque_id'] is None

    assert test_client.delete('/api/mosques/mosque-b', headers=auth_headers_for_admin).status_code == 404


# --- Summary ---

def add_prayer(repository, record_id, name, time, mosque_id='mosque-a'):
    repository.add_record(Collection.PRAYER_TIMES, {'id': record_id, 'mosque_id': mosque_id, 'name': name, 'time': time})

@freeze_time("2025-03-10 14:00:00")
def test_summary(test_client, repository, tenants):
    add_prayer(repository, 'pt-1', 'Fajr', '05:30 AM')
    add_prayer(repository, 'pt-2', 'Asr', '04:45 PM')
    add_prayer(repository, 'pt-3', 'Dhuhr', '12:30')
    add_prayer(repository, 'pt-4', 'Isha', '13:00', mosque_id='mosque-b')
    repository.add_record(Collection.MEMBERS, {'id': 'mem-1', 'mosque_id': 'mosque-a', 'name': 'Omar', 'role': 'Volunteer'})
    repository.add_record(Collection.EVENTS, {'id': 'eve-1', 'mosque_id': 'mosque-a', 'title': 'Old', 'date': '2025-03-09', 'type': 'Event'})
    repository.add_record(Collection.EVENTS, {'id': 'eve-2', 'mosque_id': 'mosque-a', 'title': 'Today', 'date': '2025-03-10', 'type': 'Event'})

    response = test_client.get('/api/mosques/mosque-a/summary')

    assert response.status_code == 200
    assert response.json == {
        'nextPrayer': {'id': 'pt-2', 'name': 'Asr', 'time': '04:45 PM'},
        'memberCount': 1,
        'upcomingEventCount': 1,
    }

def test_compact_event_date_never_reaches_the_summary(test_client, tenants, auth_headers_for_admin):
    response = test_client.post(
        '/api/mosques/mosque-a/events', json={'title': 'New Year', 'date': '20250101'},
        headers=auth_headers_for_admin,
    )
    assert response.status_code == 422

    with freeze_time("2025-03-10 12:00:00"):
        assert test_client.get('/api/mosques/mosque-a/summary').json['upcomingEventCount'] == 0

@freeze_time("2025-03-10 23:30:00")
def test_summary_wraps_to_first_prayer(test_client, repository, tenants):
    add_prayer(repository, 'pt-1', 'Fajr', '05:30 AM')
    add_prayer(repository, 'pt-2', 'Isha', '08:30 PM')
    response = test_client.get('/api/mosques/mosque-a/summary')
    assert response.json['nextPrayer']['name'] == 'Fajr'

def test_summary_without_prayer_times(test_client, tenants):
    response = test_client.get('/api/mosques/mosque-b/summary')
    assert response.status_code == 200
    assert response.json['nextPrayer'] is None
    assert response.json['memberCount'] == 0

def test_summary_for_missing_mosque(test_client, tenants):
    assert test_client.get('/api/mosques/missing/summary').status_code == 404

def test_summary_logs_unparseable_times(app, test_client, repository, tenants, mocker):
    add_prayer(repository, 'pt-1', 'Fajr', 'after sunrise')
    warning = mocker.patch.object(app.logger, 'warning')

    response = test_client.get('/api/mosques/mosque-a/summary')

    assert response.status_code == 200
    assert response.json['nextPrayer']['name'] == 'Fajr'
    warning.assert_called_once()

def test_storage_failure_returns_500(app, test_client, tenants, mocker):
    from sqlalchemy.exc import OperationalError
    mocker.patch(
        'masjid_manager.repositories.sql_repository.SqlAlchemyRepository.count_records',
        side_effect=OperationalError('SELECT', {}, Exception('database is locked'))
    )
    response = test_client.get('/api/mosques/mosque-a/summary')
    assert response.status_code == 500
    assert response.json == {'error': 'An internal database error occurred.'}
