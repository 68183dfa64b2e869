# tests/test_access_service.py

import pytest

from masjid_manager.collection_types import Collection
from masjid_manager.services.access_service import (
    allowed_pages, can_access_mosque, can_use_collection, is_public_collection, select_mosque
)
from masjid_manager.utils.constants import Roles

ADMIN = {'id': 'u1', 'role': Roles.ADMIN, 'mosque_id': 'mosque-2'}
IMAM = {'id': 'u2', 'role': Roles.IMAM, 'mosque_id': 'mosque-2'}
MUAZZIN = {'id': 'u3', 'role': Roles.MUAZZIN, 'mosque_id': 'mosque-1'}
HOMELESS_IMAM = {'id': 'u4', 'role': Roles.IMAM, 'mosque_id': None}

MOSQUES = [{'id': 'mosque-1', 'name': 'A'}, {'id': 'mosque-2', 'name': 'B'}]


def test_pages_per_role():
    assert allowed_pages(Roles.ADMIN) == [
        'Dashboard', 'Mosques', 'Members', 'Timings', 'Announcements', 'Donations', 'Events', 'Audit', 'Profile'
    ]
    assert allowed_pages(Roles.IMAM) == ['Dashboard', 'Members', 'Timings', 'Announcements', 'Events', 'Profile']
    assert allowed_pages(Roles.MUAZZIN) == ['Dashboard', 'Timings', 'Announcements', 'Profile']
    assert allowed_pages('Guest') == []

def test_tenant_scoping():
    assert can_access_mosque(ADMIN, 'mosque-1')
    assert can_access_mosque(IMAM, 'mosque-2')
    assert not can_access_mosque(IMAM, 'mosque-1')
    assert not can_access_mosque(HOMELESS_IMAM, 'mosque-1')

@pytest.mark.parametrize('user, collection, mosque_id, expected', [
    (ADMIN, Collection.DONATIONS, 'mosque-1', True),
    (ADMIN, Collection.AUDIT_LOGS, 'mosque-1', True),
    (IMAM, Collection.MEMBERS, 'mosque-2', True),
    (IMAM, Collection.DONATIONS, 'mosque-2', False),
    (IMAM, Collection.MEMBERS, 'mosque-1', False),
    (MUAZZIN, Collection.PRAYER_TIMES, 'mosque-1', True),
    (MUAZZIN, Collection.MEMBERS, 'mosque-1', False),
    (MUAZZIN, Collection.EVENTS, 'mosque-1', False),
])
def test_collection_access(user, collection, mosque_id, expected):
    assert can_use_collection(user, collection, mosque_id) is expected

def test_public_collections():
    public = {collection for collection in Collection if is_public_collection(collection)}
    assert public == {Collection.MEMBERS, Collection.PRAYER_TIMES, Collection.ANNOUNCEMENTS, Collection.EVENTS}

def test_select_requested_mosque_when_allowed():
    assert select_mosque(ADMIN, MOSQUES, 'mosque-2')['id'] == 'mosque-2'
    assert select_mosque(IMAM, MOSQUES, 'mosque-2')['id'] == 'mosque-2'

def test_select_falls_back_to_own_mosque():
    assert select_mosque(IMAM, MOSQUES, 'mosque-1')['id'] == 'mosque-2'
    assert select_mosque(MUAZZIN, MOSQUES)['id'] == 'mosque-1'

def test_admin_falls_back_to_first_mosque():
    assert select_mosque(ADMIN, MOSQUES)['id'] == 'mosque-1'
    assert select_mosque(ADMIN, MOSQUES, 'missing')['id'] == 'mosque-1'

def test_select_without_match():
    assert select_mosque(HOMELESS_IMAM, MOSQUES) is None
    assert select_mosque(ADMIN, []) is None
