"""
Record Service
--------------
Create, read, update and delete for the mosque scoped collections (members,
prayer times, announcements, donations, events). Every change is written to
the mosque's audit log under the name of the acting user.
"""
from datetime import datetime

from flask import current_app

from ..collection_types import Collection
from ..metrics import RECORD_MUTATIONS_TOTAL
from ..models import generate_id
from ..utils.constants import AUDIT_DATE_FORMAT, PUBLIC_AUDIENCE


def _describe(collection, record):
    """A short human readable description of a record for audit log details."""
    if collection is Collection.MEMBERS:
        return f"{record.get('name')} as a {record.get('role')}"
    if collection is Collection.PRAYER_TIMES:
        return f"{record.get('name')} time ({record.get('time')})"
    if collection is Collection.DONATIONS:
        return f"donation of {record.get('amount')} from {record.get('donor_name')}"
    return f"\"{record.get('title')}\""


def write_audit_log(repository, mosque_id, actor, action, details):
    entry = {
        'id': generate_id(Collection.AUDIT_LOGS.id_prefix),
        'mosque_id': mosque_id,
        'user': actor.get('name') or actor.get('username') or 'Unknown',
        'action': action,
        'date': datetime.now().strftime(AUDIT_DATE_FORMAT),
        'details': details,
    }
    return repository.add_record(Collection.AUDIT_LOGS, entry)


def list_records(repository, collection, mosque_id, public_only=False):
    """
    Lists a collection for one mosque.

    With public_only, announcements meant for members only are left out.
    """
    records = repository.list_records(collection, mosque_id)
    if public_only and collection is Collection.ANNOUNCEMENTS:
        records = [record for record in records if record.get('audience') == PUBLIC_AUDIENCE]
    return records


def add_record(repository, collection, mosque_id, data, actor):
    record = dict(data)
    record['id'] = generate_id(collection.id_prefix)
    record['mosque_id'] = mosque_id
    created = repository.add_record(collection, record)

    write_audit_log(repository, mosque_id, actor, f"{collection.label} Added",
                    f"Added {_describe(collection, created)}.")
    RECORD_MUTATIONS_TOTAL.labels(collection=collection.value, action='add').inc()
    current_app.logger.info(f"{collection.label} {created['id']} added to mosque {mosque_id}")
    return created


def update_record(repository, collection, record_id, data, actor):
    """Applies a partial update. Returns None when the record does not exist."""
    updated = repository.update_record(collection, record_id, dict(data))
    if updated is None:
        return None

    write_audit_log(repository, updated['mosque_id'], actor, f"{collection.label} Updated",
                    f"Updated {_describe(collection, updated)}.")
    RECORD_MUTATIONS_TOTAL.labels(collection=collection.value, action='update').inc()
    current_app.logger.info(f"{collection.label} {record_id} updated")
    return updated


def delete_record(repository, collection, record, actor):
    """Deletes an already loaded record. Returns False if it vanished in the meantime."""
    if not repository.delete_record(collection, record['id']):
        return False

    write_audit_log(repository, record['mosque_id'], actor, f"{collection.label} Deleted",
                    f"Deleted {_describe(collection, record)}.")
    RECORD_MUTATIONS_TOTAL.labels(collection=collection.value, action='delete').inc()
    current_app.logger.info(f"{collection.label} {record['id']} deleted")
    return True
