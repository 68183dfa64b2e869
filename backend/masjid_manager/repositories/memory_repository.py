import copy

from ..collection_types import Collection
from .base import MasjidRepository


class InMemoryRepository(MasjidRepository):
    """
    Keeps all data in dictionaries owned by the instance.

    Used for the demo mode (DATA_BACKEND='memory') and by unit tests. Every
    read returns a copy so callers cannot mutate the stored rows.
    """

    def __init__(self):
        self._mosques = {}
        self._users = {}
        self._records = {collection: {} for collection in Collection}

    # --- Mosques ---

    def list_mosques(self):
        return [copy.deepcopy(mosque) for mosque in self._mosques.values()]

    def get_mosque(self, mosque_id):
        mosque = self._mosques.get(mosque_id)
        return copy.deepcopy(mosque) if mosque else None

    def add_mosque(self, record):
        self._mosques[record['id']] = copy.deepcopy(record)
        return self.get_mosque(record['id'])

    def update_mosque(self, mosque_id, changes):
        mosque = self._mosques.get(mosque_id)
        if mosque is None:
            return None
        mosque.update(changes)
        return self.get_mosque(mosque_id)

    def delete_mosque(self, mosque_id):
        if self._mosques.pop(mosque_id, None) is None:
            return False
        for store in self._records.values():
            for record_id in [rid for rid, record in store.items() if record['mosque_id'] == mosque_id]:
                del store[record_id]
        for user in self._users.values():
            if user.get('mosque_id') == mosque_id:
                user['mosque_id'] = None
        return True

    # --- Mosque scoped records ---

    def list_records(self, collection, mosque_id):
        return [copy.deepcopy(record) for record in self._records[collection].values()
                if record['mosque_id'] == mosque_id]

    def get_record(self, collection, record_id):
        record = self._records[collection].get(record_id)
        return copy.deepcopy(record) if record else None

    def add_record(self, collection, record):
        self._records[collection][record['id']] = copy.deepcopy(record)
        return self.get_record(collection, record['id'])

    def update_record(self, collection, record_id, changes):
        record = self._records[collection].get(record_id)
        if record is None:
            return None
        record.update(changes)
        return self.get_record(collection, record_id)

    def delete_record(self, collection, record_id):
        return self._records[collection].pop(record_id, None) is not None

    def count_records(self, collection, mosque_id):
        return sum(1 for record in self._records[collection].values() if record['mosque_id'] == mosque_id)

    def count_events_since(self, mosque_id, iso_date):
        return sum(1 for event in self._records[Collection.EVENTS].values()
                   if event['mosque_id'] == mosque_id and event['date'] >= iso_date)

    # --- Users ---

    def get_user(self, user_id):
        user = self._users.get(user_id)
        return copy.deepcopy(user) if user else None

    def find_user_by_email(self, email):
        for user in self._users.values():
            if email and user.get('email') == email:
                return copy.deepcopy(user)
        return None

    def find_user_by_username(self, username):
        for user in self._users.values():
            if username and user.get('username') == username:
                return copy.deepcopy(user)
        return None

    def add_user(self, record):
        self._users[record['id']] = copy.deepcopy(record)
        return self.get_user(record['id'])

    def update_user(self, user_id, changes):
        user = self._users.get(user_id)
        if user is None:
            return None
        user.update(changes)
        return self.get_user(user_id)
