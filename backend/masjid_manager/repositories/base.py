# This module defines the storage interface shared by every repository backend.
from abc import ABC, abstractmethod

class MasjidRepository(ABC):
    """
    Abstract base class for the storage layer. Records cross this interface
    as plain dictionaries keyed by snake_case column names, so callers never
    depend on whether the data lives in a database or in memory.

    Reads of missing rows return None; updates and deletes of missing rows
    return None / False. Backend failures are not caught here.
    """

    # --- Mosques ---

    @abstractmethod
    def list_mosques(self):
        """Returns every mosque, oldest first."""
        pass

    @abstractmethod
    def get_mosque(self, mosque_id):
        pass

    @abstractmethod
    def add_mosque(self, record):
        """Stores a new mosque. The record must already carry its id."""
        pass

    @abstractmethod
    def update_mosque(self, mosque_id, changes):
        pass

    @abstractmethod
    def delete_mosque(self, mosque_id):
        """Deletes a mosque together with every record scoped to it."""
        pass

    # --- Mosque scoped records ---

    @abstractmethod
    def list_records(self, collection, mosque_id):
        pass

    @abstractmethod
    def get_record(self, collection, record_id):
        pass

    @abstractmethod
    def add_record(self, collection, record):
        pass

    @abstractmethod
    def update_record(self, collection, record_id, changes):
        pass

    @abstractmethod
    def delete_record(self, collection, record_id):
        pass

    @abstractmethod
    def count_records(self, collection, mosque_id):
        pass

    @abstractmethod
    def count_events_since(self, mosque_id, iso_date):
        """Counts community events whose date string is >= iso_date."""
        pass

    # --- Users ---

    @abstractmethod
    def get_user(self, user_id):
        pass

    @abstractmethod
    def find_user_by_email(self, email):
        pass

    @abstractmethod
    def find_user_by_username(self, username):
        pass

    @abstractmethod
    def add_user(self, record):
        pass

    @abstractmethod
    def update_user(self, user_id, changes):
        pass
