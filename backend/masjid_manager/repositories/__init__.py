from flask import current_app

from .base import MasjidRepository
from .memory_repository import InMemoryRepository
from .sql_repository import SqlAlchemyRepository

EXTENSION_KEY = 'masjid_repository'


def create_repository(backend):
    """Builds the repository for the configured DATA_BACKEND ('sql' or 'memory')."""
    if backend == 'memory':
        return InMemoryRepository()
    if backend == 'sql':
        return SqlAlchemyRepository()
    raise ValueError(f"Unknown DATA_BACKEND '{backend}'. Use 'sql' or 'memory'.")


def get_repository():
    """Returns the repository owned by the current application."""
    return current_app.extensions[EXTENSION_KEY]
