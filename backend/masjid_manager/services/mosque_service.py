from flask import current_app

from ..models import generate_id
from ..utils.avatar import generate_logo_url


def create_mosque(repository, data):
    """Creates a mosque; a logo is generated from the name unless one was given."""
    record = {
        'id': generate_id('mosque'),
        'name': data['name'],
        'address': data.get('address', ''),
        'logo_url': data.get('logo_url') or generate_logo_url(data['name']),
    }
    mosque = repository.add_mosque(record)
    current_app.logger.info(f"Mosque '{mosque['name']}' created with ID {mosque['id']}")
    return mosque


def update_mosque(repository, mosque_id, data):
    """Applies a partial update. Returns None when the mosque does not exist."""
    changes = {key: data[key] for key in ('name', 'address', 'logo_url') if key in data}
    if not changes:
        return repository.get_mosque(mosque_id)
    return repository.update_mosque(mosque_id, changes)


def delete_mosque(repository, mosque_id):
    deleted = repository.delete_mosque(mosque_id)
    if deleted:
        current_app.logger.info(f"Mosque {mosque_id} and all of its records were deleted")
    return deleted
