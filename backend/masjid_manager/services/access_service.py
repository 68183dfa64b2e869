"""
Role based views and tenant scoping.

Admins see every page of every mosque. Imams and Muazzins only see the
pages of their role, and only for the mosque they belong to.
"""
from ..collection_types import PUBLIC_COLLECTIONS
from ..utils.constants import Roles, Pages, ROLE_PAGES


def allowed_pages(role):
    """Pages for a role, in navigation order. Unknown roles get nothing."""
    pages = ROLE_PAGES.get(role, set())
    return [page for page in Pages.ORDER if page in pages]


def can_access_mosque(user, mosque_id):
    if user['role'] == Roles.ADMIN:
        return True
    return user.get('mosque_id') is not None and user.get('mosque_id') == mosque_id


def can_use_collection(user, collection, mosque_id):
    """Whether a signed-in user may read and change a collection of a mosque."""
    return collection.page in ROLE_PAGES.get(user['role'], set()) and can_access_mosque(user, mosque_id)


def is_public_collection(collection):
    return collection in PUBLIC_COLLECTIONS


def select_mosque(user, mosques, requested_id=None):
    """
    Picks the mosque a user lands on after signing in.

    The requested mosque wins when the user may see it. Otherwise Imams and
    Muazzins get their own mosque and Admins the first one. Returns None
    when nothing fits.
    """
    if requested_id:
        for mosque in mosques:
            if mosque['id'] == requested_id and can_access_mosque(user, requested_id):
                return mosque

    if user['role'] == Roles.ADMIN:
        return mosques[0] if mosques else None

    for mosque in mosques:
        if mosque['id'] == user.get('mosque_id'):
            return mosque
    return None
