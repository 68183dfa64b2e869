# masjid_manager/routes/collection_routes.py

from flask import request, g
from flask_smorest import Blueprint, abort
from marshmallow import ValidationError

from ..collection_types import Collection
from ..repositories import get_repository
from ..schemas import MessageSchema, SuccessSchema, check_booking
from ..services import record_service
from ..services.access_service import can_use_collection, is_public_collection
from ..utils.auth import jwt_optional, jwt_required

collection_bp = Blueprint(
    'Records',
    __name__,
    url_prefix='/api',
    description=(
        "Mosque scoped records. `collection` is one of members, prayerTimes, "
        "announcements, donations, events or auditLogs."
    )
)


def _get_collection(slug, writing=False):
    collection = Collection.from_slug(slug)
    if collection is None:
        abort(404, message=f"Unknown collection '{slug}'.")
    if writing and collection.is_read_only:
        abort(405, message=f"{collection.label}s are read-only.")
    return collection

def _require_access(collection, mosque_id):
    if not can_use_collection(g.user, collection, mosque_id):
        abort(403, message="You do not have access to this data.")

def _load(collection, partial=False):
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        abort(400, message="Request body must be a JSON object.")
    try:
        return payload, collection.schema(partial=partial).load(payload)
    except ValidationError as err:
        abort(422, errors={"json": err.messages})


@collection_bp.route('/mosques/<mosque_id>/<collection_slug>', methods=['GET'])
@jwt_optional
@collection_bp.alt_response(404, schema=MessageSchema, description="Unknown mosque or collection.")
def list_records(mosque_id, collection_slug):
    """
    List a collection of a mosque.

    Visitors without a token may read members, prayer times, events and
    announcements addressed to everyone. Signed in users read the
    collections their role opens, for the mosques they belong to.
    """
    collection = _get_collection(collection_slug)
    repository = get_repository()
    if not repository.get_mosque(mosque_id):
        abort(404, message="Mosque not found.")

    user = g.user
    if user and can_use_collection(user, collection, mosque_id):
        records = record_service.list_records(repository, collection, mosque_id)
    elif is_public_collection(collection):
        records = record_service.list_records(repository, collection, mosque_id, public_only=True)
    elif user is None:
        abort(401, message="Authentication required.")
    else:
        abort(403, message="You do not have access to this data.")

    return collection.schema(many=True).dump(records)

@collection_bp.route('/mosques/<mosque_id>/<collection_slug>', methods=['POST'])
@jwt_required
@collection_bp.alt_response(404, schema=MessageSchema, description="Unknown mosque or collection.")
@collection_bp.doc(security=[{"Bearer": []}])
def add_record(mosque_id, collection_slug):
    """Add a record to a collection of a mosque."""
    collection = _get_collection(collection_slug, writing=True)
    repository = get_repository()
    if not repository.get_mosque(mosque_id):
        abort(404, message="Mosque not found.")
    _require_access(collection, mosque_id)

    _, data = _load(collection)
    record = record_service.add_record(repository, collection, mosque_id, data, g.user)
    return collection.schema().dump(record), 201

@collection_bp.route('/<collection_slug>', methods=['PUT'])
@jwt_required
@collection_bp.alt_response(404, schema=MessageSchema, description="Unknown collection or record.")
@collection_bp.doc(security=[{"Bearer": []}])
def update_record(collection_slug):
    """Update a record. The body carries the record `id` and the fields to change."""
    collection = _get_collection(collection_slug, writing=True)
    payload, data = _load(collection, partial=True)

    record_id = payload.get('id')
    if not record_id:
        abort(400, message="Record id is required.")

    repository = get_repository()
    existing = repository.get_record(collection, record_id)
    if not existing:
        abort(404, message=f"{collection.label} not found.")
    _require_access(collection, existing['mosque_id'])
    if collection is Collection.EVENTS:
        # A partial body only carries one side of the booking rule
        merged = {**existing, **data}
        try:
            check_booking(merged.get('capacity'), merged.get('booked'))
        except ValidationError as err:
            abort(422, errors={"json": err.messages})

    record = record_service.update_record(repository, collection, record_id, data, g.user)
    if record is None:
        abort(404, message=f"{collection.label} not found.")
    return collection.schema().dump(record)

@collection_bp.route('/<collection_slug>/<doc_id>', methods=['DELETE'])
@jwt_required
@collection_bp.response(200, SuccessSchema)
@collection_bp.alt_response(404, schema=MessageSchema, description="Unknown collection or record.")
@collection_bp.doc(security=[{"Bearer": []}])
def delete_record(collection_slug, doc_id):
    collection = _get_collection(collection_slug, writing=True)
    repository = get_repository()
    existing = repository.get_record(collection, doc_id)
    if not existing:
        abort(404, message=f"{collection.label} not found.")
    _require_access(collection, existing['mosque_id'])

    if not record_service.delete_record(repository, collection, existing, g.user):
        abort(404, message=f"{collection.label} not found.")
    return {"success": True}
