# masjid_manager/routes/mosque_routes.py

from flask_smorest import Blueprint, abort
from sqlalchemy.exc import SQLAlchemyError

from ..metrics import SUMMARY_REQUESTS_TOTAL
from ..repositories import get_repository
from ..schemas import MosqueSchema, MosqueUpdateSchema, MosqueSummarySchema, MessageSchema, SuccessSchema
from ..services import mosque_service, summary_service
from ..utils.auth import role_required
from ..utils.constants import Roles

mosque_bp = Blueprint(
    'Mosques',
    __name__,
    url_prefix='/api/mosques',
    description="Mosques (tenants) and their dashboard summary."
)

@mosque_bp.route('', methods=['GET'])
@mosque_bp.response(200, MosqueSchema(many=True))
def list_mosques():
    """All mosques, used by the mosque picker and the registration form."""
    return get_repository().list_mosques()

@mosque_bp.route('', methods=['POST'])
@role_required(Roles.ADMIN)
@mosque_bp.arguments(MosqueSchema)
@mosque_bp.response(201, MosqueSchema)
@mosque_bp.doc(security=[{"Bearer": []}])
def create_mosque(data):
    return mosque_service.create_mosque(get_repository(), data)

@mosque_bp.route('/<mosque_id>', methods=['PUT'])
@role_required(Roles.ADMIN)
@mosque_bp.arguments(MosqueUpdateSchema(partial=True))
@mosque_bp.response(200, MosqueSchema)
@mosque_bp.alt_response(404, schema=MessageSchema, description="Mosque not found.")
@mosque_bp.doc(security=[{"Bearer": []}])
def update_mosque(data, mosque_id):
    mosque = mosque_service.update_mosque(get_repository(), mosque_id, data)
    if mosque is None:
        abort(404, message="Mosque not found.")
    return mosque

@mosque_bp.route('/<mosque_id>', methods=['DELETE'])
@role_required(Roles.ADMIN)
@mosque_bp.response(200, SuccessSchema)
@mosque_bp.alt_response(404, schema=MessageSchema, description="Mosque not found.")
@mosque_bp.doc(security=[{"Bearer": []}])
def delete_mosque(mosque_id):
    """Deletes a mosque together with every record scoped to it."""
    if not mosque_service.delete_mosque(get_repository(), mosque_id):
        abort(404, message="Mosque not found.")
    return {"success": True}

@mosque_bp.route('/<mosque_id>/summary')
@mosque_bp.response(200, MosqueSummarySchema)
@mosque_bp.alt_response(404, schema=MessageSchema, description="Mosque not found.")
def get_summary(mosque_id):
    """
    Dashboard summary of a mosque.

    Returns the next prayer of the day (wrapping to tomorrow's first prayer
    after the last one has passed), the number of members and the number of
    events dated today or later.
    """
    repository = get_repository()
    if not repository.get_mosque(mosque_id):
        SUMMARY_REQUESTS_TOTAL.labels(status='not_found').inc()
        abort(404, message="Mosque not found.")

    try:
        summary = summary_service.get_mosque_summary(
            repository, mosque_id, on_fallback=summary_service.log_parse_fallback(mosque_id)
        )
    except SQLAlchemyError:
        SUMMARY_REQUESTS_TOTAL.labels(status='error').inc()
        raise
    SUMMARY_REQUESTS_TOTAL.labels(status='success').inc()
    return summary
