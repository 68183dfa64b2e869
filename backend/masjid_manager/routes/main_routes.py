# masjid_manager/routes/main_routes.py

from flask_smorest import Blueprint
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from ..schemas import HealthSchema

main_bp = Blueprint('Main', __name__, description="Service health and metrics.")

@main_bp.route('/api/health')
@main_bp.response(200, HealthSchema)
def health():
    """Liveness check."""
    return {"status": "ok"}

@main_bp.route('/metrics')
def metrics():
    return generate_latest(), 200, {'Content-Type': CONTENT_TYPE_LATEST}
