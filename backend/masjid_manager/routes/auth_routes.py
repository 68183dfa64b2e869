# masjid_manager/routes/auth_routes.py

from flask import current_app, g
from flask_smorest import Blueprint, abort

from ..extensions import limiter
from ..repositories import get_repository
from ..schemas import (
    LoginSchema, RegistrationSchema, AuthResponseSchema, UserSchema, ProfileUpdateSchema,
    PasswordChangeSchema, SessionQuerySchema, SessionSchema, MessageSchema
)
from ..services import user_service, access_service
from ..utils.auth import create_access_token, jwt_required
from ..utils.constants import Roles

auth_bp = Blueprint(
    'Auth',
    __name__,
    url_prefix='/api',
    description="Sign in, registration and user profiles."
)

@auth_bp.route('/login', methods=['POST'])
@limiter.limit(lambda: current_app.config['LOGIN_RATE_LIMIT'])
@auth_bp.arguments(LoginSchema)
@auth_bp.response(200, AuthResponseSchema)
@auth_bp.alt_response(401, schema=MessageSchema, description="Invalid credentials.")
def login(data):
    """
    Sign in with an email address or a username.

    The `email` field accepts either; the response carries the user and a
    bearer token for the other endpoints.
    """
    user = user_service.authenticate(get_repository(), data['email'], data['password'])
    if not user:
        abort(401, message="Invalid credentials")
    return {"user": user, "token": create_access_token(user)}

@auth_bp.route('/register', methods=['POST'])
@auth_bp.arguments(RegistrationSchema)
@auth_bp.response(201, AuthResponseSchema)
@auth_bp.alt_response(400, schema=MessageSchema, description="The selected mosque does not exist.")
@auth_bp.alt_response(409, schema=MessageSchema, description="Username or email already taken.")
def register(data):
    """Self registration for Imams and Muazzins of an existing mosque."""
    result = user_service.register_user(get_repository(), data)
    if result['status'] == 'mosque_not_found':
        abort(400, message=result['message'])
    if result['status'] == 'conflict':
        abort(409, message=result['message'])

    user = result['user']
    return {"user": user, "token": create_access_token(user)}

@auth_bp.route('/session')
@jwt_required
@auth_bp.arguments(SessionQuerySchema, location='query')
@auth_bp.response(200, SessionSchema)
@auth_bp.doc(security=[{"Bearer": []}])
def session(args):
    """The signed in user, the pages of their role and the mosque to open."""
    user = g.user
    mosques = get_repository().list_mosques()
    return {
        "user": user_service.public_user(user),
        "pages": access_service.allowed_pages(user['role']),
        "mosque": access_service.select_mosque(user, mosques, args.get('mosque_id')),
    }

@auth_bp.route('/users/<user_id>')
@jwt_required
@auth_bp.response(200, UserSchema)
@auth_bp.alt_response(404, schema=MessageSchema, description="User not found.")
@auth_bp.doc(security=[{"Bearer": []}])
def get_user(user_id):
    user = get_repository().get_user(user_id)
    if not user:
        abort(404, message="User not found")
    return user_service.public_user(user)

@auth_bp.route('/users/email/<email>')
@jwt_required
@auth_bp.response(200, UserSchema)
@auth_bp.alt_response(404, schema=MessageSchema, description="User not found.")
@auth_bp.doc(security=[{"Bearer": []}])
def get_user_by_email(email):
    user = get_repository().find_user_by_email(email)
    if not user:
        abort(404, message="User not found")
    return user_service.public_user(user)

@auth_bp.route('/users/<user_id>', methods=['PUT'])
@jwt_required
@auth_bp.arguments(ProfileUpdateSchema)
@auth_bp.response(200, UserSchema)
@auth_bp.alt_response(400, schema=MessageSchema, description="No profile fields were sent.")
@auth_bp.alt_response(403, schema=MessageSchema, description="Not your profile.")
@auth_bp.doc(security=[{"Bearer": []}])
def update_profile(data, user_id):
    """Update name, email or avatar. Admins may edit anyone."""
    if g.user['id'] != user_id and g.user['role'] != Roles.ADMIN:
        abort(403, message="You can only edit your own profile.")

    result = user_service.update_profile(get_repository(), user_id, data)
    if result['status'] == 'no_changes':
        abort(400, message=result['message'])
    if result['status'] == 'not_found':
        abort(404, message=result['message'])
    if result['status'] == 'conflict':
        abort(409, message=result['message'])
    return result['user']

@auth_bp.route('/users/<user_id>/password', methods=['POST'])
@jwt_required
@auth_bp.arguments(PasswordChangeSchema)
@auth_bp.response(200, MessageSchema)
@auth_bp.alt_response(400, schema=MessageSchema, description="Wrong current password or new password too short.")
@auth_bp.doc(security=[{"Bearer": []}])
def change_password(data, user_id):
    if g.user['id'] != user_id:
        abort(403, message="You can only change your own password.")

    result = user_service.change_password(
        get_repository(), user_id, data['current_password'], data['new_password']
    )
    if result['status'] == 'not_found':
        abort(404, message=result['message'])
    if result['status'] == 'invalid':
        abort(400, message=result['message'])
    return {"message": result['message']}
