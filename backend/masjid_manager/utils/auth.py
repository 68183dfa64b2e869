# masjid_manager/utils/auth.py
from functools import wraps
from datetime import datetime, timedelta, timezone

import jwt
from flask import request, jsonify, current_app, g

from ..repositories import get_repository


def create_access_token(user):
    """Issues a signed HS256 token for a user dict."""
    now = datetime.now(timezone.utc)
    payload = {
        'sub': user['id'],
        'role': user['role'],
        'aud': current_app.config['JWT_AUDIENCE'],
        'iat': now,
        'exp': now + timedelta(seconds=current_app.config['JWT_EXPIRES_SECONDS']),
    }
    return jwt.encode(payload, current_app.config['SECRET_KEY'], algorithm='HS256')


def _validate_token_and_get_user():
    """Helper function to validate the bearer token and set g.user. Returns (success, error)."""
    token = None
    auth_header = request.headers.get("authorization")
    if auth_header and auth_header.startswith("Bearer "):
        token = auth_header.split(" ")[1]

    if not token:
        return False, ("Authentication token is missing!", 401)

    try:
        payload = jwt.decode(
            token,
            current_app.config['SECRET_KEY'],
            algorithms=["HS256"],
            audience=current_app.config['JWT_AUDIENCE'],
        )
    except jwt.ExpiredSignatureError:
        return False, ("Token has expired!", 401)
    except jwt.InvalidTokenError:
        return False, ("Invalid authentication token!", 401)

    user = get_repository().get_user(payload.get('sub'))
    if not user:
        return False, ("Could not identify user profile.", 401)
    g.user = user
    return True, None


def jwt_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        success, error = _validate_token_and_get_user()
        if not success:
            message, code = error
            return jsonify({"error": message}), code
        return f(*args, **kwargs)
    return decorated_function


def jwt_optional(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        g.user = None
        auth_header = request.headers.get("authorization")
        if auth_header:
            success, _ = _validate_token_and_get_user()
            if not success: # An invalid token is treated as a guest
                g.user = None
        return f(*args, **kwargs)
    return decorated_function


def role_required(*roles):
    def decorator(f):
        @wraps(f)
        @jwt_required
        def decorated_function(*args, **kwargs):
            if g.user['role'] not in roles:
                return jsonify({"error": f"Role '{' or '.join(roles)}' required."}), 403
            return f(*args, **kwargs)
        return decorated_function
    return decorator
