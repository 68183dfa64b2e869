"""
User Service
------------
Account handling for dashboard users: signing in with an email address or a
username, self registration of Imams and Muazzins, profile edits and
password changes. Passwords are stored as werkzeug hashes only.
"""
from flask import current_app
from werkzeug.security import generate_password_hash, check_password_hash

from ..models import generate_id
from ..utils.avatar import generate_avatar_url
from ..utils.constants import Roles

MIN_NEW_PASSWORD_LENGTH = 6


def public_user(user):
    """Returns a copy of a user dict without the password hash."""
    if user is None:
        return None
    return {key: value for key, value in user.items() if key != 'password_hash'}


def authenticate(repository, identifier, password):
    """
    Checks credentials. ``identifier`` may be an email address or a username.
    Returns the public user on success, otherwise None.
    """
    user = repository.find_user_by_email(identifier) or repository.find_user_by_username(identifier)
    if not user or not check_password_hash(user['password_hash'], password):
        current_app.logger.info(f"Failed login attempt for '{identifier}'")
        return None
    current_app.logger.info(f"User {user['id']} signed in")
    return public_user(user)


def register_user(repository, data):
    """
    Registers an Imam or Muazzin for an existing mosque.

    Returns a dict with 'status' ('success', 'mosque_not_found' or
    'conflict'), a 'message' and, on success, the new 'user'.
    """
    if not repository.get_mosque(data['mosque_id']):
        return {"status": "mosque_not_found", "message": "Selected mosque does not exist."}
    if repository.find_user_by_username(data['username']):
        return {"status": "conflict", "message": "Username is already taken."}
    if data.get('email') and repository.find_user_by_email(data['email']):
        return {"status": "conflict", "message": "Email is already registered."}

    record = {
        'id': generate_id('user'),
        'name': data['name'],
        'username': data['username'],
        'email': data.get('email'),
        'password_hash': generate_password_hash(data['password']),
        'role': data.get('role', Roles.MUAZZIN),
        'mosque_id': data['mosque_id'],
        'address': data.get('address'),
        'avatar': generate_avatar_url(data['name']),
    }
    user = repository.add_user(record)
    current_app.logger.info(f"Registered {user['role']} {user['username']} for mosque {user['mosque_id']}")
    return {"status": "success", "message": "Registration successful.", "user": public_user(user)}


def update_profile(repository, user_id, data):
    """
    Updates name, email and avatar. Returns a status dict like register_user;
    'no_changes' when nothing editable was sent.
    """
    changes = {key: data[key] for key in ('name', 'email', 'avatar') if key in data}
    if not changes:
        return {"status": "no_changes", "message": "No profile fields to update"}

    if changes.get('email'):
        existing = repository.find_user_by_email(changes['email'])
        if existing and existing['id'] != user_id:
            return {"status": "conflict", "message": "Email is already registered."}

    user = repository.update_user(user_id, changes)
    if user is None:
        return {"status": "not_found", "message": "User not found"}
    return {"status": "success", "message": "Profile updated.", "user": public_user(user)}


def change_password(repository, user_id, current_password, new_password):
    user = repository.get_user(user_id)
    if not user:
        return {"status": "not_found", "message": "User not found"}
    if not check_password_hash(user['password_hash'], current_password):
        return {"status": "invalid", "message": "Current password is incorrect"}
    if not new_password or len(new_password) < MIN_NEW_PASSWORD_LENGTH:
        return {"status": "invalid", "message": "New password too short."}

    repository.update_user(user_id, {'password_hash': generate_password_hash(new_password)})
    current_app.logger.info(f"Password changed for user {user_id}")
    return {"status": "success", "message": "Password updated."}
