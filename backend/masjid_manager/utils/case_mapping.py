"""
Key mapping between the camelCase JSON wire format and the snake_case
storage schema.

Explicit mappings are consulted first; anything else falls back to a
regex conversion.
"""
import re

COLUMN_MAPPINGS = {
    'logo_url': 'logoUrl',
    'mosque_id': 'mosqueId',
    'password_hash': 'password_hash', # internal only, never renamed
    'donor_name': 'donorName',
    'created_at': 'createdAt',
}

REVERSE_COLUMN_MAPPINGS = {
    'logoUrl': 'logo_url',
    'mosqueId': 'mosque_id',
    'donorName': 'donor_name',
    'createdAt': 'created_at',
}

_SNAKE_SEGMENT = re.compile(r'_([a-z])')
_UPPER_LETTER = re.compile(r'[A-Z]')


def to_camel_key(key):
    if key in COLUMN_MAPPINGS:
        return COLUMN_MAPPINGS[key]
    return _SNAKE_SEGMENT.sub(lambda match: match.group(1).upper(), key)


def to_snake_key(key):
    if key in REVERSE_COLUMN_MAPPINGS:
        return REVERSE_COLUMN_MAPPINGS[key]
    return _UPPER_LETTER.sub(lambda match: '_' + match.group(0).lower(), key)


def to_camel_case(obj):
    """Recursively converts dict keys (inside lists too) to camelCase."""
    if isinstance(obj, list):
        return [to_camel_case(item) for item in obj]
    if isinstance(obj, dict):
        return {to_camel_key(key): to_camel_case(value) for key, value in obj.items()}
    return obj


def to_snake_case(obj):
    """Recursively converts dict keys (inside lists too) to snake_case."""
    if isinstance(obj, list):
        return [to_snake_case(item) for item in obj]
    if isinstance(obj, dict):
        return {to_snake_key(key): to_snake_case(value) for key, value in obj.items()}
    return obj
