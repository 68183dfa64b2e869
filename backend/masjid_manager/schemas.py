# masjid_manager/schemas.py

from datetime import date, datetime

from marshmallow import Schema, fields, validate, validates_schema, ValidationError, EXCLUDE

from .utils.case_mapping import to_camel_key
from .utils.constants import (
    Roles, PRAYER_NAMES, MEMBER_ROLES, ANNOUNCEMENT_AUDIENCES, EVENT_TYPES
)


def _today():
    return date.today().isoformat()


ISO_DATE_FORMAT = '%Y-%m-%d'


def validate_iso_date(value):
    # Dates are compared as strings, so only the zero padded form is accepted
    try:
        valid = datetime.strptime(value, ISO_DATE_FORMAT).strftime(ISO_DATE_FORMAT) == value
    except (TypeError, ValueError):
        valid = False
    if not valid:
        raise ValidationError("Must be a date in YYYY-MM-DD format.")


def check_booking(capacity, booked):
    if capacity is not None and booked is not None and booked > capacity:
        raise ValidationError("Booked places cannot exceed capacity.", field_name='booked')


class CamelCaseSchema(Schema):
    """Base schema: snake_case attributes in Python, camelCase keys on the wire."""

    class Meta:
        # The dashboard sends whole records back on edit; ignore what we don't know.
        unknown = EXCLUDE

    def on_bind_field(self, field_name, field_obj):
        field_obj.data_key = to_camel_key(field_obj.data_key or field_name)


class MessageSchema(Schema):
    message = fields.Str(required=True)

class SuccessSchema(Schema):
    success = fields.Bool(required=True)

class HealthSchema(Schema):
    status = fields.Str(required=True)


# --- Tenant ---

class MosqueSchema(CamelCaseSchema):
    """Schema for creating, updating and serializing a mosque."""
    id = fields.Str(dump_only=True)
    name = fields.Str(required=True, validate=validate.Length(min=1, max=200))
    address = fields.Str(load_default='', validate=validate.Length(max=255))
    logo_url = fields.Str(allow_none=True)


class MosqueUpdateSchema(MosqueSchema):
    """Mosque update body, loaded with partial=True so every field is optional."""


# --- Mosque scoped records ---

class MemberSchema(CamelCaseSchema):
    id = fields.Str(dump_only=True)
    mosque_id = fields.Str(dump_only=True)
    name = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    role = fields.Str(required=True, validate=validate.OneOf(MEMBER_ROLES))
    photo = fields.Str(allow_none=True)
    contact = fields.Str(allow_none=True)
    background = fields.Str(allow_none=True)

class PrayerTimeSchema(CamelCaseSchema):
    """
    A named prayer and its time of day.

    The time is deliberately not format-checked: both 'HH:MM' and
    'hh:mm AM/PM' are accepted and anything else degrades to midnight
    when the schedule is resolved.
    """
    id = fields.Str(dump_only=True)
    mosque_id = fields.Str(dump_only=True)
    name = fields.Str(required=True, validate=validate.OneOf(PRAYER_NAMES))
    time = fields.Str(required=True, validate=validate.Length(min=1, max=20))

class AnnouncementSchema(CamelCaseSchema):
    id = fields.Str(dump_only=True)
    mosque_id = fields.Str(dump_only=True)
    title = fields.Str(required=True, validate=validate.Length(min=1, max=150))
    body = fields.Str(required=True)
    audience = fields.Str(load_default='All', validate=validate.OneOf(ANNOUNCEMENT_AUDIENCES))
    date = fields.Str(load_default=_today, validate=validate_iso_date)

class DonationSchema(CamelCaseSchema):
    id = fields.Str(dump_only=True)
    mosque_id = fields.Str(dump_only=True)
    amount = fields.Float(required=True, validate=validate.Range(min=0, min_inclusive=False))
    donor_name = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    purpose = fields.Str(load_default='General Fund')
    date = fields.Str(load_default=_today, validate=validate_iso_date)

class CommunityEventSchema(CamelCaseSchema):
    id = fields.Str(dump_only=True)
    mosque_id = fields.Str(dump_only=True)
    title = fields.Str(required=True, validate=validate.Length(min=1, max=200))
    date = fields.Str(required=True, validate=validate_iso_date)
    type = fields.Str(load_default='Event', validate=validate.OneOf(EVENT_TYPES))
    capacity = fields.Int(allow_none=True, validate=validate.Range(min=0))
    booked = fields.Int(allow_none=True, validate=validate.Range(min=0))

    @validates_schema
    def validate_booking(self, data, **kwargs):
        check_booking(data.get('capacity'), data.get('booked'))

class AuditLogSchema(CamelCaseSchema):
    """Audit log entries are written by the server only."""
    id = fields.Str(dump_only=True)
    mosque_id = fields.Str(dump_only=True)
    user = fields.Str(dump_only=True)
    action = fields.Str(dump_only=True)
    date = fields.Str(dump_only=True)
    details = fields.Str(dump_only=True)


# --- Users & authentication ---

class UserSchema(CamelCaseSchema):
    """Public view of a user; the password hash is never serialized."""
    id = fields.Str(dump_only=True)
    name = fields.Str(dump_only=True)
    username = fields.Str(dump_only=True)
    email = fields.Str(dump_only=True)
    role = fields.Str(dump_only=True)
    mosque_id = fields.Str(dump_only=True)
    address = fields.Str(dump_only=True)
    avatar = fields.Str(dump_only=True)

class LoginSchema(CamelCaseSchema):
    # Either an email address or a username
    email = fields.Str(required=True, validate=validate.Length(min=1))
    password = fields.Str(required=True, load_only=True)

class RegistrationSchema(CamelCaseSchema):
    name = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    username = fields.Str(required=True, validate=validate.Length(min=3, max=50, error="Username must be at least 3 characters long"))
    password = fields.Str(required=True, load_only=True, validate=validate.Length(min=8, error="Password must be at least 8 characters long"))
    email = fields.Email(load_default=None, allow_none=True)
    role = fields.Str(load_default=Roles.MUAZZIN, validate=validate.OneOf(Roles.SELF_REGISTRATION))
    mosque_id = fields.Str(required=True, validate=validate.Length(min=1, error="Please select a mosque"))
    address = fields.Str(load_default=None, allow_none=True)

class AuthResponseSchema(Schema):
    user = fields.Nested(UserSchema, required=True)
    token = fields.Str(required=True)

class ProfileUpdateSchema(CamelCaseSchema):
    name = fields.Str(validate=validate.Length(min=1, max=100))
    email = fields.Email(allow_none=True)
    avatar = fields.Str(allow_none=True)

class PasswordChangeSchema(CamelCaseSchema):
    current_password = fields.Str(required=True, load_only=True)
    new_password = fields.Str(required=True, load_only=True)

class SessionQuerySchema(CamelCaseSchema):
    mosque_id = fields.Str()

class SessionSchema(Schema):
    user = fields.Nested(UserSchema, required=True)
    pages = fields.List(fields.Str(), required=True)
    mosque = fields.Nested(MosqueSchema, allow_none=True)


# --- Dashboard summary ---

class NextPrayerSchema(CamelCaseSchema):
    id = fields.Str()
    name = fields.Str()
    time = fields.Str()

class MosqueSummarySchema(CamelCaseSchema):
    next_prayer = fields.Nested(NextPrayerSchema, allow_none=True)
    member_count = fields.Int(required=True)
    upcoming_event_count = fields.Int(required=True)
