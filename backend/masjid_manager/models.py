# masjid_manager/models.py

import random
import string
from datetime import datetime

from .extensions import db

ID_ALPHABET = string.ascii_letters + string.digits + '_-'
ID_SIZE = 21


def generate_id(prefix, size=ID_SIZE):
    """Generates a prefixed, random identifier such as 'mosque-V1StGXR8_Z5jdHi6B-myT'."""
    token = ''.join(random.choice(ID_ALPHABET) for _ in range(size))
    return f'{prefix}-{token}'


class SerializerMixin:
    """Gives every model a plain snake_case dict of its columns."""

    _hidden_columns = ()

    def to_dict(self):
        return {column.name: getattr(self, column.name) for column in self.__table__.columns
                if column.name not in self._hidden_columns}


class ScopedRecordMixin(SerializerMixin):
    """
    Columns shared by the mosque scoped records.

    created_at only fixes the listing order (entry order), it is not part of
    the record itself.
    """
    _hidden_columns = ('created_at',)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)


# --- Tenant ---

class Mosque(SerializerMixin, db.Model):
    """The top-level tenant. Every other record belongs to exactly one mosque."""
    __tablename__ = 'mosques'

    id = db.Column(db.String(64), primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    address = db.Column(db.String(255), nullable=False, default='')
    logo_url = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f'<Mosque ID:{self.id} Name:{self.name}>'


class User(SerializerMixin, db.Model):
    """A dashboard account. Admins may exist without a mosque, Imams and Muazzins belong to one."""
    __tablename__ = 'users'

    id = db.Column(db.String(64), primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    username = db.Column(db.String(50), unique=True, nullable=True, index=True)
    email = db.Column(db.String(120), unique=True, nullable=True, index=True)
    password_hash = db.Column(db.String(255), nullable=False)

    # Role-Based Access Control
    # Possible values: 'Admin', 'Imam', 'Muazzin'
    role = db.Column(db.String(20), nullable=False, default='Admin')

    mosque_id = db.Column(db.String(64), db.ForeignKey('mosques.id', ondelete='SET NULL'), nullable=True, index=True)
    address = db.Column(db.String(255), nullable=True)
    avatar = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f'<User {self.username or self.email} - {self.role}>'


# --- Mosque scoped records ---

class Member(ScopedRecordMixin, db.Model):
    __tablename__ = 'members'

    id = db.Column(db.String(64), primary_key=True)
    mosque_id = db.Column(db.String(64), db.ForeignKey('mosques.id', ondelete='CASCADE'), nullable=False, index=True)
    name = db.Column(db.String(100), nullable=False)
    # 'Imam', 'Muazzin', 'Committee' or 'Volunteer'
    role = db.Column(db.String(20), nullable=False, default='Volunteer')
    photo = db.Column(db.Text, nullable=True)
    contact = db.Column(db.String(255), nullable=True)
    background = db.Column(db.Text, nullable=True)

    def __repr__(self):
        return f'<Member ID:{self.id} Name:{self.name} Role:{self.role}>'


class PrayerTime(ScopedRecordMixin, db.Model):
    """
    One named daily prayer of a mosque's schedule.

    The time is kept exactly as entered ('05:30 AM' or '17:45'); parsing is
    left to the schedule resolver, which is lenient about malformed values.
    """
    __tablename__ = 'prayer_times'

    id = db.Column(db.String(64), primary_key=True)
    mosque_id = db.Column(db.String(64), db.ForeignKey('mosques.id', ondelete='CASCADE'), nullable=False, index=True)
    name = db.Column(db.String(20), nullable=False)
    time = db.Column(db.String(20), nullable=False)

    def __repr__(self):
        return f'<PrayerTime {self.name} at {self.time}>'


class Announcement(ScopedRecordMixin, db.Model):
    __tablename__ = 'announcements'

    id = db.Column(db.String(64), primary_key=True)
    mosque_id = db.Column(db.String(64), db.ForeignKey('mosques.id', ondelete='CASCADE'), nullable=False, index=True)
    title = db.Column(db.String(150), nullable=False)
    body = db.Column(db.Text, nullable=False)
    # 'All' or 'Members only'
    audience = db.Column(db.String(20), nullable=False, default='All')
    date = db.Column(db.String(10), nullable=False)

    def __repr__(self):
        return f'<Announcement ID:{self.id} Title:{self.title}>'


class Donation(ScopedRecordMixin, db.Model):
    __tablename__ = 'donations'

    id = db.Column(db.String(64), primary_key=True)
    mosque_id = db.Column(db.String(64), db.ForeignKey('mosques.id', ondelete='CASCADE'), nullable=False, index=True)
    amount = db.Column(db.Float, nullable=False)
    donor_name = db.Column(db.String(100), nullable=False)
    purpose = db.Column(db.String(255), nullable=True)
    date = db.Column(db.String(10), nullable=False)

    def __repr__(self):
        return f'<Donation ID:{self.id} Amount:{self.amount}>'


class CommunityEvent(ScopedRecordMixin, db.Model):
    __tablename__ = 'community_events'

    id = db.Column(db.String(64), primary_key=True)
    mosque_id = db.Column(db.String(64), db.ForeignKey('mosques.id', ondelete='CASCADE'), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    # ISO date string (YYYY-MM-DD); compared as a string for "upcoming" checks
    date = db.Column(db.String(10), nullable=False, index=True)
    # 'Event' or 'Iftari Slot'
    type = db.Column(db.String(20), nullable=False, default='Event')
    capacity = db.Column(db.Integer, nullable=True)
    booked = db.Column(db.Integer, nullable=True)

    def __repr__(self):
        return f'<CommunityEvent ID:{self.id} Title:{self.title} Date:{self.date}>'


class AuditLog(ScopedRecordMixin, db.Model):
    """Tracks every change made through the dashboard for accountability."""
    __tablename__ = 'audit_logs'

    id = db.Column(db.String(64), primary_key=True)
    mosque_id = db.Column(db.String(64), db.ForeignKey('mosques.id', ondelete='CASCADE'), nullable=False, index=True)
    # Display name of the acting user
    user = db.Column(db.String(100), nullable=False)
    # e.g. 'Member Added', 'Prayer Time Updated'
    action = db.Column(db.String(100), nullable=False)
    date = db.Column(db.String(20), nullable=False)
    details = db.Column(db.Text, nullable=True)

    def __repr__(self):
        return f'<AuditLog ID:{self.id} Action:{self.action}>'
