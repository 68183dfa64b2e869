# masjid_manager/collection_types.py

import enum

from .models import Member, PrayerTime, Announcement, Donation, CommunityEvent, AuditLog
from .schemas import (
    MemberSchema, PrayerTimeSchema, AnnouncementSchema, DonationSchema,
    CommunityEventSchema, AuditLogSchema
)
from .utils.constants import Pages


class Collection(enum.Enum):
    """
    The closed set of mosque scoped record kinds.

    The value is the slug used in URLs (and by the dashboard), e.g.
    GET /api/mosques/<id>/prayerTimes.
    """
    MEMBERS = 'members'
    PRAYER_TIMES = 'prayerTimes'
    ANNOUNCEMENTS = 'announcements'
    DONATIONS = 'donations'
    EVENTS = 'events'
    AUDIT_LOGS = 'auditLogs'

    @classmethod
    def from_slug(cls, slug):
        """Returns the matching collection, or None for an unknown slug."""
        try:
            return cls(slug)
        except ValueError:
            return None

    @property
    def model(self):
        return _MODELS[self]

    @property
    def schema(self):
        return _SCHEMAS[self]

    @property
    def page(self):
        return _PAGES[self]

    @property
    def label(self):
        """Singular, human readable name used in audit log actions."""
        return _LABELS[self]

    @property
    def id_prefix(self):
        return self.value[:3]

    @property
    def is_read_only(self):
        return self is Collection.AUDIT_LOGS


_MODELS = {
    Collection.MEMBERS: Member,
    Collection.PRAYER_TIMES: PrayerTime,
    Collection.ANNOUNCEMENTS: Announcement,
    Collection.DONATIONS: Donation,
    Collection.EVENTS: CommunityEvent,
    Collection.AUDIT_LOGS: AuditLog,
}

_SCHEMAS = {
    Collection.MEMBERS: MemberSchema,
    Collection.PRAYER_TIMES: PrayerTimeSchema,
    Collection.ANNOUNCEMENTS: AnnouncementSchema,
    Collection.DONATIONS: DonationSchema,
    Collection.EVENTS: CommunityEventSchema,
    Collection.AUDIT_LOGS: AuditLogSchema,
}

_PAGES = {
    Collection.MEMBERS: Pages.MEMBERS,
    Collection.PRAYER_TIMES: Pages.TIMINGS,
    Collection.ANNOUNCEMENTS: Pages.ANNOUNCEMENTS,
    Collection.DONATIONS: Pages.DONATIONS,
    Collection.EVENTS: Pages.EVENTS,
    Collection.AUDIT_LOGS: Pages.AUDIT,
}

_LABELS = {
    Collection.MEMBERS: 'Member',
    Collection.PRAYER_TIMES: 'Prayer Time',
    Collection.ANNOUNCEMENTS: 'Announcement',
    Collection.DONATIONS: 'Donation',
    Collection.EVENTS: 'Event',
    Collection.AUDIT_LOGS: 'Audit Log',
}

# Collections anonymous visitors may read on the public landing page
PUBLIC_COLLECTIONS = frozenset({
    Collection.MEMBERS,
    Collection.PRAYER_TIMES,
    Collection.ANNOUNCEMENTS,
    Collection.EVENTS,
})
