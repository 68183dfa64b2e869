# masjid_manager/utils/constants.py

class Roles:
    """
    Defines the account role names used throughout the application.
    All role names live in this single place to prevent typos.
    """
    ADMIN = 'Admin'
    IMAM = 'Imam'
    MUAZZIN = 'Muazzin'

    ALL = (ADMIN, IMAM, MUAZZIN)
    # Roles that can be chosen on the public registration form
    SELF_REGISTRATION = (IMAM, MUAZZIN)


class Pages:
    """Dashboard pages a signed-in user can navigate to."""
    DASHBOARD = 'Dashboard'
    MOSQUES = 'Mosques'
    MEMBERS = 'Members'
    TIMINGS = 'Timings'
    ANNOUNCEMENTS = 'Announcements'
    DONATIONS = 'Donations'
    EVENTS = 'Events'
    AUDIT = 'Audit'
    PROFILE = 'Profile'

    ORDER = (DASHBOARD, MOSQUES, MEMBERS, TIMINGS, ANNOUNCEMENTS, DONATIONS, EVENTS, AUDIT, PROFILE)


ROLE_PAGES = {
    Roles.ADMIN: set(Pages.ORDER),
    Roles.IMAM: {Pages.DASHBOARD, Pages.MEMBERS, Pages.TIMINGS, Pages.ANNOUNCEMENTS, Pages.EVENTS, Pages.PROFILE},
    Roles.MUAZZIN: {Pages.DASHBOARD, Pages.TIMINGS, Pages.ANNOUNCEMENTS, Pages.PROFILE},
}

PRAYER_NAMES = ('Fajr', 'Dhuhr', 'Asr', 'Maghrib', 'Isha')
MEMBER_ROLES = ('Imam', 'Muazzin', 'Committee', 'Volunteer')
ANNOUNCEMENT_AUDIENCES = ('All', 'Members only')
PUBLIC_AUDIENCE = 'All'
EVENT_TYPES = ('Event', 'Iftari Slot')

# Format used for the human readable timestamp on audit log entries
AUDIT_DATE_FORMAT = '%Y-%m-%d %I:%M %p'
