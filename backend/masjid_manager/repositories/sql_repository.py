from sqlalchemy import func

from ..collection_types import Collection
from ..extensions import db
from ..models import Mosque, User, CommunityEvent
from .base import MasjidRepository


class SqlAlchemyRepository(MasjidRepository):
    """
    Flask-SQLAlchemy backed storage. Works against SQLite and PostgreSQL.

    Must be used inside an application context. Every write commits
    immediately; on failure the session is rolled back and the error is
    re-raised to the caller.
    """

    def _commit(self):
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

    @staticmethod
    def _apply(instance, changes):
        for key, value in changes.items():
            setattr(instance, key, value)

    # --- Mosques ---

    def list_mosques(self):
        return [mosque.to_dict() for mosque in Mosque.query.order_by(Mosque.created_at).all()]

    def get_mosque(self, mosque_id):
        mosque = db.session.get(Mosque, mosque_id)
        return mosque.to_dict() if mosque else None

    def add_mosque(self, record):
        mosque = Mosque(**record)
        db.session.add(mosque)
        self._commit()
        return mosque.to_dict()

    def update_mosque(self, mosque_id, changes):
        mosque = db.session.get(Mosque, mosque_id)
        if not mosque:
            return None
        self._apply(mosque, changes)
        self._commit()
        return mosque.to_dict()

    def delete_mosque(self, mosque_id):
        mosque = db.session.get(Mosque, mosque_id)
        if not mosque:
            return False
        # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on,
        # so the scoped rows are removed explicitly.
        for collection in Collection:
            collection.model.query.filter_by(mosque_id=mosque_id).delete(synchronize_session=False)
        User.query.filter_by(mosque_id=mosque_id).update({'mosque_id': None}, synchronize_session=False)
        db.session.delete(mosque)
        self._commit()
        return True

    # --- Mosque scoped records ---

    def list_records(self, collection, mosque_id):
        model = collection.model
        # Entry order; the schedule resolver keeps it for prayers at the same time
        rows = model.query.filter_by(mosque_id=mosque_id).order_by(model.created_at, model.id).all()
        return [row.to_dict() for row in rows]

    def get_record(self, collection, record_id):
        row = db.session.get(collection.model, record_id)
        return row.to_dict() if row else None

    def add_record(self, collection, record):
        row = collection.model(**record)
        db.session.add(row)
        self._commit()
        return row.to_dict()

    def update_record(self, collection, record_id, changes):
        row = db.session.get(collection.model, record_id)
        if not row:
            return None
        self._apply(row, changes)
        self._commit()
        return row.to_dict()

    def delete_record(self, collection, record_id):
        row = db.session.get(collection.model, record_id)
        if not row:
            return False
        db.session.delete(row)
        self._commit()
        return True

    def count_records(self, collection, mosque_id):
        model = collection.model
        return db.session.query(func.count(model.id)).filter(model.mosque_id == mosque_id).scalar()

    def count_events_since(self, mosque_id, iso_date):
        return db.session.query(func.count(CommunityEvent.id)).filter(
            CommunityEvent.mosque_id == mosque_id,
            CommunityEvent.date >= iso_date
        ).scalar()

    # --- Users ---

    def get_user(self, user_id):
        user = db.session.get(User, user_id)
        return user.to_dict() if user else None

    def find_user_by_email(self, email):
        user = User.query.filter_by(email=email).first()
        return user.to_dict() if user else None

    def find_user_by_username(self, username):
        user = User.query.filter_by(username=username).first()
        return user.to_dict() if user else None

    def add_user(self, record):
        user = User(**record)
        db.session.add(user)
        self._commit()
        return user.to_dict()

    def update_user(self, user_id, changes):
        user = db.session.get(User, user_id)
        if not user:
            return None
        self._apply(user, changes)
        self._commit()
        return user.to_dict()
