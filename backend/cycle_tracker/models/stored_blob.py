from datetime import datetime, timezone
from cycle_tracker import db


def _utcnow():
    return datetime.now(timezone.utc)


class StoredBlob(db.Model):
    """
    Opaque serialized value stored under a fixed key.
    Holds the JSON encoded cycle list and settings record.
    """
    __tablename__ = 'stored_blobs'

    key = db.Column(db.String(64), primary_key=True)
    payload = db.Column(db.Text, nullable=False)

    # Timestamps
    created_at = db.Column(db.DateTime, nullable=False, default=_utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)

    def __repr__(self):
        return f'<StoredBlob {self.key} ({len(self.payload or "")} chars)>'
