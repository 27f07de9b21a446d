import uuid
from datetime import datetime

from sandwich_app.extensions import db


def new_id() -> str:
    return str(uuid.uuid4())


class RecordMixin:
    """Columns every stored record carries: a string id plus timestamps."""

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def _timestamps(self):
        return {
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
