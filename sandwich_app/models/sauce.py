from sandwich_app.extensions import db
from sandwich_app.models.base import RecordMixin


class Sauce(RecordMixin, db.Model):
    __tablename__ = "sauces"

    name = db.Column(db.String(150), nullable=False)

    def to_dict(self):
        return {"id": self.id, "name": self.name, **self._timestamps()}
