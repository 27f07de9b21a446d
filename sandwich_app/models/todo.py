from sandwich_app.extensions import db
from sandwich_app.models.base import RecordMixin


class Todo(RecordMixin, db.Model):
    __tablename__ = "todos"

    content = db.Column(db.Text, nullable=True)

    def to_dict(self):
        return {"id": self.id, "content": self.content, **self._timestamps()}
