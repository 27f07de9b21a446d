"""
Data service client.

Wraps each stored collection behind the two calls the view needs:
``create`` (returns the created record or raises ``CreateError``) and
``observe_query`` (a live sequence of full-collection snapshots).
"""
import logging
import time
from typing import Any, Dict, Iterator, List, Optional

from flask import current_app

from sandwich_app.extensions import db
from sandwich_app.models import Bread, Ingredient, Sauce, Sandwich, Todo

logger = logging.getLogger(__name__)

COLLECTIONS = ("todos", "breads", "ingredients", "sauces", "sandwiches")


class CreateError(Exception):
    """Raised when a record could not be created."""

    def __init__(self, collection: str, message: str):
        super().__init__(f"{collection}: {message}")
        self.collection = collection
        self.message = message


class Snapshot:
    """Full materialized list of records for one collection."""

    def __init__(self, collection: str, items: List[Dict[str, Any]]):
        self.collection = collection
        self.items = items

    def __len__(self):
        return len(self.items)

    def __eq__(self, other):
        if not isinstance(other, Snapshot):
            return NotImplemented
        return self.collection == other.collection and self.items == other.items

    def __repr__(self):
        return f"<Snapshot {self.collection} items={len(self.items)}>"

    def to_dict(self):
        return {"collection": self.collection, "items": self.items}


class ModelClient:
    def __init__(self, collection: str, model, poll_interval: Optional[float] = None):
        self.collection = collection
        self.model = model
        self._poll_interval = poll_interval

    @property
    def poll_interval(self) -> float:
        if self._poll_interval is not None:
            return self._poll_interval
        return float(current_app.config.get("SNAPSHOT_POLL_INTERVAL", 0.5))

    def list(self) -> List[Dict[str, Any]]:
        rows = self.model.query.order_by(self.model.created_at, self.model.id).all()
        return [row.to_dict() for row in rows]

    def build(self, fields: Dict[str, Any]):
        return self.model(**fields)

    def create(self, **fields) -> Dict[str, Any]:
        try:
            record = self.build(fields)
            db.session.add(record)
            db.session.commit()
        except CreateError:
            db.session.rollback()
            raise
        except Exception as e:
            db.session.rollback()
            raise CreateError(self.collection, str(e)) from e
        logger.debug("Created %s record %s", self.collection, record.id)
        return record.to_dict()

    def snapshot(self) -> Snapshot:
        items = self.list()
        # end the read so the next poll sees rows committed elsewhere
        db.session.rollback()
        return Snapshot(self.collection, items)

    def observe_query(self, heartbeat_interval: Optional[float] = None) -> Iterator[Optional[Snapshot]]:
        """
        Yield the current collection immediately, then a fresh snapshot
        every time its contents change. Never terminates on its own.

        With ``heartbeat_interval`` set, ``None`` is yielded whenever that
        many seconds pass without a new snapshot, so a stream consumer gets
        something to write to an idle connection.
        """
        last = self.snapshot()
        last_yield = time.monotonic()
        yield last
        while True:
            # poll right after resuming, sleep only when idle
            current = self.snapshot()
            if current != last:
                last = current
                last_yield = time.monotonic()
                yield current
            elif heartbeat_interval is not None and time.monotonic() - last_yield >= heartbeat_interval:
                last_yield = time.monotonic()
                yield None
            else:
                time.sleep(self.poll_interval)


class SandwichClient(ModelClient):
    def build(self, fields: Dict[str, Any]):
        fields = dict(fields)
        ingredient_ids = list(fields.pop("ingredient_ids", None) or [])

        bread_id = fields.get("bread_id")
        if not bread_id or db.session.get(Bread, bread_id) is None:
            raise CreateError(self.collection, f"Bread not found: {bread_id}")

        if fields.get("sauce_id") and db.session.get(Sauce, fields["sauce_id"]) is None:
            raise CreateError(self.collection, f"Sauce not found: {fields['sauce_id']}")
        if not fields.get("sauce_id"):
            fields["sauce_id"] = None

        ingredients = []
        for ingredient_id in ingredient_ids:
            ing = db.session.get(Ingredient, ingredient_id)
            if ing is None:
                raise CreateError(self.collection, f"Ingredient not found: {ingredient_id}")
            if ing not in ingredients:
                ingredients.append(ing)

        sandwich = Sandwich(**fields)
        sandwich.ingredients = ingredients
        return sandwich


class DataClient:
    """One model client per collection, addressable by attribute or name."""

    def __init__(self, poll_interval: Optional[float] = None):
        self.todos = ModelClient("todos", Todo, poll_interval)
        self.breads = ModelClient("breads", Bread, poll_interval)
        self.ingredients = ModelClient("ingredients", Ingredient, poll_interval)
        self.sauces = ModelClient("sauces", Sauce, poll_interval)
        self.sandwiches = SandwichClient("sandwiches", Sandwich, poll_interval)

    def collection(self, name: str) -> ModelClient:
        if name not in COLLECTIONS:
            raise KeyError(name)
        return getattr(self, name)


def init_data_client(app):
    app.extensions["data_client"] = DataClient()


def get_data_client() -> DataClient:
    return current_app.extensions["data_client"]
