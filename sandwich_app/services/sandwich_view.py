import logging
from typing import Dict, List

from flask import current_app

from sandwich_app.services.data_client import COLLECTIONS, CreateError
from sandwich_app.services.draft_service import VALIDATION_MESSAGE, SandwichDraft
from sandwich_app.services.seed_service import DEFAULTS, seed_if_empty

logger = logging.getLogger(__name__)

CREATED_MESSAGE = "Sandwich created successfully!"
FAILED_MESSAGE = "Failed to create sandwich"
TODO_FAILED_MESSAGE = "Failed to create todo"


class SubmitResult:
    def __init__(self, ok: bool, message: str, record=None):
        self.ok = ok
        self.message = message
        self.record = record

    @property
    def category(self):
        return "success" if self.ok else "error"


class SandwichView:
    """
    Local state behind the sandwich form: one mirrored list per collection
    plus the current draft.
    """

    def __init__(self, client, draft: SandwichDraft = None, seed_defaults: bool = None):
        self.client = client
        self.draft = draft if draft is not None else SandwichDraft()
        if seed_defaults is None:
            seed_defaults = current_app.config.get("SEED_DEFAULTS", True)
        self.seed_defaults = seed_defaults
        self.lists: Dict[str, List[dict]] = {name: [] for name in COLLECTIONS}

    @property
    def todos(self):
        return self.lists["todos"]

    @property
    def breads(self):
        return self.lists["breads"]

    @property
    def ingredients(self):
        return self.lists["ingredients"]

    @property
    def sauces(self):
        return self.lists["sauces"]

    @property
    def sandwiches(self):
        return self.lists["sandwiches"]

    def apply_snapshot(self, collection, snapshot):
        self.lists[collection] = list(snapshot.items)

    def mount(self):
        for collection in COLLECTIONS:
            model_client = self.client.collection(collection)
            subscription = model_client.observe_query()
            try:
                snapshot = next(subscription)
                self.apply_snapshot(collection, snapshot)
                if self.seed_defaults and collection in DEFAULTS:
                    if seed_if_empty(model_client, snapshot):
                        self.apply_snapshot(collection, next(subscription))
            finally:
                subscription.close()
        return self

    def submit(self) -> SubmitResult:
        if not self.draft.is_valid():
            return SubmitResult(False, VALIDATION_MESSAGE)

        try:
            record = self.client.sandwiches.create(**self.draft.to_create_fields())
        except CreateError as e:
            logger.error("Error creating sandwich: %s", e.message)
            return SubmitResult(False, FAILED_MESSAGE)

        self.draft.clear()
        return SubmitResult(True, CREATED_MESSAGE, record)

    def create_todo(self, content) -> SubmitResult:
        try:
            record = self.client.todos.create(content=content)
        except CreateError as e:
            logger.error("Error creating todo: %s", e.message)
            return SubmitResult(False, TODO_FAILED_MESSAGE)
        return SubmitResult(True, "Todo created", record)

    def sandwich_rows(self):
        breads = {b["id"]: b["name"] for b in self.breads}
        ingredients = {i["id"]: i["name"] for i in self.ingredients}
        sauces = {s["id"]: s["name"] for s in self.sauces}

        rows = []
        for sandwich in self.sandwiches:
            rows.append({
                "id": sandwich["id"],
                "name": sandwich["name"],
                "bread": breads.get(sandwich["bread_id"], "Unknown bread"),
                "ingredients": [ingredients.get(i, "Unknown ingredient") for i in sandwich["ingredient_ids"]],
                "sauce": sauces.get(sandwich["sauce_id"]) if sandwich["sauce_id"] else None,
            })
        return rows
