"""
In-progress sandwich selection.

The draft lives in the browser session and is only turned into a record
when the form is submitted.
"""
from typing import Any, Dict, List, Optional

VALIDATION_MESSAGE = "Please select bread, at least one ingredient, and provide a name for your sandwich"

SESSION_KEY = "sandwich_draft"


class SandwichDraft:
    def __init__(self, name: str = "", bread_id: str = "", ingredient_ids: Optional[List[str]] = None, sauce_id: str = ""):
        self.name = name or ""
        self.bread_id = bread_id or ""
        self.ingredient_ids: List[str] = []
        for ingredient_id in ingredient_ids or []:
            if ingredient_id not in self.ingredient_ids:
                self.ingredient_ids.append(ingredient_id)
        self.sauce_id = sauce_id or ""

    def select_bread(self, bread_id: str):
        self.bread_id = bread_id or ""

    def toggle_ingredient(self, ingredient_id: str):
        if ingredient_id in self.ingredient_ids:
            self.ingredient_ids = [i for i in self.ingredient_ids if i != ingredient_id]
        else:
            self.ingredient_ids = self.ingredient_ids + [ingredient_id]

    def select_sauce(self, sauce_id: str):
        # choosing the current sauce again means no sauce
        if sauce_id and sauce_id == self.sauce_id:
            self.sauce_id = ""
        else:
            self.sauce_id = sauce_id or ""

    def set_name(self, name: Optional[str]):
        self.name = name or ""

    def missing_fields(self) -> List[str]:
        missing = []
        if not self.bread_id:
            missing.append("bread")
        if not self.ingredient_ids:
            missing.append("ingredients")
        if not self.name.strip():
            missing.append("name")
        return missing

    def is_valid(self) -> bool:
        return not self.missing_fields()

    def is_empty(self) -> bool:
        return not (self.name or self.bread_id or self.ingredient_ids or self.sauce_id)

    def clear(self):
        self.name = ""
        self.bread_id = ""
        self.ingredient_ids = []
        self.sauce_id = ""

    def to_create_fields(self) -> Dict[str, Any]:
        return {
            "name": self.name.strip(),
            "bread_id": self.bread_id,
            "ingredient_ids": list(self.ingredient_ids),
            "sauce_id": self.sauce_id or None,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "bread_id": self.bread_id,
            "ingredient_ids": list(self.ingredient_ids),
            "sauce_id": self.sauce_id,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SandwichDraft":
        data = data or {}
        return cls(
            name=data.get("name", ""),
            bread_id=data.get("bread_id", ""),
            ingredient_ids=data.get("ingredient_ids") or [],
            sauce_id=data.get("sauce_id", ""),
        )


def load_draft(session) -> SandwichDraft:
    return SandwichDraft.from_dict(session.get(SESSION_KEY))


def save_draft(session, draft: SandwichDraft):
    if draft.is_empty():
        session.pop(SESSION_KEY, None)
    else:
        session[SESSION_KEY] = draft.to_dict()
