from sandwich_app.services.data_client import CreateError
from sandwich_app.services.seed_service import (
    DEFAULT_BREADS,
    DEFAULT_INGREDIENTS,
    DEFAULT_SAUCES,
    seed_defaults,
    seed_if_empty,
)


class FlakyClient:
    """Model client whose create fails for one name."""

    collection = "breads"

    def __init__(self, fail_on):
        self.fail_on = fail_on
        self.created = []

    def create(self, **fields):
        if fields["name"] == self.fail_on:
            raise CreateError(self.collection, "boom")
        self.created.append(fields["name"])
        return fields


def test_seed_if_empty_creates_defaults(data_client):
    created = seed_if_empty(data_client.breads, data_client.breads.snapshot())
    assert created == 3
    assert sorted(b["name"] for b in data_client.breads.list()) == sorted(DEFAULT_BREADS)


def test_seed_skipped_when_collection_has_rows(data_client):
    data_client.sauces.create(name="Sriracha")
    created = seed_if_empty(data_client.sauces, data_client.sauces.snapshot())
    assert created == 0
    assert [s["name"] for s in data_client.sauces.list()] == ["Sriracha"]


def test_seed_continues_after_a_failed_create(data_client):
    flaky = FlakyClient(fail_on="Wheat Bread")
    created = seed_if_empty(flaky, data_client.breads.snapshot())
    assert created == 2
    assert flaky.created == ["White Bread", "Sourdough"]


def test_seed_defaults_fills_every_empty_collection(data_client):
    data_client.sauces.create(name="Sriracha")
    results = seed_defaults(data_client)
    assert results == {"breads": 3, "ingredients": 5, "sauces": 0}
    assert sorted(i["name"] for i in data_client.ingredients.list()) == sorted(DEFAULT_INGREDIENTS)
    assert len(DEFAULT_SAUCES) == 3
