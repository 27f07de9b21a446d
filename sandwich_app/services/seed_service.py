import logging

from sandwich_app.services.data_client import CreateError

logger = logging.getLogger(__name__)

DEFAULT_BREADS = ["White Bread", "Wheat Bread", "Sourdough"]
DEFAULT_INGREDIENTS = ["Lettuce", "Tomato", "Cheese", "Ham", "Turkey"]
DEFAULT_SAUCES = ["Mayo", "Mustard", "Ranch"]

DEFAULTS = {
    "breads": DEFAULT_BREADS,
    "ingredients": DEFAULT_INGREDIENTS,
    "sauces": DEFAULT_SAUCES,
}


def seed_if_empty(model_client, snapshot, names=None):
    """
    Create the default rows for a collection when its first snapshot is empty.

    Creates run one after another; a failed create is logged and the rest
    still go ahead. Returns how many rows were created.
    """
    if len(snapshot.items) > 0:
        return 0

    if names is None:
        names = DEFAULTS.get(model_client.collection, [])

    created = 0
    for name in names:
        try:
            model_client.create(name=name)
            created += 1
        except CreateError as e:
            logger.error("Failed to seed %s '%s': %s", model_client.collection, name, e.message)
    if created:
        logger.info("Seeded %d default %s", created, model_client.collection)
    return created


def seed_defaults(client):
    """Seed every default collection that is currently empty."""
    results = {}
    for collection in DEFAULTS:
        model_client = client.collection(collection)
        results[collection] = seed_if_empty(model_client, model_client.snapshot())
    return results
