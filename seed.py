import logging

from sandwich_app import create_app
from sandwich_app.extensions import db
from sandwich_app.services.data_client import get_data_client
from sandwich_app.services.seed_service import seed_defaults

logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = create_app()

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()

    results = seed_defaults(get_data_client())
    for collection, created in results.items():
        if created:
            print(f"Added {created} {collection}")
        else:
            print(f"Skipped {collection}: already has rows")

    print("Seed completed.")
