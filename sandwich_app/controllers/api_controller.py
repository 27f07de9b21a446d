import json

from flask import Response, current_app, stream_with_context

from sandwich_app.extensions import db
from sandwich_app.schemas.sandwich_schema import CREATE_SCHEMAS
from sandwich_app.services.data_client import COLLECTIONS, CreateError, get_data_client
from sandwich_app.utils.http import ok, error, json_body, validate_schema


def _unknown_collection(name):
    return error("NOT_FOUND", f"Unknown collection: {name}", 404)


def list_records_handler(collection):
    if collection not in COLLECTIONS:
        return _unknown_collection(collection)
    items = get_data_client().collection(collection).list()
    return ok({"items": items})


def create_record_handler(collection):
    if collection not in COLLECTIONS:
        return _unknown_collection(collection)

    data, errors = validate_schema(CREATE_SCHEMAS[collection], json_body())
    if errors:
        return error("VALIDATION_ERROR", f"Invalid {collection} data", 400, details=errors)

    try:
        record = get_data_client().collection(collection).create(**data)
    except CreateError as e:
        current_app.logger.error(f"Error creating {collection}: {e.message}")
        return error("CREATE_FAILED", e.message, 500)
    return ok(record, 201)


def stream_records_handler(collection):
    """SSE endpoint pushing a full snapshot each time the collection changes."""
    if collection not in COLLECTIONS:
        return _unknown_collection(collection)

    heartbeat = float(current_app.config.get("SNAPSHOT_HEARTBEAT_INTERVAL", 15))
    subscription = get_data_client().collection(collection).observe_query(heartbeat_interval=heartbeat)

    def generate():
        try:
            for snapshot in subscription:
                if snapshot is None:
                    # SSE comment, ignored by EventSource
                    yield ": heartbeat\n\n"
                    continue
                yield f"event: snapshot\ndata: {json.dumps(snapshot.to_dict())}\n\n"
        finally:
            subscription.close()

    return Response(
        stream_with_context(generate()),
        mimetype="text/event-stream",
        headers={
            'Cache-Control': 'no-cache',
            'X-Accel-Buffering': 'no'
        }
    )


def health_check():
    db_status = "healthy"
    try:
        # Ping the database
        db.session.execute(db.text('SELECT 1'))
    except Exception as e:
        db_status = f"unhealthy: {str(e)}"

    return ok({
        "status": "online",
        "database": db_status,
    })
