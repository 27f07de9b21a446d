from flask import Blueprint
from sandwich_app.controllers.api_controller import (
    list_records_handler,
    create_record_handler,
    stream_records_handler,
    health_check,
)

api_bp = Blueprint("api", __name__, url_prefix="/api")

@api_bp.route("/health", methods=["GET"])
def health():
    return health_check()

@api_bp.route("/<collection>", methods=["GET"])
def list_records(collection):
    return list_records_handler(collection)

@api_bp.route("/<collection>", methods=["POST"])
def create_record(collection):
    return create_record_handler(collection)

@api_bp.route("/<collection>/stream", methods=["GET"])
def stream_records(collection):
    return stream_records_handler(collection)
