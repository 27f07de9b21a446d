from flask import Blueprint
from sandwich_app.controllers.sandwich_controller import (
    index_page,
    select_bread_handler,
    toggle_ingredient_handler,
    toggle_sauce_handler,
    set_name_handler,
    submit_sandwich_handler,
    create_todo_handler,
)

pages_bp = Blueprint("pages", __name__)

@pages_bp.route("/", methods=["GET"])
def index():
    return index_page()

@pages_bp.route("/draft/bread", methods=["POST"])
def select_bread():
    return select_bread_handler()

@pages_bp.route("/draft/ingredients/<ingredient_id>/toggle", methods=["POST"])
def toggle_ingredient(ingredient_id):
    return toggle_ingredient_handler(ingredient_id)

@pages_bp.route("/draft/sauce/<sauce_id>/toggle", methods=["POST"])
def toggle_sauce(sauce_id):
    return toggle_sauce_handler(sauce_id)

@pages_bp.route("/draft/name", methods=["POST"])
def set_name():
    return set_name_handler()

@pages_bp.route("/sandwiches", methods=["POST"])
def submit_sandwich():
    return submit_sandwich_handler()

@pages_bp.route("/todos", methods=["POST"])
def create_todo():
    return create_todo_handler()
