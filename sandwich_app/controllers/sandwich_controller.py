from flask import flash, redirect, render_template, request, session, url_for

from sandwich_app.services.data_client import get_data_client
from sandwich_app.services.draft_service import load_draft, save_draft
from sandwich_app.services.sandwich_view import SandwichView
from sandwich_app.utils.http import form_str


def _back_to_form():
    return redirect(url_for("pages.index"))


def index_page():
    view = SandwichView(get_data_client(), load_draft(session)).mount()
    return render_template("index.html", view=view, draft=view.draft)


def select_bread_handler():
    draft = load_draft(session)
    draft.select_bread(form_str("bread_id"))
    save_draft(session, draft)
    return _back_to_form()


def toggle_ingredient_handler(ingredient_id):
    draft = load_draft(session)
    draft.toggle_ingredient(ingredient_id)
    save_draft(session, draft)
    return _back_to_form()


def toggle_sauce_handler(sauce_id):
    draft = load_draft(session)
    draft.select_sauce(sauce_id)
    save_draft(session, draft)
    return _back_to_form()


def set_name_handler():
    draft = load_draft(session)
    draft.set_name(form_str("name"))
    save_draft(session, draft)
    return _back_to_form()


def submit_sandwich_handler():
    draft = load_draft(session)
    # the name box is posted together with the submit button
    if "name" in request.form:
        draft.set_name(form_str("name"))

    view = SandwichView(get_data_client(), draft)
    result = view.submit()
    save_draft(session, view.draft)
    flash(result.message, result.category)
    return _back_to_form()


def create_todo_handler():
    view = SandwichView(get_data_client())
    result = view.create_todo(form_str("content") or None)
    if not result.ok:
        flash(result.message, result.category)
    return _back_to_form()
