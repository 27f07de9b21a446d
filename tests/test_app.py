import logging

from sandwich_app import create_app


def _make(level):
    return create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "LOG_LEVEL": level,
    })


def test_each_app_applies_its_own_log_level():
    first = _make("DEBUG")
    assert first.logger.level == logging.DEBUG
    assert logging.getLogger("sandwich_app").level == logging.DEBUG

    second = _make("WARNING")
    assert second.logger.level == logging.WARNING
    assert logging.getLogger("sandwich_app").level == logging.WARNING


def test_unknown_log_level_falls_back_to_info():
    app = _make("chatty")
    assert app.logger.level == logging.INFO
