from .page_routes import pages_bp
from .api_routes import api_bp


def register_routes(app):
    app.register_blueprint(pages_bp)
    app.register_blueprint(api_bp)
