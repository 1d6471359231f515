from __future__ import annotations

from flask import Flask

from grid_designer.config import DesignerConfig
from grid_designer.store import GridSystemStore, LocationSync


def create_app(
    config: DesignerConfig | None = None,
    store: GridSystemStore | None = None,
    flask_config: dict | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(flask_config or {})

    config = config or DesignerConfig()
    app.logger.setLevel(config.log_level)
    if store is None:
        store = GridSystemStore()

    # Store the designer state on app for access in routes
    app.extensions["designer_config"] = config
    app.extensions["store"] = store
    app.extensions["location"] = LocationSync(store, key=config.query_key)

    from grid_designer.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
