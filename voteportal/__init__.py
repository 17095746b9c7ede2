from flask import Flask

from voteportal.config import Config
from voteportal.extensions import sessions
from voteportal.routes import register_routes
from voteportal.services.catalog import DEFAULT_CATALOG, build_catalog


def create_app(test_config=None):
    app = Flask(
        __name__,
        template_folder="../templates",
    )
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    raw_catalog = app.config.get("VOTING_CATALOG")
    app.config["VOTING_CATEGORIES"] = (
        build_catalog(raw_catalog) if raw_catalog else DEFAULT_CATALOG
    )

    sessions.init_app(app)

    register_routes(app)
    return app


app = create_app()

__all__ = ["app", "sessions", "create_app"]
