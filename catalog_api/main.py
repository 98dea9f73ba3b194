import os

from dotenv import load_dotenv
from flask import Flask

from catalog_api.errors import register_error_handlers
from catalog_api.extensions import db, token_auth
from catalog_api.logger import logger
from catalog_api.routes.category import bp_category
from catalog_api.routes.product import bp_product

load_dotenv()


def create_app(testing=False, config=None):
    app = Flask(__name__)

    if testing:
        app.config.update(
            SQLALCHEMY_DATABASE_URI="sqlite:///:memory:",
            SQLALCHEMY_TRACK_MODIFICATIONS=False,
            TESTING=True,
            API_TOKEN="test-token",
            PAGINATION_MAX_LIMIT=5,
            LOG_LEVEL="WARNING",
        )
    else:
        app.config.update(
            SQLALCHEMY_DATABASE_URI=os.getenv('DATABASE_URL', 'postgresql://postgres:postgres@db/catalog'),
            SQLALCHEMY_TRACK_MODIFICATIONS=False,
            SQLALCHEMY_ENGINE_OPTIONS={"pool_pre_ping": True},
            API_TOKEN=os.getenv('API_TOKEN', ''),
            PAGINATION_MAX_LIMIT=int(os.getenv('PAGINATION_MAX_LIMIT', '50')),
            LOG_LEVEL=os.getenv('LOG_LEVEL', 'INFO'),
        )

    if config:
        app.config.update(config)

    logger.setLevel(app.config["LOG_LEVEL"])
    if not app.config["API_TOKEN"]:
        logger.warning("API_TOKEN is not set, every request will be rejected")

    # Extensions
    db.init_app(app)
    token_auth.init_app(app)

    register_error_handlers(app)
    app.register_blueprint(bp_category)
    app.register_blueprint(bp_product)

    @app.cli.command("create-db")
    def create_db():
        with app.app_context():
            db.create_all()
            print("Database tables created.")

    return app


if __name__ == '__main__':
    create_app().run(debug=True)
