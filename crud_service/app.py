import time

from flask import Flask
from flask_cors import CORS
from flask_migrate import Migrate
from sqlalchemy.exc import OperationalError
from werkzeug.exceptions import HTTPException

from .config import load_config
from .logs import configure_logging, logger
from .metrics import render
from .model import db, enable_sqlite_foreign_keys
from .products import products
from .relations import relations
from .responses import failure
from .users import users

migrate = Migrate()


def liveness():
    return "OK", 200


def scrape():
    body, content_type = render()
    return body, 200, {'Content-Type': content_type}


def create_app(config=None):
    app = Flask(__name__)
    app.config.update(load_config(config))
    configure_logging(app.config['LOG_LEVEL'])

    db.init_app(app)
    with app.app_context():
        enable_sqlite_foreign_keys(db.engine)
    migrate.init_app(app, db)
    CORS(app)

    app.register_blueprint(users)
    app.register_blueprint(products)
    app.register_blueprint(relations)

    app.add_url_rule('/health', 'health', liveness)
    app.add_url_rule('/metrics', 'metrics', scrape)

    @app.errorhandler(HTTPException)
    def http_error(e):
        logger.warning(e.description, extra={'status_code': e.code})
        return failure(e.name.lower(), e.code)

    return app


def create_tables(app):
    retries = app.config['DB_CONNECT_RETRIES']
    with app.app_context():
        for attempt in range(1, retries + 1):
            try:
                db.create_all()
                return
            except OperationalError:
                if attempt == retries:
                    raise
                logger.warning("Database unavailable, retrying in 2 seconds...")
                time.sleep(2)


def main():
    app = create_app()
    create_tables(app)
    logger.info("Starting crud service", extra={'endpoint': 'startup'})
    app.run(host='0.0.0.0', port=app.config['PORT'])
