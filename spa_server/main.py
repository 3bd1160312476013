import logging
import os

from flask import Flask
from flask_cors import CORS

from spa_server.routes import register_blueprints
from spa_server.services import config
from spa_server.services.utils import check_static_root

logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')


def create_app(static_root=None, index_document=None, deploy_enabled=None):
    static_root = os.path.abspath(static_root if static_root is not None else config.STATIC_ROOT)
    index_document = index_document or config.INDEX_DOCUMENT

    # The catch-all blueprint serves the whole tree, so Flask's own /static route is disabled
    app = Flask(__name__, static_folder=None)
    CORS(app, origins=config.CORS_ORIGINS)
    app.config.update(
        STATIC_ROOT=static_root,
        INDEX_DOCUMENT=index_document,
        DEPLOY_ROUTE_ENABLED=config.DEPLOY_ROUTE_ENABLED if deploy_enabled is None else deploy_enabled,
    )

    check_static_root(static_root, index_document)

    # Register all blueprints
    register_blueprints(app)

    return app
