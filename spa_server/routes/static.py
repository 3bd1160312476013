import logging
import os

from flask import Blueprint, abort, current_app, send_from_directory

from spa_server.services.utils import TargetKind, resolve_target

static_bp = Blueprint("static", __name__, url_prefix="")

# Every method is served the same way; HEAD and OPTIONS are added by Flask
SERVED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def serve_fallback(static_root, index_document):
    if not os.path.isfile(os.path.join(static_root, index_document)):
        logging.error("Fallback document %s not found in %s", index_document, static_root)
        abort(404)
    return send_from_directory(static_root, index_document)


# Serve built assets, falling back to the entry document for client-side routes
@static_bp.route("/", defaults={"path": ""}, methods=SERVED_METHODS)
@static_bp.route("/<path:path>", methods=SERVED_METHODS)
def serve_frontend(path):
    static_root = current_app.config["STATIC_ROOT"]
    target = resolve_target(static_root, path)

    if target.kind is TargetKind.FILE:
        return send_from_directory(static_root, target.relative_path)

    return serve_fallback(static_root, current_app.config["INDEX_DOCUMENT"])
