import logging

from flask import Blueprint, request

deploy_bp = Blueprint("deploy", __name__, url_prefix="")


@deploy_bp.route("/deploy", methods=["POST"])
def deploy():
    """
    Reserved deploy hook. Accepts the request and performs no work.
    Only registered when DEPLOY_ROUTE_ENABLED is set; otherwise /deploy is a normal SPA route.
    """
    logging.info("Deploy requested from %s; no deploy action is configured", request.remote_addr)
    return "", 204
