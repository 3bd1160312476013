from .deploy import deploy_bp
from .static import static_bp

# List of all blueprints served unconditionally
blueprints = [static_bp]


def register_blueprints(app):
    if app.config.get("DEPLOY_ROUTE_ENABLED"):
        app.register_blueprint(deploy_bp, url_prefix=deploy_bp.url_prefix)
    for bp in blueprints:
        app.register_blueprint(bp, url_prefix=bp.url_prefix)
