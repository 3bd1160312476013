import os


def env_flag(name, default='false'):
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


def parse_origins(value):
    if value.strip() == '*':
        return '*'
    return [origin.strip() for origin in value.split(',') if origin.strip()]


HOST = os.getenv('SPA_HOST', '0.0.0.0')
PORT = int(os.getenv('SPA_PORT', '8080'))
STATIC_ROOT = os.getenv('SPA_STATIC_ROOT', './web/dist')  # Output of `npm run build` inside web/
INDEX_DOCUMENT = os.getenv('SPA_INDEX_DOCUMENT', 'index.html')

DEPLOY_ROUTE_ENABLED = env_flag('DEPLOY_ROUTE_ENABLED')
CORS_ORIGINS = parse_origins(os.getenv('CORS_ORIGINS', '*'))

DEBUG = env_flag('FLASK_DEBUG')
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

# Types emitted by the SPA build that the platform mimetypes table may not know
EXTRA_MIME_TYPES = {
    '.webmanifest': 'application/manifest+json',
    '.mjs': 'text/javascript',
}
