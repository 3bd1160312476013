import logging
import sys

from spa_server.main import create_app
from spa_server.services import config


def main():
    app = create_app()
    logging.info("Serving %s", app.config["STATIC_ROOT"])
    logging.info("Starting server on http://localhost:%s", config.PORT)
    try:
        app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG, threaded=True)
    except KeyboardInterrupt:
        logging.info("Server stopped")
    except SystemExit as e:
        # werkzeug exits with status 1 when the address cannot be bound
        if e.code:
            logging.critical("Server could not listen on %s:%s (exit status %s)", config.HOST, config.PORT, e.code)
            return 1
    except Exception:
        logging.exception("Server on %s:%s stopped with a fatal error", config.HOST, config.PORT)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
