"""WSGI entry point for the serverless runtime and the local dev server."""

import config
from config_service import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host=config.HOST, port=config.PORT, debug=config.SERVE_DEV_SCRIPT)
