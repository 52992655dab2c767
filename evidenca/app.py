import logging

from flasgger import Swagger
from flask import Flask
from flask_cors import CORS

from .api import stroski_bp, zaposleni_bp
from .config import Config
from .db import EXTENSION_KEY, Store
from .docs import SWAGGER_CONFIG, SWAGGER_TEMPLATE
from .errors import register_error_handlers
from .log import configure_logging

logger = logging.getLogger(__name__)


def create_app(store=None, config=None):
    """
    Tovarna aplikacije. `store` omogoča, da testi podtaknejo svojo bazo;
    brez njega se poveže na MONGO_URI iz konfiguracije.
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    configure_logging(app.config["LOG_LEVEL"])

    CORS(app, resources={r"/*": {"origins": app.config["CORS_ORIGINS"].split(",")}})

    if store is None:
        store = Store.connect(app.config["MONGO_URI"], app.config["MONGO_DB"])
    app.extensions[EXTENSION_KEY] = store

    app.register_blueprint(stroski_bp, url_prefix="/stroski")
    app.register_blueprint(zaposleni_bp, url_prefix="/zaposleni")

    Swagger(app, config=SWAGGER_CONFIG, template=SWAGGER_TEMPLATE)
    register_error_handlers(app)

    return app


def main():
    app = create_app()
    if app.config["TESTING"]:
        # v testnem okolju se ne vežemo na port
        return app
    port = app.config["PORT"]
    logger.info("Strežnik teče na portu %s", port)
    app.run(host="0.0.0.0", port=port, debug=app.config["FLASK_ENV"] == "development")
    return app


if __name__ == "__main__":
    main()
