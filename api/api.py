from flask import Flask
from flask_cors import CORS
from config import Settings
from db import build_db_url, check_connection, create_db_engine
from endpoints.sport.routes import setup_routes as SportRoutes
from endpoints.docs.routes import setup_routes as DocsRoutes

def create_app(engine=None, settings=None):

    settings = settings or Settings.from_env()

    if engine is None:
        engine = create_db_engine(build_db_url(settings))

    # Degrades (every query fails) unless DB_FAIL_FAST is set
    check_connection(engine, fail_fast=settings.db_fail_fast)

    app = Flask(__name__)
    CORS(app, origins=settings.cors_origins or ["*"])

    SportRoutes(app, engine)
    DocsRoutes(app)

    return app

if __name__ == "__main__":
    settings = Settings.from_env()
    app = create_app(settings=settings)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
