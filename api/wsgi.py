# wsgi.py
import logging

from api import create_app
from config import Settings

settings = Settings.from_env()
logging.basicConfig(level=settings.log_level)

app = create_app(settings=settings)

if __name__ == "__main__":
    app.run(host=settings.host, port=settings.port)
