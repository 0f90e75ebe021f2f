# dev.py
import logging

from dotenv import load_dotenv
load_dotenv(".env")

from api import create_app
from config import Settings

settings = Settings.from_env()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app(settings=settings)

if __name__ == "__main__":
    logging.getLogger(__name__).info("Server is running on http://localhost:%s", settings.port)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
