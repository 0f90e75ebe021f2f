# scripts/initDb.py
# Creates the sports table if it does not exist.
#
#   python scripts/initDb.py
#   python scripts/initDb.py --url sqlite:///sports.db
import bootstrap  # noqa: F401
import argparse
import logging

from config import Settings
from db import build_db_url, check_connection, create_db_engine, init_schema


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create the sports table")
    parser.add_argument("--url", help="SQLAlchemy database URL (defaults to SPORTS_DB_URL / DB_*)")
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level)

    engine = create_db_engine(args.url or build_db_url(settings))
    check_connection(engine, fail_fast=True)
    init_schema(engine)

    print(f"[initDb] sports table ready on {engine.url.render_as_string(hide_password=True)}")


if __name__ == "__main__":
    main()
