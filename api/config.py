# config.py
import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in TRUTHY


@dataclass(frozen=True)
class Settings:
    """Process configuration, read from the environment (and .env)."""

    db_url: Optional[str] = None
    db_driver: str = "postgresql+psycopg"
    db_host: str = "localhost"
    db_port: Optional[int] = None
    db_user: Optional[str] = None
    db_password: Optional[str] = None
    db_name: Optional[str] = None
    db_fail_fast: bool = False
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: Optional[List[str]] = None
    log_level: str = "INFO"
    debug: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        db_port = os.getenv("DB_PORT")
        cors = os.getenv("CORS_ORIGINS", "*")

        if cors.strip() == "*":
            cors_origins = ["*"]
        else:
            cors_origins = [o.strip() for o in cors.split(",") if o.strip()]

        return cls(
            db_url=os.getenv("SPORTS_DB_URL") or None,
            db_driver=os.getenv("DB_DRIVER", "postgresql+psycopg"),
            db_host=os.getenv("DB_HOST", "localhost"),
            db_port=int(db_port) if db_port else None,
            db_user=os.getenv("DB_USER") or None,
            db_password=os.getenv("DB_PASSWORD") or None,
            db_name=os.getenv("DB_NAME") or None,
            db_fail_fast=_env_flag("DB_FAIL_FAST"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            cors_origins=cors_origins,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            debug=_env_flag("FLASK_DEBUG"),
        )
