from dotenv import load_dotenv
import os

load_dotenv()


def _env_bool(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///sandwiches.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Test connection sebelum digunakan, menghindari idle connection drops
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
    }

    # Seed default breads/ingredients/sauces on an empty first snapshot
    SEED_DEFAULTS = _env_bool("SEED_DEFAULTS", True)

    # Seconds between polls of a live collection subscription
    SNAPSHOT_POLL_INTERVAL = float(os.getenv("SNAPSHOT_POLL_INTERVAL", "0.5"))

    # Seconds an event stream may stay silent before a heartbeat comment is sent
    SNAPSHOT_HEARTBEAT_INTERVAL = float(os.getenv("SNAPSHOT_HEARTBEAT_INTERVAL", "15"))

    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",") if o.strip()]
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
