"""Application configuration. Load from environment."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

APP_DIR = Path(__file__).resolve().parent.parent

DEFAULT_DATABASE_URL = "sqlite:///./content.db"
DEFAULT_PORT = 3000


def get_database_url() -> str:
    """Return DATABASE_URL from environment; default a SQLite file in cwd."""
    return os.environ.get("DATABASE_URL", "").strip() or DEFAULT_DATABASE_URL


def get_port() -> int:
    """Porta HTTP da PORT, default 3000."""
    raw = os.environ.get("PORT", "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"PORT must be an integer, got {raw!r}")


def get_host() -> str:
    return os.environ.get("HOST", "").strip() or "0.0.0.0"


def get_static_dir() -> Path:
    """Root statica servita così com'è su '/' (css, js, immagini)."""
    return APP_DIR / "static"


def get_templates_dir() -> Path:
    return APP_DIR / "templates"


def get_upload_dir() -> Path:
    """
    Directory delle immagini caricate. Deve stare sotto la root statica
    perché il client le referenzia come images/assets/<filename>.
    """
    raw = os.environ.get("UPLOAD_DIR", "").strip()
    if raw:
        return Path(raw)
    return get_static_dir() / "images" / "assets"
