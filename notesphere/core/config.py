import os
from pathlib import Path
from dotenv import load_dotenv

# Raíz del paquete notesphere/  ->  .../notesphere
APP_DIR = Path(__file__).resolve().parents[1]
# Raíz del repo (padre de notesphere/)
REPO_ROOT = APP_DIR.parent

load_dotenv()

# memory | sql
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory").strip().lower()
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./notesphere.db")

# === Archivos subidos (PDF) y temporales de descarga ===
UPLOADS_DIR = Path(os.getenv("UPLOADS_DIR", REPO_ROOT / "uploads")).resolve()
TEMP_DIR = Path(os.getenv("TEMP_DIR", REPO_ROOT / "tmp")).resolve()
MAX_UPLOAD_SIZE = int(os.getenv("MAX_UPLOAD_SIZE", str(25 * 1024 * 1024)))

SEED_ON_STARTUP = os.getenv("SEED_ON_STARTUP", "1") == "1"
DEFAULT_ADMIN_USERNAME = os.getenv("DEFAULT_ADMIN_USERNAME", "admin")
DEFAULT_ADMIN_PASSWORD = os.getenv("DEFAULT_ADMIN_PASSWORD", "admin123")

CORS_ORIGINS = os.getenv("CORS_ORIGINS", "")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def cors_origins() -> list[str]:
    if not CORS_ORIGINS:
        return ["http://localhost:5173"]
    return [o.strip() for o in CORS_ORIGINS.split(",") if o.strip()]

# === JWT del panel admin ===
SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
