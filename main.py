# =============================================================================
# 🚀 Qrius QR – Hauptapplikation (main.py)
# =============================================================================

from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from fastapi import FastAPI

# -------------------------------------------------------------------------
# 1️⃣ .env laden (muss ganz oben sein, Module lesen os.getenv beim Import)
# -------------------------------------------------------------------------
env_path = Path(__file__).resolve().parent / ".env"
load_dotenv(dotenv_path=env_path)

APP_TITLE = os.getenv("APP_TITLE", "Qrius QR")
APP_VERSION = "1.0"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# -------------------------------------------------------------------------
# 2️⃣ Logging
# -------------------------------------------------------------------------
logging.basicConfig(
    level=LOG_LEVEL,
    format="[%(asctime)s] [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("qrius")
logger.info(f"🧩 .env geladen von: {env_path}")

# -------------------------------------------------------------------------
# 3️⃣ FastAPI App + Routen
# -------------------------------------------------------------------------
from routes import payload  # noqa: E402

app = FastAPI(title=APP_TITLE, version=APP_VERSION)
app.include_router(payload.router)


# -------------------------------------------------------------------------
# 4️⃣ Home / Health
# -------------------------------------------------------------------------
@app.get("/")
def home() -> Dict[str, Any]:
    return {
        "name": APP_TITLE,
        "version": APP_VERSION,
        "endpoints": ["/api/v1/types", "/api/v1/payload", "/api/v1/validate", "/api/v1/render",
                      "/api/v1/scannability", "/api/v1/shorten"],
    }


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}
