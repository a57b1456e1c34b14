"""
FastAPI application entry point.

Run:  cd lumos-schema-tools && python -m uvicorn app.main:app --reload --port 8000

Set ``LUMOS_SETTINGS`` to a JSON file of editor settings
(``{"format.indentSize": 2, ...}``) to override the defaults.
"""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(name)s  %(levelname)s  %(message)s",
)

_project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_project_root / "src"))

from fastapi import FastAPI

from infrastructure import LumosSettings
from services.schema_service import SchemaService
from app.routes import router, init_service

_settings_file = os.environ.get("LUMOS_SETTINGS")
settings = LumosSettings.load(_settings_file) if _settings_file else LumosSettings()

app = FastAPI(title="LUMOS Schema Tools")

init_service(SchemaService(settings=settings))

# API routes
app.include_router(router)


@app.get("/health")
def health():
    return {"status": "ok"}
