# workforce_api/blueprints/health.py
import os

from flask import Blueprint, current_app
from sqlalchemy import text

from workforce_api.common.http import ok, fail
from workforce_api.extensions import db

bp = Blueprint("health", __name__, url_prefix="/api/v1")


@bp.get("/health")
def health():
    try:
        db.session.execute(text("SELECT 1"))
    except Exception as e:
        current_app.logger.warning("health check: database unreachable: %s", e)
        return fail("Database unreachable", 503, detail=str(e))
    return ok({"status": "ok", "database": "ok"})


@bp.get("/env-check")
def env_check():
    openai_key = os.getenv("OPENAI_API_KEY")
    return ok({
        "databaseUrlExists": bool(os.getenv("DATABASE_URL")),
        "openaiKeyExists": bool(openai_key),
        # never echo the whole key
        "openaiKeyPrefix": openai_key[:5] + "..." if openai_key else None,
        "env": os.getenv("FLASK_ENV") or ("debug" if current_app.debug else "production"),
    })
