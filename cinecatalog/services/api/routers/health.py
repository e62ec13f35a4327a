# cinecatalog/services/api/routers/health.py
from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/healthz")
def healthz(request: Request):
    """Liveness only; does not touch the database."""
    cfg = request.app.state.settings
    return {"ok": True, "app": cfg.app_name, "env": cfg.app_env}
