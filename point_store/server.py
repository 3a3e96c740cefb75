"""
Read-only HTTP view of the point document.

Run with:
  uvicorn point_store.server:app --port 8010
The module-level `app` serves the project at $CAZAN_ROOT (default: cwd);
tests and embedders build their own with `create_app(store)`.
"""
from __future__ import annotations

import os
from typing import Dict, List, Optional

import uvicorn
from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse

from common.logging_setup import get_logger, setup_logging
from common.types import Point, normalize_path

from .config import load_config
from .errors import ImageNotFound, PointStoreError
from .store import PointStore

log = get_logger("point_store.server")


def _points_json(points: List[Point]) -> List[Dict[str, int]]:
    return [p.to_dict() for p in points]


def _error(kind: str, exc: Exception, status: int) -> JSONResponse:
    return JSONResponse({"error": kind, "detail": str(exc)}, status_code=status)


def create_app(store: Optional[PointStore] = None) -> FastAPI:
    """
    Read-only view of the point document for downstream consumers.

      GET /health        -> store location and whether the document exists
      GET /points?path=  -> points of one image (404 if unknown)
      GET /points/all    -> {path: points}
    """
    if store is None:
        cfg = load_config(os.environ.get("CAZAN_ROOT", "."))
        setup_logging(cfg.log_level)
        store = PointStore.from_config(cfg)

    app = FastAPI(title="Cazan Point Store", version="0.1.0")

    @app.get("/health")
    def health():
        return {"status": "ok", "file": str(store.path), "exists": store.exists()}

    @app.get("/points/all")
    def points_all():
        try:
            data = store.load_all()
        except PointStoreError as exc:
            log.error("load_all failed", extra={"extra": {"error": str(exc)}})
            return _error(type(exc).__name__, exc, 500)
        return {path: _points_json(pts) for path, pts in data.items()}

    @app.get("/points")
    def points_one(path: str = Query(...)):
        try:
            pts = store.load_one(path)
        except ImageNotFound as exc:
            return _error("image_not_found", exc, 404)
        except PointStoreError as exc:
            log.error("load_one failed", extra={"extra": {"image": path, "error": str(exc)}})
            return _error(type(exc).__name__, exc, 500)
        return {"path": normalize_path(path), "points": _points_json(pts)}

    return app


app = create_app()


# -------- local dev entrypoint --------
if __name__ == "__main__":
    uvicorn.run(app, host="127.0.0.1", port=8010)
