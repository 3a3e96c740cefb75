"""
Point Store — per-image point annotations for the asset build

- Persists `.cazan/build/assets.json`: a JSON array of
  {"path": str, "points": [{"x", "y", "n"}, ...]}
- load_one / load_all for consumers, write_one / write_all for the build step
- `python -m point_store.cli` and `point_store.server` wrap the same store
"""
from .errors import FileReadError, ImageNotFound, ParseError, PointStoreError, WriteError
from .store import ASSETS_JSON, PointStore

__all__ = [
    "ASSETS_JSON",
    "FileReadError",
    "ImageNotFound",
    "ParseError",
    "PointStore",
    "PointStoreError",
    "WriteError",
]
