from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional

from common.logging_setup import get_logger
from common.types import ImageRecord, Point, normalize_path

from .config import ProjectConfig
from .errors import FileReadError, ImageNotFound, ParseError, WriteError

ASSETS_JSON = Path(".cazan/build/assets.json")

log = get_logger("point_store")


class PointStore:
    """
    Reads and rewrites the point-collection document:

        [
            {"path": "assets/hero.png", "points": [{"x": 0, "y": 0, "n": 0}, ...]},
            ...
        ]

    Every call reads the whole file, and writes rewrite it in full. There is
    no locking; two processes writing the same document race.
    """
    def __init__(self, root: str | Path = ".", path: Optional[str | Path] = None):
        self.root = Path(root)
        self.path = Path(path) if path is not None else self.root / ASSETS_JSON

    @classmethod
    def from_config(cls, cfg: ProjectConfig) -> "PointStore":
        return cls(root=cfg.root, path=cfg.assets_json)

    # -------- public API --------

    def exists(self) -> bool:
        return self.path.is_file()

    def records(self) -> List[ImageRecord]:
        """The parsed document, in file order (duplicates kept)."""
        return self._parse(self._read_text())

    def load_one(self, image_path: str) -> List[Point]:
        """
        Points of the first record whose path equals `image_path` (back-slashes
        normalized). Raises ImageNotFound when there is none.
        """
        wanted = normalize_path(image_path)
        for rec in self.records():
            if rec.path == wanted:
                log.debug("Loaded points", extra={"extra": {"image": wanted, "points": len(rec.points)}})
                return list(rec.points)
        raise ImageNotFound(wanted)

    def load_all(self) -> Dict[str, List[Point]]:
        """Every record as path -> points; a later duplicate path replaces an earlier one."""
        out: Dict[str, List[Point]] = {}
        for rec in self.records():
            out[rec.path] = list(rec.points)
        log.debug("Loaded all points", extra={"extra": {"images": len(out), "file": str(self.path)}})
        return out

    def write_one(self, image_path: str, points: Iterable[Point]) -> None:
        """
        Append one record and rewrite the file. A missing or empty document
        starts as []. Paths are not deduplicated.
        """
        if self.exists():
            text = self._read_text()
            records = self._parse(text) if text.strip() else []
        else:
            records = []
        records.append(ImageRecord.build(image_path, points))
        self._write(records)
        log.info(
            "Appended image points",
            extra={"extra": {"image": records[-1].path, "points": len(records[-1].points), "records": len(records)}},
        )

    def write_all(self, images_points: Mapping[str, Iterable[Point]]) -> None:
        """Replace the document with one record per mapping entry."""
        records = [ImageRecord.build(p, pts) for p, pts in images_points.items()]
        self._write(records)
        log.info("Rewrote point document", extra={"extra": {"records": len(records), "file": str(self.path)}})

    def clear(self) -> None:
        self._write([])

    # -------- internals --------

    def _read_text(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(f"Failed to parse {self.path}: not UTF-8 ({exc})") from exc
        except OSError as exc:
            raise FileReadError(f"Failed to read {self.path}: {exc}") from exc

    def _parse(self, text: str) -> List[ImageRecord]:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Failed to parse {self.path}: {exc}") from exc
        if not isinstance(data, list):
            raise ParseError(f"Failed to parse {self.path}: top level must be an array")
        records: List[ImageRecord] = []
        for i, item in enumerate(data):
            try:
                records.append(ImageRecord.from_dict(item))
            except (TypeError, ValueError) as exc:
                raise ParseError(f"Failed to parse {self.path}: record {i}: {exc}") from exc
        return records

    def _write(self, records: List[ImageRecord]) -> None:
        text = json.dumps([r.to_dict() for r in records], indent=4)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise WriteError(f"Failed to write to {self.path}: {exc}") from exc
