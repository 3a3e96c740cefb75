from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import ParseError

CONFIG_PATH = Path(".cazan/config.json")

_DEFAULTS: Dict[str, Any] = {
    "assets-dir": "assets",
    "build-dir": ".cazan/build",
    "logging": {"level": "INFO"},
}


@dataclass(frozen=True)
class ProjectConfig:
    """Resolved project settings; every path is anchored at `root`."""
    root: Path
    assets_dir: Path
    build_dir: Path
    log_level: str = "INFO"

    @property
    def assets_json(self) -> Path:
        return self.build_dir / "assets.json"


def _load_raw(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"Failed to parse {path}: not UTF-8 ({exc})") from exc
    if not text.strip():
        return {}
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Failed to parse {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ParseError(f"{path} must contain an object")
    return data


def _setting(raw: Dict[str, Any], key: str) -> Any:
    # null counts as unset
    value = raw.get(key)
    return _DEFAULTS[key] if value is None else value


def load_config(root: str | Path = ".", path: Optional[str | Path] = None) -> ProjectConfig:
    """
    Read `<root>/.cazan/config.json` (or `path`) and fill in defaults:
      assets-dir  -> assets
      build-dir   -> .cazan/build
      logging.level -> INFO
    A missing or empty file yields the defaults.
    """
    root = Path(root)
    cfg_path = Path(path) if path is not None else root / CONFIG_PATH
    raw = _load_raw(cfg_path)

    log_cfg = raw.get("logging") or {}
    if not isinstance(log_cfg, dict):
        raise ParseError(f"{cfg_path}: 'logging' must be an object")
    level = log_cfg.get("level") or _DEFAULTS["logging"]["level"]

    for key in ("assets-dir", "build-dir"):
        if not isinstance(_setting(raw, key), str):
            raise ParseError(f"{cfg_path}: '{key}' must be a string")

    return ProjectConfig(
        root=root,
        assets_dir=root / _setting(raw, "assets-dir"),
        build_dir=root / _setting(raw, "build-dir"),
        log_level=str(level).upper(),
    )
