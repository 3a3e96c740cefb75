#!/usr/bin/env python3
"""
Inspect or edit the build's point document from the shell.

Examples:
  python -m point_store.cli list
  python -m point_store.cli show assets/hero.png
  python -m point_store.cli add assets/hero.png 0,0 12,4 30,18,7
  python -m point_store.cli --root ../game clear
"""
from __future__ import annotations

import argparse
import json
import sys
from typing import Dict, List, Optional, Sequence

from common.logging_setup import get_logger, setup_logging
from common.types import Point

from .config import load_config
from .errors import PointStoreError
from .store import PointStore

log = get_logger("point_store.cli")


def parse_point(token: str, index: int) -> Point:
    """'x,y' or 'x,y,n'; without n the point's position in the argument list is used."""
    parts = [s.strip() for s in token.split(",")]
    if len(parts) not in (2, 3):
        raise argparse.ArgumentTypeError(f"bad point {token!r}, expected X,Y or X,Y,N")
    try:
        vals = [int(s) for s in parts]
        n = vals[2] if len(vals) == 3 else index
        return Point(x=vals[0], y=vals[1], n=n)
    except (TypeError, ValueError) as exc:
        raise argparse.ArgumentTypeError(f"bad point {token!r}: {exc}") from exc


def _dump(obj) -> None:
    sys.stdout.write(json.dumps(obj, indent=4) + "\n")


def _points_json(points: List[Point]) -> List[Dict[str, int]]:
    return [p.to_dict() for p in points]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="cazan-points", description="Point annotations of the asset build")
    ap.add_argument("--root", default=".", help="Project root containing .cazan/")
    ap.add_argument("--log-level", default=None, help="Override logging.level from config")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_show = sub.add_parser("show", help="Print the points of one image")
    p_show.add_argument("image")

    sub.add_parser("list", help="Print every image with its points")

    p_add = sub.add_parser("add", help="Append a record for an image")
    p_add.add_argument("image")
    p_add.add_argument("points", nargs="+", metavar="X,Y[,N]")

    sub.add_parser("clear", help="Reset the document to an empty array")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    try:
        cfg = load_config(args.root)
        setup_logging(args.log_level or cfg.log_level)
        store = PointStore.from_config(cfg)

        if args.cmd == "show":
            _dump(_points_json(store.load_one(args.image)))
        elif args.cmd == "list":
            _dump({path: _points_json(pts) for path, pts in store.load_all().items()})
        elif args.cmd == "add":
            try:
                points = [parse_point(tok, i) for i, tok in enumerate(args.points)]
            except argparse.ArgumentTypeError as exc:
                ap.error(str(exc))
            store.write_one(args.image, points)
        elif args.cmd == "clear":
            store.clear()
    except PointStoreError as exc:
        log.error("Point store operation failed", extra={"extra": {"cmd": args.cmd, "error": str(exc)}})
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
