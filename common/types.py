from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Tuple

U32_MAX = 2**32 - 1


def _check_uint(name: str, value: Any, upper: int | None = None) -> int:
    # bool is an int subclass; JSON true/false must not pass as coordinates
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be >= 0")
    if upper is not None and value > upper:
        raise ValueError(f"{name} must be <= {upper}")
    return value


def normalize_path(path: str) -> str:
    """Image paths are compared POSIX-style: back-slashes become forward slashes."""
    if not isinstance(path, str):
        raise TypeError("image path must be a str")
    return path.replace("\\", "/")


@dataclass(frozen=True, slots=True)
class Point:
    """
    A 2D pixel coordinate with the ordinal of the annotation.

    Attributes:
        x, y: unsigned 32-bit pixel coordinates.
        n: annotation index (ordering is not enforced by the store).
    """
    x: int
    y: int
    n: int

    def __post_init__(self) -> None:
        _check_uint("x", self.x, U32_MAX)
        _check_uint("y", self.y, U32_MAX)
        _check_uint("n", self.n)

    def as_tuple(self) -> Tuple[int, int]:
        """The bare (x, y) coordinate."""
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y, "n": self.n}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Point":
        if not isinstance(data, dict):
            raise TypeError("point must be a JSON object")
        missing = [k for k in ("x", "y", "n") if k not in data]
        if missing:
            raise ValueError(f"point is missing keys: {', '.join(missing)}")
        return cls(x=data["x"], y=data["y"], n=data["n"])


@dataclass(frozen=True, slots=True)
class ImageRecord:
    """
    One document entry: an image path and its points, in file order.
    """
    path: str
    points: Tuple[Point, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", normalize_path(self.path))
        pts = tuple(self.points)
        for p in pts:
            if not isinstance(p, Point):
                raise TypeError("points must contain Point instances")
        object.__setattr__(self, "points", pts)

    @classmethod
    def build(cls, path: str, points: Iterable[Point]) -> "ImageRecord":
        return cls(path=path, points=tuple(points))

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ImageRecord":
        if not isinstance(data, dict):
            raise TypeError("image record must be a JSON object")
        if "path" not in data or "points" not in data:
            raise ValueError("image record needs 'path' and 'points'")
        if not isinstance(data["points"], list):
            raise TypeError("'points' must be a JSON array")
        return cls(path=data["path"], points=tuple(Point.from_dict(p) for p in data["points"]))
