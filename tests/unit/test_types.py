"""
Unit tests for Point and ImageRecord
"""

import dataclasses
import os
import sys

import pytest

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.append(project_root)

from common.types import ImageRecord, Point, U32_MAX, normalize_path


class TestPoint:
    """Test cases for Point"""

    def test_creation(self):
        p = Point(x=3, y=7, n=2)
        assert (p.x, p.y, p.n) == (3, 7, 2)
        assert p.as_tuple() == (3, 7)

    def test_immutable(self):
        p = Point(1, 2, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = 5  # type: ignore[misc]

    def test_bounds(self):
        assert Point(U32_MAX, U32_MAX, 0).x == U32_MAX
        with pytest.raises(ValueError):
            Point(U32_MAX + 1, 0, 0)
        with pytest.raises(ValueError):
            Point(0, -1, 0)
        with pytest.raises(ValueError):
            Point(0, 0, -1)

    def test_rejects_non_int(self):
        with pytest.raises(TypeError):
            Point(1.0, 2, 0)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            Point(True, 2, 0)
        with pytest.raises(TypeError):
            Point(1, "2", 0)  # type: ignore[arg-type]

    def test_dict_conversion(self):
        p = Point.from_dict({"x": 4, "y": 4, "n": 3})
        assert p == Point(4, 4, 3)
        assert p.to_dict() == {"x": 4, "y": 4, "n": 3}

    def test_from_dict_missing_key(self):
        with pytest.raises(ValueError, match="n"):
            Point.from_dict({"x": 4, "y": 4})


class TestImageRecord:
    """Test cases for ImageRecord"""

    def test_path_normalized(self):
        rec = ImageRecord.build("assets\\ui\\button.png", [Point(0, 0, 0)])
        assert rec.path == "assets/ui/button.png"
        assert rec.points == (Point(0, 0, 0),)

    def test_from_dict(self):
        rec = ImageRecord.from_dict({"path": "a.png", "points": [{"x": 1, "y": 2, "n": 0}]})
        assert rec.to_dict() == {"path": "a.png", "points": [{"x": 1, "y": 2, "n": 0}]}

    def test_rejects_foreign_points(self):
        with pytest.raises(TypeError):
            ImageRecord.build("a.png", [(1, 2)])  # type: ignore[list-item]

    def test_normalize_path_requires_str(self):
        assert normalize_path("a\\b") == "a/b"
        with pytest.raises(TypeError):
            normalize_path(None)  # type: ignore[arg-type]
