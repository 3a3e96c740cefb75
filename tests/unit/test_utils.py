"""
Unit tests for numpy point helpers
"""

import os
import sys

import numpy as np
import pytest

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.append(project_root)

from common.types import Point
from common.utils import points_from_array, points_to_array


class TestPointArrays:

    def test_to_array(self):
        pts = [Point(0, 0, 0), Point(4, 4, 3)]
        a = points_to_array(pts)
        assert a.shape == (2, 2)
        assert a.tolist() == [[0, 0], [4, 4]]
        assert points_to_array(pts, with_index=True).tolist() == [[0, 0, 0], [4, 4, 3]]

    def test_to_array_empty(self):
        assert points_to_array([]).shape == (0, 2)
        assert points_to_array([], with_index=True).shape == (0, 3)

    def test_from_xy_array_numbers_rows(self):
        pts = points_from_array(np.array([[10, 20], [30, 40]], dtype=np.int32), start=5)
        assert pts == [Point(10, 20, 5), Point(30, 40, 6)]

    def test_from_xyn_array(self):
        pts = points_from_array([[1, 2, 9], [3, 4, 8]])
        assert pts == [Point(1, 2, 9), Point(3, 4, 8)]

    def test_from_integral_floats(self):
        assert points_from_array(np.array([[1.0, 2.0]])) == [Point(1, 2, 0)]

    def test_from_array_rejects(self):
        with pytest.raises(ValueError):
            points_from_array(np.array([1, 2, 3]))
        with pytest.raises(ValueError):
            points_from_array(np.array([[1.5, 2.0]]))
        with pytest.raises(ValueError):
            points_from_array(np.array([[-1, 2]]))

    def test_from_empty(self):
        assert points_from_array(np.zeros((0, 2))) == []
