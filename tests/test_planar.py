import pytest

from algokit.geometry import Point
from algokit.planar import PlanarGraph

CORNERS = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]


def _square(diagonal=False):
    g = PlanarGraph(CORNERS)
    for i in range(4):
        g.add_edge(i, (i + 1) % 4)
    if diagonal:
        g.add_edge(0, 2)
    return g


def test_single_face():
    assert _square().enumerate_faces() == [2]


def test_diagonal_splits_face():
    faces = _square(diagonal=True).enumerate_faces()
    assert sorted(faces) == [1, 1]


def test_face_areas_sum_to_outer():
    assert sum(_square(diagonal=True).enumerate_faces()) == sum(_square().enumerate_faces())


def test_tree_has_no_faces():
    g = PlanarGraph(CORNERS)
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    assert g.enumerate_faces() == []


def test_bad_edge():
    with pytest.raises(IndexError):
        PlanarGraph(CORNERS).add_edge(0, 7)