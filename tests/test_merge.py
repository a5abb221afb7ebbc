import math

import pytest

from helpers import CONCAVE_CASES, reflex_count
from polypart import shapes
from polypart.merge import ConvexMerger, merge_convex
from polypart.triangulation import triangulate
from polypart.validation import is_convex, validate


def pieces_as_points(poly, pieces):
    return [[poly[i] for i in piece] for piece in pieces]


def test_l_shape_merges_into_two(l_shape):
    poly = validate(l_shape)
    tris = triangulate(poly)
    merger = ConvexMerger(poly, tris)
    pieces = merger.run()

    assert pieces == [(0, 1, 2, 3), (0, 3, 4, 5)]
    assert merger.kept == [(3, 0)]
    assert len(merger.removed) == 2


def test_convex_polygon_merges_back_to_one():
    poly = validate(shapes.convex_polygon(6))
    pieces = merge_convex(poly, triangulate(poly))
    assert len(pieces) == 1
    assert sorted(pieces[0]) == list(range(6))


def test_straight_angle_is_mergeable():
    poly = validate([(0, 0), (1, 0), (2, 0), (2, 2), (0, 2)])
    pieces = merge_convex(poly, triangulate(poly))
    assert len(pieces) == 1
    assert len(pieces[0]) == 5


@pytest.mark.parametrize("name, pts", CONCAVE_CASES, ids=[c[0] for c in CONCAVE_CASES])
def test_pieces_are_convex_and_cover_every_vertex(name, pts):
    poly = validate(pts)
    pieces = merge_convex(poly, triangulate(poly))
    for piece in pieces_as_points(poly, pieces):
        assert len(piece) >= 3
        assert is_convex(piece)
    assert set().union(*pieces) == set(range(len(poly)))


@pytest.mark.parametrize("name, pts", CONCAVE_CASES, ids=[c[0] for c in CONCAVE_CASES])
def test_no_removable_diagonal_left(name, pts):
    poly = validate(pts)
    merger = ConvexMerger(poly, triangulate(poly))
    merger.run()
    for diagonal in merger.kept:
        assert not merger.can_remove(diagonal)


@pytest.mark.parametrize("name, pts", CONCAVE_CASES, ids=[c[0] for c in CONCAVE_CASES])
def test_piece_count_bounded_by_reflex_vertices(name, pts):
    # each kept diagonal is essential at a reflex endpoint, at most two per vertex
    poly = validate(pts)
    pieces = merge_convex(poly, triangulate(poly))
    assert len(pieces) <= 2 * reflex_count(poly) + 1


def test_adjacency_tracks_merges(l_shape):
    poly = validate(l_shape)
    merger = ConvexMerger(poly, triangulate(poly))
    assert merger.neighbours[1] == {0, 2}
    merger.run()
    assert set(merger.cells) == {0, 2}
    assert merger.neighbours[0] == {2}
    assert merger.neighbours[2] == {0}


def test_merged_area_is_preserved():
    pts = shapes.star_polygon(6)
    poly = validate(pts)
    pieces = merge_convex(poly, triangulate(poly))
    total = 0.0
    for piece in pieces_as_points(poly, pieces):
        n = len(piece)
        total += sum(piece[i].x * piece[(i + 1) % n].y - piece[(i + 1) % n].x * piece[i].y for i in range(n)) / 2
    assert math.isclose(total, poly.area, rel_tol=1e-9)
