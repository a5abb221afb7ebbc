import math

import pytest

from polypart.errors import InvalidInput, SelfIntersecting
from polypart.geometry import Point, Polygon
from polypart.validation import ensure_ccw, is_ccw, is_convex, validate


def test_validate_keeps_ccw_polygon(l_shape):
    poly = validate(l_shape)
    assert isinstance(poly, Polygon)
    assert list(poly) == [Point(x, y) for x, y in l_shape]
    assert poly.signed_area == pytest.approx(12.0)


def test_validate_rewinds_clockwise_polygon(l_shape):
    poly = validate(list(reversed(l_shape)))
    assert poly.signed_area > 0
    assert list(poly) == [Point(x, y) for x, y in l_shape]


@pytest.mark.parametrize("points", [[], [(0, 0)], [(0, 0), (1, 1)]])
def test_too_few_points(points):
    with pytest.raises(InvalidInput) as exc:
        validate(points)
    assert exc.value.context["count"] == len(points)
    assert exc.value.kind == "invalid_input"


def test_none_is_invalid():
    with pytest.raises(InvalidInput):
        validate(None)


def test_non_pairs_are_invalid():
    with pytest.raises(InvalidInput):
        validate([(0, 0, 0), (1, 0, 0), (1, 1, 0)])
    with pytest.raises(InvalidInput):
        validate([("a", 0), (1, 0), (1, 1)])


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_coordinates(bad):
    with pytest.raises(InvalidInput) as exc:
        validate([(0, 0), (1, 0), (bad, 1)])
    assert exc.value.context["vertex"] == 2


def test_duplicate_consecutive_vertices(square):
    points = square[:2] + [square[1]] + square[2:]
    with pytest.raises(InvalidInput) as exc:
        validate(points)
    assert exc.value.context["vertex"] == 1


def test_closing_vertex_repeated(square):
    with pytest.raises(InvalidInput) as exc:
        validate(square + [square[0]])
    assert exc.value.context["vertex"] == 4


def test_zero_area_collinear():
    with pytest.raises(InvalidInput) as exc:
        validate([(0, 0), (1, 0), (2, 0)])
    assert "area" in exc.value.context


def test_bowtie_is_self_intersecting(bowtie):
    with pytest.raises(SelfIntersecting) as exc:
        validate(bowtie)
    assert exc.value.context["edges"] == (0, 2)
    assert exc.value.kind == "self_intersecting"


def test_vertex_touching_other_edge():
    notch = [(0, 0), (4, 0), (4, 4), (3, 4), (2, 0), (1, 4), (0, 4)]
    with pytest.raises(SelfIntersecting) as exc:
        validate(notch)
    assert exc.value.context["edges"] == (0, 3)


def test_edge_doubling_back():
    with pytest.raises(SelfIntersecting) as exc:
        validate([(0, 0), (4, 0), (4, 4), (2, 0)])
    assert exc.value.context["vertex"] == 0


def test_collinear_vertices_are_allowed():
    poly = validate([(0, 0), (1, 0), (2, 0), (2, 2), (0, 2)])
    assert len(poly) == 5
    assert is_convex(poly)


def test_is_convex(square, l_shape):
    assert is_convex(validate(square))
    assert not is_convex(validate(l_shape))


def test_is_convex_vertex_nearly_on_edge():
    nearly = [(0, 0), (1, 0), (1, 1), (0.5, 1 - 1e-15), (0, 1)]
    assert is_convex(validate(nearly))
    dented = [(0, 0), (1, 0), (1, 1), (0.5, 0.999), (0, 1)]
    assert not is_convex(validate(dented))


def test_ensure_ccw(square):
    cw = list(reversed(square))
    assert not is_ccw(cw)
    assert ensure_ccw(cw) == square
    assert ensure_ccw(square) == square
    assert list(validate(cw)) == ensure_ccw(cw)


def test_error_message_includes_context(bowtie):
    with pytest.raises(SelfIntersecting, match=r"edges=\(0, 2\)"):
        validate(bowtie)
