import math

import pytest

from lumagradient import ColorStop, GradientType, move_anchor, resolve_anchor, resolve_anchors, set_type
from lumagradient.layout import normalize_point

W, H = 400, 300


def _stop(x=None, y=None):
    return ColorStop("s", "#123456", 50, x=x, y=y)


@pytest.mark.parametrize("index, expected", [
    (0, (0.2 * W, 0.2 * H)),
    (1, (0.8 * W, 0.2 * H)),
    (2, (0.2 * W, 0.6 * H)),
    (3, (0.8 * W, 0.6 * H)),
    (4, (0.5 * W, 1.0 * H)),
    (5, (0.5 * W, 1.0 * H)),
    (6, (0.5 * W, 1.4 * H)),
])
def test_mesh_default_grid(index, expected):
    x, y = resolve_anchor(_stop(), index, 7, GradientType.MESH, W, H)
    assert (x, y) == pytest.approx(expected)


def test_gaussian_default_ring():
    total = 4
    points = [resolve_anchor(_stop(), i, total, "gaussian", W, H) for i in range(total)]
    assert points[0] == pytest.approx((W / 2 + 0.2 * W, H / 2))
    assert points[1] == pytest.approx((W / 2, H / 2 + 0.2 * W))
    assert points[2] == pytest.approx((W / 2 - 0.2 * W, H / 2))
    for x, y in points:
        assert math.hypot(x - W / 2, y - H / 2) == pytest.approx(0.2 * W)


def test_default_is_deterministic():
    a = resolve_anchor(_stop(), 3, 5, "gaussian", W, H)
    b = resolve_anchor(_stop(), 3, 5, "gaussian", W, H)
    assert a == b


@pytest.mark.parametrize("gradient_type", ["mesh", "gaussian"])
@pytest.mark.parametrize("index", [0, 3, 9])
def test_explicit_coordinates_win(gradient_type, index):
    assert resolve_anchor(_stop(0.25, 0.75), index, 10, gradient_type, W, H) == (0.25 * W, 0.75 * H)


def test_half_anchor_uses_default():
    assert resolve_anchor(_stop(x=0.9), 0, 2, "mesh", W, H) == pytest.approx((0.2 * W, 0.2 * H))


@pytest.mark.parametrize("size", [(100, 100), (640, 480), (33, 1000)])
def test_dragged_to_center_resolves_to_center(four_stops, size):
    w, h = size
    for gradient_type in ("mesh", "gaussian"):
        cfg = move_anchor(set_type(four_stops, gradient_type), "b", 0.5, 0.5)
        anchors = resolve_anchors(cfg, w, h)
        assert anchors[cfg.stop_index("b")] == pytest.approx((w / 2, h / 2))


def test_normalize_point_clamps():
    assert normalize_point(50, 25, 100, 100) == (0.5, 0.25)
    assert normalize_point(-10, 500, 100, 100) == (0.0, 1.0)
