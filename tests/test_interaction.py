import pytest

from lumagradient import (
    AnchorDragController,
    InteractionState,
    move_anchor,
    remove_stop,
    resolve_anchors,
    set_type,
)

W, H = 400, 300


@pytest.fixture
def mesh(four_stops):
    return set_type(four_stops, "mesh")


@pytest.mark.parametrize("gradient_type", ["mesh", "gaussian"])
def test_hit_at_every_resolved_anchor(four_stops, gradient_type):
    cfg = set_type(four_stops, gradient_type)
    controller = AnchorDragController()
    for stop, (ax, ay) in zip(cfg.stops, resolve_anchors(cfg, W, H)):
        assert controller.hit_test(cfg, ax, ay, W, H) == stop.id


def test_hit_radius_boundary(mesh):
    controller = AnchorDragController()
    ax, ay = resolve_anchors(mesh, W, H)[0]
    assert controller.hit_test(mesh, ax + 29.9, ay, W, H) == "r"
    assert controller.hit_test(mesh, ax + 30.5, ay, W, H) is None


def test_far_from_everything_misses(mesh):
    controller = AnchorDragController()
    assert controller.hit_test(mesh, W / 2, H * 0.4, W, H) is None


def test_non_spatial_types_never_hit(four_stops):
    controller = AnchorDragController()
    cfg = set_type(four_stops, "linear")
    for ax, ay in resolve_anchors(set_type(four_stops, "gaussian"), W, H):
        assert controller.hit_test(cfg, ax, ay, W, H) is None
    assert controller.pointer_down(cfg, 0, 0, W, H) is None
    assert controller.state is InteractionState.IDLE


def test_topmost_anchor_wins(mesh):
    cfg = move_anchor(move_anchor(mesh, "g", 0.5, 0.5), "k", 0.5, 0.5)
    controller = AnchorDragController()
    assert controller.hit_test(cfg, W / 2, H / 2, W, H) == "k"


def test_drag_cycle(mesh):
    seen = []
    controller = AnchorDragController(on_change=seen.append)
    ax, ay = resolve_anchors(mesh, W, H)[2]

    assert controller.pointer_down(mesh, ax + 3, ay - 3, W, H) == "b"
    assert controller.state is InteractionState.DRAGGING

    cfg = controller.pointer_move(mesh, W / 2, H / 2, W, H)
    stop = cfg.get_stop("b")
    assert (stop.x, stop.y) == (0.5, 0.5)
    assert seen == [cfg]
    assert mesh.get_stop("b").x is None

    cfg = controller.pointer_move(cfg, W * 0.25, H * 0.75, W, H)
    assert (cfg.get_stop("b").x, cfg.get_stop("b").y) == (0.25, 0.75)
    assert len(seen) == 2

    controller.pointer_up()
    assert controller.dragging_id is None
    assert controller.pointer_move(cfg, 0, 0, W, H) is None
    assert len(seen) == 2


def test_drag_off_canvas_clamps(mesh):
    controller = AnchorDragController()
    ax, ay = resolve_anchors(mesh, W, H)[0]
    controller.pointer_down(mesh, ax, ay, W, H)
    cfg = controller.pointer_move(mesh, -50, H + 80, W, H)
    assert (cfg.get_stop("r").x, cfg.get_stop("r").y) == (0.0, 1.0)


def test_dragged_anchor_is_found_again(mesh):
    controller = AnchorDragController()
    ax, ay = resolve_anchors(mesh, W, H)[1]
    controller.pointer_down(mesh, ax, ay, W, H)
    cfg = controller.pointer_move(mesh, 123, 210, W, H)
    controller.pointer_up()
    assert controller.hit_test(cfg, 123, 210, W, H) == "g"


def test_pointer_down_on_empty_space(mesh):
    controller = AnchorDragController()
    assert controller.pointer_down(mesh, W / 2, H * 0.4, W, H) is None
    assert controller.state is InteractionState.IDLE
    assert controller.pointer_move(mesh, 10, 10, W, H) is None


def test_hover_and_leave(mesh):
    controller = AnchorDragController()
    ax, ay = resolve_anchors(mesh, W, H)[3]
    assert controller.pointer_move(mesh, ax + 5, ay, W, H) is None
    assert controller.hovered_id == "k"
    assert controller.state is InteractionState.HOVERING

    controller.pointer_move(mesh, W / 2, H * 0.4, W, H)
    assert controller.state is InteractionState.IDLE

    controller.pointer_down(mesh, ax, ay, W, H)
    controller.pointer_leave()
    assert controller.dragging_id is None
    assert controller.hovered_id is None
    assert controller.state is InteractionState.IDLE


def test_stop_removed_mid_drag(mesh):
    controller = AnchorDragController()
    ax, ay = resolve_anchors(mesh, W, H)[0]
    controller.pointer_down(mesh, ax, ay, W, H)
    cfg = remove_stop(mesh, "r")
    assert controller.pointer_move(cfg, 10, 10, W, H) is None
    assert not controller.is_dragging
