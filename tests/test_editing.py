import re

import pytest

from lumagradient import (
    GradientType,
    add_stop,
    clear_anchor,
    default_config,
    move_anchor,
    new_stop_id,
    remove_stop,
    set_angle,
    set_noise,
    set_stop_color,
    set_stop_position,
    set_type,
)


def test_mutators_return_new_configs():
    cfg = default_config()
    updated = set_noise(cfg, 0.5)
    assert updated is not cfg
    assert cfg.noise == pytest.approx(0.1)
    assert updated.noise == 0.5


@pytest.mark.parametrize("raw, expected", [(-3.0, 0.0), (0.25, 0.25), (7.0, 1.0)])
def test_noise_clamped(raw, expected):
    assert set_noise(default_config(), raw).noise == expected


@pytest.mark.parametrize("raw, expected", [(-20, 0.0), (42.5, 42.5), (250, 100.0)])
def test_position_clamped(raw, expected):
    cfg = set_stop_position(default_config(), "1", raw)
    assert cfg.get_stop("1").position == expected


@pytest.mark.parametrize("raw, expected", [(-5, 0), (89.6, 90), (400, 360)])
def test_angle_rounded_and_clamped(raw, expected):
    assert set_angle(default_config(), raw).angle == expected


NON_FINITE = [float("nan"), float("inf"), float("-inf")]


@pytest.mark.parametrize("raw", NON_FINITE)
def test_noise_rejects_non_finite(raw):
    with pytest.raises(ValueError, match="noise"):
        set_noise(default_config(), raw)


@pytest.mark.parametrize("raw", NON_FINITE)
def test_position_rejects_non_finite(raw):
    with pytest.raises(ValueError, match="position"):
        set_stop_position(default_config(), "1", raw)


@pytest.mark.parametrize("raw", NON_FINITE)
def test_angle_rejects_non_finite(raw):
    with pytest.raises(ValueError, match="angle"):
        set_angle(default_config(), raw)


def test_set_type_accepts_strings():
    assert set_type(default_config(), "mesh").type is GradientType.MESH


def test_set_stop_color_validates():
    cfg = set_stop_color(default_config(), "2", "#00AAFF")
    assert cfg.get_stop("2").color == "#00AAFF"
    with pytest.raises(ValueError):
        set_stop_color(cfg, "2", "#zzzzzz")


def test_unknown_stop_id_warns_and_keeps_config():
    cfg = default_config()
    with pytest.warns(UserWarning):
        assert set_stop_position(cfg, "missing", 50) is cfg


def test_add_stop_steps_ten_after_last_inserted():
    cfg = set_stop_position(default_config(), "2", 40)
    cfg = add_stop(cfg)
    new = cfg.stops[-1]
    assert new.position == 50
    assert new.color == "#ffffff"
    assert len({s.id for s in cfg.stops}) == 3


def test_add_stop_clamps_at_hundred():
    cfg = set_stop_position(default_config(), "2", 95)
    cfg = add_stop(cfg)
    assert cfg.stops[-1].position == 100


def test_remove_stop_never_drops_below_two():
    cfg = add_stop(add_stop(default_config()))
    assert len(cfg.stops) == 4
    for stop_id in [s.id for s in cfg.stops]:
        cfg = remove_stop(cfg, stop_id)
        assert len(cfg.stops) >= 2
    assert len(cfg.stops) == 2
    before = cfg
    assert remove_stop(cfg, cfg.stops[0].id) is before


def test_move_anchor_clamps_and_replaces_by_id():
    cfg = set_type(default_config(), "mesh")
    cfg = move_anchor(cfg, "1", 1.5, -0.2)
    stop = cfg.get_stop("1")
    assert (stop.x, stop.y) == (1.0, 0.0)
    assert cfg.stop_index("1") == 0
    assert not cfg.get_stop("2").has_anchor


def test_move_anchor_rejects_nan():
    with pytest.raises(ValueError, match="x"):
        move_anchor(default_config(), "1", float("nan"), 0.5)


def test_clear_anchor_restores_default_layout():
    cfg = move_anchor(default_config(), "2", 0.3, 0.3)
    cfg = clear_anchor(cfg, "2")
    assert cfg.get_stop("2").x is None
    assert cfg.get_stop("2").y is None


def test_new_stop_id_format():
    ids = {new_stop_id() for _ in range(50)}
    assert len(ids) == 50
    assert all(re.fullmatch(r"[a-z0-9]{9}", i) for i in ids)
