import numpy as np
import pytest

from lumagradient import ColorStop, GradientConfig, GradientType


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def black_white():
    """Linear black -> white at 0 deg, no grain."""
    return GradientConfig(
        type=GradientType.LINEAR,
        angle=0,
        noise=0.0,
        stops=(
            ColorStop(id="a", color="#000000", position=0),
            ColorStop(id="b", color="#ffffff", position=100),
        ),
    )


@pytest.fixture
def four_stops():
    return GradientConfig(
        type=GradientType.MESH,
        angle=90,
        noise=0.0,
        stops=(
            ColorStop(id="r", color="#ff0000", position=60),
            ColorStop(id="g", color="#00ff00", position=20),
            ColorStop(id="b", color="#0000ff", position=80),
            ColorStop(id="k", color="#000000", position=20),
        ),
    )


def _luminance(rgba):
    rgb = np.asarray(rgba, dtype=np.float64)[..., :3]
    return rgb @ np.array([0.2126, 0.7152, 0.0722])


@pytest.fixture
def luminance():
    """Rec. 709 luma of an RGB(A) array, channels on the last axis."""
    return _luminance
