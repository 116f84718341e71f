import pytest

from hidden_line_surface import RenderConfig


@pytest.fixture
def small_config():
    """A thumbnail-sized plot with coarse sampling; renders in well under a second."""
    return RenderConfig(
        width=160, height=90,
        x_scale=2.0, y_scale=2.0, z_scale=30.0,
        small_step=0.05, big_step=1.0,
    )


@pytest.fixture
def coarse_full_config():
    """Stock canvas, projection and domain, with far fewer samples per curve."""
    return RenderConfig(small_step=0.05, big_step=1.0)
