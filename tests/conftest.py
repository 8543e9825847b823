import pytest

from julia import JULIA_SETS, RenderParameters


@pytest.fixture
def small_params():
    return RenderParameters(
        width=17,
        height=13,
        constant=JULIA_SETS[1],
        max_iterations=60,
        escape_radius=2.0,
    )
