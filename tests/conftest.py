"""
Pytest configuration and fixtures for workspace_tint tests.
"""
import pytest

from workspace_tint.color.convert import Oklch, oklch_to_hex
from workspace_tint.color.tint import compute_tint


@pytest.fixture
def one_dark_colors():
    """Theme colors of a typical dark theme (Atom One Dark)."""
    return {
        "editor.background": "#282C34",
        "statusBar.background": "#21252B",
    }


@pytest.fixture
def straddling_theme_colors():
    """Background hues either side of 210, the point opposite hue 30.

    From a tint hue of 30, 195 is reached clockwise and 225
    counter-clockwise along the shortest path.
    """
    near = oklch_to_hex(Oklch(0.3, 0.05, 195))
    far = oklch_to_hex(Oklch(0.3, 0.05, 225))
    return {
        "editor.background": "#1e1e1e",
        "titleBar.activeBackground": near,
        "statusBar.background": far,
        "activityBar.background": near,
        "sideBar.background": far,
    }


@pytest.fixture
def sample_result(one_dark_colors):
    """A tint result with three enabled targets and theme blending."""
    return compute_tint(
        workspace_identifier="my-project",
        targets=["titleBar", "statusBar", "activityBar"],
        theme_type="dark",
        theme_colors=one_dark_colors,
    )
