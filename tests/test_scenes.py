import pytest

from ray_canvas.color import BLACK, Color
from ray_canvas.scenes import PROJECTILE_COLOR, color_map, projectile


def test_color_map_corners() -> None:
    result = color_map(3, 2)
    assert result.plotted == 6
    assert result.canvas.pixel_at(0, 0) == Color(0.0, 0.0, 0.0)
    assert result.canvas.pixel_at(2, 0) == Color(1.0, 0.0, 1.0)
    assert result.canvas.pixel_at(2, 1) == Color(1.0, 1.0, 0.0)


def test_color_map_single_column_does_not_divide_by_zero() -> None:
    result = color_map(1, 1)
    assert result.canvas.pixel_at(0, 0) == BLACK


def test_projectile_starts_at_bottom_left() -> None:
    result = projectile(900, 550)
    canvas = result.canvas
    assert canvas.pixel_at(0, 549) == PROJECTILE_COLOR
    assert result.plotted > result.skipped

    painted = sum(1 for row in canvas.rows() for pixel in row if pixel != BLACK)
    assert 0 < painted <= result.plotted


def test_projectile_skips_points_outside_small_canvas() -> None:
    result = projectile(10, 10)
    assert result.skipped > 0
    assert result.canvas.pixel_at(0, 9) == PROJECTILE_COLOR


def test_projectile_rejects_non_positive_velocity() -> None:
    with pytest.raises(ValueError):
        projectile(10, 10, velocity_scale=0)
