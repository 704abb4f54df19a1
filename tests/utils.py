from __future__ import annotations

from ray_canvas.config import LogLevel, Settings


def make_settings(**overrides) -> Settings:
    data = {
        "PPM_LINE_WIDTH": 70,
        "CANVAS_W": 5,
        "CANVAS_H": 3,
        "PROJECTILE_VELOCITY": 11.25,
        "LOG_LEVEL": LogLevel.CRITICAL.value,
    }
    data.update(overrides)
    return Settings.model_validate(data)
