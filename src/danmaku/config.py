""" Any global variables are stored here"""
import logging
from typing import Any

# fmt: off
g: dict[str, Any] = {
    # User settable
    "W": 480,                       # int, width of the shooting field
    "H": 640,                       # int, height of the shooting field
    "FPS": 60,                      # float
    "key_interval": 50,             # int in ms, keyboard sampling period
    "out_of_area_margin": 50,       # float in px
}

DEBUG = False
# fmt: on


def set_config(**kwargs):
    """
    Update `g` from keyword arguments. `None` values are ignored.

    `set_config(width=320, fps=30)`
    """
    m2g = {"width": "W", "height": "H", "fps": "FPS"}
    for k, v in kwargs.items():
        key = m2g.get(k, k)
        if key not in g:
            raise KeyError(f"Unknown setting: {k!r}")
        if v is not None:
            g[key] = v


def setup_logging(level: int | None = None):
    """
    Configures the root logger. Uses DEBUG if `DEBUG` is set and INFO otherwise.
    """
    if level is None:
        level = logging.DEBUG if DEBUG else logging.INFO
    logging.basicConfig(level=level)
