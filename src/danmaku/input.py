"""
The state of the users input in the shooting scene
"""

import time
from typing import Sequence

import pygame as pg

from danmaku.config import g

DOWN_KEYS = (pg.K_s, pg.K_DOWN)
UP_KEYS = (pg.K_w, pg.K_UP)
RIGHT_KEYS = (pg.K_d, pg.K_RIGHT)
LEFT_KEYS = (pg.K_a, pg.K_LEFT)
FIRE_KEYS = (pg.K_SPACE,)


def _any_pressed(pressed: Sequence[bool], keys: tuple[int, ...]) -> bool:
    return any(pressed[key] for key in keys)


def _axis(pressed: Sequence[bool], positive, negative) -> int:
    if _any_pressed(pressed, positive):
        return 1
    elif _any_pressed(pressed, negative):
        return -1
    return 0


class Input:
    horizontal: int = 0
    vertical: int = 0
    fire: bool = False

    def __init__(self):
        self.prev_tick_time = time.monotonic()

    def __repr__(self):
        return f"<Input ({self.horizontal}, {self.vertical}) fire={self.fire}>"

    def update(self, pressed: Sequence[bool] | None = None, now: float | None = None):
        """
        Reads the keyboard. To reduce the keyboards sensitivity
        it is only read every `g["key_interval"]` ms.

        `pressed` is anything that can be indexed by pygame key codes,
        by default `pg.key.get_pressed()`.
        """
        now = time.monotonic() if now is None else now
        if (now - self.prev_tick_time) * 1000 < g["key_interval"]:
            return
        self.prev_tick_time = now
        if pressed is None:
            pressed = pg.key.get_pressed()

        self.vertical = _axis(pressed, DOWN_KEYS, UP_KEYS)
        self.horizontal = _axis(pressed, RIGHT_KEYS, LEFT_KEYS)
        self.fire = _any_pressed(pressed, FIRE_KEYS)
