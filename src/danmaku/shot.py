"""
Shots fired by the player and the enemies.

A Shot only knows how to move. What it looks like and how it behaves
over time is decided by its controller.
"""

from __future__ import annotations

import math
import random
from enum import auto
from types import MappingProxyType
from typing import Mapping, Protocol

from danmaku.config import g
from danmaku.types import BugError, Enum, Rect
from danmaku.utils import deg_to_rad, log_error


def _laser_adjust(deg: int) -> tuple[float, float]:
    if deg <= 75:
        return 8, 6
    elif deg <= 175:
        return -6, 8
    elif deg <= 255:
        return -8, -6
    return 8, -6


# laser sprites only exist for every 15 degrees
LASER_COLLISION_IDS: Mapping[int, str] = MappingProxyType(
    {deg: f"laser1_{deg}" for deg in range(0, 360, 15)}
)
LASER_ADJUST: Mapping[int, tuple[float, float]] = MappingProxyType(
    {deg: _laser_adjust(deg) for deg in range(0, 360, 15)}
)


def laser_collision_id(degree: int) -> str:
    try:
        return LASER_COLLISION_IDS[degree % 360]
    except KeyError:
        raise BugError(f"No laser for {degree} degrees") from None


class HitEffect(Enum):
    Hit = auto()
    HitLarge = auto()


class Shooter(Protocol):
    x: float
    y: float
    width: float
    height: float

    def is_dead(self) -> bool:
        ...


class ShotController(Protocol):
    def init(self, shot: Shot):
        ...

    def update(self, shot: Shot):
        ...


class Field:
    """
    The area the game takes place in
    """

    def __init__(self, rect: Rect | None = None):
        self.rect = Rect(0, 0, g["W"], g["H"]) if rect is None else rect

    def is_out_of_area(self, obj: Shot | Shooter, margin: float = 0) -> bool:
        """
        Whether the object is completely outside the field, by more than `margin`
        """
        return (
            obj.x + obj.width / 2 < self.rect.left - margin
            or obj.x - obj.width / 2 > self.rect.right + margin
            or obj.y + obj.height / 2 < self.rect.top - margin
            or obj.y - obj.height / 2 > self.rect.bottom + margin
        )


class Shot:
    controller: ShotController | None = None
    shooter: Shooter | None = None
    is_active: bool = False
    x = y = 0.0
    width = height = 0.0
    speed = 0.0
    vx = vy = 0.0
    degree = 0
    update_count = 0

    def __init__(self, field: Field):
        self.field = field

    def __repr__(self):
        return f"<Shot ({self.x:.1f}, {self.y:.1f}) {self.degree}deg active={self.is_active}>"

    def fire(
        self,
        controller: ShotController,
        shooter: Shooter,
        x: float,
        y: float,
        degree: int,
    ):
        self.is_active = True
        self.x = x
        self.y = y
        self.degree = degree
        self.update_count = 0
        self.controller = controller
        self.shooter = shooter
        controller.init(self)

    def set_size(self, width: float, height: float):
        self.width = width
        self.height = height

    def set_speed(self, speed: float, degree: int):
        self.speed = speed
        self.degree = degree
        rad = deg_to_rad(degree)
        self.vx = math.cos(rad) * speed
        self.vy = math.sin(rad) * speed

    def update(self):
        self.update_count += 1
        self.x += self.vx
        self.y += self.vy
        if self.field.is_out_of_area(self, g["out_of_area_margin"]):
            self.is_active = False
        if self.controller is None:
            log_error("Shot updated without a controller", self)
            return
        self.controller.update(self)

    def on_hit(self, rng: random.Random | None = None) -> HitEffect:
        """
        Should be called when the shot hit something.
        Returns the effect that should be spawned at the shots position
        """
        self.is_active = False
        value = (rng or random).random()
        return HitEffect.Hit if value > 0.5 else HitEffect.HitLarge
