"""Game entities: the flying duck and the explosion left where it is shot."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Protocol

from . import config


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass
class Explosion:
    """A short-lived explosion shown where a duck was hit."""

    position: tuple[float, float] = (0.0, 0.0)
    timer: float = 0.0
    active: bool = False

    def trigger(self, position: tuple[float, float]) -> None:
        """Start the explosion at ``position``."""
        self.active = True
        self.timer = config.EXPLOSION_DURATION
        self.position = (float(position[0]), float(position[1]))

    def update(self, delta_time: float) -> None:
        """Count the explosion down and switch it off once it runs out."""
        if not self.active:
            return
        self.timer -= delta_time
        if self.timer <= 0.0:
            self.active = False


@dataclass
class Duck:
    """A duck flying across the screen, animated from a sprite sheet."""

    x: float
    y: float
    vx: float = config.DUCK_VELOCITY[0]
    vy: float = config.DUCK_VELOCITY[1]
    frame_left: int = 0
    width: int = config.FRAME_SIZE
    height: int = config.FRAME_SIZE
    animation: float = 0.0
    respawn_timer: float = 0.0
    alive: bool = True

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def texture_rect(self) -> tuple[int, int, int, int]:
        """The (left, top, width, height) of the current sprite-sheet frame."""
        return (self.frame_left, 0, self.width, self.height)

    def respawn(self, window_height: int, rng: _RandomSource) -> None:
        """Bring the duck back to life just off the left edge at a random height."""
        self.x = float(-self.width)
        self.y = float(rng.randrange(window_height - self.height))
        self.respawn_timer = 0.0
        self.alive = True

    def move(self, delta_time: float, window_size: tuple[int, int]) -> None:
        """Advance animation and position; the duck dies once past the right edge."""
        width, height = window_size
        self.animation += delta_time
        if self.animation >= config.ANIMATION_INTERVAL:
            self.frame_left += self.width
            if self.frame_left >= config.SHEET_WIDTH:
                self.frame_left = 0
            self.animation = 0.0
        self.x += self.vx * delta_time
        self.y += self.vy * delta_time
        if self.y < 0:
            self.y = 0.0
        if self.y + self.height > height:
            self.y = float(height - self.height)
        if self.x > width:
            self.alive = False

    def update(
        self,
        delta_time: float,
        window_size: tuple[int, int],
        rng: _RandomSource,
    ) -> None:
        """Move a living duck, or count down to the respawn of a dead one."""
        if not self.alive:
            self.respawn_timer += delta_time
            if self.respawn_timer >= config.RESPAWN_DELAY:
                self.respawn(window_size[1], rng)
            return
        self.move(delta_time, window_size)

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside the duck's bounds."""
        return (
            self.x <= x < self.x + self.width
            and self.y <= y < self.y + self.height
        )

    def shoot(self, x: float, y: float, explosion: Explosion) -> bool:
        """Shoot at a point; a hit kills the duck and sets off the explosion."""
        if not (self.alive and self.contains(x, y)):
            return False
        self.alive = False
        explosion.trigger(self.position)
        return True


def create_duck(
    window_height: int = config.WINDOW_HEIGHT,
    rng: _RandomSource | None = None,
) -> Duck:
    """Create a duck just off the left edge at a random height."""
    source = rng if rng is not None else random.Random()
    duck = Duck(x=0.0, y=0.0)
    duck.respawn(window_height, source)
    return duck