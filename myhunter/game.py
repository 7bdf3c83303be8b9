"""The game itself: window, assets, event handling, update and drawing."""

from __future__ import annotations

import random
from os import PathLike
from pathlib import Path

import pygame

from . import config
from .entities import Duck, Explosion, _RandomSource, create_duck

_BLACK = (0, 0, 0)
_LEFT_BUTTON = 1


def is_quit_event(event: pygame.event.Event, ctrl_held: bool) -> bool:
    """Whether ``event`` asks to close the game.

    Closing the window, Escape, or D while left Control is held all quit.
    """
    if event.type == pygame.QUIT:
        return True
    if event.type != pygame.KEYDOWN:
        return False
    key = getattr(event, "key", None)
    return key == pygame.K_ESCAPE or (key == pygame.K_d and ctrl_held)


def _scaled(image: pygame.Surface, factor: float) -> pygame.Surface:
    width, height = image.get_size()
    size = (max(1, round(width * factor)), max(1, round(height * factor)))
    return pygame.transform.scale(image, size)


def _load_image(asset_dir: Path, relative: str) -> pygame.Surface:
    image = pygame.image.load(str(asset_dir / relative))
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def _load_images(
    asset_dir: Path, window_size: tuple[int, int]
) -> dict[str, pygame.Surface]:
    """Load every image the game draws, already scaled for display."""
    background = _load_image(asset_dir, config.BG_IMAGE_PATH)
    crosshair = _load_image(asset_dir, config.CROSSHAIR_IMAGE_PATH)
    duck_sheet = _load_image(asset_dir, config.DUCK_IMAGE_PATH)
    explosion = _load_image(asset_dir, config.EXPLOSION_IMAGE_PATH)
    return {
        "background": pygame.transform.scale(background, window_size),
        "crosshair": _scaled(crosshair, config.CROSSHAIR_SCALE),
        "duck_sheet": duck_sheet,
        "explosion_image": _scaled(explosion, config.EXPLOSION_SCALE),
    }


class Game:
    """One running game: a duck to shoot, its explosion and the crosshair."""

    def __init__(
        self,
        screen: pygame.Surface,
        background: pygame.Surface,
        crosshair: pygame.Surface,
        duck_sheet: pygame.Surface,
        explosion_image: pygame.Surface,
        duck: Duck | None = None,
        explosion: Explosion | None = None,
        rng: _RandomSource | None = None,
    ) -> None:
        self.screen = screen
        self.background = background
        self.crosshair = crosshair
        self.duck_sheet = duck_sheet
        self.explosion_image = explosion_image
        self.window_size: tuple[int, int] = screen.get_size()
        self.rng: _RandomSource = rng if rng is not None else random.Random()
        self.duck = duck if duck is not None else create_duck(
            self.window_size[1], self.rng
        )
        self.explosion = explosion if explosion is not None else Explosion()
        self.crosshair_pos: tuple[float, float] = (0.0, 0.0)
        self.running = True

    def handle_events(self) -> None:
        """Process pending events, then move the crosshair to the mouse."""
        for event in pygame.event.get():
            ctrl_held = bool(getattr(event, "mod", 0) & pygame.KMOD_LCTRL)
            if is_quit_event(event, ctrl_held):
                self.running = False
            if (
                event.type == pygame.MOUSEBUTTONDOWN
                and getattr(event, "button", None) == _LEFT_BUTTON
            ):
                x, y = event.pos
                self.duck.shoot(x, y, self.explosion)
        mouse_x, mouse_y = pygame.mouse.get_pos()
        self.crosshair_pos = (float(mouse_x), float(mouse_y))

    def step(self, delta_time: float) -> None:
        """Advance the duck and the explosion by ``delta_time`` seconds."""
        self.duck.update(delta_time, self.window_size, self.rng)
        self.explosion.update(delta_time)

    def draw(self) -> None:
        """Draw background, duck, explosion and crosshair onto the screen."""
        self.screen.blit(self.background, (0, 0))
        if self.duck.alive:
            self.screen.blit(
                self.duck_sheet,
                (round(self.duck.x), round(self.duck.y)),
                pygame.Rect(self.duck.texture_rect),
            )
        if self.explosion.active:
            x, y = self.explosion.position
            rect = self.explosion_image.get_rect(center=(round(x), round(y)))
            self.screen.blit(self.explosion_image, rect)
        x, y = self.crosshair_pos
        rect = self.crosshair.get_rect(center=(round(x), round(y)))
        self.screen.blit(self.crosshair, rect)

    def run(self) -> None:
        """Play frames until the game is asked to quit."""
        pygame.mouse.set_visible(False)
        clock = pygame.time.Clock()
        while self.running:
            delta_time = clock.tick(config.FRAMERATE_LIMIT) / 1000.0
            self.handle_events()
            self.step(delta_time)
            self.screen.fill(_BLACK)
            self.draw()
            pygame.display.flip()


def run_game(asset_dir: str | PathLike[str] = ".") -> int:
    """Open the window, play until closed and return the exit status."""
    pygame.init()
    try:
        window_size = (config.WINDOW_WIDTH, config.WINDOW_HEIGHT)
        try:
            screen = pygame.display.set_mode(window_size, 0, config.COLOR_DEPTH)
            pygame.display.set_caption(config.WINDOW_TITLE)
            images = _load_images(Path(asset_dir), window_size)
        except (pygame.error, OSError):
            return config.ERROR_STATUS
        Game(screen, **images).run()
        return config.SUCCESS_STATUS
    finally:
        pygame.quit()