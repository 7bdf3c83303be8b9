import random

import pytest

from myhunter import config
from myhunter.entities import Duck, Explosion, create_duck

WINDOW = (config.WINDOW_WIDTH, config.WINDOW_HEIGHT)


def test_create_duck_starts_off_left_edge():
    duck = create_duck(config.WINDOW_HEIGHT, random.Random(1))
    assert duck.x == -config.FRAME_SIZE
    assert 0 <= duck.y < config.WINDOW_HEIGHT - config.FRAME_SIZE
    assert duck.alive
    assert (duck.vx, duck.vy) == config.DUCK_VELOCITY
    assert duck.texture_rect == (0, 0, config.FRAME_SIZE, config.FRAME_SIZE)


def test_create_duck_is_deterministic_for_seed():
    first = create_duck(config.WINDOW_HEIGHT, random.Random(42))
    second = create_duck(config.WINDOW_HEIGHT, random.Random(42))
    assert first.y == second.y


def test_respawn_rejects_window_smaller_than_duck():
    duck = Duck(x=0.0, y=0.0)
    with pytest.raises(ValueError):
        duck.respawn(config.FRAME_SIZE, random.Random(0))


def test_move_advances_animation_frame_and_wraps():
    duck = Duck(x=0.0, y=100.0)
    duck.move(config.ANIMATION_INTERVAL, WINDOW)
    assert duck.frame_left == config.FRAME_SIZE
    assert duck.animation == 0.0
    duck.move(config.ANIMATION_INTERVAL, WINDOW)
    duck.move(config.ANIMATION_INTERVAL, WINDOW)
    assert duck.frame_left == 0


def test_move_without_full_interval_keeps_frame():
    duck = Duck(x=0.0, y=100.0)
    duck.move(0.05, WINDOW)
    assert duck.frame_left == 0
    assert duck.animation == pytest.approx(0.05)


def test_move_moves_right_and_down():
    duck = Duck(x=0.0, y=100.0)
    duck.move(0.05, WINDOW)
    assert duck.x > 0.0
    assert duck.y > 100.0
    assert duck.alive


def test_move_clamps_to_top():
    duck = Duck(x=0.0, y=0.0, vy=-30.0)
    duck.move(0.05, WINDOW)
    assert duck.y == 0.0


def test_move_clamps_to_bottom():
    duck = Duck(x=0.0, y=config.WINDOW_HEIGHT - config.FRAME_SIZE)
    duck.move(0.05, WINDOW)
    assert duck.y == config.WINDOW_HEIGHT - config.FRAME_SIZE


def test_duck_dies_past_right_edge():
    duck = Duck(x=float(config.WINDOW_WIDTH), y=100.0)
    duck.move(0.05, WINDOW)
    assert not duck.alive


def test_dead_duck_respawns_after_delay():
    duck = Duck(x=500.0, y=100.0, alive=False)
    rng = random.Random(3)
    duck.update(1.0, WINDOW, rng)
    assert not duck.alive
    assert duck.x == 500.0
    duck.update(1.0, WINDOW, rng)
    assert duck.alive
    assert duck.x == -config.FRAME_SIZE
    assert duck.respawn_timer == 0.0
    assert 0 <= duck.y < config.WINDOW_HEIGHT - config.FRAME_SIZE


def test_update_moves_living_duck():
    duck = Duck(x=0.0, y=100.0)
    duck.update(0.05, WINDOW, random.Random(0))
    assert duck.x > 0.0
    assert duck.respawn_timer == 0.0


def test_contains_bounds():
    duck = Duck(x=10.0, y=20.0)
    assert duck.contains(10.0, 20.0)
    assert duck.contains(10.0 + config.FRAME_SIZE - 1, 20.0)
    assert not duck.contains(10.0 + config.FRAME_SIZE, 20.0)
    assert not duck.contains(9.0, 20.0)
    assert not duck.contains(10.0, 20.0 + config.FRAME_SIZE)


def test_shoot_hit_kills_duck_and_triggers_explosion():
    duck = Duck(x=10.0, y=20.0)
    explosion = Explosion()
    assert duck.shoot(15.0, 25.0, explosion)
    assert not duck.alive
    assert explosion.active
    assert explosion.timer == config.EXPLOSION_DURATION
    assert explosion.position == (10.0, 20.0)


def test_shoot_miss_leaves_everything_alone():
    duck = Duck(x=10.0, y=20.0)
    explosion = Explosion()
    assert not duck.shoot(500.0, 500.0, explosion)
    assert duck.alive
    assert not explosion.active


def test_shoot_dead_duck_does_nothing():
    duck = Duck(x=10.0, y=20.0, alive=False)
    explosion = Explosion()
    assert not duck.shoot(15.0, 25.0, explosion)
    assert not explosion.active


def test_explosion_counts_down_and_stops():
    explosion = Explosion()
    explosion.trigger((1.0, 2.0))
    explosion.update(0.2)
    assert explosion.active
    assert explosion.timer == pytest.approx(config.EXPLOSION_DURATION - 0.2)
    explosion.update(config.EXPLOSION_DURATION)
    assert not explosion.active


def test_inactive_explosion_does_not_change():
    explosion = Explosion()
    explosion.update(1.0)
    assert explosion.timer == 0.0
    assert not explosion.active