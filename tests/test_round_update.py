import pygame
import pytest

from config import PLAYER_SIZE, PLAYER_INCREASED_WIDTH, PLAYER_INITIAL_SPEED, PLAYER_SPEED_POWERUP
from ball import Ball
from block import Block, BlockType
from round_state import GameRoundState
from round_update import RoundOutcome, update_round

# A ball falling straight down lands 5 px into a block at (100, 100) after one
# 0.025 s frame (BALL_SPEED 400 -> 10 px).
HIT_DT = 0.025


def ball_at(x, y, vel=(0, 1)):
    ball = Ball((x, y))
    ball.vel = pygame.Vector2(vel)
    return ball


def make_state(screen_size, rng, blocks, balls):
    state = GameRoundState.new(screen_size, rng)
    state.blocks = blocks
    state.balls = balls
    return state


@pytest.fixture
def target():
    return Block((100, 100))


@pytest.fixture
def spare():
    """Far-away block so the level is not completed."""
    return Block((1000, 300))


def test_block_needs_two_hits_and_scores_once(screen_size, rng, keys, target, spare):
    ball = ball_at(125, 45)
    state = make_state(screen_size, rng, [target, spare], [ball])

    assert update_round(state, HIT_DT, keys, screen_size) is RoundOutcome.CONTINUE
    assert target.lives == 1
    assert state.score == 0
    assert ball.vel.y == -1
    assert ball.pos.y == pytest.approx(50)
    assert target in state.blocks

    ball.vel = pygame.Vector2(0, 1)
    assert update_round(state, HIT_DT, keys, screen_size) is RoundOutcome.CONTINUE
    assert target.lives == 0
    assert state.score == 1
    assert target not in state.blocks
    assert state.blocks == [spare]


def test_paddle_bounce_does_not_score(screen_size, rng, keys, spare):
    state = make_state(screen_size, rng, [spare], [])
    ball = ball_at(600, 745)
    state.balls = [ball]
    update_round(state, HIT_DT, keys, screen_size)
    assert ball.vel.y == -1
    assert ball.pos.y == pytest.approx(750)
    assert state.score == 0


def test_paddle_follows_input(screen_size, rng, keys, spare):
    state = make_state(screen_size, rng, [spare], [ball_at(600, 100, (0, 0))])
    keys[pygame.K_RIGHT] = True
    update_round(state, 0.1, keys, screen_size)
    assert state.paddle.pos.x == pytest.approx(565 + 70)


def test_spawn_ball_block_adds_ball_after_scan(screen_size, rng, keys, target, spare):
    target.block_type = BlockType.SPAWN_BALL_ON_DEATH
    target.lives = 1
    ball = ball_at(125, 45)
    state = make_state(screen_size, rng, [target, spare], [ball])

    update_round(state, HIT_DT, keys, screen_size)
    assert state.score == 1
    assert len(state.balls) == 2
    new_ball = state.balls[1]
    assert new_ball.pos == ball.pos
    assert new_ball.pos is not ball.pos
    assert new_ball.vel.y > 0


def test_size_powerup_applies_then_expires(screen_size, rng, keys, target, spare):
    target.block_type = BlockType.SIZE_INCREASE
    target.lives = 1
    ball = ball_at(125, 45)
    state = make_state(screen_size, rng, [target, spare], [ball])

    update_round(state, HIT_DT, keys, screen_size)
    assert state.paddle.size.x == PLAYER_INCREASED_WIDTH
    assert not state.size_timer.is_done()

    ball.vel = pygame.Vector2(0, 0)
    for _ in range(9):
        update_round(state, 1.0, keys, screen_size)
    assert state.paddle.size.x == PLAYER_INCREASED_WIDTH
    update_round(state, 1.0, keys, screen_size)
    assert state.paddle.size.x == PLAYER_SIZE[0]


def test_speed_powerup_applies_then_expires(screen_size, rng, keys, target, spare):
    target.block_type = BlockType.SPEED_INCREASE
    target.lives = 1
    ball = ball_at(125, 45)
    state = make_state(screen_size, rng, [target, spare], [ball])

    update_round(state, HIT_DT, keys, screen_size)
    assert state.paddle.speed == PLAYER_SPEED_POWERUP

    ball.vel = pygame.Vector2(0, 0)
    for _ in range(10):
        update_round(state, 1.0, keys, screen_size)
    assert state.speed_timer.is_done()
    assert state.paddle.speed == PLAYER_INITIAL_SPEED


def test_depleted_block_not_hit_twice_in_one_frame(screen_size, rng, keys, target, spare):
    target.lives = 1
    first, second = ball_at(125, 45), ball_at(130, 45)
    state = make_state(screen_size, rng, [target, spare], [first, second])

    update_round(state, HIT_DT, keys, screen_size)
    assert state.score == 1
    assert target.lives == 0
    assert first.vel.y == -1
    assert second.vel.y == 1
    assert target not in state.blocks


def test_losing_last_ball_costs_a_life_and_respawns(screen_size, rng, keys, spare):
    state = make_state(screen_size, rng, [spare], [ball_at(600, 895)])
    assert update_round(state, 0.1, keys, screen_size) is RoundOutcome.CONTINUE
    assert state.lives == 2
    assert len(state.balls) == 1
    assert state.balls[0].pos == state.paddle.pos + (0, -50)


def test_losing_one_of_several_balls_is_free(screen_size, rng, keys, spare):
    state = make_state(screen_size, rng, [spare],
                       [ball_at(600, 895), ball_at(300, 300, (0, 0))])
    update_round(state, 0.1, keys, screen_size)
    assert state.lives == 3
    assert len(state.balls) == 1


def test_losing_last_ball_on_last_life_is_dead(screen_size, rng, keys, spare):
    state = make_state(screen_size, rng, [spare], [ball_at(600, 895)])
    state.lives = 1
    assert update_round(state, 0.1, keys, screen_size) is RoundOutcome.DEAD
    assert state.lives == 0
    assert state.balls == []


def test_clearing_last_block_completes_level(screen_size, rng, keys, target):
    target.lives = 1
    state = make_state(screen_size, rng, [target], [ball_at(125, 45)])
    assert update_round(state, HIT_DT, keys, screen_size) is RoundOutcome.LEVEL_COMPLETED
    assert state.blocks == []
    assert state.score == 1


def test_size_powerup_keeps_paddle_on_screen(screen_size, rng, keys, target, spare):
    target.block_type = BlockType.SIZE_INCREASE
    target.lives = 1
    state = make_state(screen_size, rng, [target, spare], [ball_at(125, 45)])
    state.paddle.pos.x = screen_size[0] - PLAYER_SIZE[0]

    update_round(state, HIT_DT, keys, screen_size)
    assert state.paddle.size.x == PLAYER_INCREASED_WIDTH
    assert state.paddle.pos.x == screen_size[0] - PLAYER_INCREASED_WIDTH


def test_dead_wins_over_level_completed_in_same_frame(screen_size, rng, keys):
    last = Block((575, 900))
    last.lives = 1
    state = make_state(screen_size, rng, [last], [ball_at(600, 895)])
    state.lives = 1

    assert update_round(state, 0.1, keys, screen_size) is RoundOutcome.DEAD
    assert state.score == 1
    assert state.lives == 0
    # block removal is skipped once the round is lost
    assert state.blocks == [last]
