from enum import Enum
from config import BALL_RESPAWN_OFFSET
from collision import resolve_collision

# -----------------------------------------------------------------------------
# One Playing-mode tick.  Order matters: paddle, balls, power-up timers,
# collisions, deferred spawns, lost balls, destroyed blocks.
# -----------------------------------------------------------------------------

__all__ = ["RoundOutcome", "update_round"]


class RoundOutcome(Enum):
    CONTINUE = 0
    DEAD = 1
    LEVEL_COMPLETED = 2


def _update_powerups(state, dt):
    state.size_timer.update(dt)
    state.speed_timer.update(dt)
    # Restoring every frame is harmless once a timer has run out
    if state.size_timer.is_done():
        state.paddle.restore_width()
    if state.speed_timer.is_done():
        state.paddle.restore_speed()


def _resolve_hits(state):
    """Bounce every ball off the paddle and blocks.  Returns balls to add afterwards."""
    spawn_later = []
    for ball in state.balls:
        resolve_collision(ball, ball.vel, state.paddle)
        for block in state.blocks:
            if block.depleted:
                continue
            if resolve_collision(ball, ball.vel, block) and block.hit():
                state.score += 1
                print(f"[DEBUG] Block {block.block_type.value} destroyed, score={state.score}")
                block.block_type.on_depleted(state, ball, spawn_later)
    return spawn_later


def update_round(state, dt: float, keys, screen_size) -> RoundOutcome:
    screen_w, screen_h = screen_size

    state.paddle.update(dt, keys, screen_w)
    for ball in state.balls:
        ball.update(dt, screen_w)
    _update_powerups(state, dt)

    state.balls.extend(_resolve_hits(state))
    # A size power-up may have widened the paddle past the right edge
    state.paddle.clamp(screen_w)

    balls_before = len(state.balls)
    state.balls = [ball for ball in state.balls if not ball.is_below(screen_h)]
    if balls_before > len(state.balls) and not state.balls:
        state.lives -= 1
        print(f"[Round] Ball lost, {state.lives} lives left")
        if state.lives <= 0:
            return RoundOutcome.DEAD
        state.spawn_ball(state.paddle.pos + BALL_RESPAWN_OFFSET)

    state.blocks = [block for block in state.blocks if not block.depleted]
    if not state.blocks:
        return RoundOutcome.LEVEL_COMPLETED
    return RoundOutcome.CONTINUE
