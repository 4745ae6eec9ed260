"""round_state.py

Everything owned by a single round: score, lives, paddle, balls, blocks and
the two power-up timers.  A new round is always a fresh ``GameRoundState``;
nothing is reset field by field, so no power-up or ball can leak from one
round into the next.
"""

from __future__ import annotations

import random
from typing import List, Tuple
import numpy as np
import pygame

from config import (BLOCK_SIZE, BLOCK_GRID, BLOCK_PADDING, BOARD_TOP,
                    SPECIAL_BLOCK_PICKS, STARTING_LIVES, BALL_START)
from block import Block, BlockType
from ball import Ball
from paddle import Paddle
from powerup import PowerupTimer

__all__ = ["init_blocks", "GameRoundState"]

# Special block types are assigned in this order; later picks overwrite earlier ones.
_SPECIAL_TYPES = (
    BlockType.SPAWN_BALL_ON_DEATH,
    BlockType.SIZE_INCREASE,
    BlockType.SPEED_INCREASE,
)


def init_blocks(screen_width: float, rng=random) -> List[Block]:
    """Lay out the block grid centred horizontally below BOARD_TOP.

    Every cell starts REGULAR.  Afterwards each special type gets
    SPECIAL_BLOCK_PICKS uniformly random indices, drawn with replacement,
    so the final board may hold fewer than 3 * SPECIAL_BLOCK_PICKS specials.
    """
    cols, rows = BLOCK_GRID
    cell_w = BLOCK_SIZE[0] + BLOCK_PADDING
    cell_h = BLOCK_SIZE[1] + BLOCK_PADDING
    start_x = (screen_width - cell_w * cols) * 0.5

    idx = np.arange(cols * rows)
    xs = start_x + (idx % cols) * cell_w
    ys = BOARD_TOP + (idx // cols) * cell_h
    blocks = [Block((float(x), float(y))) for x, y in zip(xs, ys)]

    for block_type in _SPECIAL_TYPES:
        for _ in range(SPECIAL_BLOCK_PICKS):
            blocks[rng.randrange(len(blocks))].block_type = block_type
    print(f"[DEBUG] Board: {len(blocks)} blocks, "
          f"{sum(b.block_type is not BlockType.REGULAR for b in blocks)} special")
    return blocks


class GameRoundState:
    def __init__(self, paddle: Paddle, blocks: List[Block], balls: List[Ball], rng=random):
        self.score = 0
        self.lives = STARTING_LIVES
        self.paddle = paddle
        self.blocks = blocks
        self.balls = balls
        self.size_timer = PowerupTimer()
        self.speed_timer = PowerupTimer()
        self.rng = rng

    @classmethod
    def new(cls, screen_size: Tuple[float, float], rng=random) -> GameRoundState:
        """Build a complete round for a screen of *screen_size*."""
        screen_w, screen_h = screen_size
        first_ball = Ball((screen_w * BALL_START[0], screen_h * BALL_START[1]), rng=rng)
        return cls(
            paddle=Paddle(screen_size),
            blocks=init_blocks(screen_w, rng),
            balls=[first_ball],
            rng=rng,
        )

    def spawn_ball(self, pos) -> Ball:
        ball = Ball(pygame.Vector2(pos), rng=self.rng)
        self.balls.append(ball)
        return ball

    def draw(self, screen: pygame.Surface):
        self.paddle.draw(screen)
        for block in self.blocks:
            block.draw(screen)
        for ball in self.balls:
            ball.draw(screen)
