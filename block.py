from __future__ import annotations

import pygame
from enum import Enum
from typing import TYPE_CHECKING, List
from config import BLOCK_SIZE, BLOCK_LIVES, BLOCK_COLORS, POWERUP_DURATION
from ball import Ball
if TYPE_CHECKING:
    from round_state import GameRoundState

# -----------------------------------------------------------------------------
# Blocks – passive grid bricks.  Everything that happens to them is driven by
# round_update; a block only knows how to take a hit and how to draw itself.
# -----------------------------------------------------------------------------

__all__ = ["BlockType", "Block"]


class BlockType(Enum):
    REGULAR = 'regular'
    SPAWN_BALL_ON_DEATH = 'spawn_ball'
    SIZE_INCREASE = 'size_increase'
    SPEED_INCREASE = 'speed_increase'

    def on_depleted(self, state: GameRoundState, ball: Ball, spawn_later: List[Ball]):
        """Apply this block type's reward after a block of it is destroyed by *ball*.

        New balls go into *spawn_later*; the caller merges them once it has
        finished walking ``state.balls``.
        """
        _DEPLETED_EFFECTS[self](state, ball, spawn_later)


def _no_effect(state, ball, spawn_later):
    pass

def _spawn_ball(state, ball, spawn_later):
    spawn_later.append(Ball(ball.pos, rng=state.rng))

def _increase_size(state, ball, spawn_later):
    state.size_timer.start(POWERUP_DURATION)
    state.paddle.enlarge()

def _increase_speed(state, ball, spawn_later):
    state.speed_timer.start(POWERUP_DURATION)
    state.paddle.boost()

_DEPLETED_EFFECTS = {
    BlockType.REGULAR: _no_effect,
    BlockType.SPAWN_BALL_ON_DEATH: _spawn_ball,
    BlockType.SIZE_INCREASE: _increase_size,
    BlockType.SPEED_INCREASE: _increase_speed,
}


class Block:
    def __init__(self, pos, block_type: BlockType = BlockType.REGULAR):
        self.pos = pygame.Vector2(pos)
        self.size = pygame.Vector2(BLOCK_SIZE)
        self.lives = BLOCK_LIVES
        self.block_type = block_type

    @property
    def depleted(self) -> bool:
        return self.lives <= 0

    def hit(self) -> bool:
        """Take one point of damage.  Returns True if this hit destroyed the block."""
        if self.depleted:
            return False
        self.lives -= 1
        return self.depleted

    def color(self):
        full, damaged = BLOCK_COLORS[self.block_type.value]
        return full if self.lives >= BLOCK_LIVES else damaged

    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.pos.x), int(self.pos.y), int(self.size.x), int(self.size.y))

    def draw(self, screen: pygame.Surface):
        pygame.draw.rect(screen, self.color(), self.rect())
