import random
import pygame
from config import BALL_SIZE, BALL_SPEED, BALL_COLOR

class Ball:
    """A square ball.  ``vel`` is a direction; movement is scaled by BALL_SPEED."""

    def __init__(self, pos, rng=random):
        self.pos = pygame.Vector2(pos)
        self.size = pygame.Vector2(BALL_SIZE, BALL_SIZE)
        # Random diagonal, always heading down
        self.vel = pygame.Vector2(rng.uniform(-1, 1), 1).normalize()

    def update(self, dt: float, screen_width: float):
        self.pos.x += self.vel.x * dt * BALL_SPEED
        self.pos.y += self.vel.y * dt * BALL_SPEED

        # Walls force the component to +/-1; the vector is not renormalised
        if self.pos.x < 0:
            self.vel.x = 1
        if self.pos.x > screen_width - self.size.x:
            self.vel.x = -1
        if self.pos.y < 0:
            self.vel.y = 1

    def is_below(self, screen_height: float) -> bool:
        """True once the ball has left through the bottom of the screen."""
        return self.pos.y >= screen_height

    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.pos.x), int(self.pos.y), int(self.size.x), int(self.size.y))

    def draw(self, screen: pygame.Surface):
        pygame.draw.rect(screen, BALL_COLOR, self.rect())
