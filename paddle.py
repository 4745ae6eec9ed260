import pygame
from config import (PLAYER_SIZE, PLAYER_INCREASED_WIDTH, PLAYER_INITIAL_SPEED,
                    PLAYER_SPEED_POWERUP, PLAYER_BOTTOM_OFFSET, PADDLE_COLOR,
                    is_control_pressed)

class Paddle:
    """The player paddle.  Moves horizontally along the bottom of the screen."""

    def __init__(self, screen_size):
        screen_w, screen_h = screen_size
        self.size = pygame.Vector2(PLAYER_SIZE)
        self.pos = pygame.Vector2(screen_w * 0.5 - self.size.x * 0.5,
                                  screen_h - PLAYER_BOTTOM_OFFSET)
        self.speed = PLAYER_INITIAL_SPEED

    def update(self, dt: float, keys, screen_width: float):
        left = is_control_pressed('paddle_left', keys)
        right = is_control_pressed('paddle_right', keys)
        # Both or neither held -> stay put
        if left and not right:
            x_move = -1
        elif right and not left:
            x_move = 1
        else:
            x_move = 0

        self.pos.x += x_move * dt * self.speed
        self.clamp(screen_width)

    def clamp(self, screen_width: float):
        """Keep the whole paddle on screen for its current width."""
        if self.pos.x < 0:
            self.pos.x = 0
        right_side = screen_width - self.size.x
        if self.pos.x > right_side:
            self.pos.x = right_side

    # --- power-up hooks ---
    def enlarge(self):
        self.size.x = PLAYER_INCREASED_WIDTH
    def restore_width(self):
        self.size.x = PLAYER_SIZE[0]
    def boost(self):
        self.speed = PLAYER_SPEED_POWERUP
    def restore_speed(self):
        self.speed = PLAYER_INITIAL_SPEED

    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.pos.x), int(self.pos.y), int(self.size.x), int(self.size.y))

    def draw(self, screen: pygame.Surface):
        pygame.draw.rect(screen, PADDLE_COLOR, self.rect())
