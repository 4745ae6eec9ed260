"""game_mode.py

Top-level mode machine.  Exactly one of Menu, Playing, LevelCompleted or Dead
is active; the mode decides whether the round simulates and which overlay is
drawn on top of the board.

    Menu --start--> Playing --no lives--> Dead ------start--> Menu (new round)
                           \\--no blocks--> LevelCompleted --start--/
"""

import random
from enum import Enum
import pygame

from config import BG, get_control_key, get_key_name
from round_state import GameRoundState
from round_update import RoundOutcome, update_round
from hud import draw_title_text, draw_hud

__all__ = ["GameMode", "Game"]


class GameMode(Enum):
    MENU = 'Menu'
    PLAYING = 'Playing'
    LEVEL_COMPLETED = 'LevelCompleted'
    DEAD = 'Dead'


_OUTCOME_MODES = {
    RoundOutcome.CONTINUE: GameMode.PLAYING,
    RoundOutcome.DEAD: GameMode.DEAD,
    RoundOutcome.LEVEL_COMPLETED: GameMode.LEVEL_COMPLETED,
}


class Game:
    def __init__(self, screen_size, rng=random):
        self.rng = rng
        self.mode = GameMode.MENU
        self.round = GameRoundState.new(screen_size, rng)

    def _set_mode(self, mode: GameMode):
        if mode is not self.mode:
            print(f"[Game] {self.mode.value} -> {mode.value}")
        self.mode = mode

    def update(self, dt: float, keys, start_pressed: bool, screen_size):
        """Advance one frame.  *start_pressed* is the edge-triggered start key."""
        if self.mode is GameMode.MENU:
            if start_pressed:
                self._set_mode(GameMode.PLAYING)
        elif self.mode is GameMode.PLAYING:
            outcome = update_round(self.round, dt, keys, screen_size)
            self._set_mode(_OUTCOME_MODES[outcome])
        else:  # LevelCompleted / Dead
            if start_pressed:
                self._set_mode(GameMode.MENU)
                self.round = GameRoundState.new(screen_size, self.rng)

    def draw(self, screen: pygame.Surface, fonts):
        screen.fill(BG)
        self.round.draw(screen)

        if self.mode is GameMode.MENU:
            key = get_key_name(get_control_key('start'))
            draw_title_text(screen, f"Press {key} to start", fonts['title'])
        elif self.mode is GameMode.PLAYING:
            draw_hud(screen, self.round, fonts['hud'])
        elif self.mode is GameMode.LEVEL_COMPLETED:
            draw_title_text(screen, f"You win! {self.round.score} score", fonts['title'])
        else:
            draw_title_text(screen, f"You LOST! {self.round.score} score", fonts['title'])
