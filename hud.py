import pygame
from config import TEXT_COLOR, HUD_TOP, HUD_LIVES_X

def draw_title_text(screen: pygame.Surface, text: str, font: pygame.font.Font):
    """Draw *text* centred on the screen."""
    surf = font.render(text, True, TEXT_COLOR)
    rect = surf.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
    screen.blit(surf, rect)
    return rect

def draw_hud(screen: pygame.Surface, state, font: pygame.font.Font):
    """Score centred along the top edge, lives in the top-left corner."""
    score_surf = font.render(f"score : {state.score}", True, TEXT_COLOR)
    screen.blit(score_surf, score_surf.get_rect(midbottom=(screen.get_width() // 2, HUD_TOP)))
    lives_surf = font.render(f"lives : {state.lives}", True, TEXT_COLOR)
    screen.blit(lives_surf, lives_surf.get_rect(bottomleft=(HUD_LIVES_X, HUD_TOP)))
