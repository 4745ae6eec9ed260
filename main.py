import pygame
from config import WIDTH, HEIGHT, FPS, TITLE, FONT_NAME, TITLE_FONT_SIZE, HUD_FONT_SIZE, get_control_key
from utils import load_font
from game_mode import Game


def main():
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    fonts = {
        'title': load_font(FONT_NAME, TITLE_FONT_SIZE),
        'hud':   load_font(FONT_NAME, HUD_FONT_SIZE),
    }

    game = Game(screen.get_size())

    # --- Main loop ---
    running = True
    try:
        while running:
            dt = clock.tick(FPS) / 1000.0  # variable timestep, seconds

            # — Event handling —
            start_pressed = False
            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    running = False
                elif e.type == pygame.KEYDOWN and e.key == get_control_key('start'):
                    start_pressed = True

            keys = pygame.key.get_pressed()
            # Layout always follows the current (possibly resized) window
            game.update(dt, keys, start_pressed, screen.get_size())

            # — Draw everything —
            game.draw(screen, fonts)
            pygame.display.flip()
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
