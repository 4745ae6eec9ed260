# Asset helpers: resource paths that survive bundling, and font loading

import pygame, sys, os
from pathlib import Path


def resource_path(relative: str) -> str:
    """Return an absolute path to *relative* that works both from source and
    when the program is bundled (PyInstaller/py2app).

    Example::

        font = pygame.font.Font(resource_path("res/Roboto-Medium.ttf"), 30)

    """
    base_path = getattr(sys, "_MEIPASS", Path(__file__).resolve().parent)
    return str(Path(base_path) / relative)


def load_font(font_name: str, size: int) -> pygame.font.Font:
    """Load a font with proper resource path handling and fallback.

    Falls back to pygame's default font when *font_name* is missing or
    unreadable.  If even the default font cannot be loaded the pygame.error
    propagates.
    """
    try:
        for path in (resource_path(font_name), resource_path(os.path.join("res", font_name)), font_name):
            if os.path.isfile(path):
                return pygame.font.Font(path, size)
    except (pygame.error, OSError) as e:
        print(f"[Font] Failed to load {font_name}: {e}")

    print(f"[Font] Using fallback font: None (default)")
    return pygame.font.Font(None, size)
