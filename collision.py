"""collision.py

Axis-aligned rectangle overlap and collision response shared by every moving
entity.  Entities are duck-typed: anything with a ``pos`` and ``size``
``pygame.Vector2`` (top-left corner and extent) can take part.
"""

import math
from collections import namedtuple
from config import LEGACY_HORIZONTAL_PUSH

__all__ = ["Overlap", "overlap", "resolve_collision"]

Overlap = namedtuple("Overlap", "x y w h")


def _sign(value: float) -> float:
    """Sign of *value* as +/-1.0 (zero counts as positive)."""
    return math.copysign(1.0, value)


def overlap(a_pos, a_size, b_pos, b_size):
    """Return the intersection of two rectangles, or None when they are apart.

    Touching edges give a zero-area overlap and still count as intersecting.
    """
    left = max(a_pos.x, b_pos.x)
    top = max(a_pos.y, b_pos.y)
    right = min(a_pos.x + a_size.x, b_pos.x + b_size.x)
    bottom = min(a_pos.y + a_size.y, b_pos.y + b_size.y)
    if right < left or bottom < top:
        return None
    return Overlap(left, top, right - left, bottom - top)


def resolve_collision(mover, vel, target, legacy_push: bool = LEGACY_HORIZONTAL_PUSH) -> bool:
    """Push *mover* out of *target* along the shallow axis and reflect *vel*.

    ``mover.pos`` and *vel* are mutated in place.  Returns True if the two
    rectangles overlapped, False (with nothing touched) otherwise.

    With *legacy_push* the horizontal push-out uses the overlap height, which
    is how the game has always played.
    """
    hit = overlap(mover.pos, mover.size, target.pos, target.size)
    if hit is None:
        return False

    mover_center = mover.pos + mover.size * 0.5
    target_center = target.pos + target.size * 0.5
    to = target_center - mover_center
    sx, sy = _sign(to.x), _sign(to.y)

    if hit.w > hit.h:
        mover.pos.y -= sy * hit.h
        vel.y = -sy * abs(vel.y)
    else:
        push = hit.h if legacy_push else hit.w
        mover.pos.x -= sx * push
        vel.x = -sx * abs(vel.x)
    return True
