"""
Translate raw input events into move directions.
"""

from twentyfortyeight.core.types import Direction

# ##: Key names from keyboards, browsers and terminals.
KEYS: dict[str, Direction] = {
    'left': Direction.LEFT,
    'arrowleft': Direction.LEFT,
    'a': Direction.LEFT,
    'h': Direction.LEFT,
    'up': Direction.UP,
    'arrowup': Direction.UP,
    'w': Direction.UP,
    'k': Direction.UP,
    'right': Direction.RIGHT,
    'arrowright': Direction.RIGHT,
    'd': Direction.RIGHT,
    'l': Direction.RIGHT,
    'down': Direction.DOWN,
    'arrowdown': Direction.DOWN,
    's': Direction.DOWN,
    'j': Direction.DOWN,
}

SWIPE_THRESHOLD = 50


def direction_from_key(key: str) -> Direction | None:
    """
    Map a key name to a direction.

    Parameters
    ----------
    key : str
        Key name, e.g. ``"ArrowUp"``, ``"left"`` or ``"w"``. Case and surrounding blanks are ignored.

    Returns
    -------
    Direction or None
        The direction, or None for a key that does not move tiles.
    """
    return KEYS.get(key.strip().lower())


def direction_from_swipe(dx: float, dy: float, threshold: float = SWIPE_THRESHOLD) -> Direction | None:
    """
    Map a swipe to a direction.

    Parameters
    ----------
    dx : float
        Horizontal distance travelled, positive to the right.
    dy : float
        Vertical distance travelled, positive downward (screen coordinates).
    threshold : float, optional
        Minimal distance on either axis for the swipe to count.

    Returns
    -------
    Direction or None
        The direction along the dominant axis, or None for a swipe that is too short.
    """
    if abs(dx) <= threshold and abs(dy) <= threshold:
        return None
    if abs(dx) > abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP
