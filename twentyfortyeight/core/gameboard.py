"""
Core functionality for the 2048 rules engine: sliding, merging and spawning tiles on a board.
"""

from numpy import argwhere, int64, ndarray, rot90, zeros, zeros_like
from numpy.random import PCG64DXSM, Generator, default_rng

from twentyfortyeight.core.types import Direction, Tile

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Pre-computed tile values and probabilities for fast sampling.
_TILE_VALUES = list(TILE_SPAWN_PROBS)
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())

# ##>: Module-level generator, used when the caller does not inject one.
_GENERATOR = default_rng(PCG64DXSM())


def empty_board(size: int) -> ndarray:
    """Return a ``size x size`` board with every cell empty."""
    return zeros((size, size), dtype=int64)


def merge_line(line: ndarray) -> tuple[int, ndarray, ndarray, bool]:
    """
    Slide one line towards index 0 and merge equal neighbours.

    Parameters
    ----------
    line : ndarray
        A 1D array, scanned from index 0 (the edge tiles slide to) outward.

    Returns
    -------
    score : int
        The sum of the merged tile values.
    merged_line : ndarray
        The rebuilt line, same length as the input, zero padded.
    merged : ndarray
        Boolean mask of the slots holding a freshly merged tile.
    changed : bool
        Whether any tile moved or merged.

    Notes
    -----
    - A tile produced by a merge never merges again in the same call, so ``[2, 2, 2, 0]``
      becomes ``[4, 2, 0, 0]``: the pair nearest to the edge wins.
    - Empty cells (zeros) are skipped and never merge.

    Examples
    --------
    >>> merge_line(np.array([2, 2, 4, 4]))
    (12, array([4, 8, 0, 0]), array([ True,  True, False, False]), True)
    """
    result = zeros_like(line)
    merged = zeros(len(line), dtype=bool)
    score = 0
    changed = False

    # ##: Compaction cursor and the last tile placed on it.
    next_slot = 0
    last_value = 0
    last_slot = -1

    for index, value in enumerate(line):
        if value == 0:
            continue

        if value == last_value and not merged[last_slot]:
            # ##: Merge into the last placed tile; it is closed for this move.
            result[last_slot] = value * 2
            merged[last_slot] = True
            score += int(value) * 2
            last_value = 0
            changed = True
        else:
            if next_slot != index:
                changed = True
            result[next_slot] = value
            last_value = value
            last_slot = next_slot
            next_slot += 1

    return score, result, merged, changed


def slide_and_merge(board: ndarray) -> tuple[int, ndarray, ndarray, bool]:
    """
    Slide the game board to the left, merge adjacent cells, and compute the score.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : ndarray
        The updated game board after sliding and merging.
    merged : ndarray
        Boolean mask of the cells holding a freshly merged tile.
    changed : bool
        Whether any row changed.

    Notes
    -----
    - The function operates on rows, effectively sliding left.
    - For other directions, rotate the board before calling this function.
    """
    result = zeros_like(board)
    merged = zeros(board.shape, dtype=bool)
    score = 0
    changed = False

    for i, row in enumerate(board):
        score_row, result[i], merged[i], changed_row = merge_line(row)
        score += score_row
        changed = changed or changed_row

    return score, result, merged, changed


def latent_state(state: ndarray, direction: Direction) -> tuple[ndarray, list[Tile], int, bool]:
    """
    Compute the board after a move, without adding a new tile.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. Not modified.
    direction : Direction
        The direction of the move.

    Returns
    -------
    new_state : ndarray
        The board after sliding and merging.
    merged_cells : list[Tile]
        The merged cells in the coordinates of ``state``, in row-major order.
    score : int
        The points earned by the move.
    changed : bool
        Whether the move changed the board.

    Notes
    -----
    All four directions run the same left slide: the board is rotated so that the direction
    of travel points left, slid, then rotated back.
    """
    rotated = rot90(state, k=direction.value)
    score, updated, merged, changed = slide_and_merge(rotated)

    new_state = rot90(updated, k=-direction.value).copy()
    merged = rot90(merged, k=-direction.value)
    merged_cells = [Tile(int(row), int(col), int(new_state[row, col])) for row, col in argwhere(merged)]
    return new_state, merged_cells, score, changed


def spawn_tile(state: ndarray, generator: Generator | None = None) -> Tile | None:
    """
    Place a new tile (2 or 4) on a random empty cell.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. **Modified in-place.**
    generator : Generator, optional
        Random source. Falls back to a module-level generator.

    Returns
    -------
    Tile or None
        The placed cell and its value, or None when the board is full.

    Notes
    -----
    - Every empty cell is equally likely.
    - New tiles have a 90% chance of being 2 and a 10% chance of being 4.
    """
    rng = generator if generator is not None else _GENERATOR

    available_cells = argwhere(state == 0)
    if len(available_cells) == 0:
        return None

    row, col = available_cells[rng.choice(len(available_cells))]
    value = int(rng.choice(_TILE_VALUES, p=_TILE_PROBS))
    state[row, col] = value
    return Tile(int(row), int(col), value)


def max_tile(state: ndarray) -> int:
    """Return the largest tile on the board, 0 for an empty board."""
    return int(state.max(initial=0))
