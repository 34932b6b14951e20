from __future__ import annotations

from collections.abc import Sequence

from boggle.dictionary import MAX_WORD_LENGTH, MIN_WORD_LENGTH, TrieNode, WordIndex

Grid = Sequence[Sequence[str]]
CellPath = list[tuple[int, int]]

DIRECTIONS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]


class InvalidGridError(ValueError):
    """Raised when a grid is not a rectangle of non-empty string tiles."""


def _grid_shape(grid: Grid) -> tuple[int, int]:
    """Return (rows, cols), or (0, 0) for an empty grid. Raises InvalidGridError on malformed input."""
    if not isinstance(grid, (list, tuple)):
        raise InvalidGridError(f"grid must be a list of rows, got {grid!r}")
    if len(grid) == 0:
        return 0, 0
    for r, row in enumerate(grid):
        if not isinstance(row, (list, tuple)):
            raise InvalidGridError(f"row {r} is not a list of tiles: {row!r}")
    cols = len(grid[0])
    if cols == 0:
        return 0, 0
    for r, row in enumerate(grid):
        if len(row) != cols:
            raise InvalidGridError(f"row {r} has {len(row)} tiles, expected {cols}")
        for c, tile in enumerate(row):
            if not isinstance(tile, str) or not tile:
                raise InvalidGridError(f"tile ({r},{c}) must be a non-empty string, got {tile!r}")
    return len(grid), cols


def _neighbors(rows: int, cols: int) -> list[list[int]]:
    neighbors = []
    for idx in range(rows * cols):
        r, c = divmod(idx, cols)
        adj = []
        for dr, dc in DIRECTIONS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols:
                adj.append(nr * cols + nc)
        neighbors.append(adj)
    return neighbors


def find_word_paths(grid: Grid, index: WordIndex, prune: bool = True,
                    min_length: int = MIN_WORD_LENGTH,
                    max_length: int = MAX_WORD_LENGTH) -> dict[str, CellPath]:
    """Map every word on the board to one cell path that spells it.

    Words are traced along simple paths of 8-adjacent cells and must be
    min_length to max_length characters long (4 to 16 by default) once tile text is
    concatenated. When a word is reachable several ways, the path found first
    is kept; starts are tried row-major, so that is the topmost-leftmost start.

    With prune=True the search abandons a path as soon as no dictionary word
    begins with it. With prune=False only full-word membership is checked and
    every path up to the length cap is explored; the result is the same.
    """
    rows, cols = _grid_shape(grid)
    if rows == 0:
        return {}

    cell_text = [grid[r][c].lower() for r in range(rows) for c in range(cols)]
    neighbors = _neighbors(rows, cols)
    found: dict[str, CellPath] = {}
    path: list[int] = []

    def record(word: str):
        if word not in found:
            found[word] = [divmod(i, cols) for i in path]

    # The visited mask is passed by value, so every return restores the caller's state.
    def dfs_pruned(idx: int, node: TrieNode, word: str, visited: int):
        node = index.walk(node, cell_text[idx])
        if node is None:
            return
        word += cell_text[idx]
        path.append(idx)
        if node.is_word and min_length <= len(word) <= max_length:
            record(word)
        if len(word) < max_length and node.children:
            for nidx in neighbors[idx]:
                if not (visited & (1 << nidx)):
                    dfs_pruned(nidx, node, word, visited | (1 << nidx))
        path.pop()

    def dfs_full(idx: int, word: str, visited: int):
        word += cell_text[idx]
        path.append(idx)
        if min_length <= len(word) <= max_length and word in index.words:
            record(word)
        if len(word) < max_length:
            for nidx in neighbors[idx]:
                if not (visited & (1 << nidx)):
                    dfs_full(nidx, word, visited | (1 << nidx))
        path.pop()

    for start in range(rows * cols):
        if prune:
            dfs_pruned(start, index.root, "", 1 << start)
        else:
            dfs_full(start, "", 1 << start)

    return found


def find_words(grid: Grid, index: WordIndex, prune: bool = True,
               min_length: int = MIN_WORD_LENGTH,
               max_length: int = MAX_WORD_LENGTH) -> list[str]:
    """Return every distinct word on the board, sorted ascending."""
    return sorted(find_word_paths(grid, index, prune, min_length, max_length))
