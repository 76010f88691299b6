"""Conway's Game of Life on a toroidal grid."""
import numpy as np
from typing import List, Optional, Tuple
from tqdm import tqdm

from .cell import Cell
from .patterns import GLIDER_STAMP, HEIGHT, WIDTH, seed_pattern


def next_state(cell: Cell, live_neighbors: int) -> Cell:
    """Apply the Game of Life rule to one cell."""
    if cell is Cell.ALIVE and live_neighbors < 2:
        return Cell.DEAD
    if cell is Cell.ALIVE and live_neighbors in (2, 3):
        return Cell.ALIVE
    if cell is Cell.ALIVE and live_neighbors > 3:
        return Cell.DEAD
    if cell is Cell.DEAD and live_neighbors == 3:
        return Cell.ALIVE
    return cell


class Universe:
    """
    Fixed-size grid whose edges wrap around.

    Cells live in a flat uint8 buffer in row-major order, one byte per
    cell holding a Cell value.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT,
                 cells: Optional[np.ndarray] = None):
        """
        Create a universe, seeded with the default pattern unless
        ``cells`` is given.

        Args:
            width: Grid width, must be positive
            height: Grid height, must be positive
            cells: Optional flat buffer of width * height 0/1 values
        """
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        self.generation = 0

        if cells is None:
            self._cells = seed_pattern(self._width, self._height).ravel()
        else:
            cells = np.asarray(cells)
            if cells.ndim == 2 and cells.shape != (self._height, self._width):
                raise ValueError(
                    f"Expected shape {(self._height, self._width)}, got {cells.shape}")
            if cells.ndim > 2 or cells.size != self._width * self._height:
                raise ValueError(
                    f"Expected {self._width * self._height} cells, got shape {cells.shape}")
            if not np.isin(cells, (0, 1)).all():
                raise ValueError("Cell values must be 0 or 1")
            self._cells = cells.astype(np.uint8).ravel().copy()

    @classmethod
    def new(cls) -> "Universe":
        """Default 64x64 universe with the seed pattern."""
        return cls()

    @classmethod
    def empty(cls, width: int = WIDTH, height: int = HEIGHT) -> "Universe":
        """Universe with every cell dead."""
        return cls(width, height, cells=np.zeros(width * height, dtype=np.uint8))

    @classmethod
    def from_array(cls, state: np.ndarray) -> "Universe":
        """Universe holding a copy of a 2-D array of 0/1 values."""
        state = np.asarray(state)
        if state.ndim != 2:
            raise ValueError(f"Expected a 2-D state, got shape {state.shape}")
        height, width = state.shape
        return cls(width, height, cells=state)

    # -------------------------- Accessors --------------------------
    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def cells(self) -> np.ndarray:
        """
        Read-only view of the live cell buffer.

        The view shares memory with the universe and must not be kept
        across tick, toggle_cell or add_glider.
        """
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def as_array(self) -> np.ndarray:
        """Copy of the grid shaped (height, width)."""
        return self._cells.reshape(self._height, self._width).copy()

    def get_cell(self, row: int, column: int) -> Cell:
        return Cell.from_int(int(self._cells[self.get_index(row, column)]))

    def population(self) -> int:
        return int(self._cells.sum())

    # -------------------------- Indexing --------------------------
    def _check_coords(self, row: int, column: int) -> None:
        if not (0 <= row < self._height and 0 <= column < self._width):
            raise IndexError(
                f"Cell ({row}, {column}) outside {self._height}x{self._width} grid")

    def get_index(self, row: int, column: int) -> int:
        self._check_coords(row, column)
        return row * self._width + column

    def neighbor_indices(self, row: int, column: int) -> List[int]:
        """Flat indices of the eight wrapped neighbors, NW to SE."""
        self._check_coords(row, column)
        north = self._height - 1 if row == 0 else row - 1
        south = 0 if row == self._height - 1 else row + 1
        west = self._width - 1 if column == 0 else column - 1
        east = 0 if column == self._width - 1 else column + 1

        return [
            self.get_index(north, west),
            self.get_index(north, column),
            self.get_index(north, east),
            self.get_index(row, west),
            self.get_index(row, east),
            self.get_index(south, west),
            self.get_index(south, column),
            self.get_index(south, east),
        ]

    def live_neighbor_count(self, row: int, column: int) -> int:
        """Number of live cells among the eight wrapped neighbors."""
        count = 0
        for idx in self.neighbor_indices(row, column):
            count += Cell.from_int(int(self._cells[idx])).as_int()
        return count

    # -------------------------- Simulation --------------------------
    def _count_neighbors(self, state: np.ndarray) -> np.ndarray:
        """Count live neighbors for each cell using periodic boundaries."""
        neighbors = np.zeros_like(state, dtype=int)
        for di in [-1, 0, 1]:
            for dj in [-1, 0, 1]:
                if di == 0 and dj == 0:
                    continue
                neighbors += np.roll(np.roll(state, di, axis=0), dj, axis=1)
        return neighbors

    def tick(self) -> None:
        """Advance every cell by one generation."""
        state = self._cells.reshape(self._height, self._width)
        neighbors = self._count_neighbors(state)
        next_cells = ((state == 1) & ((neighbors == 2) | (neighbors == 3))) | \
                     ((state == 0) & (neighbors == 3))
        self._cells = next_cells.astype(np.uint8).ravel()
        self.generation += 1

    # -------------------------- Mutation --------------------------
    def toggle_cell(self, row: int, column: int) -> None:
        idx = self.get_index(row, column)
        self._cells[idx] = self.get_cell(row, column).toggled().as_int()

    def add_glider(self, row: int, column: int) -> None:
        """Stamp a glider over the 3x3 neighborhood centered at (row, column)."""
        self._check_coords(row, column)
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                neighbor_row = (row + delta_row) % self._height
                neighbor_col = (column + delta_col) % self._width
                idx = self.get_index(neighbor_row, neighbor_col)
                self._cells[idx] = GLIDER_STAMP[(delta_row, delta_col)].as_int()


def place_pattern(grid_size: Tuple[int, int],
                  pattern: np.ndarray,
                  position: Optional[Tuple[int, int]] = None) -> np.ndarray:
    """
    Place a pattern on a dead grid, centered by default or at a given corner.

    The pattern wraps across the grid edges like the rest of the torus.
    The corner must lie inside the grid.
    """
    grid = np.zeros(grid_size, dtype=np.uint8)
    ph, pw = pattern.shape
    h, w = grid_size
    if ph > h or pw > w:
        raise ValueError(f"Pattern of shape {pattern.shape} does not fit a {h}x{w} grid")
    if position is None:
        start_h = (h - ph) // 2
        start_w = (w - pw) // 2
    else:
        start_h, start_w = position
        if not (0 <= start_h < h and 0 <= start_w < w):
            raise IndexError(f"Position ({start_h}, {start_w}) outside {h}x{w} grid")

    rows = (start_h + np.arange(ph)) % h
    cols = (start_w + np.arange(pw)) % w
    grid[np.ix_(rows, cols)] = pattern

    return grid


def simulate(universe: Universe, num_steps: int, verbose: bool = False) -> np.ndarray:
    """Tick the universe num_steps times and return the full trajectory."""
    trajectory = np.zeros((num_steps + 1, universe.height(), universe.width()), dtype=np.uint8)
    trajectory[0] = universe.as_array()
    steps = range(1, num_steps + 1)
    iterator = tqdm(steps, desc="Ticking") if verbose else steps
    for t in iterator:
        universe.tick()
        trajectory[t] = universe.as_array()
    return trajectory
