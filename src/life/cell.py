"""Two-state cell type stored as one byte per cell."""
from enum import Enum


class Cell(Enum):
    """State of a single grid cell."""

    DEAD = 0
    ALIVE = 1

    def as_int(self) -> int:
        """Numeric value used when summing live neighbors."""
        return self.value

    def toggled(self) -> "Cell":
        return Cell.DEAD if self is Cell.ALIVE else Cell.ALIVE

    @classmethod
    def from_int(cls, value: int) -> "Cell":
        """Map a stored byte (0 or 1) back to a Cell."""
        if value == 0:
            return cls.DEAD
        if value == 1:
            return cls.ALIVE
        raise ValueError(f"Invalid cell value {value!r}, expected 0 or 1")
