from simulator.transitions import Direction

BLANK = 0


class Tape:
    """
    Tape of symbols addressed by signed offsets from the starting cell.

    With `size=None` the tape starts as a single blank cell and grows by one
    blank cell whenever the head steps past either edge. With a fixed `size`
    the tape is pre-zeroed, the head starts at its midpoint, and a head parked
    on the first or last cell cannot move any further.
    """

    def __init__(self, size=None):
        if size is None:
            self.cells = [BLANK]
            self.origin = 0
        else:
            if size < 3:
                raise ValueError(f"Fixed tape size must be at least 3, got {size}.")
            self.cells = [BLANK] * size
            self.origin = size // 2
        self.size = size
        self.head = 0

    @property
    def is_fixed(self):
        return self.size is not None

    @property
    def index(self):
        """Head position as an index into `cells`."""
        return self.origin + self.head

    @property
    def left(self):
        """Offset of the leftmost materialized cell."""
        return -self.origin

    @property
    def right(self):
        """Offset of the rightmost materialized cell."""
        return len(self.cells) - 1 - self.origin

    def read(self):
        return self.cells[self.index]

    def write(self, symbol):
        self.cells[self.index] = symbol

    def move(self, direction: Direction):
        """Move the head one cell; False when a fixed tape has run out."""
        if self.is_fixed:
            if self.index <= 0 or self.index >= self.size - 1:
                return False
        else:
            target = self.index + direction.offset
            if target < 0:
                self.cells.insert(0, BLANK)
                self.origin += 1
            elif target >= len(self.cells):
                self.cells.append(BLANK)
        self.head += direction.offset
        return True

    def count(self, symbol):
        return self.cells.count(symbol)

    def __len__(self):
        return len(self.cells)
