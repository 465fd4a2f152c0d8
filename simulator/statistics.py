from typing import NamedTuple

import numpy as np

# Score counts this exact value, whatever the number of symbols.
MARKER = 1


class Snapshot(NamedTuple):
    """Tape contents and head position after one step."""
    cells: np.ndarray
    left: int
    head: int
    score: int

    @property
    def right(self):
        return self.left + len(self.cells) - 1

    def symbol_at(self, position, blank=0):
        """Symbol at a signed tape offset, blank outside the recorded cells."""
        if self.left <= position <= self.right:
            return int(self.cells[position - self.left])
        return blank


class RunStatistics:
    """Per-step record of one run of one transition table."""

    def __init__(self, table):
        self.table = table
        self.snapshots = []
        self.frozen = False

    def record(self, tape):
        if self.frozen:
            raise RuntimeError("Statistics of a finished run cannot be changed.")
        cells = np.array(tape.cells, dtype=np.int32)
        score = int(np.count_nonzero(cells == MARKER))
        self.snapshots.append(Snapshot(cells, tape.left, tape.head, score))

    def freeze(self):
        self.frozen = True
        for snapshot in self.snapshots:
            snapshot.cells.flags.writeable = False

    @property
    def final_snapshot(self):
        return self.snapshots[-1] if self.snapshots else None

    @property
    def score(self):
        """Marker cells on the tape at the last snapshot."""
        return self.snapshots[-1].score if self.snapshots else 0

    @property
    def action(self):
        """Steps executed; the first snapshot precedes any step."""
        return max(len(self.snapshots) - 1, 0)

    def to_dict(self):
        final = self.final_snapshot
        return {
            "ruleset": str(self.table),
            "ruleset_hash": self.table.fingerprint(),
            "score": self.score,
            "action": self.action,
            "final_tape": final.cells.tolist() if final is not None else [],
            "final_head": final.head if final is not None else 0,
        }
