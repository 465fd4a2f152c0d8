import hashlib
import json
from enum import IntEnum
from typing import NamedTuple

HALT = -1
HALT_LETTER = "Z"


class Direction(IntEnum):
    """Head movement; the value is the serialized dir bit."""
    LEFT = 0
    RIGHT = 1

    @property
    def letter(self):
        return "L" if self is Direction.LEFT else "R"

    @property
    def offset(self):
        return -1 if self is Direction.LEFT else 1

    @classmethod
    def from_letter(cls, letter):
        if letter == "L":
            return cls.LEFT
        if letter == "R":
            return cls.RIGHT
        raise ValueError(f"Unknown direction letter: {letter!r}")


def state_letter(state):
    """Busy Beaver letter for a state reference (A, B, ... or Z for HALT)."""
    if state == HALT:
        return HALT_LETTER
    return chr(ord("A") + state)


class Instruction(NamedTuple):
    """What to do for one (state, symbol) pair."""
    write: int
    direction: Direction
    next_state: int

    @property
    def halts(self):
        return self.next_state == HALT

    def serialize(self):
        return [self.write, int(self.direction), self.next_state]

    def __str__(self):
        return f"{self.write}{self.direction.letter}{state_letter(self.next_state)}"


class TransitionTable:
    """
    A complete candidate machine: one instruction row per non-halting state,
    one instruction per readable symbol in each row.
    Instances are immutable and hashable.
    """

    __slots__ = ("_rows", "_num_symbols")

    def __init__(self, rows, validate=True):
        self._rows = tuple(tuple(row) for row in rows)
        self._num_symbols = len(self._rows[0]) if self._rows else 0
        if validate:
            self._validate()

    def _validate(self):
        if not self._rows:
            raise ValueError("A transition table needs at least one state.")
        if self._num_symbols == 0:
            raise ValueError("A transition table needs at least one symbol.")

        num_states = len(self._rows)
        for state, row in enumerate(self._rows):
            if len(row) != self._num_symbols:
                raise ValueError(
                    f"State {state_letter(state)} has {len(row)} instructions, expected {self._num_symbols}."
                )
            for symbol, instruction in enumerate(row):
                if not isinstance(instruction, Instruction):
                    raise TypeError(f"Expected Instruction at ({state}, {symbol}), got {type(instruction)}.")
                if not 0 <= instruction.write < self._num_symbols:
                    raise ValueError(f"Write symbol {instruction.write} out of range at ({state}, {symbol}).")
                if instruction.next_state != HALT and not 0 <= instruction.next_state < num_states:
                    raise ValueError(f"Next state {instruction.next_state} out of range at ({state}, {symbol}).")

    @property
    def rows(self):
        return self._rows

    @property
    def num_states(self):
        return len(self._rows)

    @property
    def num_symbols(self):
        return self._num_symbols

    def instruction(self, state, symbol):
        """Fetch the instruction for the symbol read while in `state`."""
        return self._rows[state][symbol]

    def next_states(self):
        """Every next-state reference in the table, row by row."""
        return [instruction.next_state for row in self._rows for instruction in row]

    def has_halt(self):
        return HALT in self.next_states()

    def serialize(self):
        """Nested [write, dir_bit, next_state] lists, next_state -1 meaning HALT."""
        return [[instruction.serialize() for instruction in row] for row in self._rows]

    def fingerprint(self):
        """Hash the serialized table deterministically."""
        rules_json = json.dumps(self.serialize(), sort_keys=True)
        return hashlib.sha256(rules_json.encode("utf-8")).hexdigest()

    def to_text(self):
        """Standard text form, e.g. '1RZ0RA_1LA1RB'."""
        if self.num_states > 25 or self._num_symbols > 10:
            raise ValueError("Text format supports at most 25 states and 10 symbols.")
        return "_".join("".join(str(instruction) for instruction in row) for row in self._rows)

    @classmethod
    def from_text(cls, text):
        rows = []
        for row_text in text.strip().split("_"):
            if not row_text or len(row_text) % 3:
                raise ValueError(f"Not in standard TM text format: {text!r}")
            row = []
            for i in range(0, len(row_text), 3):
                write, direction, target = row_text[i:i + 3]
                if not write.isdigit():
                    raise ValueError(f"Bad write symbol {write!r} in {text!r}")
                if target == HALT_LETTER:
                    next_state = HALT
                elif "A" <= target < HALT_LETTER:
                    next_state = ord(target) - ord("A")
                else:
                    raise ValueError(f"Bad target state {target!r} in {text!r}")
                row.append(Instruction(int(write), Direction.from_letter(direction), next_state))
            rows.append(row)
        return cls(rows)

    def __getitem__(self, state):
        return self._rows[state]

    def __iter__(self):
        return iter(self._rows)

    def __len__(self):
        return len(self._rows)

    def __eq__(self, other):
        if not isinstance(other, TransitionTable):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)

    def __str__(self):
        return self.to_text()

    def __repr__(self):
        return f"TransitionTable({self.to_text()!r})"
