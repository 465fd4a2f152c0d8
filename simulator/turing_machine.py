from enum import Enum

from simulator.statistics import RunStatistics
from simulator.tape import Tape
from simulator.transitions import HALT

DEFAULT_MAX_STEPS = 100


class RunOutcome(Enum):
    HALTED = "halted"
    STEP_LIMIT = "step_limit"
    OUT_OF_TAPE = "out_of_tape"


class InvalidSymbolError(RuntimeError):
    """The tape holds a symbol the table has no instruction for."""


class TuringMachine:
    """
    Runs one transition table from a blank tape in state 0.

    The run ends when an instruction leads to HALT, when the step count
    exceeds `max_steps`, or (fixed tapes only) when the head cannot move.
    Only halted runs hand back their statistics.
    """

    def __init__(self, table, max_steps=DEFAULT_MAX_STEPS, tape_size=None):
        self.table = table
        self.max_steps = max_steps
        self.tape_size = tape_size
        self.reset()

    def reset(self):
        self.tape = Tape(self.tape_size)
        self.current_state = 0
        self.steps = 0
        self.outcome = None
        self.statistics = RunStatistics(self.table)
        self.statistics.record(self.tape)

    @property
    def finished(self):
        return self.outcome is not None

    def step(self):
        """Execute a single instruction. Returns the outcome once the run has ended."""
        if self.finished:
            return self.outcome

        symbol = self.tape.read()
        if not 0 <= symbol < self.table.num_symbols:
            raise InvalidSymbolError(
                f"Read symbol {symbol} at offset {self.tape.head}, table has {self.table.num_symbols} symbols."
            )
        instruction = self.table.instruction(self.current_state, symbol)

        self.tape.write(instruction.write)
        if not self.tape.move(instruction.direction):
            self.outcome = RunOutcome.OUT_OF_TAPE
            return self.outcome

        self.statistics.record(self.tape)
        self.steps += 1

        if instruction.next_state == HALT:
            self.current_state = HALT
            self.outcome = RunOutcome.HALTED
            self.statistics.freeze()
        elif self.steps > self.max_steps:
            self.outcome = RunOutcome.STEP_LIMIT
        else:
            self.current_state = instruction.next_state
        return self.outcome

    def run(self):
        """Run to completion; statistics for a halted run, None if abandoned."""
        while not self.finished:
            self.step()
        if self.outcome is RunOutcome.HALTED:
            return self.statistics
        return None


def run(table, max_steps=DEFAULT_MAX_STEPS, tape_size=None):
    return TuringMachine(table, max_steps=max_steps, tape_size=tape_size).run()
