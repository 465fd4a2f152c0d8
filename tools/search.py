from dataclasses import dataclass, field
from typing import Optional

from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from logger.logger import console_message
from simulator.evaluator import Leaderboard, update_leaderboard
from simulator.turing_machine import DEFAULT_MAX_STEPS, RunOutcome, TuringMachine
from tools.ruleset_generator import count_admitted, count_candidates, iter_machines, machine_id

LOG_BATCH_SIZE = 4096


@dataclass
class SearchReport:
    states: int
    symbols: int
    max_steps: int
    tape_size: Optional[int] = None
    candidates: int = 0
    admitted: int = 0
    outcomes: dict = field(default_factory=lambda: {outcome: 0 for outcome in RunOutcome})
    leaderboard: Leaderboard = field(default_factory=Leaderboard)

    @property
    def halted(self):
        return self.outcomes[RunOutcome.HALTED]

    @property
    def step_limit(self):
        return self.outcomes[RunOutcome.STEP_LIMIT]

    @property
    def out_of_tape(self):
        return self.outcomes[RunOutcome.OUT_OF_TAPE]

    def summary(self):
        board = self.leaderboard
        return {
            "states": self.states,
            "symbols": self.symbols,
            "max_steps": self.max_steps,
            "tape_size": self.tape_size,
            "candidates": self.candidates,
            "admitted": self.admitted,
            "halted": self.halted,
            "step_limit": self.step_limit,
            "out_of_tape": self.out_of_tape,
            "best_score": board.best_score.to_dict() if board.best_score else None,
            "best_action": board.best_action.to_dict() if board.best_action else None,
        }


def _flush(json_logger, halting_entries, abandoned_entries):
    if halting_entries:
        json_logger.log_halting(halting_entries)
    if abandoned_entries:
        json_logger.log_abandoned(abandoned_entries)
    halting_entries.clear()
    abandoned_entries.clear()


def _progress(enabled=True):
    return Progress(
        SpinnerColumn(),
        BarColumn(),
        "[progress.percentage]{task.percentage:>3.0f}%",
        TextColumn("{task.completed}/{task.total} Machines"),
        TimeElapsedColumn(),
        disable=not enabled
    )


def search(states, symbols, max_steps=DEFAULT_MAX_STEPS, tape_size=None, json_logger=None, show_progress=True,
           log_batch_size=LOG_BATCH_SIZE):
    """Run every admitted machine once and fold the results into a leaderboard.

    With a `json_logger`, per-machine entries are written every `log_batch_size`
    machines so memory stays bounded and an interrupted search keeps its log.
    """
    report = SearchReport(states, symbols, max_steps, tape_size)
    report.candidates = count_candidates(states, symbols)
    report.admitted = count_admitted(states, symbols)
    console_message(f"Searching {report.admitted:,} of {report.candidates:,} rule sets "
                    f"(s{states}_k{symbols}, max {max_steps:,} steps).")

    board = Leaderboard()
    halting_entries = []
    abandoned_entries = []

    if json_logger is not None:
        json_logger.log({"event": "search_start", "states": states, "symbols": symbols,
                         "max_steps": max_steps, "tape_size": tape_size, "admitted": report.admitted})

    with _progress(show_progress) as progress:
        task = progress.add_task("[cyan]Simulating...", total=report.admitted)

        for index, table in enumerate(iter_machines(states, symbols)):
            machine = TuringMachine(table, max_steps=max_steps, tape_size=tape_size)
            stats = machine.run()
            report.outcomes[machine.outcome] += 1
            board = update_leaderboard(board, stats)

            if json_logger is not None:
                entry = {"machine_id": machine_id(index), "outcome": machine.outcome.value}
                if stats is not None:
                    entry.update(stats.to_dict())
                    halting_entries.append(entry)
                else:
                    entry.update({"ruleset": str(table), "steps_taken": machine.steps})
                    abandoned_entries.append(entry)

                # === Bulk write once per batch ===
                if len(halting_entries) + len(abandoned_entries) >= log_batch_size:
                    _flush(json_logger, halting_entries, abandoned_entries)

            progress.update(task, advance=1)

    report.leaderboard = board

    if json_logger is not None:
        _flush(json_logger, halting_entries, abandoned_entries)
        json_logger.log_summary([report.summary()])

    if board.is_empty:
        console_message(f"No machine halted within {max_steps:,} steps.", level="WARNING")
    else:
        console_message(f"{report.halted:,} machines halted, {report.step_limit:,} hit the step limit, "
                        f"{report.out_of_tape:,} ran out of tape.", level="SUCCESS")
    return report
