from functools import reduce
from typing import NamedTuple, Optional

from simulator.statistics import RunStatistics
from simulator.turing_machine import DEFAULT_MAX_STEPS, run


class Leaderboard(NamedTuple):
    """Best halted runs seen so far. Leaders change only on a strictly greater value."""
    best_score: Optional[RunStatistics] = None
    best_action: Optional[RunStatistics] = None
    completed: int = 0

    @property
    def is_empty(self):
        return self.completed == 0


def update_leaderboard(board, stats):
    """Fold one run result into the board; None (abandoned run) leaves it unchanged."""
    if stats is None:
        return board

    best_score = board.best_score
    if best_score is None or stats.score > best_score.score:
        best_score = stats

    best_action = board.best_action
    if best_action is None or stats.action > best_action.action:
        best_action = stats

    return Leaderboard(best_score, best_action, board.completed + 1)


def select_best(results):
    """Best score and best action over an iterable of run results."""
    return reduce(update_leaderboard, results, Leaderboard())


def evaluate_batch(tables, max_steps=DEFAULT_MAX_STEPS, tape_size=None):
    """Run every table once, in order. Abandoned runs come back as None."""
    return [run(table, max_steps=max_steps, tape_size=tape_size) for table in tables]
