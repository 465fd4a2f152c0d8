import json
from pathlib import Path

from logger.logger import JSONLogger
from simulator.evaluator import Leaderboard
from simulator.turing_machine import RunOutcome
from tools.search import search


def test_search_counts_outcomes():
    report = search(1, 2, show_progress=False)
    assert report.candidates == 64
    assert report.admitted == 48
    assert report.halted == 32
    assert report.step_limit == 16
    assert report.out_of_tape == 0
    assert report.leaderboard.completed == 32
    assert report.leaderboard.best_score.score == 1


def test_search_with_fixed_tape_reports_out_of_tape():
    report = search(1, 2, tape_size=5, show_progress=False)
    assert report.halted == 32
    assert report.out_of_tape == 16
    assert report.step_limit == 0


def test_zero_ceiling_still_accepts_first_step_halts():
    report = search(1, 2, max_steps=0, show_progress=False)
    assert report.halted == 32
    assert report.step_limit == 16
    assert report.leaderboard.best_action.action == 1


def test_search_writes_json_logs(tmp_path):
    json_logger = JSONLogger(output_directory=str(tmp_path), log_file_prefix="test_")
    report = search(1, 2, json_logger=json_logger, show_progress=False)

    halting = (tmp_path / f"halting_{json_logger.today}.jsonl").read_text().splitlines()
    abandoned = (tmp_path / f"abandoned_{json_logger.today}.jsonl").read_text().splitlines()
    summary = (tmp_path / f"test_{json_logger.today}.jsonl").read_text().splitlines()

    assert len(halting) == report.halted == 32
    assert len(abandoned) == report.step_limit == 16

    first_halting = json.loads(halting[0])
    assert first_halting["machine_id"] == "TM_000000"
    assert first_halting["outcome"] == RunOutcome.HALTED.value
    assert first_halting["action"] == 1

    first_abandoned = json.loads(abandoned[0])
    assert first_abandoned["outcome"] == "step_limit"
    assert first_abandoned["steps_taken"] == 101

    start = json.loads(summary[0])
    assert start["event"] == "search_start"
    assert start["admitted"] == 48

    entry = json.loads(summary[-1])
    assert entry["admitted"] == 48
    assert entry["best_score"]["score"] == 1


def test_summary_of_empty_search():
    report = search(1, 2, max_steps=100, show_progress=False)
    report.leaderboard = Leaderboard()
    summary = report.summary()
    assert summary["best_score"] is None
    assert summary["best_action"] is None


class CountingLogger(JSONLogger):
    """Records batch sizes and how many halting lines were on disk before each write."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.halting_batches = []
        self.lines_on_disk = []

    def log_halting(self, entries):
        path = Path(self.output_directory) / f"halting_{self.today}.jsonl"
        self.lines_on_disk.append(len(path.read_text().splitlines()) if path.exists() else 0)
        self.halting_batches.append(len(entries))
        super().log_halting(entries)


def test_logs_are_flushed_in_bounded_batches(tmp_path):
    json_logger = CountingLogger(output_directory=str(tmp_path))
    report = search(1, 2, json_logger=json_logger, show_progress=False, log_batch_size=10)

    assert sum(json_logger.halting_batches) == report.halted == 32
    assert max(json_logger.halting_batches) <= 10
    assert len(json_logger.halting_batches) > 1
    # Earlier batches are already on disk when later ones arrive
    assert json_logger.lines_on_disk[0] == 0
    assert json_logger.lines_on_disk[-1] > 0

    abandoned = (tmp_path / f"abandoned_{json_logger.today}.jsonl").read_text().splitlines()
    assert len(abandoned) == report.step_limit == 16
