import json
import os
from datetime import datetime, timezone

from rich.console import Console

console = Console()

LEVEL_STYLES = {
    "INFO": "cyan",
    "WARNING": "yellow",
    "ERROR": "red",
    "SUCCESS": "green",
}


def console_message(msg, level="INFO"):
    """Print a tagged status line to the terminal."""
    style = LEVEL_STYLES.get(level, "white")
    console.print(f"[{style}]\\[{level}][/{style}] {msg}")


class JSONLogger:
    """Append-only JSON lines log of a search, one file per UTC day."""

    def __init__(self, output_directory="logs/", log_file_prefix="busybeaver_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    @classmethod
    def from_config(cls, config):
        return cls(config["output_directory"], config["log_file_prefix"])

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"
        return os.path.join(self.output_directory, filename)

    def _log_to_file(self, filename, entries):
        path = os.path.join(self.output_directory, filename)
        with open(path, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    def log(self, entry: dict):
        """Log a single entry to the main busybeaver log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")

    def log_summary(self, entries: list):
        """Log search summary entries (counts, winners) to the main log."""
        self._log_to_file(os.path.basename(self.current_log), entries)

    def log_halting(self, entries: list):
        """Log full rulesets and statistics for machines that halted."""
        self._log_to_file(f"halting_{self.today}.jsonl", entries)

    def log_abandoned(self, entries: list):
        """Log rulesets for machines abandoned at the step ceiling or tape edge."""
        self._log_to_file(f"abandoned_{self.today}.jsonl", entries)
