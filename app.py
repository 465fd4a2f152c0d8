# app.py

import argparse

from rich.console import Console
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table

from config.config_loader import load_config, validate_config
from logger.logger import JSONLogger
from tools.render import print_run
from tools.ruleset_inspect import inspect
from tools.search import search

console = Console()


# === Reporting ===
def winners_table(report):
    table = Table(title=f"Busy Beaver s{report.states}_k{report.symbols}", show_header=True,
                  header_style="bold magenta")
    table.add_column("Category")
    table.add_column("Machine")
    table.add_column("Score", justify="right")
    table.add_column("Action", justify="right")

    board = report.leaderboard
    for category, stats in (("Best score", board.best_score), ("Best action", board.best_action)):
        table.add_row(category, str(stats.table), str(stats.score), str(stats.action))
    return table


def show_report(report, render_winners=True):
    console.print(f"Candidates: {report.candidates:,}  Admitted: {report.admitted:,}  "
                  f"Halted: {report.halted:,}  Step limit: {report.step_limit:,}  "
                  f"Out of tape: {report.out_of_tape:,}")

    board = report.leaderboard
    if board.is_empty:
        console.print(f"[red]No machine halted within {report.max_steps:,} steps.[/red]")
        return

    console.print(winners_table(report))
    if render_winners:
        print_run(board.best_score, console=console, title=f"Best score: {board.best_score.table}")
        print_run(board.best_action, console=console, title=f"Best action: {board.best_action.table}")


def run_search(config):
    json_logger = JSONLogger.from_config(config) if config["log_enabled"] else None
    report = search(
        config["states"],
        config["symbols"],
        max_steps=config["max_steps"],
        tape_size=config["tape_size"],
        json_logger=json_logger,
        show_progress=config["show_progress"]
    )
    show_report(report, render_winners=config["render_winners"])
    return report


# === Interactive Mode ===
def show_main_menu():
    console.print("\n[bold cyan]Busy Beaver Explorer[/bold cyan]")
    console.print("[1] Search")
    console.print("[2] Inspect a Machine")
    console.print("[3] Exit")


def handle_search(config):
    console.print("\n[bold]Search[/bold]")
    config = dict(config)
    config["states"] = IntPrompt.ask("Number of States", default=config["states"])
    config["symbols"] = IntPrompt.ask("Number of Symbols", default=config["symbols"])
    config["max_steps"] = IntPrompt.ask("Max Steps", default=config["max_steps"])
    try:
        validate_config(config)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        return
    run_search(config)


def handle_inspect(config):
    console.print("\n[bold]Inspect a Machine[/bold]")
    text = Prompt.ask("Machine in text form (e.g., 1RZ0RA)")
    run_machine = Confirm.ask("Run it?", default=True)
    try:
        inspect(text, run_machine=run_machine, max_steps=config["max_steps"], tape_size=config["tape_size"])
    except ValueError as e:
        console.print(f"[red]{e}[/red]")


def interactive_main(config):
    while True:
        show_main_menu()
        choice = Prompt.ask("\nChoose an option", choices=["1", "2", "3"], default="3")

        if choice == "1":
            handle_search(config)
        elif choice == "2":
            handle_inspect(config)
        elif choice == "3":
            console.print("[bold green]Goodbye![/bold green]")
            break


# === CLI Mode ===
def build_parser():
    parser = argparse.ArgumentParser(description="Exhaustive Busy Beaver search over small Turing machines")
    parser.add_argument("states", type=int, nargs="?", help="Number of non-halting states")
    parser.add_argument("symbols", type=int, nargs="?", help="Number of tape symbols")
    parser.add_argument("--config", help="Path to a JSON runtime config")
    parser.add_argument("--max-steps", type=int, help="Step ceiling per machine")
    parser.add_argument("--tape-size", type=int, help="Use a fixed tape of this many cells")
    parser.add_argument("--log", action="store_true", help="Write JSON lines logs of every run")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    parser.add_argument("--no-render", action="store_true", help="Do not render the winners' tapes")
    return parser


def config_from_args(args):
    config = load_config(args.config)
    overrides = {
        "states": args.states,
        "symbols": args.symbols,
        "max_steps": args.max_steps,
        "tape_size": args.tape_size,
    }
    config.update({key: value for key, value in overrides.items() if value is not None})
    if args.log:
        config["log_enabled"] = True
    if args.no_progress:
        config["show_progress"] = False
    if args.no_render:
        config["render_winners"] = False
    validate_config(config)
    return config


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if (args.states is None) != (args.symbols is None):
        parser.error("states and symbols must be given together")

    try:
        config = config_from_args(args)
    except (FileNotFoundError, ValueError, TypeError) as e:
        parser.error(str(e))

    if args.states is None:
        interactive_main(config)
    else:
        run_search(config)


if __name__ == "__main__":
    main()
