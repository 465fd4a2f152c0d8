import argparse

from rich.console import Console
from rich.table import Table

from simulator.transitions import TransitionTable, state_letter
from simulator.turing_machine import DEFAULT_MAX_STEPS, TuringMachine
from tools.render import print_run

console = Console()


def ruleset_table(table):
    """State x symbol table in compact Busy Beaver notation."""
    view = Table(title="Transition Table", show_header=True, header_style="bold magenta")
    view.add_column(" ")
    for symbol in range(table.num_symbols):
        view.add_column(str(symbol), justify="center")

    for state, row in enumerate(table):
        view.add_row(f"State {state_letter(state)}", *[str(instruction) for instruction in row])
    return view


def latex_table(table):
    """LaTeX array of the same table."""
    lines = [r"\begin{array}{c|" + "c" * table.num_symbols + "}"]
    lines.append("State/Symbol & " + " & ".join(f"\\text{{{i}}}" for i in range(table.num_symbols)) + r" \\ \hline")
    for state, row in enumerate(table):
        lines.append(" & ".join([state_letter(state)] + [str(instruction) for instruction in row]) + r" \\")
    lines.append(r"\end{array}")
    return "\n".join(lines)


def inspect(text, run_machine=False, max_steps=DEFAULT_MAX_STEPS, tape_size=None):
    table = TransitionTable.from_text(text)
    console.print(f"[bold]Ruleset[/bold] {table}  [dim]{table.fingerprint()}[/dim]")
    console.print(ruleset_table(table))
    console.print("\n=== LaTeX Table ===")
    console.print(latex_table(table), markup=False, highlight=False)

    if run_machine:
        machine = TuringMachine(table, max_steps=max_steps, tape_size=tape_size)
        stats = machine.run()
        # Abandoned runs still show their partial history
        print_run(machine.statistics, console=console, title=f"Run ({machine.outcome.value})")
        if stats is not None:
            console.print(f"score={stats.score} action={stats.action}")
    return table


def main(argv=None):
    parser = argparse.ArgumentParser(description="Busy Beaver Ruleset Inspector")
    parser.add_argument("machine", help="Machine in text form, e.g. 1RZ0RA")
    parser.add_argument("--run", action="store_true", help="Run the machine and render its tape")
    parser.add_argument("--max-steps", type=int, default=DEFAULT_MAX_STEPS, help="Step ceiling for --run")
    parser.add_argument("--tape-size", type=int, default=None, help="Fixed tape size for --run")
    args = parser.parse_args(argv)

    inspect(args.machine, run_machine=args.run, max_steps=args.max_steps, tape_size=args.tape_size)


if __name__ == "__main__":
    main()
