import argparse

from logger.logger import console_message
from simulator.transitions import HALT, Direction, Instruction, TransitionTable
from tools.combinations import combination_count, generate_combinations


def _check_case(num_states, num_symbols):
    if num_states < 1:
        raise ValueError(f"Number of states must be at least 1, got {num_states}.")
    if num_symbols < 1:
        raise ValueError(f"Number of symbols must be at least 1, got {num_symbols}.")


# === TRANSITION OPTION MAP ===
def generate_instruction_options(num_states, num_symbols):
    """Build every possible instruction, halting ones first."""
    _check_case(num_states, num_symbols)
    next_states = [HALT] + list(range(num_states))

    options = []
    for next_state in next_states:
        for direction in (Direction.LEFT, Direction.RIGHT):
            for write in range(num_symbols):
                options.append(Instruction(write, direction, next_state))
    return options


def generate_rows(options, num_symbols):
    """Every instruction row: one option per readable symbol."""
    return list(generate_combinations(options, num_symbols))


def generate_tables(rows, num_states):
    """Lazily yield every table built from `num_states` rows, halting or not."""
    for combination in generate_combinations(rows, num_states):
        yield TransitionTable(combination, validate=False)


# === COUNTS ===
def count_candidates(num_states, num_symbols):
    """Size of the unfiltered candidate space, ((K*2*(N+1))**K)**N."""
    _check_case(num_states, num_symbols)
    num_options = num_symbols * 2 * (num_states + 1)
    return combination_count(combination_count(num_options, num_symbols), num_states)


def count_admitted(num_states, num_symbols):
    """Candidates that survive the halt filter."""
    total = count_candidates(num_states, num_symbols)
    non_halting_options = num_symbols * 2 * num_states
    return total - combination_count(combination_count(non_halting_options, num_symbols), num_states)


# === ENUMERATION ===
def iter_machines(num_states, num_symbols):
    """Stream every table with at least one halting transition, in enumeration order."""
    options = generate_instruction_options(num_states, num_symbols)
    rows = generate_rows(options, num_symbols)
    for table in generate_tables(rows, num_states):
        # Skip machines with no halting transitions
        if table.has_halt():
            yield table


def enumerate_machines(num_states, num_symbols):
    """Materialize all admitted tables for the (states, symbols) case."""
    total = count_candidates(num_states, num_symbols)
    console_message(f"Preparing to generate {total:,} possible rule sets...")

    machines = list(iter_machines(num_states, num_symbols))

    console_message(f"Finished generating {len(machines):,} machines.")
    console_message(f"Skipped {total - len(machines):,} rule sets without any halting transitions.")
    return machines


def machine_id(index):
    return f"TM_{index:06d}"


# === CLI WRAPPER ===
def main():
    parser = argparse.ArgumentParser(description="Busy Beaver RuleSet Generator")
    parser.add_argument("--states", type=int, default=2, help="Number of machine states (default=2)")
    parser.add_argument("--symbols", type=int, default=2, help="Number of tape symbols (default=2)")
    parser.add_argument("--list", action="store_true", help="Print every admitted machine")
    args = parser.parse_args()

    if args.list:
        for index, table in enumerate(iter_machines(args.states, args.symbols)):
            print(f"{machine_id(index)}  {table}")
    else:
        console_message(f"{count_candidates(args.states, args.symbols):,} candidates, "
                        f"{count_admitted(args.states, args.symbols):,} with a halting transition.")


if __name__ == "__main__":
    main()
