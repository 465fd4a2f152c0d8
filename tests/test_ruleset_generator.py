import pytest

from simulator.transitions import HALT, Direction, Instruction, TransitionTable
from tools.combinations import generate_combinations
from tools.ruleset_generator import (
    count_admitted,
    count_candidates,
    enumerate_machines,
    generate_instruction_options,
    generate_rows,
    generate_tables,
    iter_machines,
    machine_id,
)


def test_instruction_alphabet():
    options = generate_instruction_options(2, 3)
    assert len(options) == 3 * 2 * (2 + 1)
    assert len(set(options)) == len(options)
    assert options[0] == Instruction(0, Direction.LEFT, HALT)
    assert {option.next_state for option in options} == {HALT, 0, 1}


@pytest.mark.parametrize("states,symbols", [(1, 1), (1, 2), (2, 1), (2, 2), (1, 3)])
def test_unfiltered_size(states, symbols):
    options = generate_instruction_options(states, symbols)
    rows = generate_rows(options, symbols)
    tables = list(generate_tables(rows, states))
    assert len(tables) == ((symbols * 2 * (states + 1)) ** symbols) ** states
    assert len(tables) == count_candidates(states, symbols)


@pytest.mark.parametrize("states,symbols,expected", [(1, 1, 2), (1, 2, 48), (2, 2, 16640)])
def test_filtered_size(states, symbols, expected):
    machines = enumerate_machines(states, symbols)
    assert len(machines) == expected == count_admitted(states, symbols)
    assert all(table.has_halt() for table in machines)


def test_every_admitted_table_has_halt_and_no_other_is_dropped():
    options = generate_instruction_options(1, 2)
    rows = generate_rows(options, 2)
    everything = list(generate_tables(rows, 1))
    admitted = list(iter_machines(1, 2))
    assert admitted == [table for table in everything if table.has_halt()]


def test_contains_single_step_halter():
    table = TransitionTable.from_text("1RZ0RA")
    assert table in enumerate_machines(1, 2)


def test_tables_without_halt_never_appear():
    for states, symbols in [(1, 1), (1, 2), (2, 2)]:
        loop_row = [Instruction(0, Direction.RIGHT, 0)] * symbols
        looping = TransitionTable([loop_row] * states)
        assert looping not in set(iter_machines(states, symbols))


def test_enumeration_is_deterministic():
    assert enumerate_machines(2, 2) == enumerate_machines(2, 2)


def test_rows_are_full_length():
    rows = generate_rows(generate_instruction_options(2, 3), 3)
    assert all(len(row) == 3 for row in rows)
    assert rows == list(generate_combinations(generate_instruction_options(2, 3), 3))


def test_invalid_case():
    with pytest.raises(ValueError):
        enumerate_machines(0, 2)
    with pytest.raises(ValueError):
        count_candidates(2, 0)


def test_machine_id_format():
    assert machine_id(123) == "TM_000123"
