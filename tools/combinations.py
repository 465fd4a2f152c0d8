"""Ordered combinations with repetition, counted as a mixed-radix number.

The first position is the most significant digit, so the output order is the
same as a depth-first walk that tries every pool index in ascending order at
each level.
"""


def combination_count(pool_size, length):
    """Number of ordered tuples of `length` drawn from a pool of `pool_size`."""
    return pool_size ** length


def decode_combination(index, pool, length):
    """Map an index in [0, len(pool) ** length) to its tuple."""
    base = len(pool)
    total = combination_count(base, length)
    if not 0 <= index < total:
        raise IndexError(f"Combination index {index} outside [0, {total}).")

    picked = [None] * length
    choice = index
    for position in range(length - 1, -1, -1):
        picked[position] = pool[choice % base]
        choice //= base
    return tuple(picked)


def generate_combinations(pool, length):
    """Yield every ordered tuple of `length` elements drawn from `pool` with repetition."""
    pool = tuple(pool)
    base = len(pool)
    if base == 0 and length > 0:
        return

    digits = [0] * length
    while True:
        yield tuple(pool[digit] for digit in digits)

        # Odometer increment, least significant digit last
        position = length - 1
        while position >= 0:
            digits[position] += 1
            if digits[position] < base:
                break
            digits[position] = 0
            position -= 1
        if position < 0:
            return
