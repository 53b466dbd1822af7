from itertools import product

ALPHABET = "ACGT"

SYMBOL_TO_NUMBER = {symbol: i for i, symbol in enumerate(ALPHABET)}


def hamming_distance(xs, ys):
    if len(xs) != len(ys):
        raise ValueError(f"Hamming distance needs equal lengths, got {len(xs)} and {len(ys)}")
    return sum(x != y for x, y in zip(xs, ys))


def find_fuzzy(text, pattern, predicate):
    """Scan every window of `text` the size of `pattern` and keep the ones `predicate` accepts.

    Returns a pair of lists: start offsets and the matched windows.
    """
    k = len(pattern)
    if k == 0:
        raise ValueError("Pattern must not be empty")
    offsets = []
    matches = []
    for i in range(len(text) - k + 1):
        window = text[i:i + k]
        if predicate(window, pattern):
            offsets.append(i)
            matches.append(window)
    return offsets, matches


def find_exact(text, pattern):
    offsets, _ = find_fuzzy(text, pattern, lambda window, pat: window == pat)
    return offsets


def neighbors(pattern, d, alphabet=ALPHABET):
    """All strings within Hamming distance `d` of `pattern`.

    A neighbor of the tail that is still closer than `d` may take any symbol in
    front; one already at distance `d` may only keep the original head.
    """
    if d < 0:
        raise ValueError(f"d must be non-negative, got {d}")
    if d == 0:
        return {pattern}
    if len(pattern) == 0:
        return {""}
    if len(pattern) == 1:
        return set(alphabet)
    head, tail = pattern[0], pattern[1:]
    neighborhood = set()
    for text in neighbors(tail, d, alphabet):
        if hamming_distance(tail, text) < d:
            for symbol in alphabet:
                neighborhood.add(symbol + text)
        else:
            neighborhood.add(head + text)
    return neighborhood


def permutations_with_repetition(alphabet, n):
    return product(alphabet, repeat=n)


def min_indices(values):
    indices = []
    minimum = None
    for i, value in enumerate(values):
        if minimum is None or value < minimum:
            minimum = value
            indices = [i]
        elif value == minimum:
            indices.append(i)
    return indices


def pattern_to_number(pattern):
    number = 0
    for symbol in pattern:
        if symbol not in SYMBOL_TO_NUMBER:
            raise ValueError(f"Unsupported symbol {symbol!r}")
        number = 4 * number + SYMBOL_TO_NUMBER[symbol]
    return number


def number_to_pattern(index, k):
    if not 0 <= index < 4 ** k:
        raise ValueError(f"Index {index} out of range for k={k}")
    symbols = []
    for _ in range(k):
        index, remainder = divmod(index, 4)
        symbols.append(ALPHABET[remainder])
    return "".join(reversed(symbols))
