# mini_arbor/grammar.py
"""
GRAMMAR EXPANSION: Deterministic L-system rewriting
===================================================

An L-system starts from an axiom string and, once per generation, replaces
every symbol that has a production rule with that rule's replacement.
Symbols without a rule are terminal and copied through unchanged.

    axiom = "F", rules = {"F": "F[+F]F"}

    0 iterations:  F
    1 iteration:   F[+F]F
    2 iterations:  F[+F]F[+F[+F]F]F[+F]F

GROWTH:
-------
Output length grows roughly like (rule length) ** iterations. There is no
cycle detection or size cap here: the iteration count is the only bound,
and callers are expected to keep it small (the app allows 1-7). Use
`expanded_length()` to check the size before materializing the string.
"""

from collections import Counter
from typing import Mapping

import numpy as np


def _check_iterations(iterations) -> int:
    if isinstance(iterations, bool) or not isinstance(iterations, (int, np.integer)):
        raise ValueError(f"iterations must be an integer, got {iterations!r}")
    if iterations < 0:
        raise ValueError(f"iterations must be >= 0, got {iterations}")
    return int(iterations)


def expand(axiom: str, rules: Mapping[str, str], iterations: int) -> str:
    """
    Rewrite `axiom` through `iterations` generations of `rules`.

    Args:
        axiom: Start string
        rules: Single-symbol productions {symbol: replacement}
        iterations: Number of rewrite passes (>= 0)

    Returns:
        The expanded symbol string

    Raises:
        ValueError: If iterations is negative or not an integer

    Example:
        >>> expand("F", {"F": "F[+F]F"}, 1)
        'F[+F]F'
    """
    n = _check_iterations(iterations)

    # Work on a token list; joining once at the end keeps each pass linear.
    symbols = list(axiom)
    for _ in range(n):
        symbols = [out for symbol in symbols for out in rules.get(symbol, symbol)]
    return "".join(symbols)


def expanded_length(axiom: str, rules: Mapping[str, str], iterations: int) -> int:
    """
    Length of expand(axiom, rules, iterations) without building the string.

    Tracks how many of each symbol exist per generation, so the cost
    depends on the alphabet size rather than the output length.
    """
    n = _check_iterations(iterations)

    productions = {symbol: Counter(replacement) for symbol, replacement in rules.items()}
    counts = Counter(axiom)
    for _ in range(n):
        nxt = Counter()
        for symbol, count in counts.items():
            production = productions.get(symbol)
            if production is None:
                nxt[symbol] += count
                continue
            for out, k in production.items():
                nxt[out] += count * k
        counts = nxt
    return sum(counts.values())
