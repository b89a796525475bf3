"""
String encodings of permutations.

Every value 0..35 maps to one character, '0'..'9' followed by 'A'..'Z'.
A permutation is written either flat, as the images of its domain in order
("120"), or in cycle notation ("(012)").
"""

from typing import Iterable, List, Optional, Sequence

from .config import DEFAULT_CONFIG, MAX_ALLOWED_PERMUTATION_INDEX, PermutationConfig
from .errors import EncodingError, report

C0 = ord("0")
C9 = ord("9")
CA = ord("A")
CZ = ord("Z")


def get_char(i: int) -> str:
    """Gets the character representing *i*: 0..9 -> '0'..'9', 10..35 -> 'A'..'Z'."""
    if 0 <= i <= 9:
        return chr(C0 + i)
    if 10 <= i <= MAX_ALLOWED_PERMUTATION_INDEX:
        return chr(CA + (i - 10))
    raise report(
        EncodingError,
        "Cannot represent the integer %s in a single character, the max allowable is %s",
        i,
        MAX_ALLOWED_PERMUTATION_INDEX,
    )


def parse_char(c: str) -> int:
    if len(c) != 1:
        raise report(EncodingError, "Expected a single character, got '%s'", c)
    code = ord(c)
    if C0 <= code <= C9:
        return code - C0
    if CA <= code <= CZ:
        return code - CA + 10
    raise report(EncodingError, "Cannot parse the character '%s'", c)


def is_cycle_string(s: str) -> bool:
    return "(" in s


def format_flat(values: Iterable[int]) -> str:
    return "".join(get_char(v) for v in values)


def parse_flat(s: str, config: PermutationConfig = DEFAULT_CONFIG) -> List[int]:
    """
    Decode a flat string into the array form of a permutation.

    The domain ends at the largest value mentioned. Positions past the end of
    the string are fixed points and characters past the end of the domain are
    dropped, so "010" reads as "01".
    """
    decoded = [parse_char(c) for c in s]
    max_char = max([config.index, *decoded])
    length = max_char + 1 - config.index
    return [
        decoded[j] if j < len(decoded) else config.index + j for j in range(length)
    ]


def split_cycles(s: str) -> List[List[int]]:
    """
    Extract the decoded contents of every parenthesised group of *s*.

    Groups with fewer than two characters denote fixed points and are dropped.
    Text outside the parentheses is ignored.

    Raises:
        EncodingError: If a group is not closed or holds an unknown character.
    """
    cycles = []
    start = s.find("(")
    while start >= 0:
        end = s.find(")", start)
        if end < 0:
            raise report(
                EncodingError, "Unclosed parenthesis at position %s of '%s'", start, s
            )
        body = s[start + 1 : end]
        if len(body) >= 2:
            cycles.append([parse_char(c) for c in body])
        start = s.find("(", start + 1)
    return cycles


def follow_cycles(cycles: Sequence[Sequence[int]], value: int) -> int:
    """Image of *value* under the product of *cycles*, the last one applied first."""
    for cycle in reversed(cycles):
        if value in cycle:
            pos = cycle.index(value)
            value = cycle[(pos + 1) % len(cycle)]
    return value


def parse_cycles(
    s: str, n: Optional[int] = None, config: PermutationConfig = DEFAULT_CONFIG
) -> List[int]:
    """
    Decode cycle notation into the array form of a permutation.

    Args:
        s: The cycle string, e.g. "(01)(23)".
        n: Highest index of the domain. Defaults to the highest index
            appearing in any cycle.
        config: Supplies the lowest index of the domain.

    Returns:
        The images of config.index .. n, in order.
    """
    cycles = split_cycles(s)
    if n is None:
        n = max([config.index, *(v for cycle in cycles for v in cycle)])
    return [follow_cycles(cycles, i) for i in range(config.index, n + 1)]


def format_cycles(cycles: Iterable[Sequence[int]]) -> str:
    return "".join("(" + format_flat(cycle) + ")" for cycle in cycles)
