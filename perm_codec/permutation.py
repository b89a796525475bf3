from functools import reduce
from random import Random, shuffle
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

import sympy
from sympy.combinatorics import Permutation as SympyPermutation

from . import codec
from .config import DEFAULT_CONFIG, PermutationConfig
from .errors import ArityError, ValidationError, report
from .fmt import make_latex_cycles, make_latex_two_line


def validate_permutation_values(
    values: Sequence[int], config: PermutationConfig = DEFAULT_CONFIG
) -> None:
    """
    Check that *values* is a bijection of its domain onto itself.

    Raises:
        ValidationError: On duplicates, on values outside
            [config.index, config.max_index], or on values that leave the
            domain config.index .. config.index + len(values) - 1.
    """
    for value in values:
        if not isinstance(value, int) or isinstance(value, bool):
            raise report(ValidationError, "The value %s is not an integer", repr(value))
    if len(set(values)) != len(values):
        raise report(
            ValidationError,
            "The values %s contain duplicates, thus do not form a 1-1 function",
            _format_values(values),
        )
    domain = config.domain(len(values))
    for value in values:
        if value < config.index or value > config.max_index:
            raise report(
                ValidationError,
                "The value %s is outside the allowed range %s..%s",
                value,
                config.index,
                config.max_index,
            )
        if value not in domain:
            raise report(
                ValidationError,
                "The value %s does not belong to the domain %s..%s",
                value,
                domain.start,
                domain.stop - 1,
            )


def _format_values(values: Sequence[int]) -> str:
    return "[" + ", ".join(str(v) for v in values) + "]"


class Permutation:
    """
    A bijection of the domain config.index .. config.index + n - 1.

    Stored as the tuple of images in domain order. Instances are immutable;
    the cycle decomposition is computed on first access and cached.
    """

    def __init__(
        self, values: Sequence[int], config: PermutationConfig = DEFAULT_CONFIG
    ):
        values = tuple(values)
        validate_permutation_values(values, config)
        self._values = values
        self._config = config
        self._cycles: Optional[Tuple[Tuple[int, ...], ...]] = None

    @classmethod
    def from_array(
        cls, values: Sequence[int], config: PermutationConfig = DEFAULT_CONFIG
    ) -> "Permutation":
        return cls(values, config)

    @classmethod
    def from_function(
        cls,
        func: Callable[[int], int],
        n: int,
        config: PermutationConfig = DEFAULT_CONFIG,
    ) -> "Permutation":
        """Build the permutation whose array form is func(0), ..., func(n - 1)."""
        return cls([func(i) for i in range(n)], config)

    @classmethod
    def identity(cls, n: int, config: PermutationConfig = DEFAULT_CONFIG):
        return cls.from_function(lambda i: i + config.index, n, config)

    id = identity

    @classmethod
    def from_string(
        cls, s: str, config: PermutationConfig = DEFAULT_CONFIG
    ) -> "Permutation":
        """
        Parse either string form.

        Strings containing '(' are read as cycle notation with the domain
        inferred, anything else as the flat form produced by to_string.
        """
        if codec.is_cycle_string(s):
            return cls.from_cycle_string(s, config=config)
        return cls(codec.parse_flat(s, config), config)

    @classmethod
    def from_cycle_string(
        cls, s: str, n: Optional[int] = None, config: PermutationConfig = DEFAULT_CONFIG
    ) -> "Permutation":
        """
        Parse cycle notation such as "(01)(23)".

        Args:
            s: The cycle string. When cycles overlap, later cycles are applied
                first, so "(01)(12)" maps 2 to 0 via 1.
            n: Highest index of the domain. If omitted, the highest index
                mentioned in a cycle is used and trailing fixed points are lost.
            config: Indexing of the result.
        """
        return cls(codec.parse_cycles(s, n, config), config)

    @staticmethod
    def random(
        n: int, rng: Optional[Random] = None, config: PermutationConfig = DEFAULT_CONFIG
    ) -> "Permutation":
        perm = list(config.domain(n))
        if rng is None:
            shuffle(perm)
        else:
            rng.shuffle(perm)
        return Permutation(perm, config)

    @property
    def length(self) -> int:
        return len(self._values)

    @property
    def config(self) -> PermutationConfig:
        return self._config

    @property
    def values(self) -> Tuple[int, ...]:
        return self._values

    def domain(self) -> range:
        return self._config.domain(len(self._values))

    def at(self, i: int) -> int:
        if i not in self.domain():
            raise IndexError(
                f"Index {i} is outside the domain {self._config.index}.."
                f"{self._config.index + len(self._values) - 1}"
            )
        return self._values[i - self._config.index]

    def __call__(self, i: int) -> int:
        return self.at(i)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def equals(self, other: "Permutation") -> bool:
        return (
            len(self) == len(other)
            and self._config.index == other._config.index
            and all(self.at(i) == other.at(i) for i in self.domain())
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Permutation):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self._config.index, self._values))

    def compose(self, theta: "Permutation") -> "Permutation":
        """Composition of permutations: self.compose(theta)(i) = self(theta(i))"""
        if len(self) != len(theta) or self._config.index != theta._config.index:
            raise report(
                ArityError,
                "Cannot compose a permutation of %s elements from index %s with one of %s elements from index %s",
                len(self),
                self._config.index,
                len(theta),
                theta._config.index,
            )
        return Permutation([self.at(theta.at(i)) for i in self.domain()], self._config)

    def __mul__(self, other: "Permutation") -> "Permutation":
        return self.compose(other)

    def clone(self) -> "Permutation":
        return Permutation(list(self._values), self._config)

    def inverse(self) -> "Permutation":
        inv = [0] * len(self)
        for i in self.domain():
            inv[self.at(i) - self._config.index] = i
        return Permutation(inv, self._config)

    def is_id(self) -> bool:
        return all(self.at(i) == i for i in self.domain())

    def fixed_points(self) -> List[int]:
        return [i for i in self.domain() if self.at(i) == i]

    def _get_cycle_decomposition(self) -> Tuple[Tuple[int, ...], ...]:
        used = set()
        cycles = []
        for i in self.domain():
            if self.at(i) == i or i in used:
                continue
            cycle = [i]
            used.add(i)
            j = self.at(i)
            while j != i:
                cycle.append(j)
                used.add(j)
                j = self.at(j)
            cycles.append(tuple(cycle))
        return tuple(cycles)

    @property
    def cycles(self) -> List[List[int]]:
        """
        Disjoint cycles of length at least two, each starting from its
        smallest index, ordered by that index.
        """
        if self._cycles is None:
            self._cycles = self._get_cycle_decomposition()
        return [list(cycle) for cycle in self._cycles]

    def sign(self) -> int:
        n = len(self)
        if n == 0:
            return 1
        num_orbits = len(self.fixed_points()) + len(self.cycles)
        if (n - num_orbits) % 2 == 0:
            return 1
        else:
            return -1

    def cost(self) -> int:
        return sum(len(cycle) - 1 for cycle in self.cycles)

    def order(self) -> int:
        return int(reduce(sympy.ilcm, (len(cycle) for cycle in self.cycles), 1))

    def to_sympy(self) -> SympyPermutation:
        base = self._config.index
        return SympyPermutation([v - base for v in self._values], size=len(self))

    def to_string(self) -> str:
        return codec.format_flat(self._values)

    def to_cycle_string(self) -> str:
        return codec.format_cycles(self.cycles)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Permutation({self.to_string()!r})"

    def cformat(self, arg_of=None) -> str:
        return make_latex_cycles(self.cycles)

    def latex_two_line(self) -> str:
        return make_latex_two_line(list(self.domain()), list(self._values))
