from dataclasses import dataclass

# Base offset of the permutation domain. Also controls the string form.
PERMUTATION_INDEX = 0

# Highest value representable by a single character, 'Z'.
MAX_ALLOWED_PERMUTATION_INDEX = 35


@dataclass(frozen=True)
class PermutationConfig:
    """Indexing and encodability limits shared by a family of permutations.

    Attributes:
        index: Logical index of the first element of the domain.
        max_index: Largest value a permutation entry may take.
    """

    index: int = PERMUTATION_INDEX
    max_index: int = MAX_ALLOWED_PERMUTATION_INDEX

    def __post_init__(self):
        if self.index < 0:
            raise ValueError(f"Permutation index must be non-negative, got {self.index}")
        if self.max_index > MAX_ALLOWED_PERMUTATION_INDEX:
            raise ValueError(
                f"max_index {self.max_index} cannot be encoded, the limit is "
                f"{MAX_ALLOWED_PERMUTATION_INDEX}"
            )
        if self.index > self.max_index:
            raise ValueError(
                f"Permutation index {self.index} exceeds max_index {self.max_index}"
            )

    def domain(self, n: int) -> range:
        return range(self.index, self.index + n)


DEFAULT_CONFIG = PermutationConfig()
