import dataclasses

import pytest

from perm_codec import (
    DEFAULT_CONFIG,
    MAX_ALLOWED_PERMUTATION_INDEX,
    PERMUTATION_INDEX,
    PermutationConfig,
)


def test_defaults():
    assert PERMUTATION_INDEX == 0
    assert MAX_ALLOWED_PERMUTATION_INDEX == 35
    assert DEFAULT_CONFIG == PermutationConfig(0, 35)


def test_domain():
    assert PermutationConfig(index=1).domain(3) == range(1, 4)
    assert DEFAULT_CONFIG.domain(0) == range(0)


@pytest.mark.parametrize(
    "kwargs", [dict(index=-1), dict(max_index=36), dict(index=5, max_index=4)]
)
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        PermutationConfig(**kwargs)


def test_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.index = 1
