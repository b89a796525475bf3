from .config import (
    PERMUTATION_INDEX,
    MAX_ALLOWED_PERMUTATION_INDEX,
    PermutationConfig,
    DEFAULT_CONFIG,
)
from .errors import PermutationError, ValidationError, EncodingError, ArityError
from .codec import (
    get_char,
    parse_char,
    format_flat,
    parse_flat,
    split_cycles,
    parse_cycles,
    format_cycles,
)
from .permutation import Permutation, validate_permutation_values

from .fmt import cformat, pcformat, make_latex_cycles, make_latex_two_line

from .log import log, nest_logger, nest_appending_logger, ignore_log, capture_logs

__all__ = [
    "PERMUTATION_INDEX",
    "MAX_ALLOWED_PERMUTATION_INDEX",
    "PermutationConfig",
    "DEFAULT_CONFIG",
    "PermutationError",
    "ValidationError",
    "EncodingError",
    "ArityError",
    "get_char",
    "parse_char",
    "format_flat",
    "parse_flat",
    "split_cycles",
    "parse_cycles",
    "format_cycles",
    "Permutation",
    "validate_permutation_values",
    "cformat",
    "pcformat",
    "make_latex_cycles",
    "make_latex_two_line",
    "log",
    "nest_logger",
    "nest_appending_logger",
    "ignore_log",
    "capture_logs",
]
