from .log import log


class PermutationError(ValueError):
    """Base class for everything this package raises on bad input."""


class ValidationError(PermutationError):
    """The values do not form a permutation within the allowed range."""


class EncodingError(PermutationError):
    """A value or character has no single-character encoding."""


class ArityError(PermutationError):
    """Permutations on different domains were combined."""


def report(error_cls, message: str, *args):
    """Log *message* and build the matching exception for the caller to raise."""
    log(message, *args)
    return error_cls(message % args)
