from typing import Any, List, Sequence
import sympy


def pcformat(fstr, *vals):
    """
    Format a percent sign string with the given values.
    Example:
    >>> pcformat(r"%s \\mapsto %s", 1, 2)
    "1 \\mapsto 2"
    """
    formatted_vals = tuple(cformat(val) for val in vals)
    return fstr % formatted_vals


def cformat(val, arg_of=None):
    if hasattr(val, "cformat") and callable(val.cformat):
        return val.cformat(arg_of)
    if isinstance(val, str):
        return val
    if hasattr(val, "as_latex") and callable(val.as_latex):
        return val.as_latex()
    try:
        return sympy.latex(val)
    except Exception:  # sympy raises a variety of errors for unknown objects
        pass
    return str(val)


def make_latex_cycles(cycles: Sequence[Sequence[Any]]) -> str:
    if not cycles:
        return r"\text{id}"
    return "".join(
        "(" + " ".join(cformat(item) for item in cycle) + ")" for cycle in cycles
    )


def make_latex_two_line(domain: List[Any], images: List[Any]) -> str:
    if len(domain) != len(images):
        raise ValueError("Domain and images must have the same length")
    start = r"\begin{pmatrix}"
    end = r"\end{pmatrix}"
    rows = [r" & ".join([cformat(item) for item in row]) for row in (domain, images)]
    return start + (r"\\[0.1em]" + "\n").join(rows) + end
