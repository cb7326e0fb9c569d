"""
Human-readable trace of a recorded computation graph.

The trace lists one row per tape entry in depth-first pre-order starting at
the root: the tensor's name, the operation that produced it and the names
(or literal values) of the operation's arguments. Only arguments that carry
a tape entry are descended into; leaves terminate the walk.
"""

from __future__ import annotations

from typing import Any, Optional, TextIO

import numpy as np

from ...domain._errors import NoComputableGradientError
from ...domain._operand import IOperand

_NAME_WIDTH = 20
_OPERATION_WIDTH = 20
_ARGS_WIDTH = 40

UNNAMED = "_nd_"


def _display_name(operand: IOperand) -> str:
    return operand.name or UNNAMED


def _format_argument(arg: Any) -> Optional[str]:
    if isinstance(arg, IOperand):
        return _display_name(arg)
    if isinstance(arg, (bool, int, float, str, np.number)):
        return str(arg)
    if isinstance(arg, tuple) and all(isinstance(d, int) for d in arg):
        return str(arg)
    return None


def _row(name: str, operation: str, arguments: str) -> str:
    return (
        f"{name:<{_NAME_WIDTH}} {operation:<{_OPERATION_WIDTH}} "
        f"{arguments:<{_ARGS_WIDTH}}"
    ).rstrip()


def format_graph(tensor: IOperand) -> str:
    """
    Render the graph rooted at `tensor`.

    Parameters
    ----------
    tensor : Tensor
        Root of the trace. Must carry a tape entry.

    Returns
    -------
    str
        Header, separator and one row per tape entry, newline-terminated.

    Raises
    ------
    NoComputableGradientError
        If `tensor` has no tape entry.
    """
    if tensor.tape is None:
        raise NoComputableGradientError(_display_name(tensor))

    lines = [
        _row("Tensor", "Operation", "Arguments"),
        _row("=" * _NAME_WIDTH, "=" * _OPERATION_WIDTH, "=" * _ARGS_WIDTH),
    ]

    stack = [tensor]
    while stack:
        node = stack.pop()
        tape = node.tape
        names = [s for s in map(_format_argument, tape.args) if s is not None]
        lines.append(_row(_display_name(node), tape.name, "[" + ", ".join(names) + "]"))

        children = [a for a in tape.args if isinstance(a, IOperand) and a.tape is not None]
        stack.extend(reversed(children))

    return "\n".join(lines) + "\n"


def print_graph(tensor: IOperand, file: Optional[TextIO] = None) -> None:
    """Print `format_graph(tensor)` to `file` (stdout by default)."""
    print(format_graph(tensor), end="", file=file)
