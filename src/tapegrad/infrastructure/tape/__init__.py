"""
Gradient tape package.

This package contains the reverse-mode machinery:

- `GradientTape`: the record attached to every operation output,
- `OperationContext`: carrier of caller-supplied backward functions,
- `BackwardOperation`: registry of backward rules for the catalogue,
- `backward_pass`: the worklist driver behind `Tensor.diff`,
- `format_graph` / `print_graph`: diagnostic graph traces.

The ``backward`` subpackage is imported for its registration side effects.
"""

from ._operation_context import OperationContext
from ._backward_registry import BackwardOperation, RegisteredBackward, CustomBackward
from ._gradient_tape import GradientTape
from ._backward_pass import backward_pass, in_backward_pass
from ._graph_printer import format_graph, print_graph
from . import backward

__all__ = [
    OperationContext.__name__,
    BackwardOperation.__name__,
    RegisteredBackward.__name__,
    CustomBackward.__name__,
    GradientTape.__name__,
    backward_pass.__name__,
    in_backward_pass.__name__,
    format_graph.__name__,
    print_graph.__name__,
]
