"""
Backward pass driver.

`Tensor.diff` hands every (node, gradient) pair to `backward_pass`. The
gradient is accumulated into the node immediately, so a backward rule that
pushes into an operand can read the operand's gradient right away.
Propagation through the node's tape entry is deferred: the first call on a
thread starts a pass and drains an explicit LIFO worklist of edges, and calls
made by backward rules while the pass is running only enqueue their edge.
Graph depth is therefore bounded by memory, not by the interpreter recursion
limit.

Visiting order matches a recursive depth-first traversal: the edges pushed
while visiting one node are propagated in the order the rule pushed them,
each one fully before the next. A node is visited once per incoming edge;
there is no topological sort and no deduplication, so every path that
reaches a node accumulates into it.

`Tensor.backward` always starts a new pass. A backward rule that runs its
own autograd computation on an inner graph gets complete gradients back
before it continues; the enclosing pass resumes afterwards.
"""

from __future__ import annotations

import threading
from typing import Any

_state = threading.local()


def _drain(worklist: list) -> None:
    while worklist:
        current, g = worklist.pop()
        _state.pending = []
        current.tape.diff(current, g)
        worklist.extend(reversed(_state.pending))


def in_backward_pass() -> bool:
    """Return True while a backward pass is running on the current thread."""
    return getattr(_state, "pending", None) is not None


def backward_pass(node: Any, grad: Any = None, new_pass: bool = False) -> None:
    """
    Accumulate `grad` into `node` and propagate it through the graph.

    Parameters
    ----------
    node : Tensor
        Tensor receiving the gradient.
    grad : Any, optional
        Gradient value. None seeds the pass with ones shaped like the node.
    new_pass : bool, optional
        Run a separate pass to completion even if one is already running on
        this thread. The running pass is suspended and resumed afterwards.
    """
    if not node.requires_grad:
        return
    g = node._accumulate_gradient(grad)
    if node.tape is None:
        return

    enclosing = getattr(_state, "pending", None)
    if enclosing is not None and not new_pass:
        enclosing.append((node, g))
        return

    try:
        _drain([(node, g)])
    finally:
        _state.pending = enclosing
