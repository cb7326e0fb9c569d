"""
Backward rule contract.

A backward rule implements the chain rule for a single tape entry. It is
invoked once per visit of the entry's output during a backward pass with
the output operand, the upstream gradient (already reduced to the output's
shape) and the tape arguments in recording order.

Two kinds of rules exist:

- rules looked up by operation name in the backward registry, and
- rules supplied by the caller through an operation context when a custom
  operation is recorded.

Both kinds satisfy this contract, so tape entries dispatch to them the same
way.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ._operand import IOperand


class BackwardRule(ABC):
    """
    Abstract base class for backward rules.

    Implementations must push a local gradient into every operand argument
    that requires gradients by calling its `diff` method. Arguments that are
    not operands are forward parameters and receive nothing.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Operation name the rule differentiates."""
        ...

    @abstractmethod
    def apply(self, output: IOperand, grad: Any, *args: Any) -> None:
        """
        Propagate `grad` from `output` into the tape arguments.

        Parameters
        ----------
        output : IOperand
            The operand whose tape entry is being differentiated.
        grad : Any
            Upstream gradient with the same shape as `output.value`.
        *args : Any
            Tape arguments, in the order they were recorded.
        """
        ...

    def __call__(self, output: IOperand, grad: Any, *args: Any) -> None:
        self.apply(output, grad, *args)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
