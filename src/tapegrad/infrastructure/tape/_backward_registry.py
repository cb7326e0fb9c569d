"""
Backward operation registry and rule dispatch.

This module defines `BackwardOperation`, the class-level registry that maps
every member of the `Operation` catalogue to the function implementing its
chain rule, and the two `BackwardRule` variants tape entries dispatch to:

- `RegisteredBackward`: a rule looked up in the registry by operation.
- `CustomBackward`: a rule supplied through an `OperationContext`.

Design
------
- Rule functions are registered with a decorator:

      @BackwardOperation.register(Operation.ADD)
      def add_backward(output, grad, a, b): ...

- Rule modules live in the ``backward`` package and are imported for their
  registration side effects when the tape package is imported.
- `BackwardOperation.missing()` lists catalogue members without a rule, so
  coverage of the closed catalogue can be asserted.
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, Optional, TypeVar

from ...domain._backward_rule import BackwardRule
from ...domain._errors import UngradableOperationError
from ...domain._operation import Operation
from ._operation_context import OperationContext

T = TypeVar("T", bound=Callable[..., None])


class RegisteredBackward(BackwardRule):
    """Backward rule backed by a function from the registry."""

    __slots__ = ("_operation", "_fn")

    def __init__(self, operation: Operation, fn: Callable[..., None]) -> None:
        self._operation = operation
        self._fn = fn

    @property
    def name(self) -> str:
        return self._operation.value

    def apply(self, output: Any, grad: Any, *args: Any) -> None:
        self._fn(output, grad, *args)


class CustomBackward(BackwardRule):
    """Backward rule backed by the function installed on an `OperationContext`."""

    __slots__ = ("_context",)

    def __init__(self, context: OperationContext) -> None:
        self._context = context

    @property
    def name(self) -> str:
        return self._context.name

    def apply(self, output: Any, grad: Any, *args: Any) -> None:
        self._context.get_backward_function()(output, grad, *args)


class BackwardOperation:
    """
    Registry of backward functions for the `Operation` catalogue.

    Notes
    -----
    - Rules are stored by `Operation` member in a class-level registry.
    - A rule is called as ``rule(output, grad, *tape_args)`` and pushes local
      gradients into operand arguments with `diff`.
    """

    RULES: ClassVar[Dict[Operation, Callable[..., None]]] = {}

    @classmethod
    def register(cls, operation: Operation, *, overwrite: bool = False) -> Callable[[T], T]:
        """
        Decorator to register the backward function of `operation`.

        Parameters
        ----------
        operation:
            Catalogue member (or its string value) the function differentiates.
        overwrite:
            If False (default), raises if `operation` is already registered.
        """
        op = Operation.lookup(operation)
        if op is None:
            raise ValueError(f"Unknown operation: {operation!r}")

        def decorator(func: T) -> T:
            if not overwrite and op in cls.RULES:
                raise ValueError(f"Backward rule already registered: {op.value!r}")
            cls.RULES[op] = func
            return func

        return decorator

    @classmethod
    def available(cls) -> tuple[str, ...]:
        """Return the names of operations with a registered rule (sorted)."""
        return tuple(sorted(op.value for op in cls.RULES))

    @classmethod
    def missing(cls) -> tuple[str, ...]:
        """Return catalogue members that have no registered rule."""
        return tuple(op.value for op in Operation if op not in cls.RULES)

    @classmethod
    def get(cls, operation: Operation | str) -> Optional[Callable[..., None]]:
        """Get the registered function for `operation`, or None."""
        op = Operation.lookup(operation)
        if op is None:
            return None
        return cls.RULES.get(op)

    @classmethod
    def resolve(
        cls, operation: Operation | str, context: Optional[OperationContext] = None
    ) -> BackwardRule:
        """
        Select the rule a tape entry dispatches to.

        A context with a backward function takes precedence over the
        registry.

        Raises
        ------
        UngradableOperationError
            If neither a context function nor a registered rule exists.
        """
        if context is not None and context.get_backward_function() is not None:
            return CustomBackward(context)
        fn = cls.get(operation)
        if fn is None:
            raise UngradableOperationError(str(operation))
        return RegisteredBackward(Operation.lookup(operation), fn)
