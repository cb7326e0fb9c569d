"""
Concrete Tensor implementation (NumPy / CuPy backed) with tape-based autograd.

This module provides the `Tensor` class, the user-facing differentiable
value of tapegrad. A Tensor wraps an engine array together with:

- a diagnostic name,
- a `requires_grad` flag,
- a gradient accumulator, and
- at most one `GradientTape` describing the operation that produced it.

Every operation method (defined in the mixins under ``mixins/``) coerces its
operands to Tensors, computes the forward value with the array module of the
receiver's device, and returns a new Tensor with a tape entry attached.
Calling `backward()` on a scalar output walks those tape entries and
accumulates gradients into every tensor that requires them.

Design notes
------------
- Host tensors hold NumPy arrays; accelerator tensors hold CuPy arrays.
  Operands must live on the same device; nothing is copied implicitly.
- Broadcasting follows NumPy. Gradients are reduced back to each operand's
  shape when they are accumulated, so broadcast operands receive gradients
  of their own shape.
- A tape entry is attached to every operation output, whether or not it
  requires gradients, so graphs can always be printed.
"""

from __future__ import annotations

import warnings
from typing import Any, Callable, Optional, Sequence, Union

import numpy as np

from ...domain._errors import (
    DeviceMismatchError,
    InvalidInputError,
    NoGradientError,
    NotScalarError,
)
from ...domain._operation import Operation
from ...domain.device._device import Device
from .. import engine
from .._config import get_default_device, get_default_dtype
from ..tape import GradientTape, OperationContext, backward_pass, print_graph
from .mixins import (
    TensorMixinArithmetic,
    TensorMixinExponentsLog,
    TensorMixinMathematical,
    TensorMixinTrigonometric,
    TensorMixinHyperbolic,
    TensorMixinRounding,
    TensorMixinLinearAlgebra,
    TensorMixinReduction,
    TensorMixinShapeAndIndexing,
)

Number = Union[int, float]


class Tensor(
    TensorMixinArithmetic,
    TensorMixinExponentsLog,
    TensorMixinMathematical,
    TensorMixinTrigonometric,
    TensorMixinHyperbolic,
    TensorMixinRounding,
    TensorMixinLinearAlgebra,
    TensorMixinReduction,
    TensorMixinShapeAndIndexing,
):
    """
    Differentiable n-dimensional value.

    Parameters
    ----------
    value : Any
        Python scalar, nested list/tuple, NumPy array, CuPy array or another
        Tensor (its value is taken). Scalars are stored as 0-d arrays.
    name : str, optional
        Diagnostic label. Defaults to the stringified value when `value` is a
        Python scalar.
    requires_grad : bool, optional
        Whether gradients are accumulated into this tensor. Defaults to False.
    device : Device or str, optional
        Placement. Defaults to the device of a Tensor `value`, otherwise to
        ``TAPEGRAD_DEFAULT_DEVICE``.
    dtype : Any, optional
        Element dtype. Floating values keep their dtype when omitted;
        everything else uses ``TAPEGRAD_DEFAULT_DTYPE``.

    Notes
    -----
    NumPy defers to Tensor in mixed expressions (``np.float64(2) * t``)
    because ``__array_ufunc__`` is None.
    """

    __array_ufunc__ = None

    def __init__(
        self,
        value: Any,
        name: str = "",
        requires_grad: bool = False,
        device: Optional[Union[Device, str]] = None,
        dtype: Any = None,
    ) -> None:
        if isinstance(value, Tensor):
            if device is None:
                device = value.device
            value = value.value

        if not name and isinstance(value, (bool, int, float, np.number)):
            name = str(value)

        self._device: Device = Device.coerce(
            device if device is not None else get_default_device()
        )
        self._value = engine.asarray(
            value, self._device, dtype=dtype, default_dtype=get_default_dtype()
        )
        self._name: str = str(name)
        self._requires_grad: bool = bool(requires_grad)
        self._gradient = None
        self._tape: Optional[GradientTape] = None

    def __repr__(self) -> str:
        """
        Return a human-readable string representation of the tensor.

        Returns
        -------
        str
            Name, shape, device, dtype and the autograd flag.
        """
        return (
            f"Tensor(name={self._name!r}, shape={self.shape}, device={self._device}, "
            f"dtype={self._value.dtype}, requires_grad={self._requires_grad})"
        )

    def __str__(self) -> str:
        return str(self._value)

    # ----------------------------
    # Value and placement
    # ----------------------------
    @property
    def value(self):
        """
        Return the engine array held by this tensor.

        Returns
        -------
        numpy.ndarray or cupy.ndarray
            The forward value (0-d for scalars).
        """
        return self._value

    def set_value(self, value: Any) -> "Tensor":
        """
        Replace the held value.

        The new value is placed on this tensor's device. Tape and gradient are
        left untouched, so gradients computed afterwards use the new value.
        """
        if isinstance(value, Tensor):
            value = value.value
        self._value = engine.asarray(value, self._device, dtype=self._value.dtype)
        return self

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(self._value.shape)

    @property
    def ndim(self) -> int:
        return int(self._value.ndim)

    @property
    def size(self) -> int:
        return int(self._value.size)

    @property
    def dtype(self) -> np.dtype:
        return self._value.dtype

    @property
    def device(self) -> Device:
        """
        Return the device on which this tensor resides.

        Returns
        -------
        Device
            The tensor's device placement descriptor.
        """
        return self._device

    @property
    def _xp(self):
        return engine.array_module(self._value)

    def num_elements(self) -> int:
        """Return the total number of elements."""
        return self.size

    def is_scalar(self) -> bool:
        """Return True for 0-d tensors."""
        return self._value.ndim == 0

    def is_on_accelerator(self) -> bool:
        """Return True if the value lives in accelerator memory."""
        return engine.is_on_accelerator(self._value)

    def to(self, device: Union[Device, str]) -> "Tensor":
        """
        Copy this tensor to another device.

        Returns
        -------
        Tensor
            A new leaf tensor on `device` with the same name and
            `requires_grad` flag. The graph is not carried over.
        """
        return Tensor(
            self._value,
            name=self._name,
            requires_grad=self._requires_grad,
            device=Device.coerce(device),
            dtype=self._value.dtype,
        )

    def to_numpy(self) -> np.ndarray:
        """
        Return the value as a host NumPy array.

        Returns
        -------
        np.ndarray
            A copy for accelerator tensors; the held array for host tensors.
        """
        return engine.to_host(self._value)

    def tolist(self) -> Any:
        return self.to_numpy().tolist()

    def item(self) -> float:
        """
        Return the value of a scalar (or single-element) tensor as a Python float.

        Raises
        ------
        ValueError
            If the tensor does not contain exactly 1 element.
        """
        if self.size != 1:
            raise ValueError(
                f"Tensor.item() requires a scalar/1-element tensor, got shape={self.shape}"
            )
        return float(self.to_numpy().reshape(-1)[0])

    # ----------------------------
    # Naming
    # ----------------------------
    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = str(value)

    def set_name(self, name: str, origin: Optional["Tensor"] = None) -> "Tensor":
        """
        Set the diagnostic name, falling back to `origin`'s name when blank.

        Returns
        -------
        Tensor
            This tensor, to allow chaining.
        """
        if not name and origin is not None:
            name = origin.name
        self._name = str(name)
        return self

    # ----------------------------
    # Autograd state
    # ----------------------------
    @property
    def requires_grad(self) -> bool:
        """
        Indicate whether this tensor should accumulate gradients.

        Returns
        -------
        bool
            True if gradients should be tracked/accumulated, False otherwise.
        """
        return self._requires_grad

    @requires_grad.setter
    def requires_grad(self, value: bool) -> None:
        self._requires_grad = bool(value)

    @property
    def gradient(self):
        """
        Return the accumulated gradient array, or None before any backward pass.

        Returns
        -------
        numpy.ndarray or cupy.ndarray or None
            Same shape and device as `value`.
        """
        return self._gradient

    def grad(self) -> "Tensor":
        """
        Return the accumulated gradient wrapped in a new Tensor.

        Raises
        ------
        NoGradientError
            If no backward pass has reached this tensor yet.
        """
        if self._gradient is None:
            raise NoGradientError(self._name)
        return Tensor(self._gradient, name=f"grad_{self._name}" if self._name else "")

    @property
    def tape(self) -> Optional[GradientTape]:
        return self._tape

    def zero_grad(self) -> None:
        """
        Clear the stored gradient.

        Notes
        -----
        Training loops typically call `zero_grad()` before backprop to avoid
        unintentional accumulation across iterations.
        """
        self._gradient = None

    def reset_gradients(self) -> None:
        """Clear the gradient and the tape entry, turning this tensor into a leaf."""
        self._gradient = None
        self._tape = None

    def detach(self) -> "Tensor":
        """
        Return a new tensor sharing this value with no tape and no gradient tracking.
        """
        out = Tensor.__new__(Tensor)
        out._device = self._device
        out._value = self._value
        out._name = self._name
        out._requires_grad = False
        out._gradient = None
        out._tape = None
        return out

    def register_operation(
        self,
        operation: Union[Operation, str],
        args: Sequence[Any],
        context: Optional[OperationContext] = None,
    ) -> "Tensor":
        """
        Attach a tape entry describing how this tensor was produced.

        Only the first call has an effect; later calls leave the existing
        entry in place.

        Parameters
        ----------
        operation : Operation or str
            Catalogue member or custom operation name.
        args : Sequence[Any]
            Forward arguments; Tensor elements take part in the backward pass.
        context : OperationContext, optional
            Context carrying a custom backward function.

        Returns
        -------
        Tensor
            This tensor, to allow chaining.
        """
        if self._tape is None:
            self._tape = GradientTape(operation, args, context)
        return self

    def _accumulate_gradient(self, grad: Any):
        """
        Add `grad` into the gradient slot and return it as propagated.

        The incoming value is moved to this tensor's device and dtype and
        reduced (or broadcast) to this tensor's shape first.
        """
        if grad is None:
            g = engine.ones(self.shape, like=self._value)
        else:
            g = engine.asarray(grad, self._device, dtype=self._value.dtype)
            g = engine.sum_to_shape(g, self.shape)

        if self._gradient is None:
            self._gradient = g.copy()
        else:
            self._gradient = self._gradient + g
        return g

    def diff(self, grad: Any = None) -> None:
        """
        Accumulate `grad` into this tensor and propagate it through its tape.

        Does nothing when `requires_grad` is False, which prunes the backward
        traversal below this tensor.

        Parameters
        ----------
        grad : Any, optional
            Upstream gradient (array, scalar or Tensor). Defaults to ones
            shaped like the value.
        """
        if isinstance(grad, Tensor):
            grad = grad.value
        backward_pass(self, grad)

    def backward(self, seed: Any = None) -> None:
        """
        Compute gradients of this scalar tensor with respect to the graph.

        Always runs a complete pass of its own, also when called from inside a
        backward function of a pass that is already running.

        Parameters
        ----------
        seed : Any, optional
            Initial gradient. Defaults to ones shaped like the value.

        Raises
        ------
        NotScalarError
            If the tensor holds more than one element.
        """
        if self.size != 1:
            raise NotScalarError(self.shape)
        if isinstance(seed, Tensor):
            seed = seed.value
        backward_pass(self, seed, new_pass=True)

    def graph(self, file=None) -> None:
        """
        Print the operations that produced this tensor.

        Raises
        ------
        NoComputableGradientError
            If this tensor has no tape entry.
        """
        print_graph(self, file=file)

    # ----------------------------
    # Operation plumbing
    # ----------------------------
    @staticmethod
    def _result_requires_grad(*parents: Any) -> bool:
        """
        Determine whether an operation result should require gradients.

        Returns
        -------
        bool
            True if any Tensor parent requires gradients, False otherwise.
        """
        return any(isinstance(p, Tensor) and p.requires_grad for p in parents)

    def _operands(self, op: Union[Operation, str], *others: Any) -> list["Tensor"]:
        """
        Coerce `others` to Tensors on this tensor's device.

        Returns
        -------
        list[Tensor]
            ``[self, *coerced_others]``.

        Raises
        ------
        InvalidInputError
            If an operand cannot be coerced.
        DeviceMismatchError
            If a Tensor operand lives on another device.
        """
        from ._validation import validate_operation_inputs

        coerced = validate_operation_inputs(str(op), *others, device=self._device)
        for t in coerced:
            if t.device != self._device:
                raise DeviceMismatchError(str(self._device), str(t.device))
        return [self, *coerced]

    @staticmethod
    def _from_operation(
        operation: Union[Operation, str],
        value: Any,
        args: Sequence[Any],
        name: str = "",
        context: Optional[OperationContext] = None,
    ) -> "Tensor":
        """
        Build the output of an operation and attach its tape entry.

        Parameters
        ----------
        operation : Operation or str
            Recorded operation.
        value : Any
            Forward value, on the device of ``args[0]``.
        args : Sequence[Any]
            Tape arguments; ``args[0]`` is the origin Tensor.
        name : str, optional
            Explicit output name, falling back to the origin's name.
        """
        origin = args[0]
        out = Tensor(
            value,
            requires_grad=Tensor._result_requires_grad(*args),
            device=origin.device,
        )
        out.set_name(name, origin)
        out.register_operation(operation, args, context)
        return out

    def operation(self, forward_fn: Callable[..., Any], *args: Any, name: str = "custom_operation") -> "Tensor":
        """
        Record a caller-defined operation.

        `forward_fn` is called as ``forward_fn(ctx, self.value, *raw_args)``
        where Tensor arguments are replaced by their values and `ctx` is a
        fresh `OperationContext`. The forward function installs the backward
        function with ``ctx.set_backward_function(fn)``; it is later called as
        ``fn(output, grad, self, *args)`` and must call `diff` on the operands
        it differentiates.

        Returns
        -------
        Tensor
            The output, named ``out_<name>``.

        Raises
        ------
        InvalidInputError
            If `forward_fn` returns something that is not an array or scalar.
        """
        ctx = OperationContext(name)
        raw_args = [a.value if isinstance(a, Tensor) else a for a in args]
        result = forward_fn(ctx, self._value, *raw_args)

        if isinstance(result, Tensor):
            out = result
        elif isinstance(result, (bool, int, float, np.number, np.ndarray)) or engine.is_on_accelerator(result):
            out = Tensor(
                result,
                requires_grad=Tensor._result_requires_grad(self, *args),
                device=self._device,
            )
        else:
            raise InvalidInputError(result, op=ctx.name)

        out.register_operation(ctx.name, [self, *args], ctx)
        out.set_name(f"out_{ctx.name}")
        return out

    # ----------------------------
    # Indexed writes
    # ----------------------------
    def __setitem__(self, key: Any, value: Any) -> None:
        """
        Write into the held value in place.

        The write is not recorded on any tape; a RuntimeWarning is emitted
        when this tensor requires gradients.
        """
        if self._requires_grad:
            warnings.warn(
                f"In-place write into `{self._name or '_nd_'}` is not tracked by autograd; "
                "gradients computed through it may be wrong.",
                RuntimeWarning,
                stacklevel=2,
            )
        if isinstance(value, Tensor):
            value = value.value
        self._value[self._normalize_index(key)] = value

    def __delitem__(self, key: Any) -> None:
        """Overwrite the selected slot(s) with NaN (untracked)."""
        self.__setitem__(key, float("nan"))
