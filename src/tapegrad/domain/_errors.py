"""
Exceptions raised by the tapegrad autograd engine.

This module defines the error types used across the domain and
infrastructure layers. Each error derives from the built-in exception that
best matches its meaning (``TypeError``, ``ValueError`` or
``RuntimeError``), so callers may catch either the specific tapegrad error
or the generic built-in.

All errors are raised synchronously at the call that detects the problem.
Nothing in the engine retries or suppresses them: an operation either fully
succeeds (value computed, tape attached) or raises before the output tensor
is constructed.
"""


class InvalidInputError(TypeError):
    """
    Raised when an operand cannot be coerced into a Tensor.

    Coercion accepts Python/NumPy scalars, nested lists/tuples, engine arrays
    and Tensors. Anything else is rejected with this error.

    Attributes
    ----------
    value_type : type
        Type of the rejected operand.
    """

    def __init__(self, value: object, op: str = "") -> None:
        """
        Initialize the InvalidInputError.

        Parameters
        ----------
        value : object
            The operand that could not be coerced.
        op : str, optional
            Name of the operation that received the operand, if known.
        """
        where = f" for operation '{op}'" if op else ""
        super().__init__(
            f"Invalid input{where}: unsupported operand type {type(value).__name__!r}."
        )
        self.value_type = type(value)


class ShapeMismatchError(ValueError):
    """
    Raised when operand shapes are incompatible with an operation.

    Linear-algebra operations validate shapes before any output tensor or
    tape entry is created, so the graph is left untouched on failure.
    """

    def __init__(self, op: str, message: str) -> None:
        super().__init__(f"{op}: {message}")
        self.op = op


class NotScalarError(RuntimeError):
    """
    Raised when `backward()` is called on a tensor that is not scalar-shaped.

    Only 0-d tensors, or tensors holding exactly one element, can seed a
    backward pass without an explicit gradient shape contract.
    """

    def __init__(self, shape: tuple[int, ...]) -> None:
        super().__init__(
            f"grad can only be created for scalar outputs, got shape {tuple(shape)}."
        )
        self.shape = tuple(shape)


class NoGradientError(RuntimeError):
    """
    Raised when a gradient is read before any backward pass reached the tensor.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"No gradient found for `{name}`.")
        self.name = name


class NoComputableGradientError(RuntimeError):
    """
    Raised when printing the graph of a tensor that has no tape entry.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"The tensor `{name}` has no computable gradients.")
        self.name = name


class UngradableOperationError(RuntimeError):
    """
    Raised when a tape entry references an operation without a backward rule.

    Every member of the `Operation` catalogue has a registered rule, so this
    is only reachable through a tape entry created by hand with an unknown
    operation name and no custom context.
    """

    def __init__(self, op: str) -> None:
        super().__init__(f"Impossible to compute gradient of `{op}`.")
        self.op = op


class DeviceNotSupportedError(RuntimeError):
    """
    Raised when an array is requested on a device backend that is unavailable.

    For accelerator placement this typically means the CuPy package is not
    installed or no CUDA device is visible.

    Attributes
    ----------
    op : str
        The name of the operation that was attempted.
    device : str
        String representation of the requested device.
    """

    def __init__(self, op: str, device: str) -> None:
        """
        Initialize the DeviceNotSupportedError.

        Parameters
        ----------
        op : str
            The operation name that is not supported on the given device.
        device : str
            The device identifier (e.g., "cuda:0").
        """
        super().__init__(f"{op} is not available for device '{device}'.")
        self.op = op
        self.device = device


class DeviceMismatchError(RuntimeError):
    """
    Raised when an operation combines tensors that live on different devices.

    Tensors must be moved explicitly (see `Tensor.to`) before they can be
    combined; no implicit host/accelerator copies are performed.
    """

    def __init__(self, device_a: str, device_b: str) -> None:
        """
        Initialize the DeviceMismatchError.

        Parameters
        ----------
        device_a : str
            Device identifier of the first operand.
        device_b : str
            Device identifier of the second operand.
        """
        super().__init__(f"Device mismatch: '{device_a}' vs '{device_b}'.")
        self.device_a = device_a
        self.device_b = device_b
