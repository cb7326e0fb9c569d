from ._tensor import Tensor
from ._validation import validate_operation_inputs

__all__ = [
    Tensor.__name__,
    validate_operation_inputs.__name__,
]
