"""
Operand coercion for Tensor operations.

Every operation method funnels its non-receiver operands through
`validate_operation_inputs` before computing anything, so invalid input is
rejected before an output tensor or tape entry exists.
"""

from __future__ import annotations

from typing import Any, Optional, Union

import numpy as np

from ...domain._errors import InvalidInputError
from ...domain.device._device import Device
from ..engine import is_on_accelerator
from ._tensor import Tensor


def _holds_tensor(seq: Union[list, tuple]) -> bool:
    return any(
        isinstance(item, Tensor) or (isinstance(item, (list, tuple)) and _holds_tensor(item))
        for item in seq
    )


def validate_operation_inputs(
    name: str = "", *args: Any, device: Optional[Union[Device, str]] = None
) -> list[Tensor]:
    """
    Normalize heterogeneous operands into Tensors.

    Parameters
    ----------
    name : str, optional
        Operation name; engine arrays are wrapped into leaves carrying it.
    *args : Any
        Operands to coerce.
    device : Device or str, optional
        Placement of newly created leaves. Tensors are never moved.

    Returns
    -------
    list[Tensor]
        One Tensor per operand, in order:

        - Python/NumPy scalars and nested lists/tuples become leaves named
          after their value,
        - NumPy/CuPy arrays become leaves named `name`,
        - Tensors pass through unchanged (same object).

    Raises
    ------
    InvalidInputError
        If an operand has an unsupported type, or is a nested sequence
        that does not convert to a numeric array (ragged, or holding Tensors).
    """
    outputs: list[Tensor] = []
    for arg in args:
        if isinstance(arg, Tensor):
            outputs.append(arg)
        elif isinstance(arg, (bool, int, float, np.number)):
            outputs.append(Tensor(arg, name=str(arg), device=device))
        elif isinstance(arg, (list, tuple)):
            if _holds_tensor(arg):
                raise InvalidInputError(arg, op=name)
            try:
                outputs.append(Tensor(arg, name=str(arg), device=device))
            except (TypeError, ValueError) as exc:
                raise InvalidInputError(arg, op=name) from exc
        elif isinstance(arg, np.ndarray) or is_on_accelerator(arg):
            outputs.append(Tensor(arg, name=name, device=device))
        else:
            raise InvalidInputError(arg, op=name)
    return outputs
