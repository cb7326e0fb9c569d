"""
Backward rules for the `Operation` catalogue.

Each module registers its rules with `BackwardOperation` on import; this
package is imported by the tape package for those side effects only.
"""

from ._arithmetic import *
from ._exponents_log import *
from ._mathematical import *
from ._trigonometric import *
from ._hyperbolic import *
from ._rounding import *
from ._linear_algebra import *
from ._reduction import *
from ._shape import *
from ._nn import *

__all__: list[str] = []
