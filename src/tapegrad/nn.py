"""Public neural-network namespace (``tapegrad.nn``)."""

from .infrastructure.nn import *
from .infrastructure.nn import __all__
