"""compval — value-comparison validation rules."""

from __future__ import annotations

from compval.errors import CompvalError, InvalidArgumentError, InvalidConfigurationError
from compval.rules.identical import Identical
from compval.rules.less_than import LessThan

__version__ = "0.3.0"

__all__ = [
    "CompvalError",
    "Identical",
    "InvalidArgumentError",
    "InvalidConfigurationError",
    "LessThan",
    "__version__",
]
