"""
enumshift - Expand & Contract migrations from string/int parameters to enums.
"""

__version__ = "0.1.0"

from enumshift.core import *  # noqa
from enumshift.core import __all__ as _core_all

__all__ = ["__version__", *_core_all]
