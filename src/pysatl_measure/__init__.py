"""
PySATL Measure
==============

Probability measures as integration functionals: constructors, the
functor/applicative/monad combinators, algebraic liftings, tanh-sinh
quadrature, special functions and standard distribution families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from importlib.metadata import version

from .config import *
from .config import __all__ as _config_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .measures import *
from .measures import __all__ as _measures_all
from .quadrature import *
from .quadrature import __all__ as _quadrature_all
from .special import *
from .special import __all__ as _special_all
from .support import *
from .support import __all__ as _support_all
from .types import *
from .types import __all__ as _types_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = version("pysatl-measure")
__all__ = [
    "__version__",
    *_config_all,
    *_errors_all,
    *_family_all,
    *_measures_all,
    *_quadrature_all,
    *_special_all,
    *_support_all,
    *_types_all,
]

del _config_all
del _errors_all
del _family_all
del _measures_all
del _quadrature_all
del _special_all
del _support_all
del _types_all
