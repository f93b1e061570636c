"""
.. This module acts as the top-level API documentation.

.. module: rootsolve

Iterative root finding for scalar functions of one variable.

- :mod:`rootsolve.expression`: Parsing formula strings into functions.
- :mod:`rootsolve.solve`: Solver engine and functional methods.
- :mod:`rootsolve.io`: Configuration readers and result writers.
- :mod:`rootsolve.util`: Display helpers.
"""

__version__ = "0.1.0"

import sys

# ======================================================================

assert sys.version_info >= (3, 10)

from .expression import (ParseError, UnsupportedExpression, UnsupportedToken,
                         parse_function)
from .solve import (ConfigurationError, DivisionByZeroError,
                    MaxIterationsError, Method, Outcome, Solver, SolverConfig,
                    bisect_root, chords, fixed_point, newton)
