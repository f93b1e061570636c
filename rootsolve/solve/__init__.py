"""
===================================
Solvers (:mod:`rootsolve.solve`)
===================================

.. currentmodule:: rootsolve.solve

Iterative methods for finding a real root of a scalar function of one
variable: bisection, Newton-Raphson, chords (secant) and fixed point
iteration, each optionally accelerated by Aitken Δ² extrapolation.

Functions
---------

.. autosummary::
    :toctree:

    bisect_root
    chords
    fixed_point
    newton
    get_solver_options
    set_solver_options

Solver Engine
-------------

.. autosummary::
    :toctree:

    Method
    SolverConfig
    Solver
    SolveResult
    Outcome
    Iterate
    ResultsTrace

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError
    ConfigurationError
    DivergenceError
    DivisionByZeroError
    MaxIterationsError

"""

from .exception import (SolverError, ConfigurationError, DivergenceError,
                        DivisionByZeroError, MaxIterationsError)
from ._opts import SolverOptions, get_solver_options, set_solver_options
from .method import Method
from .trace import Iterate, ResultsTrace
from .config import SolverConfig
from .solver import Outcome, SolveResult, Solver, check_config
from .bisect_root import bisect_root
from .chords import chords
from .fixed_point import fixed_point
from .newton import newton
