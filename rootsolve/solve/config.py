from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike

from rootsolve.solve._opts import get_solver_options
from rootsolve.solve.exception import ConfigurationError
from rootsolve.solve.method import Method


# ======================================================================

@dataclass(frozen=True, kw_only=True)
class SolverConfig:
    # noinspection PyUnresolvedReferences
    """
    Complete description of a single root finding problem.

    Parameters
    ----------
    method : Method
        Root finding method to use.  A string name is also accepted
        (see `Method.from_str`).

    function : Callable[[float], float]
        Target function, i.e. the solver looks for `x` where
        ``function(x) == 0``.

    start : float or (float, float)
        Method-specific starting state:

        - `Method.BISECTION`: Interval ``(a, b)`` where ``function(a)``
          and ``function(b)`` have opposite sign.
        - `Method.CHORDS`: The first two points ``(x(-1), x(0))``.
        - `Method.NEWTON`, `Method.FIXED_POINT`: Initial guess `x0`.

        Sequences are stored as a tuple of `float`.  Compatibility with
        `method` is checked when the solve begins.

    tolerance : float, optional
        Stop when ``|x' - x| <= tolerance`` or ``|f(x')| <= tolerance``.
        Default from `get_solver_options`.

    max_iterations : int, optional
        Iteration limit.  Default from `get_solver_options`.

    aitken : bool, optional
        Apply Aitken Δ² acceleration.  Default from
        `get_solver_options`.

    verbose : bool, optional
        Print progress.  Default from `get_solver_options`.

    derivative : Callable[[float], float], optional
        Derivative of `function`.  Required by `Method.NEWTON`.

    g_function : Callable[[float], float], optional
        Iteration function with a fixed point ``g(x) = x`` at the root
        of `function`.  Required by `Method.FIXED_POINT`.

    Raises
    ------
    ConfigurationError
        If `tolerance` or `max_iterations` is not positive, or `start`
        is not numeric.
    """
    method: Method
    function: Callable[[float], float]
    start: float | tuple[float, ...]
    tolerance: float = None
    max_iterations: int = None
    aitken: bool = None
    verbose: bool = None
    derivative: Callable[[float], float] | None = None
    g_function: Callable[[float], float] | None = None

    def __post_init__(self):
        opts = get_solver_options()
        defaults = {'tolerance': opts.tolerance,
                    'max_iterations': opts.max_iterations,
                    'aitken': opts.aitken,
                    'verbose': opts.verbose}
        for name, value in defaults.items():
            if getattr(self, name) is None:
                object.__setattr__(self, name, value)

        if isinstance(self.method, str):
            object.__setattr__(self, 'method', Method.from_str(self.method))

        object.__setattr__(self, 'start', _normalise_start(self.start))

        if not self.tolerance > 0:
            raise ConfigurationError(f"Require tolerance > 0, got "
                                     f"{self.tolerance}.")
        if int(self.max_iterations) != self.max_iterations or \
                self.max_iterations < 1:
            raise ConfigurationError(f"Require integer max_iterations > 0, "
                                     f"got {self.max_iterations}.")


# ----------------------------------------------------------------------

def _normalise_start(start: ArrayLike) -> float | tuple[float, ...]:
    try:
        if np.ndim(start) == 0:
            return float(start)
        return tuple(float(v) for v in np.ravel(start))

    except (TypeError, ValueError):
        raise ConfigurationError(f"Starting value must be numeric, got "
                                 f"{start!r}.")
