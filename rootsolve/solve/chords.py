from __future__ import annotations

from collections.abc import Callable

from rootsolve.solve.config import SolverConfig
from rootsolve.solve.method import Method
from rootsolve.solve.solver import SolveResult, Solver


# ----------------------------------------------------------------------------

def chords(func: Callable[[float], float], x_m1: float, x_0: float, *,
           tol: float = None, maxits: int = None, aitken: bool = None,
           verbose: bool = None,
           full_output: bool = False) -> float | SolveResult:
    """
    Find a zero of `func` by the chords (secant) method, starting from
    points ``x(-1) = x_m1`` and ``x(0) = x_0``.  Unlike bisection the
    points need not bracket the root.

    Examples
    --------
    >>> round(chords(lambda x: x**2 - 2, 1.0, 2.0, tol=1e-12), 9)
    1.414213562

    Raises
    ------
    DivisionByZeroError
        If ``func`` takes the same value at both points of the current
        chord, e.g. ``x_m1 == x_0``.
    MaxIterationsError
        If `maxits` is reached before a solution is found.

    See Also
    --------
    bisect_root : Description of the remaining parameters.
    """
    config = SolverConfig(method=Method.CHORDS, function=func,
                          start=(x_m1, x_0), tolerance=tol,
                          max_iterations=maxits, aitken=aitken,
                          verbose=verbose)
    result = Solver(config).solve()
    result.raise_for_outcome()
    return result if full_output else result.root
