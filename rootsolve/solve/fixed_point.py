from __future__ import annotations

from collections.abc import Callable

from rootsolve.solve.config import SolverConfig
from rootsolve.solve.method import Method
from rootsolve.solve.solver import SolveResult, Solver


# ----------------------------------------------------------------------------

def fixed_point(func: Callable[[float], float],
                g: Callable[[float], float], x0: float, *,
                tol: float = None, maxits: int = None, aitken: bool = None,
                verbose: bool = None,
                full_output: bool = False) -> float | SolveResult:
    r"""
    Find a zero of `func` by fixed point iteration :math:`x' = g(x)`,
    where `g` has a fixed point :math:`g(x) = x` at the zero of `func`.
    Convergence of :math:`|f(x')|` is always tested using `func`, not
    `g`.

    Fixed point iteration usually converges linearly, so it benefits
    most from ``aitken=True``.

    Examples
    --------
    Find the fixed point of :math:`\cos(x)` starting from 0.5:

    >>> from math import cos
    >>> x = fixed_point(lambda x_: x_ - cos(x_), cos, 0.5, aitken=True)
    >>> round(x, 6)
    0.739085

    Parameters
    ----------
    func : Callable[[float], float]
        Target function.
    g : Callable[[float], float]
        Iteration function.
    x0 : float
        Initial guess.
    tol, maxits, aitken, verbose, full_output :
        As for `bisect_root`.

    Returns
    -------
    float or SolveResult
        Converged `x` value, or the complete result if `full_output`.

    Raises
    ------
    DivisionByZeroError
        If the Aitken denominator is zero.
    MaxIterationsError
        If `maxits` is exceeded, e.g. because `g` does not have an
        attracting fixed point near `x0`.
    """
    config = SolverConfig(method=Method.FIXED_POINT, function=func,
                          start=x0, g_function=g, tolerance=tol,
                          max_iterations=maxits, aitken=aitken,
                          verbose=verbose)
    result = Solver(config).solve()
    result.raise_for_outcome()
    return result if full_output else result.root
