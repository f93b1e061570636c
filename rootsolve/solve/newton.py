from __future__ import annotations

from collections.abc import Callable

from rootsolve.solve.config import SolverConfig
from rootsolve.solve.method import Method
from rootsolve.solve.solver import SolveResult, Solver


# ----------------------------------------------------------------------------

def newton(func: Callable[[float], float],
           fprime: Callable[[float], float], x0: float, *,
           tol: float = None, maxits: int = None, aitken: bool = None,
           verbose: bool = None,
           full_output: bool = False) -> float | SolveResult:
    """
    Find a zero of `func` by the Newton-Raphson method, :math:`x' = x -
    f(x) / f'(x)`.

    Examples
    --------
    >>> round(newton(lambda x: x**2 - 4, lambda x: 2*x, -1.0), 9)
    -2.0

    Parameters
    ----------
    func, fprime : Callable[[float], float]
        Function and its derivative.
    x0 : float
        Initial guess.
    tol, maxits, aitken, verbose, full_output :
        As for `bisect_root`.

    Raises
    ------
    DivisionByZeroError
        If ``fprime(x) == 0`` at any iterate.
    MaxIterationsError
        If `maxits` is reached before a solution is found.
    """
    config = SolverConfig(method=Method.NEWTON, function=func, start=x0,
                          derivative=fprime, tolerance=tol,
                          max_iterations=maxits, aitken=aitken,
                          verbose=verbose)
    result = Solver(config).solve()
    result.raise_for_outcome()
    return result if full_output else result.root
