from __future__ import annotations

from collections.abc import Callable

from rootsolve.solve.config import SolverConfig
from rootsolve.solve.method import Method
from rootsolve.solve.solver import SolveResult, Solver


# ----------------------------------------------------------------------------


def bisect_root(func: Callable[[float], float], x_a: float, x_b: float, *,
                tol: float = None, maxits: int = None, aitken: bool = None,
                verbose: bool = None,
                full_output: bool = False) -> float | SolveResult:
    r"""
    Find a zero of `func` in :math:`[x_a, x_b]` by repeatedly halving
    the interval.  The function values at the two ends must differ in
    sign.

    Examples
    --------
    >>> bisect_root(lambda x: x ** 2 - x - 1, 1, 2, tol=1e-6)  # 20 steps.
    1.6180343627929688
    >>> bisect_root(lambda x: (2 * x - 1) * (x - 3), 0, 1)  # Midpoint.
    0.5

    Parameters
    ----------
    func : Callable[[float], float]
        Target function.
    x_a, x_b : float
        Each end of the search interval.  Iteration starts from `x_b`.
    tol : float, optional
        End search when :math:`|f(x)| \leq tol` or the step is
        :math:`\leq tol`.  Default from `get_solver_options`.
    maxits : int, optional
        Maximum number of iterations.  Default from `get_solver_options`.
    aitken : bool, optional
        Apply Aitken acceleration.  Default from `get_solver_options`.
    verbose : bool, optional
        If True, print each iteration.
    full_output : bool, default = False
        If True, return the complete `SolveResult` instead of the root.

    Returns
    -------
    x_m : float
        Root estimate, :math:`f(x_m) \approx 0`.

    Raises
    ------
    ConfigurationError
        If ``func(x_a)`` and ``func(x_b)`` have the same sign.
    MaxIterationsError
        If `maxits` is reached before a solution is found.
    """
    config = SolverConfig(method=Method.BISECTION, function=func,
                          start=(x_a, x_b), tolerance=tol,
                          max_iterations=maxits, aitken=aitken,
                          verbose=verbose)
    result = Solver(config).solve()
    result.raise_for_outcome()
    return result if full_output else result.root
