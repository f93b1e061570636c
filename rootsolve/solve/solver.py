"""
The iterative solving engine.  `Solver` drives the convergence loop
for any `Method`, recording every accepted point in a `ResultsTrace`.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

from rootsolve.solve.config import SolverConfig
from rootsolve.solve.exception import (ConfigurationError, DivergenceError,
                                       MaxIterationsError, SolverError)
from rootsolve.solve.method import Method
from rootsolve.solve.stepping import (Stepper, aitken_step, make_stepper,
                                      raw_step, start_iterate)
from rootsolve.solve.trace import Iterate, ResultsTrace
from rootsolve.util.progress import ProgressMixin

_log = logging.getLogger(__name__)

_METHOD_TITLES = {
    Method.BISECTION: "Bisection",
    Method.NEWTON: "Newton-Raphson",
    Method.CHORDS: "Chords",
    Method.FIXED_POINT: "Fixed Point Iteration",
}


# ======================================================================

class Outcome(Enum):
    """How a completed solve finished."""
    CONVERGED = 'converged'
    MAX_ITERATIONS_EXCEEDED = 'max_iterations_exceeded'
    DIVERGED = 'diverged'


@dataclass(frozen=True)
class SolveResult:
    """
    Results of a completed solve.  The outcome is reported alongside
    the trace and is never implied by it.

    Parameters
    ----------
    trace : ResultsTrace
        Every point accepted by the solver, starting point first.
    outcome : Outcome
        Whether a tolerance test was met, the iteration limit was
        reached or an iterate stopped being finite.
    iterations : int
        Number of steps taken (trace rows after the starting point).
    method : Method
        Method used.
    """
    trace: ResultsTrace
    outcome: Outcome
    iterations: int
    method: Method

    @property
    def converged(self) -> bool:
        return self.outcome is Outcome.CONVERGED

    @property
    def root(self) -> float:
        """Final root estimate (last trace row)."""
        return self.trace.root

    def raise_for_outcome(self):
        """
        Raises
        ------
        MaxIterationsError
            If the iteration limit was reached.
        DivergenceError
            If an iterate stopped being finite.
        """
        last = self.trace.last
        if self.outcome is Outcome.DIVERGED:
            raise DivergenceError(
                f"{_METHOD_TITLES[self.method]} diverged:",
                details="Iterate is not finite.",
                iteration=self.iterations + 1, x=last.x, f_x=last.f_x)

        if not self.converged:
            raise MaxIterationsError(
                f"{_METHOD_TITLES[self.method]} failed to converge:",
                details=f"Limit of {self.iterations} iterations exceeded.",
                x=last.x, f_x=last.f_x)


# ----------------------------------------------------------------------

class Solver(ProgressMixin):
    """
    Finds a root of ``config.function`` using the method, starting data
    and settings held in `config`.

    Each call to `solve` starts again from the configured starting
    point, so repeated calls give identical traces.  The trace of the
    most recent (or current) solve is available as `trace`, including
    after a failure.

    Parameters
    ----------
    config : SolverConfig
        Problem definition.  If ``config.verbose`` is `True` each
        iteration is printed.

    Examples
    --------
    >>> cfg = SolverConfig(method=Method.BISECTION,
    ...                    function=lambda x: x ** 2 - 1,
    ...                    start=(0.0, 2.0))
    >>> result = Solver(cfg).solve()
    >>> result.outcome, result.root
    (<Outcome.CONVERGED: 'converged'>, 1.0)
    >>> result.trace.to_array()
    array([[2., 3.],
           [1., 0.]])

    With ``verbose=True`` the same solve prints ``Bisection:`` followed
    by one ``... Iteration n: x = ..., f(x) = ...`` line per row.
    """

    def __init__(self, config: SolverConfig):
        super().__init__(verbosity=2 if config.verbose else 0)
        self.config = config
        self.trace = ResultsTrace()
        self._stepper: Stepper | None = None

        self.progress.add_channel('solver')
        self.progress.add_channel('iteration', under='solver')

    # -- Public Methods ------------------------------------------------

    def reset(self):
        """
        Start a new, empty trace and discard any stepper state from a
        previous solve.  A `SolveResult` already returned keeps its own
        trace.
        """
        self.trace = ResultsTrace()
        self._stepper = None

    def solve(self) -> SolveResult:
        """
        Run the convergence loop.  Iteration continues while ``|f(x)| >
        tolerance``, ``|x' - x| > tolerance`` and the iteration limit
        has not been reached.

        Returns
        -------
        SolveResult
            Trace and outcome.  Reaching the iteration limit is reported
            as `Outcome.MAX_ITERATIONS_EXCEEDED` and a step giving a
            non-finite `x` or `f(x)` as `Outcome.DIVERGED`.  Neither is
            raised.

        Raises
        ------
        ConfigurationError
            If the method and starting data are incompatible, or a
            bisection interval does not bracket a root.
        DivisionByZeroError
            If a step of the method (or Aitken extrapolation) divides
            by zero.
        DivergenceError
            If the starting point is not finite.
        """
        config = self.config
        check_config(config)
        self.reset()

        func, tol = config.function, config.tolerance
        step = aitken_step if config.aitken else raw_step
        self._stepper = make_stepper(config)

        title = _METHOD_TITLES[config.method]
        if config.aitken:
            title += " with Aitken Acceleration"
        self.progress('solver', f"{title}:")
        _log.info("Starting %s, tolerance = %g, max_iterations = %d.",
                  title, tol, config.max_iterations)

        current = start_iterate(self._stepper, func, config.start)
        if not _finite(current):
            raise DivergenceError(
                f"{title} cannot start:", details="Iterate is not finite.",
                iteration=0, x=current.x, f_x=current.f_x)
        self._accept(current, 0)

        its, error, diverged = 0, math.inf, False
        while (abs(current.f_x) > tol and error > tol and
               its < config.max_iterations):
            try:
                new = step(self._stepper, func, current)
            except SolverError as e:
                if e.iteration is None:
                    e.iteration = its + 1
                _log.warning("%s stopped at iteration %d: %s", title,
                             its + 1, e.details)
                raise

            if not _finite(new):
                # The non-finite point is not recorded.
                diverged = True
                _log.warning("%s diverged at iteration %d: x = %r, "
                             "f(x) = %r.", title, its + 1, new.x, new.f_x)
                break

            its += 1
            self._accept(new, its)
            error = abs(new.x - current.x)
            current = new

        if diverged:
            outcome = Outcome.DIVERGED
            self.progress('iteration', f"Diverged at iteration {its + 1}.")
        elif abs(current.f_x) <= tol or error <= tol:
            outcome = Outcome.CONVERGED
            self.progress('iteration', "Converged.")
        else:
            outcome = Outcome.MAX_ITERATIONS_EXCEEDED
            self.progress('iteration',
                          f"Limit of {its} iterations exceeded.")

        _log.info("%s finished after %d iterations: %s, x = %r.", title,
                  its, outcome.value, current.x)
        return SolveResult(self.trace, outcome, its, config.method)

    # -- Private Methods -----------------------------------------------

    def _accept(self, it: Iterate, its: int):
        self.trace.append(it)
        _log.debug("Iteration %d: x = %r, f(x) = %r", its, it.x, it.f_x)
        self.progress('iteration', f"Iteration {its}: x = {it.x:+.9g}, "
                                   f"f(x) = {it.f_x:+.9g}")


def _finite(it: Iterate) -> bool:
    return math.isfinite(it.x) and math.isfinite(it.f_x)


# ----------------------------------------------------------------------

def check_config(config: SolverConfig):
    """
    Check that the starting data and extra functions in `config` suit
    its method.

    Raises
    ------
    ConfigurationError
        If they do not.
    """
    method, start = config.method, config.start
    if not isinstance(method, Method):
        raise ConfigurationError(f"Unknown method {method!r}.")

    if not callable(config.function):
        raise ConfigurationError("Target function must be callable.")

    if method.two_point:
        if not isinstance(start, tuple) or len(start) != 2:
            raise ConfigurationError(
                f"{_METHOD_TITLES[method]} requires two starting points "
                f"(a, b), got {start!r}.")
    elif isinstance(start, tuple):
        raise ConfigurationError(
            f"{_METHOD_TITLES[method]} requires a single initial guess, "
            f"got {start!r}.")

    if method is Method.NEWTON and not callable(config.derivative):
        raise ConfigurationError("Newton-Raphson requires a derivative "
                                 "function.")

    if method is Method.FIXED_POINT and not callable(config.g_function):
        raise ConfigurationError("Fixed point iteration requires an "
                                 "iteration function g(x).")
