"""
Exceptions raised by the solvers.  Failures during iteration derive
from `SolverError` and carry a numeric `flag`; problems with the inputs
raise `ConfigurationError` before any iteration is made.
"""


# ======================================================================

class SolverError(RuntimeError):
    """
    A root finding method stopped without a usable root.

    Parameters
    ----------
    args :
        Message, passed to `RuntimeError`.
    flag : int, optional
        Failure code, fixed by each subclass (never zero).
    details : str, optional
        Short description of the specific cause.
    iteration : int, optional
        Step at which the failure happened.  The `Solver` fills this in
        when it is not given.
    kwargs :
        Any further values describing the failure (e.g. ``x=...``) are
        stored as attributes of the same name.
    """

    def __init__(self, *args, flag: int = None, details: str = None,
                 iteration: int = None, **kwargs):
        super().__init__(*args)
        self.flag = flag
        self.details = details
        self.iteration = iteration
        self.__dict__.update(kwargs)

    def __str__(self):
        lines = [super().__str__()]
        lines += [f"{name} -> {value}" for name, value in vars(self).items()
                  if value is not None]
        return '\n'.join(lines)


# ----------------------------------------------------------------------

class MaxIterationsError(SolverError):
    """
    The iteration limit was reached before either tolerance test was
    satisfied (``flag = 1``).
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('flag', 1)
        super().__init__(*args, **kwargs)


class DivisionByZeroError(SolverError):
    """
    A step of the method required a division by zero, e.g. a zero
    derivative for Newton-Raphson, coincident function values for the
    chords method or a zero Aitken denominator.  The method would
    diverge from this point (``flag = 2``).
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('flag', 2)
        super().__init__(*args, **kwargs)


class DivergenceError(SolverError):
    """
    An iterate or its function value is no longer finite (``flag = 3``).
    Raised at the start of a solve, or by `SolveResult.raise_for_outcome`
    for a solve that ended as `Outcome.DIVERGED`.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('flag', 3)
        super().__init__(*args, **kwargs)


# ----------------------------------------------------------------------

class ConfigurationError(ValueError):
    """
    Raised when a solver configuration is invalid, e.g. the starting
    data does not suit the chosen method or a bisection interval does
    not bracket a root.  This is always raised before any iteration is
    made.
    """
    pass
