from __future__ import annotations

from dataclasses import dataclass, replace


# ======================================================================


@dataclass(frozen=True, kw_only=True)
class SolverOptions:
    """
    Dataclass that holds the default settings used when a solver
    configuration does not give them explicitly.  See
    `get_solver_options` and `set_solver_options` for full details.
    """
    tolerance: float
    max_iterations: int
    aitken: bool
    verbose: bool

    def __post_init__(self):
        """Check certain values"""
        if not self.tolerance > 0:
            raise ValueError("Require 'tolerance' > 0.")
        if self.max_iterations < 1:
            raise ValueError("Require 'max_iterations' >= 1.")


# Create single instance and set defaults.
_solver_options = SolverOptions(
    tolerance=1e-7,
    max_iterations=100,
    aitken=False,
    verbose=False
)


# ----------------------------------------------------------------------

def get_solver_options() -> SolverOptions:
    """
    Returns
    -------
    solver_options : SolverOptions
        Returns a copy of the current default options.  For a full
        description of each option, see `set_solver_options`.
    """
    return replace(_solver_options)


# noinspection PyIncorrectDocstring
def set_solver_options(**kwargs):
    """
    Set the current default solver options.  These are used by
    `SolverConfig`, the functional solvers and the file readers
    whenever a value is not supplied.

    Parameters
    ----------
    tolerance : float, default = 1e-7
        Convergence threshold compared against both the step size
        ``|x' - x|`` and ``|f(x')|``.  Must be > 0.

    max_iterations : int, default = 100
        Maximum number of steps taken by the solver.  Must be >= 1.

    aitken : bool, default = False
        If `True`, apply Aitken Δ² acceleration to every step.

    verbose : bool, default = False
        If `True`, print the progress of each iteration.

    Raises
    ------
    ValueError
        If a value is illegal.  In this case the options are not
        changed.

    Examples
    --------
    >>> from rootsolve.solve import get_solver_options, set_solver_options
    >>> set_solver_options(tolerance=1e-10)
    >>> get_solver_options().tolerance
    1e-10
    >>> set_solver_options(tolerance=1e-7)
    """
    global _solver_options
    _solver_options = replace(_solver_options, **kwargs)
