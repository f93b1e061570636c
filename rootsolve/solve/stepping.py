"""
Single steps of each root finding method.  Each method is represented by
a small dataclass holding only the rolling state it needs between steps
(e.g. the current bracket for bisection).  `raw_step` advances any of
these by one step and `aitken_step` combines two raw steps with Aitken
Δ² extrapolation.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from rootsolve.solve.config import SolverConfig
from rootsolve.solve.exception import ConfigurationError, DivisionByZeroError
from rootsolve.solve.method import Method
from rootsolve.solve.trace import Iterate


# ======================================================================

@dataclass
class BisectionStepper:
    """
    Bracket ``[left, right]`` and the function values at each end.
    The signs of `f_left` and `f_right` always differ.
    """
    left: float
    right: float
    f_left: float
    f_right: float


@dataclass
class NewtonStepper:
    """Newton-Raphson carries no rolling state, only the derivative."""
    derivative: Callable[[float], float]


@dataclass
class ChordsStepper:
    """Two-point window ``(p_prev, p_cur)`` and function values."""
    p_prev: float
    p_cur: float
    f_prev: float
    f_cur: float

    def shift(self, it: Iterate):
        """Drop `p_prev` and make `it` the current point."""
        self.p_prev, self.f_prev = self.p_cur, self.f_cur
        self.p_cur, self.f_cur = it.x, it.f_x


@dataclass
class FixedPointStepper:
    """Fixed point iteration carries no rolling state, only `g(x)`."""
    g_function: Callable[[float], float]


Stepper = BisectionStepper | NewtonStepper | ChordsStepper | FixedPointStepper


# ----------------------------------------------------------------------

def make_stepper(config: SolverConfig) -> Stepper:
    """
    Build fresh stepper state for `config`.  The configuration is
    assumed to have already been checked for compatibility between
    `method` and `start` (see `Solver`).

    Raises
    ------
    ConfigurationError
        For bisection, if ``f(a)`` and ``f(b)`` do not have different
        signs.
    """
    func = config.function
    match config.method:
        case Method.BISECTION:
            a, b = config.start
            f_a, f_b = func(a), func(b)
            if np.sign(f_a) == np.sign(f_b) or np.isnan(f_a * f_b):
                raise ConfigurationError(
                    f"f(a) and f(b) must have different signs for "
                    f"bisection, got f({a}) = {f_a}, f({b}) = {f_b}.")
            return BisectionStepper(a, b, f_a, f_b)

        case Method.NEWTON:
            return NewtonStepper(config.derivative)

        case Method.CHORDS:
            p_prev, p_cur = config.start
            return ChordsStepper(p_prev, p_cur, func(p_prev), func(p_cur))

        case Method.FIXED_POINT:
            return FixedPointStepper(config.g_function)

    raise ConfigurationError(f"Unknown method {config.method!r}.")


def start_iterate(stepper: Stepper, func: Callable[[float], float],
                  start: float | tuple[float, ...]) -> Iterate:
    """
    Returns the starting point (trace row 0) for `stepper`.  For the
    two-point methods this is the second point given, i.e. `b` for
    bisection and `x(0)` for chords.
    """
    match stepper:
        case BisectionStepper(right=x, f_right=f_x):
            return Iterate(x, f_x)
        case ChordsStepper(p_cur=x, f_cur=f_x):
            return Iterate(x, f_x)
        case _:
            return Iterate(start, func(start))


# ----------------------------------------------------------------------

def raw_step(stepper: Stepper, func: Callable[[float], float],
             current: Iterate) -> Iterate:
    """
    Advance `stepper` by one step of its method from `current`,
    updating any rolling state.

    Parameters
    ----------
    stepper : Stepper
        Method state, modified in place.
    func : Callable[[float], float]
        Target function.
    current : Iterate
        Most recent point.  Bisection and chords use their own
        rolling state instead.

    Returns
    -------
    Iterate
        The new point and ``func`` evaluated there (for fixed point
        iteration this is the target function, not `g`).

    Raises
    ------
    DivisionByZeroError
        If the Newton-Raphson derivative is zero at `current`, or the
        chords denominator ``f(p_cur) - f(p_prev)`` is zero.
    """
    match stepper:
        case NewtonStepper(derivative=fprime):
            fder = fprime(current.x)
            if fder == 0:
                raise DivisionByZeroError(
                    "Newton-Raphson step failed, the method will diverge:",
                    details="Derivative was zero.", x=current.x)
            x_new = current.x - current.f_x / fder
            return Iterate(x_new, func(x_new))

        case FixedPointStepper(g_function=g):
            x_new = g(current.x)
            return Iterate(x_new, func(x_new))

        case BisectionStepper():
            x_m = (stepper.left + stepper.right) / 2
            f_m = func(x_m)
            if np.sign(stepper.f_left) != np.sign(f_m):
                stepper.right, stepper.f_right = x_m, f_m
            else:
                stepper.left, stepper.f_left = x_m, f_m
            return Iterate(x_m, f_m)

        case ChordsStepper():
            denom = stepper.f_cur - stepper.f_prev
            if denom == 0:
                raise DivisionByZeroError(
                    "Chords step failed, the method will diverge:",
                    details="f(x) equal at both points.",
                    x=stepper.p_cur)
            x_new = (stepper.p_cur - stepper.f_cur *
                     (stepper.p_cur - stepper.p_prev) / denom)
            it = Iterate(x_new, func(x_new))
            stepper.shift(it)
            return it

    raise TypeError(f"Unknown stepper type {type(stepper).__name__}.")


def aitken_step(stepper: Stepper, func: Callable[[float], float],
                current: Iterate) -> Iterate:
    r"""
    Take two raw steps :math:`x_1, x_2` from :math:`x_0` = `current`
    and return the Aitken Δ² extrapolation:

    .. math:: x_{acc} = x_2 - \frac{(x_2 - x_1)^2}{x_2 - 2 x_1 + x_0}

    Only the extrapolated point is returned; the raw points are not
    reported.  If a raw step lands exactly on a root, or the raw
    sequence has stopped moving (``x_2 == x_1``), that raw point is
    returned instead.  For chords, the extrapolated point becomes the
    current point of the window.

    Raises
    ------
    DivisionByZeroError
        If the Aitken denominator is zero, or from `raw_step`.
    """
    it_1 = raw_step(stepper, func, current)
    if it_1.f_x == 0:
        return it_1

    it_2 = raw_step(stepper, func, it_1)
    if it_2.f_x == 0:
        return it_2

    x_0, x_1, x_2 = current.x, it_1.x, it_2.x
    numer = (x_2 - x_1) ** 2
    if numer == 0:
        return it_2

    denom = x_2 - 2 * x_1 + x_0
    if denom == 0:
        raise DivisionByZeroError(
            "Aitken acceleration failed, the method will diverge:",
            details="Denominator x2 - 2*x1 + x0 was zero.", x=x_2)

    x_acc = x_2 - numer / denom
    it_acc = Iterate(x_acc, func(x_acc))

    if isinstance(stepper, ChordsStepper):
        stepper.shift(it_acc)

    return it_acc
