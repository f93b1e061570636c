from __future__ import annotations

from enum import Enum

from rootsolve.solve.exception import ConfigurationError


# ======================================================================

class Method(Enum):
    """
    Root finding methods available to the `Solver`.  Bisection and
    chords start from two points, Newton-Raphson and fixed point
    iteration start from a single point.
    """
    BISECTION = 'bisection'
    NEWTON = 'newton'
    CHORDS = 'chords'
    FIXED_POINT = 'fixed_point'

    @property
    def two_point(self) -> bool:
        """`True` if the method starts from a pair of points."""
        return self in (Method.BISECTION, Method.CHORDS)

    @classmethod
    def from_str(cls, name: str) -> Method:
        """
        Convert a method name to a `Method`.  Matching ignores case and
        surrounding whitespace and accepts common alternative names,
        e.g. 'secant' for `Method.CHORDS` or 'iterative' for
        `Method.FIXED_POINT`.

        Raises
        ------
        ConfigurationError
            If `name` is not recognised.

        Examples
        --------
        >>> Method.from_str('Secant')
        <Method.CHORDS: 'chords'>
        >>> Method.from_str('fixed-point')
        <Method.FIXED_POINT: 'fixed_point'>
        """
        try:
            return _METHOD_ALIASES[name.strip().lower()]
        except KeyError:
            raise ConfigurationError(f"Unknown method '{name}'.")


_METHOD_ALIASES = {
    'bisection': Method.BISECTION,
    'bisect': Method.BISECTION,
    'bisectionmethod': Method.BISECTION,
    'newton': Method.NEWTON,
    'newtonmethod': Method.NEWTON,
    'newton-raphson': Method.NEWTON,
    'chords': Method.CHORDS,
    'secant': Method.CHORDS,
    'secantmethod': Method.CHORDS,
    'fixed_point': Method.FIXED_POINT,
    'fixedpoint': Method.FIXED_POINT,
    'fixed-point': Method.FIXED_POINT,
    'fixed point': Method.FIXED_POINT,
    'iterative': Method.FIXED_POINT,
}
