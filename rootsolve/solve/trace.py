from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

import numpy as np


# ======================================================================

class Iterate(NamedTuple):
    """A single solver state: the point `x` and the target `f(x)`."""
    x: float
    f_x: float


# ----------------------------------------------------------------------

class ResultsTrace:
    """
    Ordered, append-only history of the `Iterate` values produced by a
    solve.  Row 0 is the starting point and the last row is the
    accepted root estimate.  Rows are never replaced or reordered; the
    only way to remove them is `clear`, which is done when a solve is
    restarted.

    Examples
    --------
    >>> trace = ResultsTrace()
    >>> trace.append(Iterate(2.0, 3.0))
    >>> trace.append(Iterate(1.0, 0.0))
    >>> len(trace), trace.root
    (2, 1.0)
    >>> trace.to_array()
    array([[2., 3.],
           [1., 0.]])
    """

    def __init__(self):
        self._rows: list[Iterate] = []

    def __getitem__(self, i: int) -> Iterate:
        return self._rows[i]

    def __iter__(self) -> Iterator[Iterate]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self):
        return f"ResultsTrace({self._rows!r})"

    # -- Public Methods ------------------------------------------------

    def append(self, it: Iterate):
        """Add `it` as the next row, converting values to `float`."""
        self._rows.append(Iterate(float(it[0]), float(it[1])))

    def clear(self):
        """Remove all rows."""
        self._rows.clear()

    @property
    def last(self) -> Iterate:
        """
        The most recent row.

        Raises
        ------
        IndexError
            If the trace is empty.
        """
        return self._rows[-1]

    @property
    def root(self) -> float:
        """The `x` value of the final row, i.e. the root estimate."""
        return self.last.x

    def to_array(self) -> np.ndarray:
        """
        Returns
        -------
        ndarray of float, shape (n, 2)
            Rows of ``[x, f(x)]``.  An empty trace gives shape (0, 2).
        """
        return np.array(self._rows, dtype=float).reshape(-1, 2)
