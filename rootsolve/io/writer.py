"""
Writers for the `ResultsTrace` of a solve.  These only consume the
trace, one ``(x, f(x))`` row per iteration.
"""
from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
import warnings
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TextIO

import numpy as np

from rootsolve.solve import ResultsTrace
from rootsolve.util import ruled_heading

_log = logging.getLogger(__name__)

_NUM_FMT = '%.12g'


# ======================================================================

class TraceWriter(ABC):
    """Abstract base class for writing a `ResultsTrace`."""

    @abstractmethod
    def write(self, trace: ResultsTrace):
        """Write all rows of `trace`."""
        raise NotImplementedError


# ----------------------------------------------------------------------

class ConsoleWriter(TraceWriter):
    """
    Print the root followed by every iteration.

    Parameters
    ----------
    stream : TextIO, optional
        Output stream.  Default is `sys.stdout` at the time of writing.

    Examples
    --------
    >>> from rootsolve.solve import Iterate
    >>> trace = ResultsTrace()
    >>> trace.append(Iterate(2.0, 3.0))
    >>> trace.append(Iterate(1.0, 0.0))
    >>> ConsoleWriter().write(trace)
    The found root is 1
    ------------------------------------------------------------------------
    Here are the iterations of the method:
    ------------------------------------------------------------------------
    x(0) = 2 --- f(x) = 3
    x(1) = 1 --- f(x) = 0
    """

    def __init__(self, stream: TextIO = None):
        self.stream = stream

    def write(self, trace: ResultsTrace):
        out = self.stream if self.stream is not None else sys.stdout
        print(f"The found root is {trace.root:.12g}", file=out)
        print(ruled_heading("Here are the iterations of the method:"),
              file=out)
        for i, (x, f_x) in enumerate(trace):
            print(f"x({i}) = {x:.12g} --- f(x) = {f_x:.12g}", file=out)


# ----------------------------------------------------------------------

class FileWriter(TraceWriter):
    """
    Base class for writers producing a text file of rows.  The file
    extension is added to `filename` unless already present.

    Parameters
    ----------
    filename : str or PathLike
        Output file name, with or without extension.
    overwrite : bool, default = True
        If `True` replace any existing file, otherwise append to it.
        When appending to a non-empty file a blank line is written
        first to separate the data sets.
    """
    extension = ''

    def __init__(self, filename: str | os.PathLike, *,
                 overwrite: bool = True):
        filename = os.fspath(filename)
        if not filename.endswith(self.extension):
            filename += self.extension
        self.filename = filename
        self.overwrite = overwrite

    def write(self, trace: ResultsTrace):
        with open(self.filename, 'w' if self.overwrite else 'a') as f:
            if f.tell() > 0:
                f.write('\n')
            self._write_rows(f, trace.to_array())

        _log.info("Wrote %d rows to '%s'.", len(trace), self.filename)

    @abstractmethod
    def _write_rows(self, f: TextIO, rows: np.ndarray):
        raise NotImplementedError


class CSVWriter(FileWriter):
    """
    Write rows as ``x<sep>f(x)`` to a ``.csv`` file.

    Parameters
    ----------
    sep : str, default = ','
        Column separator.
    """
    extension = '.csv'

    def __init__(self, filename: str | os.PathLike, *, sep: str = ',',
                 overwrite: bool = True):
        super().__init__(filename, overwrite=overwrite)
        self.sep = sep

    def _write_rows(self, f: TextIO, rows: np.ndarray):
        np.savetxt(f, rows, fmt=_NUM_FMT, delimiter=self.sep)


class DATWriter(FileWriter):
    """Write rows as space separated ``x f(x)`` to a ``.dat`` file."""
    extension = '.dat'

    def _write_rows(self, f: TextIO, rows: np.ndarray):
        np.savetxt(f, rows, fmt=_NUM_FMT, delimiter=' ')


class GnuplotWriter(DATWriter):
    """
    Write a ``.dat`` file and a Gnuplot script ``.plt`` that plots the
    iteration path to a ``.png`` file.  If `run` is `True` and
    ``gnuplot`` is found, the script is run to produce the image,
    otherwise a warning is issued.
    """

    def __init__(self, filename: str | os.PathLike, *,
                 overwrite: bool = True, run: bool = True):
        super().__init__(filename, overwrite=overwrite)
        self.run = run

    @property
    def script_filename(self) -> str:
        return os.path.splitext(self.filename)[0] + '.plt'

    @property
    def image_filename(self) -> str:
        return os.path.splitext(self.filename)[0] + '.png'

    def write(self, trace: ResultsTrace):
        super().write(trace)

        with open(self.script_filename, 'w') as f:
            f.write(gnuplot_script(self.filename, self.image_filename))
        _log.info("Gnuplot script generated: '%s'.", self.script_filename)

        if not self.run:
            return

        gnuplot = shutil.which('gnuplot')
        if gnuplot is None:
            warnings.warn("gnuplot not found.  Script generated but "
                          "image not created.")
            return

        subprocess.run([gnuplot, self.script_filename], check=True)
        _log.info("Gnuplot image generated: '%s'.", self.image_filename)


def gnuplot_script(data_filename: str, image_filename: str) -> str:
    """Returns a Gnuplot script plotting the ``x f(x)`` data file."""
    return (f"# Auto-generated gnuplot script\n"
            f"set terminal pngcairo size 1000,800 enhanced font 'Arial,12'\n"
            f"set output '{image_filename}'\n"
            f"set title 'Root-Finding Iterations'\n"
            f"set xlabel 'x'\n"
            f"set ylabel 'f(x)'\n"
            f"set grid\n"
            f"plot '{data_filename}' using 1:2 with linespoints "
            f"lt rgb 'blue' pt 7 lw 2 title 'Iteration Path'\n")


# ======================================================================

def plot_trace(trace: ResultsTrace, func: Callable = None, *, ax=None,
               n_pts: int = 200):
    """
    Plot the iteration path of `trace`.  This function requires
    ``matplotlib.pyplot``.

    Parameters
    ----------
    trace : ResultsTrace
        Trace to plot.
    func : Callable, optional
        If given, `func` is also drawn over the range of `x` visited
        (plus a small margin).  It must accept NumPy arrays, as
        functions from `parse_function` do.
    ax : matplotlib Axes, optional
        Axes to draw on.  If omitted a new figure is created.
    n_pts : int, default = 200
        Number of points used to draw `func`.

    Returns
    -------
    ax : matplotlib Axes
        The axes used.
    """
    import matplotlib.pyplot as plt

    if ax is None:
        _, ax = plt.subplots()

    rows = trace.to_array()
    if func is not None and len(rows) > 0:
        x_min, x_max = rows[:, 0].min(), rows[:, 0].max()
        margin = 0.1 * (x_max - x_min) or 1.0
        x = np.linspace(x_min - margin, x_max + margin, n_pts)
        ax.plot(x, func(x), 'k-', lw=1, label='f(x)')

    ax.plot(rows[:, 0], rows[:, 1], 'o-', color='tab:blue',
            label='Iteration Path')
    if len(rows) > 0:
        ax.plot(rows[-1, 0], rows[-1, 1], 'r*', ms=12, label='Root')

    ax.axhline(0.0, color='grey', lw=0.5)
    ax.set_xlabel('x')
    ax.set_ylabel('f(x)')
    ax.set_title('Root-Finding Iterations')
    ax.grid(True)
    ax.legend()
    return ax
