"""
===================================
Input / Output (:mod:`rootsolve.io`)
===================================

.. currentmodule:: rootsolve.io

Reading solver configurations from files and writing the results
trace of a solve.

Readers
-------

.. autosummary::
    :toctree:

    config_from_map
    read_csv
    read_dat
    ReaderError

Writers
-------

.. autosummary::
    :toctree:

    ConsoleWriter
    CSVWriter
    DATWriter
    GnuplotWriter
    plot_trace
"""

from .reader import (ReaderError, POSITIONAL_FIELDS, config_from_map,
                     parse_bool, read_csv, read_dat)
from .writer import (TraceWriter, ConsoleWriter, FileWriter, CSVWriter,
                     DATWriter, GnuplotWriter, gnuplot_script, plot_trace)
