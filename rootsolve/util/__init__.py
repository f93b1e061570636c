"""
=================================
Utilities (:mod:`rootsolve.util`)
=================================

.. currentmodule:: rootsolve.util

Display helpers used for verbose solver output and console results.

.. autosummary::
    :toctree:

    Channel
    ProgressPrinter
    ProgressMixin
    ruled_heading
"""

from .progress import Channel, ProgressPrinter, ProgressMixin, ruled_heading
