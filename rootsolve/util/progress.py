"""
Progress output for verbose solves.  Output is sent on named channels
arranged in a hierarchy; deeper channels are led by dots and are only
shown when the printer's verbosity reaches their depth.
"""
from __future__ import annotations

import sys
import warnings
from typing import TextIO


# ======================================================================

class Channel:
    """
    A named output channel.  A channel nested `under` another is one
    level deeper.  Depth 1 lines are printed as given; deeper lines get
    ``'....'`` for each extra level and a final ``'... '``.

    Examples
    --------
    >>> solver = Channel('solver')
    >>> Channel('iteration', under=solver).decorate("Iteration 1")
    '... Iteration 1'
    """

    def __init__(self, name: str, under: Channel = None):
        self.name, self.under = name, under

    @property
    def depth(self) -> int:
        depth, parent = 1, self.under
        while parent is not None:
            depth, parent = depth + 1, parent.under
        return depth

    def decorate(self, text: str) -> str:
        if self.depth == 1:
            return text
        return '....' * (self.depth - 2) + '... ' + text


class ProgressPrinter:
    """
    Set of `Channel` objects sharing one verbosity.

    Parameters
    ----------
    verbosity : int, default = 0
        Deepest channel shown.  Zero shows nothing.
    stream : TextIO, optional
        Destination.  Default is `sys.stdout` at the time of printing.

    Examples
    --------
    >>> out = ProgressPrinter(verbosity=1)
    >>> out.add_channel('solver')
    >>> out.add_channel('iteration', under='solver')
    >>> out('solver', "Bisection:")
    Bisection:
    >>> out('iteration', "Hidden at verbosity 1.")
    """

    def __init__(self, verbosity: int = 0, stream: TextIO = None):
        self.verbosity = verbosity
        self.stream = stream
        self._channels: dict[str, Channel] = {}

    def __call__(self, name: str, text: str):
        """
        Print `text` on channel `name` if it is within the verbosity.
        An unknown channel gives a warning and `text` is printed as is.
        """
        out = self.stream if self.stream is not None else sys.stdout
        channel = self._channels.get(name)
        if channel is None:
            warnings.warn(f"Unknown progress channel '{name}'.")
            print(text, file=out)
        elif channel.depth <= self.verbosity:
            print(channel.decorate(text), file=out)

    def add_channel(self, name: str, under: str = None):
        """
        Raises
        ------
        ValueError
            If `name` is taken or `under` is not a known channel.
        """
        if name in self._channels:
            raise ValueError(f"Channel '{name}' already exists.")
        if under is not None and under not in self._channels:
            raise ValueError(f"Unknown parent channel '{under}'.")

        parent = self._channels[under] if under is not None else None
        self._channels[name] = Channel(name, parent)


class ProgressMixin:
    """
    Gives a class a `progress` printer.  List it first among the base
    classes.
    """

    def __init__(self, *args, verbosity: int = 0, **kwargs):
        super().__init__(*args, **kwargs)
        self.progress = ProgressPrinter(verbosity)


# ----------------------------------------------------------------------

def ruled_heading(text: str, rule: str = '-', width: int = 72) -> str:
    """
    Returns `text` between two rules of `width` characters.

    Examples
    --------
    >>> print(ruled_heading("RESULTS", '=', width=10))
    ==========
    RESULTS
    ==========
    """
    line = (rule * width)[:width]
    return f"{line}\n{text}\n{line}"
