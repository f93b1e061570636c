"""
Readers that build a `SolverConfig` from a configuration file.  Two
formats are supported:

- CSV: A header row of field names and a row of values, or a single row
  of values in the order given by `POSITIONAL_FIELDS`.
- DAT: One ``key = value`` pair per line.  Blank lines and lines
  starting with ``#`` are ignored.

Field names ignore case.  All values are strings until converted by
`config_from_map`.
"""
from __future__ import annotations

import csv
import logging
import os
from collections.abc import Mapping, Sequence

from rootsolve.expression import parse_function
from rootsolve.solve import ConfigurationError, Method, SolverConfig

_log = logging.getLogger(__name__)

POSITIONAL_FIELDS = ('method', 'tolerance', 'max_iterations', 'aitken',
                     'function', 'derivative', 'initial_point',
                     'final_point', 'function_g', 'initial_guess')

_TRUE_STR = ('1', 'true', 'yes', 'y')
_FALSE_STR = ('0', 'false', 'no', 'n')


# ======================================================================

class ReaderError(ConfigurationError):
    """
    A configuration file could not be read, or a field is missing or
    malformed.
    """
    pass


# ----------------------------------------------------------------------

def config_from_map(fields: Mapping[str, str]) -> SolverConfig:
    """
    Build a `SolverConfig` from a mapping of field names to string
    values.

    Required fields are ``method`` and ``function``, plus:

    - bisection, chords: ``initial_point``, ``final_point``.
    - newton: ``initial_guess``, ``derivative``.
    - fixed point: ``initial_guess``, ``function_g``.

    Optional fields ``tolerance``, ``max_iterations``, ``aitken`` and
    ``verbose`` take their defaults from `get_solver_options` when
    absent.  Empty values count as absent.

    Raises
    ------
    ReaderError
        If a field is missing or cannot be converted.
    ParseError
        If a function string cannot be parsed.
    ConfigurationError
        If the resulting values are illegal (e.g. ``tolerance <= 0``).
    """
    fields = {k.strip().lower(): v.strip() for k, v in fields.items()
              if v is not None and v.strip()}

    try:
        method = Method.from_str(_required(fields, 'method'))
    except ReaderError:
        raise
    except ConfigurationError as e:
        raise ReaderError(str(e)) from e

    kwargs = {
        'function': parse_function(_required(fields, 'function')),
        'tolerance': _optional(fields, 'tolerance', float),
        'max_iterations': _optional(fields, 'max_iterations', int),
        'aitken': _optional(fields, 'aitken', parse_bool),
        'verbose': _optional(fields, 'verbose', parse_bool),
    }

    match method:
        case Method.BISECTION | Method.CHORDS:
            kwargs['start'] = (_required(fields, 'initial_point', float),
                               _required(fields, 'final_point', float))

        case Method.NEWTON:
            kwargs['start'] = _required(fields, 'initial_guess', float)
            kwargs['derivative'] = parse_function(
                _required(fields, 'derivative'))

        case Method.FIXED_POINT:
            kwargs['start'] = _required(fields, 'initial_guess', float)
            kwargs['g_function'] = parse_function(
                _required(fields, 'function_g'))

    _log.debug("Configuration fields: %s", fields)
    return SolverConfig(method=method, **kwargs)


def read_csv(path: str | os.PathLike, *, sep: str = ',', quote: str = '"',
             has_header: bool = True,
             headers: Sequence[str] = None) -> SolverConfig:
    """
    Read a solver configuration from a CSV file.

    Parameters
    ----------
    path : str or PathLike
        File to read.
    sep : str, default = ','
        Field separator.
    quote : str, default = '"'
        Quote character.  Quoted fields may contain `sep`; a doubled
        quote inside a quoted field is a literal quote.
    has_header : bool, default = True
        If `True` the first row gives the field names and the second
        row the values.  Otherwise the first row holds the values.
    headers : Sequence[str], optional
        Field names to use when ``has_header=False``.  If omitted, the
        values are taken in the order of `POSITIONAL_FIELDS`.

    Raises
    ------
    ReaderError
        If the file cannot be opened, rows are missing or the number of
        names and values differ.  See also `config_from_map`.
    """
    try:
        with open(path, newline='') as f:
            rows = [row for row in csv.reader(f, delimiter=sep,
                                              quotechar=quote)
                    if any(cell.strip() for cell in row)]
    except OSError as e:
        raise ReaderError(f"Failed to open file: {path}") from e

    if has_header:
        if len(rows) < 2:
            raise ReaderError(f"'{path}' needs a header row and a value "
                              f"row.")
        names, values = rows[0], rows[1]
    else:
        if not rows:
            raise ReaderError(f"'{path}' is empty.")
        values = rows[0]
        names = list(headers) if headers else None

    if names is None:
        fields = dict(zip(POSITIONAL_FIELDS, values))
    elif len(names) != len(values):
        raise ReaderError(f"'{path}' has {len(names)} field names but "
                          f"{len(values)} values.")
    else:
        fields = dict(zip(names, values))

    _log.info("Read configuration from CSV file '%s'.", path)
    return config_from_map(fields)


def read_dat(path: str | os.PathLike) -> SolverConfig:
    """
    Read a solver configuration from a DAT file of ``key = value``
    lines.  Later keys replace earlier ones.

    Raises
    ------
    ReaderError
        If the file cannot be opened or a line has no ``=``.  See also
        `config_from_map`.
    """
    fields = {}
    try:
        with open(path) as f:
            for lineno, line in enumerate(f, start=1):
                line = line.strip()
                if not line or line.startswith('#'):
                    continue

                key, eq, value = line.partition('=')
                if not eq:
                    raise ReaderError(f"Malformed line {lineno} in "
                                      f"'{path}' (no '=').")
                fields[key.strip().lower()] = value.strip()

    except OSError as e:
        raise ReaderError(f"Failed to open file: {path}") from e

    _log.info("Read configuration from DAT file '%s'.", path)
    return config_from_map(fields)


# ----------------------------------------------------------------------

def parse_bool(s: str) -> bool:
    """
    Convert a flag string such as 'yes', 'n', 'true' or '0' to `bool`.

    Raises
    ------
    ValueError
        If `s` is not recognised.
    """
    s_lower = s.strip().lower()
    if s_lower in _TRUE_STR:
        return True
    if s_lower in _FALSE_STR:
        return False
    raise ValueError(f"Invalid boolean value '{s}'.")


def _required(fields: Mapping[str, str], name: str, convert=str):
    try:
        value = fields[name]
    except KeyError:
        raise ReaderError(f"Required field '{name}' missing.")
    return _convert(name, value, convert)


def _optional(fields: Mapping[str, str], name: str, convert):
    if name not in fields:
        return None
    return _convert(name, fields[name], convert)


def _convert(name: str, value: str, convert):
    try:
        return convert(value)
    except ValueError:
        raise ReaderError(f"Invalid {name}: '{value}'.")
