"""
Command line front end.  A problem is read from a CSV or DAT file, or
given directly as options, then solved and the trace written to the
console or files::

    rootsolve csv --file problem.csv
    rootsolve --write-to-csv out cli -f "x^2 - 4" newton --initial 1 \\
        --derivative "2x"
    rootsolve cli -f "x^2 - 3x + 2" -a iterative --initial 0.5 \\
        --g-function "0.25x^2 + 0.25x + 0.5"

`main` returns the exit status: 0 if the solve converged, 1 if it did
not converge or the solver failed and 2 for bad options, configuration
files or expressions.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field, replace

import click

from rootsolve import __version__
from rootsolve.expression import ParseError, parse_function
from rootsolve.io import (ConsoleWriter, CSVWriter, DATWriter, GnuplotWriter,
                          TraceWriter, read_csv, read_dat)
from rootsolve.solve import (ConfigurationError, Method, Solver,
                             SolverConfig, SolverError)

_log = logging.getLogger(__name__)

EXIT_CONVERGED, EXIT_FAILED, EXIT_BAD_INPUT = 0, 1, 2


# ======================================================================

@dataclass
class _CLIState:
    verbose: bool = False
    writers: list[TraceWriter] = field(default_factory=list)
    problem: dict = field(default_factory=dict)


def main(argv: Sequence[str] = None) -> int:
    """
    Run the command line with arguments `argv` (default
    ``sys.argv[1:]``) and return the exit status.  Errors are reported
    on stderr and never terminate the process.
    """
    try:
        status = rootsolve_cli.main(args=argv, prog_name='rootsolve',
                                    standalone_mode=False)

    except click.ClickException as e:
        e.show()
        return e.exit_code

    except click.Abort:
        click.echo("Aborted!", err=True)
        return EXIT_FAILED

    except (ParseError, ConfigurationError) as e:
        _log.debug("Bad input.", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        return EXIT_BAD_INPUT

    except SolverError as e:
        click.echo(f"Error: {e}", err=True)
        return EXIT_FAILED

    # --help and --version give None.
    return EXIT_CONVERGED if status is None else status


# ----------------------------------------------------------------------

@click.group(context_settings={'help_option_names': ['-h', '--help']})
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Print each iteration and log progress to stderr.",
)
@click.option(
    "--write-to-csv",
    metavar="NAME",
    help="Write the trace to NAME.csv.",
)
@click.option(
    "--write-to-dat",
    metavar="NAME",
    help="Write the trace to NAME.dat.",
)
@click.option(
    "--write-with-gnuplot",
    metavar="NAME",
    help="Write NAME.dat and a Gnuplot script NAME.plt, then run gnuplot "
         "if available.",
)
@click.option(
    "--append",
    is_flag=True,
    help="Append to existing output files instead of replacing them.",
)
@click.version_option(version=__version__, prog_name='rootsolve')
@click.pass_context
def rootsolve_cli(ctx: click.Context, verbose: bool,
                  write_to_csv: str | None, write_to_dat: str | None,
                  write_with_gnuplot: str | None, append: bool):
    """
    Find a root of a polynomial or trigonometric function of x.  If no
    output file is given, the trace is printed to the console.
    """
    if verbose:
        logging.basicConfig(level=logging.INFO,
                            format='%(levelname)s:%(name)s: %(message)s')

    overwrite = not append
    writers = []
    if write_to_csv:
        writers.append(CSVWriter(write_to_csv, overwrite=overwrite))
    if write_to_dat:
        writers.append(DATWriter(write_to_dat, overwrite=overwrite))
    if write_with_gnuplot:
        writers.append(GnuplotWriter(write_with_gnuplot,
                                     overwrite=overwrite))
    if not writers:
        writers.append(ConsoleWriter())

    ctx.obj = _CLIState(verbose=verbose, writers=writers)


# -- Configuration Files -----------------------------------------------

@rootsolve_cli.command('csv')
@click.option(
    "--file",
    "path",
    required=True,
    help="CSV configuration file.",
    type=click.Path(exists=True, dir_okay=False),
)
@click.option(
    "--sep",
    default=',',
    show_default=True,
    help="Field separator.",
)
@click.option(
    "--no-header",
    is_flag=True,
    help="The file holds a single row of values in positional order.",
)
@click.pass_obj
def csv_cmd(state: _CLIState, path: str, sep: str, no_header: bool) -> int:
    """Solve the problem given in a CSV file."""
    return _solve(state, read_csv(path, sep=sep, has_header=not no_header))


@rootsolve_cli.command('dat')
@click.option(
    "--file",
    "path",
    required=True,
    help="DAT configuration file of 'key = value' lines.",
    type=click.Path(exists=True, dir_okay=False),
)
@click.pass_obj
def dat_cmd(state: _CLIState, path: str) -> int:
    """Solve the problem given in a DAT file."""
    return _solve(state, read_dat(path))


# -- Direct Options ----------------------------------------------------

@rootsolve_cli.group('cli')
@click.option(
    "--function",
    "-f",
    "func_str",
    required=True,
    help="Target function f(x), e.g. \"x^3 - 2x + 1\".",
)
@click.option(
    "--aitken",
    "-a",
    is_flag=True,
    help="Apply Aitken acceleration.",
)
@click.option(
    "--tolerance",
    "-t",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Convergence tolerance.",
)
@click.option(
    "--max-iterations",
    "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Iteration limit.",
)
@click.pass_obj
def cli_cmd(state: _CLIState, func_str: str, aitken: bool,
            tolerance: float | None, max_iterations: int | None):
    """Solve a problem given by command line options."""
    state.problem = {
        'function': parse_function(func_str),
        'aitken': True if aitken else None,
        'tolerance': tolerance,
        'max_iterations': max_iterations,
    }


@cli_cmd.command('newton')
@click.option("--initial", type=float, required=True, help="Initial guess.")
@click.option("--derivative", required=True, help="Derivative f'(x).")
@click.pass_obj
def newton_cmd(state: _CLIState, initial: float, derivative: str) -> int:
    """Newton-Raphson method."""
    return _solve(state, SolverConfig(
        method=Method.NEWTON, start=initial,
        derivative=parse_function(derivative), **state.problem))


@cli_cmd.command('secant')
@click.option("--x0", type=float, required=True, help="First point.")
@click.option("--x1", type=float, required=True, help="Second point.")
@click.pass_obj
def secant_cmd(state: _CLIState, x0: float, x1: float) -> int:
    """Chords (secant) method."""
    return _solve(state, SolverConfig(
        method=Method.CHORDS, start=(x0, x1), **state.problem))


@cli_cmd.command('iterative')
@click.option("--initial", type=float, required=True, help="Initial guess.")
@click.option("--g-function", "g_str", required=True,
              help="Iteration function g(x) with g(x) = x at the root.")
@click.pass_obj
def iterative_cmd(state: _CLIState, initial: float, g_str: str) -> int:
    """Fixed point iteration."""
    return _solve(state, SolverConfig(
        method=Method.FIXED_POINT, start=initial,
        g_function=parse_function(g_str), **state.problem))


@cli_cmd.command('bisection')
@click.option("--interval-a", type=float, required=True,
              help="Start of the interval.")
@click.option("--interval-b", type=float, required=True,
              help="End of the interval.")
@click.pass_obj
def bisection_cmd(state: _CLIState, interval_a: float,
                  interval_b: float) -> int:
    """Bisection method."""
    return _solve(state, SolverConfig(
        method=Method.BISECTION, start=(interval_a, interval_b),
        **state.problem))


# ----------------------------------------------------------------------

def _solve(state: _CLIState, config: SolverConfig) -> int:
    if state.verbose:
        config = replace(config, verbose=True)

    result = Solver(config).solve()
    for writer in state.writers:
        writer.write(result.trace)

    result.raise_for_outcome()
    return EXIT_CONVERGED
