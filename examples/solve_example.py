#!usr/bin/env python3

# Examples comparing root finding methods, with and without Aitken
# acceleration, on the same function.

import matplotlib.pyplot as plt

from rootsolve import Method, Solver, SolverConfig, parse_function
from rootsolve.io import plot_trace

f = parse_function('x^3 - 2x - 5')
df = parse_function('3x^2 - 2')

problems = {
    'Bisection': dict(method=Method.BISECTION, start=(2.0, 3.0)),
    'Newton-Raphson': dict(method=Method.NEWTON, start=3.0, derivative=df),
    'Chords': dict(method=Method.CHORDS, start=(2.0, 3.0)),
}

# ----------------------------------------------------------------------

fig, axes = plt.subplots(2, len(problems), figsize=(12, 7))
for col, (name, kwargs) in enumerate(problems.items()):
    for row, aitken in enumerate((False, True)):
        result = Solver(SolverConfig(function=f, tolerance=1e-12,
                                     aitken=aitken, verbose=True,
                                     **kwargs)).solve()
        print(f"{name} (Aitken = {aitken}): x = {result.root:.15f} after "
              f"{result.iterations} iterations.\n")

        ax = plot_trace(result.trace, f, ax=axes[row, col])
        ax.set_title(f"{name}{' + Aitken' if aitken else ''}")

fig.tight_layout()
plt.show()
