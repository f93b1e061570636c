"""
===========================================
Expressions (:mod:`rootsolve.expression`)
===========================================

.. currentmodule:: rootsolve.expression

Conversion of simple formula strings into callable functions of `x`.
Two kinds of expression are supported, each a sum of signed terms:

- Polynomial: terms like ``3*x^2``, ``2.5x``, ``x``, ``-4``.
- Trigonometric: terms like ``2*sin(x)``, ``cos(x)``, ``-0.5cos(x)``.

Polynomial and trigonometric terms cannot be mixed in one expression,
and there is no nesting of parentheses.  Matching ignores case and all
whitespace.

.. autosummary::
    :toctree:

    parse_function
    is_polynomial
    is_trigonometric
    ParsedFunction
    Term
    ParseError
    UnsupportedExpression
    UnsupportedToken
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike

_log = logging.getLogger(__name__)

_NUMBER = r'(?:\d+(?:\.\d*)?|\.\d+)'
_POLY_TERM = re.compile(rf'^({_NUMBER})?\*?x(?:\^(\d+))?$', re.IGNORECASE)
_CONST_TERM = re.compile(rf'^({_NUMBER})$')
_TRIG_TERM = re.compile(rf'^({_NUMBER})?\*?(sin|cos)\(x\)$', re.IGNORECASE)


# ======================================================================

class ParseError(ValueError):
    """Base class for errors converting a string to a function."""

    def __init__(self, msg: str, expression: str = None):
        super().__init__(msg)
        self.expression = expression


class UnsupportedExpression(ParseError):
    """The expression is neither polynomial nor trigonometric."""
    pass


class UnsupportedToken(ParseError):
    """
    A term of the expression does not match the term grammar.  The
    offending term is available as attribute `token`.
    """

    def __init__(self, token: str, expression: str = None):
        super().__init__(f"Unsupported token '{token}' in expression "
                         f"'{expression}'.", expression)
        self.token = token


# ----------------------------------------------------------------------

@dataclass(frozen=True)
class Term:
    """
    One additive term: ``coeff * x^power`` (``kind='poly'``) or
    ``coeff * sin(x)`` / ``coeff * cos(x)``.
    """
    coeff: float
    kind: str = 'poly'
    power: int = 0

    def __call__(self, x: np.ndarray) -> np.ndarray:
        if self.kind == 'sin':
            return self.coeff * np.sin(x)
        elif self.kind == 'cos':
            return self.coeff * np.cos(x)
        else:
            return self.coeff * np.power(x, self.power)


class ParsedFunction:
    """
    Callable sum of `Term` objects produced by `parse_function`.  Scalar
    input gives a `float`, array input is evaluated element-wise.

    Examples
    --------
    >>> f = parse_function('2x^2 - 3')
    >>> f(2.0)
    5.0
    >>> f([0, 1])
    array([-3., -1.])
    """

    def __init__(self, expression: str, terms: list[Term]):
        self.expression = expression
        self.terms = tuple(terms)

    def __call__(self, x: ArrayLike) -> float | np.ndarray:
        x = np.asarray(x, dtype=float)
        with np.errstate(over='ignore', invalid='ignore'):
            total = sum((term(x) for term in self.terms),
                        start=np.zeros_like(x))
        return float(total) if total.ndim == 0 else total

    def __repr__(self):
        return f"ParsedFunction('{self.expression}')"


# ======================================================================

def is_polynomial(expression: str) -> bool:
    """
    `True` if `expression` contains the variable `x` but no `sin` or
    `cos` (ignoring case).
    """
    expr = expression.lower()
    return 'x' in expr and 'sin' not in expr and 'cos' not in expr


def is_trigonometric(expression: str) -> bool:
    """`True` if `expression` contains `sin` or `cos` (ignoring case)."""
    expr = expression.lower()
    return 'sin' in expr or 'cos' in expr


def parse_function(expression: str) -> ParsedFunction:
    """
    Convert a polynomial or trigonometric formula string to a function
    of `x`.

    Parameters
    ----------
    expression : str
        Sum of signed terms (see module description).  Whitespace is
        ignored.

    Returns
    -------
    ParsedFunction
        Function returning the sum of all terms at `x`.

    Raises
    ------
    UnsupportedExpression
        If `expression` is neither polynomial nor trigonometric.
    UnsupportedToken
        If any term does not match the grammar for the expression type.
        No partial function is returned.

    Examples
    --------
    >>> f = parse_function('x^3 - 2*x + 1')
    >>> f(2.0)
    5.0
    >>> g = parse_function('3sin(x) - cos(x)')
    >>> g(0.0)
    -1.0
    """
    expr = ''.join(expression.split())

    if is_polynomial(expr):
        kind, parse_term = 'polynomial', _parse_poly_term
    elif is_trigonometric(expr):
        kind, parse_term = 'trigonometric', _parse_trig_term
    else:
        raise UnsupportedExpression(f"Unsupported function type: "
                                    f"'{expression}'.", expression)

    terms = []
    for token in split_terms(expr):
        term = parse_term(token)
        if term is None:
            raise UnsupportedToken(token, expr)
        terms.append(term)

    _log.debug("Parsed '%s' as %s with %d term(s).", expr, kind, len(terms))
    return ParsedFunction(expr, terms)


def split_terms(expr: str) -> list[str]:
    """
    Split `expr` into signed terms.  Every ``+`` or ``-`` after the
    first character starts a new term.

    Examples
    --------
    >>> split_terms('-3x^2+x-4')
    ['-3x^2', '+x', '-4']
    """
    if not expr:
        return []

    starts = [0] + [i for i in range(1, len(expr)) if expr[i] in '+-']
    ends = starts[1:] + [len(expr)]
    return [expr[i:j] for i, j in zip(starts, ends)]


# ----------------------------------------------------------------------

def _split_sign(token: str) -> tuple[float, str]:
    # Strip a single leading sign.
    if token[:1] == '-':
        return -1.0, token[1:]
    elif token[:1] == '+':
        return 1.0, token[1:]
    return 1.0, token


def _parse_poly_term(token: str) -> Term | None:
    sign, body = _split_sign(token)

    if match := _POLY_TERM.match(body):
        coeff = float(match[1]) if match[1] else 1.0
        power = int(match[2]) if match[2] else 1
        return Term(sign * coeff, 'poly', power)

    if match := _CONST_TERM.match(body):
        return Term(sign * float(match[1]), 'poly', 0)

    return None


def _parse_trig_term(token: str) -> Term | None:
    sign, body = _split_sign(token)

    if match := _TRIG_TERM.match(body):
        coeff = float(match[1]) if match[1] else 1.0
        return Term(sign * coeff, match[2].lower())

    return None
