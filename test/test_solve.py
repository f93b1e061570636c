from math import cos, sqrt
from unittest import TestCase


class TestBisectRoot(TestCase):
    def test_bisect_root(self):
        from rootsolve.solve import bisect_root

        def f(g):
            return g ** 2 - g - 1

        exact = 1.618033988749895

        # Normal operation.
        x = bisect_root(f, 1.0, 2.0, tol=1e-12)
        self.assertAlmostEqual(x, exact, places=10)

        # Failure to converge.
        with self.assertRaises(RuntimeError):
            bisect_root(f, 1.0, 2.0, maxits=10, tol=1e-15)

    def test_bisect_root_bracket(self):
        from rootsolve.solve import ConfigurationError, bisect_root

        # No change of sign.
        with self.assertRaises(ConfigurationError):
            bisect_root(lambda x: x ** 2 + 1, -1.0, 1.0)

        # Midpoint is the exact root.
        self.assertEqual(bisect_root(lambda x: x ** 2 - 1, 0.0, 2.0), 1.0)


class TestNewton(TestCase):
    def test_newton(self):
        from rootsolve.solve import DivisionByZeroError, newton

        x = newton(lambda x: x ** 2 - 4, lambda x: 2 * x, -1.0)
        self.assertAlmostEqual(x, -2.0, places=7)

        x = newton(lambda x: x ** 3 - 2 * x - 5, lambda x: 3 * x ** 2 - 2,
                   2.0, tol=1e-12)
        self.assertAlmostEqual(x, 2.0945514815423265, places=10)

        # Zero derivative at the starting point.
        with self.assertRaises(DivisionByZeroError) as cm:
            newton(lambda x: x ** 3 - 3, lambda x: 3 * x ** 2, 0.0)
        self.assertEqual(cm.exception.flag, 2)
        self.assertEqual(cm.exception.iteration, 1)

    def test_newton_full_output(self):
        from rootsolve.solve import Method, Outcome, newton

        result = newton(lambda x: x ** 2 - 4, lambda x: 2 * x, 1.0,
                        full_output=True)
        self.assertIs(result.outcome, Outcome.CONVERGED)
        self.assertIs(result.method, Method.NEWTON)
        self.assertEqual(len(result.trace), result.iterations + 1)
        self.assertEqual(result.trace[0], (1.0, -3.0))
        self.assertEqual(result.trace[1], (2.5, 2.25))


class TestChords(TestCase):
    def test_chords(self):
        from rootsolve.solve import DivisionByZeroError, chords

        x = chords(lambda x: x ** 2 - 2, 1.0, 2.0, tol=1e-12)
        self.assertAlmostEqual(x, sqrt(2), places=10)

        # Equal function values at both starting points.
        with self.assertRaises(DivisionByZeroError):
            chords(lambda x: x ** 2 - 4, 1.0, 1.0)

        with self.assertRaises(DivisionByZeroError):
            chords(lambda x: x ** 2 - 4, -1.0, 1.0)


class TestFixedPoint(TestCase):
    def test_fixed_point(self):
        from rootsolve.solve import MaxIterationsError, fixed_point

        x = fixed_point(lambda x: x - cos(x), cos, 0.5, tol=1e-10)
        self.assertAlmostEqual(x, 0.7390851332151607, places=8)

        # g(x) = 2x + 3 moves away from its fixed point at x = -3.
        with self.assertRaises(MaxIterationsError) as cm:
            fixed_point(lambda x: -x - 3, lambda x: 2 * x + 3, 0.0,
                        maxits=20)
        self.assertEqual(cm.exception.flag, 1)
        self.assertIn("20 iterations", cm.exception.details)

    def test_fixed_point_aitken(self):
        from rootsolve.solve import fixed_point

        plain = fixed_point(lambda x: x - cos(x), cos, 0.5,
                            full_output=True)
        fast = fixed_point(lambda x: x - cos(x), cos, 0.5, aitken=True,
                           full_output=True)

        self.assertTrue(plain.converged)
        self.assertTrue(fast.converged)
        self.assertAlmostEqual(fast.root, 0.7390851332151607, places=6)
        self.assertLess(fast.iterations, plain.iterations)
