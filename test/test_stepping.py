from math import cos
from unittest import TestCase

import pytest


# ============================================================================

class TestRawStep(TestCase):
    def test_bisection(self):
        from rootsolve.solve import Iterate
        from rootsolve.solve.stepping import BisectionStepper, raw_step

        def f(x):
            return x ** 2 - 2

        stepper = BisectionStepper(0.0, 2.0, f(0.0), f(2.0))
        it = raw_step(stepper, f, Iterate(2.0, 2.0))
        self.assertEqual(it, (1.0, -1.0))
        self.assertEqual((stepper.left, stepper.right), (1.0, 2.0))

        it = raw_step(stepper, f, it)
        self.assertEqual(it, (1.5, 0.25))
        self.assertEqual((stepper.left, stepper.right), (1.0, 1.5))

        # Bracket always contains the sign change.
        for _ in range(20):
            raw_step(stepper, f, it)
            self.assertLess(stepper.f_left * stepper.f_right, 0)
            self.assertLessEqual(stepper.left, stepper.right)

    def test_newton(self):
        from rootsolve.solve import DivisionByZeroError, Iterate
        from rootsolve.solve.stepping import NewtonStepper, raw_step

        def f(x):
            return x ** 2 - 4

        stepper = NewtonStepper(lambda x: 2 * x)
        self.assertEqual(raw_step(stepper, f, Iterate(1.0, -3.0)),
                         (2.5, 2.25))

        with self.assertRaises(DivisionByZeroError) as cm:
            raw_step(stepper, f, Iterate(0.0, -4.0))
        self.assertEqual(cm.exception.x, 0.0)

    def test_chords(self):
        from rootsolve.solve import DivisionByZeroError, Iterate
        from rootsolve.solve.stepping import ChordsStepper, raw_step

        def f(x):
            return x ** 2 - 4

        stepper = ChordsStepper(0.0, 3.0, f(0.0), f(3.0))
        it = raw_step(stepper, f, Iterate(3.0, 5.0))
        self.assertAlmostEqual(it.x, 3.0 - 5.0 * 3.0 / 9.0, places=15)
        self.assertEqual(it.f_x, f(it.x))

        # Window shifted.
        self.assertEqual((stepper.p_prev, stepper.f_prev), (3.0, 5.0))
        self.assertEqual((stepper.p_cur, stepper.f_cur), it)

        stepper = ChordsStepper(-1.0, 1.0, -3.0, -3.0)
        with self.assertRaises(DivisionByZeroError):
            raw_step(stepper, f, Iterate(1.0, -3.0))

    def test_fixed_point(self):
        from rootsolve.solve import Iterate
        from rootsolve.solve.stepping import FixedPointStepper, raw_step

        def f(x):
            return x - cos(x)

        it = raw_step(FixedPointStepper(cos), f, Iterate(0.5, f(0.5)))
        self.assertEqual(it.x, cos(0.5))
        self.assertEqual(it.f_x, f(cos(0.5)))  # f, not g.


# ----------------------------------------------------------------------------

class TestAitkenStep(TestCase):
    def test_accelerated(self):
        from rootsolve.solve import Iterate
        from rootsolve.solve.stepping import FixedPointStepper, aitken_step

        def f(x):
            return x - cos(x)

        it = aitken_step(FixedPointStepper(cos), f, Iterate(0.5, f(0.5)))

        x1, x2 = cos(0.5), cos(cos(0.5))
        x_acc = x2 - (x2 - x1) ** 2 / (x2 - 2 * x1 + 0.5)
        self.assertEqual(it, (x_acc, f(x_acc)))

    def test_zero_denominator(self):
        from rootsolve.solve import DivisionByZeroError, Iterate
        from rootsolve.solve.stepping import FixedPointStepper, aitken_step

        # Equally spaced x0, x1, x2.
        with self.assertRaises(DivisionByZeroError):
            aitken_step(FixedPointStepper(lambda x: x + 1),
                        lambda x: -1.0, Iterate(0.0, -1.0))

    def test_stalled(self):
        from rootsolve.solve import Iterate
        from rootsolve.solve.stepping import FixedPointStepper, aitken_step

        it = aitken_step(FixedPointStepper(lambda x: 3.0), lambda x: 1.0,
                         Iterate(0.0, 1.0))
        self.assertEqual(it, (3.0, 1.0))

    def test_exact_root(self):
        from rootsolve.solve import Iterate
        from rootsolve.solve.stepping import NewtonStepper, aitken_step

        it = aitken_step(NewtonStepper(lambda x: 1.0), lambda x: x - 2,
                         Iterate(0.0, -2.0))
        self.assertEqual(it, (2.0, 0.0))

    def test_chords_window(self):
        from rootsolve.solve import Iterate
        from rootsolve.solve.stepping import ChordsStepper, aitken_step

        def f(x):
            return x ** 2 - 4

        stepper = ChordsStepper(1.0, 3.0, f(1.0), f(3.0))
        it = aitken_step(stepper, f, Iterate(3.0, 5.0))
        self.assertEqual((stepper.p_cur, stepper.f_cur), it)


# ----------------------------------------------------------------------------

class TestMakeStepper(TestCase):
    def test_bisection_bracket(self):
        from rootsolve.solve import ConfigurationError, Method, SolverConfig
        from rootsolve.solve.stepping import BisectionStepper, make_stepper

        cfg = SolverConfig(method=Method.BISECTION,
                           function=lambda x: x ** 2 + 1, start=(-1.0, 1.0))
        with self.assertRaises(ConfigurationError):
            make_stepper(cfg)

        # A zero at an end point counts as a sign change.
        cfg = SolverConfig(method=Method.BISECTION,
                           function=lambda x: x ** 2 - 1, start=(1.0, 2.0))
        self.assertIsInstance(make_stepper(cfg), BisectionStepper)


@pytest.mark.parametrize("method, start, expected", [
    ('bisection', (0.0, 2.0), (2.0, 3.0)),
    ('chords', (0.0, 2.0), (2.0, 3.0)),
    ('newton', 0.5, (0.5, -0.75)),
    ('fixed_point', 0.5, (0.5, -0.75)),
])
def test_start_iterate(method, start, expected):
    from rootsolve.solve import SolverConfig
    from rootsolve.solve.stepping import make_stepper, start_iterate

    def f(x):
        return x ** 2 - 1

    cfg = SolverConfig(method=method, function=f, start=start,
                       derivative=lambda x: 2 * x, g_function=lambda x: x)
    assert start_iterate(make_stepper(cfg), f, cfg.start) == expected
