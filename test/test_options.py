from unittest import TestCase


class TestSolverOptions(TestCase):
    def tearDown(self):
        from rootsolve.solve import set_solver_options
        set_solver_options(tolerance=1e-7, max_iterations=100, aitken=False,
                           verbose=False)

    def test_defaults(self):
        from rootsolve.solve import get_solver_options

        opts = get_solver_options()
        self.assertEqual(opts.tolerance, 1e-7)
        self.assertEqual(opts.max_iterations, 100)
        self.assertFalse(opts.aitken)
        self.assertFalse(opts.verbose)

    def test_set_options(self):
        from rootsolve.solve import (Method, SolverConfig,
                                     get_solver_options, set_solver_options)

        set_solver_options(tolerance=1e-3, max_iterations=5, aitken=True)
        opts = get_solver_options()
        self.assertEqual(opts.tolerance, 1e-3)
        self.assertEqual(opts.max_iterations, 5)

        # Used for values not given explicitly.
        cfg = SolverConfig(method=Method.NEWTON, function=lambda x: x,
                           start=1.0, max_iterations=7)
        self.assertEqual(cfg.tolerance, 1e-3)
        self.assertEqual(cfg.max_iterations, 7)
        self.assertTrue(cfg.aitken)

    def test_illegal_options(self):
        from rootsolve.solve import get_solver_options, set_solver_options

        with self.assertRaises(ValueError):
            set_solver_options(tolerance=-1.0)
        with self.assertRaises(ValueError):
            set_solver_options(max_iterations=0)
        with self.assertRaises(TypeError):
            set_solver_options(ftol=1e-3)

        # Unchanged.
        self.assertEqual(get_solver_options().tolerance, 1e-7)
        self.assertEqual(get_solver_options().max_iterations, 100)
