from unittest import TestCase


# ======================================================================

class TestSolverError(TestCase):
    def test_solver_error(self):
        from pyrelax.solve import SolverError

        err = SolverError("solver failed:", flag=2, details="Bad start.",
                          x=1.5)
        self.assertIsInstance(err, RuntimeError)
        self.assertEqual(err.flag, 2)
        self.assertEqual(err.x, 1.5)
        self.assertEqual(str(err), "solver failed:\nflag -> 2\n"
                                   "details -> Bad start.\nx -> 1.5")

    def test_solver_error_no_extras(self):
        from pyrelax.solve import SolverError

        self.assertEqual(str(SolverError("failed")), "failed")


# ----------------------------------------------------------------------

class TestIterationError(TestCase):
    def test_kinds(self):
        from pyrelax.solve import ErrorKind

        self.assertEqual([k.name for k in ErrorKind],
                         ['MAXIMAL_ITERATION', 'INTERNAL_ERROR',
                          'NOT_VALID_VALUE', 'INVALID_INPUT'])
        for k in ErrorKind:
            self.assertTrue(k.description)

    def test_iteration_error(self):
        from pyrelax.solve import ErrorKind, IterationError, SolverError

        err = IterationError(ErrorKind.MAXIMAL_ITERATION, "Too many.",
                             last_precision=0.0123456)
        self.assertIsInstance(err, SolverError)
        self.assertIs(err.kind, ErrorKind.MAXIMAL_ITERATION)
        self.assertEqual(err.flag, 1)
        self.assertEqual(err.details,
                         ErrorKind.MAXIMAL_ITERATION.description)
        self.assertEqual(str(err).splitlines(), [
            "Too many.",
            "flag -> 1",
            f"details -> {ErrorKind.MAXIMAL_ITERATION.description}",
            "kind -> MAXIMAL_ITERATION",
            "last_precision -> 1.235e-02"])

    def test_iteration_error_from_int(self):
        from pyrelax.solve import ErrorKind, IterationError

        err = IterationError(4, "Bad input.")
        self.assertIs(err.kind, ErrorKind.INVALID_INPUT)
        self.assertIsNone(err.last_precision)
        self.assertNotIn("last_precision", str(err))
