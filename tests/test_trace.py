import numpy as np

from unittest import TestCase, mock

from cyclovander.errors import InvalidInputError, InversionError, PrecisionError
from cyclovander.gram import build_gram
from cyclovander.trace import (
    h_matrix,
    h_residual,
    integrality_tolerance,
    trace_of_h,
    trace_tolerance,
)
from cyclovander.utils.ntheory import phi


class TestGram(TestCase):

    def test_shape(self):
        for n in [1, 7, 12, 30]:
            self.assertEqual(build_gram(n).shape, (phi(n), phi(n)))

    def test_symmetric_toeplitz(self):
        gram = build_gram(60)
        self.assertTrue(np.array_equal(gram, gram.T))
        m = gram.shape[0]
        for i in range(m):
            for j in range(m):
                self.assertEqual(gram[i, j], gram[0, abs(j - i)])

    def test_prime_gram(self):
        gram = build_gram(5)
        expected = np.array([
            [4., -1., -1., -1.],
            [-1., 4., -1., -1.],
            [-1., -1., 4., -1.],
            [-1., -1., -1., 4.],
        ])
        self.assertTrue(np.array_equal(gram, expected))

    def test_float_entries(self):
        self.assertEqual(build_gram(9).dtype, np.float64)


class TestTrace(TestCase):

    def test_h_one(self):
        self.assertTrue(np.allclose(h_matrix(1), [[1.]]))
        self.assertEqual(trace_of_h(1), 1)

    def test_h_three(self):
        self.assertTrue(np.allclose(h_matrix(3), [[2., 1.], [1., 2.]]))

    def test_primes(self):
        for p in [2, 3, 5, 7, 13, 31]:
            self.assertEqual(trace_of_h(p), 2 * (p - 1))

    def test_residual_within_tolerance(self):
        for n in [11, 25, 27, 49, 105, 259]:
            self.assertLessEqual(h_residual(n), integrality_tolerance(n))

    def test_tolerance_loosens(self):
        self.assertLess(integrality_tolerance(11), integrality_tolerance(101))
        self.assertLess(integrality_tolerance(101), integrality_tolerance(1009))

    def test_strict_matches_plain(self):
        for n in [15, 105, 121, 1155, 2310]:
            self.assertEqual(trace_of_h(n, strict=True), trace_of_h(n))

    def test_residual_near_validity_bound(self):
        self.assertLessEqual(h_residual(4620), integrality_tolerance(4620))
        self.assertEqual(trace_of_h(4620, strict=True), trace_of_h(4620))

    def test_trace_tolerance_covers_diagonal(self):
        for n in [11, 1155]:
            self.assertEqual(trace_tolerance(n), phi(n) * integrality_tolerance(n))

    def test_rounds_to_nearest(self):
        with mock.patch('cyclovander.trace.h_matrix', return_value=np.diag([10.0, 9.999999])):
            self.assertEqual(trace_of_h(11), 20)

    def test_strict_rejects_drift(self):
        with mock.patch('cyclovander.trace.h_matrix', return_value=np.diag([10.0, 10.4])):
            self.assertEqual(trace_of_h(11), 20)
            with self.assertRaises(PrecisionError):
                trace_of_h(11, strict=True)

    def test_singular(self):
        err = np.linalg.LinAlgError('Singular matrix')
        with mock.patch('numpy.linalg.inv', side_effect=err):
            with self.assertRaises(InversionError):
                trace_of_h(7)

    def test_not_finite(self):
        with mock.patch('numpy.linalg.inv', return_value=np.full((6, 6), np.nan)):
            with self.assertRaises(InversionError):
                h_matrix(7)

    def test_negative_trace(self):
        with mock.patch('cyclovander.trace.h_matrix', return_value=np.diag([-1.0, -2.0])):
            with self.assertRaises(InversionError):
                trace_of_h(11)

    def test_zero(self):
        with self.assertRaises(InvalidInputError):
            trace_of_h(0)
        with self.assertRaises(InvalidInputError):
            h_matrix(0)
