import unittest

import numpy as np

from lagrangefe.errors import TooManyPointsError
from lagrangefe.models import CHUNK_BITS, MASK_BITS, expand_permutations


class TestExpandPermutations(unittest.TestCase):
    def test_no_factors(self):
        self.assertListEqual(expand_permutations([]).tolist(), [1.0])

    def test_single_factor(self):
        # (t - 3)
        self.assertListEqual(expand_permutations([3.0]).tolist(), [1.0, -3.0])

    def test_two_factors(self):
        # (t - 1)(t - 2) = t^2 - 3t + 2
        self.assertListEqual(
            expand_permutations([1.0, 2.0]).tolist(),
            [1.0, -3.0, 2.0],
        )

    def test_matches_numpy_poly(self):
        roots = [0.1, -0.7, 2.5, 1.3, -4.0]
        terms = expand_permutations(roots)

        self.assertEqual(len(roots) + 1, len(terms), "Incorrect number of terms")
        self.assertTrue(
            np.allclose(terms, np.poly(roots)),
            "expansion not consistent with numpy.poly",
        )

    def test_accepts_array(self):
        terms = expand_permutations(np.array([0.0, 2.0]))
        self.assertListEqual(terms.tolist(), [1.0, -2.0, 0.0])

    def test_across_mask_blocks(self):
        roots = np.linspace(-1.0, 1.0, CHUNK_BITS + 2)
        terms = expand_permutations(roots)

        self.assertEqual(CHUNK_BITS + 3, len(terms), "Incorrect number of terms")
        self.assertTrue(
            np.allclose(terms, np.poly(roots), rtol=1e-9, atol=1e-9),
            "expansion over several mask blocks not consistent with numpy.poly",
        )

    def test_too_many_points(self):
        with self.assertRaises(TooManyPointsError):
            expand_permutations(range(MASK_BITS + 1))


if __name__ == "__main__":
    unittest.main()
