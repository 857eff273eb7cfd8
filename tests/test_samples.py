import os
import tempfile
import unittest

import numpy as np
import polars as pl

from lagrangefe.errors import LagrangeError, SampleFormatError
from lagrangefe.samples import Sample, SampleSet, parse_samples, read_samples

LINES = [
    "# lambda  dG/dl\n",
    "0.0 51.49866347\n",
    "\n",
    "0.1,23.92508775\n",
    "0.2; 10.35390700\n",
    "0.3\t2.58426990  extra\n",
]


class TestParseSamples(unittest.TestCase):
    def test_delimiters_and_comments(self):
        samples = parse_samples(LINES)

        self.assertEqual(4, len(samples))
        self.assertListEqual(samples.x.tolist(), [0.0, 0.1, 0.2, 0.3])
        self.assertListEqual(
            samples.y.tolist(),
            [51.49866347, 23.92508775, 10.35390700, 2.58426990],
        )

    def test_missing_value(self):
        with self.assertRaises(SampleFormatError):
            parse_samples(["0.0 1.0", "0.4"])

    def test_not_a_number(self):
        with self.assertRaises(SampleFormatError) as ctx:
            parse_samples(["0.0 1.0", "lambda dgdl"])
        self.assertIn("line 2", str(ctx.exception))

    def test_format_error_is_value_error(self):
        self.assertTrue(issubclass(SampleFormatError, LagrangeError))
        self.assertTrue(issubclass(SampleFormatError, ValueError))

    def test_read_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "ti.dat")
            with open(path, "w") as f:
                f.writelines(LINES)

            self.assertEqual(parse_samples(LINES), read_samples(path))

    def test_read_missing_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OSError):
                read_samples(os.path.join(tmp, "missing.dat"))


class TestSampleSet(unittest.TestCase):
    def setUp(self) -> None:
        self.samples = SampleSet([(2, 5), (0, 1), (1, 2)])

    def test_keeps_order(self):
        self.assertListEqual(
            list(self.samples),
            [Sample(2.0, 5.0), Sample(0.0, 1.0), Sample(1.0, 2.0)],
        )
        self.assertEqual(Sample(2.0, 5.0), self.samples.first)
        self.assertEqual(Sample(1.0, 2.0), self.samples.last)
        self.assertEqual(Sample(0.0, 1.0), self.samples[-2])

    def test_index_out_of_range(self):
        with self.assertRaises(IndexError):
            self.samples[3]

    def test_from_arrays(self):
        samples = SampleSet.from_arrays(np.array([2, 0, 1]), [5, 1, 2])
        self.assertEqual(self.samples, samples)

    def test_from_arrays_mismatch(self):
        with self.assertRaises(ValueError):
            SampleSet.from_arrays([0, 1, 2], [1, 2])

    def test_from_frame(self):
        df = pl.DataFrame({"lambda": [2.0, 0.0, 1.0], "dgdl": [5.0, 1.0, 2.0]})
        self.assertEqual(self.samples, SampleSet.from_frame(df, "lambda", "dgdl"))

        with self.assertRaises(ValueError):
            SampleSet.from_frame(df)

    def test_copies_are_independent(self):
        x = self.samples.x
        x[0] = 100.0
        self.assertEqual(2.0, self.samples.first.x)

    def test_duplicates(self):
        self.assertFalse(self.samples.has_duplicates())
        self.assertTrue(SampleSet([(0, 1), (0, 2)]).has_duplicates())

    def test_empty(self):
        samples = SampleSet()
        self.assertTrue(samples.is_empty())
        self.assertEqual(0, len(samples))
        self.assertDictEqual({"x": pl.Float64, "y": pl.Float64}, dict(samples.frame.schema))


if __name__ == "__main__":
    unittest.main()
