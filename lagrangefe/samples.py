import re
from typing import Iterable, Iterator, NamedTuple

import numpy as np
import polars as pl

from lagrangefe.errors import SampleFormatError

# tokens are separated by any run of whitespace, commas or semicolons
DELIMITERS = re.compile(r"[\s,;]+")

SCHEMA = {"x": pl.Float64, "y": pl.Float64}


class Sample(NamedTuple):
    """One observed point, e.g. (lambda, dG/dlambda)."""

    x: float
    y: float


class SampleSet:
    """Ordered (x, y) samples.

    Order is kept exactly as given, nothing is sorted. The data is copied on
    construction and held in a polars DataFrame with columns `x` and `y`.
    """

    def __init__(self, pairs: Iterable[tuple[float, float]] = ()) -> None:
        rows = [(float(x), float(y)) for x, y in pairs]
        self._frame = pl.DataFrame(rows, schema=SCHEMA, orient="row")

    @classmethod
    def from_arrays(cls, x, y) -> "SampleSet":
        """Samples from two equal-length sequences of x and y values."""
        x = np.asarray(x, dtype=float).ravel()
        y = np.asarray(y, dtype=float).ravel()

        if x.shape != y.shape:
            raise ValueError(f"inconsistent sample count: {len(x)} x, {len(y)} y")

        return cls(zip(x.tolist(), y.tolist()))

    @classmethod
    def from_frame(cls, frame: pl.DataFrame, x: str = "x", y: str = "y"):
        """Samples from two columns of a DataFrame."""
        for col in (x, y):
            if col not in frame.columns:
                raise ValueError(f"Missing column: {col}")

        return cls(frame.select(x, y).iter_rows())

    def __len__(self) -> int:
        return len(self._frame)

    def __iter__(self) -> Iterator[Sample]:
        for x, y in self._frame.iter_rows():
            yield Sample(x, y)

    def __getitem__(self, index: int) -> Sample:
        n = len(self._frame)
        if not -n <= index < n:
            raise IndexError(f"sample index {index} out of range for {n} samples")
        x, y = self._frame.row(index % n)
        return Sample(x, y)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SampleSet):
            return NotImplemented
        return self._frame.equals(other._frame)

    def __str__(self) -> str:
        return f"{len(self)} samples\n{self._frame}"

    @property
    def frame(self) -> pl.DataFrame:
        return self._frame.clone()

    @property
    def x(self) -> np.ndarray:
        return self._frame["x"].to_numpy().copy()

    @property
    def y(self) -> np.ndarray:
        return self._frame["y"].to_numpy().copy()

    @property
    def first(self) -> Sample:
        return self[0]

    @property
    def last(self) -> Sample:
        return self[-1]

    def is_empty(self) -> bool:
        return self._frame.is_empty()

    def has_duplicates(self) -> bool:
        return self._frame["x"].n_unique() < len(self._frame)


def parse_samples(lines: Iterable[str]) -> SampleSet:
    """Parse (x, y) pairs from text lines.

    ## parameters
    - lines: text lines, either comments (leading `#`) or two numbers
        separated by whitespace, commas or semicolons. Extra tokens are ignored.

    ## returns
    - samples (SampleSet): in the order they were read.
    """
    pairs = []
    for number, line in enumerate(lines, start=1):
        if line.startswith("#"):
            continue

        tokens = [t for t in DELIMITERS.split(line.strip()) if t]
        if not tokens:
            continue
        if len(tokens) < 2:
            raise SampleFormatError(f"line {number}: expected x and y, got {line!r}")

        try:
            pairs.append((float(tokens[0]), float(tokens[1])))
        except ValueError:
            raise SampleFormatError(f"line {number}: not a number in {line!r}")

    return SampleSet(pairs)


def read_samples(path: str) -> SampleSet:
    """Read a sample file, see `parse_samples` for the format."""
    with open(path, "r") as f:
        return parse_samples(f)
