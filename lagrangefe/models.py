from collections.abc import Iterable, Iterator

import numpy as np
import polars as pl
from tqdm import tqdm

from lagrangefe.errors import (
    DegenerateSampleError,
    EmptySampleError,
    TooManyPointsError,
)
from lagrangefe.samples import SampleSet
import lagrangefe.utility_functions as util

# subsets are enumerated with a bitmask of this width
MASK_BITS = np.iinfo(np.uint32).bits
# masks expanded per block
CHUNK_BITS = 16


class LagrangePolynomial:
    """Lagrange interpolating polynomial.

    Fits the unique polynomial of degree N-1 through N samples, then
    integrates it over the sample domain or evaluates it on [0, 1].
    Intended for thermodynamic integration data, (lambda, dG/dlambda).
    """

    def __init__(
        self,
        samples: SampleSet | pl.DataFrame | Iterable | None = None,
        verbose=False,
    ) -> None:
        self.verbose = verbose
        self._clear()

        if samples is not None:
            self.load(samples)

    def __str__(self) -> str:
        lines = [
            f"Lagrange polynomial (degree: {self.degree})",
            f"{len(self._samples)} samples",
        ]
        return "\n".join(lines)

    def __call__(self, x):
        """Evaluate the fitted polynomial at x (scalar or array)."""
        return evaluate(self._coefficients, x)

    def _clear(self):
        self._samples = SampleSet()
        self._coefficients = np.empty(0)

    def _require_samples(self):
        if self._samples.is_empty():
            raise EmptySampleError("No samples loaded")

    def load(self, samples: SampleSet | pl.DataFrame | Iterable) -> SampleSet:
        """Replace the samples and refit the polynomial.

        Raises on empty, duplicate or oversized sample sets, leaving the
        model empty rather than partially fitted.
        """
        if isinstance(samples, pl.DataFrame):
            samples = SampleSet.from_frame(samples)
        elif not isinstance(samples, SampleSet):
            samples = SampleSet(samples)

        self._clear()

        coefficients = build_coefficients(samples, verbose=self.verbose)
        coefficients.flags.writeable = False

        self._samples = samples
        self._coefficients = coefficients

        return self._samples

    def load_arrays(self, x, y) -> SampleSet:
        return self.load(SampleSet.from_arrays(x, y))

    @property
    def samples(self) -> SampleSet:
        return self._samples

    @property
    def coefficients(self) -> np.ndarray:
        """Coefficients, index i holds the coefficient of x**i."""
        return self._coefficients

    @property
    def degree(self) -> int:
        return len(self._coefficients) - 1

    @property
    def polynomial(self):
        return np.polynomial.Polynomial(self._coefficients)

    def polynomial_coefficients(self, verbose=False) -> np.ndarray:
        if verbose:
            print(util.coefficient_table(self._coefficients))

        return self._coefficients

    def integral(self, verbose=False) -> float:
        """Integrate the polynomial from the first to the last sample.

        Note: bounds follow insertion order, not min/max of x.
        """
        self._require_samples()

        area = integrate_polynomial(
            self._coefficients,
            self._samples.first.x,
            self._samples.last.x,
        )

        if verbose:
            print(f"area under the curve: {area:.{util.Y_DECIMALS}f}")

        return area

    def quadrature(self, verbose=False) -> float:
        """Trapezoidal rule over the raw samples, ignoring the fit."""
        area = trapezoid(self._samples)

        if verbose:
            print(f"area under the curve: {area:.{util.Y_DECIMALS}f}")

        return area

    def estimate(self, steps: int) -> "Estimates":
        """Fitted values at x = 0, 1/steps, ..., 1."""
        self._require_samples()
        return Estimates(self._coefficients, steps)

    def write_estimates(self, path: str, steps: int, verbose=False) -> bool:
        """Write `x, estimate` rows for the unit grid to `path`.

        ## returns
        - ok (bool): False if the file could not be written.
        """
        return util.write_rows(path, self.estimate(steps), verbose=verbose)


class Estimates:
    """Lazy (x, estimate) pairs on the unit grid. Can be iterated repeatedly."""

    def __init__(self, coefficients: Iterable[float], steps: int) -> None:
        self.steps = steps
        self.grid = util.unit_grid(steps)
        self._coefficients = np.array(coefficients, dtype=float)

    def __len__(self) -> int:
        return len(self.grid)

    def __iter__(self) -> Iterator[tuple[float, float]]:
        for x in self.grid.tolist():
            yield x, evaluate(self._coefficients, x)

    def to_frame(self) -> pl.DataFrame:
        return pl.DataFrame(
            {
                "x": self.grid,
                "estimate": evaluate(self._coefficients, self.grid),
            }
        )


def expand_permutations(xs: Iterable[float]) -> np.ndarray:
    """Expand the product of linear factors (t - x_0)(t - x_1)...(t - x_{n-1}).

    Every subset of the factors' constant terms is enumerated with a bitmask.
    A subset picking k of the -x_j terms contributes their product to slot k.
    Masks are processed in blocks of 2**CHUNK_BITS.

    ## parameters
    - xs: the n roots x_j

    ## returns
    - terms (ndarray): length n + 1. terms[k] is the coefficient of t**(n - k),
        so terms[0] == 1 and terms[n] == prod(-x_j). Highest power first.

    Note: products of up to n values are accumulated in float64 without any
    rescaling; many, large or clustered x can overflow or lose precision.
    The enumeration costs 2**n products, so runtime limits n well below
    MASK_BITS: each extra root doubles the work.
    """
    negated = -np.array(list(xs), dtype=float)
    n = len(negated)

    if n > MASK_BITS:
        raise TooManyPointsError(f"Too many points: {n} > {MASK_BITS}")

    shifts = np.arange(n, dtype=np.uint64)
    n_masks = 1 << n
    chunk = 1 << CHUNK_BITS

    terms = np.zeros(n + 1)
    for start in range(0, n_masks, chunk):
        masks = np.arange(start, min(start + chunk, n_masks), dtype=np.uint64)
        bits = ((masks[:, None] >> shifts) & np.uint64(1)).astype(bool)

        units = np.where(bits, negated, 1.0).prod(axis=1)
        terms += np.bincount(bits.sum(axis=1), weights=units, minlength=n + 1)

    return terms


def build_coefficients(samples: SampleSet, verbose=False) -> np.ndarray:
    """Coefficients of the Lagrange polynomial through `samples`.

    For each sample i the basis numerator prod_{j!=i}(t - x_j) is expanded and
    added with weight y_i / prod_{j!=i}(x_i - x_j).

    ## returns
    - coefficients (ndarray): length N, lowest power first.
    """
    n = len(samples)
    if n == 0:
        raise EmptySampleError("No samples to interpolate")
    if n - 1 > MASK_BITS:
        raise TooManyPointsError(f"Too many points: {n} > {MASK_BITS + 1}")

    xs = samples.x
    ys = samples.y

    if verbose:
        print(f"{n} samples -> degree {n - 1} polynomial")

    # accumulated highest power first
    factor = np.zeros(n)

    indices = range(n)
    if verbose:
        indices = tqdm(indices)

    for i in indices:
        others = np.concatenate((xs[:i], xs[i + 1 :]))

        # non-finite results are reported below as DegenerateSampleError
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            denominator = np.prod(xs[i] - others)

            if denominator == 0.0:
                raise DegenerateSampleError(
                    f"Basis denominator is zero for sample {i} (x = {xs[i]}), "
                    "x values must be distinct"
                )

            constant = ys[i] / denominator
            factor += constant * expand_permutations(others)

    coefficients = factor[::-1].copy()

    if not np.isfinite(coefficients).all():
        raise DegenerateSampleError(f"Non-finite coefficients: {coefficients}")

    if verbose:
        print(f"coefficients: {coefficients}")

    return coefficients


def integrate_polynomial(
    coefficients: Iterable[float],
    lower: float,
    upper: float,
) -> float:
    """Definite integral of sum(c_i * x**i) from lower to upper."""
    area = 0.0
    for i, c in enumerate(coefficients):
        power = i + 1
        area += c * (upper**power - lower**power) / power

    return float(area)


def trapezoid(samples: SampleSet) -> float:
    """Trapezoidal rule over consecutive samples, in insertion order.

    A single sample has zero area.
    """
    if samples.is_empty():
        raise EmptySampleError("No samples to integrate")

    area = 0.0
    points = list(samples)
    for a, b in zip(points, points[1:]):
        area += 0.5 * (b.y + a.y) * (b.x - a.x)

    return area


def evaluate(coefficients: Iterable[float], x):
    """Power series sum(c_i * x**i) at x (scalar or array)."""
    x_arr = np.asarray(x, dtype=float)

    total = np.zeros_like(x_arr)
    for i, c in enumerate(coefficients):
        total = total + c * x_arr**i

    if total.ndim == 0:
        return float(total)
    return total
